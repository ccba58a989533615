# config.py

import os
from enum import Enum
from dataclasses import dataclass
from typing import Mapping, Optional


class ColorChoice(Enum):
    """When escape sequences are written to the standard streams."""
    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    @classmethod
    def parse(cls, raw_value: Optional[str]) -> "ColorChoice":
        """Map a user-supplied string to a choice, falling back to AUTO."""
        normalized = (raw_value or "").strip().lower()
        for choice in cls:
            if choice.value == normalized:
                return choice
        return cls.AUTO


def _is_truthy_flag(raw_value: Optional[str]) -> bool:
    """Return True when an environment-style flag requests enabling behavior."""
    normalized = (raw_value or "").strip().lower()
    return bool(normalized) and normalized not in {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings read from the environment.

    TAGLINE_COLOR selects the color choice for the print entry points,
    TAGLINE_LOG enables debug logging and TAGLINE_LOG_FILE names the log
    file (stderr when unset or "-").
    """
    color: ColorChoice = ColorChoice.AUTO
    logging_enabled: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            color=ColorChoice.parse(env.get("TAGLINE_COLOR")),
            logging_enabled=_is_truthy_flag(env.get("TAGLINE_LOG")),
            log_file=env.get("TAGLINE_LOG_FILE") or None,
        )
