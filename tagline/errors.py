# errors.py

from enum import Enum
from typing import Optional


class TaglineError(Exception):
    """Base exception for all tagline errors."""

    pass


class ParseErrorKind(Enum):
    """What went wrong while scanning a template."""
    UNTERMINATED_STYLE_TAG = "unterminated style tag"
    UNMATCHED_CLOSE_TAG = "unmatched closing style tag"
    MALFORMED_SLOT = "malformed argument slot"
    UNKNOWN_STYLE_TOKEN = "unknown style token"
    EMPTY_STYLE = "empty style list"
    DUPLICATE_ATTRIBUTE = "style attribute set twice"
    UNTERMINATED_BRACE = "unterminated brace"
    UNMATCHED_BRACE = "unmatched closing brace"


class ParseError(TaglineError):
    """
    Raised when a template cannot be parsed.

    Parsing is fail-fast: the first problem found is reported and no
    template is produced.
    """

    def __init__(self, kind: ParseErrorKind, detail: str, position: int):
        self.kind = kind
        self.detail = detail
        self.position = position
        super().__init__(f"{kind.value} at offset {position}: {detail}")


class RenderError(TaglineError):
    """Raised when a parsed template cannot be rendered with the given arguments."""

    pass


class MissingArgumentError(RenderError):
    """Raised when a slot refers to an argument that was not supplied."""

    def __init__(self, reference: str, detail: Optional[str] = None):
        self.reference = reference
        message = f"missing argument for {reference}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnusedArgumentError(RenderError):
    """Raised in strict mode when a supplied argument is never referenced."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"argument {reference} is never used")


class FormatError(RenderError):
    """Raised when a value cannot be formatted with the requested format spec."""

    def __init__(self, value, spec: str, reason: str):
        self.value = value
        self.spec = spec
        super().__init__(f"cannot format {type(value).__name__} with spec {spec!r}: {reason}")
