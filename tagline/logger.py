# logger.py

import sys, logging
from typing import Optional
from functools import partial

from .config import Settings

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            if log_file in (None, "-"):
                logging.basicConfig(level=logging.DEBUG, format=log_format, stream=sys.stderr)
            else:
                logging.basicConfig(level=logging.DEBUG, format=log_format, filename=log_file)
        elif not any(isinstance(h, logging.NullHandler) for h in self._logger.handlers):
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)


def get_logger(name: str, settings: Optional[Settings] = None) -> Logger:
    """Build a Logger configured from the environment settings."""
    settings = settings or Settings.from_env()
    return Logger(name, settings.logging_enabled, settings.log_file)
