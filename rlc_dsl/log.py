"""
Logging and verbosity for the robot-language compiler.

Modules log through `get_logger(__name__)`, which places them under the
"rlc" logger. The command line picks a verbosity:

    0  silent, nothing is logged
    1  stage messages at the level named by RLC_LOG (default "info")
    2  as 1, and the built model is printed
    3  as 2, and the imported skillset model is printed first
"""

import logging
import os
import sys

_LOGGER_NAME = "rlc"
_LEVEL_ENV = "RLC_LOG"
_DEFAULT_LEVEL = "info"

SILENT = 0
SHOW_MODEL = 2
SHOW_IMPORTED = 3
MAX_VERBOSITY = SHOW_IMPORTED

SEPARATOR = "-" * 50


def get_logger(name: str = None) -> logging.Logger:
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    # "rlc_dsl.resolution.type_resolver" -> "rlc.type_resolver"
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def level_from_env(environ=None) -> int:
    """Map RLC_LOG ("debug", "info", "warning", ...) to a logging level."""
    environ = os.environ if environ is None else environ
    name = environ.get(_LEVEL_ENV) or _DEFAULT_LEVEL
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"{_LEVEL_ENV}={name!r} is not a logging level")
    return level


def configure_logging(verbosity: int = 1, environ=None) -> int:
    """Set up the "rlc" logger for `verbosity` and return the effective level."""
    if verbosity <= SILENT:
        level = logging.CRITICAL + 1
    else:
        level = level_from_env(environ)

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.propagate = False

    handler = next((h for h in root_logger.handlers if isinstance(h, _RlcHandler)), None)
    if handler is None:
        handler = _RlcHandler()
        handler.setFormatter(_MessageFormatter())
        root_logger.addHandler(handler)
    handler.setLevel(level)

    return level


class _RlcHandler(logging.StreamHandler):
    """Writes to whatever `sys.stderr` is when a record is emitted."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


class _MessageFormatter(logging.Formatter):
    """Stage tags are part of the message; warnings and errors get a prefix."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f"{record.levelname.lower()}: {message}"
        return message
