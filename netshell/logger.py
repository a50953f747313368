"""A small levelled, coloured logger."""

import enum
import sys

from netshell.strings import CYAN, MAGENTA, RED, RESET, YELLOW


class LogLevel(enum.IntEnum):
    """Log levels, from least to most verbose."""

    ERROR = 0
    WARNING = 1
    DEBUG = 2
    INFO = 3


_COLOURS = {
    LogLevel.INFO: CYAN,
    LogLevel.DEBUG: YELLOW,
    LogLevel.ERROR: RED,
    LogLevel.WARNING: MAGENTA,
}


class Logger:
    """Write coloured messages tagged with a context to stdout or stderr."""

    def __init__(self, context, level=LogLevel.INFO, enabled=True):
        self.context = context
        self.level = LogLevel(level)
        self.enabled = enabled

    def log(self, level, message, context=""):
        """Write ``message`` if the logger is enabled and ``level`` is allowed."""
        level = LogLevel(level)
        if not self.enabled or level > self.level:
            return
        stream = sys.stdout if level is LogLevel.INFO else sys.stderr
        tag = context or self.context
        stream.write(f"{_COLOURS[level]}[{tag}] {message}{RESET}\n")
        stream.flush()