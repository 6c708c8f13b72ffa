"""
Log levels.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from .errors import UnknownLevelError

# stdlib has no level below DEBUG; 5 is the conventional TRACE slot.
VERBOSE_LOGGING_LEVEL = 5


class LogLevel(IntEnum):
    """Ordered log levels: VERBOSE < DEBUG < INFO < WARNING < ERROR.

    The dispatcher applies no filtering; the ordering is for handlers.
    """

    VERBOSE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Info"``."""
        return self.name.capitalize()

    def to_logging(self) -> int:
        """Equivalent stdlib ``logging`` level."""
        return _LOGGING_LEVELS[self]

    @classmethod
    def parse(cls, name: str | LogLevel) -> LogLevel:
        """Parse a case-insensitive level name (``"warn"`` is accepted)."""
        if isinstance(name, LogLevel):
            return name
        key = str(name).strip().upper()
        if key == "WARN":
            key = "WARNING"
        try:
            return cls[key]
        except KeyError:
            raise UnknownLevelError(name=str(name)) from None


_LOGGING_LEVELS = {
    LogLevel.VERBOSE: VERBOSE_LOGGING_LEVEL,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}
