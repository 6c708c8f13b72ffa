"""
Handler registry: the single slot deciding where log messages go.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from .levels import LogLevel
from .location import Location

MessageProducer = Callable[[], str]

# (message, level, subsystem, category, location) -> None
Handler = Callable[[MessageProducer, LogLevel, Optional[str], Optional[str], Location], None]


class HandlerRegistry:
    """Holds at most one active handler and swaps it atomically.

    Installing a handler replaces the previous one; handlers never compose.
    A fresh registry is empty. Reads and swaps share one lock so that
    concurrent swaps serialize and each caller sees a well-defined previous
    value.
    """

    def __init__(self, handler: Handler | None = None) -> None:
        self._lock = threading.Lock()
        self._handler = handler

    def set_handler(self, handler: Handler | None) -> Handler | None:
        """Install ``handler`` (or ``None``) and return the one it replaced."""
        with self._lock:
            previous = self._handler
            self._handler = handler
        return previous

    def current_handler(self) -> Handler | None:
        with self._lock:
            return self._handler
