"""
Dispatcher: the entry point every log call funnels through.
"""

from __future__ import annotations

from .levels import LogLevel
from .location import Location, caller_location
from .registry import HandlerRegistry, MessageProducer


class Dispatcher:
    """Routes log requests to whatever handler the registry currently holds.

    Nothing happens when the registry is empty: the message producer is not
    called and the call site is not inspected. Otherwise the handler runs
    synchronously on the calling thread. Handler exceptions propagate.
    """

    def __init__(self, registry: HandlerRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    def log(
        self,
        message: MessageProducer,
        level: LogLevel,
        subsystem: str | None = None,
        category: str | None = None,
        location: Location | None = None,
    ) -> None:
        handler = self._registry.current_handler()
        if handler is None:
            return
        if location is None:
            location = caller_location()
        handler(message, level, subsystem, category, location)
