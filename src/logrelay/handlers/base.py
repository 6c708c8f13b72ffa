"""
Handler abstraction shared by the built-in adapters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ..levels import LogLevel
from ..location import Location
from ..registry import MessageProducer

_UNSET: Any = object()


@dataclass
class LogRequest:
    """One log call as seen by a handler. Lives for a single invocation."""

    message: MessageProducer
    level: LogLevel
    subsystem: str | None
    category: str | None
    location: Location
    _text: Any = field(default=_UNSET, init=False, repr=False, compare=False)

    @property
    def text(self) -> str:
        """The message text. The producer runs on first access only."""
        if self._text is _UNSET:
            self._text = str(self.message())
        return self._text

    @property
    def origin(self) -> str:
        """``subsystem:category`` with missing parts left out."""
        return ":".join(part for part in (self.subsystem, self.category) if part)

    def to_fields(self) -> dict[str, Any]:
        """Structured fields, without the message text."""
        fields: dict[str, Any] = {
            "level": self.level.name.lower(),
            "file": self.location.file,
            "function": self.location.function,
            "line": self.location.line,
        }
        if self.subsystem is not None:
            fields["subsystem"] = self.subsystem
        if self.category is not None:
            fields["category"] = self.category
        return fields


class BaseHandler(ABC):
    """Callable handler that turns each invocation into a :class:`LogRequest`.

    Subclasses implement :meth:`emit` and may override :meth:`enabled_for`
    to skip message construction for levels their backend would drop.
    """

    name: str = "base"

    def __call__(
        self,
        message: MessageProducer,
        level: LogLevel,
        subsystem: str | None,
        category: str | None,
        location: Location,
    ) -> None:
        request = LogRequest(message, level, subsystem, category, location)
        if not self.enabled_for(request):
            return
        self.emit(request)

    def enabled_for(self, request: LogRequest) -> bool:
        return True

    @abstractmethod
    def emit(self, request: LogRequest) -> None:
        """Forward the request to the backend."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
