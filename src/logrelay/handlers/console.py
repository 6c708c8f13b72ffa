"""
Console handler. Always available.

Logs every level unconditionally, which makes it handy during development and
too chatty for high-volume production use.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, TextIO

from ..config import ConsoleFormat, RelaySettings, get_settings
from .base import BaseHandler, LogRequest
from .formatters import ConsoleFormatter, JsonFormatter


class ConsoleHandler(BaseHandler):
    """Writes one line per request to a text stream.

    Args:
        fmt: "console" (aligned, colored on a TTY) or "json"
        stream: Output stream (default: stderr)
    """

    name = "console"

    def __init__(
        self,
        fmt: ConsoleFormat | str = ConsoleFormat.CONSOLE,
        stream: TextIO | None = None,
        formatter: Any = None,
    ) -> None:
        self._fmt = ConsoleFormat(fmt)
        self._stream = stream
        if formatter is None:
            formatter = JsonFormatter() if self._fmt is ConsoleFormat.JSON else ConsoleFormatter()
        self._formatter = formatter
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        # Looked up per write: sys.stderr may be replaced after construction
        return self._stream if self._stream is not None else sys.stderr

    def emit(self, request: LogRequest) -> None:
        stream = self.stream
        use_color = self._fmt is ConsoleFormat.CONSOLE and bool(getattr(stream, "isatty", lambda: False)())
        output = self._formatter.format(request, use_color=use_color)
        with self._lock:
            stream.write(output + "\n")
            stream.flush()


def console_handler(settings: RelaySettings | None = None) -> ConsoleHandler:
    """Build the console handler from settings."""
    settings = settings or get_settings()
    stream = sys.stdout if settings.console_stream == "stdout" else None
    formatter = None
    if settings.console_format is ConsoleFormat.CONSOLE:
        formatter = ConsoleFormatter(
            timestamp_format=settings.console_timestamp_format,
            level_width=settings.console_level_width,
            origin_width=settings.console_origin_width,
            separator=settings.console_separator,
        )
    return ConsoleHandler(fmt=settings.console_format, stream=stream, formatter=formatter)
