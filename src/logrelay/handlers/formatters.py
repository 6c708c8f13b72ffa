"""
Console formatters and color utilities.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import orjson

from ..levels import LogLevel
from .base import LogRequest

# =============================================================================
# Console Formatter (Aligned Columns)
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "timestamp": "\033[90m",
    "origin": "\033[35m",
}

LEVEL_COLORS = {
    LogLevel.VERBOSE: "\033[90m",
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARNING: "\033[33m",
    LogLevel.ERROR: "\033[31m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


class ConsoleFormatter:
    """Renders requests as fixed-width, right-aligned columns:

    ``timestamp | level | subsystem:category | message (file:line)``
    """

    def __init__(
        self,
        *,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
        level_width: int = 7,
        origin_width: int = 32,
        separator: str = " | ",
    ) -> None:
        self.timestamp_format = timestamp_format
        self.level_width = level_width
        self.origin_width = origin_width
        self.separator = separator

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if width <= 0:
            return text
        if len(text) > width:
            if width <= 3:
                text = text[-width:]
            else:
                text = "..." + text[-(width - 3) :]
        return f"{text:>{width}}"

    @staticmethod
    def _maybe_color(text: str, color: str, use_color: bool) -> str:
        if not use_color:
            return text
        return colorize(text, color)

    def format(self, request: LogRequest, *, now: datetime | None = None, use_color: bool = False) -> str:
        now = now or datetime.now()
        timestamp = now.strftime(self.timestamp_format)

        level_text = self._fit_right(request.level.name, self.level_width)
        if use_color:
            level_text = f"{LEVEL_COLORS[request.level]}{level_text}{COLORS['reset']}"

        location = request.location
        message_text = request.text
        if location.line:
            suffix = f"({location.file.rsplit('/', 1)[-1]}:{location.line})"
            message_text = f"{message_text} {self._maybe_color(suffix, 'dim', use_color)}"

        return self.separator.join(
            [
                self._maybe_color(timestamp, "timestamp", use_color),
                level_text,
                self._maybe_color(self._fit_right(request.origin, self.origin_width), "origin", use_color),
                message_text,
            ]
        )


class JsonFormatter:
    """Renders requests as one JSON object per line."""

    def format(self, request: LogRequest, *, now: datetime | None = None, use_color: bool = False) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {"timestamp": now, "message": request.text}
        payload.update(request.to_fields())
        return orjson_dumps(payload)
