"""
structlog handler: forwards requests to structlog with structured fields.
"""

from __future__ import annotations

from types import ModuleType
from typing import Any

from ..config import RelaySettings, get_settings
from ..levels import LogLevel
from .base import BaseHandler, LogRequest

# structlog has no level below debug
_METHODS = {
    LogLevel.VERBOSE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: "error",
}


def _is_enabled(logger: Any, level: int) -> bool:
    check = getattr(logger, "is_enabled_for", None) or getattr(logger, "isEnabledFor", None)
    if check is None:
        return True
    return bool(check(level))


class StructlogHandler(BaseHandler):
    """Sends each request to ``structlog.get_logger(subsystem)``.

    The level check runs before the message producer, so levels filtered by
    the structlog configuration cost nothing.
    """

    name = "structlog"

    def __init__(self, structlog: ModuleType, default_logger_name: str = "logrelay") -> None:
        self._structlog = structlog
        self._default_logger_name = default_logger_name

    def _logger(self, request: LogRequest) -> Any:
        return self._structlog.get_logger(request.subsystem or self._default_logger_name)

    def enabled_for(self, request: LogRequest) -> bool:
        return _is_enabled(self._logger(request), request.level.to_logging())

    def emit(self, request: LogRequest) -> None:
        logger = self._logger(request)
        fields = request.to_fields()
        fields.pop("level")
        if request.level is LogLevel.VERBOSE:
            fields["verbose"] = True
        getattr(logger, _METHODS[request.level])(request.text, **fields)


def structlog_handler(settings: RelaySettings | None = None) -> StructlogHandler | None:
    """Return a structlog handler, or ``None`` if structlog is not installed."""
    try:
        import structlog
    except ImportError:
        return None
    settings = settings or get_settings()
    return StructlogHandler(structlog, default_logger_name=settings.stdlib_logger_name)
