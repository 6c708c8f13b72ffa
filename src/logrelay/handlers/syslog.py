"""
Syslog handler: forwards requests to the host's system log.

Only available on POSIX hosts where the stdlib ``syslog`` module exists.
"""

from __future__ import annotations

from types import ModuleType

from ..config import RelaySettings, get_settings
from ..errors import ConfigurationError
from ..levels import LogLevel
from .base import BaseHandler, LogRequest

_PRIORITIES = {
    LogLevel.VERBOSE: "LOG_DEBUG",
    LogLevel.DEBUG: "LOG_DEBUG",
    LogLevel.INFO: "LOG_INFO",
    LogLevel.WARNING: "LOG_WARNING",
    LogLevel.ERROR: "LOG_ERR",
}


class SyslogHandler(BaseHandler):
    """Writes ``[subsystem:category] message`` lines through ``syslog.syslog``."""

    name = "syslog"

    def __init__(self, syslog: ModuleType, ident: str | None = None, facility: str = "user") -> None:
        self._syslog = syslog
        facility_attr = f"LOG_{facility.strip().upper()}"
        if not hasattr(syslog, facility_attr):
            raise ConfigurationError(
                f"Unknown syslog facility '{facility}'",
                code="UNKNOWN_FACILITY",
                details={"facility": facility},
            )
        self._facility = getattr(syslog, facility_attr)
        if ident:
            syslog.openlog(ident=ident, logoption=syslog.LOG_PID, facility=self._facility)

    def format(self, request: LogRequest) -> str:
        origin = request.origin
        if origin:
            return f"[{origin}] {request.text}"
        return request.text

    def emit(self, request: LogRequest) -> None:
        priority = getattr(self._syslog, _PRIORITIES[request.level])
        self._syslog.syslog(self._facility | priority, self.format(request))


def syslog_handler(settings: RelaySettings | None = None) -> SyslogHandler | None:
    """Return a syslog handler, or ``None`` on hosts without syslog."""
    try:
        import syslog
    except ImportError:
        return None
    settings = settings or get_settings()
    return SyslogHandler(syslog, ident=settings.syslog_ident, facility=settings.syslog_facility)
