"""
logrelay: pluggable logging indirection.

Libraries and applications log through a single process-wide handler without
binding to a specific backend:

    import logrelay

    logrelay.info("com.myapp", "Weather", "The temperature is %s", temperature)

The handler is any callable ``(message, level, subsystem, category, location)``
where ``message`` is a zero-argument callable producing the text. Replace it
with ``set_handler`` (pass ``None`` to disable logging). If no handler was
installed explicitly, the first log call selects a default one: structlog if
available, then syslog, otherwise nothing.

Built-in handlers live in ``logrelay.handlers``.
"""

from .core import (
    SubsystemLogger,
    configure,
    current_handler,
    debug,
    default_registry,
    error,
    get_logger,
    handler_override,
    info,
    log,
    reset,
    set_handler,
    verbose,
    warning,
)
from .dispatcher import Dispatcher
from .errors import ConfigurationError, LogRelayError, UnknownHandlerError, UnknownLevelError
from .handlers import console_handler, gcloud_handler, stdlib_handler, structlog_handler, syslog_handler
from .levels import LogLevel
from .location import Location
from .registry import Handler, HandlerRegistry, MessageProducer

__version__ = "1.0.0"


def marketing_version() -> str:
    """Official version number."""
    return __version__


__all__ = [
    "ConfigurationError",
    "Dispatcher",
    "Handler",
    "HandlerRegistry",
    "Location",
    "LogLevel",
    "LogRelayError",
    "MessageProducer",
    "SubsystemLogger",
    "UnknownHandlerError",
    "UnknownLevelError",
    "configure",
    "console_handler",
    "current_handler",
    "debug",
    "default_registry",
    "error",
    "gcloud_handler",
    "get_logger",
    "handler_override",
    "info",
    "log",
    "marketing_version",
    "reset",
    "set_handler",
    "stdlib_handler",
    "structlog_handler",
    "syslog_handler",
    "verbose",
    "warning",
]
