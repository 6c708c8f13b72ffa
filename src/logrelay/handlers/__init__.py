"""
Built-in handlers.

Each backend comes with a probe function returning a ready handler, or
``None`` when the backend is unavailable on this host:

- structlog: third-party structured logging
- syslog: the host's system log (POSIX only)
- console: aligned columns or JSON on stderr, always available
- stdlib: the standard ``logging`` module, always available
- gcloud: Google Cloud Logging (needs ``google-cloud-logging`` and credentials)
"""

from .base import BaseHandler, LogRequest
from .console import ConsoleHandler, console_handler
from .gcloud import GCloudHandler, gcloud_handler
from .stdlib import StdlibHandler, stdlib_handler
from .structured import StructlogHandler, structlog_handler
from .syslog import SyslogHandler, syslog_handler

__all__ = [
    "BaseHandler",
    "LogRequest",
    "ConsoleHandler",
    "GCloudHandler",
    "StdlibHandler",
    "StructlogHandler",
    "SyslogHandler",
    "console_handler",
    "gcloud_handler",
    "stdlib_handler",
    "structlog_handler",
    "syslog_handler",
]
