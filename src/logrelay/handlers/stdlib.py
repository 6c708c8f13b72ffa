"""
stdlib handler: forwards requests to the standard ``logging`` module.
"""

from __future__ import annotations

import logging

from ..config import RelaySettings, get_settings
from ..levels import VERBOSE_LOGGING_LEVEL
from .base import BaseHandler, LogRequest

if logging.getLevelName(VERBOSE_LOGGING_LEVEL).startswith("Level "):
    logging.addLevelName(VERBOSE_LOGGING_LEVEL, "VERBOSE")


class StdlibHandler(BaseHandler):
    """Routes each request to ``logging.getLogger(subsystem)``.

    Records carry the caller's file, function and line instead of this
    module's, plus ``subsystem`` and ``category`` attributes for formatters.
    """

    name = "stdlib"

    def __init__(self, default_logger_name: str = "logrelay") -> None:
        self._default_logger_name = default_logger_name

    def _logger(self, request: LogRequest) -> logging.Logger:
        return logging.getLogger(request.subsystem or self._default_logger_name)

    def enabled_for(self, request: LogRequest) -> bool:
        return self._logger(request).isEnabledFor(request.level.to_logging())

    def emit(self, request: LogRequest) -> None:
        logger = self._logger(request)
        location = request.location
        record = logger.makeRecord(
            logger.name,
            request.level.to_logging(),
            location.file,
            location.line,
            request.text,
            None,
            None,
            func=location.function,
            extra={"subsystem": request.subsystem, "category": request.category},
        )
        logger.handle(record)


def stdlib_handler(settings: RelaySettings | None = None) -> StdlibHandler:
    settings = settings or get_settings()
    return StdlibHandler(default_logger_name=settings.stdlib_logger_name)
