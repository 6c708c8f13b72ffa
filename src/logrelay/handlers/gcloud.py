"""
Google Cloud Logging handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..config import RelaySettings, get_settings
from ..diagnostics import get_logger
from ..levels import LogLevel
from .base import BaseHandler, LogRequest

if TYPE_CHECKING:
    from google.cloud.logging import Client as GCloudLoggingClient

logger = get_logger("logrelay.handlers.gcloud")

_SEVERITIES = {
    LogLevel.VERBOSE: "DEBUG",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
}


class GCloudHandler(BaseHandler):
    """Writes each request as a structured entry via ``log_struct``.

    Handlers have no teardown hook: whoever installs the handler owns
    ``client`` and closes it once the handler has been replaced.
    """

    name = "gcloud"

    def __init__(self, client: "GCloudLoggingClient", log_name: str = "logrelay") -> None:
        self._client = client
        self._logger: Any = client.logger(log_name)

    @property
    def client(self) -> "GCloudLoggingClient":
        return self._client

    def emit(self, request: LogRequest) -> None:
        payload = {"message": request.text}
        payload.update(request.to_fields())
        self._logger.log_struct(payload, severity=_SEVERITIES[request.level])


def gcloud_handler(settings: RelaySettings | None = None) -> GCloudHandler | None:
    """Return a Cloud Logging handler, or ``None`` when no client can be built."""
    try:
        from google.cloud import logging as gcloud_logging
    except ImportError:
        return None

    settings = settings or get_settings()
    try:
        client = gcloud_logging.Client(project=settings.gcloud_project)
    except Exception as exc:
        # Missing credentials or project: treat like an absent backend
        logger.debug("gcloud_client_unavailable", error=str(exc))
        return None
    return GCloudHandler(client, log_name=settings.gcloud_log_name)
