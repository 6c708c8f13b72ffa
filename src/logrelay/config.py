"""
logrelay Configuration.

All values load from environment variables prefixed with ``LOGRELAY_`` (or a
local ``.env`` file), e.g. ``LOGRELAY_DEFAULT_HANDLERS=console``.
"""

from enum import Enum
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsoleFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class RelaySettings(BaseSettings):
    """Settings for default handler selection and the built-in handlers."""

    model_config = SettingsConfigDict(
        env_prefix="LOGRELAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    default_handlers: str = Field(
        default="structlog,syslog",
        description="Comma-separated probe order used when no handler was installed explicitly",
    )

    console_format: ConsoleFormat = Field(default=ConsoleFormat.CONSOLE, description="Console output format")
    console_stream: Literal["stderr", "stdout"] = Field(default="stderr", description="Console output stream")
    console_timestamp_format: str = Field(default="%Y-%m-%d %H:%M:%S", description="Console timestamp format")
    console_level_width: int = Field(default=7, description="Console level column width")
    console_origin_width: int = Field(default=32, description="Console subsystem:category column width")
    console_separator: str = Field(default=" | ", description="Console column separator")

    syslog_ident: Optional[str] = Field(default=None, description="Ident passed to openlog()")
    syslog_facility: str = Field(default="user", description="Syslog facility name, e.g. user, local0")

    stdlib_logger_name: str = Field(default="logrelay", description="Logger used for requests without subsystem")

    gcloud_project: Optional[str] = Field(default=None, description="GCP project ID for the gcloud handler")
    gcloud_log_name: str = Field(default="logrelay", description="Log name for the gcloud handler")

    @property
    def default_handler_names(self) -> list[str]:
        return [name.strip().lower() for name in self.default_handlers.split(",") if name.strip()]


@lru_cache(maxsize=1)
def get_settings() -> RelaySettings:
    """Process-wide settings, loaded once."""
    return RelaySettings()
