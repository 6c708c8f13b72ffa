"""
Exception hierarchy for logrelay.

The dispatch path never raises. These exceptions only surface at the
configuration edges (settings parsing, handler name resolution).
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LogRelayError(Exception):
    """Root of all logrelay exceptions."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConfigurationError(LogRelayError):
    """A configuration value could not be interpreted."""

    pass


class UnknownHandlerError(ConfigurationError):
    """Raised when a configured handler name matches no built-in probe."""

    def __init__(self, *, name: str, known: Optional[list[str]] = None) -> None:
        known = sorted(known or [])
        message = f"Unknown log handler '{name}'"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message, code="UNKNOWN_HANDLER", details={"name": name, "known": known})


class UnknownLevelError(ConfigurationError):
    """Raised when a level name cannot be parsed."""

    def __init__(self, *, name: str) -> None:
        super().__init__(f"Unknown log level '{name}'", code="UNKNOWN_LEVEL", details={"name": name})
