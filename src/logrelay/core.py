"""
Process-wide logging facade.

Owns the default registry/dispatcher pair and exposes the module-level API
used by applications and libraries.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterator

from .bootstrap import install_default_handler
from .config import RelaySettings
from .diagnostics import get_logger as get_diagnostics_logger
from .dispatcher import Dispatcher
from .errors import LogRelayError
from .levels import LogLevel
from .location import Location
from .registry import Handler, HandlerRegistry, MessageProducer

# =============================================================================
# Global State
# =============================================================================

_registry = HandlerRegistry()
_dispatcher = Dispatcher(_registry)
_selection_lock = threading.RLock()
_selection_pending = True
_selection_running = False
_settings: RelaySettings | None = None

logger = get_diagnostics_logger("logrelay.core")


def default_registry() -> HandlerRegistry:
    return _registry


def configure(settings: RelaySettings | None = None, *, install: bool = True) -> Handler | None:
    """Run default handler selection now, using ``settings``.

    With ``install=False`` only the settings are remembered for the lazy
    selection on first use.
    """
    global _settings, _selection_pending
    with _selection_lock:
        _settings = settings
        if not install:
            _selection_pending = True
            return None
        _selection_pending = False
        return install_default_handler(_registry, settings)


def reset() -> None:
    """Empty the registry and re-arm default selection."""
    global _settings, _selection_pending
    with _selection_lock:
        _registry.set_handler(None)
        _settings = None
        _selection_pending = True


def _ensure_default_handler() -> None:
    """Run the lazy default selection once; never raises.

    Other threads block on the lock until selection has finished, so none
    of them dispatches into a half-initialised registry. A probe that logs
    re-enters on the same thread and returns immediately.
    """
    global _selection_pending, _selection_running
    if not _selection_pending:
        return
    with _selection_lock:
        if not _selection_pending or _selection_running:
            return
        _selection_running = True
        try:
            install_default_handler(_registry, _settings)
        except LogRelayError as exc:
            logger.warning("default_handler_selection_failed", error=str(exc), code=exc.code, details=exc.details)
        finally:
            _selection_running = False
            _selection_pending = False


# =============================================================================
# Registry API
# =============================================================================


def set_handler(handler: Handler | None) -> Handler | None:
    """Replace the process-wide handler and return the previous one.

    Pass ``None`` to disable logging. Any explicit call turns off default
    handler selection.
    """
    global _selection_pending
    with _selection_lock:
        _selection_pending = False
        return _registry.set_handler(handler)


def current_handler() -> Handler | None:
    return _registry.current_handler()


@contextmanager
def handler_override(handler: Handler | None) -> Iterator[Handler | None]:
    """Install ``handler`` for the duration of the block, then restore."""
    previous = set_handler(handler)
    try:
        yield previous
    finally:
        set_handler(previous)


# =============================================================================
# Logging API
# =============================================================================


def log(
    message: MessageProducer,
    level: LogLevel,
    subsystem: str | None = None,
    category: str | None = None,
    location: Location | None = None,
) -> None:
    """Dispatch a lazily built message to the current handler.

    ``message`` is a zero-argument callable. It is never called when no
    handler is installed.
    """
    _ensure_default_handler()
    _dispatcher.log(message, level, subsystem, category, location)


def _formatter(fmt: str, args: tuple[Any, ...]) -> MessageProducer:
    if not args:
        return lambda: fmt
    return lambda: fmt % args


def verbose(subsystem: str | None, category: str | None, fmt: str, *args: Any) -> None:
    log(_formatter(fmt, args), LogLevel.VERBOSE, subsystem, category)


def debug(subsystem: str | None, category: str | None, fmt: str, *args: Any) -> None:
    log(_formatter(fmt, args), LogLevel.DEBUG, subsystem, category)


def info(subsystem: str | None, category: str | None, fmt: str, *args: Any) -> None:
    log(_formatter(fmt, args), LogLevel.INFO, subsystem, category)


def warning(subsystem: str | None, category: str | None, fmt: str, *args: Any) -> None:
    log(_formatter(fmt, args), LogLevel.WARNING, subsystem, category)


def error(subsystem: str | None, category: str | None, fmt: str, *args: Any) -> None:
    log(_formatter(fmt, args), LogLevel.ERROR, subsystem, category)


class SubsystemLogger:
    """Logging helpers bound to a fixed subsystem (and optional category).

    Usage:
        logger = get_logger("com.myapp", "Weather")
        logger.info("The temperature is %s", temperature)
    """

    def __init__(self, subsystem: str | None, category: str | None = None) -> None:
        self.subsystem = subsystem
        self.category = category

    def with_category(self, category: str | None) -> "SubsystemLogger":
        return SubsystemLogger(self.subsystem, category)

    def log(self, message: MessageProducer, level: LogLevel, location: Location | None = None) -> None:
        log(message, level, self.subsystem, self.category, location)

    def verbose(self, fmt: str, *args: Any) -> None:
        self.log(_formatter(fmt, args), LogLevel.VERBOSE)

    def debug(self, fmt: str, *args: Any) -> None:
        self.log(_formatter(fmt, args), LogLevel.DEBUG)

    def info(self, fmt: str, *args: Any) -> None:
        self.log(_formatter(fmt, args), LogLevel.INFO)

    def warning(self, fmt: str, *args: Any) -> None:
        self.log(_formatter(fmt, args), LogLevel.WARNING)

    def error(self, fmt: str, *args: Any) -> None:
        self.log(_formatter(fmt, args), LogLevel.ERROR)

    def __repr__(self) -> str:
        return f"SubsystemLogger(subsystem={self.subsystem!r}, category={self.category!r})"


def get_logger(subsystem: str | None, category: str | None = None) -> SubsystemLogger:
    """Get logging helpers bound to ``subsystem`` and ``category``."""
    return SubsystemLogger(subsystem, category)
