"""
Default handler selection.

Probes are tried in order and the first one returning a handler wins. When
none does, the registry stays empty and logging is disabled.

structlog is a required dependency, so with the default order its probe
always succeeds. The syslog entry only matters when
``LOGRELAY_DEFAULT_HANDLERS`` is reordered or structlog has been removed
from the environment.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from .config import RelaySettings, get_settings
from .diagnostics import get_logger
from .errors import UnknownHandlerError
from .handlers import console_handler, gcloud_handler, stdlib_handler, structlog_handler, syslog_handler
from .registry import Handler, HandlerRegistry

logger = get_logger("logrelay.bootstrap")

Probe = Callable[[RelaySettings], Optional[Handler]]

# Table-driven name -> probe lookup
PROBES: dict[str, Probe] = {
    "structlog": structlog_handler,
    "syslog": syslog_handler,
    "console": console_handler,
    "stdlib": stdlib_handler,
    "gcloud": gcloud_handler,
}

NO_HANDLER = "none"


def probe_for(name: str) -> Probe | None:
    """Look up a probe by name. ``"none"`` maps to ``None``."""
    key = name.strip().lower()
    if key == NO_HANDLER:
        return None
    try:
        return PROBES[key]
    except KeyError:
        raise UnknownHandlerError(name=name, known=[*PROBES, NO_HANDLER]) from None


def resolve_handler(name: str, settings: RelaySettings | None = None) -> Handler | None:
    """Build the handler registered under ``name``.

    A known backend that is unavailable on this host resolves to ``None``.
    """
    probe = probe_for(name)
    if probe is None:
        return None
    return probe(settings or get_settings())


def select_default_handler(probes: Iterable[Probe], settings: RelaySettings | None = None) -> Handler | None:
    """Return the first handler produced by ``probes``, in order."""
    settings = settings or get_settings()
    for probe in probes:
        handler = probe(settings)
        if handler is not None:
            return handler
        logger.debug("handler_probe_unavailable", probe=getattr(probe, "__name__", repr(probe)))
    return None


def default_probes(settings: RelaySettings | None = None) -> list[Probe]:
    """Probes named by ``settings.default_handlers``, in configured order."""
    settings = settings or get_settings()
    probes = []
    for name in settings.default_handler_names:
        probe = probe_for(name)
        if probe is None:
            break
        probes.append(probe)
    return probes


def install_default_handler(registry: HandlerRegistry, settings: RelaySettings | None = None) -> Handler | None:
    """Select a default handler and install it into ``registry``.

    Returns the installed handler (``None`` if nothing was available).
    """
    settings = settings or get_settings()
    handler = select_default_handler(default_probes(settings), settings)
    registry.set_handler(handler)
    if handler is None:
        logger.debug("no_default_handler_available", probes=settings.default_handler_names)
    else:
        logger.debug("default_handler_selected", handler=getattr(handler, "name", repr(handler)))
    return handler
