"""
Structured logging for logrelay's own diagnostics.

These messages never pass through the handler registry.
"""

from __future__ import annotations

import logging

import structlog


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``.

    Output follows the host application's ``logging`` configuration, so the
    library stays quiet unless the host opts in.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or "logrelay"),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
