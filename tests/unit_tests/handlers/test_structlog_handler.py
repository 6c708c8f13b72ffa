"""
structlog handler tests.
"""

from __future__ import annotations

import logging
import sys

import pytest
import structlog
from structlog.testing import LogCapture, capture_logs

from logrelay.config import RelaySettings
from logrelay.handlers import StructlogHandler, structlog_handler
from logrelay.levels import LogLevel


@pytest.fixture
def handler() -> StructlogHandler:
    return StructlogHandler(structlog, default_logger_name="fallback")


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestStructlogHandler:
    def test_forwards_fields(self, handler, location) -> None:
        with capture_logs() as logs:
            handler(lambda: "boot", LogLevel.INFO, "core", "init", location)

        assert logs == [
            {
                "event": "boot",
                "log_level": "info",
                "subsystem": "core",
                "category": "init",
                "file": "/srv/app/boot.py",
                "function": "main",
                "line": 42,
            }
        ]

    @pytest.mark.parametrize(
        "level, method",
        [
            (LogLevel.DEBUG, "debug"),
            (LogLevel.INFO, "info"),
            (LogLevel.WARNING, "warning"),
            (LogLevel.ERROR, "error"),
        ],
    )
    def test_level_mapping(self, handler, location, level, method) -> None:
        with capture_logs() as logs:
            handler(lambda: "x", level, None, None, location)
        assert logs[0]["log_level"] == method

    def test_verbose_is_flagged_debug(self, handler, location) -> None:
        with capture_logs() as logs:
            handler(lambda: "x", LogLevel.VERBOSE, None, None, location)
        assert logs[0]["log_level"] == "debug"
        assert logs[0]["verbose"] is True

    def test_filtered_level_skips_message_construction(self, handler, location) -> None:
        capture = LogCapture()
        structlog.configure(
            processors=[capture],
            wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        )
        calls = []

        def producer() -> str:
            calls.append(1)
            return "quiet"

        handler(producer, LogLevel.INFO, "core", None, location)
        handler(lambda: "loud", LogLevel.ERROR, "core", None, location)

        assert calls == []
        assert [entry["event"] for entry in capture.entries] == ["loud"]


class TestStructlogProbe:
    def test_available(self) -> None:
        assert isinstance(structlog_handler(RelaySettings()), StructlogHandler)

    def test_unavailable_without_structlog(self, monkeypatch) -> None:
        monkeypatch.setitem(sys.modules, "structlog", None)
        assert structlog_handler(RelaySettings()) is None
