"""
Google Cloud Logging handler tests with a mocked client.
"""

from __future__ import annotations

import sys
import types
from unittest.mock import MagicMock

import pytest

import logrelay
from logrelay.config import RelaySettings
from logrelay.handlers import GCloudHandler, gcloud_handler
from logrelay.levels import LogLevel


@pytest.fixture
def fake_gcloud(monkeypatch) -> types.ModuleType:
    """Installs a fake ``google.cloud.logging`` package."""
    google = types.ModuleType("google")
    cloud = types.ModuleType("google.cloud")
    logging_module = types.ModuleType("google.cloud.logging")
    logging_module.Client = MagicMock(name="Client")
    google.cloud = cloud
    cloud.logging = logging_module

    monkeypatch.setitem(sys.modules, "google", google)
    monkeypatch.setitem(sys.modules, "google.cloud", cloud)
    monkeypatch.setitem(sys.modules, "google.cloud.logging", logging_module)
    return logging_module


class TestGCloudHandler:
    def test_log_struct_payload(self, location) -> None:
        client = MagicMock()
        handler = GCloudHandler(client, log_name="relay")

        handler(lambda: "boot", LogLevel.WARNING, "core", "init", location)

        client.logger.assert_called_once_with("relay")
        client.logger.return_value.log_struct.assert_called_once_with(
            {
                "message": "boot",
                "level": "warning",
                "subsystem": "core",
                "category": "init",
                "file": "/srv/app/boot.py",
                "function": "main",
                "line": 42,
            },
            severity="WARNING",
        )

    def test_verbose_maps_to_debug_severity(self, location) -> None:
        client = MagicMock()
        GCloudHandler(client)(lambda: "x", LogLevel.VERBOSE, None, None, location)
        assert client.logger.return_value.log_struct.call_args.kwargs["severity"] == "DEBUG"

    def test_client_stays_open_after_replacement(self) -> None:
        client = MagicMock()
        handler = GCloudHandler(client)

        logrelay.set_handler(handler)
        logrelay.set_handler(None)

        assert handler.client is client
        assert not hasattr(handler, "close")
        client.close.assert_not_called()


class TestGCloudProbe:
    def test_unavailable_without_library(self, monkeypatch) -> None:
        monkeypatch.setitem(sys.modules, "google.cloud", types.ModuleType("google.cloud"))
        monkeypatch.setitem(sys.modules, "google.cloud.logging", None)
        assert gcloud_handler(RelaySettings()) is None

    def test_builds_client_from_settings(self, fake_gcloud) -> None:
        settings = RelaySettings(gcloud_project="my-project", gcloud_log_name="relay")

        handler = gcloud_handler(settings)

        assert isinstance(handler, GCloudHandler)
        fake_gcloud.Client.assert_called_once_with(project="my-project")
        fake_gcloud.Client.return_value.logger.assert_called_once_with("relay")

    def test_client_failure_means_unavailable(self, fake_gcloud) -> None:
        fake_gcloud.Client.side_effect = RuntimeError("no credentials")
        assert gcloud_handler(RelaySettings()) is None
