import os

import pytest

import logrelay
from logrelay.config import get_settings
from logrelay.location import Location


class RecordingHandler:
    """Handler that records every call and evaluates the message once."""

    def __init__(self, name: str = "recorder") -> None:
        self.name = name
        self.calls: list[dict] = []

    def __call__(self, message, level, subsystem, category, location) -> None:
        self.calls.append(
            {
                "text": message(),
                "level": level,
                "subsystem": subsystem,
                "category": category,
                "location": location,
            }
        )

    def __repr__(self) -> str:
        return f"RecordingHandler({self.name!r})"


@pytest.fixture(autouse=True)
def clean_relay(monkeypatch):
    """
    Isolates every test from the process-wide facade and from LOGRELAY_*
    variables in the developer's environment.
    """
    for key in list(os.environ):
        if key.startswith("LOGRELAY_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    logrelay.reset()

    yield

    logrelay.reset()
    get_settings.cache_clear()


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def location() -> Location:
    return Location(file="/srv/app/boot.py", function="main", line=42)


@pytest.fixture
def make_recorder():
    return RecordingHandler
