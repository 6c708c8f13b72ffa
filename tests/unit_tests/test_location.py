from __future__ import annotations

import dataclasses

import pytest

from logrelay.location import Location, caller_location


def test_caller_location_points_at_caller() -> None:
    location = caller_location()
    assert location.file == __file__
    assert location.function == "test_caller_location_points_at_caller"
    assert location.line > 0


def test_depth_exhausted_returns_unknown() -> None:
    assert caller_location(max_depth=0) == Location.unknown()


def test_unknown_placeholder() -> None:
    assert Location.unknown() == Location(file="<unknown>", function="<unknown>", line=0)


def test_location_is_immutable(location) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        location.line = 1  # type: ignore[misc]


def test_str(location) -> None:
    assert str(location) == "/srv/app/boot.py:42 (main)"
