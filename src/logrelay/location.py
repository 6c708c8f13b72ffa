"""
Call-site metadata.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass

_PACKAGE = "logrelay"


@dataclass(frozen=True)
class Location:
    """Where a log call was made. Opaque to the dispatcher."""

    file: str
    function: str
    line: int

    @classmethod
    def unknown(cls) -> "Location":
        return cls(file="<unknown>", function="<unknown>", line=0)

    def __str__(self) -> str:
        return f"{self.file}:{self.line} ({self.function})"


def _is_internal(module: str) -> bool:
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def caller_location(max_depth: int = 50) -> Location:
    """Return the location of the first frame outside the logrelay package."""
    frame = inspect.currentframe()
    if frame is None:
        return Location.unknown()

    try:
        frame = frame.f_back
        for _ in range(max_depth):
            if frame is None:
                break
            module = frame.f_globals.get("__name__", "")
            if not _is_internal(module):
                code = frame.f_code
                return Location(file=code.co_filename, function=code.co_name, line=frame.f_lineno)
            frame = frame.f_back
        return Location.unknown()
    finally:
        # Break the reference cycle through the frame objects
        del frame
