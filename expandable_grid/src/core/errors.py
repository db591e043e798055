from __future__ import annotations

"""Exceptions raised by grid access and growth."""

from typing import Any

__all__ = [
    "OutOfBoundsError",
    "CapacityExceededError",
]


class OutOfBoundsError(IndexError):
    """Raised when a read or non-expanding write misses the logical rectangle."""

    def __init__(self, x: int, y: int, bounds: Any = None) -> None:
        self.x = x
        self.y = y
        self.bounds = bounds
        msg = f"coordinate ({x}, {y}) is outside the grid"
        if bounds is not None:
            msg += f" bounds {bounds}"
        super().__init__(msg)


class CapacityExceededError(MemoryError):
    """Raised when growth cannot allocate the required physical rectangle."""
