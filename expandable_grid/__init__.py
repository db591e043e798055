"""Growable two-dimensional arrays addressed by signed coordinates."""

from expandable_grid.src.core import (
    CapacityExceededError,
    ChunkedGrid,
    Grid,
    OutOfBoundsError,
    Rect,
)
from expandable_grid.diagnostics import GrowthTracker

__version__ = "0.1.0"

__all__ = [
    "Grid",
    "ChunkedGrid",
    "Rect",
    "GrowthTracker",
    "OutOfBoundsError",
    "CapacityExceededError",
]
