"""Core grid utilities and data structures."""

from .bounds import Rect
from .errors import CapacityExceededError, OutOfBoundsError
from .grid import Grid
from .chunked import ChunkedGrid

__all__ = [
    "Rect",
    "Grid",
    "ChunkedGrid",
    "OutOfBoundsError",
    "CapacityExceededError",
]
