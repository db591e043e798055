"""Display helpers for expandable grids."""

from .visualization import visualize

__all__ = ["visualize"]
