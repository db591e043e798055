"""Visualization utilities."""

from __future__ import annotations

from typing import Any

import matplotlib.pyplot as plt
import numpy as np


def visualize(grid: Any, ax: Any = None, show: bool = True) -> Any:
    """Draw the accessible cells of ``grid`` with signed coordinate ticks."""
    min_x, min_y, width, height = grid.logical_bounds()
    if ax is None:
        _, ax = plt.subplots()
    if width and height:
        data = np.asarray(grid.as_array(), dtype=float)
        # Cell centers land on integer coordinates.
        extent = (min_x - 0.5, min_x + width - 0.5, min_y + height - 0.5, min_y - 0.5)
        ax.imshow(data, interpolation="nearest", extent=extent)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if show:
        plt.show()
    return ax
