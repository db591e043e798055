from __future__ import annotations

"""Grid of fixed-size chunks addressed by cell coordinates."""

from typing import Any, Tuple

import numpy as np

from expandable_grid.src.core.bounds import Rect
from expandable_grid.src.core.errors import OutOfBoundsError
from expandable_grid.src.core.grid import Grid, coerce_value, resolve_dtype, to_python_value


class ChunkedGrid:
    """Expandable grid whose cells are ``chunk_height x chunk_width`` arrays.

    Chunks are allocated on first write; cells of an unallocated chunk inside
    the chunk grid read as ``default``.
    """

    def __init__(
        self,
        chunk_width: int,
        chunk_height: int,
        default: Any = 0,
        dtype: Any = None,
        **grid_kwargs: Any,
    ) -> None:
        if chunk_width <= 0 or chunk_height <= 0:
            raise ValueError(
                f"chunk size must be positive, got {chunk_width}x{chunk_height}"
            )
        self.chunk_size = (chunk_width, chunk_height)
        self.default = default
        self.dtype = resolve_dtype(default, dtype)
        self.chunks = Grid(0, 0, default=None, dtype=object, **grid_kwargs)

    def chunk_index_of(self, x: int, y: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Return ``((chunk_x, chunk_y), (sub_x, sub_y))`` for cell ``(x, y)``."""
        cw, ch = self.chunk_size
        cx, sx = divmod(x, cw)
        cy, sy = divmod(y, ch)
        return (cx, cy), (sx, sy)

    def cell_bounds(self) -> Rect:
        """Logical rectangle of the chunk grid in cell coordinates."""
        cw, ch = self.chunk_size
        min_x, min_y, width, height = self.chunks.logical_bounds()
        return Rect(min_x * cw, min_y * ch, width * cw, height * ch)

    def get(self, x: int, y: int, default: Any | None = None) -> Any:
        (cx, cy), (sx, sy) = self.chunk_index_of(x, y)
        if (cx, cy) not in self.chunks:
            return default
        chunk = self.chunks.get(cx, cy)
        if chunk is None:
            return self.default
        return to_python_value(chunk[sy, sx])

    def set(self, x: int, y: int, value: Any) -> None:
        (cx, cy), (sx, sy) = self.chunk_index_of(x, y)
        if (cx, cy) not in self.chunks:
            raise OutOfBoundsError(x, y, self.cell_bounds().as_tuple())
        value = coerce_value(value, self.dtype)
        self._chunk_at(cx, cy)[sy, sx] = value

    def set_expand(self, x: int, y: int, value: Any) -> None:
        value = coerce_value(value, self.dtype)
        (cx, cy), _ = self.chunk_index_of(x, y)
        self.chunks.ensure_contains_point(cx, cy)
        self.set(x, y, value)

    def _chunk_at(self, cx: int, cy: int) -> np.ndarray:
        chunk = self.chunks.get(cx, cy)
        if chunk is None:
            cw, ch = self.chunk_size
            chunk = np.empty((ch, cw), dtype=self.dtype)
            chunk.fill(self.default)
            self.chunks.set(cx, cy, chunk)
        return chunk

    def __repr__(self) -> str:
        return f"ChunkedGrid(chunk_size={self.chunk_size}, cells={self.cell_bounds().as_tuple()})"
