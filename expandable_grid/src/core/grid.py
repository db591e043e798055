"""Growable 2D grid addressed by signed coordinates.

All cells live in one flat ``numpy`` buffer laid out row-major over the
*capacity* rectangle, whose top-left corner is the grid ``origin``.  The
*logical* rectangle is the part of the capacity that callers may read and
write; it is always contained in the capacity.  Writing outside the logical
rectangle with :meth:`Grid.set_expand` grows it, and only when the capacity
cannot hold the new logical rectangle is the buffer reallocated, with the
deficient sides over-allocated so repeated growth in one direction costs
amortized O(1) per added cell.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from expandable_grid.src.core.bounds import Rect
from expandable_grid.src.core.errors import CapacityExceededError, OutOfBoundsError
from expandable_grid.src.utils import config_loader

logger = logging.getLogger(__name__)


def resolve_dtype(default: Any, dtype: Any = None) -> np.dtype:
    """Return the buffer dtype; without an explicit ``dtype`` cells hold any object."""
    if dtype is not None:
        return np.dtype(dtype)
    return np.dtype(object)


def coerce_value(value: Any, dtype: np.dtype) -> Any:
    """Convert ``value`` for a ``dtype`` buffer, raising before anything is written."""
    if dtype == object:
        return value
    return np.asarray(value, dtype=dtype)


def to_python_value(value: Any) -> Any:
    """Unwrap numpy scalars so callers get plain Python values back."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def _region(rect: Rect, capacity: Rect) -> Tuple[slice, slice]:
    # (row, column) slices of ``rect`` inside a buffer viewed over ``capacity``
    return (
        slice(rect.min_y - capacity.min_y, rect.end_y - capacity.min_y),
        slice(rect.min_x - capacity.min_x, rect.end_x - capacity.min_x),
    )


class Grid:
    """2D array of cells that grows in any direction on demand.

    ``default`` fills every cell that becomes accessible without having been
    written.  Cells hold arbitrary Python objects unless a numpy ``dtype`` is
    given, in which case values are converted on write and a value that cannot
    be converted is rejected before the grid changes.  The same ``default``
    object is shared by the cells it fills, so prefer immutable defaults.
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        default: Any = 0,
        origin: Tuple[int, int] = (0, 0),
        dtype: Any = None,
        *,
        growth_factor: Optional[float] = None,
        max_cells: Optional[int] = None,
        tracker: Any = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Grid size must be non-negative, got {width}x{height}")
        self.default = default
        self.dtype = resolve_dtype(default, dtype)
        if growth_factor is None:
            growth_factor = config_loader.GROWTH_FACTOR
        self.growth_factor = config_loader.validate_growth_factor(growth_factor)
        self.max_cells = config_loader.MAX_CELLS if max_cells is None else int(max_cells)
        self.tracker = tracker
        self.reallocations = 0

        rect = Rect(int(origin[0]), int(origin[1]), width, height)
        self._check_area(rect)
        self._buffer = self._allocate(rect.area)
        self._capacity = rect
        self._logical = rect

    @classmethod
    def from_list(
        cls,
        rows: Sequence[Sequence[Any]],
        origin: Tuple[int, int] = (0, 0),
        default: Any = 0,
        dtype: Any = None,
        **kwargs: Any,
    ) -> "Grid":
        """Build a grid from a list of rows whose first cell sits at ``origin``."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        for row in rows:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
        grid = cls(width, height, default, origin, dtype, **kwargs)
        ox, oy = grid.origin
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                grid.set(ox + c, oy + r, value)
        return grid

    # Bounds --------------------------------------------------------------

    @property
    def logical_rect(self) -> Rect:
        return self._logical

    @property
    def capacity_rect(self) -> Rect:
        return self._capacity

    @property
    def origin(self) -> Tuple[int, int]:
        """Coordinate stored at buffer index 0."""
        return self._capacity.min_x, self._capacity.min_y

    def logical_bounds(self) -> Tuple[int, int, int, int]:
        """Return ``(min_x, min_y, width, height)`` of the accessible rectangle."""
        return self._logical.as_tuple()

    def capacity_bounds(self) -> Tuple[int, int, int, int]:
        return self._capacity.as_tuple()

    def shape(self) -> Tuple[int, int]:
        """Return the logical shape as (height, width)."""
        return self._logical.height, self._logical.width

    # Access --------------------------------------------------------------

    def _index_of(self, x: int, y: int) -> int:
        cap = self._capacity
        return (y - cap.min_y) * cap.width + (x - cap.min_x)

    def get(self, x: int, y: int, default: Any | None = None) -> Any:
        """Return the value at ``(x, y)`` or ``default`` if out of bounds."""
        if not self._logical.contains(x, y):
            return default
        return to_python_value(self._buffer[self._index_of(x, y)])

    def get_or_error(self, x: int, y: int) -> Any:
        if not self._logical.contains(x, y):
            raise OutOfBoundsError(x, y, self.logical_bounds())
        return to_python_value(self._buffer[self._index_of(x, y)])

    def set(self, x: int, y: int, value: Any) -> None:
        """Write ``value`` at ``(x, y)``; the cell must already be accessible."""
        if not self._logical.contains(x, y):
            raise OutOfBoundsError(x, y, self.logical_bounds())
        self._buffer[self._index_of(x, y)] = coerce_value(value, self.dtype)

    def set_expand(self, x: int, y: int, value: Any) -> None:
        """Write ``value`` at ``(x, y)``, growing the grid to include it first."""
        value = coerce_value(value, self.dtype)
        if not self._logical.contains(x, y):
            self._grow(Rect.from_point(x, y))
        self._buffer[self._index_of(x, y)] = value

    def __getitem__(self, key: Tuple[int, int]) -> Any:
        x, y = key
        return self.get_or_error(x, y)

    def __setitem__(self, key: Tuple[int, int], value: Any) -> None:
        x, y = key
        self.set(x, y, value)

    def __contains__(self, key: object) -> bool:
        try:
            x, y = key  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        return self._logical.contains(x, y)

    def __len__(self) -> int:
        return self._logical.area

    # Growth --------------------------------------------------------------

    def ensure_contains(self, rect: Any) -> None:
        """Make every cell of ``rect`` accessible, reallocating at most once."""
        rect = Rect.coerce(rect)
        if self._logical.contains_rect(rect):
            return
        self._grow(rect)

    def ensure_contains_point(self, x: int, y: int) -> None:
        if not self._logical.contains(x, y):
            self._grow(Rect.from_point(x, y))

    def shrink_to_fit(self) -> None:
        """Release slack capacity so the buffer covers only the logical rectangle."""
        if self._capacity == self._logical:
            return
        self._relocate(self._logical, self._logical, "shrink")

    def resize(self, rect: Any) -> None:
        """Set the logical and capacity rectangles to exactly ``rect``.

        Cells inside both the old logical rectangle and ``rect`` keep their
        values, cells outside ``rect`` are dropped and new cells take the
        default.
        """
        rect = Rect.coerce(rect)
        if rect == self._logical and rect == self._capacity:
            return
        self._relocate(rect, rect, "resize")

    def _grow(self, required: Rect) -> None:
        new_logical = self._logical.union(required)
        if self._capacity.contains_rect(new_logical):
            self._fill_exposed(new_logical)
            self._logical = new_logical
            self._record("bounds", self._capacity)
            return
        self._relocate(self._grown_capacity(new_logical), new_logical, "reallocate")

    def _margin(self, deficit: int, size: int) -> int:
        if deficit <= 0:
            return 0
        return max(deficit, math.ceil(size * (self.growth_factor - 1)))

    def _grown_capacity(self, new_logical: Rect) -> Rect:
        cap = self._capacity
        if cap.area == 0:
            return new_logical
        left = self._margin(cap.min_x - new_logical.min_x, cap.width)
        right = self._margin(new_logical.end_x - cap.end_x, cap.width)
        top = self._margin(cap.min_y - new_logical.min_y, cap.height)
        bottom = self._margin(new_logical.end_y - cap.end_y, cap.height)
        return Rect(
            cap.min_x - left,
            cap.min_y - top,
            cap.width + left + right,
            cap.height + top + bottom,
        )

    def _fill_exposed(self, new_logical: Rect) -> None:
        # Only cells entering the logical rectangle are reset; old cells stay put.
        old = self._logical
        if old.is_empty:
            self._fill(new_logical)
            return
        self._fill(Rect.from_corners(new_logical.min_x, new_logical.min_y, new_logical.max_x, old.min_y - 1))
        self._fill(Rect.from_corners(new_logical.min_x, old.end_y, new_logical.max_x, new_logical.max_y))
        self._fill(Rect.from_corners(new_logical.min_x, old.min_y, old.min_x - 1, old.max_y))
        self._fill(Rect.from_corners(old.end_x, old.min_y, new_logical.max_x, old.max_y))

    def _fill(self, rect: Rect) -> None:
        if rect.is_empty:
            return
        self._view()[_region(rect, self._capacity)].fill(self.default)

    def _relocate(self, new_capacity: Rect, new_logical: Rect, kind: str) -> None:
        self._check_area(new_capacity)
        buffer = self._allocate(new_capacity.area)

        # Region copy between buffers of different stride; each retained row
        # lands at an offset derived from the new origin and width.
        keep = self._logical.intersection(new_logical)
        if not keep.is_empty:
            dst = buffer.reshape(new_capacity.height, new_capacity.width)
            dst[_region(keep, new_capacity)] = self._view()[_region(keep, self._capacity)]

        old_capacity = self._capacity
        self._buffer, self._capacity, self._logical = buffer, new_capacity, new_logical
        self.reallocations += 1
        if config_loader.LOG_REALLOCATIONS:
            logger.debug(
                "%s: capacity %s -> %s, logical %s",
                kind,
                old_capacity.as_tuple(),
                new_capacity.as_tuple(),
                new_logical.as_tuple(),
            )
        self._record(kind, old_capacity)

    def _check_area(self, rect: Rect) -> None:
        if rect.area > self.max_cells:
            logger.warning(
                "refusing to allocate %dx%d cells (limit %d)",
                rect.width,
                rect.height,
                self.max_cells,
            )
            raise CapacityExceededError(
                f"capacity {rect.width}x{rect.height} exceeds limit of {self.max_cells} cells"
            )

    def _allocate(self, area: int) -> np.ndarray:
        try:
            buffer = np.empty(area, dtype=self.dtype)
        except (MemoryError, ValueError, OverflowError) as exc:
            logger.warning("allocation of %d cells failed", area)
            raise CapacityExceededError(f"cannot allocate {area} cells") from exc
        buffer.fill(self.default)
        return buffer

    def _view(self) -> np.ndarray:
        return self._buffer.reshape(self._capacity.height, self._capacity.width)

    def _record(self, kind: str, capacity_before: Rect) -> None:
        if self.tracker is not None:
            self.tracker.observe_growth(kind, self._logical, capacity_before, self._capacity)

    # Iteration -----------------------------------------------------------

    def cells(self) -> Iterator[Tuple[int, int, Any]]:
        """Yield ``(x, y, value)`` for every accessible cell, row by row."""
        rect = self._logical
        for r, row in enumerate(self.rows()):
            for c, value in enumerate(row):
                yield rect.min_x + c, rect.min_y + r, value

    def rows(self) -> Iterator[List[Any]]:
        if self._logical.is_empty:
            return
        view = self._view()[_region(self._logical, self._capacity)]
        for row in view:
            yield row.tolist()

    def to_list(self) -> List[List[Any]]:
        """Return a deep list copy of the accessible cells."""
        return list(self.rows())

    def as_array(self) -> np.ndarray:
        """Return a ``(height, width)`` copy of the accessible cells."""
        return self._view()[_region(self._logical, self._capacity)].copy()

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone.__dict__.update(self.__dict__)
        clone._buffer = self._buffer.copy()
        clone.tracker = None
        clone.reallocations = 0
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._logical == other._logical and self.to_list() == other.to_list()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Grid(bounds={self.logical_bounds()}, "
            f"capacity={self.capacity_bounds()}, dtype={self.dtype})"
        )
