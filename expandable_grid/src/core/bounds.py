"""Axis-aligned integer rectangles used for grid bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Rect:
    """Rectangle of cells starting at ``(min_x, min_y)`` spanning ``width`` x ``height``."""

    min_x: int = 0
    min_y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def from_point(cls, x: int, y: int) -> "Rect":
        return cls(x, y, 1, 1)

    @classmethod
    def from_corners(cls, min_x: int, min_y: int, max_x: int, max_y: int) -> "Rect":
        """Return the rectangle spanning the inclusive corners."""
        return cls(min_x, min_y, max(0, max_x - min_x + 1), max(0, max_y - min_y + 1))

    @classmethod
    def coerce(cls, value: Any) -> "Rect":
        """Accept a ``Rect`` or a ``(min_x, min_y, width, height)`` tuple."""
        if isinstance(value, Rect):
            return value
        try:
            min_x, min_y, width, height = value
        except (TypeError, ValueError):
            raise ValueError(
                f"expected Rect or (min_x, min_y, width, height), got {value!r}"
            ) from None
        return cls(int(min_x), int(min_y), int(width), int(height))

    # Derived corners -----------------------------------------------------

    @property
    def max_x(self) -> int:
        """Inclusive right edge."""
        return self.min_x + self.width - 1

    @property
    def max_y(self) -> int:
        """Inclusive bottom edge."""
        return self.min_y + self.height - 1

    @property
    def end_x(self) -> int:
        return self.min_x + self.width

    @property
    def end_y(self) -> int:
        return self.min_y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    # Set operations ------------------------------------------------------

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.end_x and self.min_y <= y < self.end_y

    def contains_rect(self, other: "Rect") -> bool:
        """Return ``True`` if every cell of ``other`` lies inside this rectangle."""
        if other.is_empty:
            return True
        return (
            self.min_x <= other.min_x
            and self.min_y <= other.min_y
            and other.end_x <= self.end_x
            and other.end_y <= self.end_y
        )

    def union(self, other: "Rect") -> "Rect":
        """Return the smallest rectangle containing both, computed per axis."""
        if other.is_empty:
            return self
        if self.is_empty:
            return other
        return Rect.from_corners(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def intersection(self, other: "Rect") -> "Rect":
        """Return the overlap of both rectangles (possibly empty)."""
        min_x = max(self.min_x, other.min_x)
        min_y = max(self.min_y, other.min_y)
        end_x = min(self.end_x, other.end_x)
        end_y = min(self.end_y, other.end_y)
        return Rect(min_x, min_y, max(0, end_x - min_x), max(0, end_y - min_y))

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.min_x, self.min_y, self.width, self.height
