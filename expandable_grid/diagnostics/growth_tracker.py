from __future__ import annotations

"""Record growth events of expandable grids for diagnostics."""

import json
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Dict, List, Tuple

from expandable_grid.src.core.bounds import Rect

GROWTH_KINDS = ("bounds", "reallocate", "shrink", "resize")


@dataclass(frozen=True)
class GrowthEvent:
    kind: str
    logical: Tuple[int, int, int, int]
    capacity_before: Tuple[int, int, int, int]
    capacity_after: Tuple[int, int, int, int]

    @property
    def reallocated(self) -> bool:
        return self.capacity_before != self.capacity_after


class GrowthTracker:
    """Track how a grid's logical and capacity rectangles change over time."""

    def __init__(self) -> None:
        self.events: List[GrowthEvent] = []

    def observe_growth(
        self,
        kind: str,
        logical: Rect,
        capacity_before: Rect,
        capacity_after: Rect,
    ) -> None:
        if kind not in GROWTH_KINDS:
            raise ValueError(f"unknown growth kind {kind!r}")
        self.events.append(
            GrowthEvent(
                kind,
                logical.as_tuple(),
                capacity_before.as_tuple(),
                capacity_after.as_tuple(),
            )
        )

    @property
    def reallocation_count(self) -> int:
        return sum(1 for e in self.events if e.kind == "reallocate")

    def counts_by_kind(self) -> Dict[str, int]:
        """Return a histogram of recorded event kinds."""
        return dict(Counter(e.kind for e in self.events))

    def render_summary(self) -> str:
        lines = []
        for i, e in enumerate(self.events):
            lines.append(
                f"{i}: {e.kind} logical={e.logical} "
                f"capacity {e.capacity_before} -> {e.capacity_after}"
            )
        return "\n".join(lines)

    def export_json(self, path: str) -> None:
        """Dump recorded events to ``path``."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump([asdict(e) for e in self.events], f, indent=2)

    def clear(self) -> None:
        self.events.clear()
