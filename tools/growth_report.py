from __future__ import annotations

"""Report how an expandable grid grows while fitting random points.

The CLI entry point can be invoked as::

    growth_report --points 500 --radius 1000 --seed 10

It expands an empty grid to fit ``--points`` seeded random coordinates drawn
from ``[-radius, radius]`` on both axes and prints the final logical and
capacity rectangles along with the number of reallocations.
"""

import argparse
import json
from typing import Any, Dict, List, Optional

import numpy as np

from expandable_grid.diagnostics import GrowthTracker
from expandable_grid.src.core.grid import Grid
from expandable_grid.src.utils.logger import get_logger


def run_growth(
    points: int,
    radius: int,
    seed: int = 0,
    growth_factor: Optional[float] = None,
) -> Dict[str, Any]:
    """Expand a grid over ``points`` random coordinates and summarise its growth."""
    rng = np.random.default_rng(seed)
    tracker = GrowthTracker()
    grid = Grid(default=0, growth_factor=growth_factor, tracker=tracker)
    coords = rng.integers(-radius, radius + 1, size=(points, 2))
    for i, (x, y) in enumerate(coords.tolist()):
        grid.set_expand(x, y, i + 1)
    return {
        "points": points,
        "logical": list(grid.logical_bounds()),
        "capacity": list(grid.capacity_bounds()),
        "reallocations": grid.reallocations,
        "events": tracker.counts_by_kind(),
    }


def format_report(report: Dict[str, Any]) -> str:
    lines: List[str] = [
        f"points:        {report['points']}",
        f"logical:       {tuple(report['logical'])}",
        f"capacity:      {tuple(report['capacity'])}",
        f"reallocations: {report['reallocations']}",
    ]
    for kind, count in sorted(report["events"].items()):
        lines.append(f"  {kind}: {count}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Report expandable grid growth")
    parser.add_argument("--points", type=int, default=100)
    parser.add_argument("--radius", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--factor", type=float, default=None, help="growth factor override")
    parser.add_argument("--json", action="store_true", help="print the report as JSON")
    args = parser.parse_args(argv)

    if args.points < 0 or args.radius < 0:
        parser.error("--points and --radius must be non-negative")

    logger = get_logger("growth_report")
    logger.info(f"fitting {args.points} points within radius {args.radius}")
    report = run_growth(args.points, args.radius, args.seed, args.factor)
    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print(format_report(report))


if __name__ == "__main__":
    main()
