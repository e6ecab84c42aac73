from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from closest_pair.algorithms import PairResult, closest_pair
from closest_pair.datasets import read_points
from closest_pair.geometry import Point

logger = logging.getLogger(__name__)


def _format_point(p: Point, precision: int) -> str:
    return f"({p.x:.{precision}f}, {p.y:.{precision}f})"


def format_result(result: PairResult, precision: int = 6) -> str:
    """Render a result the way the solver prints it."""
    if not result.found:
        return "Need at least two points."
    first, second = result.points
    lines = [
        "Closest points:",
        f"  P1 = {_format_point(first, precision)}",
        f"  P2 = {_format_point(second, precision)}",
        f"Distance: {result.distance:.{precision}f}",
    ]
    return "\n".join(lines)


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the closest pair of points in a file.")
    parser.add_argument(
        "points",
        type=Path,
        nargs="?",
        default=Path("points.txt"),
        help="Point file: one \"x y\" pair per line, or CSV/Parquet with x and y columns.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=6,
        help="Number of decimals printed for coordinates and distance.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        points = read_points(args.points)
    except (FileNotFoundError, ValueError) as exc:
        logger.error(f"Could not read '{args.points}': {exc}")
        return 1

    result = closest_pair(points)
    print(format_result(result, precision=args.precision))
    return 0


if __name__ == "__main__":
    sys.exit(main())
