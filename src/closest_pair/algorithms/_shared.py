from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from closest_pair.geometry.euclidean import euclidean_distance
from closest_pair.geometry.point import Point


@dataclass(frozen=True)
class PairResult:
    """Two points and the distance between them.

    The distance is always derived from the points and cannot be passed in.
    A result without points is the "insufficient input" sentinel: its
    distance is ``inf`` and :attr:`found` is ``False``.

    Attributes
    ----------
    first, second:
        The two points of the pair, or ``None`` for the sentinel.
    first_index, second_index:
        Positions of the points in the caller's input sequence, when known.
    distance:
        Euclidean distance between ``first`` and ``second``.
    """

    first: Point | None = None
    second: Point | None = None
    first_index: int | None = None
    second_index: int | None = None
    distance: float = field(init=False)

    def __post_init__(self) -> None:
        if (self.first is None) != (self.second is None):
            raise ValueError("A pair result needs both points or neither.")
        if self.first is None:
            object.__setattr__(self, "distance", math.inf)
        else:
            object.__setattr__(self, "distance", euclidean_distance(self.first, self.second))

    @property
    def found(self) -> bool:
        return self.first is not None

    @property
    def points(self) -> tuple[Point, Point]:
        if not self.found:
            raise ValueError("No pair was found: fewer than two points were supplied.")
        return self.first, self.second


NO_PAIR = PairResult()


@dataclass(frozen=True)
class StripEvent:
    """Snapshot of one strip built while merging two halves.

    Attributes
    ----------
    dividing_x:
        x-coordinate of the vertical dividing line.
    delta:
        Best distance from the two halves; the strip half-width.
    candidates:
        Coordinates of every point of the level's y-ordered view.
    strip:
        Coordinates of the points selected for the strip, in y-order.
    """

    dividing_x: float
    delta: float
    candidates: np.ndarray
    strip: np.ndarray


def pair_from_indices(xy: np.ndarray, i: int, j: int) -> PairResult:
    """Build a PairResult from two row indices of a coordinate array."""
    return PairResult(
        first=Point(float(xy[i, 0]), float(xy[i, 1])),
        second=Point(float(xy[j, 0]), float(xy[j, 1])),
        first_index=int(i),
        second_index=int(j),
    )


def closer(left: PairResult, right: PairResult) -> PairResult:
    """Return the result with the smaller distance; `left` wins ties."""
    return left if left.distance <= right.distance else right
