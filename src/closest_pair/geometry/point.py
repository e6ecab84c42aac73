from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import numpy as np


@dataclass(frozen=True, order=True)
class Point:
    """A point in the plane.

    Points are plain values: two points with the same coordinates compare
    equal and hash alike, and the natural ordering is by ``x`` then ``y``.
    """

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


PointLike = Union[Point, Sequence[float]]
PointsLike = Union[np.ndarray, Iterable[PointLike]]


def _coords(p: PointLike) -> Tuple[float, float]:
    if isinstance(p, Point):
        return p.x, p.y
    x, y = p
    return float(x), float(y)


def as_point_array(points: PointsLike) -> np.ndarray:
    """Convert points to a read-only float array of shape (n_points, 2).

    Parameters
    ----------
    points:
        An ``(n, 2)`` array, or any iterable of :class:`Point` instances or
        ``(x, y)`` pairs.

    Raises
    ------
    ValueError
        If the data is not two-dimensional or contains NaN/Inf coordinates.
    """
    if isinstance(points, np.ndarray):
        xy = np.array(points, dtype=float)
    else:
        rows = [_coords(p) for p in points]
        xy = np.array(rows, dtype=float).reshape(len(rows), 2)

    if xy.size == 0:
        xy = xy.reshape(0, 2)
    if xy.ndim != 2 or xy.shape[1] != 2:
        raise ValueError(f"Points must have shape (n_points, 2); got {xy.shape}.")
    if not np.all(np.isfinite(xy)):
        raise ValueError("Point coordinates must be finite.")

    xy.setflags(write=False)
    return xy
