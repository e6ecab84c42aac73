from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from closest_pair.geometry.point import PointsLike, as_point_array

from ._shared import PairResult, pair_from_indices


def scan_strip(xy: np.ndarray, strip: Sequence[int], best: PairResult) -> PairResult:
    """Bounded-neighbour scan over strip rows of `xy` already sorted by y.

    For each point, later points are compared only while their y-gap is
    strictly below the current best distance, which shrinks as soon as a
    strictly closer pair is seen. Returns `best` itself when nothing in the
    strip beats it.
    """
    idx = [int(i) for i in strip]
    coords = xy[idx].tolist()
    n = len(idx)

    best_d = best.distance
    best_ab: tuple[int, int] | None = None
    for a in range(n):
        xa, ya = coords[a]
        for b in range(a + 1, n):
            xb, yb = coords[b]
            if yb - ya >= best_d:
                break
            dx = xa - xb
            dy = ya - yb
            d = math.sqrt(dx * dx + dy * dy)
            if d < best_d:
                best_d = d
                best_ab = (a, b)

    if best_ab is None:
        return best
    return pair_from_indices(xy, idx[best_ab[0]], idx[best_ab[1]])


def closest_in_strip(points: PointsLike, best: PairResult) -> PairResult:
    """Find a pair closer than ``best.distance`` among y-sorted strip points.

    Parameters
    ----------
    points:
        Strip points sorted by ascending y.
    best:
        Current best pair; its distance is the initial search bound.

    Returns
    -------
    PairResult
        A strictly closer pair (indices refer to positions in `points`), or
        `best` unchanged when the strip holds no improvement.
    """
    xy = as_point_array(points)
    if np.any(np.diff(xy[:, 1]) < 0):
        raise ValueError("Strip points must be sorted by ascending y.")
    return scan_strip(xy, range(xy.shape[0]), best)
