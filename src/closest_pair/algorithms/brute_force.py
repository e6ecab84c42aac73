from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from closest_pair.geometry.euclidean import pairwise_euclidean
from closest_pair.geometry.point import PointsLike, as_point_array

from ._shared import NO_PAIR, PairResult, pair_from_indices


def brute_force_indices(xy: np.ndarray, indices: Sequence[int]) -> PairResult:
    """Exhaustive closest pair among the rows `indices` of `xy`.

    Every unordered pair is compared in index order and only a strictly
    smaller distance replaces the current best, so ties keep the first pair
    found. Returns ``NO_PAIR`` for fewer than two indices.
    """
    idx = [int(i) for i in indices]
    coords = xy[idx].tolist()
    n = len(idx)

    best_d = math.inf
    best_ab: tuple[int, int] | None = None
    for a in range(n):
        xa, ya = coords[a]
        for b in range(a + 1, n):
            dx = xa - coords[b][0]
            dy = ya - coords[b][1]
            d = math.sqrt(dx * dx + dy * dy)
            if d < best_d:
                best_d = d
                best_ab = (a, b)

    if best_ab is None:
        return NO_PAIR
    return pair_from_indices(xy, idx[best_ab[0]], idx[best_ab[1]])


def brute_force_closest_pair(points: PointsLike) -> PairResult:
    """O(n²) reference solver over every unordered pair of points.

    Parameters
    ----------
    points:
        Any number of points (see :func:`closest_pair.geometry.as_point_array`).

    Returns
    -------
    PairResult
        The earliest-indexed pair (i, j), i < j, achieving the minimum
        distance, or ``NO_PAIR`` when fewer than two points are given.
    """
    xy = as_point_array(points)
    n = xy.shape[0]
    if n < 2:
        return NO_PAIR

    best_d = math.inf
    best_ij: tuple[int, int] | None = None
    # One row of the upper triangle at a time keeps memory linear in n.
    for i in range(n - 1):
        row = pairwise_euclidean(xy[i : i + 1], xy[i + 1 :])[0]
        j = int(np.argmin(row))
        if row[j] < best_d:
            best_d = float(row[j])
            best_ij = (i, i + 1 + j)

    assert best_ij is not None
    return pair_from_indices(xy, *best_ij)
