from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from closest_pair.geometry.point import PointsLike, as_point_array

from ._shared import NO_PAIR, PairResult, StripEvent, closer
from .brute_force import brute_force_indices
from .strip import scan_strip

logger = logging.getLogger(__name__)

StripObserver = Callable[[StripEvent], None]


@dataclass(frozen=True)
class ClosestPairConfig:
    """Configuration for the divide-and-conquer closest-pair search.

    Attributes
    ----------
    brute_force_threshold:
        Subproblems with at most this many points are solved exhaustively.
    """

    brute_force_threshold: int = 3

    def __post_init__(self) -> None:
        if self.brute_force_threshold < 2:
            raise ValueError("brute_force_threshold must be at least 2.")


def _closest_recursive(
    xy: np.ndarray,
    x_rank: np.ndarray,
    by_x: np.ndarray,
    by_y: np.ndarray,
    threshold: int,
    observer: StripObserver | None,
) -> PairResult:
    n = by_x.size
    if n <= threshold:
        return brute_force_indices(xy, by_x)

    mid = n // 2
    split = by_x[mid]
    dividing_x = float(xy[split, 0])

    left_x = by_x[:mid]
    right_x = by_x[mid:]
    # Membership in left_x, not a coordinate test: points sharing the
    # dividing x may fall on either side of the split.
    in_left = x_rank[by_y] < x_rank[split]
    left_y = by_y[in_left]
    right_y = by_y[~in_left]

    best = closer(
        _closest_recursive(xy, x_rank, left_x, left_y, threshold, observer),
        _closest_recursive(xy, x_rank, right_x, right_y, threshold, observer),
    )
    delta = best.distance

    strip = by_y[np.abs(xy[by_y, 0] - dividing_x) < delta]
    if observer is not None:
        observer(StripEvent(dividing_x, delta, xy[by_y], xy[strip]))

    return scan_strip(xy, strip, best)


def _is_permutation(order: np.ndarray, n: int) -> bool:
    return order.shape == (n,) and np.array_equal(np.sort(order), np.arange(n))


def closest_pair_presorted(
    points: PointsLike,
    by_x: np.ndarray,
    by_y: np.ndarray,
    config: ClosestPairConfig | None = None,
    strip_observer: StripObserver | None = None,
) -> PairResult:
    """Run the recursive partitioner on pre-sorted views of `points`.

    Parameters
    ----------
    points:
        Point coordinates, shape (n_points, 2).
    by_x:
        Permutation of ``range(n_points)`` ordering the points by x.
    by_y:
        Permutation of ``range(n_points)`` ordering the points by y.
    config:
        Optional configuration (base-case size).
    strip_observer:
        Optional callable invoked with a :class:`StripEvent` for every strip
        built during the merge steps.
    """
    if config is None:
        config = ClosestPairConfig()

    xy = as_point_array(points)
    n = xy.shape[0]
    by_x = np.asarray(by_x, dtype=np.intp)
    by_y = np.asarray(by_y, dtype=np.intp)

    if not (_is_permutation(by_x, n) and _is_permutation(by_y, n)):
        raise ValueError("by_x and by_y must both be permutations of range(n_points).")
    if np.any(np.diff(xy[by_x, 0]) < 0):
        raise ValueError("by_x must order the points by ascending x.")
    if np.any(np.diff(xy[by_y, 1]) < 0):
        raise ValueError("by_y must order the points by ascending y.")

    if n < 2:
        return NO_PAIR

    x_rank = np.empty(n, dtype=np.intp)
    x_rank[by_x] = np.arange(n)
    x_rank.setflags(write=False)

    return _closest_recursive(
        xy, x_rank, by_x, by_y, config.brute_force_threshold, strip_observer
    )


def closest_pair(
    points: PointsLike,
    config: ClosestPairConfig | None = None,
    strip_observer: StripObserver | None = None,
) -> PairResult:
    """Find the closest pair of points in O(n log n).

    Parameters
    ----------
    points:
        An ``(n, 2)`` array, or any iterable of :class:`~closest_pair.geometry.Point`
        instances or ``(x, y)`` pairs. Duplicates are allowed.
    config:
        Optional configuration (base-case size).
    strip_observer:
        Optional instrumentation hook, see :func:`closest_pair_presorted`.

    Returns
    -------
    PairResult
        The closest pair with indices into `points`, or ``NO_PAIR`` when
        fewer than two points are given. Check :attr:`PairResult.found`
        before using the points.
    """
    xy = as_point_array(points)
    n = xy.shape[0]
    if n < 2:
        logger.debug(f"closest_pair called with {n} point(s); no pair exists")
        return NO_PAIR

    # lexsort is stable and sorts by its last key first.
    by_x = np.lexsort((xy[:, 1], xy[:, 0]))
    by_y = np.lexsort((xy[:, 0], xy[:, 1]))
    logger.debug(f"closest_pair: sorted {n} points by x and by y")

    result = closest_pair_presorted(xy, by_x, by_y, config, strip_observer)
    logger.debug(
        f"closest_pair: indices ({result.first_index}, {result.second_index}), "
        f"distance={result.distance:.6g}"
    )
    return result
