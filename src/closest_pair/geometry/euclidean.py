from __future__ import annotations

import math

import numpy as np

from .point import Point


def euclidean_distance(a: Point, b: Point) -> float:
    """Return the Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    # Same expression as pairwise_euclidean so both agree bit-for-bit.
    return math.sqrt(dx * dx + dy * dy)


def pairwise_euclidean(x: np.ndarray, y: np.ndarray | None = None) -> np.ndarray:
    """Compute the pairwise Euclidean distance matrix between rows of `x` and `y`.

    Parameters
    ----------
    x:
        Array of shape (n_points_x, 2).
    y:
        Optional array of shape (n_points_y, 2). If ``None``, distances
        are computed between all pairs of rows in `x`.

    Returns
    -------
    np.ndarray
        Distance matrix of shape (n_points_x, n_points_y).
    """
    x = np.asarray(x, dtype=float)
    if y is None:
        y = x
    else:
        y = np.asarray(y, dtype=float)

    # Broadcasting to shape (n_points_x, n_points_y, 2)
    diff = x[:, None, :] - y[None, :, :]
    dx = diff[..., 0]
    dy = diff[..., 1]
    return np.sqrt(dx * dx + dy * dy)
