from __future__ import annotations

from typing import Callable, Dict

import numpy as np

PointGenerator = Callable[[int, int | None], np.ndarray]


def uniform_points(n: int, seed: int | None = None, scale: float = 1000.0) -> np.ndarray:
    """Points drawn uniformly from the square [0, scale)²."""
    rng = np.random.default_rng(seed)
    return rng.uniform(0.0, scale, size=(n, 2))


def clustered_points(
    n: int,
    seed: int | None = None,
    n_clusters: int = 8,
    spread: float = 5.0,
    scale: float = 1000.0,
) -> np.ndarray:
    """Gaussian blobs around uniformly placed centres."""
    rng = np.random.default_rng(seed)
    centers = rng.uniform(0.0, scale, size=(n_clusters, 2))
    labels = rng.integers(0, n_clusters, size=n)
    return centers[labels] + rng.normal(0.0, spread, size=(n, 2))


def collinear_points(n: int, seed: int | None = None) -> np.ndarray:
    """Shuffled points on the x-axis with random gaps in [1, 10)."""
    rng = np.random.default_rng(seed)
    xs = np.cumsum(rng.uniform(1.0, 10.0, size=n))
    xy = np.column_stack([xs, np.zeros(n)])
    return xy[rng.permutation(n)]


def shared_x_points(n: int, seed: int | None = None, n_columns: int = 4) -> np.ndarray:
    """Points on a handful of vertical lines, so many points share each x.

    This is the hard case for splitting the y-ordered view: the dividing
    line almost always passes through several points.
    """
    rng = np.random.default_rng(seed)
    xs = rng.integers(0, n_columns, size=n).astype(float)
    ys = rng.uniform(0.0, 1000.0, size=n)
    return np.column_stack([xs, ys])


def duplicate_heavy_points(n: int, seed: int | None = None) -> np.ndarray:
    """Integer grid points drawn with replacement; coincident points are common."""
    rng = np.random.default_rng(seed)
    side = max(2, int(np.sqrt(n)))
    return rng.integers(0, side, size=(n, 2)).astype(float)


GENERATORS: Dict[str, PointGenerator] = {
    "uniform": uniform_points,
    "clustered": clustered_points,
    "collinear": collinear_points,
    "shared_x": shared_x_points,
    "duplicate_heavy": duplicate_heavy_points,
}


def generate_points(kind: str, n: int, seed: int | None = None) -> np.ndarray:
    """Generate `n` points of the named kind (see ``GENERATORS``)."""
    if n < 0:
        raise ValueError("n must be non-negative.")
    try:
        generator = GENERATORS[kind]
    except KeyError:
        raise ValueError(f"Unknown dataset kind: {kind!r}") from None
    return generator(n, seed)
