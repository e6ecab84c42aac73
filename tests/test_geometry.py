from __future__ import annotations

import numpy as np
import pytest

from closest_pair.geometry import Point, as_point_array, euclidean_distance, pairwise_euclidean


def test_pairwise_euclidean_matches_manual_norm() -> None:
    X = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 2.0]], dtype=float)
    D = pairwise_euclidean(X)

    expected = np.array(
        [
            [0.0, 1.0, 2.0],
            [1.0, 0.0, np.sqrt(5.0)],
            [2.0, np.sqrt(5.0), 0.0],
        ]
    )
    assert np.allclose(D, expected)
    assert pairwise_euclidean(X, X[:1]).shape == (3, 1)


def test_scalar_and_vectorised_distances_agree_exactly() -> None:
    rng = np.random.default_rng(0)
    X = rng.normal(scale=100.0, size=(12, 2))
    D = pairwise_euclidean(X)

    pts = [Point(float(x), float(y)) for x, y in X]
    for i, a in enumerate(pts):
        for j, b in enumerate(pts):
            assert euclidean_distance(a, b) == D[i, j]


def test_euclidean_distance_basic() -> None:
    assert euclidean_distance(Point(0.0, 0.0), Point(3.0, 4.0)) == 5.0
    assert euclidean_distance(Point(-1.5, 2.0), Point(-1.5, 2.0)) == 0.0


def test_points_are_ordered_values() -> None:
    pts = [Point(1.0, 0.0), Point(0.0, 5.0), Point(0.0, 1.0)]
    assert sorted(pts) == [Point(0.0, 1.0), Point(0.0, 5.0), Point(1.0, 0.0)]
    assert len({Point(2.0, 2.0), Point(2.0, 2.0)}) == 1
    assert Point(1.0, 2.0).as_tuple() == (1.0, 2.0)


def test_as_point_array_accepts_points_pairs_and_arrays() -> None:
    expected = np.array([[0.0, 1.0], [2.0, 3.0]])

    assert np.array_equal(as_point_array([Point(0.0, 1.0), Point(2.0, 3.0)]), expected)
    assert np.array_equal(as_point_array([(0, 1), (2, 3)]), expected)
    assert np.array_equal(as_point_array(expected), expected)
    assert as_point_array([]).shape == (0, 2)

    xy = as_point_array(expected)
    assert not xy.flags.writeable
    assert expected.flags.writeable


def test_as_point_array_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        as_point_array(np.zeros((4, 3)))
    with pytest.raises(ValueError):
        as_point_array(np.array([1.0, 2.0]))
    with pytest.raises(ValueError):
        as_point_array([(0.0, np.nan), (1.0, 1.0)])
    with pytest.raises(ValueError):
        as_point_array([(0.0, np.inf)])
