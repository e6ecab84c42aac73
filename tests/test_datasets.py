from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from closest_pair.datasets import GENERATORS, generate_points, read_points, write_points


def test_read_points_text_format(tmp_path: Path) -> None:
    path = tmp_path / "points.txt"
    path.write_text("0 0\n3 4\n# a comment\n0.5   0.5\n-1.25 7\n", encoding="utf-8")

    xy = read_points(path)
    expected = np.array([[0.0, 0.0], [3.0, 4.0], [0.5, 0.5], [-1.25, 7.0]])
    assert np.array_equal(xy, expected)


def test_read_points_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "points.txt"
    path.write_text("", encoding="utf-8")
    assert read_points(path).shape == (0, 2)


def test_read_points_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_points(tmp_path / "missing.txt")

    too_many = tmp_path / "too_many.txt"
    too_many.write_text("1 2\n1 2 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_points(too_many)

    not_numbers = tmp_path / "words.txt"
    not_numbers.write_text("a b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_points(not_numbers)

    no_columns = tmp_path / "points.csv"
    no_columns.write_text("u,v\n1,2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_points(no_columns)


def test_write_then_read_preserves_coordinates(tmp_path: Path) -> None:
    xy = generate_points("clustered", 25, seed=1)
    for name in ["points.txt", "points.csv", "points.parquet"]:
        path = write_points(xy, tmp_path / name)
        assert np.array_equal(read_points(path), xy)


def test_generators_are_seeded_and_shaped() -> None:
    for kind in GENERATORS:
        a = generate_points(kind, 64, seed=9)
        b = generate_points(kind, 64, seed=9)
        assert a.shape == (64, 2)
        assert a.dtype == float
        assert np.array_equal(a, b)
        assert generate_points(kind, 0, seed=9).shape == (0, 2)


def test_adversarial_generators_repeat_coordinates() -> None:
    shared = generate_points("shared_x", 200, seed=0)
    assert np.unique(shared[:, 0]).size <= 4

    dupes = generate_points("duplicate_heavy", 200, seed=0)
    assert np.unique(dupes, axis=0).shape[0] < 200


def test_unknown_generator() -> None:
    with pytest.raises(ValueError):
        generate_points("spiral", 10)
    with pytest.raises(ValueError):
        generate_points("uniform", -1)
