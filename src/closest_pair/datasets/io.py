from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from closest_pair.geometry.point import PointsLike, as_point_array

logger = logging.getLogger(__name__)

_COLUMNS = ["x", "y"]


def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return pd.read_parquet(path)
    try:
        if suffix == ".csv":
            return pd.read_csv(path, float_precision="round_trip")
        # Plain text: one "x y" pair per line.
        df = pd.read_csv(path, sep=r"\s+", header=None, comment="#", float_precision="round_trip")
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=_COLUMNS, dtype=float)

    if df.shape[1] != len(_COLUMNS):
        raise ValueError(f"Expected one \"x y\" pair per line in {path}; got {df.shape[1]} fields.")
    df.columns = _COLUMNS
    return df


def read_points(path: Path | str) -> np.ndarray:
    """Load points from a Parquet, CSV or whitespace-separated text file.

    Parquet and CSV files must provide ``x`` and ``y`` columns. Any other
    file is read as text with one ``x y`` pair per line; lines starting with
    ``#`` are ignored.

    Returns
    -------
    np.ndarray
        Read-only array of shape (n_points, 2); empty files give (0, 2).
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Point file not found: {path}")

    try:
        df = _read_frame(path)
    except pd.errors.ParserError as exc:
        raise ValueError(f"Could not parse points from {path}: {exc}") from exc

    missing = [c for c in _COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing column(s) {missing}; expected {_COLUMNS}.")

    try:
        xy = df[_COLUMNS].to_numpy(dtype=float)
    except ValueError as exc:
        raise ValueError(f"Non-numeric coordinates in {path}: {exc}") from exc

    logger.debug(f"Read {xy.shape[0]} points from {path}")
    return as_point_array(xy)


def write_points(points: PointsLike, path: Path | str) -> Path:
    """Write points in the format implied by the file suffix (see read_points)."""
    path = Path(path)
    xy = as_point_array(points)
    df = pd.DataFrame(xy, columns=_COLUMNS)

    suffix = path.suffix.lower()
    if suffix == ".parquet":
        df.to_parquet(path, index=False)
    elif suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        lines = [f"{x!r} {y!r}\n" for x, y in xy.tolist()]
        path.write_text("".join(lines), encoding="utf-8")
    return path
