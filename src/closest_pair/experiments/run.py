from __future__ import annotations

import argparse
import logging
import time
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Tuple

import numpy as np
import pandas as pd
from sklearn.neighbors import NearestNeighbors
from tqdm.auto import tqdm

from closest_pair.algorithms import brute_force_closest_pair, closest_pair
from closest_pair.datasets import GENERATORS, generate_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkConfig:
    """Configuration for a benchmark sweep.

    Attributes
    ----------
    sizes:
        Point counts to benchmark for every dataset kind.
    kinds:
        Dataset kinds, keys of ``closest_pair.datasets.GENERATORS``.
    repetitions:
        Seeded repetitions per (kind, size); repetition ``r`` uses seed ``r``.
    brute_force_limit:
        Largest size for which the O(n²) reference solver is run.
    tolerance:
        Relative tolerance used when checking that algorithms agree.
    """

    sizes: Tuple[int, ...] = (100, 1_000, 10_000)
    kinds: Tuple[str, ...] = tuple(GENERATORS)
    repetitions: int = 5
    brute_force_limit: int = 2_000
    tolerance: float = 1e-9

    def __post_init__(self) -> None:
        if self.repetitions < 1:
            raise ValueError("repetitions must be at least 1.")
        if any(n < 2 for n in self.sizes):
            raise ValueError("Every benchmark size must be at least 2.")
        unknown = [k for k in self.kinds if k not in GENERATORS]
        if unknown:
            raise ValueError(f"Unknown dataset kind(s): {unknown}")
        if self.brute_force_limit < 0:
            raise ValueError("brute_force_limit must be non-negative.")
        if self.tolerance < 0:
            raise ValueError("tolerance must be non-negative.")


def kdtree_closest_distance(xy: np.ndarray) -> float:
    """Closest-pair distance from a KD-tree 2-nearest-neighbour query."""
    nn = NearestNeighbors(n_neighbors=2, algorithm="kd_tree").fit(xy)
    dists, _ = nn.kneighbors(xy)
    # Column 0 is each point itself (or a coincident copy).
    return float(np.min(dists[:, 1]))


def _timed(fn: Callable[[np.ndarray], float], xy: np.ndarray) -> Tuple[float, float]:
    t0 = time.perf_counter()
    distance = fn(xy)
    t1 = time.perf_counter()
    return distance, t1 - t0


def _algorithms(n: int, config: BenchmarkConfig) -> Dict[str, Callable[[np.ndarray], float]]:
    algorithms: Dict[str, Callable[[np.ndarray], float]] = {
        "divide_and_conquer": lambda xy: closest_pair(xy).distance,
        "kdtree": kdtree_closest_distance,
    }
    if n <= config.brute_force_limit:
        algorithms["brute_force"] = lambda xy: brute_force_closest_pair(xy).distance
    return algorithms


def _run_dataset_suite(kind: str, config: BenchmarkConfig) -> List[Dict]:
    rows: List[Dict] = []

    for n in config.sizes:
        for rep in tqdm(range(config.repetitions), desc=f"{kind} n={n}", leave=False):
            seed = rep
            xy = generate_points(kind, n, seed)

            measured: Dict[str, Tuple[float, float]] = {}
            for name, fn in _algorithms(n, config).items():
                try:
                    measured[name] = _timed(fn, xy)
                except Exception as exc:
                    logger.warning(f"  Error in {name} ({kind}, n={n}, rep={rep}): {exc}")
                    logger.debug(traceback.format_exc())
                    continue

            if not measured:
                continue
            reference_name = next(
                name for name in ("brute_force", "kdtree", "divide_and_conquer") if name in measured
            )
            reference = measured[reference_name][0]

            for name, (distance, runtime) in measured.items():
                agrees = bool(np.isclose(distance, reference, rtol=config.tolerance, atol=0.0))
                if not agrees:
                    logger.warning(
                        f"  {name} disagrees with {reference_name} ({kind}, n={n}, rep={rep}): "
                        f"{distance!r} != {reference!r}"
                    )
                rows.append(
                    {
                        "dataset": kind,
                        "n": int(n),
                        "algorithm": name,
                        "repetition": rep,
                        "seed": seed,
                        "distance": float(distance),
                        "runtime_sec": float(runtime),
                        "agrees": agrees,
                    }
                )

    return rows


def _append_results(output_root: Path, kind: str, rows: List[Dict]) -> Path | None:
    if not rows:
        return None
    df = pd.DataFrame(rows)
    output_path = output_root / f"{kind}.parquet"
    if output_path.exists():
        existing_df = pd.read_parquet(output_path)
        df = pd.concat([existing_df, df], ignore_index=True)
    df.to_parquet(output_path, index=False)
    logger.info(f"  Saved {len(rows)} results for {kind} to {output_path}")
    return output_path


def run_benchmarks(
    output_root: Path,
    config: BenchmarkConfig | None = None,
    verbose: bool = False,
) -> List[Path]:
    """Benchmark every configured dataset kind and write raw Parquet results.

    Args:
        output_root: Directory to save result Parquet files (one per kind)
        config: Sweep configuration
        verbose: If True, enable DEBUG logging

    Returns:
        Paths of the result files written
    """
    if config is None:
        config = BenchmarkConfig()
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    output_root.mkdir(parents=True, exist_ok=True)
    logger.info(
        f"Benchmarking {len(config.kinds)} dataset kinds, sizes={list(config.sizes)}, "
        f"repetitions={config.repetitions}"
    )

    written: List[Path] = []
    for kind in tqdm(config.kinds, desc="Datasets", unit="dataset"):
        try:
            logger.info(f"Processing dataset kind: {kind}")
            rows = _run_dataset_suite(kind, config)
            path = _append_results(output_root, kind, rows)
        except Exception as exc:
            logger.error(f"Error processing dataset kind {kind}: {exc}")
            logger.error(traceback.format_exc())
            continue
        if path is not None:
            written.append(path)

    logger.info("=" * 60)
    logger.info("Benchmark summary:")
    logger.info(f"  Processed: {len(written)} dataset kinds")
    logger.info(f"  Result files in: {output_root}")
    logger.info("=" * 60)
    return written


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark closest-pair algorithms.")
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Directory where raw result Parquet files will be stored.",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[100, 1_000, 10_000],
        help="Number of points per generated dataset.",
    )
    parser.add_argument(
        "--kinds",
        nargs="+",
        choices=sorted(GENERATORS),
        default=list(GENERATORS),
        help="Dataset kinds to generate.",
    )
    parser.add_argument(
        "--repetitions",
        type=int,
        default=5,
        help="Number of repetitions per configuration.",
    )
    parser.add_argument(
        "--brute-force-limit",
        type=int,
        default=2_000,
        help="Largest size for which the O(n^2) reference is run. Use 0 to skip it.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    config = BenchmarkConfig(
        sizes=tuple(args.sizes),
        kinds=tuple(args.kinds),
        repetitions=args.repetitions,
        brute_force_limit=args.brute_force_limit,
    )
    run_benchmarks(args.output, config, verbose=args.verbose)


if __name__ == "__main__":
    main()
