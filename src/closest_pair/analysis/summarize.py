from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Dict, List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd

ALGORITHM_NAMES = {
    "divide_and_conquer": "Divide and Conquer",
    "brute_force": "Brute Force",
    "kdtree": "KD-tree (scikit-learn)",
}


def _format_mean_std(mean_val: float | None, std_val: float | None, precision: int = 4) -> str:
    if mean_val is None or pd.isna(mean_val):
        return "N/A"
    if std_val is None or pd.isna(std_val):
        std_val = 0.0
    fmt = f"{{:.{precision}f}} ± {{:.{precision}f}}"
    return fmt.format(mean_val, std_val)


def _load_raw(raw_root: Path) -> pd.DataFrame:
    parts: List[pd.DataFrame] = []
    parquet_files = sorted(raw_root.glob("*.parquet"))
    if not parquet_files:
        raise FileNotFoundError(
            f"No Parquet files found under {raw_root}. "
            f"Make sure the benchmark completed successfully and generated result files."
        )
    print(f"Loading {len(parquet_files)} result files from {raw_root}")
    for p in parquet_files:
        try:
            parts.append(pd.read_parquet(p))
        except Exception as e:
            print(f"Warning: Failed to load {p}: {e}")
            continue
    if not parts:
        raise FileNotFoundError(f"Could not load any Parquet files from {raw_root}")
    return pd.concat(parts, ignore_index=True)


def _aggregate(df: pd.DataFrame) -> pd.DataFrame:
    group_cols = ["dataset", "n", "algorithm"]

    agg = df.groupby(group_cols)["runtime_sec"].agg(["mean", "std", "count"])
    agg.columns = [f"runtime_sec_{stat}" for stat in agg.columns]
    agg["agreement_rate"] = df.groupby(group_cols)["agrees"].mean()
    agg["distance_min"] = df.groupby(group_cols)["distance"].min()
    return agg.reset_index()


def _create_runtime_table(summary: pd.DataFrame) -> pd.DataFrame:
    """Runtime per (dataset, n) with one column per algorithm."""
    rows = []
    for (dataset, n), group in summary.groupby(["dataset", "n"], sort=True):
        row: Dict = {"Dataset": dataset, "n": int(n)}
        for alg, label in ALGORITHM_NAMES.items():
            alg_data = group[group["algorithm"] == alg]
            if alg_data.empty:
                row[f"{label} (s)"] = "N/A"
                continue
            row[f"{label} (s)"] = _format_mean_std(
                float(alg_data["runtime_sec_mean"].iloc[0]),
                float(alg_data["runtime_sec_std"].iloc[0]),
            )
        rows.append(row)
    return pd.DataFrame(rows)


def _mismatches(raw: pd.DataFrame) -> pd.DataFrame:
    return raw[~raw["agrees"].astype(bool)].reset_index(drop=True)


def _save_table_artifacts(raw: pd.DataFrame, summary: pd.DataFrame, output_root: Path) -> None:
    output_root.mkdir(parents=True, exist_ok=True)

    summary.to_parquet(output_root / "summary.parquet", index=False)
    summary.to_csv(output_root / "summary.csv", index=False)

    runtime_table = _create_runtime_table(summary)
    runtime_table.to_csv(output_root / "table_runtime_comparison.csv", index=False)
    latex = runtime_table.to_latex(index=False, escape=False, float_format=None)
    latex = latex.replace(" ± ", " $\\pm$ ")
    (output_root / "table_runtime_comparison.tex").write_text(latex, encoding="utf-8")

    mismatches = _mismatches(raw)
    mismatches.to_csv(output_root / "mismatches.csv", index=False)
    if not mismatches.empty:
        print(f"Warning: {len(mismatches)} runs disagree with the reference distance")

    meta: Dict = {
        "tables": ["table_runtime_comparison"],
        "algorithms": sorted(summary["algorithm"].unique().tolist()),
        "datasets": sorted(summary["dataset"].unique().tolist()),
        "mismatches": int(len(mismatches)),
        "description": "Aggregated closest-pair benchmark results (runtime mean ± std).",
    }
    (output_root / "summary.json").write_text(json.dumps(meta, indent=2), encoding="utf-8")


def _plot_and_describe(summary: pd.DataFrame, output_root: Path, dataset: str) -> Path:
    """Log-log runtime plot per algorithm for one dataset kind, with sidecar text/JSON."""
    sub = summary[summary["dataset"] == dataset]

    fig, ax = plt.subplots(figsize=(6, 4))
    for alg in sorted(sub["algorithm"].unique()):
        alg_data = sub[sub["algorithm"] == alg].sort_values("n")
        ax.errorbar(
            alg_data["n"],
            alg_data["runtime_sec_mean"],
            yerr=alg_data["runtime_sec_std"].fillna(0.0),
            marker="o",
            capsize=3,
            label=ALGORITHM_NAMES.get(alg, alg),
        )

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Number of points")
    ax.set_ylabel("Runtime (s)")
    ax.set_title(f"Closest-pair runtime on {dataset} points")
    ax.legend()
    fig.tight_layout()

    fname = f"runtime_{dataset}"
    img_path = output_root / f"{fname}.png"
    fig.savefig(img_path, dpi=200)
    plt.close(fig)

    description = (
        f"Log-log plot of mean runtime (error bars: std over repetitions) against the "
        f"number of points for the {dataset} dataset kind. Lower is better."
    )
    (output_root / f"{fname}.txt").write_text(description, encoding="utf-8")

    meta = {
        "figure": img_path.name,
        "dataset": dataset,
        "ylabel": "Runtime (s)",
        "group_by": ["algorithm", "n"],
        "description": description,
    }
    (output_root / f"{fname}.json").write_text(json.dumps(meta, indent=2), encoding="utf-8")
    return img_path


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Aggregate closest-pair benchmark results.")
    parser.add_argument(
        "--raw",
        type=Path,
        required=True,
        help="Directory containing raw Parquet logs.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Directory for summary tables and plots.",
    )

    args = parser.parse_args(argv)

    raw_df = _load_raw(args.raw)
    summary = _aggregate(raw_df)
    _save_table_artifacts(raw_df, summary, args.output)

    for dataset in sorted(summary["dataset"].unique()):
        _plot_and_describe(summary, args.output, dataset)


if __name__ == "__main__":
    main()
