from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


REQUIRED_COLS = ["x_agent", "o_agent", "winner"]

NUMERIC_COLS = [
    "game",
    "moves",
    "x_time_ms", "x_nodes",
    "o_time_ms", "o_nodes",
]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    required_cols: tuple[str, ...] = tuple(REQUIRED_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.required_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, NUMERIC_COLS)

    df["winner"] = df["winner"].astype(str).str.strip().str.upper()
    df = df[df["winner"].isin(["X", "O", "D"])].copy()

    return df


def load_latest_from_dir(results_dir: Path, pattern: str = "bench_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
