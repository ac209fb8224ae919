from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


DEFAULT_EXPECTED_COLS = [
    "game", "first", "agent_1", "agent_2", "winner", "moves",
    "ms_1", "ms_2", "nodes_1", "nodes_2",
]

NUMERIC_COLS = ["game", "first", "moves", "ms_1", "ms_2", "nodes_1", "nodes_2"]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = tuple(DEFAULT_EXPECTED_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    # winner is "1", "2" or "D"; keep it textual even when no game was drawn
    df = pd.read_csv(spec.csv_path, dtype={"winner": str, "agent_1": str, "agent_2": str})

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.expected_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, NUMERIC_COLS)
    df["winner"] = df["winner"].str.strip().str.upper()

    bad = ~df["winner"].isin(["1", "2", "D"])
    if bad.any():
        raise ValueError(f"Unexpected winner values: {sorted(df.loc[bad, 'winner'].unique())}")

    return df


def load_latest_from_dir(results_dir: Path, pattern: str = "series_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
