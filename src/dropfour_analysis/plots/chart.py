from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_outcomes(table: pd.DataFrame, outdir: Path) -> Path:
    """Stacked win/draw/loss bars per agent seat."""
    _ensure_dir(outdir)

    labels = [f"{n} (P{s})" for n, s in zip(table["name"], table["seat"])]
    wins = table["wins"].astype(float)
    draws = table["draws"].astype(float)
    losses = table["losses"].astype(float)

    fig = plt.figure(figsize=(8, 4))
    plt.bar(labels, wins, label="wins")
    plt.bar(labels, draws, bottom=wins, label="draws")
    plt.bar(labels, losses, bottom=wins + draws, label="losses")
    plt.title("Series outcomes")
    plt.ylabel("games")
    plt.legend()

    out = outdir / "outcomes.png"
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_game_length(df: pd.DataFrame, outdir: Path) -> Path:
    _ensure_dir(outdir)

    fig = plt.figure()
    plt.hist(df["moves"].dropna(), bins=20)
    plt.title("Histogram: moves per game")
    plt.xlabel("moves")
    plt.ylabel("count")

    out = outdir / "hist_moves.png"
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out
