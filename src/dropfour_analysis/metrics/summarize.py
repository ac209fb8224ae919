from __future__ import annotations

import pandas as pd


def seat_rows(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per (game, seat): who played, whether they moved first, and how it went.
    """
    frames = []
    for seat in (1, 2):
        part = pd.DataFrame({
            "game": df["game"],
            "name": df[f"agent_{seat}"],
            "seat": seat,
            "first": df["first"] == seat,
            "win": df["winner"] == str(seat),
            "draw": df["winner"] == "D",
            "moves": df["moves"],
            "time_ms": df[f"ms_{seat}"],
            "nodes": df[f"nodes_{seat}"],
        })
        part["loss"] = ~(part["win"] | part["draw"])
        frames.append(part)
    return pd.concat(frames, ignore_index=True)


def agent_table(df: pd.DataFrame) -> pd.DataFrame:
    seats = seat_rows(df)
    g = seats.groupby(["name", "seat"], as_index=False).agg(
        games=("game", "count"),
        wins=("win", "sum"),
        draws=("draw", "sum"),
        losses=("loss", "sum"),
        time_ms=("time_ms", "sum"),
        nodes=("nodes", "sum"),
    )
    g["points"] = g["wins"] + 0.5 * g["draws"]
    g["ppg"] = g["points"] / g["games"]

    # roughly half the plies of a game belong to each seat
    plies = seats.groupby(["name", "seat"])["moves"].sum().div(2).clip(lower=1).to_numpy()
    g["avg_ms_per_move"] = g["time_ms"] / plies

    return g.sort_values(["ppg", "wins"], ascending=False).reset_index(drop=True)


def first_mover_table(df: pd.DataFrame) -> pd.DataFrame:
    """Outcome counts split by which seat moved first."""
    out = df.assign(outcome=df["winner"].map({"1": "p1_win", "2": "p2_win", "D": "draw"}))
    counts = out.groupby(["first", "outcome"]).size().unstack(fill_value=0)
    for col in ("p1_win", "p2_win", "draw"):
        if col not in counts.columns:
            counts[col] = 0
    return counts[["p1_win", "p2_win", "draw"]].reset_index()
