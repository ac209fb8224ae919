from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import agent_table, first_mover_table
from ..plots.chart import plot_game_length, plot_outcomes


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze drop-four series CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing series_results_*.csv")
    ap.add_argument("--pattern", type=str, default="series_results_*.csv", help="Glob pattern for selecting latest file")
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--no-plots", action="store_true", help="Only print tables")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Games: {len(df):,}")

    table = agent_table(df)
    print("\n=== Agents ===")
    print(table.to_string(index=False))

    print("\n=== Outcomes by first mover ===")
    print(first_mover_table(df).to_string(index=False))

    if not args.no_plots:
        outdir = Path(args.outdir)
        plot_outcomes(table, outdir)
        plot_game_length(df, outdir)
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
