from __future__ import annotations

import argparse
import csv
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.ai.pick import AGENTS, make_agent
from dropfour.config import COLS, LOG_LEVEL, MAX_DIM, MIN_DIM, ROWS, GameSettings
from dropfour.game.controller import play_headless
from dropfour.game.results import GameResult, Scoreboard

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "game", "first", "agent_1", "agent_2", "winner", "moves",
    "ms_1", "ms_2", "nodes_1", "nodes_2",
]


@dataclass(frozen=True)
class GameRecord:
    game: int
    first: int
    agent_1: str
    agent_2: str
    result: GameResult
    ms_1: int
    ms_2: int
    nodes_1: int
    nodes_2: int

    def row(self) -> list:
        return [
            self.game, self.first, self.agent_1, self.agent_2,
            self.result.label, self.result.moves,
            self.ms_1, self.ms_2, self.nodes_1, self.nodes_2,
        ]


def _build_agent(difficulty: str, depth: Optional[int]):
    agent = make_agent(difficulty)
    if depth is not None and isinstance(agent, MinimaxAgent):
        # through the constructor so the depth check runs
        agent = MinimaxAgent(depth=depth)
    return agent


def run_series(
    difficulty_1: str,
    difficulty_2: str,
    games: int = 7,
    rows: int = ROWS,
    cols: int = COLS,
    opening_plies: int = 2,
    seed: int = 1234,
    depth: Optional[int] = None,
) -> tuple[Scoreboard, List[GameRecord]]:
    """
    Play `games` headless games, alternating who moves first.
    Seeded random opening plies keep deterministic agents from repeating one game.
    """
    GameSettings(rows=rows, cols=cols, difficulty=difficulty_1)
    GameSettings(rows=rows, cols=cols, difficulty=difficulty_2)
    if depth is not None:
        MinimaxAgent(depth=depth)

    score = Scoreboard()
    records: List[GameRecord] = []

    for g in range(games):
        a1 = _build_agent(difficulty_1, depth)
        a2 = _build_agent(difficulty_2, depth)

        first = 1 if g % 2 == 0 else 2
        result, stats = play_headless(
            a1, a2, rows, cols,
            first=first,
            opening_plies=opening_plies,
            seed=seed + g,
        )
        score.record(result)
        records.append(GameRecord(
            game=g + 1,
            first=first,
            agent_1=difficulty_1,
            agent_2=difficulty_2,
            result=result,
            ms_1=stats[1]["time_ms"],
            ms_2=stats[2]["time_ms"],
            nodes_1=stats[1]["nodes"],
            nodes_2=stats[2]["nodes"],
        ))
        logger.info("game %d/%d: winner=%s moves=%d", g + 1, games, result.label, result.moves)

    return score, records


def write_csv(records: List[GameRecord], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for rec in records:
            w.writerow(rec.row())
    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play a series of CPU vs CPU games.")
    ap.add_argument("--p1", type=str, default="easy", choices=list(AGENTS), help="Difficulty of player 1")
    ap.add_argument("--p2", type=str, default="hardcore", choices=list(AGENTS), help="Difficulty of player 2")
    ap.add_argument("--games", type=int, default=7, help="Number of games")
    ap.add_argument("--rows", type=int, default=ROWS, help=f"Board rows ({MIN_DIM}-{MAX_DIM})")
    ap.add_argument("--cols", type=int, default=COLS, help=f"Board columns ({MIN_DIM}-{MAX_DIM})")
    ap.add_argument("--opening-plies", type=int, default=2, help="Random moves played before the agents take over")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--depth", type=int, default=None, help="Override minimax search depth")
    ap.add_argument("--csv", type=str, default=None, help="Write one row per game to this CSV")
    ap.add_argument("--results-dir", type=str, default=None, help="Write series_results_<timestamp>.csv here")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        score, records = run_series(
            args.p1, args.p2,
            games=args.games,
            rows=args.rows,
            cols=args.cols,
            opening_plies=args.opening_plies,
            seed=args.seed,
            depth=args.depth,
        )
    except ValueError as e:
        print(f"error: {e}")
        return 2

    print(f"\n=== SERIES RESULTS ({args.rows}x{args.cols}, {score.games} games) ===")
    print(score.summary(f"P1 {args.p1}", f"P2 {args.p2}"))

    out_path: Optional[Path] = None
    if args.csv:
        out_path = Path(args.csv)
    elif args.results_dir:
        ts = time.strftime("%Y%m%d_%H%M%S")
        out_path = Path(args.results_dir) / f"series_results_{ts}.csv"

    if out_path is not None:
        write_csv(records, out_path)
        print(f"Wrote CSV: {out_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
