from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Optional, Tuple

from dropfour.ai.base import NoValidMovesError
from dropfour.config import CPU
from dropfour.core.board import AXES, Board
from dropfour.core.rules import other
from dropfour.game.state import GameState
from dropfour.types import Move, Player

logger = logging.getLogger(__name__)

THREAT_BONUS = 150


def _run_tier(run: int) -> int:
    if run >= 4:
        return 1000
    if run == 3:
        return 100
    if run == 2:
        return 20
    return 0


def _wins_with(board: Board, col: int, player: Player) -> bool:
    test = board.copy()
    row = test.make_move(col, player)
    return row is not None and test.check_win(row, col, player)


def offensive_score(board: Board, row: int, col: int, player: Player) -> int:
    """Score the piece `player` just landed on (row, col): run tiers per axis + threat bonus."""
    runs = [board.run_length(row, col, dr, dc, player) for dr, dc in AXES]
    score = sum(_run_tier(n) for n in runs)
    if any(n >= 3 for n in runs):
        score += THREAT_BONUS
    return score


def greedy_pick(board: Board, player: Player, opponent: Player) -> Tuple[Move, str, Optional[int]]:
    """
    1-ply priorities: block > win > best offensive score > first valid column.
    Returns (column, reason, score).
    """
    if not board.valid_moves():
        raise NoValidMovesError()

    # 1) Block the opponent's immediate win
    for c in range(board.cols):
        if board.is_valid_move(c) and _wins_with(board, c, opponent):
            return Move(c), "block", None

    # 2) Take our own immediate win
    for c in range(board.cols):
        if board.is_valid_move(c) and _wins_with(board, c, player):
            return Move(c), "win", None

    # 3) Best offensive score, first-found wins ties
    best_col: Optional[int] = None
    best_score = -999_999
    for c in range(board.cols):
        if not board.is_valid_move(c):
            continue
        test = board.copy()
        row = test.make_move(c, player)
        if row is None:
            continue
        s = offensive_score(test, row, c, player)
        if s > best_score:
            best_score = s
            best_col = c

    if best_col is not None:
        return Move(best_col), "score", best_score

    # 4) Fallback
    return board.valid_moves()[0], "fallback", None


def greedy_column(board: Board, player: Player = CPU, opponent: Optional[Player] = None) -> Move:
    if opponent is None:
        opponent = other(player)
    return greedy_pick(board, player, opponent)[0]


@dataclass(slots=True)
class GreedyAgent:
    """
    Easy difficulty: one ply of lookahead, no notion of counter-threats
    beyond blocking an immediate opponent win.
    """
    name: str = "Easy (greedy)"
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        return self.choose_column(state.board, state.current)

    def choose_column(self, board: Board, player: Player = CPU, opponent: Optional[Player] = None) -> Move:
        if opponent is None:
            opponent = other(player)

        start = time.perf_counter()
        col, note, score = greedy_pick(board, player, opponent)
        elapsed = time.perf_counter() - start

        self.last_info = {
            "depth": 1,
            "nodes": len(board.valid_moves()),
            "cutoffs": 0,
            "eval": score,
            "move_col": int(col) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
            "note": note,
        }
        logger.debug("greedy player=%s chose col=%d (%s, score=%s)", player, col, note, score)
        return col

