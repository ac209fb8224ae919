from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time
from typing import Optional

from dropfour.ai.base import NoValidMovesError
from dropfour.config import CPU, MINIMAX_DEPTH
from dropfour.core.board import Board
from dropfour.core.rules import count_three_in_row, find_winner, other
from dropfour.core.scoring import window_sum
from dropfour.game.state import GameState
from dropfour.types import Move, Player

logger = logging.getLogger(__name__)

WIN_SCORE = 1_000_000
CENTER_WEIGHT = 30
IMMEDIATE_WIN_THREAT = 1000
THREE_IN_ROW_THREAT = 50
DEFENSE_WEIGHT = 2


def threat_score(board: Board, player: Player) -> int:
    score = 0

    # Columns where a drop wins right now
    for c in range(board.cols):
        if not board.is_valid_move(c):
            continue
        test = board.copy()
        row = test.make_move(c, player)
        if row is not None and test.check_win(row, c, player):
            score += IMMEDIATE_WIN_THREAT

    score += count_three_in_row(board, player) * THREE_IN_ROW_THREAT
    return score


def evaluate_position(board: Board, max_player: Player) -> int:
    """
    Static evaluation from `max_player`'s point of view:
      center column control + window scores + threats (opponent threats count double).
    """
    min_player = other(max_player)
    score = 0

    center = board.cols // 2
    for r in range(board.rows):
        p = board.grid[r][center]
        if p == max_player:
            score += CENTER_WEIGHT
        elif p == min_player:
            score -= CENTER_WEIGHT

    score += window_sum(board, max_player)
    score -= window_sum(board, min_player)

    score += threat_score(board, max_player)
    score -= threat_score(board, min_player) * DEFENSE_WEIGHT

    return score


@dataclass(slots=True)
class MinimaxAgent:
    """
    Hardcore difficulty: fixed-depth minimax with alpha-beta pruning.

    Every simulated move is played on a fresh copy of the board, so the
    caller's board is never touched and sibling branches share nothing.
    Scores are always from `max_player`'s point of view.
    """
    name: str = "Hardcore (minimax)"
    depth: int = MINIMAX_DEPTH
    max_player: Player = CPU

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError("Search depth must be at least 1.")

    def choose_move(self, state: GameState) -> Move:
        return self.choose_column(state.board, state.current)

    def choose_column(self, board: Board, maximizing_player: Player = CPU) -> Move:
        moves = board.valid_moves()
        if not moves:
            raise NoValidMovesError()

        self.max_player = maximizing_player
        self._nodes = 0
        self._cutoffs = 0

        start = time.perf_counter()

        best_col = moves[0]
        best_score = -inf

        for c in moves:
            test = board.copy()
            test.make_move(c, maximizing_player)
            score = self.minimax(test, self.depth - 1, False, -inf, inf)
            if score > best_score:
                best_score = score
                best_col = c

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": best_score,
            "move_col": int(best_col) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "minimax player=%s chose col=%d eval=%s nodes=%d cutoffs=%d",
            maximizing_player, best_col, best_score, self._nodes, self._cutoffs,
        )
        return best_col

    def terminal_score(self, board: Board, depth: int) -> Optional[int]:
        winner = find_winner(board)
        if winner == self.max_player:
            return WIN_SCORE + depth   # sooner wins keep more depth
        if winner is not None:
            return -WIN_SCORE - depth  # later losses lose less
        if board.is_full():
            return 0
        return None

    def minimax(self, board: Board, depth: int, maximizing: bool, alpha: float, beta: float) -> float:
        self._nodes += 1

        term = self.terminal_score(board, depth)
        if term is not None:
            return term
        if depth == 0:
            return evaluate_position(board, self.max_player)

        to_play = self.max_player if maximizing else other(self.max_player)
        best = -inf if maximizing else inf

        for c in range(board.cols):
            if not board.is_valid_move(c):
                continue

            test = board.copy()
            test.make_move(c, to_play)
            score = self.minimax(test, depth - 1, not maximizing, alpha, beta)

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, best)
            else:
                best = min(best, score)
                beta = min(beta, best)

            if beta <= alpha:
                self._cutoffs += 1
                break

        return best
