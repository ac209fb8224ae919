from __future__ import annotations
from typing import Iterator, Sequence, Tuple

from dropfour.core.board import Board
from dropfour.types import Player, Cell

Window = Tuple[Cell, Cell, Cell, Cell]

FOUR_SCORE = 1000
THREE_SCORE = 100
TWO_SCORE = 20
INNER_PAIR_BONUS = 10


def score_window(window: Sequence[Cell], player: Player) -> int:
    own = sum(1 for v in window if v == player)
    empty = sum(1 for v in window if v is None)

    # windows shared with the opponent match no row here; only the bonus applies
    score = 0
    if own == 4:
        score += FOUR_SCORE
    elif own == 3 and empty == 1:
        score += THREE_SCORE
    elif own == 2 and empty == 2:
        score += TWO_SCORE

    # contiguous middle beats a scattered pair
    if window[1] == player and window[2] == player:
        score += INNER_PAIR_BONUS

    return score


def iter_windows(board: Board) -> Iterator[Window]:
    g = board.grid
    rows, cols = board.rows, board.cols

    # Horizontal
    for r in range(rows):
        for c in range(cols - 3):
            yield (g[r][c], g[r][c + 1], g[r][c + 2], g[r][c + 3])

    # Vertical
    for r in range(rows - 3):
        for c in range(cols):
            yield (g[r][c], g[r + 1][c], g[r + 2][c], g[r + 3][c])

    # Diagonal down-right
    for r in range(rows - 3):
        for c in range(cols - 3):
            yield (g[r][c], g[r + 1][c + 1], g[r + 2][c + 2], g[r + 3][c + 3])

    # Diagonal up-right
    for r in range(3, rows):
        for c in range(cols - 3):
            yield (g[r][c], g[r - 1][c + 1], g[r - 2][c + 2], g[r - 3][c + 3])


def window_sum(board: Board, player: Player) -> int:
    return sum(score_window(w, player) for w in iter_windows(board))
