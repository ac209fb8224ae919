from __future__ import annotations
from typing import Optional, List, Tuple

from dropfour.config import CONNECT_N
from dropfour.core.board import AXES, Board
from dropfour.types import Player

Coord = Tuple[int, int]  # (row, col)


def other(player: Player) -> Player:
    return 1 if player == 2 else 2


def find_winner(board: Board) -> Optional[Player]:
    """
    Whole-board scan: first occupied cell (row-major) that sits on a run of four.
    Used where there is no "last move" to anchor a local check.
    """
    for r in range(board.rows):
        for c in range(board.cols):
            p = board.grid[r][c]
            if p is not None and board.check_win(r, c, p):
                return p
    return None


def winning_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    g = board.grid
    for r in range(board.rows):
        for c in range(board.cols):
            p = g[r][c]
            if p is None:
                continue
            for dr, dc in AXES:
                coords = [(r + i * dr, c + i * dc) for i in range(CONNECT_N)]
                if all(board.in_bounds(rr, cc) and g[rr][cc] == p for rr, cc in coords):
                    return p, coords
    return None


def is_draw(board: Board) -> bool:
    return board.is_full() and find_winner(board) is None


def count_three_in_row(board: Board, player: Player) -> int:
    """
    Count starting cells of three consecutive `player` pieces going right, down,
    down-right and down-left. A run of four counts twice along its axis.
    """
    g = board.grid
    rows, cols = board.rows, board.cols
    count = 0

    for r in range(rows):
        for c in range(cols):
            if g[r][c] != player:
                continue
            # Horizontal
            if c + 2 < cols and g[r][c + 1] == player and g[r][c + 2] == player:
                count += 1
            # Vertical
            if r + 2 < rows and g[r + 1][c] == player and g[r + 2][c] == player:
                count += 1
            # Diagonal down-right
            if r + 2 < rows and c + 2 < cols and g[r + 1][c + 1] == player and g[r + 2][c + 2] == player:
                count += 1
            # Diagonal down-left
            if r + 2 < rows and c - 2 >= 0 and g[r + 1][c - 1] == player and g[r + 2][c - 2] == player:
                count += 1

    return count
