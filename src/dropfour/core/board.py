# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from dropfour.config import ROWS, COLS, CONNECT_N
from dropfour.types import Cell, Player, Move

# (d_row, d_col) for horizontal, vertical, down-right and up-right
AXES = ((0, 1), (1, 0), (1, 1), (-1, 1))


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < CONNECT_N or self.cols < CONNECT_N:
            raise ValueError(f"Board must be at least {CONNECT_N}x{CONNECT_N}.")
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
        elif len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError("Grid shape does not match rows/cols.")

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [row[:] for row in self.grid])

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_valid_move(self, col: int) -> bool:
        c = int(col)
        if c < 0 or c >= self.cols:
            return False
        return self.grid[0][c] is None

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def make_move(self, col: int, player: Player) -> Optional[int]:
        """
        Drop a piece for `player` into `col`.
        Returns the row it landed on, or None (board untouched) if the move is invalid.
        """
        if not self.is_valid_move(col):
            return None

        c = int(col)
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = player
                return r
        return None

    def drop(self, col: Move, player: Player) -> int:
        """make_move for interactive callers: rejects with a readable ValueError."""
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        row = self.make_move(c, player)
        if row is None:
            raise ValueError("Column is full.")
        return row

    def run_length(self, row: int, col: int, d_row: int, d_col: int, player: Player) -> int:
        """Consecutive `player` cells through (row, col) along one axis, both directions."""
        count = 1

        r, c = row + d_row, col + d_col
        while self.in_bounds(r, c) and self.grid[r][c] == player:
            count += 1
            r, c = r + d_row, c + d_col

        r, c = row - d_row, col - d_col
        while self.in_bounds(r, c) and self.grid[r][c] == player:
            count += 1
            r, c = r - d_row, c - d_col

        return count

    def check_win(self, row: int, col: int, player: Player) -> bool:
        """
        Local win test: only meaningful right after `player` landed on (row, col),
        since any new four has to pass through the last piece.
        """
        return any(self.run_length(row, col, dr, dc, player) >= CONNECT_N for dr, dc in AXES)
