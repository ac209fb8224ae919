# src/dropfour/config.py

from __future__ import annotations
from dataclasses import dataclass

ROWS = 6
COLS = 7
CONNECT_N = 4

# Accepted board dimensions (settings dialog range)
MIN_DIM = 4
MAX_DIM = 10

# Side numbering: the human moves first as 1, the CPU answers as 2
HUMAN = 1
CPU = 2

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# AI defaults
MINIMAX_DEPTH = 6
DIFFICULTIES = ("easy", "hardcore")
DEFAULT_DIFFICULTY = "easy"

LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class GameSettings:
    rows: int = ROWS
    cols: int = COLS
    difficulty: str = DEFAULT_DIFFICULTY

    def __post_init__(self) -> None:
        for label, value in (("rows", self.rows), ("cols", self.cols)):
            if not MIN_DIM <= value <= MAX_DIM:
                raise ValueError(f"{label} must be between {MIN_DIM} and {MAX_DIM} (got {value}).")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty {self.difficulty!r}. Choose one of: {', '.join(DIFFICULTIES)}.")
