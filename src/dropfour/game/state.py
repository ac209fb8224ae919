from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from dropfour.core.board import Board
from dropfour.types import Player, Move


@dataclass(frozen=True, slots=True)
class MoveRecord:
    player: Player
    col: Move
    row: int


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player = 1
    last_status: str = "Player 1 starts."
    # append-only; the board itself keeps no history
    history: List[MoveRecord] = field(default_factory=list)
