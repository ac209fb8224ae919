from __future__ import annotations
from typing import Protocol

from dropfour.game.state import GameState
from dropfour.types import Move


class NoValidMovesError(ValueError):
    """A strategy was asked for a move on a board with no playable column."""

    def __init__(self, message: str = "No valid moves.") -> None:
        super().__init__(message)


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
