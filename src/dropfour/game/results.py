from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional

from dropfour.types import Player


@dataclass(frozen=True, slots=True)
class GameResult:
    winner: Optional[Player]   # None means draw
    moves: int

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    @property
    def label(self) -> str:
        return "D" if self.winner is None else str(self.winner)


@dataclass(slots=True)
class Scoreboard:
    """Running tally across games in one session."""
    wins: Dict[int, int] = field(default_factory=lambda: {1: 0, 2: 0})
    draws: int = 0

    def record(self, result: GameResult) -> None:
        if result.winner is None:
            self.draws += 1
        else:
            self.wins[result.winner] += 1

    @property
    def games(self) -> int:
        return self.wins[1] + self.wins[2] + self.draws

    def summary(self, name_1: str = "Player 1", name_2: str = "Player 2") -> str:
        return f"{name_1}: {self.wins[1]} | {name_2}: {self.wins[2]} | Draws: {self.draws}"
