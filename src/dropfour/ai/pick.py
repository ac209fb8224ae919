from __future__ import annotations

from typing import Callable, Dict

from dropfour.ai.base import Agent
from dropfour.ai.greedy_agent import GreedyAgent
from dropfour.ai.minimax_agent import MinimaxAgent

# Closed set of CPU opponents, keyed by the difficulty chosen at game start
AGENTS: Dict[str, Callable[[], Agent]] = {
    "easy": GreedyAgent,
    "hardcore": MinimaxAgent,
}


def make_agent(difficulty: str) -> Agent:
    try:
        factory = AGENTS[difficulty.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown difficulty {difficulty!r}. Choose one of: {', '.join(AGENTS)}.") from None
    return factory()
