from __future__ import annotations

import logging
import random
import time
from typing import Dict, Optional, Tuple

from dropfour.ai.base import Agent
from dropfour.core.board import Board
from dropfour.core.rules import other, winning_line
from dropfour.game.results import GameResult
from dropfour.game.state import GameState, MoveRecord
from dropfour.types import Move, Player
from dropfour.ui.prompts import parse_move
from dropfour.ui.render import render

logger = logging.getLogger(__name__)


def apply_move(state: GameState, col: Move) -> Optional[GameResult]:
    """
    Play `col` for the side to move, then check for a finished game.
    Raises ValueError (board untouched) if the column cannot take a piece.
    Returns the result once the game is over, otherwise None and the turn passes.
    """
    player = state.current
    row = state.board.drop(col, player)
    state.history.append(MoveRecord(player=player, col=Move(int(col)), row=row))

    if state.board.check_win(row, int(col), player):
        return GameResult(winner=player, moves=len(state.history))
    if state.board.is_full():
        return GameResult(winner=None, moves=len(state.history))

    state.current = other(player)
    return None


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_1: Agent, agent_2: Agent, current: Player) -> str:
    """
    Prepend a persistent header showing who plays 1 and 2.
    """
    header = (
        f"1: {_agent_name(agent_1, 'Player 1')} | "
        f"2: {_agent_name(agent_2, 'Player 2')} | Turn: {current}"
    )
    if status:
        return f"{header}\n{status}"
    return header


def run_game(agent_1: Agent, agent_2: Agent, rows: int, cols: int, first: Player = 1) -> Optional[GameResult]:
    """
    Interactive terminal game. Returns the result, or None if a human quit.
    """
    state = GameState(board=Board(rows, cols), current=first, last_status=f"Player {first} starts.")
    agents = {1: agent_1, 2: agent_2}

    while True:
        render(state.board, _status_with_agents(state.last_status, agent_1, agent_2, state.current))

        current_agent = agents[state.current]
        mover = state.current

        try:
            if current_agent.name == "Human":
                raw = input(f"Player {state.current} move: ")
                move = parse_move(raw, state.board.cols)
                if move is None:
                    render(state.board, _status_with_agents("Game quit.", agent_1, agent_2, state.current))
                    return None
                state.last_status = f"Player {state.current} chose {int(move) + 1}"
            else:
                move = current_agent.choose_move(state)

                # Show search stats if available
                info = getattr(current_agent, "last_info", None)
                if info:
                    state.last_status = (
                        f"{current_agent.name} chose {info.get('move_col')} | "
                        f"d={info.get('depth')} | "
                        f"nodes={info.get('nodes')} | "
                        f"cut={info.get('cutoffs')} | "
                        f"eval={info.get('eval')} | "
                        f"{info.get('time_ms')}ms"
                    )
                else:
                    state.last_status = f"{current_agent.name} chose {int(move) + 1}"

            result = apply_move(state, move)

        except ValueError as e:
            state.last_status = str(e)
            continue

        if result is not None:
            line = winning_line(state.board)
            msg = "Draw game." if result.is_draw else f"Player {mover} wins!"
            render(
                state.board,
                _status_with_agents(msg, agent_1, agent_2, mover),
                highlight=line[1] if line else None,
            )
            logger.info("game over: winner=%s moves=%d", result.label, result.moves)
            return result

        state.last_status += f" | Next: Player {state.current}"


def play_headless(
    agent_1: Agent,
    agent_2: Agent,
    rows: int,
    cols: int,
    first: Player = 1,
    opening_plies: int = 0,
    seed: int = 0,
) -> Tuple[GameResult, Dict[int, Dict[str, int]]]:
    """
    Headless game loop.
    Returns the result and per-side move stats: {1: {...}, 2: {...}}
    """
    state = GameState(board=Board(rows, cols), current=first, last_status="")
    agents = {1: agent_1, 2: agent_2}
    stats = {
        1: {"moves": 0, "time_ms": 0, "nodes": 0},
        2: {"moves": 0, "time_ms": 0, "nodes": 0},
    }

    # --- opening randomization ---
    rng = random.Random(seed)
    for _ in range(opening_plies):
        result = apply_move(state, rng.choice(state.board.valid_moves()))
        if result is not None:
            return result, stats
    # -----------------------------

    for _ in range(rows * cols - len(state.history)):
        agent = agents[state.current]
        side_stats = stats[state.current]

        start = time.perf_counter()
        move = agent.choose_move(state)
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        info = getattr(agent, "last_info", None) or {}
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, elapsed_ms)
        side_stats["nodes"] += int(info.get("nodes", 0))

        result = apply_move(state, move)
        if result is not None:
            return result, stats

    # unreachable: the last empty cell always ends the game
    raise RuntimeError("Board filled without a result.")
