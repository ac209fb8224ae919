import pytest

from dropfour.ai.base import NoValidMovesError
from dropfour.ai.greedy_agent import GreedyAgent, greedy_column, offensive_score
from dropfour.core.board import Board
from dropfour.game.state import GameState


@pytest.fixture
def block_and_win(make_board):
    # 1 threatens column 3 on the bottom row; 2 could win in column 6
    return make_board(
        ".......",
        ".......",
        ".......",
        "......2",
        "......2",
        "111...2",
    )


class TestGreedyPriorities:
    """Block > win > offensive score > fallback."""

    def test_block_beats_own_win(self, block_and_win):
        assert greedy_column(block_and_win, 2, 1) == 3

    def test_immediate_win(self, make_board):
        board = make_board(
            ".......",
            ".......",
            ".......",
            ".....2.",
            "1....2.",
            "11...2.",
        )
        assert greedy_column(board, 2, 1) == 5

    def test_first_blocking_column_left_to_right(self, make_board):
        # 1 can win in column 0 (vertical) and column 6 (horizontal)
        board = make_board(
            ".......",
            ".......",
            "1......",
            "1......",
            "1......",
            "2..111.",
        )
        assert greedy_column(board, 2, 1) == 0

    def test_offensive_score_prefers_three(self, make_board):
        board = make_board(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "..22..1",
        )
        assert greedy_column(board, 2, 1) == 1

    def test_empty_board_ties_keep_first_column(self):
        assert greedy_column(Board(), 2, 1) == 0

    def test_side_agnostic(self, make_board):
        board = make_board(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "222....",
        )
        assert greedy_column(board, 1, 2) == 3
        assert greedy_column(board, 1) == 3

    def test_offensive_score_tiers(self, make_board):
        board = make_board(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            ".222...",
        )
        # horizontal run of 3 -> 100, + threat bonus
        assert offensive_score(board, 5, 2, 2) == 250
        board.make_move(4, 2)
        assert offensive_score(board, 5, 4, 2) == 1000 + 150


class TestGreedyAgent:
    """Agent wrapper: stats, preconditions, no side effects."""

    def test_choose_move_uses_side_to_move(self, block_and_win):
        agent = GreedyAgent()
        move = agent.choose_move(GameState(board=block_and_win, current=2))
        assert move == 3
        assert agent.last_info["note"] == "block"
        assert agent.last_info["move_col"] == 4

    def test_does_not_mutate_board(self, block_and_win):
        snapshot = [row[:] for row in block_and_win.grid]
        GreedyAgent().choose_column(block_and_win, 2)
        assert block_and_win.grid == snapshot

    def test_full_board_fails_loudly(self, full_draw_board):
        with pytest.raises(NoValidMovesError):
            GreedyAgent().choose_column(full_draw_board, 2)
        with pytest.raises(ValueError):
            greedy_column(full_draw_board, 1, 2)

    def test_always_returns_playable_column(self, make_board):
        board = make_board(
            "12.1",
            "21.2",
            "12.1",
            "2112",
        )
        col = greedy_column(board, 2, 1)
        assert board.is_valid_move(col)
