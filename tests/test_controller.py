import pytest

from dropfour.ai.greedy_agent import GreedyAgent
from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.core.board import Board
from dropfour.game.controller import apply_move, play_headless, run_game
from dropfour.game.results import GameResult, Scoreboard
from dropfour.game.state import GameState, MoveRecord
from dropfour.ui.human import HumanAgent


def scripted_input(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))


class TestApplyMove:
    """One turn of the caller's loop."""

    def test_alternates_and_logs(self):
        state = GameState(board=Board())
        assert apply_move(state, 3) is None
        assert state.current == 2
        assert apply_move(state, 3) is None
        assert state.current == 1
        assert state.history == [MoveRecord(1, 3, 5), MoveRecord(2, 3, 4)]

    def test_win_ends_game(self):
        state = GameState(board=Board())
        for col in (0, 6, 1, 6, 2, 6):
            assert apply_move(state, col) is None
        result = apply_move(state, 3)
        assert result == GameResult(winner=1, moves=7)
        assert state.current == 1

    def test_draw_on_last_cell(self, full_draw_board):
        full_draw_board.grid[0][6] = None
        state = GameState(board=full_draw_board, current=2)
        result = apply_move(state, 6)
        assert result is not None
        assert result.is_draw
        assert result.label == "D"

    def test_invalid_move_leaves_state(self):
        state = GameState(board=Board(4, 4))
        with pytest.raises(ValueError):
            apply_move(state, 9)
        assert state.current == 1
        assert state.history == []


class TestHeadless:
    """AI vs AI games always finish."""

    @pytest.mark.parametrize("seed", range(7))
    def test_minimax_self_play_terminates(self, seed):
        result, stats = play_headless(
            MinimaxAgent(depth=2),
            MinimaxAgent(depth=2),
            6, 7,
            first=1 if seed % 2 == 0 else 2,
            opening_plies=2,
            seed=seed,
        )
        assert result.winner in (1, 2, None)
        assert 0 < result.moves <= 6 * 7
        assert stats[1]["moves"] + stats[2]["moves"] + 2 == result.moves

    @pytest.mark.slow
    def test_default_depth_self_play(self):
        agent_1, agent_2 = MinimaxAgent(), MinimaxAgent()
        assert agent_1.depth == agent_2.depth == 6

        result, stats = play_headless(agent_1, agent_2, 6, 7, opening_plies=2, seed=0)
        assert result.winner in (1, 2, None)
        assert 0 < result.moves <= 6 * 7
        assert stats[1]["moves"] + stats[2]["moves"] + 2 == result.moves
        assert agent_1.last_info["depth"] == 6

    def test_greedy_vs_minimax(self):
        board = Scoreboard()
        for seed in range(7):
            result, _ = play_headless(GreedyAgent(), MinimaxAgent(depth=2), 6, 7, opening_plies=2, seed=seed)
            assert result.moves <= 42
            board.record(result)
        assert board.games == 7

    def test_small_board(self):
        result, _ = play_headless(GreedyAgent(), GreedyAgent(), 4, 4)
        assert result.moves <= 16


class TestInteractive:
    """Terminal loop driven by scripted input."""

    def test_quit(self, monkeypatch, capsys):
        scripted_input(monkeypatch, ["q"])
        assert run_game(HumanAgent(), GreedyAgent(), 6, 7) is None
        assert "Game quit." in capsys.readouterr().out

    def test_human_vs_human_with_bad_input(self, monkeypatch, capsys):
        scripted_input(monkeypatch, ["9", "abc", "1", "2", "1", "2", "1", "2", "1"])
        result = run_game(HumanAgent(), HumanAgent(), 4, 4)
        assert result == GameResult(winner=1, moves=7)
        out = capsys.readouterr().out
        assert "Column must be between 1 and 4." in out
        assert "Player 1 wins!" in out

    def test_human_vs_cpu(self, monkeypatch):
        # human keeps feeding columns left to right; cpu answers
        scripted_input(monkeypatch, [str(1 + i % 5) for i in range(60)])
        result = run_game(HumanAgent(), GreedyAgent(), 5, 5)
        assert result is not None
        assert result.moves <= 25

    def test_cpu_vs_cpu_needs_no_input(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda _prompt="": pytest.fail("no input expected"))
        result = run_game(GreedyAgent(), MinimaxAgent(depth=2), 4, 5)
        assert result is not None


class TestScoreboard:
    def test_tally(self):
        board = Scoreboard()
        board.record(GameResult(1, 10))
        board.record(GameResult(None, 42))
        board.record(GameResult(2, 12))
        board.record(GameResult(2, 9))
        assert board.wins == {1: 1, 2: 2}
        assert board.draws == 1
        assert board.games == 4
        assert board.summary("You", "CPU") == "You: 1 | CPU: 2 | Draws: 1"
