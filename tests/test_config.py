import pytest

from dropfour.ai.greedy_agent import GreedyAgent
from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.ai.pick import make_agent
from dropfour.config import GameSettings, MINIMAX_DEPTH
from dropfour.ui.prompts import ask_choice, ask_int, ask_yes_no, parse_move


class TestSettings:
    """Accepted configuration range."""

    def test_defaults(self):
        s = GameSettings()
        assert (s.rows, s.cols, s.difficulty) == (6, 7, "easy")

    @pytest.mark.parametrize("rows,cols", [(4, 4), (10, 10), (4, 10)])
    def test_bounds_accepted(self, rows, cols):
        GameSettings(rows=rows, cols=cols)

    @pytest.mark.parametrize("rows,cols", [(3, 7), (6, 11), (11, 4)])
    def test_bounds_rejected(self, rows, cols):
        with pytest.raises(ValueError):
            GameSettings(rows=rows, cols=cols)

    def test_unknown_difficulty(self):
        with pytest.raises(ValueError):
            GameSettings(difficulty="medium")


class TestPickAgent:
    """Difficulty selects one of the two strategies."""

    def test_easy_is_greedy(self):
        assert isinstance(make_agent("easy"), GreedyAgent)

    def test_hardcore_is_minimax(self):
        agent = make_agent(" Hardcore ")
        assert isinstance(agent, MinimaxAgent)
        assert agent.depth == MINIMAX_DEPTH == 6

    def test_unknown(self):
        with pytest.raises(ValueError):
            make_agent("medium")


class TestPrompts:
    """Parsing of typed input."""

    def test_parse_move(self):
        assert parse_move(" 3 ", 7) == 2
        assert parse_move("Q", 7) is None

    @pytest.mark.parametrize("raw", ["0", "8", "x", "-1"])
    def test_parse_move_rejects(self, raw):
        with pytest.raises(ValueError):
            parse_move(raw, 7)

    def test_ask_int_retries(self, monkeypatch, capsys):
        answers = iter(["12", "abc", "8"])
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
        assert ask_int("Rows", 6, 4, 10) == 8
        assert "between 4 and 10" in capsys.readouterr().out

    def test_ask_int_default(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda _prompt="": "")
        assert ask_int("Rows", 6, 4, 10) == 6

    def test_ask_choice(self, monkeypatch):
        answers = iter(["medium", "HARDCORE"])
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
        assert ask_choice("Difficulty", ("easy", "hardcore"), "easy") == "hardcore"

    def test_ask_yes_no(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda _prompt="": "n")
        assert ask_yes_no("Again?") is False
        monkeypatch.setattr("builtins.input", lambda _prompt="": "")
        assert ask_yes_no("Again?") is True
