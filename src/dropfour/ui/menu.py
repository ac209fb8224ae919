from __future__ import annotations

from dropfour.ai.pick import make_agent
from dropfour.config import DEFAULT_DIFFICULTY, DIFFICULTIES, MAX_DIM, MIN_DIM, ROWS, COLS, GameSettings
from dropfour.game.controller import run_game
from dropfour.game.results import Scoreboard
from dropfour.ui.colors import c, BOLD
from dropfour.ui.human import HumanAgent
from dropfour.ui.prompts import ask_choice, ask_int, ask_yes_no


def ask_settings() -> GameSettings:
    print(c("Game settings", BOLD))
    rows = ask_int("Number of rows", ROWS, MIN_DIM, MAX_DIM)
    cols = ask_int("Number of columns", COLS, MIN_DIM, MAX_DIM)
    difficulty = ask_choice("Difficulty", DIFFICULTIES, DEFAULT_DIFFICULTY)
    return GameSettings(rows=rows, cols=cols, difficulty=difficulty)


def run_menu() -> None:
    print("Select mode:")
    print("1) Human vs CPU")
    print("2) Human vs Human")

    choice = input("Choice: ").strip()
    settings = ask_settings()

    if choice == "2":
        p1, p2 = HumanAgent(), HumanAgent()
        names = ("Player 1", "Player 2")
    else:
        if choice != "1":
            print("\nInvalid choice. Defaulting to Human vs CPU.\n")
        p1, p2 = HumanAgent(), make_agent(settings.difficulty)
        names = ("Your wins", "CPU wins")

    score = Scoreboard()
    while True:
        result = run_game(p1, p2, settings.rows, settings.cols)
        if result is None:
            break
        score.record(result)
        print(c(score.summary(*names), BOLD))
        if not ask_yes_no("Play again?"):
            break
