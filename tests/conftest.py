import pytest

from dropfour.core.board import Board


def parse_board(*lines: str) -> Board:
    """Build a board from text rows, top row first: '.' empty, '1'/'2' pieces."""
    grid = [[None if ch == "." else int(ch) for ch in line] for line in lines]
    return Board(len(grid), len(grid[0]), grid)


# h((c + 2r) % 4) with h = 1,1,2,2: full board, no four in any direction
def draw_grid(rows: int = 6, cols: int = 7):
    pattern = (1, 1, 2, 2)
    return [[pattern[(c + 2 * r) % 4] for c in range(cols)] for r in range(rows)]


@pytest.fixture
def make_board():
    return parse_board


@pytest.fixture
def full_draw_board():
    return Board(6, 7, draw_grid())
