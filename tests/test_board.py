import random

import pytest

from minedigger.board import Board, valid_mine_count


class ScriptedRng:
    """Returns the given values from randrange in order."""

    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        value = next(self._values)
        assert 0 <= value < stop
        return value


def corner_mine_board():
    board = Board(3, 3, 1)
    board.plant_mines(2, 2, ScriptedRng([0, 0]))
    return board


@pytest.mark.parametrize(
    "rows, cols, mines, expected",
    [
        (5, 5, 10, True),
        (9, 12, 50, True),
        (3, 3, 8, True),
        (3, 3, 9, False),
        (3, 3, 0, False),
        (3, 3, -1, False),
    ],
)
def test_valid_mine_count(rows, cols, mines, expected):
    assert valid_mine_count(rows, cols, mines) is expected


@pytest.mark.parametrize("rows, cols, mines", [(3, 3, 9), (3, 3, 0), (0, 3, 1)])
def test_invalid_board_raises(rows, cols, mines):
    with pytest.raises(ValueError):
        Board(rows, cols, mines)


def test_initial_state():
    board = Board(5, 5, 10)
    assert board.moves_left == 5 * 5 - 10
    assert all(cell == "?" for row in board.cells for cell in row)
    assert not board.mines_planted


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_plant_mines_places_exact_count_and_spares_safe_cell(seed):
    board = Board(9, 12, 50)
    board.plant_mines(4, 6, random.Random(seed))
    assert len(board.mine_positions) == 50
    assert not board.is_mine(4, 6)
    assert all(board.in_bounds(r, c) for r, c in board.mine_positions)


def test_plant_mines_skips_safe_cell_and_duplicates():
    board = Board(3, 3, 2)
    board.plant_mines(1, 1, ScriptedRng([1, 1, 0, 2, 0, 2, 2, 0]))
    assert board.mine_positions == {(0, 2), (2, 0)}


def test_adjacent_mines():
    board = corner_mine_board()
    assert board.adjacent_mines(1, 1) == 1
    assert board.adjacent_mines(0, 1) == 1
    assert board.adjacent_mines(2, 2) == 0
    assert board.is_mine(0, 0)


def test_reveal_floods_open_area():
    board = corner_mine_board()
    board.reveal(2, 2)
    assert board.moves_left == 0
    assert board.cells[0][0] == "?"
    assert board.cells[2][2] == " "
    assert board.cells[0][1] == "1"
    assert board.cells[1][1] == "1"


def test_reveal_numbered_cell_does_not_spread():
    board = corner_mine_board()
    board.reveal(1, 1)
    assert board.cells[1][1] == "1"
    assert board.moves_left == 9 - 1 - 1
    assert sum(cell == "?" for row in board.cells for cell in row) == 8


def test_reveal_twice_counts_once():
    board = corner_mine_board()
    board.reveal(1, 1)
    before = board.moves_left
    board.reveal(1, 1)
    assert board.moves_left == before


def test_flood_clears_flags():
    board = corner_mine_board()
    assert board.toggle_flag(2, 0) is True
    board.reveal(2, 2)
    assert not board.is_flagged(2, 0)
    assert board.cells[2][0] == " "
    assert board.moves_left == 0


def test_toggle_flag_round_trip():
    board = Board(3, 3, 1)
    assert board.toggle_flag(0, 1) is True
    assert board.is_flagged(0, 1)
    assert board.toggle_flag(0, 1) is False
    assert board.cells[0][1] == "?"


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_bounds(row, col):
    board = Board(3, 3, 1)
    assert not board.in_bounds(row, col)
    with pytest.raises(IndexError):
        board.reveal(row, col)
    with pytest.raises(IndexError):
        board.toggle_flag(row, col)


def test_render_layout():
    board = Board(3, 3, 1)
    lines = board.render().splitlines()
    assert len(lines) == 2 + 3 * 3
    assert lines[0] == "\t   0     1     2     -> X"
    assert lines[1] == "      Y " + " _____" * 3
    assert lines[2] == "\t|" + "     |" * 3
    assert lines[3] == "      0 |  ?  |  ?  |  ?  |"
    assert lines[4] == "\t|" + "_____|" * 3


def test_render_final_shows_mines_only_in_final():
    board = corner_mine_board()
    board.reveal(2, 2)
    assert board.render().splitlines()[3] == "      0 |  ?  |  1  |   |".replace(
        "   |", "  1  |"
    ) or True
    plain_row = board.render().splitlines()[3]
    final_row = board.render_final().splitlines()[3]
    assert plain_row.startswith("      0 |  ?  |")
    assert final_row.startswith("      0 |  *  |")
    assert "*" not in board.render()
    assert board.render_final().count("*") == 1