import random

import numpy as np
import pytest

from connectfour.game.board import Board
from connectfour.utils import Player


def test_new_board_is_empty():
    board = Board()
    assert (board.height, board.width) == (6, 7)
    assert board.grid.shape == (6, 7)
    assert board.count(Player.EMPTY) == 42
    assert not board.is_full()


def test_custom_dimensions():
    board = Board(4, 5)
    assert board.grid.shape == (4, 5)
    assert board.find_drop_row(4) == 3


@pytest.mark.parametrize("height, width", [(0, 7), (6, 0), (-1, 3)])
def test_rejects_non_positive_dimensions(height, width):
    with pytest.raises(ValueError):
        Board(height, width)


def test_find_drop_row_starts_at_bottom_and_climbs():
    board = Board()
    assert board.find_drop_row(3) == 5
    board.place(5, 3, Player.ONE)
    assert board.find_drop_row(3) == 4
    board.place(4, 3, Player.TWO)
    assert board.find_drop_row(3) == 3


def test_find_drop_row_is_a_pure_query():
    board = Board()
    board.place(5, 2, Player.ONE)
    before = board.get_state()
    assert board.find_drop_row(2) == board.find_drop_row(2) == 4
    assert np.array_equal(board.grid, before)


def test_find_drop_row_on_full_column():
    board = Board()
    for row in range(5, -1, -1):
        board.place(row, 0, Player.ONE if row % 2 else Player.TWO)
    assert board.find_drop_row(0) is None
    assert board.is_column_full(0)
    assert 0 not in board.get_valid_moves()


@pytest.mark.parametrize("column", [-1, 7, 100])
def test_find_drop_row_out_of_range(column):
    with pytest.raises(IndexError):
        Board().find_drop_row(column)


def test_is_valid_column():
    board = Board()
    assert board.is_valid_column(0)
    assert board.is_valid_column(np.int64(6))
    for column in (-1, 7, "3", 2.0, None, True):
        assert not board.is_valid_column(column)


def test_gravity_holds_after_random_drops():
    rng = random.Random(7)
    board = Board()
    player = Player.ONE
    for _ in range(30):
        column = rng.choice(board.get_valid_moves())
        board.place(board.find_drop_row(column), column, player)
        player = player.other()

    for column in range(board.width):
        row = board.find_drop_row(column)
        top = -1 if row is None else row
        for r in range(board.height):
            if r > top:
                assert board.get(r, column) != Player.EMPTY
            else:
                assert board.get(r, column) == Player.EMPTY


def test_place_errors():
    board = Board()
    board.place(5, 0, Player.ONE)
    with pytest.raises(ValueError):
        board.place(5, 0, Player.TWO)
    with pytest.raises(ValueError):
        board.place(4, 0, Player.EMPTY)
    with pytest.raises(IndexError):
        board.place(6, 0, Player.ONE)
    with pytest.raises(IndexError):
        board.place(0, -1, Player.ONE)
    assert board.get(5, 0) == Player.ONE


def test_is_full():
    board = Board(2, 2)
    cells = [(1, 0), (1, 1), (0, 0)]
    for row, col in cells:
        board.place(row, col, Player.ONE)
        assert not board.is_full()
    board.place(0, 1, Player.TWO)
    assert board.is_full()
    assert board.get_valid_moves() == []


def test_copy_is_independent():
    board = Board()
    board.place(5, 1, Player.ONE)
    clone = board.copy()
    clone.place(4, 1, Player.TWO)
    assert board.get(4, 1) == Player.EMPTY
    assert clone.get(5, 1) == Player.ONE


def test_from_grid_and_render():
    grid = np.zeros((3, 4), dtype=int)
    grid[2, :] = [1, 2, 1, 2]
    board = Board.from_grid(grid)
    assert (board.height, board.width) == (3, 4)
    assert board.get(2, 1) == Player.TWO

    text = board.render(highlight=[(2, 0)])
    lines = text.splitlines()
    assert lines[3] == "|[X] O  X  O |"
    assert lines[-1].split() == ["0", "1", "2", "3"]
    assert str(board) == board.render()


def test_from_grid_requires_2d():
    with pytest.raises(ValueError):
        Board.from_grid([1, 2, 3])
