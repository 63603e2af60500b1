import pytest

from gomoku.config import BOARD_SIZE
from gomoku.types import Cell, Player


def test_new_board_is_empty(board):
    assert board.size == BOARD_SIZE == 16
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            assert board.get(r, c) is Cell.EMPTY
    assert all(cell is Cell.EMPTY for row in board.snapshot() for cell in row)


def test_place_on_empty_cell(board):
    assert board.place(3, 4, Player.ONE) is True
    assert board.get(3, 4) is Cell.ONE
    taken = [(r, c) for r, row in enumerate(board.snapshot()) for c, cell in enumerate(row) if cell is not Cell.EMPTY]
    assert taken == [(3, 4)]


def test_place_on_taken_cell_keeps_first_stone(board):
    assert board.place(3, 4, Player.ONE)
    assert board.place(3, 4, Player.TWO) is False
    assert board.place(3, 4, Player.ONE) is False
    assert board.get(3, 4) is Cell.ONE


def test_corners_are_on_the_board(board):
    assert board.place(0, 0, Player.TWO)
    assert board.place(15, 15, Player.TWO)
    assert board.get(15, 15) is Cell.TWO


@pytest.mark.parametrize("row,col", [(-1, 0), (0, 16), (16, 3)])
def test_off_board_coordinates_raise(board, row, col):
    with pytest.raises(ValueError):
        board.get(row, col)
    with pytest.raises(ValueError):
        board.place(row, col, Player.ONE)


def test_snapshot_is_a_frozen_copy(board):
    snap = board.snapshot()
    board.place(0, 0, Player.ONE)
    assert snap[0][0] is Cell.EMPTY
    assert board.snapshot()[0][0] is Cell.ONE
    assert isinstance(snap, tuple) and isinstance(snap[0], tuple)

