import pytest

from gomoku import config
from gomoku.core.board import Board
from gomoku.game.actions import Confirm, Move
from gomoku.game.controller import GameEngine
from gomoku.types import Direction, Player


@pytest.fixture()
def board():
    return Board()


@pytest.fixture()
def engine():
    return GameEngine()


@pytest.fixture()
def plain_ui(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


@pytest.fixture()
def win_keys():
    # ONE fills row 0 from col 0, TWO fills row 1; ONE's fifth stone wins.
    return "esewdesewdesewdesewde"


@pytest.fixture()
def stones():
    """Place a list of (row, col) for one player directly on a board."""

    def _place(board, coords, player=Player.ONE):
        for r, c in coords:
            assert board.place(r, c, player)

    return _place


@pytest.fixture()
def play_at():
    """Walk the engine cursor to (row, col) with Move events, then Confirm."""

    def _play(engine, row, col):
        r, c = engine.cursor
        steps = [Direction.DOWN] * max(row - r, 0) + [Direction.UP] * max(r - row, 0)
        steps += [Direction.RIGHT] * max(col - c, 0) + [Direction.LEFT] * max(c - col, 0)
        for d in steps:
            engine.dispatch(Move(d))
        engine.dispatch(Confirm())

    return _play
