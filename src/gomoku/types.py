# src/gomoku/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Coord = Tuple[int, int]  # (row, col)


class Cell(Enum):
    EMPTY = 0
    ONE = 1
    TWO = 2


class Player(Enum):
    ONE = 1
    TWO = 2

    def other(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def cell(self) -> Cell:
        return Cell.ONE if self is Player.ONE else Cell.TWO


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class PlacementResult(Enum):
    NONE = "none"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class LastMove:
    row: int
    col: int
    player: Player


@dataclass(frozen=True, slots=True)
class GameOutcome:
    winner: Optional[Player] = None

    @property
    def finished(self) -> bool:
        return self.winner is not None
