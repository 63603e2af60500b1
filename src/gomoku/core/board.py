# src/gomoku/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from gomoku.config import BOARD_SIZE
from gomoku.types import Cell, Player

Snapshot = Tuple[Tuple[Cell, ...], ...]


@dataclass(slots=True)
class Board:
    size: int = field(default=BOARD_SIZE, init=False)
    grid: List[List[Cell]] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.grid = [[Cell.EMPTY for _ in range(self.size)] for _ in range(self.size)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise ValueError(f"Cell ({row}, {col}) is off the board.")

    def get(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self.grid[row][col]

    def place(self, row: int, col: int, player: Player) -> bool:
        """
        Put a stone on an empty cell.
        Returns False and leaves the board alone if the cell is taken.
        """
        self._check(row, col)
        if self.grid[row][col] is not Cell.EMPTY:
            return False
        self.grid[row][col] = player.cell
        return True

    def snapshot(self) -> Snapshot:
        return tuple(tuple(row) for row in self.grid)
