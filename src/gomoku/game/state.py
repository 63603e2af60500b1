from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from gomoku.core.board import Snapshot
from gomoku.types import Coord, GameOutcome, Player, PlacementResult


@dataclass(frozen=True, slots=True)
class DisplayState:
    """Everything a renderer needs for one refresh. Holds no live references."""

    board: Snapshot
    cursor: Coord
    current: Player
    placement: PlacementResult
    outcome: GameOutcome
    seconds_left: int
    winning_line: Optional[Tuple[Coord, ...]] = None

    @property
    def tens(self) -> int:
        return self.seconds_left // 10

    @property
    def ones(self) -> int:
        return self.seconds_left % 10


def line_tuple(line: Optional[List[Coord]]) -> Optional[Tuple[Coord, ...]]:
    return tuple(line) if line else None
