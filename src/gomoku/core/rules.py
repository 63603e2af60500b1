from __future__ import annotations
from typing import List, Optional, Tuple

from gomoku.config import WIN_LENGTH
from gomoku.core.board import Board
from gomoku.types import Coord, LastMove, Player

# Positive half of each axis; the negative half is the mirrored step.
AXES: Tuple[Coord, ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


def run_length(board: Board, origin: Coord, direction: Coord, player: Player) -> int:
    """
    Count same-player stones starting one step away from origin.
    Stops at the first mismatch or the board edge, and never looks
    further than WIN_LENGTH - 1 cells.
    """
    r, c = origin
    dr, dc = direction
    target = player.cell
    n = 0
    for _ in range(WIN_LENGTH - 1):
        r += dr
        c += dc
        if not board.in_bounds(r, c) or board.grid[r][c] is not target:
            break
        n += 1
    return n


def _axis_count(board: Board, move: LastMove, axis: Coord) -> Tuple[int, int]:
    dr, dc = axis
    origin = (move.row, move.col)
    fwd = run_length(board, origin, (dr, dc), move.player)
    back = run_length(board, origin, (-dr, -dc), move.player)
    return fwd, back


def winning_line(board: Board, move: LastMove) -> Optional[List[Coord]]:
    for axis in AXES:
        fwd, back = _axis_count(board, move, axis)
        if 1 + fwd + back >= WIN_LENGTH:
            dr, dc = axis
            return [(move.row + i * dr, move.col + i * dc) for i in range(-back, fwd + 1)]
    return None


def is_winning_move(board: Board, move: LastMove) -> bool:
    return winning_line(board, move) is not None
