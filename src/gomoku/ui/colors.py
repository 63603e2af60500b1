from __future__ import annotations
from typing import Dict

from gomoku import config
from gomoku.types import Cell, Player, PlacementResult

_ESC = "\033["


def sgr(*params: int) -> str:
    return f"{_ESC}{';'.join(str(p) for p in params)}m"


RESET = sgr(0)
BOLD = sgr(1)
DIM = sgr(2)
REVERSE = sgr(7)

STONE_GLYPH: Dict[Cell, str] = {Cell.EMPTY: "·", Cell.ONE: "X", Cell.TWO: "O"}
STONE_STYLE: Dict[Cell, str] = {Cell.EMPTY: sgr(90), Cell.ONE: sgr(31), Cell.TWO: sgr(33)}

# Without color a highlighted cell gets its own glyph instead of reverse video.
PLAIN_HIGHLIGHT: Dict[Cell, str] = {Cell.EMPTY: "#", Cell.ONE: "x", Cell.TWO: "o"}

FEEDBACK_STYLE: Dict[PlacementResult, str] = {
    PlacementResult.SUCCESS: sgr(32),
    PlacementResult.FAILURE: sgr(31),
}
GAME_OVER_STYLE = sgr(1, 36)


def paint(s: str, style: str) -> str:
    if not config.USE_COLOR or not style:
        return s
    return f"{style}{s}{RESET}"


def player_style(player: Player) -> str:
    return STONE_STYLE[player.cell]


def stone(cell: Cell, highlighted: bool = False) -> str:
    if not highlighted:
        return paint(STONE_GLYPH[cell], STONE_STYLE[cell])
    if not config.USE_COLOR:
        return PLAIN_HIGHLIGHT[cell]
    return paint(STONE_GLYPH[cell], STONE_STYLE[cell] + REVERSE)
