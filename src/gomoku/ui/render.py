from __future__ import annotations
from typing import List, Set

from gomoku import config
from gomoku.game.state import DisplayState
from gomoku.types import Coord, PlacementResult
from gomoku.ui.colors import BOLD, DIM, FEEDBACK_STYLE, GAME_OVER_STYLE, paint, player_style, stone


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def status_line(state: DisplayState) -> str:
    if state.outcome.winner is not None:
        return f"Player {state.outcome.winner.name} wins!"

    parts = [f"Turn: Player {state.current.name}", f"Time: {state.tens}{state.ones}"]
    if state.placement is PlacementResult.SUCCESS:
        parts.append("placed")
    elif state.placement is PlacementResult.FAILURE:
        parts.append("cell taken")
    return " | ".join(parts)


def board_lines(state: DisplayState) -> List[str]:
    hl: Set[Coord] = set(state.winning_line or ())
    show_cursor = state.outcome.winner is None
    size = len(state.board)

    lines = [paint("    " + " ".join(f"{i:x}" for i in range(size)), DIM)]
    for r, row in enumerate(state.board):
        parts = [
            stone(cell, (r, col) in hl or (show_cursor and (r, col) == state.cursor))
            for col, cell in enumerate(row)
        ]
        lines.append(f"{r:x} | " + " ".join(parts) + " |")
    return lines


def render(state: DisplayState) -> None:
    clear_screen()
    print(paint("GOMOKU 16x16", BOLD))

    status = status_line(state)
    if state.outcome.winner is not None:
        print(paint(status, BOLD))
    else:
        print(paint(status, FEEDBACK_STYLE.get(state.placement, player_style(state.current))))

    for line in board_lines(state):
        print(line)

    if state.outcome.winner is None:
        print(paint("   w/a/s/d move, space/e/f place, Enter alone places, q quit", DIM))
    else:
        print(paint("   Game over.", GAME_OVER_STYLE))
