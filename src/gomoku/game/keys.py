from __future__ import annotations
from typing import Dict, Optional

from gomoku.game.actions import Confirm, GameEvent, Move
from gomoku.types import Direction

KEY_UP = 0x2
KEY_LEFT = 0x4
KEY_CONFIRM = 0x5
KEY_RIGHT = 0x6
KEY_DOWN = 0x8
KEY_CONFIRM_ALT = 0xF  # second, independent confirm button

KEYMAP: Dict[int, GameEvent] = {
    KEY_UP: Move(Direction.UP),
    KEY_DOWN: Move(Direction.DOWN),
    KEY_LEFT: Move(Direction.LEFT),
    KEY_RIGHT: Move(Direction.RIGHT),
    KEY_CONFIRM: Confirm(),
    KEY_CONFIRM_ALT: Confirm(),
}


def event_for_code(code: int) -> Optional[GameEvent]:
    return KEYMAP.get(code)
