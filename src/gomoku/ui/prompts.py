from __future__ import annotations
from typing import List, Optional

from gomoku.game.keys import KEY_CONFIRM, KEY_CONFIRM_ALT, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP

CHAR_CODES = {
    "w": KEY_UP,
    "s": KEY_DOWN,
    "a": KEY_LEFT,
    "d": KEY_RIGHT,
    " ": KEY_CONFIRM,
    "e": KEY_CONFIRM,
    "f": KEY_CONFIRM_ALT,
}


def parse_keys(raw: str) -> Optional[List[int]]:
    """
    Turn a typed line into keypad codes. An empty line means "confirm".
    Returns None when the player asked to quit. Unknown characters are skipped.
    """
    s = raw.rstrip("\n").lower()
    if s.strip() in {"q", "quit", "exit"}:
        return None
    if not s:
        return [KEY_CONFIRM]
    return [CHAR_CODES[ch] for ch in s if ch in CHAR_CODES]
