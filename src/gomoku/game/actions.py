from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from gomoku.types import Direction


@dataclass(frozen=True, slots=True)
class Move:
    direction: Direction


@dataclass(frozen=True, slots=True)
class Confirm:
    pass


@dataclass(frozen=True, slots=True)
class Timeout:
    pass


@dataclass(frozen=True, slots=True)
class WinCheckDue:
    pass


# Loop-level events: raw producer output before it is turned into game events.
@dataclass(frozen=True, slots=True)
class KeyPress:
    code: int


@dataclass(frozen=True, slots=True)
class Tick:
    pass


GameEvent = Union[Move, Confirm, Timeout, WinCheckDue]
LoopEvent = Union[KeyPress, Tick]
