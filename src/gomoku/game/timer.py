from __future__ import annotations
from dataclasses import dataclass

from gomoku.config import TURN_SECONDS


@dataclass(slots=True)
class TurnTimer:
    seconds_left: int = TURN_SECONDS
    enabled: bool = True

    def tick(self) -> bool:
        """
        Advance one second.
        Returns True only on the tick that takes the clock from 1 to 0,
        so a timeout is reported once per turn, not on every tick at zero.
        """
        if not self.enabled or self.seconds_left <= 0:
            return False
        self.seconds_left -= 1
        return self.seconds_left == 0

    def reset(self) -> None:
        self.seconds_left = TURN_SECONDS

    def disable(self) -> None:
        self.enabled = False
