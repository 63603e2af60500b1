from __future__ import annotations
import threading
from collections import deque
from typing import Deque, Iterable, Tuple

from gomoku.config import PRESS_HOLD_SAMPLES, RELEASE_THRESHOLD


class SimulatedKeypad:
    """
    Stands in for the keypad matrix: each queued press is held down for
    ``hold`` reads, then the line goes quiet long enough for the debouncer
    to see a release before the next press starts.
    """

    def __init__(self, hold: int = PRESS_HOLD_SAMPLES, gap: int = RELEASE_THRESHOLD + 2) -> None:
        self.hold = hold
        self.gap = gap
        self._pending: Deque[int] = deque()
        self._code = 0
        self._down_left = 0
        self._quiet_left = 0
        self._lock = threading.Lock()

    def press(self, code: int) -> None:
        with self._lock:
            self._pending.append(code)

    def press_all(self, codes: Iterable[int]) -> None:
        with self._lock:
            self._pending.extend(codes)

    @property
    def idle(self) -> bool:
        with self._lock:
            return not self._pending and self._down_left == 0 and self._quiet_left == 0

    def read(self) -> Tuple[bool, int]:
        with self._lock:
            if self._down_left > 0:
                self._down_left -= 1
                if self._down_left == 0:
                    self._quiet_left = self.gap
                return True, self._code
            if self._quiet_left > 0:
                self._quiet_left -= 1
                return False, 0
            if self._pending:
                self._code = self._pending.popleft()
                self._down_left = self.hold - 1
                if self._down_left == 0:
                    self._quiet_left = self.gap
                return True, self._code
            return False, 0
