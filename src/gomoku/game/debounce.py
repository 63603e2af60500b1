"""
Keypad debounce and hand-off.

InputDebouncer runs on the key-sampler thread: it watches the raw
(pressed, code) signal and flips a parity bit once per physical press.
PressSynchronizer runs on the key-sync thread, on its own clock: it reads
the published (parity, code) pair, shifts it through a short delay
pipeline and reports one code each time the parity at the end of the
pipeline changes. The reported code then goes onto the event queue, which
is the hand-off to the engine thread.
"""

from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from gomoku.config import RELEASE_THRESHOLD, SYNC_STAGES

logger = logging.getLogger(__name__)

MAX_CODE = 0xF


@dataclass(frozen=True, slots=True)
class Marker:
    parity: bool = False
    code: int = 0


class InputDebouncer:
    def __init__(self, release_threshold: int = RELEASE_THRESHOLD) -> None:
        if release_threshold < 1:
            raise ValueError("release_threshold must be at least 1.")
        self.release_threshold = release_threshold
        self.held = False
        self.miss_count = 0
        self.latched_code = 0
        # Replaced as a whole on every press, never mutated in place, so the
        # key-sync thread always reads a matching parity/code pair.
        self.marker = Marker()

    def sample(self, pressed: bool, code: int) -> None:
        if pressed and not 0 <= code <= MAX_CODE:
            logger.debug("Dropping out-of-range key code %r", code)
            pressed = False

        if not self.held:
            if pressed:
                self.held = True
                self.miss_count = 0
                self.latched_code = code
                self.marker = Marker(not self.marker.parity, code)
            return

        if pressed:
            # Still down; a different code here is contact chatter and is ignored.
            self.miss_count = 0
            return

        self.miss_count += 1
        if self.miss_count >= self.release_threshold:
            self.held = False
            self.miss_count = 0


class PressSynchronizer:
    def __init__(self, stages: int = SYNC_STAGES) -> None:
        if stages < 2:
            raise ValueError("Synchronizer needs at least two stages.")
        self._pipe: Deque[Marker] = deque([Marker()] * stages, maxlen=stages)
        self._last = Marker()

    def clock(self, marker: Marker) -> Optional[int]:
        """
        Shift one marker in; return the press code if the pipeline output
        just changed parity, else None.
        """
        out = self._pipe[-1]
        self._pipe.appendleft(marker)
        if out.parity == self._last.parity:
            return None
        self._last = out
        return out.code
