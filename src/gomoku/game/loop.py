"""
Single-consumer event loop.

Producers run on their own threads and only ever put events on one
queue. The key sampler thread feeds raw samples to the debouncer; the
key-sync thread clocks the press synchronizer at its own rate and enqueues
KeyPress events; the ticker enqueues one Tick per second. The loop
thread takes events off in order and is the only code that touches the
engine.
"""

from __future__ import annotations
import logging
import queue
import threading
from typing import Callable, List, Optional, Tuple, Union

from gomoku.config import SAMPLE_PERIOD_SEC, SYNC_PERIOD_SEC, TICK_PERIOD_SEC
from gomoku.game.actions import KeyPress, LoopEvent, Tick
from gomoku.game.controller import GameEngine
from gomoku.game.debounce import InputDebouncer, PressSynchronizer
from gomoku.game.keys import event_for_code
from gomoku.game.state import DisplayState

logger = logging.getLogger(__name__)

RawSource = Callable[[], Tuple[bool, int]]
Observer = Callable[[DisplayState], None]

_STOP = object()


class KeySampler:
    """
    Polls a raw keypad source and turns it into KeyPress events.

    ``sample`` and ``clock`` may be driven by different threads at different
    rates; the only state they share is the debouncer's marker, which is
    swapped as one object. ``step`` does both, for single-threaded use.
    """

    def __init__(self, read: RawSource, put: Callable[[LoopEvent], None]) -> None:
        self.read = read
        self.put = put
        self.debouncer = InputDebouncer()
        self.sync = PressSynchronizer()

    def sample(self) -> None:
        pressed, code = self.read()
        self.debouncer.sample(pressed, code)

    def clock(self) -> Optional[int]:
        key = self.sync.clock(self.debouncer.marker)
        if key is not None:
            self.put(KeyPress(key))
        return key

    def step(self) -> Optional[int]:
        self.sample()
        return self.clock()


class EventLoop:
    def __init__(
        self,
        engine: GameEngine,
        read_keys: RawSource,
        observer: Optional[Observer] = None,
        sample_period: float = SAMPLE_PERIOD_SEC,
        sync_period: float = SYNC_PERIOD_SEC,
        tick_period: float = TICK_PERIOD_SEC,
    ) -> None:
        self.engine = engine
        self.observer = observer
        self.sample_period = sample_period
        self.sync_period = sync_period
        self.tick_period = tick_period

        self.events: "queue.Queue[Union[LoopEvent, object]]" = queue.Queue()
        self.sampler = KeySampler(read_keys, self.events.put)

        self._stop = threading.Event()
        self._threads: List[threading.Thread] = []

    # --- producers ---------------------------------------------------------

    def _sample_forever(self) -> None:
        while not self._stop.wait(self.sample_period):
            self.sampler.sample()

    def _sync_forever(self) -> None:
        while not self._stop.wait(self.sync_period):
            self.sampler.clock()

    def _tick_forever(self) -> None:
        while not self._stop.wait(self.tick_period):
            self.events.put(Tick())

    def start(self) -> None:
        producers = (
            (self._sample_forever, "key-sampler"),
            (self._sync_forever, "key-sync"),
            (self._tick_forever, "ticker"),
        )
        for target, name in producers:
            t = threading.Thread(target=target, name=name, daemon=True)
            t.start()
            self._threads.append(t)

    def stop(self) -> None:
        self._stop.set()
        self.events.put(_STOP)
        for t in self._threads:
            if t.is_alive():
                t.join(timeout=2.0)
        self._threads.clear()

    # --- consumer ----------------------------------------------------------

    def process(self, event: LoopEvent) -> None:
        if isinstance(event, Tick):
            self.engine.tick()
        elif isinstance(event, KeyPress):
            game_event = event_for_code(event.code)
            if game_event is None:
                logger.debug("Ignoring unmapped key code 0x%X", event.code)
                return
            self.engine.dispatch(game_event)
        else:
            raise ValueError(f"Unknown loop event: {event!r}")

        if self.observer is not None:
            self.observer(self.engine.display())

    def run(self, until_finished: bool = False) -> DisplayState:
        """
        Drain the queue until stop() is called (or the game ends when
        until_finished is set). Returns the last display state.
        """
        if self.observer is not None:
            self.observer(self.engine.display())

        while True:
            item = self.events.get()
            if item is _STOP:
                break
            self.process(item)  # type: ignore[arg-type]
            if until_finished and self.engine.finished:
                break

        return self.engine.display()

    def pump(self) -> int:
        """Process whatever is already queued without blocking. Returns the count."""
        n = 0
        while True:
            try:
                item = self.events.get_nowait()
            except queue.Empty:
                return n
            if item is _STOP:
                return n
            self.process(item)  # type: ignore[arg-type]
            n += 1
