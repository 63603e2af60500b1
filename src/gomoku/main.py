from __future__ import annotations

import argparse
import logging
import sys
import threading
from typing import List, Optional

from gomoku import config
from gomoku.game.controller import GameEngine
from gomoku.game.loop import EventLoop
from gomoku.game.state import DisplayState
from gomoku.ui.keypad import SimulatedKeypad
from gomoku.ui.prompts import parse_keys
from gomoku.ui.render import render

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Two-player 16x16 gomoku in the terminal.")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between frames")
    ap.add_argument("--log-level", type=str, default=config.LOG_LEVEL, help="Logging level (DEBUG, INFO, ...)")
    ap.add_argument(
        "--script",
        type=str,
        default=None,
        help="Play back a key string (same keys as interactive mode) without waiting for input",
    )
    return ap


def play_script(keys: str, observer=None) -> DisplayState:
    """
    Feed a key string through the keypad, debouncer and engine on the
    calling thread. The turn clock does not run.
    """
    codes = parse_keys(keys) or []
    keypad = SimulatedKeypad()
    keypad.press_all(codes)

    loop = EventLoop(GameEngine(), keypad.read, observer=observer)
    # Keep sampling past the last release so the synchronizer drains.
    tail = config.SYNC_STAGES + 1
    while not keypad.idle or tail > 0:
        if keypad.idle:
            tail -= 1
        loop.sampler.step()
        loop.pump()
        if loop.engine.finished:
            break
    return loop.engine.display()


def _read_input(keypad: SimulatedKeypad, loop: EventLoop) -> None:
    for raw in sys.stdin:
        codes = parse_keys(raw)
        if codes is None:
            break
        keypad.press_all(codes)
    loop.stop()


def play_interactive() -> DisplayState:
    keypad = SimulatedKeypad()
    loop = EventLoop(GameEngine(), keypad.read, observer=render)

    reader = threading.Thread(target=_read_input, args=(keypad, loop), name="stdin", daemon=True)
    reader.start()
    loop.start()
    try:
        return loop.run(until_finished=True)
    except KeyboardInterrupt:
        return loop.engine.display()
    finally:
        loop.stop()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.script is not None:
        final = play_script(args.script)
        render(final)
    else:
        final = play_interactive()
        render(final)

    if final.outcome.winner is not None:
        logger.info("Game over, winner: %s", final.outcome.winner.name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
