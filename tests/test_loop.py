import threading

from gomoku import config
from gomoku.game.actions import KeyPress, Tick
from gomoku.game.controller import GameEngine
from gomoku.game.keys import KEY_CONFIRM, KEY_CONFIRM_ALT, KEY_RIGHT, event_for_code
from gomoku.game.loop import EventLoop, KeySampler
from gomoku.main import play_script
from gomoku.types import Cell, Player
from gomoku.ui.keypad import SimulatedKeypad
from gomoku.ui.prompts import parse_keys


def make_loop(observer=None):
    keypad = SimulatedKeypad()
    return keypad, EventLoop(GameEngine(), keypad.read, observer=observer)


def drive(keypad, loop, extra=10):
    while not keypad.idle:
        loop.sampler.step()
    for _ in range(extra):
        loop.sampler.step()
    return loop.pump()


def test_both_confirm_keys_map_to_confirm():
    assert event_for_code(KEY_CONFIRM) == event_for_code(KEY_CONFIRM_ALT)
    assert event_for_code(0x0) is None


def test_keypad_presses_reach_the_engine_once_each():
    keypad, loop = make_loop()
    keypad.press_all([KEY_RIGHT, KEY_RIGHT, KEY_CONFIRM_ALT])
    assert drive(keypad, loop) == 3
    assert loop.engine.cursor == (0, 2)
    assert loop.engine.board.get(0, 2) is Cell.ONE
    assert loop.engine.current is Player.TWO


def test_unmapped_codes_are_ignored():
    seen = []
    keypad, loop = make_loop(observer=seen.append)
    keypad.press_all([0x0, 0x3, 0xA])
    assert drive(keypad, loop) == 3
    assert seen == []
    assert loop.engine.cursor == (0, 0)


def test_ticks_and_keys_share_one_queue_in_order():
    seen = []
    _, loop = make_loop(observer=seen.append)
    for _ in range(98):
        loop.events.put(Tick())
    loop.events.put(KeyPress(KEY_CONFIRM))
    loop.events.put(Tick())
    loop.pump()

    assert loop.engine.board.get(0, 0) is Cell.ONE
    assert loop.engine.current is Player.TWO
    assert loop.engine.timer.seconds_left == 98
    assert len(seen) == 100
    assert seen[97].seconds_left == 1


def test_play_script_reaches_a_win(win_keys):
    final = play_script(win_keys)
    assert final.outcome.winner is Player.ONE
    assert final.winning_line == tuple((0, c) for c in range(5))


def test_threads_feed_the_loop(win_keys):
    keypad, loop = make_loop()
    loop.sample_period = 0.001
    loop.sync_period = 0.003
    loop.tick_period = 60.0
    keypad.press_all(parse_keys(win_keys))

    guard = threading.Timer(20.0, loop.stop)
    guard.start()
    loop.start()
    try:
        final = loop.run(until_finished=True)
    finally:
        loop.stop()
        guard.cancel()

    assert final.outcome.winner is Player.ONE


def test_simulated_keypad_hold_and_gap():
    keypad = SimulatedKeypad(hold=3, gap=2)
    keypad.press(5)
    reads = [keypad.read() for _ in range(6)]
    assert reads == [(True, 5)] * 3 + [(False, 0)] * 3
    assert keypad.idle
    assert config.RELEASE_THRESHOLD < SimulatedKeypad().gap


def test_sampler_and_synchronizer_on_separate_clocks():
    keypad = SimulatedKeypad()
    got = []
    sampler = KeySampler(keypad.read, got.append)
    keypad.press_all([KEY_RIGHT, KEY_CONFIRM, KEY_RIGHT])

    # Three raw samples per synchronizer clock.
    for _ in range(200):
        for _ in range(3):
            sampler.sample()
        sampler.clock()

    assert [e.code for e in got] == [KEY_RIGHT, KEY_CONFIRM, KEY_RIGHT]
