# src/gomoku/config.py

from __future__ import annotations

BOARD_SIZE = 16
WIN_LENGTH = 5

# Turn clock
TURN_SECONDS = 99
TICK_PERIOD_SEC = 1.0

# Keypad sampling / debounce
SAMPLE_PERIOD_SEC = 0.01
RELEASE_THRESHOLD = 6   # consecutive "no key" samples before a release counts
SYNC_STAGES = 2         # synchronizer depth between sampler and consumer
SYNC_PERIOD_SEC = 0.02  # must clock at least once per press/release cycle
PRESS_HOLD_SAMPLES = 12  # how long the simulated keypad holds a key down

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

LOG_LEVEL = "WARNING"
