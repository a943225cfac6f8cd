from __future__ import annotations

# Generator shape defaults
DEFAULT_COUNT = 50_000
DEFAULT_MAX_OFFSET_STEP = 3
DEFAULT_SCORE_CHANGE_PROBABILITY = 0.0001
DEFAULT_HOME_SCORE_PROBABILITY = 0.45

# Game start
KICKOFF_OFFSET = 0
INITIAL_HOME = 0
INITIAL_AWAY = 0

DEFAULT_SEED = 1234
