import os
from dataclasses import dataclass
from datetime import date

# Board
ROWS, COLS = 20, 20
START_POS = (1, 1)          # (row, col)
LIGHT_RADIUS = 5            # Manhattan distance lit around the player

# Safe zone around the start: rows 1..5, cols 1..5 never receive a feature.
RESTRICTED_ROWS = (1, 5)
RESTRICTED_COLS = (1, 5)

# Generation
CRACK_CHANCE = 0.05
TRAP_COUNT = 5
TIME_BONUS_COUNT = 4
PLACEMENT_MAX_DRAWS = 10_000

# Gameplay
TIME_BONUS_SECONDS = 5.0
ENEMY_MOVE_INTERVAL_MS = 100
ENEMY_SPAWN_LETTERS = 3
WIN_LETTERS = 4

# Popup lifetimes (ms)
TRAP_MESSAGE_MS = 1000
TIME_MESSAGE_MS = 1000
SUMMONED_MESSAGE_MS = 500

# Day 1 of the daily puzzle
REFERENCE_DATE = date(2025, 1, 5)

SHARE_URL = "https://dailyseanle.com"


@dataclass(frozen=True)
class Rules:
    time_bonus_seconds: float = TIME_BONUS_SECONDS
    enemy_interval_ms: int = ENEMY_MOVE_INTERVAL_MS
    max_draws: int = PLACEMENT_MAX_DRAWS
    light_radius: int = LIGHT_RADIUS


# Default rules (a launcher may build its own)
RULES = Rules()


def state_path() -> str:
    """Where the daily result is kept between runs."""
    return os.getenv("SEANLE_STATE_PATH", os.path.join(os.path.expanduser("~"), ".seanle.json"))
