"""
HeartCatch - Configuration with difficulty bands.

Game rules are fixed constants. Only display settings can be
overridden through the environment or a .env file next to this module.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 1280)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 720)
FPS = _get_int('FPS', 60)
SHOW_DEBUG_HUD = _get_bool('SHOW_DEBUG_HUD', False)

# Playfield, in abstract units (x: 0-100 left to right, y: down is positive)
FIELD_WIDTH = 100.0
FIELD_HEIGHT = 26.0
SPAWN_Y = -2.0
FLOOR_Y = 26.0              # Entities at or past this line are gone
CATCH_BAND = (22.0, 24.0)   # Inclusive vertical band of the basket
HEART_SPAWN_X = (10.0, 90.0)
PICKUP_SPAWN_X = (15.0, 85.0)

# Player basket
PLAYER_START_X = 40.0
PLAYER_MIN_X = 5.0
PLAYER_MAX_X = 92.0
PLAYER_STEP = 5.0

# Session timing (seconds)
COUNTDOWN_START = 3
ROUND_TIME = 60
CLOCK_INTERVAL = 1.0
TICK_INTERVAL = 0.05
POWER_UP_POLL_INTERVAL = 0.1
PICKUP_SPAWN_INTERVAL = 3.0
PICKUP_SPAWN_CHANCE = 0.15
OUTCOME_REPORT_DELAY = 2.0

# Scoring
WIN_SCORE = 100
HEART_POINTS: Dict[str, int] = {
    'pink': 5,
    'sparkle': 10,
    'gift': 25,
    'broken': -10,
}
COMBO_WINDOW = 2.0          # Seconds without a catch before combo resets
COMBO_STEP = 3              # Every 3rd consecutive catch raises the bonus
COMBO_BONUS = 5

# Catch radii (horizontal distance from basket centre)
CATCH_RADIUS = 6.0
MAGNET_CATCH_RADIUS = 10.0
PICKUP_CATCH_RADIUS = 8.0

# Power-ups
POWER_UP_DURATIONS: Dict[str, float] = {
    'rose': 5.0,
    'letter': 8.0,
    'magnet': 6.0,
}
ROSE_SLOWDOWN = 0.4         # Speed multiplier while a rose is active
LETTER_MULTIPLIER = 2       # Positive heart values are doubled
MAGNET_PULL = 0.08          # Fraction of horizontal gap closed per tick
PICKUP_SPEED = 0.5


# Difficulty bands - spawn weights and fall speed bundled together
@dataclass(frozen=True)
class DifficultyBand:
    """Spawn and movement parameters for a range of remaining time."""
    name: str
    min_time_left: int          # Band applies while time_left > min_time_left
    spawn_interval: float       # Seconds between heart spawns
    fall_speed: float           # Units per simulation tick
    weights: Tuple[Tuple[str, float], ...]


DIFFICULTY_BANDS: Tuple[DifficultyBand, ...] = (
    DifficultyBand(
        name='easy',
        min_time_left=40,
        spawn_interval=0.8,
        fall_speed=0.4,
        weights=(('pink', 0.85), ('sparkle', 0.10), ('gift', 0.03), ('broken', 0.02)),
    ),
    DifficultyBand(
        name='medium',
        min_time_left=20,
        spawn_interval=0.6,
        fall_speed=0.6,
        weights=(('pink', 0.70), ('sparkle', 0.15), ('gift', 0.07), ('broken', 0.08)),
    ),
    DifficultyBand(
        name='hard',
        min_time_left=-1,
        spawn_interval=0.4,
        fall_speed=0.8,
        weights=(('pink', 0.50), ('sparkle', 0.20), ('gift', 0.15), ('broken', 0.15)),
    ),
)


def band_for(time_left: int) -> DifficultyBand:
    """Pick the difficulty band for the remaining round time."""
    for band in DIFFICULTY_BANDS:
        if time_left > band.min_time_left:
            return band
    return DIFFICULTY_BANDS[-1]


# Visual
BACKGROUND_COLOR = (255, 228, 225)      # Misty rose
PLAYFIELD_BORDER_COLOR = (255, 20, 147)
BASKET_COLOR = (156, 39, 176)
TEXT_COLOR = (74, 14, 78)

HEART_COLORS: Dict[str, Tuple[int, int, int]] = {
    'pink': (255, 105, 180),
    'sparkle': (255, 215, 0),
    'gift': (255, 20, 147),
    'broken': (102, 102, 102),
}
POWER_UP_COLORS: Dict[str, Tuple[int, int, int]] = {
    'rose': (220, 20, 60),
    'letter': (255, 255, 255),
    'magnet': (156, 39, 176),
}
METER_COLORS = {
    'low': (255, 105, 180),     # Hot pink
    'mid': (255, 20, 147),      # Deep pink
    'high': (220, 20, 60),      # Crimson
}
