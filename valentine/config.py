"""
Valentine app configuration.

Display settings come from the environment or a .env file next to this
module. Screen timings are fixed constants.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from package directory
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
FULLSCREEN = _get_bool('FULLSCREEN', False)
WINDOW_TITLE = "Will you be my Valentine?"

# Screen timings (seconds)
NO_SCREEN_DURATION = 3.5        # "No" interstitial returns to the proposal
RETRY_PROMPT_DELAY = 1.5        # Gameover retry prompt appears after this
RESET_SCORE_ON_RETRY = True

# Proposal menu, in display order
PROPOSAL_OPTIONS = (
    ('yes', "Yes!", "Of course I will!"),
    ('no', "No...", "I'm sorry..."),
)

# Visual
BACKGROUND_COLOR = (255, 228, 225)
NO_BACKGROUND_COLOR = (44, 44, 64)
GAMEOVER_BACKGROUND_COLOR = (44, 24, 16)
CELEBRATION_BACKGROUND_COLOR = (255, 240, 245)
ACCENT_COLOR = (255, 20, 147)
TEXT_COLOR = (74, 14, 78)
MUTED_TEXT_COLOR = (160, 82, 45)
SELECTED_TEXT_COLOR = (255, 255, 255)
