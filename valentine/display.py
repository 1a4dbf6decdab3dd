"""
Display model for the app screens.

Pure functions from an AppSnapshot (or its fields) to text and animation
values. Decorations are functions of time alone, so the screens need no
animation state of their own.
"""
import math
from typing import List, Tuple

from games.HeartCatch import config as game_config
from valentine import config

MenuLine = Tuple[str, str, bool]


def proposal_menu(menu_index: int) -> List[MenuLine]:
    """(label, description, selected) for each proposal option."""
    return [
        (label, description, i == menu_index)
        for i, (_, label, description) in enumerate(config.PROPOSAL_OPTIONS)
    ]


def heartbeat_scale(now: float, bpm: float = 72.0) -> float:
    """Pulse between 1.0 and 1.15 with a quick double beat."""
    phase = (now * bpm / 60.0) % 1.0
    beat = max(0.0, math.sin(phase * 2 * math.pi)) ** 4
    return 1.0 + 0.15 * beat


def falling_decorations(now: float, count: int = 16, speed: float = 4.0) -> List[Tuple[float, float]]:
    """Positions (x: 0-100, y: 0-30) of background hearts or raindrops at ``now``."""
    points = []
    for i in range(count):
        x = (i * 37.0 + 11.0) % 100.0
        x += math.sin(now * 0.8 + i) * 1.5
        y = (i * 7.3 + now * speed * (1.0 + (i % 3) * 0.25)) % 32.0 - 2.0
        points.append((x % 100.0, y))
    return points


def no_screen_remaining(entered_at: float, now: float) -> float:
    """Seconds until the "no" interstitial returns to the proposal."""
    return max(0.0, config.NO_SCREEN_DURATION - (now - entered_at))


def outcome_title(final_score: int) -> str:
    if final_score >= game_config.WIN_SCORE:
        return "Happy Valentine's Day!"
    return "Time's Up!"


def outcome_message(final_score: int) -> str:
    if final_score >= game_config.WIN_SCORE:
        return f"You collected {final_score} love points. I love you!"
    return f"You collected {final_score} love points. Need {game_config.WIN_SCORE} to win..."


def firework_frame(now: float, index: int) -> int:
    """Animation frame (0-3) of the ``index``-th celebration firework."""
    return (int(now / 0.3) + index) % 4
