"""
HeartCatch - Display model.

Pure functions from a SessionSnapshot (or pieces of it) to the values a
renderer draws. Nothing here touches pygame or mutates the session.
"""
from typing import Optional, Tuple

from games.HeartCatch import config
from models.heartcatch import ActivePowerUp, SessionPhase, SessionSnapshot

Rect = Tuple[int, int, int, int]

POWER_UP_NAMES = {
    'rose': 'Slow-mo Rose',
    'letter': 'Love Letter x2',
    'magnet': 'Heart Magnet',
}


def love_meter_percent(score: int) -> int:
    """Fill level of the love meter, 0-100."""
    return max(0, min(100, score * 100 // config.WIN_SCORE))


def meter_color(percent: int) -> Tuple[int, int, int]:
    if percent < 30:
        return config.METER_COLORS['low']
    if percent < 70:
        return config.METER_COLORS['mid']
    return config.METER_COLORS['high']


def combo_label(combo: int) -> str:
    """Combo banner text, empty until the combo starts paying a bonus."""
    if combo < config.COMBO_STEP:
        return ''
    return f"x{combo} COMBO!"


def timer_is_urgent(time_left: int) -> bool:
    return time_left <= 10


def power_up_label(active: Optional[ActivePowerUp], now: float) -> str:
    """Name and seconds left of the active power-up, empty if none."""
    if active is None or active.is_expired(now):
        return ''
    name = POWER_UP_NAMES.get(active.kind.value, active.kind.value)
    return f"{name} {active.remaining(now)}s"


def countdown_label(value: int) -> str:
    return str(value) if value > 0 else 'GO!'


def phase_banner(snapshot: SessionSnapshot) -> str:
    """Large centred text for the current phase, empty while playing."""
    if snapshot.phase == SessionPhase.COUNTDOWN:
        return countdown_label(snapshot.countdown_value)
    if snapshot.phase == SessionPhase.WON:
        return 'You did it! 100 love points!'
    if snapshot.phase == SessionPhase.LOST:
        return "Time's up!"
    return ''


def to_screen(x: float, y: float, field: Rect) -> Tuple[int, int]:
    """Map playfield units to pixels inside ``field`` (left, top, width, height)."""
    left, top, width, height = field
    px = left + x / config.FIELD_WIDTH * width
    py = top + y / config.FIELD_HEIGHT * height
    return int(round(px)), int(round(py))


def playfield_rect(screen_width: int, screen_height: int, hud_height: int = 80) -> Rect:
    """Playfield area below the HUD, with a small margin."""
    margin = 20
    return (margin, hud_height, screen_width - 2 * margin, screen_height - hud_height - margin)
