"""
Score and combo tracking for HeartCatch.

Uses an immutable state pattern: every operation returns a new
ScoreTracker wrapping a new ScoreData, leaving the original untouched.

Scoring rules:
    - A good heart adds its (possibly power-up boosted) value, bumps the
      combo, and adds a bonus of 5 points for every 3 combo steps.
    - A broken heart subtracts its value (never below zero) and breaks
      the combo.
    - The combo also lapses after 2 seconds without a good catch.

Examples:
    >>> tracker = ScoreTracker().record_catch(5, now=1.0).record_catch(5, now=1.2)
    >>> tracker.record_catch(5, now=1.4).get_stats().score
    20
    >>> tracker.record_catch(-10, now=1.4).get_stats().combo
    0
"""

from typing import Optional

from games.HeartCatch import config
from models.heartcatch import ScoreData


def combo_bonus(combo: int) -> int:
    """Bonus points earned by a catch that brings the combo to ``combo``."""
    return (combo // config.COMBO_STEP) * config.COMBO_BONUS


class ScoreTracker:
    """Tracks score and combo with immutable state.

    Attributes:
        _score: Internal ScoreData model (private, immutable)
    """

    def __init__(self, score: Optional[ScoreData] = None):
        """Initialize score tracker.

        Args:
            score: Initial score data. If None, starts with zeros.
        """
        self._score = score if score is not None else ScoreData()

    @property
    def score(self) -> int:
        return self._score.score

    @property
    def combo(self) -> int:
        return self._score.combo

    def record_catch(self, value: int, now: float) -> 'ScoreTracker':
        """Record a caught heart.

        Args:
            value: Heart value after power-up modifiers
            now: Scheduler time of the catch

        Returns:
            New ScoreTracker instance with updated state
        """
        s = self._score
        if value > 0:
            combo = s.combo + 1
            return ScoreTracker(ScoreData(
                score=s.score + value + combo_bonus(combo),
                combo=combo,
                last_catch_at=now,
                max_combo=max(combo, s.max_combo),
                caught=s.caught + 1,
                broken_caught=s.broken_caught,
            ))

        return ScoreTracker(ScoreData(
            score=max(0, s.score + value),
            combo=0,
            last_catch_at=s.last_catch_at,
            max_combo=s.max_combo,
            caught=s.caught,
            broken_caught=s.broken_caught + 1,
        ))

    def expire_combo(self, now: float) -> 'ScoreTracker':
        """Drop the combo if the last good catch is too long ago.

        Returns self unchanged when there is nothing to expire.
        """
        s = self._score
        if s.combo == 0 or s.last_catch_at is None:
            return self
        if now - s.last_catch_at < config.COMBO_WINDOW:
            return self
        return ScoreTracker(s.model_copy(update={'combo': 0}))

    def get_stats(self) -> ScoreData:
        """Get current score data."""
        return self._score
