"""
HeartCatch-specific models package.

Enums and immutable snapshot models for the falling-hearts mini-game.
"""

from .enums import (
    HeartKind,
    PowerUpKind,
    SessionPhase,
    Outcome,
)

from .models import (
    ScoreData,
    ActivePowerUp,
    CollectibleView,
    PickupView,
    SessionSnapshot,
)

__all__ = [
    "HeartKind",
    "PowerUpKind",
    "SessionPhase",
    "Outcome",
    "ScoreData",
    "ActivePowerUp",
    "CollectibleView",
    "PickupView",
    "SessionSnapshot",
]
