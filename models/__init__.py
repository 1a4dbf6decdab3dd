"""
Models library for the Valentine app.

This package provides the Pydantic data models shared by the app shell,
the HeartCatch game and the renderers:
- HeartCatch: entity kinds, session phases and frame snapshots
- App: screens, proposal choices and the app snapshot

Usage:
    >>> from models import Screen, SessionSnapshot
    >>> from models.heartcatch import HeartKind, PowerUpKind
"""

# ============================================================================
# HeartCatch models
# ============================================================================
from .heartcatch import (
    HeartKind,
    PowerUpKind,
    SessionPhase,
    Outcome,
    ScoreData,
    ActivePowerUp,
    CollectibleView,
    PickupView,
    SessionSnapshot,
)

# ============================================================================
# App models
# ============================================================================
from .app import (
    Screen,
    ProposalChoice,
    AppSnapshot,
)

__all__ = [
    # HeartCatch
    "HeartKind",
    "PowerUpKind",
    "SessionPhase",
    "Outcome",
    "ScoreData",
    "ActivePowerUp",
    "CollectibleView",
    "PickupView",
    "SessionSnapshot",
    # App
    "Screen",
    "ProposalChoice",
    "AppSnapshot",
]
