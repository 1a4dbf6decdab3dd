"""
HeartCatch-specific enumerations.

These enums name the falling entities and the phases of one game session.
"""

from enum import Enum


class HeartKind(str, Enum):
    """Kinds of falling hearts (collectibles).

    Attributes:
        PINK: Common heart, small positive value
        SPARKLE: Uncommon heart, medium positive value
        GIFT: Rare heart, large positive value
        BROKEN: Hazard, negative value and breaks the combo
    """
    PINK = "pink"
    SPARKLE = "sparkle"
    GIFT = "gift"
    BROKEN = "broken"


class PowerUpKind(str, Enum):
    """Kinds of power-up pickups.

    Attributes:
        ROSE: Slow motion for everything falling
        LETTER: Love letter, doubles positive heart values
        MAGNET: Pulls good hearts toward the basket and widens it
    """
    ROSE = "rose"
    LETTER = "letter"
    MAGNET = "magnet"


class SessionPhase(str, Enum):
    """Phases of one HeartCatch session.

    COUNTDOWN -> PLAYING -> WON | LOST. WON and LOST are terminal.
    """
    COUNTDOWN = "countdown"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_finished(self) -> bool:
        return self in (SessionPhase.WON, SessionPhase.LOST)


class Outcome(str, Enum):
    """Result reported upward when a session ends."""
    WON = "won"
    LOST = "lost"
