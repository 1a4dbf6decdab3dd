"""
HeartCatch data models.

Immutable views of a game session, handed to renderers once per frame.
The live session mutates plain dataclasses; these models are the read-only
contract between the simulation and everything that draws it.
"""
import math
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from games.HeartCatch import config
from .enums import HeartKind, PowerUpKind, SessionPhase


class ScoreData(BaseModel):
    """Immutable score state.

    Attributes:
        score: Love points collected (never negative)
        combo: Consecutive positive catches without a break
        last_catch_at: Scheduler time of the last positive catch
        max_combo: Highest combo reached this session
        caught: Number of positive hearts caught
        broken_caught: Number of broken hearts caught

    Examples:
        >>> ScoreData(score=40, combo=3).combo_bonus
        5
        >>> ScoreData().reached_goal
        False
    """
    score: int = 0
    combo: int = 0
    last_catch_at: Optional[float] = None
    max_combo: int = 0
    caught: int = 0
    broken_caught: int = 0

    model_config = ConfigDict(frozen=True)

    @field_validator('score', 'combo', 'max_combo', 'caught', 'broken_caught')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate score values are non-negative."""
        if v < 0:
            raise ValueError(f'Score values must be non-negative, got {v}')
        return v

    @computed_field
    @property
    def combo_bonus(self) -> int:
        """Bonus the current combo adds to a positive catch."""
        return (self.combo // config.COMBO_STEP) * config.COMBO_BONUS

    @computed_field
    @property
    def reached_goal(self) -> bool:
        """True once the score is enough to win."""
        return self.score >= config.WIN_SCORE


class ActivePowerUp(BaseModel):
    """The single power-up currently in effect.

    Attributes:
        kind: Which modifier is active
        expires_at: Scheduler time after which it no longer applies

    Examples:
        >>> p = ActivePowerUp(kind=PowerUpKind.ROSE, expires_at=5.0)
        >>> p.is_expired(5.0), p.is_expired(5.01)
        (False, True)
    """
    kind: PowerUpKind
    expires_at: float

    model_config = ConfigDict(frozen=True)

    @field_validator('expires_at')
    @classmethod
    def validate_expiry(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f'Expiry must be non-negative, got {v}')
        return v

    def is_expired(self, now: float) -> bool:
        """Expired strictly after ``expires_at``."""
        return now > self.expires_at

    def remaining(self, now: float) -> int:
        """Whole seconds left, rounded up, never negative."""
        return max(0, math.ceil(self.expires_at - now))


class CollectibleView(BaseModel):
    """Read-only view of a falling heart."""
    id: int
    x: float = Field(ge=0.0, le=config.FIELD_WIDTH)
    y: float
    kind: HeartKind

    model_config = ConfigDict(frozen=True)


class PickupView(BaseModel):
    """Read-only view of a falling power-up pickup."""
    id: int
    x: float = Field(ge=0.0, le=config.FIELD_WIDTH)
    y: float
    kind: PowerUpKind

    model_config = ConfigDict(frozen=True)


class SessionSnapshot(BaseModel):
    """Everything a renderer needs to draw one frame of a session.

    Attributes:
        phase: Current session phase
        countdown_value: Seconds left in the countdown (3 -> 0)
        time_left: Seconds left in the round (60 -> 0)
        player_x: Basket centre, clamped to the playable range
        score: Score and combo state
        collectibles: Falling hearts
        pickups: Falling power-ups
        active_power_up: Modifier currently in effect, if any
        now: Scheduler time the snapshot was taken at
    """
    phase: SessionPhase
    countdown_value: int = Field(ge=0, le=config.COUNTDOWN_START)
    time_left: int = Field(ge=0, le=config.ROUND_TIME)
    player_x: float = Field(ge=config.PLAYER_MIN_X, le=config.PLAYER_MAX_X)
    score: ScoreData
    collectibles: Tuple[CollectibleView, ...] = ()
    pickups: Tuple[PickupView, ...] = ()
    active_power_up: Optional[ActivePowerUp] = None
    now: float = 0.0

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def is_finished(self) -> bool:
        return self.phase.is_finished
