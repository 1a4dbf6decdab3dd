"""
HeartCatch - Falling entities.

Hearts and power-up pickups fall straight down the playfield. Movement is
per simulation tick, not per second: one tick moves an entity by its speed.
"""
from dataclasses import dataclass
from typing import Optional

from games.HeartCatch import config
from models.heartcatch import (
    ActivePowerUp,
    CollectibleView,
    HeartKind,
    PickupView,
    PowerUpKind,
)


def fall_speed(time_left: int, power_up: Optional[PowerUpKind] = None) -> float:
    """Heart fall speed for the remaining time, slowed by an active rose."""
    speed = config.band_for(time_left).fall_speed
    if power_up == PowerUpKind.ROSE:
        speed *= config.ROSE_SLOWDOWN
    return speed


def pickup_speed(power_up: Optional[PowerUpKind] = None) -> float:
    """Pickup fall speed, independent of difficulty."""
    speed = config.PICKUP_SPEED
    if power_up == PowerUpKind.ROSE:
        speed *= config.ROSE_SLOWDOWN
    return speed


def catch_radius(power_up: Optional[PowerUpKind] = None) -> float:
    """Horizontal reach of the basket for hearts."""
    if power_up == PowerUpKind.MAGNET:
        return config.MAGNET_CATCH_RADIUS
    return config.CATCH_RADIUS


@dataclass
class _Falling:
    """Shared position logic for anything that falls."""
    id: int
    x: float
    y: float

    def fall(self, speed: float) -> None:
        self.y += speed

    @property
    def in_catch_band(self) -> bool:
        low, high = config.CATCH_BAND
        return low <= self.y <= high

    def is_caught_by(self, player_x: float, radius: float) -> bool:
        """In the basket's band and horizontally within ``radius``."""
        return self.in_catch_band and abs(self.x - player_x) < radius

    @property
    def is_off_screen(self) -> bool:
        return self.y >= config.FLOOR_Y


@dataclass
class Collectible(_Falling):
    """A falling heart worth points (or costing them)."""
    kind: HeartKind = HeartKind.PINK

    @property
    def points(self) -> int:
        return config.HEART_POINTS[self.kind.value]

    @property
    def is_good(self) -> bool:
        return self.points > 0

    def pull_toward(self, target_x: float, strength: float = config.MAGNET_PULL) -> None:
        """Close a fraction of the horizontal gap to ``target_x``."""
        self.x += (target_x - self.x) * strength

    def value_with(self, power_up: Optional[PowerUpKind] = None) -> int:
        """Point value after power-up modifiers (a letter doubles good hearts)."""
        if self.is_good and power_up == PowerUpKind.LETTER:
            return self.points * config.LETTER_MULTIPLIER
        return self.points

    def to_view(self) -> CollectibleView:
        return CollectibleView(id=self.id, x=self.x, y=self.y, kind=self.kind)


@dataclass
class PowerUpPickup(_Falling):
    """A falling power-up; catching it activates the modifier."""
    kind: PowerUpKind = PowerUpKind.ROSE

    @property
    def duration(self) -> float:
        return config.POWER_UP_DURATIONS[self.kind.value]

    def activate(self, now: float) -> ActivePowerUp:
        return ActivePowerUp(kind=self.kind, expires_at=now + self.duration)

    def to_view(self) -> PickupView:
        return PickupView(id=self.id, x=self.x, y=self.y, kind=self.kind)
