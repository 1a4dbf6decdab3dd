"""
HeartCatch - Heart and pickup spawner with time-pressure difficulty.

Spawn weights and cadence come from the difficulty band for the
remaining round time, so the game gets meaner as the clock runs down.
"""
import itertools
import random
from typing import Optional

from games.HeartCatch import config
from games.HeartCatch.collectible import Collectible, PowerUpPickup
from models.heartcatch import HeartKind, PowerUpKind
from valentine.logging import get_logger

log = get_logger('heart_spawner')


class HeartSpawner:
    """Creates falling hearts and the occasional power-up.

    The spawner is stateless about timing; the session decides when to
    call it. Randomness comes from an injectable ``random.Random``.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the spawner.

        Args:
            rng: Random source (a fresh unseeded one if omitted)
        """
        self._rng = rng or random.Random()
        self._ids = itertools.count(1)

    def spawn_interval(self, time_left: int) -> float:
        """Seconds until the next heart for the remaining round time."""
        return config.band_for(time_left).spawn_interval

    def choose_kind(self, time_left: int) -> HeartKind:
        """Weighted draw over heart kinds for the current band."""
        roll = self._rng.random()
        weights = config.band_for(time_left).weights
        threshold = 0.0
        for name, weight in weights:
            threshold += weight
            if roll < threshold:
                return HeartKind(name)
        # Rounding can leave the top sliver uncovered
        return HeartKind(weights[-1][0])

    def spawn_heart(self, time_left: int) -> Collectible:
        """Create a heart just above the playfield."""
        kind = self.choose_kind(time_left)
        low, high = config.HEART_SPAWN_X
        heart = Collectible(
            id=next(self._ids),
            x=self._rng.uniform(low, high),
            y=config.SPAWN_Y,
            kind=kind,
        )
        log.trace("heart #%d %s at x=%.1f", heart.id, kind.value, heart.x)
        return heart

    def maybe_spawn_pickup(self) -> Optional[PowerUpPickup]:
        """Roll for a power-up pickup; most rolls produce nothing."""
        if self._rng.random() >= config.PICKUP_SPAWN_CHANCE:
            return None
        kind = self._rng.choice(list(PowerUpKind))
        low, high = config.PICKUP_SPAWN_X
        pickup = PowerUpPickup(
            id=next(self._ids),
            x=self._rng.uniform(low, high),
            y=config.SPAWN_Y,
            kind=kind,
        )
        log.debug("pickup #%d %s at x=%.1f", pickup.id, kind.value, pickup.x)
        return pickup
