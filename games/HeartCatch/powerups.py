"""
HeartCatch - Power-up state.

At most one modifier is active. Catching a new pickup replaces the old one
outright; effects never stack.
"""
from typing import Optional

from models.heartcatch import ActivePowerUp, PowerUpKind
from valentine.logging import get_logger

log = get_logger('power_ups')


class PowerUpState:
    """Holds the single active power-up, if any."""

    def __init__(self):
        self._active: Optional[ActivePowerUp] = None

    @property
    def active(self) -> Optional[ActivePowerUp]:
        return self._active

    @property
    def kind(self) -> Optional[PowerUpKind]:
        """Kind of the active power-up, None when nothing is active."""
        return self._active.kind if self._active else None

    def activate(self, power_up: ActivePowerUp) -> None:
        """Make ``power_up`` the active modifier, discarding any previous one."""
        if self._active is not None:
            log.debug("%s replaced by %s", self._active.kind.value, power_up.kind.value)
        else:
            log.debug("%s active until %.2f", power_up.kind.value, power_up.expires_at)
        self._active = power_up

    def expire(self, now: float) -> bool:
        """Clear the active power-up once past its expiry.

        Returns:
            True if a power-up was cleared
        """
        if self._active is not None and self._active.is_expired(now):
            log.debug("%s expired", self._active.kind.value)
            self._active = None
            return True
        return False
