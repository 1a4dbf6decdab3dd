"""Tests for the single-slot power-up state."""
import pytest
from pydantic import ValidationError

from games.HeartCatch.powerups import PowerUpState
from models.heartcatch import ActivePowerUp, PowerUpKind


class TestPowerUpState:
    """Activation, replacement and expiry."""

    def test_starts_empty(self):
        state = PowerUpState()
        assert state.active is None
        assert state.kind is None

    def test_activate(self):
        state = PowerUpState()
        state.activate(ActivePowerUp(kind=PowerUpKind.MAGNET, expires_at=6.0))

        assert state.kind == PowerUpKind.MAGNET
        assert state.active.expires_at == 6.0

    def test_new_power_up_replaces_old(self):
        state = PowerUpState()
        state.activate(ActivePowerUp(kind=PowerUpKind.ROSE, expires_at=5.0))
        state.activate(ActivePowerUp(kind=PowerUpKind.LETTER, expires_at=9.0))

        assert state.kind == PowerUpKind.LETTER
        assert state.active.expires_at == 9.0

    def test_not_expired_at_expiry_time(self):
        state = PowerUpState()
        state.activate(ActivePowerUp(kind=PowerUpKind.ROSE, expires_at=5.0))

        assert state.expire(5.0) is False
        assert state.kind == PowerUpKind.ROSE

    def test_expired_after_expiry_time(self):
        state = PowerUpState()
        state.activate(ActivePowerUp(kind=PowerUpKind.ROSE, expires_at=5.0))

        assert state.expire(5.1) is True
        assert state.active is None
        assert state.expire(6.0) is False


class TestActivePowerUp:
    """The active power-up model."""

    @pytest.mark.parametrize("now,remaining", [(0.0, 5), (0.5, 5), (4.01, 1), (5.0, 0), (7.0, 0)])
    def test_remaining_rounds_up(self, now, remaining):
        assert ActivePowerUp(kind=PowerUpKind.ROSE, expires_at=5.0).remaining(now) == remaining

    def test_negative_expiry_rejected(self):
        with pytest.raises(ValidationError):
            ActivePowerUp(kind=PowerUpKind.ROSE, expires_at=-1.0)
