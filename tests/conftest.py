"""Pytest fixtures shared by the Valentine and HeartCatch tests."""
import pytest

from games.HeartCatch.collectible import Collectible, PowerUpPickup
from games.HeartCatch.game_mode import HeartCatchMode
from models.heartcatch import HeartKind, PowerUpKind
from valentine import logging as vlog
from valentine.scheduler import TickScheduler


class FakeRandom:
    """Scripted stand-in for random.Random.

    ``random()`` pops from ``rolls`` and falls back to ``default_roll``;
    ``uniform(a, b)`` returns ``x`` clamped into [a, b] (default: b);
    ``choice(seq)`` returns ``seq[choice_index]``. Every call is recorded.
    """

    def __init__(self, rolls=(), default_roll=0.5, x=None, choice_index=0):
        self.rolls = list(rolls)
        self.default_roll = default_roll
        self.x = x
        self.choice_index = choice_index
        self.uniform_calls = []

    def random(self):
        if self.rolls:
            return self.rolls.pop(0)
        return self.default_roll

    def uniform(self, a, b):
        self.uniform_calls.append((a, b))
        if self.x is None:
            return b
        return min(b, max(a, self.x))

    def choice(self, seq):
        return seq[self.choice_index]


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence log output for a test, restore defaults after."""
    saved_default = vlog._config['default_level']
    saved_modules = dict(vlog._config['module_levels'])
    vlog.configure_logging(level='OFF')
    yield
    vlog._config['default_level'] = saved_default
    vlog._config['module_levels'].clear()
    vlog._config['module_levels'].update(saved_modules)
    vlog.set_clock(None)


@pytest.fixture
def scheduler():
    return TickScheduler()


@pytest.fixture
def fake_rng():
    """Spawns pink hearts at x=90 and never rolls a pickup."""
    return FakeRandom()


@pytest.fixture
def outcomes():
    """Collects (outcome, score) reports from sessions."""
    return []


@pytest.fixture
def session(scheduler, fake_rng, outcomes):
    """A started session still in its countdown."""
    game = HeartCatchMode(
        scheduler,
        on_finished=lambda outcome, score: outcomes.append((outcome, score)),
        rng=fake_rng,
    )
    game.start()
    return game


@pytest.fixture
def playing(session, scheduler):
    """A session that has just entered PLAYING (scheduler at t=3.0)."""
    scheduler.advance(3.0)
    return session


def place_heart(game, kind=HeartKind.PINK, x=40.0, y=0.0, heart_id=1000):
    """Drop a heart straight into a session's playfield."""
    heart = Collectible(id=heart_id, x=x, y=y, kind=kind)
    game._collectibles.append(heart)
    return heart


def place_pickup(game, kind=PowerUpKind.ROSE, x=40.0, y=0.0, pickup_id=2000):
    """Drop a power-up pickup straight into a session's playfield."""
    pickup = PowerUpPickup(id=pickup_id, x=x, y=y, kind=kind)
    game._pickups.append(pickup)
    return pickup
