"""Smoke tests: every screen draws onto an off-screen surface."""
import os

import pygame
import pytest

from conftest import FakeRandom, place_heart, place_pickup
from games.HeartCatch.renderer import render_session
from models import Outcome, ProposalChoice
from models.heartcatch import ActivePowerUp, HeartKind, PowerUpKind
from valentine.app import ValentineApp
from valentine.screens import render_app


@pytest.fixture(scope='module', autouse=True)
def pygame_fonts():
    os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def surface():
    return pygame.Surface((640, 360))


def test_session_renders_every_entity(surface, playing):
    for i, kind in enumerate(HeartKind):
        place_heart(playing, kind=kind, x=10.0 + i * 20, y=5.0 + i, heart_id=i)
    for i, kind in enumerate(PowerUpKind):
        place_pickup(playing, kind=kind, x=20.0 + i * 20, y=3.0, pickup_id=100 + i)
    playing._power_up.activate(ActivePowerUp(kind=PowerUpKind.LETTER, expires_at=10.0))

    render_session(surface, playing.snapshot())


def test_countdown_renders(surface, session):
    render_session(surface, session.snapshot())


@pytest.mark.parametrize("path", ['proposal', 'no', 'game', 'gameover'])
def test_app_screens_render(surface, scheduler, path):
    app = ValentineApp(scheduler, rng=FakeRandom())
    if path == 'no':
        app.select(ProposalChoice.NO)
    elif path == 'game':
        app.select(ProposalChoice.YES)
        app.update(4.0)
    elif path == 'gameover':
        app.select(ProposalChoice.YES)
        app.update(65.0)
        app.update(2.0)

    render_app(surface, app.snapshot())


def test_celebration_renders(surface, scheduler):
    app = ValentineApp(scheduler, rng=FakeRandom())
    app.select(ProposalChoice.YES)
    app.finish_game(Outcome.WON, 120)

    assert app.snapshot().celebrating
    render_app(surface, app.snapshot())
