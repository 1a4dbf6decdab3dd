"""Tests for the pure display-model functions."""
import pytest

from games.HeartCatch import config as game_config
from games.HeartCatch import display as game_display
from models.heartcatch import ActivePowerUp, PowerUpKind, ScoreData, SessionPhase, SessionSnapshot
from valentine import display


def make_snapshot(**overrides):
    values = dict(phase=SessionPhase.PLAYING, countdown_value=0, time_left=60,
                  player_x=40.0, score=ScoreData())
    values.update(overrides)
    return SessionSnapshot(**values)


class TestHud:
    """HUD values for the game screen."""

    @pytest.mark.parametrize("score,percent", [(0, 0), (25, 25), (99, 99), (100, 100), (180, 100)])
    def test_love_meter_percent(self, score, percent):
        assert game_display.love_meter_percent(score) == percent

    def test_meter_color_bands(self):
        assert game_display.meter_color(10) == game_config.METER_COLORS['low']
        assert game_display.meter_color(50) == game_config.METER_COLORS['mid']
        assert game_display.meter_color(70) == game_config.METER_COLORS['high']

    def test_combo_label_hidden_below_three(self):
        assert game_display.combo_label(2) == ''
        assert game_display.combo_label(3) == 'x3 COMBO!'

    def test_timer_urgency(self):
        assert not game_display.timer_is_urgent(11)
        assert game_display.timer_is_urgent(10)

    def test_power_up_label(self):
        active = ActivePowerUp(kind=PowerUpKind.MAGNET, expires_at=10.0)
        assert game_display.power_up_label(active, 4.5) == 'Heart Magnet 6s'
        assert game_display.power_up_label(active, 10.5) == ''
        assert game_display.power_up_label(None, 0.0) == ''


class TestBanners:
    """Large centred phase text."""

    @pytest.mark.parametrize("value,label", [(3, '3'), (1, '1'), (0, 'GO!')])
    def test_countdown_label(self, value, label):
        assert game_display.countdown_label(value) == label

    def test_phase_banner(self):
        assert game_display.phase_banner(
            make_snapshot(phase=SessionPhase.COUNTDOWN, countdown_value=2)) == '2'
        assert game_display.phase_banner(make_snapshot()) == ''
        assert 'time' in game_display.phase_banner(make_snapshot(phase=SessionPhase.LOST)).lower()
        assert '100' in game_display.phase_banner(make_snapshot(phase=SessionPhase.WON))


class TestGeometry:
    """Playfield to pixel mapping."""

    def test_to_screen_corners(self):
        field = (20, 80, 1000, 520)
        assert game_display.to_screen(0, 0, field) == (20, 80)
        assert game_display.to_screen(100, 26, field) == (1020, 600)
        assert game_display.to_screen(50, 13, field) == (520, 340)

    def test_playfield_rect(self):
        assert game_display.playfield_rect(1280, 720) == (20, 80, 1240, 620)


class TestAppDisplay:
    """Proposal, interstitial and outcome values."""

    def test_proposal_menu_marks_selection(self):
        menu = display.proposal_menu(1)
        assert [selected for _, _, selected in menu] == [False, True]
        assert menu[0][0] == 'Yes!'

    @pytest.mark.parametrize("now", [0.0, 0.2, 0.41, 1.3, 17.0])
    def test_heartbeat_scale_range(self, now):
        assert 1.0 <= display.heartbeat_scale(now) <= 1.15

    def test_falling_decorations_stay_in_view(self):
        for now in (0.0, 3.3, 120.0):
            points = display.falling_decorations(now, count=12)
            assert len(points) == 12
            for x, y in points:
                assert 0 <= x < 100
                assert -2 <= y < 30

    def test_no_screen_remaining(self):
        assert display.no_screen_remaining(10.0, 10.0) == pytest.approx(3.5)
        assert display.no_screen_remaining(10.0, 12.0) == pytest.approx(1.5)
        assert display.no_screen_remaining(10.0, 20.0) == 0.0

    def test_outcome_text(self):
        assert display.outcome_title(100) == "Happy Valentine's Day!"
        assert display.outcome_title(99) == "Time's Up!"
        assert '45' in display.outcome_message(45)
        assert '100' in display.outcome_message(45)

    def test_firework_frame_cycles(self):
        frames = {display.firework_frame(t * 0.3, 0) for t in range(8)}
        assert frames <= {0, 1, 2, 3}
