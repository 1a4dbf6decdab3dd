"""Tests for HeartCatch scoring and combos."""
import pytest
from pydantic import ValidationError

from games.HeartCatch.scoring import ScoreTracker, combo_bonus
from models.heartcatch import ScoreData


class TestComboBonus:
    """Bonus of 5 points per 3 combo steps."""

    @pytest.mark.parametrize("combo,bonus", [
        (0, 0), (1, 0), (2, 0), (3, 5), (5, 5), (6, 10), (9, 15),
    ])
    def test_bonus_table(self, combo, bonus):
        assert combo_bonus(combo) == bonus

    def test_score_data_bonus_matches(self):
        assert ScoreData(combo=6).combo_bonus == combo_bonus(6)


class TestRecordCatch:
    """Good and broken catches."""

    def test_first_catch_has_no_bonus(self):
        tracker = ScoreTracker().record_catch(5, now=1.0)
        stats = tracker.get_stats()
        assert stats.score == 5
        assert stats.combo == 1
        assert stats.caught == 1
        assert stats.last_catch_at == 1.0

    def test_third_catch_earns_bonus(self):
        tracker = ScoreTracker(ScoreData(score=20, combo=2, last_catch_at=1.0))
        tracker = tracker.record_catch(5, now=1.5)

        assert tracker.score == 30
        assert tracker.combo == 3

    def test_broken_heart_resets_combo(self):
        tracker = ScoreTracker(ScoreData(score=50, combo=4, max_combo=4, last_catch_at=2.0))
        tracker = tracker.record_catch(-10, now=2.5)
        stats = tracker.get_stats()

        assert stats.score == 40
        assert stats.combo == 0
        assert stats.max_combo == 4
        assert stats.broken_caught == 1

    def test_broken_heart_never_takes_score_below_zero(self):
        tracker = ScoreTracker(ScoreData(score=5)).record_catch(-10, now=0.0)
        assert tracker.score == 0

    def test_max_combo_tracks_best_run(self):
        tracker = ScoreTracker()
        for i in range(4):
            tracker = tracker.record_catch(5, now=float(i))
        tracker = tracker.record_catch(-10, now=4.0).record_catch(5, now=5.0)

        assert tracker.combo == 1
        assert tracker.get_stats().max_combo == 4

    def test_letter_value_and_bonus_combine(self):
        # Doubled pink heart (10) plus the third-catch bonus (5)
        tracker = ScoreTracker(ScoreData(score=10, combo=2, last_catch_at=0.0))
        assert tracker.record_catch(10, now=0.5).score == 25

    def test_record_catch_is_immutable(self):
        original = ScoreTracker()
        updated = original.record_catch(25, now=0.0)

        assert original.score == 0
        assert updated.score == 25
        assert updated is not original


class TestComboExpiry:
    """Combo lapses two seconds after the last good catch."""

    def test_combo_kept_inside_window(self):
        tracker = ScoreTracker().record_catch(5, now=1.0)
        assert tracker.expire_combo(2.99).combo == 1

    def test_combo_lapses_at_window(self):
        tracker = ScoreTracker().record_catch(5, now=1.0)
        expired = tracker.expire_combo(3.0)

        assert expired.combo == 0
        assert expired.score == 5

    def test_nothing_to_expire_returns_same_tracker(self):
        tracker = ScoreTracker()
        assert tracker.expire_combo(100.0) is tracker


class TestScoreData:
    """Validation on the score model."""

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            ScoreData(score=-1)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            ScoreData().score = 10

    def test_reached_goal(self):
        assert not ScoreData(score=99).reached_goal
        assert ScoreData(score=100).reached_goal
