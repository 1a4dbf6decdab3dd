"""Tests for HeartCatch heart and pickup spawning."""
import random

import pytest

from conftest import FakeRandom
from games.HeartCatch import config
from games.HeartCatch.spawner import HeartSpawner
from models.heartcatch import HeartKind, PowerUpKind


class TestDifficultyBands:
    """Band selection by remaining time."""

    @pytest.mark.parametrize("time_left,band", [
        (60, 'easy'), (41, 'easy'),
        (40, 'medium'), (21, 'medium'),
        (20, 'hard'), (1, 'hard'), (0, 'hard'),
    ])
    def test_band_for_time_left(self, time_left, band):
        assert config.band_for(time_left).name == band

    @pytest.mark.parametrize("time_left,interval", [(60, 0.8), (30, 0.6), (10, 0.4)])
    def test_spawn_interval(self, time_left, interval):
        assert HeartSpawner(FakeRandom()).spawn_interval(time_left) == interval

    def test_band_weights_sum_to_one(self):
        for band in config.DIFFICULTY_BANDS:
            assert sum(w for _, w in band.weights) == pytest.approx(1.0)


class TestChooseKind:
    """Weighted heart-kind draw."""

    @pytest.mark.parametrize("time_left,roll,kind", [
        # easy: 85 / 10 / 3 / 2
        (60, 0.50, HeartKind.PINK),
        (60, 0.90, HeartKind.SPARKLE),
        (60, 0.96, HeartKind.GIFT),
        (60, 0.99, HeartKind.BROKEN),
        # medium: 70 / 15 / 7 / 8
        (30, 0.60, HeartKind.PINK),
        (30, 0.80, HeartKind.SPARKLE),
        (30, 0.90, HeartKind.GIFT),
        (30, 0.95, HeartKind.BROKEN),
        # hard: 50 / 20 / 15 / 15
        (10, 0.40, HeartKind.PINK),
        (10, 0.60, HeartKind.SPARKLE),
        (10, 0.80, HeartKind.GIFT),
        (10, 0.90, HeartKind.BROKEN),
    ])
    def test_roll_selects_kind(self, time_left, roll, kind):
        spawner = HeartSpawner(FakeRandom(rolls=[roll]))
        assert spawner.choose_kind(time_left) == kind

    def test_roll_at_top_of_range_falls_back_to_last_kind(self):
        spawner = HeartSpawner(FakeRandom(rolls=[0.99999999999]))
        assert spawner.choose_kind(60) == HeartKind.BROKEN


class TestSpawnHeart:
    """Heart placement."""

    def test_heart_spawns_above_playfield(self):
        rng = FakeRandom(x=33.0)
        heart = HeartSpawner(rng).spawn_heart(60)

        assert heart.y == config.SPAWN_Y
        assert heart.x == 33.0
        assert heart.kind == HeartKind.PINK
        assert rng.uniform_calls == [config.HEART_SPAWN_X]

    def test_ids_are_unique_and_increasing(self):
        spawner = HeartSpawner(FakeRandom())
        ids = [spawner.spawn_heart(60).id for _ in range(5)]
        assert ids == sorted(set(ids))

    def test_seeded_spawns_stay_in_range(self):
        spawner = HeartSpawner(random.Random(14))
        for time_left in range(60, -1, -1):
            heart = spawner.spawn_heart(time_left)
            assert 10 <= heart.x <= 90
            assert heart.kind in HeartKind


class TestSpawnPickup:
    """Power-up pickup rolls."""

    def test_roll_above_chance_spawns_nothing(self):
        spawner = HeartSpawner(FakeRandom(rolls=[0.15]))
        assert spawner.maybe_spawn_pickup() is None

    def test_roll_below_chance_spawns_pickup(self):
        rng = FakeRandom(rolls=[0.1], x=50.0, choice_index=2)
        pickup = HeartSpawner(rng).maybe_spawn_pickup()

        assert pickup is not None
        assert pickup.kind == list(PowerUpKind)[2]
        assert pickup.x == 50.0
        assert pickup.y == config.SPAWN_Y
        assert rng.uniform_calls == [config.PICKUP_SPAWN_X]

    def test_seeded_pickup_rate_is_low(self):
        spawner = HeartSpawner(random.Random(3))
        spawned = sum(1 for _ in range(1000) if spawner.maybe_spawn_pickup() is not None)
        assert 80 < spawned < 230
