"""Tests for spawn-rate maths and entity factories."""

from __future__ import annotations

import random

import pytest

from meteordodge.config import settings
from meteordodge.simulation import spawning

from .engine_helpers import build_settings


class TestSpawnIntervals:
    def test_initial_meteor_interval_is_one_second(self):
        assert spawning.meteor_spawn_interval(0.0, build_settings()) == pytest.approx(1.0)

    def test_meteor_interval_shrinks_with_play_time(self):
        conf = build_settings()
        intervals = [spawning.meteor_spawn_interval(t, conf) for t in (0, 10, 30, 60, 120)]
        assert intervals == sorted(intervals, reverse=True)
        assert spawning.meteor_spawn_interval(10.0, conf) == pytest.approx(0.5)

    def test_meteor_interval_has_floor(self):
        conf = build_settings(MIN_METEOR_SPAWN_INTERVAL=0.05)
        assert spawning.meteor_spawn_interval(1e9, conf) == pytest.approx(0.05)
        assert spawning.meteor_spawn_interval(190.0, conf) == pytest.approx(0.05)

    def test_zero_growth_keeps_base_rate(self):
        conf = build_settings(METEOR_SPAWN_RATE=2.0, METEOR_SPAWN_RATE_GROWTH=0.0)
        assert spawning.meteor_spawn_interval(500.0, conf) == pytest.approx(0.5)

    def test_star_interval_from_rate(self):
        assert spawning.star_spawn_interval(build_settings()) == pytest.approx(1 / 0.3)


class TestMeteorFactory:
    def test_parameters_within_ranges(self):
        conf = build_settings()
        rng = random.Random(3)
        for _ in range(500):
            meteor = spawning.spawn_meteor(rng, conf)
            assert 15 <= meteor.size <= 35
            assert 100 <= meteor.speed <= 300
            assert -3 <= meteor.rotation_speed <= 3
            assert 0 <= meteor.x <= 400 - meteor.size
            assert meteor.y == -meteor.size
            assert meteor.rotation == 0.0
            assert all(0 <= channel <= 255 for channel in meteor.color)

    def test_meteors_are_warm_coloured(self):
        rng = random.Random(11)
        for _ in range(100):
            red, green, blue = spawning.spawn_meteor(rng, build_settings()).color
            assert blue <= red and blue <= green

    def test_custom_canvas_width_respected(self):
        conf = build_settings(CANVAS_WIDTH=200)
        rng = random.Random(5)
        for _ in range(200):
            meteor = spawning.spawn_meteor(rng, conf)
            assert meteor.x + meteor.size <= 200


class TestStarFactory:
    def test_fixed_parameters(self):
        rng = random.Random(8)
        star = spawning.spawn_star(rng, build_settings())
        assert star.size == 12
        assert star.speed == 150
        assert star.rotation_speed == 3
        assert star.y == -12
        assert 0 <= star.x <= 400 - 12
        assert star.color == settings.STAR_YELLOW
