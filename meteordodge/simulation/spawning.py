"""Spawn-rate maths and entity factories."""

from __future__ import annotations

import math
import random

from ..config import settings
from ..config.settings import GameSettings
from ..entities import Meteor, Star
from ..utils.math_utils import hsl_to_rgb

METEOR_SATURATION = 0.7
METEOR_LIGHTNESS = 0.5


def meteor_spawn_interval(elapsed: float, game_settings: GameSettings) -> float:
    """Seconds between meteors after ``elapsed`` seconds of play.

    The rate grows linearly with play time, so the raw interval shrinks
    towards zero; it is floored at ``MIN_METEOR_SPAWN_INTERVAL``.
    """
    rate = game_settings.METEOR_SPAWN_RATE + elapsed * game_settings.METEOR_SPAWN_RATE_GROWTH
    if rate <= 0:
        return math.inf
    return max(game_settings.MIN_METEOR_SPAWN_INTERVAL, 1.0 / rate)


def star_spawn_interval(game_settings: GameSettings) -> float:
    return 1.0 / game_settings.STAR_SPAWN_RATE


def spawn_meteor(rng: random.Random, game_settings: GameSettings) -> Meteor:
    size = rng.uniform(game_settings.METEOR_MIN_SIZE, game_settings.METEOR_MAX_SIZE)
    low_hue, high_hue = settings.METEOR_HUE_RANGE
    return Meteor(
        x=rng.uniform(0.0, game_settings.CANVAS_WIDTH - size),
        y=-size,
        size=size,
        speed=rng.uniform(game_settings.METEOR_MIN_SPEED, game_settings.METEOR_MAX_SPEED),
        rotation_speed=rng.uniform(
            -game_settings.METEOR_MAX_ROTATION_SPEED,
            game_settings.METEOR_MAX_ROTATION_SPEED,
        ),
        color=hsl_to_rgb(rng.uniform(low_hue, high_hue), METEOR_SATURATION, METEOR_LIGHTNESS),
    )


def spawn_star(rng: random.Random, game_settings: GameSettings) -> Star:
    size = game_settings.STAR_SIZE
    return Star(
        x=rng.uniform(0.0, game_settings.CANVAS_WIDTH - size),
        y=-size,
        size=size,
        speed=game_settings.STAR_SPEED,
        rotation_speed=game_settings.STAR_ROTATION_SPEED,
        color=settings.STAR_YELLOW,
    )
