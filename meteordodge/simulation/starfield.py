"""Decorative twinkling background."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Tuple

from ..utils.math_utils import clamp
from .state import BackgroundStarView

MIN_OPACITY = 0.1
MAX_OPACITY = 1.0
TWINKLE_STEP = 0.01


@dataclass
class BackgroundStar:
    x: float
    y: float
    radius: float
    opacity: float
    twinkle_speed: float


class Starfield:
    """A fixed set of background stars whose opacity oscillates over time.

    The field keeps its own clock so it animates on the title and game-over
    screens as well as during play.
    """

    def __init__(self, width: float, height: float, count: int, rng: random.Random) -> None:
        self.clock = 0.0
        self.stars: List[BackgroundStar] = [
            BackgroundStar(
                x=rng.random() * width,
                y=rng.random() * height,
                radius=rng.random() * 2 + 0.5,
                opacity=rng.random() * 0.8 + 0.2,
                twinkle_speed=rng.random() * 2 + 1,
            )
            for _ in range(count)
        ]

    def update(self, delta: float) -> None:
        self.clock += delta
        for star in self.stars:
            star.opacity += math.sin(self.clock * star.twinkle_speed) * TWINKLE_STEP
            star.opacity = clamp(star.opacity, MIN_OPACITY, MAX_OPACITY)

    def views(self) -> Tuple[BackgroundStarView, ...]:
        return tuple(
            BackgroundStarView(star.x, star.y, star.radius, star.opacity) for star in self.stars
        )
