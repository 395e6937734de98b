"""The player-controlled ship."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..utils.math_utils import clamp


@dataclass
class Ship:
    """Horizontal-only ship pinned near the bottom edge of the canvas."""

    x: float
    y: float
    width: float
    height: float
    speed: float
    canvas_width: float

    @classmethod
    def centered(
        cls,
        canvas_width: float,
        canvas_height: float,
        width: float,
        height: float,
        speed: float,
        bottom_margin: float,
    ) -> "Ship":
        return cls(
            x=(canvas_width - width) / 2,
            y=canvas_height - height - bottom_margin,
            width=width,
            height=height,
            speed=speed,
            canvas_width=canvas_width,
        )

    @property
    def max_x(self) -> float:
        return self.canvas_width - self.width

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def radius(self) -> float:
        return self.width / 2

    def recenter(self) -> None:
        self.x = self.max_x / 2

    def steer(self, left: bool, right: bool, delta: float) -> None:
        if left:
            self.x -= self.speed * delta
        if right:
            self.x += self.speed * delta
        self.x = clamp(self.x, 0.0, self.max_x)
