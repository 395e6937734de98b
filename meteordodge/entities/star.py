"""Collectible bonus stars."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass
class Star:
    x: float
    y: float
    size: float
    speed: float
    rotation_speed: float
    color: Color
    rotation: float = 0.0

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.size / 2, self.y + self.size / 2)

    @property
    def radius(self) -> float:
        return self.size / 2

    def update(self, delta: float) -> None:
        self.y += self.speed * delta
        self.rotation += self.rotation_speed * delta

    def is_below(self, canvas_height: float) -> bool:
        return self.y > canvas_height + self.size
