"""Draw a :class:`GameSnapshot` onto a pygame surface."""

from __future__ import annotations

import math
from typing import List, Tuple

import pygame

from ..config import settings
from ..simulation.state import (
    BackgroundStarView,
    GameSnapshot,
    MeteorView,
    Phase,
    ShipView,
    StarView,
)
from .hud import HUD

Color = Tuple[int, int, int]
Point = Tuple[float, float]

METEOR_SIDES = 8
STAR_POINTS = 5
STAR_INNER_RATIO = 0.4
SPARKLE_COLOR: Color = (255, 255, 255)


def _blend(base: Color, top: Color, amount: float) -> Color:
    amount = max(0.0, min(1.0, amount))
    return (
        int(base[0] + (top[0] - base[0]) * amount),
        int(base[1] + (top[1] - base[1]) * amount),
        int(base[2] + (top[2] - base[2]) * amount),
    )


def _shade(color: Color, factor: float) -> Color:
    return (int(color[0] * factor), int(color[1] * factor), int(color[2] * factor))


def _rotate(points: List[Point], angle: float, center: Point) -> List[Point]:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    cx, cy = center
    return [(cx + x * cos_a - y * sin_a, cy + x * sin_a + y * cos_a) for x, y in points]


def meteor_center(meteor: MeteorView) -> Point:
    return (meteor.x + meteor.size / 2, meteor.y + meteor.size / 2)


def meteor_outline(meteor: MeteorView) -> List[Point]:
    """Irregular rock polygon around the meteor centre, already rotated."""
    half = meteor.size / 2
    local: List[Point] = []
    for index in range(METEOR_SIDES):
        angle = index / METEOR_SIDES * math.tau
        radius = half * (0.8 + math.sin(angle * 3) * 0.2)
        local.append((math.cos(angle) * radius, math.sin(angle) * radius))
    return _rotate(local, meteor.rotation, (meteor.x + half, meteor.y + half))


def star_outline(star: StarView) -> List[Point]:
    """Five-pointed star polygon, already rotated."""
    outer = star.size / 2
    inner = outer * STAR_INNER_RATIO
    local: List[Point] = []
    for index in range(STAR_POINTS):
        angle = index / STAR_POINTS * math.tau - math.pi / 2
        local.append((math.cos(angle) * outer, math.sin(angle) * outer))
        inner_angle = angle + math.pi / STAR_POINTS
        local.append((math.cos(inner_angle) * inner, math.sin(inner_angle) * inner))
    return _rotate(local, star.rotation, (star.x + outer, star.y + outer))


def ship_outline(ship: ShipView) -> List[Point]:
    cx = ship.x + ship.width / 2
    cy = ship.y + ship.height / 2
    w = ship.width
    h = ship.height
    return [
        (cx, cy - h / 2),
        (cx - w / 2, cy + h / 2),
        (cx - w / 4, cy + h / 3),
        (cx + w / 4, cy + h / 3),
        (cx + w / 2, cy + h / 2),
    ]


class Renderer:
    """Stateless drawing of snapshots; owns only fonts and the target surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.hud = HUD()

    def draw(self, snapshot: GameSnapshot) -> None:
        self.surface.fill(settings.BACKGROUND)
        self._draw_starfield(snapshot.starfield)

        if snapshot.phase in (Phase.PLAYING, Phase.ENDED):
            self._draw_ship(snapshot.ship)
            for meteor in snapshot.meteors:
                self._draw_meteor(meteor)
            for star in snapshot.stars:
                self._draw_star(star)

        self.hud.draw(self.surface, snapshot)

    def _draw_starfield(self, starfield: Tuple[BackgroundStarView, ...]) -> None:
        for star in starfield:
            color = _blend(settings.BACKGROUND, settings.WHITE, star.opacity)
            radius = max(1, int(round(star.radius)))
            pygame.draw.circle(self.surface, color, (int(star.x), int(star.y)), radius)

    def _draw_ship(self, ship: ShipView) -> None:
        outline = ship_outline(ship)
        pygame.draw.polygon(self.surface, settings.SHIP_GREEN, outline)
        pygame.draw.polygon(self.surface, settings.WHITE, outline, 2)
        glow = pygame.Rect(0, 0, max(2, int(ship.width / 3)), 8)
        glow.center = (int(ship.x + ship.width / 2), int(ship.y + ship.height + 3))
        pygame.draw.ellipse(self.surface, settings.ENGINE_BLUE, glow)

    def _draw_meteor(self, meteor: MeteorView) -> None:
        outline = meteor_outline(meteor)
        pygame.draw.polygon(self.surface, meteor.color, outline)
        pygame.draw.polygon(self.surface, settings.METEOR_OUTLINE, outline, 1)
        crater = pygame.Rect(0, 0, max(2, int(meteor.size / 4)), max(2, int(meteor.size / 6)))
        offset = _rotate([(-meteor.size / 6, -meteor.size / 6)], meteor.rotation, meteor_center(meteor))[0]
        crater.center = (int(offset[0]), int(offset[1]))
        pygame.draw.ellipse(self.surface, _shade(meteor.color, 0.7), crater)

    def _draw_star(self, star: StarView) -> None:
        outline = star_outline(star)
        pygame.draw.polygon(self.surface, star.color, outline)
        pygame.draw.polygon(self.surface, settings.WHITE, outline, 1)
        center = (int(star.x + star.size / 2), int(star.y + star.size / 2))
        pygame.draw.circle(self.surface, SPARKLE_COLOR, center, max(1, int(star.size / 6)))

