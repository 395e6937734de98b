"""Smoke tests for drawing snapshots on an off-screen surface."""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from meteordodge.config import settings
from meteordodge.rendering import Renderer
from meteordodge.rendering.renderer import meteor_outline, ship_outline, star_outline
from meteordodge.simulation import Phase

from .engine_helpers import build_engine, freeze_spawning, meteor_at, star_at


@pytest.fixture(scope="module", autouse=True)
def pygame_headless():
    pygame.init()
    yield


@pytest.fixture
def canvas() -> pygame.Surface:
    return pygame.Surface((400, 600))


def _ship_pixel(snapshot):
    ship = snapshot.ship
    return (int(ship.x + ship.width / 2), int(ship.y + ship.height / 2))


def test_title_screen_hides_ship(canvas):
    engine = build_engine()
    snapshot = engine.snapshot()
    Renderer(canvas).draw(snapshot)
    assert snapshot.phase is Phase.IDLE
    assert canvas.get_at(_ship_pixel(snapshot))[:3] != settings.SHIP_GREEN


def test_playing_frame_draws_ship(canvas):
    engine = build_engine()
    engine.start()
    freeze_spawning(engine)
    engine.meteors.append(meteor_at(60, 100))
    engine.stars.append(star_at(300, 100))
    engine.advance(0.016)
    snapshot = engine.snapshot()

    Renderer(canvas).draw(snapshot)
    assert canvas.get_at(_ship_pixel(snapshot))[:3] == settings.SHIP_GREEN


def test_game_over_frame_draws(canvas):
    engine = build_engine()
    engine.start()
    freeze_spawning(engine)
    engine.meteors.append(meteor_at(*engine.ship.center))
    engine.advance(0.016)
    snapshot = engine.snapshot()

    assert snapshot.phase is Phase.ENDED
    Renderer(canvas).draw(snapshot)
    assert canvas.get_at((200, 300))[:3] != settings.BACKGROUND


def test_outline_point_counts():
    engine = build_engine()
    engine.start()
    engine.meteors.append(meteor_at(100, 100))
    engine.stars.append(star_at(200, 100))
    snapshot = engine.snapshot()

    assert len(meteor_outline(snapshot.meteors[0])) == 8
    assert len(star_outline(snapshot.stars[0])) == 10
    assert len(ship_outline(snapshot.ship)) == 5


def test_star_outline_stays_within_size():
    engine = build_engine()
    star = star_at(200, 100, size=20)
    engine.stars.append(star)
    view = engine.snapshot().stars[0]
    for x, y in star_outline(view):
        assert abs(x - 200) <= 10 + 1e-9
        assert abs(y - 100) <= 10 + 1e-9
