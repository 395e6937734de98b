from __future__ import annotations

import random
from typing import List, Optional

from meteordodge.config.settings import GameSettings
from meteordodge.entities import Meteor, Star
from meteordodge.simulation.engine import SimulationEngine
from meteordodge.systems.storage import MemoryScoreStore


class RecordingAudio:
    """Audio double that remembers every request."""

    def __init__(self) -> None:
        self.sounds: List[str] = []
        self.ambient_starts = 0
        self.ambient_stops = 0
        self.muted = False

    def request_sound(self, name: str) -> None:
        self.sounds.append(name)

    def start_ambient(self) -> None:
        self.ambient_starts += 1

    def stop_ambient(self) -> None:
        self.ambient_stops += 1

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted


def build_settings(**overrides: object) -> GameSettings:
    """Default settings with validated overrides applied."""

    return GameSettings().with_updates(dict(overrides))


def build_engine(
    *,
    best_score: int = 0,
    seed: int = 1234,
    game_settings: Optional[GameSettings] = None,
    audio: Optional[RecordingAudio] = None,
    **overrides: object,
) -> SimulationEngine:
    """Helper that constructs a headless :class:`SimulationEngine`."""

    return SimulationEngine(
        game_settings or build_settings(**overrides),
        audio=audio if audio is not None else RecordingAudio(),
        score_store=MemoryScoreStore(best_score),
        rng=random.Random(seed),
    )


def meteor_at(center_x: float, center_y: float, size: float = 35.0, speed: float = 0.0) -> Meteor:
    """A meteor whose centre sits exactly at the given point."""

    half = size / 2
    return Meteor(
        x=center_x - half,
        y=center_y - half,
        size=size,
        speed=speed,
        rotation_speed=0.0,
        color=(200, 100, 40),
    )


def star_at(center_x: float, center_y: float, size: float = 12.0, speed: float = 0.0) -> Star:
    half = size / 2
    return Star(
        x=center_x - half,
        y=center_y - half,
        size=size,
        speed=speed,
        rotation_speed=3.0,
        color=(255, 235, 59),
    )


def freeze_spawning(engine: SimulationEngine) -> None:
    """Push both spawn timers far from their thresholds."""

    engine.meteor_timer.elapsed = -1e6
    engine.star_timer.elapsed = -1e6
