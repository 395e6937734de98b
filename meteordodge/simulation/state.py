"""Session state and the immutable views handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Color = Tuple[int, int, int]


class Phase(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    ENDED = "ended"


class InputAction(Enum):
    LEFT_PRESSED = "left_pressed"
    LEFT_RELEASED = "left_released"
    RIGHT_PRESSED = "right_pressed"
    RIGHT_RELEASED = "right_released"
    START = "start"
    RESTART = "restart"
    CONFIRM = "confirm"
    TOGGLE_MUTE = "toggle_mute"
    QUIT = "quit"


@dataclass
class DirectionalIntent:
    left: bool = False
    right: bool = False


@dataclass
class SessionState:
    phase: Phase = Phase.IDLE
    score: int = 0
    elapsed: float = 0.0
    sessions_played: int = 0


@dataclass(frozen=True, slots=True)
class ShipView:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class MeteorView:
    x: float
    y: float
    size: float
    rotation: float
    color: Color


@dataclass(frozen=True, slots=True)
class StarView:
    x: float
    y: float
    size: float
    rotation: float
    color: Color


@dataclass(frozen=True, slots=True)
class BackgroundStarView:
    x: float
    y: float
    radius: float
    opacity: float


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Everything the renderer may read for one frame."""

    phase: Phase
    score: int
    best_score: int
    final_score: Optional[int]
    elapsed: float
    ship: ShipView
    meteors: Tuple[MeteorView, ...]
    stars: Tuple[StarView, ...]
    starfield: Tuple[BackgroundStarView, ...]
