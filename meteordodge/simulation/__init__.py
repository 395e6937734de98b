"""Simulation package containing the engine and its session state."""

from __future__ import annotations

from .engine import SimulationEngine
from .state import GameSnapshot, InputAction, Phase

__all__ = [
    "SimulationEngine",
    "GameSnapshot",
    "InputAction",
    "Phase",
    "engine",
    "state",
]
