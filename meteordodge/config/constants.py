"""Constant values for the meteor dodge game."""

from __future__ import annotations

DEFAULTS = {
    "CANVAS_WIDTH": 400,
    "CANVAS_HEIGHT": 600,
    "PLAYER_WIDTH": 30,
    "PLAYER_HEIGHT": 20,
}

SOUND_HIT = "hit"
SOUND_SUCCESS = "success"
