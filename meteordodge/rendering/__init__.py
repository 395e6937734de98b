"""Rendering helpers for the meteor dodge game."""

from __future__ import annotations

from .renderer import Renderer

__all__ = [
    "Renderer",
    "hud",
    "renderer",
]
