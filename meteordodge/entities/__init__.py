"""Entities that populate the play field."""

from __future__ import annotations

from .meteor import Meteor
from .ship import Ship
from .star import Star

__all__ = [
    "Meteor",
    "Ship",
    "Star",
]
