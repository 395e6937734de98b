"""Package initializer for the meteor dodge game."""

from __future__ import annotations

from .config import settings as settings  # noqa: F401

__all__ = ["settings"]
