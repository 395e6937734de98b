"""Persistence helpers for the best score."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Optional, Protocol

from ..config import settings

logger = logging.getLogger("meteordodge.storage")

_SCORE_KEY = "best_score"


class ScoreStore(Protocol):
    """Where the best score lives between runs."""

    def load_best_score(self) -> int:
        """Return the stored best score, or 0 when nothing usable is stored."""

    def save_best_score(self, score: int) -> None:
        """Persist ``score`` as the new best."""


class MemoryScoreStore:
    """Keeps the best score in memory; used headless and in tests."""

    def __init__(self, best_score: int = 0) -> None:
        self.best_score = best_score
        self.saves = 0

    def load_best_score(self) -> int:
        return self.best_score

    def save_best_score(self, score: int) -> None:
        self.best_score = score
        self.saves += 1


class JsonScoreStore:
    """Stores ``{"best_score": n}`` in a small JSON file.

    Reads never raise: a missing, unreadable or malformed file yields 0.
    Write failures are logged and swallowed so a read-only home directory
    cannot crash a running game.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        target = Path(path) if path is not None else Path(settings.BEST_SCORE_FILE)
        self.path = target.expanduser()

    def load_best_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read best score from %s: %s", self.path, exc)
            return 0
        value = data.get(_SCORE_KEY) if isinstance(data, dict) else None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.warning("Ignoring malformed best score in %s", self.path)
            return 0
        if isinstance(value, float) and not math.isfinite(value):
            logger.warning("Ignoring non-finite best score in %s", self.path)
            return 0
        return max(0, int(value))

    def save_best_score(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump({_SCORE_KEY: int(score)}, handle, indent=2)
        except OSError as exc:
            logger.warning("Could not save best score to %s: %s", self.path, exc)
            return
        logger.info("Best score %s saved to %s", score, self.path)
