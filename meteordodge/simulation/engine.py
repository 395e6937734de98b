"""The simulation engine: owns one play session and advances it per frame."""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional

from ..config import settings
from ..config.constants import SOUND_HIT, SOUND_SUCCESS
from ..config.settings import GameSettings
from ..entities import Meteor, Ship, Star
from ..systems.audio import AudioSink, NullAudio
from ..systems.storage import MemoryScoreStore, ScoreStore
from . import collisions, spawning
from .starfield import Starfield
from .state import (
    DirectionalIntent,
    GameSnapshot,
    InputAction,
    MeteorView,
    Phase,
    SessionState,
    ShipView,
    StarView,
)
from .timers import IntervalTimer

logger = logging.getLogger("meteordodge.engine")

SCORE_INTERVAL = 1.0


class SimulationEngine:
    """Single-session game simulation.

    The engine is advanced once per rendered frame. Input only flips intent
    flags, which are consumed by the next :meth:`advance`. The renderer reads
    :meth:`snapshot` between calls and never touches engine state directly.
    """

    def __init__(
        self,
        game_settings: Optional[GameSettings] = None,
        *,
        audio: Optional[AudioSink] = None,
        score_store: Optional[ScoreStore] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = game_settings or settings.current_settings()
        self.audio = audio if audio is not None else NullAudio()
        self.score_store = score_store if score_store is not None else MemoryScoreStore()
        self.rng = rng or random.Random()

        self.state = SessionState()
        self.intent = DirectionalIntent()
        self.ship = Ship.centered(
            self.settings.CANVAS_WIDTH,
            self.settings.CANVAS_HEIGHT,
            self.settings.PLAYER_WIDTH,
            self.settings.PLAYER_HEIGHT,
            self.settings.PLAYER_SPEED,
            self.settings.PLAYER_BOTTOM_MARGIN,
        )
        self.meteors: List[Meteor] = []
        self.stars: List[Star] = []
        self.starfield = Starfield(
            self.settings.CANVAS_WIDTH,
            self.settings.CANVAS_HEIGHT,
            self.settings.STARFIELD_COUNT,
            self.rng,
        )
        self.meteor_timer = IntervalTimer()
        self.star_timer = IntervalTimer()
        self.score_timer = IntervalTimer()

        self.best_score = self.score_store.load_best_score()
        self.final_score: Optional[int] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    def start(self) -> None:
        """Begin a fresh session regardless of the current phase."""
        self.state.score = 0
        self.state.elapsed = 0.0
        self.meteors.clear()
        self.stars.clear()
        self.meteor_timer.reset()
        self.star_timer.reset()
        self.score_timer.reset()
        self.ship.recenter()
        self.final_score = None
        self.state.phase = Phase.PLAYING
        self.state.sessions_played += 1
        self.audio.start_ambient()
        logger.info("Session %s started (best score %s)", self.state.sessions_played, self.best_score)

    def reset(self) -> None:
        self.start()

    def _end_session(self, meteor: Meteor) -> None:
        self.state.phase = Phase.ENDED
        self.audio.stop_ambient()
        self.audio.request_sound(SOUND_HIT)
        self.final_score = self.state.score
        logger.info(
            "Session %s ended after %.1fs with score %s (meteor at %.0f,%.0f)",
            self.state.sessions_played,
            self.state.elapsed,
            self.state.score,
            meteor.x,
            meteor.y,
        )
        if self.state.score > self.best_score:
            self.best_score = self.state.score
            self.score_store.save_best_score(self.best_score)
            logger.info("New best score: %s", self.best_score)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_directional_intent(self, left: bool, right: bool) -> None:
        self.intent.left = bool(left)
        self.intent.right = bool(right)

    def on_start_requested(self) -> bool:
        if self.state.phase is not Phase.IDLE:
            return False
        self.start()
        return True

    def on_restart_requested(self) -> bool:
        if self.state.phase is not Phase.ENDED:
            return False
        self.reset()
        return True

    def handle_input(self, action: InputAction) -> bool:
        """Apply one input action; returns True when it changed anything."""
        if action is InputAction.LEFT_PRESSED:
            self.intent.left = True
        elif action is InputAction.LEFT_RELEASED:
            self.intent.left = False
        elif action is InputAction.RIGHT_PRESSED:
            self.intent.right = True
        elif action is InputAction.RIGHT_RELEASED:
            self.intent.right = False
        elif action is InputAction.START:
            return self.on_start_requested()
        elif action is InputAction.RESTART:
            return self.on_restart_requested()
        elif action is InputAction.CONFIRM:
            return self.on_start_requested() or self.on_restart_requested()
        else:
            logger.debug("Engine ignores input action %s", action)
            return False
        return True

    # ------------------------------------------------------------------
    # Frame step
    # ------------------------------------------------------------------

    def clamp_delta(self, delta_seconds: float) -> float:
        if math.isnan(delta_seconds) or delta_seconds <= 0:
            return 0.0
        return min(delta_seconds, self.settings.MAX_FRAME_DELTA)

    def advance(self, delta_seconds: float) -> float:
        """Advance the simulation and return the step actually simulated."""
        delta = self.clamp_delta(delta_seconds)
        if self.state.phase is not Phase.PLAYING:
            self.starfield.update(delta)
            return delta

        self.ship.steer(self.intent.left, self.intent.right, delta)
        self._update_meteors(delta)
        self._update_stars(delta)
        self.starfield.update(delta)
        self._update_spawning(delta)
        self._update_score(delta)
        self._check_collisions()
        return delta

    def _update_meteors(self, delta: float) -> None:
        acceleration = self.settings.METEOR_ACCELERATION
        height = self.settings.CANVAS_HEIGHT
        for meteor in self.meteors:
            meteor.update(delta, acceleration)
        self.meteors[:] = [meteor for meteor in self.meteors if not meteor.is_below(height)]

    def _update_stars(self, delta: float) -> None:
        height = self.settings.CANVAS_HEIGHT
        for star in self.stars:
            star.update(delta)
        self.stars[:] = [star for star in self.stars if not star.is_below(height)]

    def _update_spawning(self, delta: float) -> None:
        self.state.elapsed += delta

        interval = spawning.meteor_spawn_interval(self.state.elapsed, self.settings)
        if self.meteor_timer.tick(delta, interval):
            self.meteors.append(spawning.spawn_meteor(self.rng, self.settings))

        if self.star_timer.tick(delta, spawning.star_spawn_interval(self.settings)):
            if self.rng.random() < self.settings.STAR_SPAWN_CHANCE:
                self.stars.append(spawning.spawn_star(self.rng, self.settings))

    def _update_score(self, delta: float) -> None:
        if self.score_timer.tick(delta, SCORE_INTERVAL):
            self.state.score += self.settings.SCORE_PER_SECOND

    def _check_collisions(self) -> None:
        fatal = collisions.find_fatal_meteor(self.ship, self.meteors, self.settings.METEOR_HITBOX_SCALE)
        if fatal is not None:
            self._end_session(fatal)
            return

        collected = collisions.touching_stars(self.ship, self.stars)
        if not collected:
            return
        collected_ids = {id(star) for star in collected}
        self.stars[:] = [star for star in self.stars if id(star) not in collected_ids]
        for _ in collected:
            self.state.score += self.settings.STAR_BONUS
            self.audio.request_sound(SOUND_SUCCESS)
        logger.debug("Collected %s star(s); score %s", len(collected), self.state.score)

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        ship = self.ship
        return GameSnapshot(
            phase=self.state.phase,
            score=self.state.score,
            best_score=self.best_score,
            final_score=self.final_score,
            elapsed=self.state.elapsed,
            ship=ShipView(ship.x, ship.y, ship.width, ship.height),
            meteors=tuple(
                MeteorView(m.x, m.y, m.size, m.rotation, m.color) for m in self.meteors
            ),
            stars=tuple(StarView(s.x, s.y, s.size, s.rotation, s.color) for s in self.stars),
            starfield=self.starfield.views(),
        )
