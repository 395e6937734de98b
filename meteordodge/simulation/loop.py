"""Pygame host loop: one engine, one window, one frame callback."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pygame

from ..config import settings
from ..config.settings import GameSettings
from ..rendering import Renderer
from ..systems.audio import MixerAudio
from ..systems.controls import InputMapper
from ..systems.storage import JsonScoreStore
from .engine import SimulationEngine
from .state import InputAction, Phase


def _initialise_logger(runtime: GameSettings) -> logging.Logger:
    log_dir = runtime.LOG_DIRECTORY
    if not isinstance(log_dir, Path):
        log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / runtime.DEBUG_LOG_FILE

    logger = logging.getLogger("meteordodge")
    if logger.handlers:
        return logger

    level_name = str(runtime.DEBUG_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    file_handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.propagate = False

    logger.info("Debug logging initialised at %s", log_path)
    return logger


def dispatch_action(engine: SimulationEngine, audio, action: Optional[InputAction]) -> bool:
    """Route one input action; returns False when the player asked to quit."""
    if action is None:
        return True
    if action is InputAction.QUIT:
        return False
    if action is InputAction.TOGGLE_MUTE:
        muted = audio.toggle_mute()
        if not muted and engine.phase is Phase.PLAYING:
            audio.start_ambient()
        return True
    engine.handle_input(action)
    return True


def _present(window: pygame.Surface, canvas: pygame.Surface) -> None:
    if window.get_size() == canvas.get_size():
        window.blit(canvas, (0, 0))
    else:
        pygame.transform.smoothscale(canvas, window.get_size(), window)
    pygame.display.flip()


def run(game_settings: Optional[GameSettings] = None) -> None:
    """Open the game window and play until it is closed."""
    runtime = game_settings or settings.current_settings()
    logger = _initialise_logger(runtime)

    pygame.init()
    window = pygame.display.set_mode(runtime.window_size)
    pygame.display.set_caption("Meteor Dodge")
    canvas = pygame.Surface((runtime.CANVAS_WIDTH, runtime.CANVAS_HEIGHT))

    audio = MixerAudio(runtime.SOUND_DIRECTORY, enabled=runtime.AUDIO_ENABLED)
    engine = SimulationEngine(
        runtime,
        audio=audio,
        score_store=JsonScoreStore(runtime.BEST_SCORE_FILE),
    )
    renderer = Renderer(canvas)
    mapper = InputMapper()
    clock = pygame.time.Clock()
    logger.info(
        "Window %sx%s, canvas %sx%s, best score %s",
        *runtime.window_size,
        runtime.CANVAS_WIDTH,
        runtime.CANVAS_HEIGHT,
        engine.best_score,
    )

    running = True
    while running:
        delta_time = clock.tick(runtime.FPS) / 1000.0

        for event in pygame.event.get():
            if not dispatch_action(engine, audio, mapper.translate(event)):
                running = False

        engine.advance(delta_time)
        renderer.draw(engine.snapshot())
        _present(window, canvas)

    audio.stop_ambient()
    pygame.quit()
    logger.info("Game closed after %s session(s)", engine.state.sessions_played)
