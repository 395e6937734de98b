"""Best-effort sound playback for the game.

Nothing in this module is allowed to raise into the frame loop: a missing
mixer, missing files or a failing ``play`` call only disable or skip sound.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Protocol

import pygame

from ..config import settings
from ..config.constants import SOUND_HIT, SOUND_SUCCESS

logger = logging.getLogger("meteordodge.audio")

POOL_SIZE = 3
BACKGROUND_NAME = "background"
BACKGROUND_VOLUME = 0.3
EFFECT_VOLUMES: Dict[str, float] = {
    SOUND_HIT: 0.7,
    SOUND_SUCCESS: 0.6,
}
SOUND_EXTENSIONS = (".wav", ".ogg", ".mp3")


class AudioSink(Protocol):
    """What the simulation may ask of the audio layer."""

    def request_sound(self, name: str) -> None:
        """Play a one-shot effect such as ``"hit"`` or ``"success"``."""

    def start_ambient(self) -> None:
        """Start the looping background track if it is not already playing."""

    def stop_ambient(self) -> None:
        """Stop the looping background track."""


class NullAudio:
    """Silent sink used headless and in tests."""

    def __init__(self) -> None:
        self.muted = False

    def request_sound(self, name: str) -> None:
        return None

    def start_ambient(self) -> None:
        return None

    def stop_ambient(self) -> None:
        return None

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted


class MixerAudio:
    """``pygame.mixer`` backed audio with small pools for overlapping effects."""

    def __init__(self, sound_dir: Optional[Path] = None, *, enabled: bool = True) -> None:
        self.sound_dir = Path(sound_dir) if sound_dir is not None else Path(settings.SOUND_DIRECTORY)
        self.muted = not enabled
        self.available = False
        self._pools: Dict[str, List[pygame.mixer.Sound]] = {}
        self._background: Optional[pygame.mixer.Sound] = None
        self._background_channel: Optional[pygame.mixer.Channel] = None
        self._initialise()

    def _initialise(self) -> None:
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Audio disabled; mixer unavailable: %s", exc)
            return
        self.available = True
        self._background = self._load(BACKGROUND_NAME, BACKGROUND_VOLUME)
        for name, volume in EFFECT_VOLUMES.items():
            pool = [self._load(name, volume) for _ in range(POOL_SIZE)]
            self._pools[name] = [sound for sound in pool if sound is not None]

    def _resolve(self, name: str) -> Optional[Path]:
        for extension in SOUND_EXTENSIONS:
            candidate = self.sound_dir / f"{name}{extension}"
            if candidate.is_file():
                return candidate
        return None

    def _load(self, name: str, volume: float) -> Optional[pygame.mixer.Sound]:
        path = self._resolve(name)
        if path is None:
            logger.warning("Could not find sound '%s' in %s", name, self.sound_dir)
            return None
        try:
            sound = pygame.mixer.Sound(str(path))
        except pygame.error as exc:
            logger.warning("Could not load sound %s: %s", path, exc)
            return None
        sound.set_volume(volume)
        return sound

    def request_sound(self, name: str) -> None:
        if self.muted or not self.available:
            return
        pool = self._pools.get(name)
        if not pool:
            return
        sound = next((candidate for candidate in pool if candidate.get_num_channels() == 0), None)
        if sound is None:
            # Every copy is busy; pygame plays the first one again on a free channel.
            sound = pool[0]
        try:
            sound.play()
        except pygame.error as exc:
            logger.debug("Could not play sound %s: %s", name, exc)

    def start_ambient(self) -> None:
        if self.muted or not self.available or self._background is None:
            return
        if self._background_channel is not None and self._background_channel.get_busy():
            return
        try:
            self._background_channel = self._background.play(loops=-1)
        except pygame.error as exc:
            logger.debug("Could not start background music: %s", exc)

    def stop_ambient(self) -> None:
        if self._background is not None:
            self._background.stop()
        self._background_channel = None

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self.muted:
            self.stop_ambient()
            if self.available:
                pygame.mixer.stop()
        logger.info("Audio %s", "muted" if self.muted else "unmuted")
        return self.muted
