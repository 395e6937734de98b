"""Translate pygame events into engine input actions."""

from __future__ import annotations

from typing import Optional

import pygame

from ..simulation.state import InputAction

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
CONFIRM_KEYS = (pygame.K_SPACE, pygame.K_RETURN)
MUTE_KEYS = (pygame.K_m,)
QUIT_KEYS = (pygame.K_ESCAPE,)


class InputMapper:
    """Keyboard, mouse and touch mapping.

    Mouse clicks synthesised from touches are ignored because the matching
    ``FINGERDOWN`` already produced a confirm.
    """

    def translate(self, event: pygame.event.Event) -> Optional[InputAction]:
        if event.type == pygame.QUIT:
            return InputAction.QUIT
        if event.type == pygame.KEYDOWN:
            return self._key_down(event.key)
        if event.type == pygame.KEYUP:
            return self._key_up(event.key)
        if event.type == pygame.MOUSEBUTTONDOWN:
            if getattr(event, "touch", False):
                return None
            return InputAction.CONFIRM
        if event.type == pygame.FINGERDOWN:
            return InputAction.CONFIRM
        return None

    @staticmethod
    def _key_down(key: int) -> Optional[InputAction]:
        if key in LEFT_KEYS:
            return InputAction.LEFT_PRESSED
        if key in RIGHT_KEYS:
            return InputAction.RIGHT_PRESSED
        if key in CONFIRM_KEYS:
            return InputAction.CONFIRM
        if key in MUTE_KEYS:
            return InputAction.TOGGLE_MUTE
        if key in QUIT_KEYS:
            return InputAction.QUIT
        return None

    @staticmethod
    def _key_up(key: int) -> Optional[InputAction]:
        if key in LEFT_KEYS:
            return InputAction.LEFT_RELEASED
        if key in RIGHT_KEYS:
            return InputAction.RIGHT_RELEASED
        return None
