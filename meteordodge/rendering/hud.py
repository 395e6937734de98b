"""Score readout and the title / game-over overlays."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

import pygame

from ..config import settings
from ..simulation.state import GameSnapshot, Phase

Color = Tuple[int, int, int]

PANEL_COLOR = (12, 20, 32, 190)
TITLE_COLOR: Color = settings.SHIP_GREEN
TEXT_COLOR: Color = (235, 245, 255)
MUTED_COLOR: Color = (150, 160, 180)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class HUD:
    def draw(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        if snapshot.phase is Phase.PLAYING:
            self._draw_score(surface, snapshot)
        elif snapshot.phase is Phase.IDLE:
            self._draw_panel(
                surface,
                [
                    ("METEOR DODGE", TITLE_COLOR, 40),
                    ("Dodge meteors, catch stars", TEXT_COLOR, 22),
                    ("Arrow keys to steer", MUTED_COLOR, 20),
                    ("Press SPACE or click to start", TEXT_COLOR, 22),
                    (f"Best: {snapshot.best_score}", MUTED_COLOR, 22),
                ],
            )
        else:
            self._draw_score(surface, snapshot)
            self._draw_panel(
                surface,
                [
                    ("GAME OVER", (255, 120, 120), 40),
                    (f"Score: {snapshot.final_score or 0}", TEXT_COLOR, 26),
                    (f"Best: {snapshot.best_score}", TEXT_COLOR, 26),
                    ("Press SPACE or click to restart", MUTED_COLOR, 20),
                ],
            )

    def _draw_score(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        font = _font(24)
        surface.blit(font.render(f"Score: {snapshot.score}", True, TEXT_COLOR), (10, 10))
        best = font.render(f"Best: {snapshot.best_score}", True, MUTED_COLOR)
        surface.blit(best, (surface.get_width() - best.get_width() - 10, 10))

    def _draw_panel(self, surface: pygame.Surface, lines: List[Tuple[str, Color, int]]) -> None:
        rendered = [_font(size).render(text, True, color) for text, color, size in lines]
        padding = 16
        spacing = 8
        width = max(text.get_width() for text in rendered) + padding * 2
        height = sum(text.get_height() for text in rendered) + spacing * (len(rendered) - 1) + padding * 2

        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill(PANEL_COLOR)
        y = padding
        for text in rendered:
            panel.blit(text, ((width - text.get_width()) // 2, y))
            y += text.get_height() + spacing

        surface.blit(panel, ((surface.get_width() - width) // 2, (surface.get_height() - height) // 2))
