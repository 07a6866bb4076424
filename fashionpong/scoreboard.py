"""Score display at the top of the field."""

from __future__ import annotations

from functools import lru_cache

import pygame

from .state import WHITE, Score, Screen


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class ScoreBoard:
    """Shows the CPU score on the left half and the player score on the right."""

    FONT_SIZE = 80

    def __init__(self, screen: Screen | None = None) -> None:
        self.screen = screen or Screen()

    def labels(self, score: Score) -> list[tuple[str, tuple[int, int]]]:
        """Return each score's text with the position it is drawn at."""
        width = self.screen.width
        return [
            (str(score.cpu), (width // 4 - 20, 20)),
            (str(score.player), (3 * width // 4 - 20, 20)),
        ]

    def draw(self, surface: pygame.Surface, score: Score) -> None:
        font = _font(self.FONT_SIZE)
        for text, position in self.labels(score):
            surface.blit(font.render(text, True, WHITE), position)