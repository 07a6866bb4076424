"""Main menu with keyboard navigation."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

import pygame

from .state import DARKGREEN, GRAY, LIGHTGRAY, WHITE, YELLOW, Color, Screen


class MenuOption(Enum):
    """Entries of the main menu, in display order."""

    START_GAME = "Start Game"
    SETTINGS = "Settings"
    QUIT = "Quit"


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_centered(
    surface: pygame.Surface, text: str, y: int, size: int, color: Color, width: int
) -> int:
    font = _font(size)
    text_width = font.size(text)[0]
    x = (width - text_width) // 2
    surface.blit(font.render(text, True, color), (x, y))
    return x


class MainMenu:
    """A vertical list of options with a wrapping cursor."""

    TITLE = "OOP PONG"
    SUBTITLE = "Made with Python & pygame"
    CONTROLS = "Use UP/DOWN arrows to navigate, ENTER to select"

    def __init__(self, screen: Screen | None = None) -> None:
        self.screen = screen or Screen()
        self.options: tuple[MenuOption, ...] = tuple(MenuOption)
        self.selected_index = 0

    @property
    def selected(self) -> MenuOption:
        return self.options[self.selected_index]

    def update(self, up_pressed: bool, down_pressed: bool) -> None:
        """Move the cursor, wrapping around at either end."""
        count = len(self.options)
        if up_pressed:
            self.selected_index = (self.selected_index - 1) % count
        if down_pressed:
            self.selected_index = (self.selected_index + 1) % count

    def reset(self) -> None:
        self.selected_index = 0

    def draw(self, surface: pygame.Surface) -> None:
        width, height = self.screen.width, self.screen.height
        surface.fill(DARKGREEN)

        _draw_centered(surface, self.TITLE, height // 4, 80, YELLOW, width)
        _draw_centered(surface, self.SUBTITLE, height // 4 + 100, 20, LIGHTGRAY, width)

        option_size = 40
        start_y = height // 2 + 50
        spacing = 70
        font = _font(option_size)
        for index, option in enumerate(self.options):
            chosen = index == self.selected_index
            color = YELLOW if chosen else WHITE
            y = start_y + index * spacing
            x = _draw_centered(surface, option.value, y, option_size, color, width)
            if chosen:
                option_width = font.size(option.value)[0]
                surface.blit(font.render(">", True, YELLOW), (x - 50, y))
                surface.blit(font.render("<", True, YELLOW), (x + option_width + 20, y))

        _draw_centered(surface, self.CONTROLS, height - 50, 16, GRAY, width)