"""Paddles: the keyboard-driven player paddle and the ball-tracking CPU paddle."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Callable

import pygame

from .powerup import PowerUpType
from .state import BLUE, GOLD, GREEN, PINK, PURPLE, RED, WHITE, YELLOW, Color, Rect, Screen

if TYPE_CHECKING:
    from .ball import Ball

_BOOST_DURATION = 10.0

_POWER_UP_COLORS: dict[PowerUpType, Color] = {
    PowerUpType.SHOE: RED,
    PowerUpType.JACKET: BLUE,
    PowerUpType.DRESS: PINK,
    PowerUpType.NECKLACE: YELLOW,
    PowerUpType.HAT: PURPLE,
    PowerUpType.BAG: GREEN,
}


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_translucent(
    surface: pygame.Surface, alpha: float, paint: Callable[[pygame.Surface], None]
) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    paint(overlay)
    overlay.set_alpha(round(255 * alpha))
    surface.blit(overlay, (0, 0))


class Paddle:
    """A vertical paddle that can carry one timed power-up."""

    def __init__(self, x: float, y: float, screen: Screen | None = None) -> None:
        self.screen = screen or Screen()
        self.x = float(x)
        self.y = float(y)
        self.width = 25.0
        self.height = 120.0
        self.speed = 6
        self.original_height = self.height
        self.original_speed = float(self.speed)
        self.power_up_timer = 0.0
        self.active_power_up: PowerUpType | None = None
        self.has_power_up = False
        self.has_shield = False

    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    def limit_movement(self) -> None:
        """Keep the paddle inside the screen vertically."""
        if self.y < 0:
            self.y = 0.0
        if self.y + self.height > self.screen.height:
            self.y = self.screen.height - self.height

    def apply_power_up(self, kind: PowerUpType) -> None:
        self.active_power_up = kind
        self.has_power_up = True
        self.power_up_timer = _BOOST_DURATION
        if kind is PowerUpType.JACKET:
            self.height = self.original_height + 40
        elif kind is PowerUpType.DRESS:
            self.speed = int(self.original_speed * 1.5)
        elif kind is PowerUpType.HAT:
            self.has_shield = True

    def update_power_up(self, dt: float) -> None:
        """Count the power-up down and restore the paddle when it runs out."""
        if self.has_power_up and self.power_up_timer > 0:
            self.power_up_timer -= dt
            if self.power_up_timer <= 0:
                self.has_power_up = False
                self.has_shield = False
                self.height = self.original_height
                self.speed = int(self.original_speed)

    def use_shield(self) -> None:
        self.has_shield = False
        self.has_power_up = False
        self.power_up_timer = 0.0

    def color(self) -> Color:
        if not self.has_power_up or self.active_power_up is None:
            return WHITE
        return _POWER_UP_COLORS.get(self.active_power_up, WHITE)

    def draw(self, surface: pygame.Surface) -> None:
        color = self.color()
        x, y, w, h = int(self.x), int(self.y), int(self.width), int(self.height)

        if self.has_power_up:
            glow = pygame.Rect(x - 2, y - 2, w + 4, h + 4)
            radius = int(0.8 * min(glow.w, glow.h) / 2)
            _draw_translucent(
                surface,
                0.3,
                lambda layer: pygame.draw.rect(layer, color, glow, border_radius=radius),
            )

        pygame.draw.rect(
            surface, color, pygame.Rect(x, y, w, h), border_radius=int(0.8 * min(w, h) / 2)
        )

        if self.has_shield:
            center = (int(self.x + self.width / 2), int(self.y + self.height / 2))
            pygame.draw.circle(surface, GOLD, center, 60, width=1)
            label = _font(12).render("SHIELD", True, GOLD)
            surface.blit(label, (int(self.x - 10), int(self.y - 20)))

        if self.has_power_up and self.power_up_timer > 0:
            bar_width = int(self.power_up_timer / _BOOST_DURATION * self.width)
            pygame.draw.rect(surface, GREEN, pygame.Rect(x, int(self.y - 8), bar_width, 4))


class PlayerPaddle(Paddle):
    """Paddle moved by the up and down keys."""

    def update(self, dt: float, up: bool, down: bool) -> None:
        if up:
            self.y -= self.speed
        if down:
            self.y += self.speed
        self.limit_movement()
        self.update_power_up(dt)


class CpuPaddle(Paddle):
    """Paddle that follows the ball's height."""

    def __init__(self, x: float, y: float, ball: Ball, screen: Screen | None = None) -> None:
        super().__init__(x, y, screen)
        self.ball = ball

    def update(self, dt: float) -> None:
        if self.y + self.height / 2 > self.ball.y:
            self.y -= self.speed
        if self.y + self.height / 2 < self.ball.y:
            self.y += self.speed
        self.limit_movement()
        self.update_power_up(dt)