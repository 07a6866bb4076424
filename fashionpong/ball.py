"""The ball: movement, wall bounces, scoring and ball power-ups."""

from __future__ import annotations

import random
from typing import Callable

import pygame

from .state import WHITE, YELLOW, Color, Score, Screen

_BOOST_DURATION = 10.0


def _draw_translucent(
    surface: pygame.Surface, alpha: float, paint: Callable[[pygame.Surface], None]
) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    paint(overlay)
    overlay.set_alpha(round(255 * alpha))
    surface.blit(overlay, (0, 0))


class Ball:
    """A ball bouncing between the top and bottom walls."""

    def __init__(self, screen: Screen | None = None, rng: random.Random | None = None) -> None:
        self.screen = screen or Screen()
        self.rng = rng or random.Random()
        self.radius = 20
        self.original_radius = self.radius
        self.x, self.y = (float(c) for c in self.screen.center)
        self.speed_x = 5
        self.speed_y = 5
        self.original_speed_x = 5
        self.original_speed_y = 5
        self.power_up_timer = 0.0
        self.has_power_up = False

    def update(self, dt: float, score: Score) -> None:
        """Move one step, bounce off walls and award a point on a miss."""
        self.x += self.speed_x
        self.y += self.speed_y
        self.update_power_up(dt)

        if self.y + self.radius >= self.screen.height or self.y - self.radius <= 0:
            self.speed_y *= -1

        if self.x + self.radius >= self.screen.width:
            score.cpu += 1
            self.reset()

        if self.x - self.radius <= 0:
            score.player += 1
            self.reset()

    def reset(self) -> None:
        """Return to the centre with original size and a random direction."""
        self.x, self.y = (float(c) for c in self.screen.center)
        self.radius = self.original_radius
        self.has_power_up = False
        self.power_up_timer = 0.0
        self.speed_x = self.original_speed_x * self.rng.choice((-1, 1))
        self.speed_y = self.original_speed_y * self.rng.choice((-1, 1))

    def reverse_x(self) -> None:
        self.speed_x *= -1

    def apply_speed_boost(self) -> None:
        self.speed_x = int(self.speed_x * 1.3)
        self.speed_y = int(self.speed_y * 1.3)
        self.has_power_up = True
        self.power_up_timer = _BOOST_DURATION

    def apply_size_boost(self) -> None:
        self.radius = int(self.original_radius * 1.5)
        self.has_power_up = True
        self.power_up_timer = _BOOST_DURATION

    def update_power_up(self, dt: float) -> None:
        """Count the boost down; on expiry restore the size but keep the speed."""
        if self.has_power_up and self.power_up_timer > 0:
            self.power_up_timer -= dt
            if self.power_up_timer <= 0:
                self.has_power_up = False
                self.radius = self.original_radius

    def color(self) -> Color:
        return YELLOW if self.radius > self.original_radius else WHITE

    def draw(self, surface: pygame.Surface) -> None:
        color = self.color()
        center = (int(self.x), int(self.y))
        pygame.draw.circle(surface, color, center, self.radius)
        if self.has_power_up:
            _draw_translucent(
                surface,
                0.5,
                lambda layer: pygame.draw.circle(layer, color, center, self.radius + 5, width=1),
            )