"""Collectable fashion power-ups that appear on the field."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

import pygame

from .state import BLACK, BLUE, BROWN, GOLD, PINK, PURPLE, RED, WHITE, YELLOW, Rect


class PowerUpType(Enum):
    """The kinds of power-up, in spawn order."""

    SHOE = 0  # ball speeds up
    JACKET = 1  # paddle grows
    DRESS = 2  # paddle speeds up
    NECKLACE = 3  # ball grows
    HAT = 4  # shield
    BAG = 5  # double points


@dataclass
class PowerUp:
    """A spinning power-up that disappears after a fixed lifetime."""

    x: float
    y: float
    kind: PowerUpType
    spawn_time: float = 0.0
    rotation: float = 0.0
    active: bool = True
    size: float = 30.0

    LIFETIME: ClassVar[float] = 15.0
    SPIN_RATE: ClassVar[float] = 90.0

    def update(self, dt: float, now: float) -> None:
        """Spin by the elapsed time and deactivate once the lifetime is over."""
        if not self.active:
            return
        self.rotation += dt * self.SPIN_RATE
        if self.is_expired(now):
            self.active = False

    def deactivate(self) -> None:
        self.active = False

    def is_expired(self, now: float) -> bool:
        return now - self.spawn_time > self.LIFETIME

    def bounds(self) -> Rect:
        half = self.size / 2
        return (self.x - half, self.y - half, self.size, self.size)

    def draw(self, surface: pygame.Surface, now: float) -> None:
        """Draw the power-up icon with a pulsing outline."""
        if not self.active:
            return
        x, y = int(self.x), int(self.y)
        glow = max(1, int(self.size + math.sin(now * 5) * 3))
        pygame.draw.circle(surface, WHITE, (x, y), glow, width=1)

        if self.kind is PowerUpType.SHOE:
            pygame.draw.ellipse(surface, RED, pygame.Rect(x - 20, y - 8, 40, 16))
            pygame.draw.rect(surface, BROWN, pygame.Rect(x + 15, y - 3, 8, 6))
        elif self.kind is PowerUpType.JACKET:
            pygame.draw.rect(surface, BLUE, pygame.Rect(x - 15, y - 10, 30, 25))
            pygame.draw.rect(surface, BLUE, pygame.Rect(x - 20, y - 5, 10, 20))
            pygame.draw.rect(surface, BLUE, pygame.Rect(x + 15, y - 5, 10, 20))
        elif self.kind is PowerUpType.DRESS:
            pygame.draw.circle(surface, PINK, (x, y - 10), 8)
            pygame.draw.rect(surface, PINK, pygame.Rect(x - 12, y, 24, 20))
        elif self.kind is PowerUpType.NECKLACE:
            start = math.radians(45 + self.rotation)
            points = [
                (
                    int(self.x + 8.0 * math.cos(start + i * math.pi / 2)),
                    int(self.y + 8.0 * math.sin(start + i * math.pi / 2)),
                )
                for i in range(4)
            ]
            pygame.draw.lines(surface, YELLOW, True, points)
            pygame.draw.circle(surface, GOLD, (x, y - 15), 3)
        elif self.kind is PowerUpType.HAT:
            pygame.draw.rect(surface, BLACK, pygame.Rect(x - 15, y, 30, 8))
            pygame.draw.rect(surface, BLACK, pygame.Rect(x - 10, y - 15, 20, 15))
        elif self.kind is PowerUpType.BAG:
            pygame.draw.rect(surface, PURPLE, pygame.Rect(x - 12, y - 8, 24, 16))
            pygame.draw.rect(surface, PURPLE, pygame.Rect(x - 8, y - 12, 16, 4))