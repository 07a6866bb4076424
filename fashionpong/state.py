"""Shared game state: screen geometry, scores, palette and collision helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Color = tuple[int, int, int]
Rect = tuple[float, float, float, float]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
RED: Color = (230, 41, 55)
BROWN: Color = (127, 106, 79)
BLUE: Color = (0, 121, 241)
PINK: Color = (255, 109, 194)
YELLOW: Color = (253, 249, 0)
GOLD: Color = (255, 203, 0)
PURPLE: Color = (200, 122, 255)
GREEN: Color = (0, 228, 48)
DARKGREEN: Color = (0, 117, 44)
LIGHTGRAY: Color = (200, 200, 200)
GRAY: Color = (130, 130, 130)


@dataclass(frozen=True)
class Screen:
    """Size of the playing field in pixels."""

    width: int = 1280
    height: int = 800

    @property
    def center(self) -> tuple[int, int]:
        return self.width // 2, self.height // 2


class GameStateKind(Enum):
    """Which screen the game is currently showing."""

    MAIN_MENU = 0
    PLAYING = 1
    PAUSED = 2
    GAME_OVER = 3


@dataclass
class Score:
    """Points scored by the player and by the computer."""

    player: int = 0
    cpu: int = 0

    def reset(self) -> None:
        self.player = 0
        self.cpu = 0


def circle_hits_rect(center: tuple[float, float], radius: float, rect: Rect) -> bool:
    """Return True if a circle touches or overlaps an axis-aligned rectangle."""
    cx, cy = center
    x, y, w, h = rect
    nearest_x = min(max(cx, x), x + w)
    nearest_y = min(max(cy, y), y + h)
    return (cx - nearest_x) ** 2 + (cy - nearest_y) ** 2 <= radius * radius


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Return True if two rectangles overlap; shared edges do not count."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by