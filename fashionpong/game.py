"""The game: state machine, power-up spawning, collisions and the main loop."""

from __future__ import annotations

import random
from functools import lru_cache

import pygame

from .ball import Ball
from .menu import MainMenu, MenuOption
from .paddle import CpuPaddle, Paddle, PlayerPaddle
from .powerup import PowerUp, PowerUpType
from .scoreboard import ScoreBoard
from .state import (
    DARKGREEN,
    LIGHTGRAY,
    WHITE,
    YELLOW,
    Color,
    GameStateKind,
    Score,
    Screen,
    circle_hits_rect,
    rects_overlap,
)

POWER_UP_SPAWN_INTERVAL = 8.0
TARGET_FPS = 144

_POWER_UP_DESCRIPTIONS = (
    "Shoe: Ball Speed+",
    "Jacket: Paddle Size+",
    "Dress: Paddle Speed+",
    "Necklace: Ball Size+",
    "Hat: Shield",
    "Bag: Double Points",
)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_text(
    surface: pygame.Surface, text: str, pos: tuple[int, int], size: int, color: Color
) -> None:
    surface.blit(_font(size).render(text, True, color), pos)


class Game:
    """Owns every entity and advances them one frame at a time."""

    def __init__(self, screen: Screen | None = None, rng: random.Random | None = None) -> None:
        self.screen = screen or Screen()
        self.rng = rng or random.Random()
        self.score = Score()
        self.ball = Ball(self.screen, self.rng)
        paddle_y = self.screen.height / 2 - 60
        self.player = PlayerPaddle(self.screen.width - 35, paddle_y, self.screen)
        self.cpu = CpuPaddle(10, paddle_y, self.ball, self.screen)
        self.scoreboard = ScoreBoard(self.screen)
        self.menu = MainMenu(self.screen)
        self.state = GameStateKind.MAIN_MENU
        self.power_ups: list[PowerUp] = []
        self.power_up_spawn_timer = 0.0

    def handle_main_menu(
        self, up_pressed: bool, down_pressed: bool, enter_pressed: bool
    ) -> MenuOption | None:
        """Navigate the menu; return the option chosen with enter, if any."""
        self.menu.update(up_pressed, down_pressed)
        if not enter_pressed:
            return None
        option = self.menu.selected
        if option is MenuOption.START_GAME:
            self.state = GameStateKind.PLAYING
            self.reset()
        return option

    def update_gameplay(
        self, dt: float, now: float, up_held: bool, down_held: bool, escape_pressed: bool
    ) -> None:
        """Advance one frame of play; escape returns to the main menu."""
        if escape_pressed:
            self.state = GameStateKind.MAIN_MENU
            return

        self.ball.update(dt, self.score)
        self.player.update(dt, up_held, down_held)
        self.cpu.update(dt)
        self.update_power_ups(dt, now)

        for paddle in (self.player, self.cpu):
            if circle_hits_rect((self.ball.x, self.ball.y), self.ball.radius, paddle.rect()):
                if paddle.has_shield:
                    paddle.use_shield()
                self.ball.reverse_x()

        self.check_power_up_collisions()

    def update_power_ups(self, dt: float, now: float) -> None:
        """Spawn on schedule, drop inactive power-ups and advance the rest."""
        self.power_up_spawn_timer += dt
        if self.power_up_spawn_timer >= POWER_UP_SPAWN_INTERVAL:
            self.spawn_random_power_up(now)
            self.power_up_spawn_timer = 0.0

        self.power_ups = [p for p in self.power_ups if p.active]
        for power_up in self.power_ups:
            power_up.update(dt, now)

    def spawn_random_power_up(self, now: float) -> PowerUp:
        """Place a random power-up in the middle area of the field."""
        min_x = self.screen.width * 0.3
        max_x = self.screen.width * 0.7
        min_y = self.screen.height * 0.2
        max_y = self.screen.height * 0.8
        x = min_x + self.rng.randrange(int(max_x - min_x))
        y = min_y + self.rng.randrange(int(max_y - min_y))
        kind = PowerUpType(self.rng.randrange(len(PowerUpType)))
        power_up = PowerUp(x, y, kind, spawn_time=now)
        self.power_ups.append(power_up)
        return power_up

    def check_power_up_collisions(self) -> PowerUp | None:
        """Give the first power-up the ball touches to the nearer paddle."""
        r = self.ball.radius
        ball_rect = (self.ball.x - r, self.ball.y - r, r * 2.0, r * 2.0)
        for power_up in self.power_ups:
            if power_up.active and rects_overlap(ball_rect, power_up.bounds()):
                to_player = self._distance(self.player) < self._distance(self.cpu)
                self.apply_power_up(power_up.kind, to_player)
                power_up.deactivate()
                return power_up
        return None

    def _distance(self, paddle: Paddle) -> float:
        return abs(self.ball.x - (paddle.x + paddle.width / 2))

    def apply_power_up(self, kind: PowerUpType, to_player: bool) -> None:
        """Apply a power-up: ball effects are global, the rest go to one paddle."""
        if kind is PowerUpType.SHOE:
            self.ball.apply_speed_boost()
        elif kind is PowerUpType.NECKLACE:
            self.ball.apply_size_boost()
        else:
            (self.player if to_player else self.cpu).apply_power_up(kind)

    def active_power_up_count(self) -> int:
        return sum(1 for p in self.power_ups if p.active)

    def reset(self) -> None:
        """Start a new round; the score is kept."""
        self.ball.reset()
        self.power_ups.clear()
        self.power_up_spawn_timer = 0.0

    def draw(self, surface: pygame.Surface, now: float) -> None:
        if self.state is GameStateKind.MAIN_MENU:
            self.menu.draw(surface)
        elif self.state is GameStateKind.PLAYING:
            self._draw_gameplay(surface, now)

    def _draw_gameplay(self, surface: pygame.Surface, now: float) -> None:
        width, height = self.screen.width, self.screen.height
        surface.fill(DARKGREEN)
        pygame.draw.line(surface, WHITE, (width // 2, 0), (width // 2, height))

        for power_up in self.power_ups:
            if power_up.active:
                power_up.draw(surface, now)

        self.ball.draw(surface)
        self.player.draw(surface)
        self.cpu.draw(surface)
        self.scoreboard.draw(surface, self.score)
        self._draw_power_up_info(surface)

        _draw_text(surface, "ESC - Main Menu", (10, 10), 20, LIGHTGRAY)
        _draw_text(surface, "Fashion Power-Ups Active!", (width // 2 - 100, 10), 20, YELLOW)

    def _draw_power_up_info(self, surface: pygame.Surface) -> None:
        legend_y = self.screen.height - 120
        _draw_text(surface, "FASHION POWER-UPS:", (10, legend_y), 16, WHITE)
        for index, description in enumerate(_POWER_UP_DESCRIPTIONS):
            _draw_text(surface, description, (10, legend_y + 20 + index * 15), 12, LIGHTGRAY)
        _draw_text(
            surface,
            f"Active Power-Ups: {self.active_power_up_count()}",
            (self.screen.width - 200, legend_y),
            16,
            YELLOW,
        )

    def run(self) -> None:
        """Open a window and play until it is closed or escape is pressed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((self.screen.width, self.screen.height))
            pygame.display.set_caption("OOP Pong")
            clock = pygame.time.Clock()
            running = True
            while running:
                dt = clock.tick(TARGET_FPS) / 1000.0
                now = pygame.time.get_ticks() / 1000.0
                pressed: set[int] = set()
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        pressed.add(event.key)
                        if event.key == pygame.K_ESCAPE:
                            running = False

                if self.state is GameStateKind.MAIN_MENU:
                    self.handle_main_menu(
                        pygame.K_UP in pressed,
                        pygame.K_DOWN in pressed,
                        pygame.K_RETURN in pressed,
                    )
                elif self.state is GameStateKind.PLAYING:
                    keys = pygame.key.get_pressed()
                    self.update_gameplay(
                        dt,
                        now,
                        keys[pygame.K_UP],
                        keys[pygame.K_DOWN],
                        pygame.K_ESCAPE in pressed,
                    )

                self.draw(surface, now)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    Game().run()
    return 0