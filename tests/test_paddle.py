import random

import pygame
import pytest

from fashionpong.ball import Ball
from fashionpong.paddle import CpuPaddle, Paddle, PlayerPaddle
from fashionpong.powerup import PowerUpType
from fashionpong.state import BLUE, GREEN, PINK, PURPLE, RED, WHITE, YELLOW, Screen

SCREEN = Screen(1280, 800)


def test_defaults_and_rect():
    paddle = Paddle(10, 20, SCREEN)
    assert paddle.rect() == (10, 20, 25, 120)
    assert paddle.speed == 6
    assert paddle.color() == WHITE


def test_jacket_grows_and_expires():
    paddle = Paddle(0, 0, SCREEN)
    paddle.apply_power_up(PowerUpType.JACKET)
    assert paddle.height == paddle.original_height + 40
    assert paddle.power_up_timer == 10.0
    paddle.update_power_up(10.0)
    assert paddle.height == 120
    assert paddle.has_power_up is False


def test_dress_speeds_up_and_expires():
    paddle = Paddle(0, 0, SCREEN)
    paddle.apply_power_up(PowerUpType.DRESS)
    assert paddle.speed == 9
    paddle.update_power_up(4.0)
    assert paddle.speed == 9
    paddle.update_power_up(6.0)
    assert paddle.speed == 6


def test_hat_gives_shield_used_once():
    paddle = Paddle(0, 0, SCREEN)
    paddle.apply_power_up(PowerUpType.HAT)
    assert paddle.has_shield is True
    paddle.use_shield()
    assert paddle.has_shield is False
    assert paddle.has_power_up is False
    assert paddle.power_up_timer == 0.0
    assert paddle.color() == WHITE


def test_shield_ends_with_timer():
    paddle = Paddle(0, 0, SCREEN)
    paddle.apply_power_up(PowerUpType.HAT)
    paddle.update_power_up(11.0)
    assert paddle.has_shield is False


@pytest.mark.parametrize(
    "kind,color",
    [
        (PowerUpType.SHOE, RED),
        (PowerUpType.JACKET, BLUE),
        (PowerUpType.DRESS, PINK),
        (PowerUpType.NECKLACE, YELLOW),
        (PowerUpType.HAT, PURPLE),
        (PowerUpType.BAG, GREEN),
    ],
)
def test_color_follows_power_up(kind, color):
    paddle = Paddle(0, 0, SCREEN)
    paddle.apply_power_up(kind)
    assert paddle.color() == color


def test_limit_movement_clamps_both_edges():
    paddle = Paddle(0, -10, SCREEN)
    paddle.limit_movement()
    assert paddle.y == 0
    paddle.y = SCREEN.height
    paddle.limit_movement()
    assert paddle.y + paddle.height == SCREEN.height


def test_player_moves_with_keys_and_clamps():
    paddle = PlayerPaddle(1245, 340, SCREEN)
    paddle.update(0.01, up=True, down=False)
    assert paddle.y == 340 - paddle.speed
    paddle.update(0.01, up=False, down=True)
    assert paddle.y == 340
    paddle.update(0.01, up=True, down=True)
    assert paddle.y == 340
    paddle.y = 2
    paddle.update(0.01, up=True, down=False)
    assert paddle.y == 0


def test_cpu_follows_ball_down():
    ball = Ball(SCREEN, random.Random(0))
    cpu = CpuPaddle(10, 0, ball, SCREEN)
    cpu.update(0.01)
    assert cpu.y == cpu.speed


def test_cpu_follows_ball_up():
    ball = Ball(SCREEN, random.Random(0))
    cpu = CpuPaddle(10, 680, ball, SCREEN)
    cpu.update(0.01)
    assert cpu.y == 680 - cpu.speed


def test_cpu_stays_when_centered_on_ball():
    ball = Ball(SCREEN, random.Random(0))
    cpu = CpuPaddle(10, ball.y - 60, ball, SCREEN)
    cpu.update(0.01)
    assert cpu.y == ball.y - 60


def test_draw_paints_paddle_white():
    surface = pygame.Surface((1280, 800))
    paddle = Paddle(100, 100, SCREEN)
    paddle.draw(surface)
    assert tuple(surface.get_at((112, 160)))[:3] == WHITE


def test_draw_with_power_up_uses_power_up_color():
    surface = pygame.Surface((1280, 800))
    paddle = Paddle(100, 100, SCREEN)
    paddle.apply_power_up(PowerUpType.JACKET)
    paddle.draw(surface)
    assert tuple(surface.get_at((112, 160)))[:3] == BLUE
    assert tuple(surface.get_at((101, 93)))[:3] == GREEN