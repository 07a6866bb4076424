import random

import pygame

from fashionpong.ball import Ball
from fashionpong.state import WHITE, YELLOW, Score, Screen


def make_ball(seed=1):
    return Ball(Screen(1280, 800), random.Random(seed))


def test_starts_in_center():
    ball = make_ball()
    assert (ball.x, ball.y) == (640, 400)
    assert ball.radius == 20
    assert (ball.speed_x, ball.speed_y) == (5, 5)


def test_update_moves_by_speed():
    ball = make_ball()
    score = Score()
    ball.update(0.01, score)
    assert (ball.x, ball.y) == (645, 405)
    assert score == Score()


def test_bounces_off_top_wall():
    ball = make_ball()
    ball.y = 10
    ball.speed_y = -5
    ball.update(0.01, Score())
    assert ball.speed_y == 5


def test_bounces_off_bottom_wall():
    ball = make_ball()
    ball.y = 790
    ball.update(0.01, Score())
    assert ball.speed_y == -5


def test_right_wall_scores_for_cpu_and_resets():
    ball = make_ball()
    score = Score()
    ball.x = 1257
    ball.update(0.01, score)
    assert (score.player, score.cpu) == (0, 1)
    assert (ball.x, ball.y) == (640, 400)
    assert abs(ball.speed_x) == 5


def test_left_wall_scores_for_player():
    ball = make_ball()
    score = Score()
    ball.x = 25
    ball.speed_x = -5
    ball.update(0.01, score)
    assert (score.player, score.cpu) == (1, 0)
    assert (ball.x, ball.y) == (640, 400)


def test_reset_picks_both_directions():
    ball = make_ball(seed=42)
    signs = set()
    for _ in range(50):
        ball.reset()
        assert abs(ball.speed_x) == 5 and abs(ball.speed_y) == 5
        signs.add(ball.speed_x > 0)
    assert signs == {True, False}


def test_reset_clears_power_up():
    ball = make_ball()
    ball.apply_size_boost()
    ball.reset()
    assert ball.radius == ball.original_radius
    assert ball.has_power_up is False
    assert ball.power_up_timer == 0.0


def test_reverse_x():
    ball = make_ball()
    ball.reverse_x()
    assert ball.speed_x == -5
    ball.reverse_x()
    assert ball.speed_x == 5


def test_speed_boost_truncates_toward_zero():
    ball = make_ball()
    ball.speed_y = -5
    ball.apply_speed_boost()
    assert ball.speed_x == 6
    assert ball.speed_y == -6
    assert ball.has_power_up is True
    assert ball.power_up_timer == 10.0


def test_size_boost_and_expiry_keep_speed():
    ball = make_ball()
    ball.apply_speed_boost()
    ball.apply_size_boost()
    boosted_speed = ball.speed_x
    assert ball.radius == 30
    assert ball.color() == YELLOW
    ball.update_power_up(10.0)
    assert ball.has_power_up is False
    assert ball.radius == ball.original_radius
    assert ball.color() == WHITE
    assert ball.speed_x == boosted_speed


def test_update_power_up_without_boost_is_noop():
    ball = make_ball()
    ball.update_power_up(5.0)
    assert ball.power_up_timer == 0.0
    assert ball.has_power_up is False


def test_draw_paints_center_white():
    surface = pygame.Surface((1280, 800))
    ball = make_ball()
    ball.draw(surface)
    assert tuple(surface.get_at((640, 400)))[:3] == WHITE


def test_draw_with_size_boost_paints_yellow():
    surface = pygame.Surface((1280, 800))
    ball = make_ball()
    ball.apply_size_boost()
    ball.draw(surface)
    assert tuple(surface.get_at((640, 400)))[:3] == YELLOW