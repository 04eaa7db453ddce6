import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from flapsim.rng import Random
from flapsim.sandbox import Sandbox


@pytest.fixture
def make_sandbox():
    created = []

    def factory(ball_count):
        Random.get().set_seed(3)
        sandbox = Sandbox(
            (640, 480),
            "sandbox",
            texture=pygame.Surface((200, 200)),
            ball_count=ball_count,
        )
        created.append(sandbox)
        return sandbox

    yield factory
    for sandbox in created:
        sandbox.close()


def test_balls_spawn_inside_window(make_sandbox):
    sandbox = make_sandbox(200)
    assert len(sandbox.balls) == 200
    for ball in sandbox.balls:
        assert 0.0 <= ball.position.x < 640
        assert 50.0 <= ball.position.y < 480
        assert tuple(ball.scale) == pytest.approx((0.05, 0.05))


def test_left_edge_bounce(make_sandbox):
    sandbox = make_sandbox(1)
    ball = sandbox.balls[0]
    ball.position = (-20.0, 300.0)
    ball.velocity = (-4.0, 0.0)
    sandbox.check_screen_bounds(ball)
    bounds = ball.global_bounds()
    assert ball.position.x - bounds.width / 2 == pytest.approx(0.0)
    assert ball.velocity.x == pytest.approx(2.0)


def test_bottom_edge_bounce(make_sandbox):
    sandbox = make_sandbox(1)
    ball = sandbox.balls[0]
    ball.position = (300.0, 500.0)
    ball.velocity = (0.0, 3.2)
    sandbox.check_screen_bounds(ball)
    bounds = ball.global_bounds()
    assert ball.position.y + bounds.height / 2 == pytest.approx(480.0)
    assert ball.velocity.y == pytest.approx(-2.0)


def test_ball_inside_window_is_untouched(make_sandbox):
    sandbox = make_sandbox(1)
    ball = sandbox.balls[0]
    ball.position = (300.0, 200.0)
    ball.velocity = (1.0, 1.0)
    sandbox.check_screen_bounds(ball)
    assert tuple(ball.position) == (300.0, 200.0)
    assert tuple(ball.velocity) == (1.0, 1.0)


def test_overlapping_balls_are_separated(make_sandbox):
    sandbox = make_sandbox(2)
    first, second = sandbox.balls
    first.position = (100.0, 100.0)
    second.position = (105.0, 100.0)
    sandbox.check_object_bounds(first)
    assert first.position.x < 100.0
    assert first.global_bounds().intersection(second.global_bounds()) is None


def test_distant_balls_do_not_interact(make_sandbox):
    sandbox = make_sandbox(2)
    first, second = sandbox.balls
    first.position = (100.0, 100.0)
    second.position = (200.0, 100.0)
    sandbox.check_object_bounds(first)
    assert tuple(first.position) == (100.0, 100.0)


def test_update_without_click_keeps_ball_count(make_sandbox):
    sandbox = make_sandbox(5)
    sandbox.update(0.016)
    assert len(sandbox.balls) == 5


def test_render_clears_to_background(make_sandbox):
    sandbox = make_sandbox(0)
    sandbox.render()
    assert sandbox.window.get_at((0, 0)) == pygame.Color(200, 255, 200)