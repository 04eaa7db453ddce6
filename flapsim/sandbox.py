"""A physics playground of bouncing balls."""

from __future__ import annotations

from typing import Sequence

import pygame

from flapsim.application import Application
from flapsim.ball import Ball
from flapsim.rng import Random

TEXTURE_PATH = "../resources/textures/ptitsa.png"
CLEAR_COLOUR = (200, 255, 200)
BALL_SCALE = (0.05, 0.05)
NEIGHBOUR_DISTANCE = 50.0


class Sandbox(Application):
    """Balls fall, bounce off the window edges and push each other apart."""

    def __init__(
        self,
        size: Sequence[int] = (1280, 720),
        name: str = "Sandbox",
        *,
        surface: pygame.Surface | None = None,
        texture: pygame.Surface | None = None,
        ball_count: int = 200,
    ) -> None:
        super().__init__(size, name, surface=surface)
        if texture is None:
            texture = self._load_texture(TEXTURE_PATH)
            if texture is None:
                print("Failed to load texture")
                texture = pygame.Surface((0, 0), pygame.SRCALPHA)
        self.texture = texture

        rng = Random.get()
        width, height = self.window.get_size()
        self.balls: list[Ball] = []
        for _ in range(ball_count):
            ball = Ball(self.texture)
            ball.position = (rng.range_float(0.0, width), rng.range_float(50.0, height))
            ball.scale = BALL_SCALE
            self.balls.append(ball)

    def poll_event(self, event: pygame.event.Event) -> None:
        """Events other than closing the window are not used."""

    def update(self, delta_time: float) -> None:
        self.process_input()
        for ball in self.balls:
            ball.update(delta_time)
            self.process_collision(ball)

    def render(self) -> None:
        self.window.fill(CLEAR_COLOUR)
        for ball in self.balls:
            ball.draw(self.window)

    def process_input(self) -> None:
        """Spawn a ball under the cursor while the left button is held."""
        if pygame.mouse.get_pressed()[0]:
            ball = Ball(self.texture)
            ball.position = pygame.mouse.get_pos()
            ball.scale = BALL_SCALE
            self.balls.append(ball)

    def process_collision(self, ball: Ball) -> None:
        self.check_screen_bounds(ball)
        self.check_object_bounds(ball)

    def check_screen_bounds(self, ball: Ball) -> None:
        """Bounce the ball off the window edges and put it back inside."""
        bounds = ball.global_bounds()
        x, y = ball.position
        width, height = self.window.get_size()
        left, right = x - bounds.width / 2.0, x + bounds.width / 2.0
        top, bottom = y - bounds.height / 2.0, y + bounds.height / 2.0

        if left < 0.0 or right > width:
            ball.hit_x_bounds()
            if left < 0.0:
                ball.move((-left, 0.0))
            elif right > width:
                ball.move((width - right, 0.0))

        if top < 0.0 or bottom > height:
            ball.hit_y_bounds()
            if top < 0.0:
                ball.move((0.0, -top))
            elif bottom > height:
                ball.move((0.0, height - bottom))

    def check_object_bounds(self, ball: Ball) -> None:
        """Push the ball out of any nearby ball it overlaps."""
        for other in self.balls:
            if other is ball:
                continue
            if (ball.position - other.position).length() >= NEIGHBOUR_DISTANCE:
                continue
            overlap = ball.global_bounds().intersection(other.global_bounds())
            if overlap is None:
                continue
            if overlap.width < overlap.height:
                ball.hit_x_bounds()
                ball.move((-overlap.width, 0.0))
            else:
                ball.hit_y_bounds()
                ball.move((0.0, -overlap.height))