"""The side-scrolling bird game."""

from __future__ import annotations

import argparse
import math
import time
from typing import Callable, Sequence

import pygame

from flapsim.application import Application
from flapsim.bird import Bird
from flapsim.pipe import Pipe
from flapsim.rng import Random
from flapsim.sprite import Sprite

BIRD_TEXTURE_PATH = "resources/textures/ptitsa.png"
BACKGROUND_TEXTURE_PATH = "resources/textures/background.png"
FONT_PATH = "resources/fonts/OpenSans-Regular.ttf"

CLEAR_COLOUR = (200, 255, 200)
TEXT_COLOUR = (255, 255, 255)
RED = (255, 0, 0)

BIRD_SCALE = (-0.06, 0.06)
PIPE_COUNT = 8
FLAP_COOLDOWN = 0.05
INPUT_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.KEYDOWN)


class FlappyBird(Application):
    """A bird flaps through scrolling pipes, losing health on every hit."""

    def __init__(
        self,
        size: Sequence[int] = (1280, 720),
        name: str = "FlappyBird",
        *,
        surface: pygame.Surface | None = None,
        bird_texture: pygame.Surface | None = None,
        background_texture: pygame.Surface | None = None,
        font_path: str | None = FONT_PATH,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(size, name, surface=surface)
        self._clock = clock
        self._flap_start = clock()
        self.game_started = False
        self.game_over = False
        self.score = 0

        if bird_texture is None:
            bird_texture = self._load_texture(BIRD_TEXTURE_PATH)
        if background_texture is None:
            background_texture = self._load_texture(BACKGROUND_TEXTURE_PATH)
        if bird_texture is None or background_texture is None:
            print("Failed to load texture")
        self.bird_texture = bird_texture or pygame.Surface((0, 0), pygame.SRCALPHA)
        self.background_texture = background_texture or pygame.Surface((0, 0), pygame.SRCALPHA)

        pygame.font.init()
        self._font_path = font_path
        if font_path is not None:
            try:
                pygame.font.Font(font_path, 20)
            except (OSError, pygame.error):
                print("Failed to load font")
                self._font_path = None

        self.background = [Sprite(self.background_texture), Sprite(self.background_texture)]
        self.bird = Bird(self.bird_texture)
        self.pipes: list[Pipe] = []

        self.setup_game()
        self.setup_ui()

    def _flap_elapsed(self) -> float:
        return self._clock() - self._flap_start

    def _restart_flap_timer(self) -> None:
        self._flap_start = self._clock()

    def setup_game(self) -> None:
        """Reset the bird, the pipes, the score and the scrolling background."""
        first, second = self.background
        first.position = (0.0, 0.0)
        first.scale = (0.8, 0.8)
        second.position = (first.global_bounds().width, 0.0)
        second.scale = (0.8, 0.8)

        Pipe.set_speed(500.0)
        self.score = 0
        self.pipes = []

        self.bird = Bird(self.bird_texture)
        self.bird.position = (300.0, 400.0)
        self.bird.scale = BIRD_SCALE

        rng = Random.get()
        random_y = 0.0
        for i in range(PIPE_COUNT):
            pipe = Pipe(self.bird_texture)
            bottom = i % 2 == 0
            if bottom:
                random_y = rng.range_float(-100.0, 100.0)
            pipe.position = (1300.0 + (i // 2) * 500.0, (700.0 if bottom else 0.0) + random_y)
            if bottom:
                pipe.scored = True
            pipe.scale = (0.3, 0.6)
            self.pipes.append(pipe)

    def setup_ui(self) -> None:
        """Prepare fonts and the placement of the heads-up display."""
        self._hud_font = pygame.font.Font(self._font_path, 20)
        self._title_font = pygame.font.Font(self._font_path, 50)

        self.health_text_position = (10.0, 10.0)
        self.health_bar_position = (10.0, 40.0)
        self.health_bar_size = (100.0, 20.0)
        self.score_text_position = (10.0, 70.0)
        self.health_label = ""
        self.score_label = ""

        self.game_over_label = "Game Over!"
        text_width, text_height = self._title_font.size(self.game_over_label)
        window_width, window_height = self.window.get_size()
        self.game_over_position = (
            window_width / 2.0 - text_width / 2.0,
            window_height / 2.0 - text_height / 2.0,
        )

    def poll_event(self, event: pygame.event.Event) -> None:
        if event.type not in INPUT_EVENTS:
            return
        if self.game_over:
            self.setup_game()
            self.game_over = False
            self.game_started = False
            self._restart_flap_timer()
        if self._flap_elapsed() > FLAP_COOLDOWN:
            self.game_started = True
            self.bird.velocity = (0.0, -0.3)
            self._restart_flap_timer()

    def update(self, delta_time: float) -> None:
        self.process_collision(delta_time)

        if self.game_started:
            self.bird.update(delta_time)
            self.game_over = not self.bird.is_alive()

            if not self.game_over:
                for pipe in self.pipes:
                    pipe.update(delta_time)
                for layer in self.background:
                    layer.move(((-Pipe.speed / 10.0) * delta_time, 0.0))
                    width = layer.global_bounds().width
                    if layer.position.x + width < 0:
                        layer.position = (width, 0.0)

        pulse = abs(math.sin(self._flap_elapsed() * 5.0)) / 50.0
        self.bird.scale = (BIRD_SCALE[0] - pulse, BIRD_SCALE[1] - pulse)

    def render(self) -> None:
        self.window.fill(CLEAR_COLOUR)

        for layer in self.background:
            layer.draw(self.window)
        self.bird.draw(self.window)
        for pipe in self.pipes:
            pipe.draw(self.window)

        health = self.bird.health if self.bird.is_alive() else 0.0
        self.health_label = f"Health: {int(health)}"
        self.health_bar_size = (health, 20.0)
        self.window.blit(
            self._hud_font.render(self.health_label, True, TEXT_COLOUR),
            self.health_text_position,
        )
        bar = pygame.Rect(
            round(self.health_bar_position[0]),
            round(self.health_bar_position[1]),
            round(health),
            round(self.health_bar_size[1]),
        )
        pygame.draw.rect(self.window, RED, bar)

        self.score_label = f"Score: {self.score}"
        self.window.blit(
            self._hud_font.render(self.score_label, True, TEXT_COLOUR),
            self.score_text_position,
        )

        if self.game_over:
            self.window.blit(
                self._title_font.render(self.game_over_label, True, RED),
                self.game_over_position,
            )

    def process_collision(self, delta_time: float) -> None:
        self.check_screen_bounds(delta_time)
        self.check_object_bounds(delta_time)

    def check_screen_bounds(self, delta_time: float) -> None:
        """Keep the bird on screen and recycle pipes that left on the left."""
        bounds = self.bird.global_bounds()
        position = self.bird.position
        top = position.y - bounds.height / 2.0
        bottom = position.y + bounds.height / 2.0
        left = position.x - bounds.width / 2.0
        height = self.window.get_height()

        if top < 0.0 or bottom > height or left < 0.0:
            if top < 0.0:
                self.bird.move((0.0, -top))
            elif bottom > height:
                self.bird.move((0.0, height - bottom))
            elif left < 0.0:
                self.bird.move((-left, 0.0))
            self.bird.hit_ground()
            self.bird.take_damage(100.0 * delta_time)

        random_y = Random.get().range_float(-100.0, 100.0)
        for pipe in self.pipes:
            half_width = pipe.global_bounds().width / 2.0
            if pipe.position.x + half_width < 0.0:
                if pipe.position.y > 500.0:
                    y = 700.0 + random_y
                else:
                    y = random_y
                    pipe.scored = False
                Pipe.increase_speed(10.0)
                pipe.position = (1800.0 + half_width, y)

    def check_object_bounds(self, delta_time: float) -> None:
        """Push the bird out of pipes it touches and count passed pipes."""
        for pipe in self.pipes:
            overlap = self.bird.global_bounds().intersection(pipe.global_bounds())
            if overlap is not None:
                if overlap.width < overlap.height:
                    self.bird.apply_force((0.0, 0.0))
                    self.bird.move((-overlap.width, 0.0))
                else:
                    direction = -1.0 if pipe.position.y > self.bird.position.y else 1.0
                    self.bird.apply_force((0.0, 0.01 * direction))
                    self.bird.move((0.0, overlap.height * direction))
                self.bird.take_damage(100.0 * delta_time)
            elif pipe.position.x < self.bird.position.x and not pipe.scored:
                pipe.scored = True
                self.score += 1


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="flapsim", description="Flap a bird through scrolling pipes."
    )
    parser.parse_args(argv)
    with FlappyBird((1280, 720), "FlappyBird") as game:
        game.run()
    return 0