"""Bouncing balls of the physics sandbox."""

from __future__ import annotations

from typing import Iterable

import pygame

from flapsim.rng import Random
from flapsim.sprite import GameObject

GRAVITY = 0.98


class Ball(GameObject):
    """A sprite that falls under gravity and bounces off bounds."""

    def __init__(self, texture: pygame.Surface) -> None:
        super().__init__(texture)
        rng = Random.get()
        self.speed = 1.0
        self.circle_radius = rng.range_float(5.0, 100.0)
        self.circle_colour = (255, 0, 0, 100)
        self.circle_position = pygame.Vector2(0, 0)
        self._velocity = pygame.Vector2(rng.range_float(-100.0, 100.0), 0.0)
        self.origin = self.texture_size / 2

    @property
    def velocity(self) -> pygame.Vector2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Iterable[float]) -> None:
        self._velocity = pygame.Vector2(value)

    def update(self, delta_time: float) -> None:
        self._velocity += pygame.Vector2(0.0, GRAVITY) * delta_time * self.speed
        self.move(self._velocity)
        self.circle_position = pygame.Vector2(self.position)

    def hit_x_bounds(self) -> None:
        self._velocity.x = -self._velocity.x / 2.0

    def hit_y_bounds(self) -> None:
        self._velocity.y = -self._velocity.y / 1.6

    def apply_force(self, force: Iterable[float]) -> None:
        self._velocity += pygame.Vector2(force)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the sprite; the debug circle is kept but not drawn."""
        super().draw(surface)