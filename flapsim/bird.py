"""The player-controlled bird."""

from __future__ import annotations

import math
from typing import Iterable

import pygame

from flapsim.sprite import GameObject

GRAVITY = 0.98
VELOCITY_SCALE = 3000.0


class Bird(GameObject):
    """A bird that falls under gravity and loses health on collisions."""

    def __init__(self, texture: pygame.Surface) -> None:
        super().__init__(texture)
        self.origin = self.texture_size / 2
        self.health = 100.0
        self._velocity = pygame.Vector2(0, 0)

    @property
    def velocity(self) -> pygame.Vector2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Iterable[float]) -> None:
        self._velocity = pygame.Vector2(value)

    def update(self, delta_time: float) -> None:
        self._velocity += pygame.Vector2(0.0, GRAVITY) * delta_time
        self.move(self._velocity * VELOCITY_SCALE * delta_time)
        self.rotation = math.degrees(math.atan2(self._velocity.y, 1.0))

    def hit_bounds(self) -> None:
        """Bounce back horizontally at half the speed."""
        self._velocity.x = -self._velocity.x / 2.0

    def hit_ground(self) -> None:
        """Stop dead if currently falling."""
        if self._velocity.y > 0.0:
            self._velocity = pygame.Vector2(0, 0)

    def apply_force(self, force: Iterable[float]) -> None:
        self._velocity += pygame.Vector2(force)

    def take_damage(self, damage: float) -> None:
        self.health -= damage

    def is_alive(self) -> bool:
        return self.health > 0.0