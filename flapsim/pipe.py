"""Obstacles scrolling towards the bird."""

from __future__ import annotations

from typing import ClassVar

import pygame

from flapsim.sprite import GameObject


class Pipe(GameObject):
    """An obstacle that moves left at a speed shared by all pipes."""

    speed: ClassVar[float] = 300.0

    def __init__(self, texture: pygame.Surface) -> None:
        super().__init__(texture)
        self.origin = self.texture_size / 2
        self.scored = False

    def update(self, delta_time: float) -> None:
        self.move(pygame.Vector2(-Pipe.speed, 0.0) * delta_time)

    @classmethod
    def set_speed(cls, speed: float) -> None:
        Pipe.speed = speed

    @classmethod
    def increase_speed(cls, amount: float) -> None:
        Pipe.speed += amount