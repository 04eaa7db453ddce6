"""Textured sprites with position, origin, scale and rotation."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

import pygame

Vec = pygame.Vector2


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def size(self) -> Vec:
        return Vec(self.width, self.height)

    @property
    def position(self) -> Vec:
        return Vec(self.left, self.top)

    def _span(self) -> tuple[float, float, float, float]:
        x0, x1 = sorted((self.left, self.left + self.width))
        y0, y1 = sorted((self.top, self.top + self.height))
        return x0, y0, x1, y1

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping area of both rectangles, or None."""
        ax0, ay0, ax1, ay1 = self._span()
        bx0, by0, bx1, by1 = other._span()
        left, top = max(ax0, bx0), max(ay0, by0)
        right, bottom = min(ax1, bx1), min(ay1, by1)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None


class Sprite:
    """A texture placed in the world through a transform."""

    def __init__(self, texture: pygame.Surface) -> None:
        self.texture = texture
        self._position = Vec(0, 0)
        self._origin = Vec(0, 0)
        self._scale = Vec(1, 1)
        self.rotation = 0.0

    @property
    def position(self) -> Vec:
        return self._position

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = Vec(value)

    @property
    def origin(self) -> Vec:
        return self._origin

    @origin.setter
    def origin(self, value: Iterable[float]) -> None:
        self._origin = Vec(value)

    @property
    def scale(self) -> Vec:
        return self._scale

    @scale.setter
    def scale(self, value: Iterable[float]) -> None:
        self._scale = Vec(value)

    @property
    def texture_size(self) -> Vec:
        return Vec(self.texture.get_size())

    def move(self, offset: Iterable[float]) -> None:
        """Shift the sprite by the given offset."""
        self._position += Vec(offset)

    def _transform_point(self, point: Iterable[float]) -> Vec:
        local = Vec(point) - self._origin
        local = Vec(local.x * self._scale.x, local.y * self._scale.y)
        angle = math.radians(self.rotation)
        cos, sin = math.cos(angle), math.sin(angle)
        return Vec(cos * local.x - sin * local.y, sin * local.x + cos * local.y) + self._position

    def global_bounds(self) -> Rect:
        """Return the world-space bounding box of the transformed texture."""
        w, h = self.texture_size
        corners = [self._transform_point(p) for p in ((0, 0), (w, 0), (0, h), (w, h))]
        xs = [c.x for c in corners]
        ys = [c.y for c in corners]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the transformed texture onto the surface."""
        w, h = self.texture_size
        sx, sy = self._scale
        size = (round(abs(w * sx)), round(abs(h * sy)))
        if size[0] == 0 or size[1] == 0:
            return
        image = pygame.transform.scale(self.texture, size)
        image = pygame.transform.flip(image, sx < 0, sy < 0)
        if self.rotation:
            image = pygame.transform.rotate(image, -self.rotation)
        centre = self._transform_point((w / 2, h / 2))
        surface.blit(image, image.get_rect(center=(round(centre.x), round(centre.y))))


class GameObject(Sprite, ABC):
    """A sprite that advances its own state every frame."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the object by delta_time seconds."""