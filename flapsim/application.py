"""Window ownership and the main frame loop."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Sequence

import pygame


class Application(ABC):
    """Owns a drawing surface and drives the event, update and render cycle."""

    def __init__(
        self,
        size: Sequence[int],
        name: str,
        *,
        surface: pygame.Surface | None = None,
    ) -> None:
        self.running = False
        self.name = name
        self._owns_window = surface is None
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode((int(size[0]), int(size[1])))
            pygame.display.set_caption(name)
        self.window = surface

    def __enter__(self) -> Application:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def run(self) -> None:
        """Loop over frames until the application stops running."""
        self.running = True
        last = time.perf_counter()
        while self.running:
            self.poll_events()
            now = time.perf_counter()
            delta_time, last = now - last, now
            self.update(delta_time)
            self.render()
            self._present()

    def poll_events(self) -> None:
        """Drain pending events; a close request stops the loop."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            else:
                self.poll_event(event)

    @abstractmethod
    def poll_event(self, event: pygame.event.Event) -> None:
        """Handle one event other than a close request."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the simulation by delta_time seconds."""

    @abstractmethod
    def render(self) -> None:
        """Draw the current frame onto the window."""

    def close(self) -> None:
        """Stop the loop and release the window if this object created it."""
        self.running = False
        if self._owns_window:
            self._owns_window = False
            if pygame.display.get_init():
                pygame.display.quit()

    def _present(self) -> None:
        if self._owns_window:
            pygame.display.flip()

    @staticmethod
    def _load_texture(path: str) -> pygame.Surface | None:
        try:
            return pygame.image.load(path)
        except (OSError, pygame.error):
            return None