import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from flapsim.application import Application


class Recorder(Application):
    def __init__(self, frames=3, **kwargs):
        super().__init__((320, 240), "recorder", **kwargs)
        self.limit = frames
        self.updates = []
        self.renders = 0
        self.events = []

    def poll_event(self, event):
        self.events.append(event.type)

    def update(self, delta_time):
        self.updates.append(delta_time)
        if len(self.updates) >= self.limit:
            self.running = False

    def render(self):
        self.renders += 1


@pytest.fixture
def app():
    application = Recorder()
    pygame.event.clear()
    yield application
    application.close()


def test_application_is_abstract():
    with pytest.raises(TypeError):
        Application((10, 10), "abstract", surface=pygame.Surface((10, 10)))


def test_run_executes_frames_until_stopped(app):
    Application.run(app)
    assert len(app.updates) == 3
    assert app.renders == 3
    assert all(dt >= 0.0 for dt in app.updates)
    assert app.running is False


def test_quit_event_stops_running(app):
    app.running = True
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    Application.poll_events(app)
    assert app.running is False
    assert pygame.QUIT not in app.events


def test_other_events_are_forwarded(app):
    app.running = True
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    Application.poll_events(app)
    assert pygame.KEYDOWN in app.events
    assert app.running is True


def test_window_has_requested_size(app):
    app.running = True
    Application.poll_events(app)
    assert app.window.get_size() == (320, 240)
    assert app.running is True


def test_injected_surface_is_used():
    surface = pygame.Surface((50, 40))
    application = Recorder(surface=surface)
    assert application.window is surface
    Application.close(application)
    assert application.running is False


def test_context_manager_closes_window():
    with Recorder() as application:
        application.running = True
        pygame.event.clear()
        Application.poll_events(application)
        assert application.running is True
        assert pygame.display.get_init()
    assert application.running is False
    assert not pygame.display.get_init()