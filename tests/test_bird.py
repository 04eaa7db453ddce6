import pytest
import pygame

from flapsim.bird import Bird


@pytest.fixture
def bird():
    return Bird(pygame.Surface((40, 20)))


def test_starts_alive_with_full_health(bird):
    assert bird.health == 100.0
    assert bird.is_alive()


def test_damage_reduces_health_and_kills(bird):
    bird.take_damage(30.0)
    assert bird.health == pytest.approx(100.0 - 30.0)
    assert bird.is_alive()
    bird.take_damage(70.0)
    assert not bird.is_alive()


def test_origin_is_texture_centre(bird):
    assert tuple(bird.origin) == (20, 10)


def test_update_applies_gravity_and_moves(bird):
    bird.position = (300, 400)
    bird.update(1.0)
    assert bird.velocity.y == pytest.approx(0.98)
    assert bird.position.y - 400 == pytest.approx(bird.velocity.y * 3000.0)
    assert bird.position.x == pytest.approx(300)
    assert bird.rotation > 0


def test_level_flight_has_no_rotation(bird):
    bird.velocity = (0.0, -0.98)
    bird.update(1.0)
    assert bird.rotation == pytest.approx(0.0)


def test_flap_makes_bird_rise(bird):
    bird.position = (0, 400)
    bird.velocity = (0.0, -0.3)
    bird.update(0.01)
    assert bird.position.y < 400
    assert bird.rotation < 0


def test_hit_bounds_reverses_and_halves_x(bird):
    bird.velocity = (4.0, 1.0)
    bird.hit_bounds()
    assert bird.velocity.x == pytest.approx(-2.0)
    assert bird.velocity.y == pytest.approx(1.0)


def test_hit_ground_stops_only_when_falling(bird):
    bird.velocity = (1.0, 0.5)
    bird.hit_ground()
    assert tuple(bird.velocity) == (0.0, 0.0)
    bird.velocity = (1.0, -0.5)
    bird.hit_ground()
    assert tuple(bird.velocity) == (1.0, -0.5)


def test_apply_force_adds_to_velocity(bird):
    bird.velocity = (1.0, 2.0)
    bird.apply_force((0.5, -1.0))
    assert tuple(bird.velocity) == (1.5, 1.0)