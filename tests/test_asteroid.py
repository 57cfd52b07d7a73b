import random

import pygame
import pytest

from spaceshooter.asteroid import Asteroid, AsteroidGenerator
from spaceshooter.image import Image, clear_cache

SHEET_WIDTH = 42
SHEET_HEIGHT = 14


@pytest.fixture
def image(tmp_path):
    clear_cache()
    surface = pygame.Surface((SHEET_WIDTH, SHEET_HEIGHT))
    surface.fill((120, 120, 120))
    path = tmp_path / "rock.bmp"
    pygame.image.save(surface, str(path))
    yield Image(path)
    clear_cache()


class _LowRng:
    def randint(self, a, b):
        return a


class _HighRng:
    def randint(self, a, b):
        return b


def test_frame_size_is_one_cell_of_sheet(image):
    asteroid = Asteroid(image, 10, 20, 100, 30)
    assert asteroid.width == SHEET_WIDTH // 21
    assert asteroid.height == SHEET_HEIGHT // 7
    assert (asteroid.x, asteroid.y) == (10, 20)


def test_update_moves_down(image):
    asteroid = Asteroid(image, 0, 0, 100, 0)
    asteroid.update(0.5)
    assert asteroid.y == 50
    assert asteroid.x == 0


def test_negative_velocity_still_falls(image):
    asteroid = Asteroid(image, 0, 0, -100, 0)
    asteroid.update(0.5)
    assert asteroid.y == 50


def test_animation_advances(image):
    asteroid = Asteroid(image, 0, 0, 0, 10)
    asteroid.update(0.1)
    assert asteroid.animation.frame == 1
    assert asteroid.sprite.rect.x == asteroid.width


def test_backward_direction_wraps(image):
    asteroid = Asteroid(image, 0, 0, 0, 10)
    asteroid.set_direction(False)
    asteroid.update(0.1)
    assert asteroid.animation.frame == 142


def test_center_follows_position(image):
    asteroid = Asteroid(image)
    asteroid.set_pos(30, 40)
    assert asteroid.center_x == 30 + asteroid.width // 2
    assert asteroid.center_y == 40 + asteroid.height // 2


def test_copy_is_independent(image):
    asteroid = Asteroid(image, 5, 5, 10, 10)
    clone = asteroid.copy()
    clone.set_pos(100, 100)
    clone.set_fps(50)
    assert (asteroid.x, asteroid.y) == (5, 5)
    assert asteroid.animation.fps == 10
    assert clone.animation.fps == 50


def test_mask_generated(image):
    asteroid = Asteroid(image)
    mask = asteroid.sprite.sprite_mask()
    assert (mask.width, mask.height) == (asteroid.width, asteroid.height)
    assert all(mask.bits)


def test_generator_spawns_with_lowest_draws(image):
    generator = AsteroidGenerator(10, 600, 3, [Asteroid(image)], _LowRng())
    generator.update(0)
    (asteroid,) = generator.asteroids
    assert asteroid.x == 10
    assert asteroid.y == -40
    assert asteroid.velocity == 80
    assert asteroid.animation.fps == 20


def test_generator_does_not_spawn_on_high_roll(image):
    generator = AsteroidGenerator(10, 600, 3, [Asteroid(image)], _HighRng())
    generator.update(0)
    assert generator.asteroids == ()


def test_generator_respects_maximum(image):
    generator = AsteroidGenerator(0, 100, 2, [Asteroid(image)], random.Random(3))
    generator.difficulty = 1000
    for _ in range(5):
        generator.update(0)
    assert len(generator.asteroids) == 2


def test_generator_spawn_ranges(image):
    generator = AsteroidGenerator(0, 100, 50, [Asteroid(image)], random.Random(7))
    generator.difficulty = 1000
    for _ in range(30):
        generator.update(0)
    assert len(generator.asteroids) == 30
    for asteroid in generator.asteroids:
        assert 0 <= asteroid.x <= 100
        assert asteroid.y == -40
        assert 80 <= asteroid.velocity <= 190
        assert 20 <= asteroid.animation.fps <= 60


def test_generator_is_deterministic_for_seed(image):
    results = []
    for _ in range(2):
        generator = AsteroidGenerator(0, 500, 5, [Asteroid(image)], random.Random(11))
        generator.difficulty = 1000
        for _ in range(5):
            generator.update(0.1)
        results.append([(a.x, a.y, a.velocity) for a in generator.asteroids])
    assert results[0] == results[1]


def test_explode_asteroid_removes_it(image):
    generator = AsteroidGenerator(0, 100, 3, [Asteroid(image)], random.Random(1))
    generator.difficulty = 1000
    generator.update(0)
    generator.update(0)
    first, second = generator.asteroids
    generator.explode_asteroid(first)
    assert generator.asteroids == (second,)


def test_increase_difficulty(image):
    generator = AsteroidGenerator(0, 100, 3, [Asteroid(image)], random.Random(1))
    assert generator.difficulty == 20
    generator.increase_difficulty(5)
    assert generator.difficulty == 25


def test_generator_rejects_bad_arguments(image):
    with pytest.raises(ValueError):
        AsteroidGenerator(100, 0, 3, [Asteroid(image)])
    with pytest.raises(ValueError):
        AsteroidGenerator(0, 100, 3, [])