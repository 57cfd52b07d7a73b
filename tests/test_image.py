import pygame
import pytest

from spaceshooter.image import Image, ImageError, clear_cache
from spaceshooter.rect import Rect

RED = pygame.Color(255, 0, 0, 255)
BLUE = pygame.Color(0, 0, 255, 255)


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def image_path(tmp_path):
    surface = pygame.Surface((3, 2), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    surface.set_at((0, 0), RED)
    surface.set_at((1, 0), BLUE)
    path = tmp_path / "picture.png"
    pygame.image.save(surface, str(path))
    return path


def test_size_matches_file(image_path):
    image = Image(image_path)
    assert (image.width, image.height) == (3, 2)


def test_pixels_are_loaded(image_path):
    image = Image(image_path)
    assert image.surface.get_at((1, 0)) == BLUE


def test_same_path_shares_surface(image_path):
    first = Image(image_path)
    second = Image(str(image_path))
    assert first.surface is second.surface


def test_clear_cache_forces_reload(image_path):
    first = Image(image_path)
    clear_cache()
    second = Image(image_path)
    assert first.surface is not second.surface
    assert first.surface.get_size() == second.surface.get_size()


def test_missing_file_raises(tmp_path):
    with pytest.raises(ImageError):
        Image(tmp_path / "absent.png")


def test_draw_region(image_path):
    target = pygame.Surface((5, 5))
    target.fill((0, 0, 0))
    Image(image_path).draw(target, 2, 3, Rect(1, 0, 1, 1))
    assert target.get_at((2, 3)) == BLUE
    assert target.get_at((3, 3)) == pygame.Color(0, 0, 0, 255)


def test_draw_whole_image(image_path):
    target = pygame.Surface((5, 5))
    target.fill((0, 0, 0))
    Image(image_path).draw(target, 1, 1)
    assert target.get_at((1, 1)) == RED
    assert target.get_at((2, 1)) == BLUE