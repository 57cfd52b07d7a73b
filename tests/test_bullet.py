import pygame
import pytest

from spaceshooter.bullet import Bullet, BulletControllable
from spaceshooter.image import Image

RED = (255, 0, 0, 255)


@pytest.fixture
def image(tmp_path):
    surface = pygame.Surface((10, 20), pygame.SRCALPHA)
    surface.fill(RED)
    path = tmp_path / "bullet.png"
    pygame.image.save(surface, str(path))
    return Image(path)


def test_bullet_is_centred_on_given_point(image):
    bullet = Bullet(image, None, 50, 100)
    assert bullet.sprite.center_x == 50
    assert bullet.sprite.center_y == 100
    assert bullet.sprite.width == image.width


def test_default_velocity_and_owner(image):
    bullet = Bullet(image)
    assert bullet.velocity == 500
    assert bullet.ship_fired is None


def test_bullet_flies_up(image):
    bullet = Bullet(image, None, 50, 100)
    x, y = bullet.x, bullet.y
    bullet.update(0.5)
    assert bullet.y == y - int(bullet.velocity * 0.5)
    assert bullet.x == x


def test_bullet_has_mask_of_its_image(image):
    mask = Bullet(image).sprite.sprite_mask()
    assert mask.width == image.width
    assert mask.height == image.height
    assert all(mask.bits)


def test_copy_is_independent(image):
    owner = object()
    bullet = Bullet(image, owner, 50, 100)
    clone = bullet.copy()
    clone.update(0.5)
    assert bullet.sprite.center_y == 100
    assert clone.y < bullet.y
    assert clone.ship_fired is owner


def test_controllable_moves_sideways_once(image):
    bullet = BulletControllable(image, None, 50, 100, velocity=100)
    x, y = bullet.x, bullet.y
    bullet.move_left()
    bullet.update(0.5)
    assert bullet.x == x - 50
    assert bullet.y == y - 50
    bullet.update(0.5)
    assert bullet.x == x - 50
    bullet.move_right()
    bullet.update(0.5)
    assert bullet.x == x


def test_controllable_copy_keeps_kind(image):
    clone = BulletControllable(image, None, 5, 5).copy()
    x = clone.x
    clone.move_right()
    clone.update(0.1)
    assert isinstance(clone, BulletControllable)
    assert clone.x > x


def test_draw_blits_sprite(image):
    bullet = Bullet(image, None, 50, 100)
    target = pygame.Surface((200, 200))
    bullet.draw(target)
    assert target.get_at((50, 100)) == RED
    assert target.get_at((0, 0)) == (0, 0, 0, 255)