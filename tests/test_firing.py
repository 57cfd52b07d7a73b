import pygame
import pytest

from spaceshooter.bullet import Bullet
from spaceshooter.firing import FireBulletHandler
from spaceshooter.image import Image

RED = (255, 0, 0, 255)


@pytest.fixture
def model(tmp_path):
    surface = pygame.Surface((10, 20), pygame.SRCALPHA)
    surface.fill(RED)
    path = tmp_path / "bullet.png"
    pygame.image.save(surface, str(path))
    return Bullet(Image(path), None, 0, 0, 600)


def test_initial_counts(model):
    handler = FireBulletHandler(model, 2)
    assert handler.num_fired == 0
    assert handler.num_can_fire == 2
    assert handler.can_fire
    assert handler.bullets == ()


def test_new_bullet_is_centred_copy_of_model(model):
    handler = FireBulletHandler(model, 2)
    bullet = handler.new_bullet(100, 200)
    assert bullet.sprite.center_x == 100
    assert bullet.sprite.center_y == 200
    assert bullet.velocity == model.velocity
    assert model.sprite.center_x == 0
    assert handler.bullets == (bullet,)


def test_limit_on_bullets_in_flight(model):
    handler = FireBulletHandler(model, 2)
    handler.new_bullet(10, 10)
    handler.new_bullet(20, 20)
    assert not handler.can_fire
    assert handler.num_can_fire == 0
    assert handler.num_fired == 2


def test_explode_bullet_frees_a_slot(model):
    handler = FireBulletHandler(model, 2)
    first = handler.new_bullet(10, 10)
    second = handler.new_bullet(20, 20)
    handler.explode_bullet(first)
    assert handler.bullets == (second,)
    assert handler.can_fire


def test_removing_while_iterating_snapshot(model):
    handler = FireBulletHandler(model, 3)
    for cx in (10, 20, 30):
        handler.new_bullet(cx, 50)
    for bullet in handler.bullets:
        handler.explode_bullet(bullet)
    assert handler.num_fired == 0


def test_increase(model):
    handler = FireBulletHandler(model, 1)
    handler.increase()
    assert handler.total == 2
    handler.increase(3)
    assert handler.total == 5
    assert handler.num_can_fire == 5


def test_update_moves_every_bullet_independently(model):
    handler = FireBulletHandler(model, 2)
    first = handler.new_bullet(10, 300)
    second = handler.new_bullet(50, 300)
    handler.update(0.5)
    expected = 300 - int(model.velocity * 0.5)
    assert first.sprite.center_y == expected
    assert second.sprite.center_y == expected
    assert first.sprite is not second.sprite and first.x != second.x


def test_later_changes_to_model_do_not_leak(model):
    handler = FireBulletHandler(model, 1)
    model.velocity = 1
    bullet = handler.new_bullet(10, 10)
    assert bullet.velocity == 600


def test_draw_draws_all_bullets(model):
    handler = FireBulletHandler(model, 2)
    handler.new_bullet(20, 20)
    handler.new_bullet(80, 80)
    target = pygame.Surface((100, 100))
    handler.draw(target)
    assert target.get_at((20, 20)) == RED
    assert target.get_at((80, 80)) == RED
    assert target.get_at((50, 50)) == (0, 0, 0, 255)