"""Projectiles fired by a ship."""

from __future__ import annotations

import copy as _copy
from typing import Any, Optional

from .gameobj import GameObj
from .image import Image
from .sprite import Sprite


class Bullet(GameObj):
    """A projectile that flies straight up at ``velocity`` pixels per second."""

    def __init__(
        self,
        image: Image,
        ship_fired: Optional[Any] = None,
        cx: int = 0,
        cy: int = 0,
        velocity: int = 500,
    ) -> None:
        super().__init__()
        self.sprite = Sprite(image)
        self.sprite.set_center_pos(cx, cy)
        self.sprite.generate_mask()
        self.ship_fired = ship_fired
        self.velocity = velocity

    def copy(self) -> "Bullet":
        """Return a bullet of the same kind with its own sprite."""
        clone = _copy.copy(self)
        clone.sprite = self.sprite.copy()
        return clone

    @property
    def x(self) -> int:
        return self.sprite.x

    @property
    def y(self) -> int:
        return self.sprite.y

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        self.sprite.move(0, -self.velocity * seconds)

    def draw(self, surface: Any) -> None:
        self.sprite.draw(surface)


class BulletControllable(Bullet):
    """A bullet that can also be steered sideways for one update at a time."""

    def __init__(
        self,
        image: Image,
        ship_fired: Optional[Any] = None,
        cx: int = 0,
        cy: int = 0,
        velocity: int = 500,
    ) -> None:
        super().__init__(image, ship_fired, cx, cy, velocity)
        self._mov_x = 0

    def move_left(self) -> None:
        self._mov_x = -1

    def move_right(self) -> None:
        self._mov_x = 1

    def update(self, seconds: float) -> None:
        super().update(seconds)
        self.sprite.move(self._mov_x * self.velocity * seconds, 0)
        self._mov_x = 0