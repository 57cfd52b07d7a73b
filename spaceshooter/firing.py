"""Keeps track of the bullets a ship has in flight."""

from __future__ import annotations

from typing import Any

from .bullet import Bullet
from .gameobj import GameObj


class FireBulletHandler(GameObj):
    """Fires copies of a model bullet, up to ``total`` at a time."""

    def __init__(self, model: Bullet, total: int) -> None:
        super().__init__()
        self._model = model.copy()
        self.total = total
        self._fired: list[Bullet] = []

    @property
    def bullets(self) -> tuple[Bullet, ...]:
        """The bullets in flight, as a snapshot safe to iterate while removing."""
        return tuple(self._fired)

    @property
    def num_fired(self) -> int:
        return len(self._fired)

    @property
    def num_can_fire(self) -> int:
        return self.total - len(self._fired)

    @property
    def can_fire(self) -> bool:
        return self.total > len(self._fired)

    def new_bullet(self, cx: int, cy: int) -> Bullet:
        """Fire a new bullet centred on (cx, cy) and return it."""
        bullet = self._model.copy()
        bullet.sprite.set_center_pos(cx, cy)
        self._fired.append(bullet)
        return bullet

    def explode_bullet(self, bullet: Bullet) -> None:
        """Take ``bullet`` out of flight."""
        self._fired = [item for item in self._fired if item is not bullet]

    def increase(self, amount: int = 1) -> None:
        self.total += amount

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        for bullet in self._fired:
            bullet.update(seconds)

    def draw(self, surface: Any) -> None:
        for bullet in self._fired:
            bullet.draw(surface)