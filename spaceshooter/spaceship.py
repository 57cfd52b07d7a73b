"""The player's ship."""

from __future__ import annotations

import enum
from typing import Any

from .animation import BaseAnimation
from .image import Image
from .rect import Rect
from .sprite import Sprite

_FRAME_WIDTH = 95
_FRAME_HEIGHT = 101
_FRAMES_PER_KEY = 4
_KEY_ROWS = {
    "center": 0,
    "left": 202,
    "left-more": 303,
    "right": 404,
    "right-more": 505,
}


class ShipState(enum.Enum):
    ALIVE = 0
    EXPLODED = 1


class SpaceShip(BaseAnimation.__mro__[1]):
    """An animated ship that moves on request and can explode and be reborn."""

    def __init__(self, image: Image, life: int = 0) -> None:
        super().__init__()
        self.life = life
        self.state = ShipState.ALIVE
        self.velocity = 180
        self._mov_x = 0
        self._mov_y = 0

        self._animation = BaseAnimation(Sprite(image), 9, True)
        self._animation.sprite.generate_mask()
        for key, row in _KEY_ROWS.items():
            self._animation.add_frames(
                key, Rect(0, row, _FRAME_WIDTH, _FRAME_HEIGHT), _FRAMES_PER_KEY
            )
        self._animation.change_key("center")
        self._animation.sprite.set_center_pos(400, 400)
        self._animation.cyclical = True

    @property
    def sprite(self) -> Sprite:
        return self._animation.sprite

    @property
    def x(self) -> int:
        return self.sprite.x

    @property
    def y(self) -> int:
        return self.sprite.y

    @property
    def center_x(self) -> int:
        return self.sprite.center_x

    @property
    def center_y(self) -> int:
        return self.sprite.center_y

    @property
    def is_exploded(self) -> bool:
        return self.state is ShipState.EXPLODED

    @property
    def has_life(self) -> bool:
        return self.life > 0

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        if self.state is not ShipState.ALIVE:
            return
        step = self.velocity * seconds
        self.sprite.move(step * self._mov_x, step * self._mov_y)
        self._mov_x = self._mov_y = 0
        self._animation.update(seconds)

    def draw(self, surface: Any) -> None:
        if self.state is ShipState.ALIVE:
            self._animation.draw(surface)

    def move_up(self) -> None:
        if self.state is ShipState.ALIVE:
            self._mov_y = -1

    def move_down(self) -> None:
        if self.state is ShipState.ALIVE:
            self._mov_y = 1

    def move_left(self) -> None:
        if self.state is ShipState.ALIVE:
            self._animation.set_key("left-more")
            self._mov_x = -1

    def move_right(self) -> None:
        if self.state is ShipState.ALIVE:
            self._animation.set_key("right-more")
            self._mov_x = 1

    def move_stop(self) -> None:
        if self.state is ShipState.ALIVE:
            self._animation.set_key("center")
            self._mov_x = self._mov_y = 0

    def increase_life(self) -> None:
        self.life += 1

    def decrease_life(self) -> None:
        """Lose one life; the count never goes below zero."""
        self.life = max(0, self.life - 1)

    def reborn(self) -> None:
        """Bring the ship back, visible and facing forward."""
        self.sprite.show()
        self._animation.set_key("center")
        self._animation.reanimate()
        self.state = ShipState.ALIVE

    def explode(self) -> None:
        """Hide the ship and take one life."""
        self.sprite.hide()
        self.decrease_life()
        self.state = ShipState.EXPLODED