"""Short-lived explosion animations."""

from __future__ import annotations

import dataclasses
from typing import Any

from .animation import BaseAnimation
from .gameobj import GameObj
from .image import Image
from .rect import Rect
from .sprite import Sprite

_GRID = 8
_FRAME_COUNT = 64
_FPS = 40


class ExplosionHandler(GameObj):
    """Spawns explosions from an 8x8 sheet and drops them once they have played."""

    def __init__(self, image: Image) -> None:
        super().__init__()
        self._model = BaseAnimation(Sprite(image), _FPS)
        sprite = self._model.sprite
        self._model.add_frames(
            "mov",
            Rect(0, 0, sprite.image_width // _GRID, sprite.image_height // _GRID),
            _FRAME_COUNT,
        )
        self._model.cyclical = False
        self._model.change_key("mov")
        self._explosions: list[BaseAnimation] = []

    @property
    def explosions(self) -> tuple[BaseAnimation, ...]:
        return tuple(self._explosions)

    def new_explosion(self, cx: int, cy: int) -> BaseAnimation:
        """Start an explosion centred on (cx, cy) and return it."""
        explosion = self._model.copy()
        explosion.sprite.rect = dataclasses.replace(self._model.sprite.rect)
        explosion.sprite.set_center_pos(cx, cy)
        self._explosions.append(explosion)
        return explosion

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        running = []
        for explosion in self._explosions:
            if explosion.finished:
                continue
            explosion.update(seconds)
            running.append(explosion)
        self._explosions = running

    def draw(self, surface: Any) -> None:
        for explosion in self._explosions:
            explosion.draw(surface)