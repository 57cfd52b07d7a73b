"""Falling asteroids and the generator that spawns them."""

from __future__ import annotations

import copy as _copy
import random
import time
from typing import Any, Optional, Sequence

from .animation import BaseAnimation
from .gameobj import GameObj
from .image import Image
from .rect import Rect
from .sprite import Sprite

_SHEET_COLUMNS = 21
_SHEET_ROWS = 7
_FRAME_COUNT = 143

_SPAWN_Y = -40
_VELOCITY_RANGE = (80, 190)
_FPS_RANGE = (20, 60)
_SPAWN_ROLL = (0, 1000)
_DEFAULT_DIFFICULTY = 20


class Asteroid(GameObj):
    """A spinning rock that falls straight down at ``velocity`` pixels per second."""

    def __init__(
        self,
        image: Image,
        x: int = 0,
        y: int = 0,
        velocity: int = 0,
        fps: float = 30.0,
    ) -> None:
        super().__init__()
        self.velocity = velocity

        sprite = Sprite(image)
        sprite.set_pos(x, y)
        sprite.generate_mask()

        self.animation = BaseAnimation(sprite, fps)
        self.animation.cyclical = True
        self.animation.add_frames(
            "mov",
            Rect(
                0,
                0,
                sprite.image_width // _SHEET_COLUMNS,
                sprite.image_height // _SHEET_ROWS,
            ),
            _FRAME_COUNT,
        )
        self.animation.change_key("mov")
        self.animation.play()

    def copy(self) -> "Asteroid":
        """Return an asteroid with its own animation and sprite."""
        clone = _copy.copy(self)
        clone.animation = self.animation.copy()
        return clone

    @property
    def sprite(self) -> Sprite:
        return self.animation.sprite

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
    def width(self) -> int:
        return self.sprite.width

    @property
    def height(self) -> int:
        return self.sprite.height

    def set_fps(self, fps: float) -> None:
        self.animation.fps = fps

    def set_direction(self, forward: bool) -> None:
        self.animation.set_direction(forward)

    def set_pos(self, x: int, y: int) -> None:
        self.sprite.set_pos(x, y)

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        """Fall downwards whatever the sign of the velocity, then animate."""
        self.sprite.move(0, abs(self.velocity * seconds))
        self.animation.update(seconds)

    def draw(self, surface: Any) -> None:
        self.animation.draw(surface)


class AsteroidGenerator(GameObj):
    """Randomly spawns copies of model asteroids along the top edge."""

    def __init__(
        self,
        pos_min_x: int,
        pos_max_x: int,
        max_asteroids: int,
        models: Sequence[Asteroid],
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__()
        if pos_min_x > pos_max_x:
            raise ValueError("pos_min_x must not exceed pos_max_x")
        if not models:
            raise ValueError("at least one model asteroid is needed")
        self.pos_min_x = pos_min_x
        self.pos_max_x = pos_max_x
        self.max_asteroids = max_asteroids
        self.difficulty = _DEFAULT_DIFFICULTY
        self._models = [model.copy() for model in models]
        self._rng = rng if rng is not None else random.Random(time.time_ns())
        self._asteroids: list[Asteroid] = []

    @property
    def asteroids(self) -> tuple[Asteroid, ...]:
        """The asteroids in play, as a snapshot safe to iterate while removing."""
        return tuple(self._asteroids)

    def explode_asteroid(self, asteroid: Asteroid) -> None:
        """Take ``asteroid`` out of play."""
        self._asteroids = [item for item in self._asteroids if item is not asteroid]

    def increase_difficulty(self, amount: int) -> None:
        self.difficulty += amount

    def _spawn(self) -> Asteroid:
        rng = self._rng
        asteroid = self._models[rng.randint(0, len(self._models) - 1)].copy()
        asteroid.set_pos(rng.randint(self.pos_min_x, self.pos_max_x), _SPAWN_Y)
        asteroid.velocity = rng.randint(*_VELOCITY_RANGE)
        asteroid.set_fps(rng.randint(*_FPS_RANGE))
        asteroid.set_direction(bool(rng.randint(0, 1)))
        return asteroid

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        roll = self._rng.randint(*_SPAWN_ROLL)
        if roll <= self.difficulty and self.max_asteroids > len(self._asteroids):
            self._asteroids.append(self._spawn())
        for asteroid in self._asteroids:
            asteroid.update(seconds)

    def draw(self, surface: Any) -> None:
        for asteroid in self._asteroids:
            asteroid.draw(surface)