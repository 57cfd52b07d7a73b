"""Frame-based sprite animations keyed by name."""

from __future__ import annotations

import copy as _copy
import dataclasses
import math
from typing import Any, Optional

from .gameobj import GameObj
from .rect import Rect
from .sprite import Sprite


class BaseAnimation(GameObj):
    """Cycles a sprite's visible rectangle through named lists of frames."""

    def __init__(
        self,
        sprite: Optional[Sprite] = None,
        fps: float = 30.0,
        animating: bool = False,
    ) -> None:
        super().__init__()
        self.sprite = sprite.copy() if sprite is not None else Sprite()
        self.frames: dict[str, list[Rect]] = {}
        self.key = ""
        self.last_key = ""
        self.fps = fps
        self.cyclical = True
        self.animating = animating
        self._direction = 1
        self._elapsed = 0.0
        self._ended = False
        self._frame = 0
        self._last_frame = 0

    def copy(self) -> "BaseAnimation":
        """Return an animation with its own sprite and frame lists."""
        clone = _copy.copy(self)
        clone.sprite = self.sprite.copy()
        clone.frames = {key: list(rects) for key, rects in self.frames.items()}
        return clone

    @property
    def frame(self) -> int:
        """Index of the frame currently shown."""
        return self._frame

    @property
    def finished(self) -> bool:
        """True once the animation has run through all its frames."""
        return self._ended

    def _show(self, rect: Rect) -> None:
        self.sprite.rect = dataclasses.replace(rect)

    def _first_frame(self, key: str) -> Rect:
        rects = self.frames.get(key)
        if not rects:
            raise KeyError(key)
        return rects[0]

    def set_direction(self, forward: bool) -> None:
        self._direction = 1 if forward else -1

    def set_key(self, key: str) -> None:
        """Switch to ``key`` without restarting the animation."""
        first = self._first_frame(key)
        self.key = key
        self._show(first)

    def change_key(self, key: str) -> None:
        """Switch to ``key`` and restart the animation from its first frame."""
        first = self._first_frame(key)
        self.last_key = self.key
        self.key = key
        self._show(first)
        self.reanimate()

    def add_frame(self, key: str, rect: Rect) -> None:
        self.frames.setdefault(key, []).append(dataclasses.replace(rect))

    def add_frames(self, key: str, rect: Rect, count: int) -> None:
        """Add ``count`` frames of ``rect``'s size, laid out row by row from ``rect``."""
        if rect.width <= 0 or rect.height <= 0:
            raise ValueError(f"frame {rect} has no area")
        per_row = self.sprite.image_width // rect.width
        if per_row == 0:
            raise ValueError(f"frame {rect} is wider than the image")
        rects = self.frames.setdefault(key, [])
        for index in range(count):
            row, column = divmod(index, per_row)
            rects.append(
                Rect(
                    rect.x + rect.width * column,
                    rect.y + rect.height * row,
                    rect.width,
                    rect.height,
                )
            )

    def add_strip(self, key: str, columns: int, rows: int, row: int) -> None:
        """Split the image into a grid and add every cell of one row."""
        if columns <= 0 or rows <= 0:
            raise ValueError("grid needs at least one column and one row")
        cell_width = self.sprite.image_width // columns
        cell_height = self.sprite.image_height // rows
        self.frames.setdefault(key, []).extend(
            Rect(cell_width * column, cell_height * row, cell_width, cell_height)
            for column in range(columns)
        )

    def reanimate(self) -> None:
        """Restart from the first frame and start playing."""
        self._elapsed = 0.0
        self._ended = False
        self._frame = 0
        self._last_frame = 0
        self.animating = True

    def play(self) -> None:
        self.animating = True

    def stop(self) -> None:
        self.animating = False

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        rects = self.frames.get(self.key)
        if not rects:
            return
        if self._ended:
            if not self.cyclical:
                return
            self._ended = False
        if not self.animating:
            return

        interval = 1.0 / self.fps if self.fps > 0 else math.inf
        self._elapsed += seconds
        if self._elapsed >= interval:
            self._elapsed -= interval
            self._last_frame = self._frame
            self._frame = (self._frame + self._direction) % len(rects)

        if self._frame == 0 and self._last_frame != self._frame:
            self._ended = True
            if not self.cyclical:
                self._frame = self._last_frame
        self._show(rects[self._frame])

    def draw(self, surface: Any) -> None:
        self.sprite.draw(surface)