"""Positioned, optionally clipped views onto an image."""

from __future__ import annotations

import copy as _copy
import dataclasses
from typing import Any, Optional

import pygame

from .gameobj import GameObj
from .image import Image
from .mask import Mask
from .rect import Rect


def _color_to_alpha(surface: pygame.Surface, color: Any) -> pygame.Surface:
    key = pygame.Color(color)
    target = bytes((key.r, key.g, key.b))
    data = bytearray(pygame.image.tostring(surface, "RGBA"))
    for offset in range(0, len(data), 4):
        if data[offset:offset + 3] == target:
            data[offset + 3] = 0
    return pygame.image.fromstring(bytes(data), surface.get_size(), "RGBA")


class Sprite(GameObj):
    """An image drawn at a position, clipped to ``rect``, with an optional mask."""

    def __init__(self, image: Optional[Image] = None) -> None:
        super().__init__()
        self.image = image
        self.mask: Optional[Mask] = None
        self.x = 0
        self.y = 0
        self.rect = Rect()
        self.visible = True
        if image is not None:
            self.set_rect_full_image()

    def copy(self) -> "Sprite":
        """Return an independent copy that is always visible."""
        clone = _copy.copy(self)
        clone.rect = dataclasses.replace(self.rect)
        clone.visible = True
        return clone

    def load_image(self, image: Image) -> None:
        """Use ``image`` and show all of it."""
        self.image = image
        self.set_rect_full_image()

    def set_transparency_color(self, color: Any) -> None:
        """Make every pixel of ``color`` in the image fully transparent."""
        if self.image is None:
            return
        self.image._replace_surface(_color_to_alpha(self.image.surface, color))

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def set_pos(self, x: float, y: float) -> None:
        self.x = int(x)
        self.y = int(y)

    def move(self, dx: float, dy: float) -> None:
        """Shift the sprite; fractional steps are truncated towards zero."""
        self.x += int(dx)
        self.y += int(dy)

    def set_center_pos(self, cx: int, cy: int) -> None:
        self.x = int(cx) - self.rect.width // 2
        self.y = int(cy) - self.rect.height // 2

    @property
    def center_x(self) -> int:
        return self.x + self.rect.width // 2

    @property
    def center_y(self) -> int:
        return self.y + self.rect.height // 2

    @property
    def width(self) -> int:
        return self.rect.width

    @property
    def height(self) -> int:
        return self.rect.height

    @property
    def image_width(self) -> int:
        return self.image.width if self.image is not None else 0

    @property
    def image_height(self) -> int:
        return self.image.height if self.image is not None else 0

    def set_rect_full_image(self) -> None:
        self.rect.set(0, 0, self.image_width, self.image_height)

    def generate_mask(self) -> None:
        """Build the collision mask of the whole image."""
        if self.image is None:
            return
        self.mask = Mask.from_surface(self.image.surface)

    def sprite_mask(self) -> Mask:
        """Return the mask of the part shown by ``rect``; empty without a mask."""
        if self.mask is None:
            return Mask()
        return self.mask.sub_mask(self.rect)

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        """Sprites do not change on their own."""

    def draw(self, surface: pygame.Surface) -> None:
        if self.visible and self.image is not None:
            self.image.draw(surface, self.x, self.y, self.rect)