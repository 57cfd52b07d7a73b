"""Image files loaded once and shared between every user."""

from __future__ import annotations

import os
from typing import Optional, Union

import pygame

from .rect import Rect

_loaded: dict[str, pygame.Surface] = {}


class ImageError(Exception):
    """Raised when an image file cannot be loaded."""


def clear_cache() -> None:
    """Forget every loaded image; the next use of a path loads it again."""
    _loaded.clear()


class Image:
    """A handle on an image file whose pixels are cached by path."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = os.fspath(path)
        surface = _loaded.get(self.path)
        if surface is None:
            try:
                surface = pygame.image.load(self.path)
            except (pygame.error, OSError) as exc:
                raise ImageError(f"cannot load image {self.path!r}") from exc
            _loaded[self.path] = surface
        self._surface = surface

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def _replace_surface(self, surface: pygame.Surface) -> None:
        self._surface = surface
        _loaded[self.path] = surface

    def draw(
        self,
        surface: pygame.Surface,
        x: float,
        y: float,
        area: Optional[Rect] = None,
    ) -> None:
        """Blit the image, or the part given by ``area``, with its corner at (x, y)."""
        region = None
        if area is not None:
            region = pygame.Rect(area.x, area.y, area.width, area.height)
        surface.blit(self._surface, (x, y), region)