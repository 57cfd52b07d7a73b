"""Positioned lines of text drawn with a TrueType font."""

from __future__ import annotations

import copy as _copy
import enum
import os
from typing import Any, Optional, Union

import pygame

from .gameobj import GameObj


class Alignment(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class TextFont(GameObj):
    """A text label placed either by its corner or by its centre.

    Without a loaded font every metric is zero and nothing is drawn.
    """

    def __init__(
        self,
        font_path: Optional[Union[str, os.PathLike]] = None,
        size: int = 0,
    ) -> None:
        super().__init__()
        self.font_path: Optional[str] = None
        self.font: Optional[pygame.font.Font] = None
        self.font_size = size
        self.color: tuple[int, int, int, int] = (0, 0, 0, 255)
        self.text = ""
        self.pos_x = 0
        self.pos_y = 0
        self.center_x: Optional[int] = None
        self.center_y: Optional[int] = None
        self.draw_x = 0
        self.draw_y = 0
        self.alignment = Alignment.LEFT
        self.visible = True
        self.set_font(font_path)

    def copy(self) -> "TextFont":
        """Return a label with the same font, text, placement and colour."""
        return _copy.copy(self)

    def set_font(self, font_path: Optional[Union[str, os.PathLike]]) -> bool:
        """Load the font at ``font_path``; an empty path drops the font.

        Return False when the file cannot be loaded.
        """
        path = os.fspath(font_path) if font_path is not None else None
        if self.font_path is not None and path == self.font_path:
            return True
        self.font_path = None
        self.font = None
        if not path:
            return True
        self.font_path = path
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.font = pygame.font.Font(path, self.font_size)
        except (OSError, pygame.error):
            return False
        return True

    @property
    def font_height(self) -> int:
        return self.font.get_linesize() if self.font is not None else 0

    @property
    def font_ascent(self) -> int:
        return self.font.get_ascent() if self.font is not None else 0

    @property
    def font_descent(self) -> int:
        return abs(self.font.get_descent()) if self.font is not None else 0

    @property
    def text_width(self) -> int:
        if self.font is None:
            return 0
        return self.font.size(self.text)[0]

    @property
    def text_height(self) -> int:
        return self.font_height

    def set_pos(self, x: int, y: int) -> None:
        self.set_pos_x(x)
        self.set_pos_y(y)

    def set_pos_x(self, x: int) -> None:
        self.pos_x = x
        self.center_x = None

    def set_pos_y(self, y: int) -> None:
        self.pos_y = y
        self.center_y = None

    def set_center_pos(self, x: int, y: int) -> None:
        self.set_center_x(x)
        self.set_center_y(y)

    def set_center_x(self, x: int) -> None:
        self.center_x = x

    def set_center_y(self, y: int) -> None:
        self.center_y = y

    def append_text(self, text: str) -> None:
        self.text += text

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        """Work out where the text goes for the next draw."""
        if self.center_x is None:
            self.draw_x = self.pos_x
        else:
            self.draw_x = self.center_x - self.text_width // 2
        if self.center_y is None:
            self.draw_y = self.pos_y
        else:
            self.draw_y = self.center_y - self.font_height // 2

    def draw(self, surface: Any) -> None:
        if not self.visible or self.font is None or not self.text:
            return
        red, green, blue, alpha = self.color
        rendered = self.font.render(self.text, True, (red, green, blue))
        rendered.set_alpha(alpha)
        x = self.draw_x
        if self.alignment is Alignment.RIGHT:
            x -= rendered.get_width()
        elif self.alignment is Alignment.CENTER:
            x -= rendered.get_width() // 2
        surface.blit(rendered, (x, self.draw_y))