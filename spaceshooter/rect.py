"""Axis-aligned integer rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """A rectangle given by its top-left corner and its size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def set(self, x: int, y: int, width: int, height: int) -> None:
        """Replace every field at once."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height