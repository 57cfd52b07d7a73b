"""Per-pixel collision masks."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Optional, Sequence

import pygame

from .rect import Rect


@dataclass(frozen=True)
class Mask:
    """A row-major grid of booleans telling which pixels are solid."""

    width: int = 0
    height: int = 0
    bits: Optional[Sequence[bool]] = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("mask dimensions must not be negative")
        size = self.width * self.height
        if self.bits is None:
            bits = (False,) * size
        else:
            bits = tuple(bool(bit) for bit in self.bits)
        if len(bits) != size:
            raise ValueError(
                f"mask of {self.width}x{self.height} needs {size} bits, got {len(bits)}"
            )
        object.__setattr__(self, "bits", bits)

    @classmethod
    def from_surface(cls, surface: pygame.Surface) -> "Mask":
        """Build a mask in which every pixel with non-zero alpha is solid."""
        width, height = surface.get_size()
        alphas = pygame.image.tostring(surface, "RGBA")[3::4]
        return cls(width, height, tuple(alpha != 0 for alpha in alphas))

    def __getitem__(self, position: tuple[int, int]) -> bool:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel {position} outside a {self.width}x{self.height} mask")
        return self.bits[y * self.width + x]

    def _row(self, y: int) -> tuple[bool, ...]:
        start = y * self.width
        return self.bits[start:start + self.width]

    def sub_mask(self, rect: Rect) -> "Mask":
        """Return the part of the mask covered by ``rect``."""
        if (
            rect.width < 0
            or rect.height < 0
            or rect.x < 0
            or rect.y < 0
            or rect.x + rect.width > self.width
            or rect.y + rect.height > self.height
        ):
            raise ValueError(f"{rect} does not lie inside a {self.width}x{self.height} mask")
        rows = (
            self._row(y)[rect.x:rect.x + rect.width]
            for y in range(rect.y, rect.y + rect.height)
        )
        return Mask(rect.width, rect.height, tuple(chain.from_iterable(rows)))

    def overlaps(self, other: "Mask") -> bool:
        """Tell whether both masks are solid at some common top-left-aligned pixel."""
        rows = min(self.height, other.height)
        return any(
            mine and theirs
            for y in range(rows)
            for mine, theirs in zip(self._row(y), other._row(y))
        )