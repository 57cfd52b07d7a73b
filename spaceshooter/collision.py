"""Pixel-exact collision between sprites."""

from __future__ import annotations

from .rect import Rect
from .sprite import Sprite


def collide(first: Sprite, second: Sprite) -> bool:
    """Tell whether two sprites have a solid pixel in common.

    Both sprites need a generated mask when their boxes overlap;
    otherwise ``ValueError`` is raised.
    """
    x1i, y1i = first.x, first.y
    x1f, y1f = x1i + first.width, y1i + first.height
    x2i, y2i = second.x, second.y
    x2f, y2f = x2i + second.width, y2i + second.height

    if not (x1i < x2f and x1f > x2i and y1i < y2f and y1f > y2i):
        return False

    left, right = max(x1i, x2i), min(x1f, x2f)
    top, bottom = max(y1i, y2i), min(y1f, y2f)
    width, height = right - left, bottom - top

    part1 = first.sprite_mask().sub_mask(Rect(left - x1i, top - y1i, width, height))
    part2 = second.sprite_mask().sub_mask(Rect(left - x2i, top - y2i, width, height))
    return part1.overlaps(part2)