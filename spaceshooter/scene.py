"""A container that drives a list of game objects."""

from __future__ import annotations

from typing import Any, Iterator

from .gameobj import GameObj


class Scene(GameObj):
    """Updates and draws its objects in the order they were added."""

    def __init__(self) -> None:
        super().__init__()
        self._objects: list[GameObj] = []

    def __iter__(self) -> Iterator[GameObj]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, obj: object) -> bool:
        return obj in self._objects

    def add(self, obj: GameObj) -> None:
        self._objects.append(obj)

    def remove(self, obj: GameObj) -> bool:
        """Remove every occurrence of ``obj``; tell whether any was present."""
        before = len(self._objects)
        self._objects = [item for item in self._objects if item is not obj]
        return len(self._objects) < before

    def init(self) -> bool:
        return True

    def update(self, seconds: float) -> None:
        for obj in self._objects:
            obj.update(seconds)

    def draw(self, surface: Any) -> None:
        for obj in self._objects:
            obj.draw(surface)