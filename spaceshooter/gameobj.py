"""Common base for every object that lives in the game loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class GameObj(ABC):
    """An object that can be initialised, advanced in time and drawn."""

    def __init__(self) -> None:
        self.obj_type: int = -1

    @abstractmethod
    def init(self) -> bool:
        """Prepare the object; return True when it is ready."""

    @abstractmethod
    def update(self, seconds: float) -> None:
        """Advance the object by ``seconds`` of game time."""

    @abstractmethod
    def draw(self, surface: Any) -> None:
        """Render the object onto ``surface``."""