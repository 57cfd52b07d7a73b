"""Edge-aware polling of the keyboard, the mouse and joysticks.

Each device keeps the state it saw on the last two updates, so callers can
ask both whether something is held and whether it changed since the last
frame.  States may be read from pygame or handed in directly.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

import pygame

_STICK_THRESHOLD = 0.5


def _key_down(state: Any, key: int) -> bool:
    if isinstance(state, dict):
        return bool(state.get(key, False))
    if isinstance(state, (set, frozenset)):
        return key in state
    try:
        return bool(state[key])
    except (IndexError, KeyError):
        return False


class Keyboard:
    """Tracks which keys are held now and which were held one update ago.

    A state is either a set of pressed key codes, a mapping from key code to
    a truth value, or a sequence indexed by key code such as the one returned
    by ``pygame.key.get_pressed()``.
    """

    def __init__(self, state: Any = None) -> None:
        self._current: Any = frozenset() if state is None else state
        self._previous: Any = self._current

    def update(self, state: Any = None) -> None:
        """Take a new state, reading pygame's keyboard when none is given."""
        self._previous = self._current
        self._current = pygame.key.get_pressed() if state is None else state

    def has_been_pressed(self, key: int) -> bool:
        return not _key_down(self._previous, key) and _key_down(self._current, key)

    def has_been_released(self, key: int) -> bool:
        return _key_down(self._previous, key) and not _key_down(self._current, key)

    def is_pressed(self, key: int) -> bool:
        return _key_down(self._current, key)

    def key_name(self, key: int) -> str:
        return pygame.key.name(key)


class MouseButton(enum.IntFlag):
    LEFT = 1
    RIGHT = 2
    CENTER = 4


@dataclass(frozen=True)
class MouseState:
    """Pointer position and a bit set of held buttons."""

    x: int = 0
    y: int = 0
    buttons: MouseButton = MouseButton(0)


def _read_mouse() -> MouseState:
    x, y = pygame.mouse.get_pos()
    left, middle, right = pygame.mouse.get_pressed()[:3]
    buttons = MouseButton(0)
    if left:
        buttons |= MouseButton.LEFT
    if middle:
        buttons |= MouseButton.CENTER
    if right:
        buttons |= MouseButton.RIGHT
    return MouseState(x, y, buttons)


class Mouse:
    """Tracks the pointer across the last two updates."""

    def __init__(self, state: Optional[MouseState] = None) -> None:
        self._current = state if state is not None else MouseState()
        self._previous = self._current

    def update(self, state: Optional[MouseState] = None) -> None:
        """Take a new state, reading pygame's mouse when none is given."""
        self._previous = self._current
        self._current = _read_mouse() if state is None else state

    @property
    def x(self) -> int:
        return self._current.x

    @property
    def y(self) -> int:
        return self._current.y

    @property
    def has_moved(self) -> bool:
        return self._current.x != self._previous.x or self._current.y != self._previous.y

    @property
    def has_moved_left(self) -> bool:
        return self._current.x < self._previous.x

    @property
    def has_moved_right(self) -> bool:
        return self._current.x > self._previous.x

    @property
    def has_moved_up(self) -> bool:
        return self._current.y < self._previous.y

    @property
    def has_moved_down(self) -> bool:
        return self._current.y > self._previous.y

    def is_pressed(self, button: MouseButton) -> bool:
        return bool(self._current.buttons & button)

    def has_been_pressed(self, button: MouseButton) -> bool:
        return not (self._previous.buttons & button) and bool(self._current.buttons & button)

    def has_been_released(self, button: MouseButton) -> bool:
        return bool(self._previous.buttons & button) and not (self._current.buttons & button)


@dataclass(frozen=True)
class JoystickState:
    """Held buttons and, for every stick, the positions of its axes."""

    buttons: tuple[bool, ...] = ()
    sticks: tuple[tuple[float, ...], ...] = field(default_factory=tuple)

    def button(self, index: int) -> bool:
        return 0 <= index < len(self.buttons) and bool(self.buttons[index])

    def axis(self, stick: int, axis: int) -> float:
        if not 0 <= stick < len(self.sticks):
            return 0.0
        axes = self.sticks[stick]
        return float(axes[axis]) if 0 <= axis < len(axes) else 0.0


def _read_joystick(device: Any) -> JoystickState:
    buttons = tuple(bool(device.get_button(i)) for i in range(device.get_numbuttons()))
    axes = [float(device.get_axis(i)) for i in range(device.get_numaxes())]
    sticks = tuple(tuple(axes[i:i + 2]) for i in range(0, len(axes), 2))
    return JoystickState(buttons, sticks)


class Joystick:
    """Tracks a joystick's buttons and its default stick across two updates."""

    def __init__(self, device: Any = None) -> None:
        self.device = device
        self.default_stick = 0
        self._current = _read_joystick(device) if device is not None else JoystickState()
        self._previous = self._current

    def update(self, state: Optional[JoystickState] = None) -> None:
        """Take a new state, reading the device when none is given."""
        self._previous = self._current
        if state is not None:
            self._current = state
        elif self.device is not None:
            self._current = _read_joystick(self.device)

    def has_been_pressed(self, button: int) -> bool:
        return not self._previous.button(button) and self._current.button(button)

    def has_been_released(self, button: int) -> bool:
        return self._previous.button(button) and not self._current.button(button)

    def is_pressed(self, button: int) -> bool:
        return self._current.button(button)

    @property
    def num_buttons(self) -> int:
        if self.device is not None:
            return self.device.get_numbuttons()
        return len(self._current.buttons)

    def button_name(self, button: int) -> str:
        return f"Button {button}"

    def _axes(self, state: JoystickState) -> tuple[float, float]:
        return state.axis(self.default_stick, 0), state.axis(self.default_stick, 1)

    @staticmethod
    def _centered(axes: tuple[float, float]) -> bool:
        return axes[0] == 0 and axes[1] == 0

    @property
    def center_has_been_pressed(self) -> bool:
        return not self._centered(self._axes(self._previous)) and self._centered(
            self._axes(self._current)
        )

    @property
    def center_has_been_released(self) -> bool:
        return self._centered(self._axes(self._previous)) and not self._centered(
            self._axes(self._current)
        )

    @property
    def center_is_pressed(self) -> bool:
        return self._centered(self._axes(self._current))

    def _low(self, state: JoystickState, axis: int) -> bool:
        return state.axis(self.default_stick, axis) <= -_STICK_THRESHOLD

    def _high(self, state: JoystickState, axis: int) -> bool:
        return state.axis(self.default_stick, axis) >= _STICK_THRESHOLD

    @property
    def left_has_been_pressed(self) -> bool:
        return not self._low(self._previous, 0) and self._low(self._current, 0)

    @property
    def left_has_been_released(self) -> bool:
        return self._low(self._previous, 0) and not self._low(self._current, 0)

    @property
    def left_is_pressed(self) -> bool:
        return self._low(self._current, 0)

    @property
    def right_has_been_pressed(self) -> bool:
        return not self._high(self._previous, 0) and self._high(self._current, 0)

    @property
    def right_has_been_released(self) -> bool:
        return self._high(self._previous, 0) and not self._high(self._current, 0)

    @property
    def right_is_pressed(self) -> bool:
        return self._high(self._current, 0)

    @property
    def up_has_been_pressed(self) -> bool:
        return not self._low(self._previous, 1) and self._low(self._current, 1)

    @property
    def up_has_been_released(self) -> bool:
        return self._low(self._previous, 1) and not self._low(self._current, 1)

    @property
    def up_is_pressed(self) -> bool:
        return self._low(self._current, 1)

    @property
    def down_has_been_pressed(self) -> bool:
        return not self._high(self._previous, 1) and self._high(self._current, 1)

    @property
    def down_has_been_released(self) -> bool:
        return self._high(self._previous, 1) and not self._high(self._current, 1)

    @property
    def down_is_pressed(self) -> bool:
        return self._high(self._current, 1)


_joysticks: list[Joystick] = []


def init_joysticks() -> bool:
    """Open every connected joystick; return False when joysticks are unavailable."""
    try:
        pygame.joystick.init()
        devices = [pygame.joystick.Joystick(i) for i in range(pygame.joystick.get_count())]
    except pygame.error:
        return False
    _joysticks[:] = [Joystick(device) for device in devices]
    return True


def joystick_count() -> int:
    return len(_joysticks)


def get_joystick(index: int) -> Joystick:
    """Return joystick ``index``, or the first one when ``index`` is out of range."""
    if not _joysticks:
        raise IndexError("no joystick is available")
    if index >= len(_joysticks):
        return _joysticks[0]
    return _joysticks[index]