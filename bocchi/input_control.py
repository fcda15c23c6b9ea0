"""Keyboard, mouse and game-pad state with press/hold/release queries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

import pygame

KEYCODE_MAX = 256
MOUSE_MAX = 256
BUTTON_MAX = 16
STICK_TILT_MAX = 32767.0

KEY_ESCAPE = 27
KEY_SPACE = 32

MOUSE_INPUT_LEFT = 1
MOUSE_INPUT_RIGHT = 2
MOUSE_INPUT_MIDDLE = 4

BUTTON_DPAD_UP = 0
BUTTON_DPAD_DOWN = 1
BUTTON_DPAD_LEFT = 2
BUTTON_DPAD_RIGHT = 3
BUTTON_START = 4
BUTTON_BACK = 5
BUTTON_LEFT_THUMB = 6
BUTTON_RIGHT_THUMB = 7
BUTTON_LEFT_SHOULDER = 8
BUTTON_RIGHT_SHOULDER = 9
BUTTON_A = 12
BUTTON_B = 13
BUTTON_X = 14
BUTTON_Y = 15

# Common pad layout as reported by SDL, mapped onto the button numbers above.
_PAD_BUTTONS = {
    0: BUTTON_A,
    1: BUTTON_B,
    2: BUTTON_X,
    3: BUTTON_Y,
    4: BUTTON_LEFT_SHOULDER,
    5: BUTTON_RIGHT_SHOULDER,
    6: BUTTON_BACK,
    7: BUTTON_START,
    8: BUTTON_LEFT_THUMB,
    9: BUTTON_RIGHT_THUMB,
}
_STICK_AXES = (0, 1, 3, 4)


@dataclass(frozen=True)
class Cursor:
    """Mouse cursor position in window pixels."""

    x: int = 0
    y: int = 0


class StickAxis(IntEnum):
    X = 1
    Y = 2


def _in_key_range(key_code: int) -> bool:
    return 0 <= key_code < KEYCODE_MAX


def _axis_value(raw: float) -> int:
    return int(max(-1.0, min(1.0, raw)) * STICK_TILT_MAX)


class InputControl:
    """Tracks the current and previous input frame.

    A value is "held" when it is on in both frames, "down" when it has just
    turned on and "up" when it has just turned off.
    """

    _instance: ClassVar[InputControl | None] = None

    def __init__(self) -> None:
        self._now_keys: frozenset[int] = frozenset()
        self._old_keys: frozenset[int] = frozenset()
        self._now_mouse: int | None = None
        self._old_mouse: int | None = None
        self.cursor = Cursor()
        self._now_buttons: frozenset[int] = frozenset()
        self._old_buttons: frozenset[int] = frozenset()
        self._sticks: tuple[int, int, int, int] = (0, 0, 0, 0)
        self._joystick: pygame.joystick.JoystickType | None = None

    @classmethod
    def get_instance(cls) -> InputControl:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def delete_instance(cls) -> None:
        cls._instance = None

    def update(
        self,
        keys: Iterable[int] = (),
        mouse_button: int = 0,
        cursor: Cursor | None = None,
        buttons: Iterable[int] | None = None,
        sticks: tuple[int, int, int, int] | None = None,
    ) -> None:
        """Advance one frame.

        ``keys`` and ``buttons`` are the codes pressed now, ``mouse_button``
        is the raw mouse state.  When ``buttons`` or ``sticks`` is None the
        pad could not be read and its previous state is kept.
        """
        self._old_keys = self._now_keys
        self._now_keys = frozenset(key for key in keys if _in_key_range(key))

        self._old_mouse = self._now_mouse
        self._now_mouse = mouse_button if 0 <= mouse_button < MOUSE_MAX else None

        if cursor is not None:
            self.cursor = cursor

        self._old_buttons = self._now_buttons
        if buttons is not None:
            self._now_buttons = frozenset(b for b in buttons if 0 <= b < BUTTON_MAX)
        if sticks is not None:
            left_x, left_y, right_x, right_y = sticks
            self._sticks = (int(left_x), int(left_y), int(right_x), int(right_y))

    def poll(self) -> None:
        """Read the devices through pygame and advance one frame."""
        pressed = pygame.key.get_pressed()
        keys = [code for code in range(KEYCODE_MAX) if pressed[code]]

        left, middle, right = pygame.mouse.get_pressed()[:3]
        mouse_state = (
            (MOUSE_INPUT_LEFT if left else 0)
            | (MOUSE_INPUT_RIGHT if right else 0)
            | (MOUSE_INPUT_MIDDLE if middle else 0)
        )
        cursor = Cursor(*pygame.mouse.get_pos())

        buttons, sticks = self._read_pad()
        self.update(keys, mouse_state, cursor, buttons, sticks)

    def _read_pad(self) -> tuple[set[int] | None, tuple[int, int, int, int] | None]:
        if not pygame.joystick.get_init() or pygame.joystick.get_count() == 0:
            self._joystick = None
            return None, None
        if self._joystick is None:
            self._joystick = pygame.joystick.Joystick(0)
        pad = self._joystick

        count = pad.get_numbuttons()
        pressed = {
            button
            for sdl_button, button in _PAD_BUTTONS.items()
            if sdl_button < count and pad.get_button(sdl_button)
        }
        if pad.get_numhats():
            hat_x, hat_y = pad.get_hat(0)
            if hat_x < 0:
                pressed.add(BUTTON_DPAD_LEFT)
            elif hat_x > 0:
                pressed.add(BUTTON_DPAD_RIGHT)
            if hat_y > 0:
                pressed.add(BUTTON_DPAD_UP)
            elif hat_y < 0:
                pressed.add(BUTTON_DPAD_DOWN)

        axis_count = pad.get_numaxes()
        left_x, left_y, right_x, right_y = (
            pad.get_axis(axis) if axis < axis_count else 0.0 for axis in _STICK_AXES
        )
        # Pad axes grow downwards; stick tilt grows upwards.
        sticks = (
            _axis_value(left_x),
            _axis_value(-left_y),
            _axis_value(right_x),
            _axis_value(-right_y),
        )
        return pressed, sticks

    def get_key(self, key_code: int) -> bool:
        return _in_key_range(key_code) and key_code in self._now_keys and key_code in self._old_keys

    def get_key_down(self, key_code: int) -> bool:
        return (
            _in_key_range(key_code)
            and key_code in self._now_keys
            and key_code not in self._old_keys
        )

    def get_key_up(self, key_code: int) -> bool:
        return (
            _in_key_range(key_code)
            and key_code not in self._now_keys
            and key_code in self._old_keys
        )

    def get_mouse(self, mouse: int) -> bool:
        return self._now_mouse == mouse and self._old_mouse == mouse

    def get_mouse_down(self, mouse: int) -> bool:
        return self._now_mouse == mouse and self._old_mouse != mouse

    def get_mouse_up(self, mouse: int) -> bool:
        return self._now_mouse != mouse and self._old_mouse == mouse

    def get_button(self, button: int) -> bool:
        return button in self._now_buttons and button in self._old_buttons

    def get_button_down(self, button: int) -> bool:
        return button in self._now_buttons and button not in self._old_buttons

    def get_button_up(self, button: int) -> bool:
        return button not in self._now_buttons and button in self._old_buttons

    def left_stick_tilt(self, axis: int) -> float:
        """Left stick tilt along ``axis`` as a fraction of full tilt."""
        left_x, left_y, _, _ = self._sticks
        if axis == StickAxis.X:
            return left_x / STICK_TILT_MAX
        if axis == StickAxis.Y:
            return left_y / STICK_TILT_MAX
        return 0.0

    def right_stick_tilt(self, axis: int) -> float:
        """Right stick tilt along ``axis`` as a fraction of full tilt."""
        _, _, right_x, right_y = self._sticks
        if axis == StickAxis.X:
            return right_x / STICK_TILT_MAX
        if axis == StickAxis.Y:
            return right_y / STICK_TILT_MAX
        return 0.0