"""The player-controlled character."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

import pygame

from bocchi.input_control import (
    BUTTON_A,
    BUTTON_DPAD_LEFT,
    BUTTON_DPAD_RIGHT,
    KEY_SPACE,
    InputControl,
)
from bocchi.objects import CharaBase, GameObject, ObjectType
from bocchi.vector2d import Vector2D

_MAX_SPEED = 5.0
_ACCELERATION = 1.5
_FRICTION = 0.15
_JUMP_POWER = 4.0
_EPSILON = 1e-6
_ANIMATION_FRAMES = 10


class PlayerState(Enum):
    IDLE = auto()
    LEFT = auto()
    RIGHT = auto()
    JUMP = auto()
    DAMAGE = auto()
    DEAD = auto()


class Player(CharaBase):
    """Walks left and right on the pad and jumps on A or space."""

    def __init__(self, input_control: InputControl | None = None) -> None:
        super().__init__()
        self._input_control = input_control
        self.state = PlayerState.IDLE
        self.animation_data: list[Any] = []

    @property
    def input(self) -> InputControl:
        return self._input_control or InputControl.get_instance()

    def initialize(self, location: Vector2D, box_size: Vector2D) -> None:
        super().initialize(location, box_size)
        self.object_type = ObjectType.PLAYER
        self.hp = 5
        self.velocity = Vector2D()
        self.g_velocity = 0.0
        self.animation_count = 0

    def update(self) -> None:
        super().update()
        self.movement()

    def draw(self, surface: pygame.Surface, offset: Vector2D, rate: float = 1.0) -> None:
        super().draw(surface, offset, 1.1)

    def finalize(self) -> None:
        self.animation_data.clear()

    def _jump_requested(self, control: InputControl) -> bool:
        return not self.jump_flag and (
            control.get_button_down(BUTTON_A) or control.get_key_down(KEY_SPACE)
        )

    def movement(self) -> None:
        """Apply one frame of the state machine, then move by the velocity."""
        control = self.input

        if self.state is PlayerState.IDLE:
            if self.velocity.x < -_EPSILON:
                self.velocity.x = min(self.velocity.x + _FRICTION, 0.0)
            elif self.velocity.x > _EPSILON:
                self.velocity.x = max(self.velocity.x - _FRICTION, 0.0)

            if control.get_button(BUTTON_DPAD_LEFT):
                self.state = PlayerState.LEFT
            elif control.get_button(BUTTON_DPAD_RIGHT):
                self.state = PlayerState.RIGHT
            if self._jump_requested(control):
                self.state = PlayerState.JUMP

        elif self.state is PlayerState.LEFT:
            self.velocity.x -= _ACCELERATION
            self.flip = True
            if not control.get_button(BUTTON_DPAD_LEFT):
                self.state = PlayerState.IDLE
            if self._jump_requested(control):
                self.state = PlayerState.JUMP

        elif self.state is PlayerState.RIGHT:
            self.velocity.x += _ACCELERATION
            self.flip = False
            if not control.get_button(BUTTON_DPAD_RIGHT):
                self.state = PlayerState.IDLE
            if self._jump_requested(control):
                self.state = PlayerState.JUMP

        elif self.state is PlayerState.JUMP:
            self.jump_flag = True
            self.velocity.y -= _JUMP_POWER
            if not control.get_button_down(BUTTON_A):
                self.state = PlayerState.IDLE

        self.velocity.x = min(max(self.velocity.x, -_MAX_SPEED), _MAX_SPEED)
        self.location = self.location + self.velocity

    def animation_control(self) -> None:
        """Alternate between the first two animation frames every few updates."""
        self.animation_count += 1
        if self.animation_count >= _ANIMATION_FRAMES:
            self.animation_count = 0
            if self.image is self.animation_data[0]:
                self.image = self.animation_data[1]
            else:
                self.image = self.animation_data[0]

    def on_hit_collision(self, hit_object: GameObject) -> None:
        super().on_hit_collision(hit_object)