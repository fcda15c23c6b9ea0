"""Game objects: the common base, characters, blocks and the goal."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

import pygame

from bocchi.settings import SCREEN_HEIGHT, SCREEN_WIDTH
from bocchi.vector2d import Vector2D

GRAVITY = 9.087
_GRAVITY_STEP = GRAVITY / 444.0

_DEBUG_COLOR = (255, 0, 0)
_TEXT_COLOR = (255, 255, 255)
_FONT_SIZE = 20

_font: pygame.font.Font | None = None


def _get_font() -> pygame.font.Font:
    global _font
    if _font is None:
        if not pygame.font.get_init():
            pygame.font.init()
        _font = pygame.font.Font(None, _FONT_SIZE)
    return _font


def _outline(surface: pygame.Surface, x: float, y: float, w: float, h: float) -> None:
    rect = pygame.Rect(int(x), int(y), int(w), int(h))
    pygame.draw.rect(surface, _DEBUG_COLOR, rect, 1)


class ObjectType(IntEnum):
    EMPTY = 0
    BLOCK = 1
    PLAYER = 2
    ENEMY = 3
    GOAL = 4


class GameObject:
    """Something placed in the stage with a position, size and image."""

    def __init__(self) -> None:
        self.location = Vector2D()
        self.box_size = Vector2D()
        self.hit_box = Vector2D()
        self.velocity = Vector2D()
        self.image: Any = None
        self.flip = False
        self.object_type = ObjectType.EMPTY

    def initialize(self, location: Vector2D, box_size: Vector2D) -> None:
        """Place the object and size its box; the hit box is 90% as wide."""
        self.location = Vector2D(location.x, location.y)
        self.box_size = Vector2D(box_size.x, box_size.y)
        self.hit_box = Vector2D(self.box_size.x * 0.9, self.box_size.y)

    def update(self) -> None:
        """Advance one frame; a plain object does nothing."""

    def draw(self, surface: pygame.Surface, offset: Vector2D, rate: float = 1.0) -> None:
        """Draw the image centred in the box at ``offset``, scaled by ``rate``."""
        if offset.x + self.box_size.x >= 0 and offset.x < SCREEN_WIDTH:
            if self.image is not None:
                image = self.image
                if self.flip:
                    image = pygame.transform.flip(image, True, False)
                if rate != 1.0:
                    image = pygame.transform.rotozoom(image, 0.0, rate)
                center = (
                    offset.x + self.box_size.x / 2,
                    offset.y + self.box_size.y / 2,
                )
                surface.blit(image, image.get_rect(center=(int(center[0]), int(center[1]))))
            _outline(surface, offset.x, offset.y, self.box_size.x, self.box_size.y)
        _outline(surface, 0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)

    def finalize(self) -> None:
        """Drop the image the object holds."""
        self.image = None

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """React to touching ``hit_object``; a plain object does not react."""

    def check_box_collision(self, other: GameObject) -> bool:
        """Whether this object's hit box overlaps the other's full box."""
        my_size = self.hit_box / 2.0
        other_size = other.box_size / 2.0
        diff = (self.location + my_size) - (other.location + other_size)
        return (
            abs(diff.x) <= my_size.x + other_size.x
            and abs(diff.y) <= my_size.y + other_size.y
        )


class CharaBase(GameObject):
    """An object that falls under gravity and is pushed out of blocks."""

    def __init__(self) -> None:
        super().__init__()
        self.hp = 0
        self.g_velocity = 0.0
        self.jump_flag = False
        self.damage_flag = False
        self.animation_count = 0

    def update(self) -> None:
        self.g_velocity += _GRAVITY_STEP
        self.velocity.y += self.g_velocity
        self.location.y += self.velocity.y

    def on_hit_collision(self, hit_object: GameObject) -> None:
        if hit_object.object_type != ObjectType.BLOCK:
            return

        own_min = self.location
        own_max = self.location + self.box_size
        target_min = hit_object.location
        target_max = target_min + hit_object.box_size

        overlapping = (
            own_max.x > target_min.x
            and own_min.x < target_max.x
            and own_max.y > target_min.y
            and own_min.y < target_max.y
        )
        if not overlapping:
            return

        push = Vector2D()
        depth_x = min(own_max.x - target_min.x, target_max.x - own_min.x)
        depth_y = min(own_max.y - target_min.y, target_max.y - own_min.y)

        if depth_x < depth_y:
            push.x = -depth_x if own_min.x < target_min.x else depth_x
            self.velocity.x = 0.0
        else:
            if own_min.y < target_min.y:
                push.y = -depth_y
                if self.velocity.y >= 0.0:
                    self.jump_flag = False
            else:
                push.y = depth_y
            if self.velocity.y >= 0.0:
                self.velocity.y = 0.0
                self.g_velocity = 0.0

        self.location = self.location + push


class Block(GameObject):
    """A solid tile of the stage."""

    def initialize(self, location: Vector2D, box_size: Vector2D) -> None:
        super().initialize(location, box_size)
        self.object_type = ObjectType.BLOCK

    def draw(self, surface: pygame.Surface, offset: Vector2D, rate: float = 1.0) -> None:
        super().draw(surface, offset, 1.0)


class GoalPoint(GameObject):
    """The tile that ends the stage when the player reaches it."""

    def initialize(self, location: Vector2D, box_size: Vector2D) -> None:
        super().initialize(location, box_size)
        self.object_type = ObjectType.GOAL

    def draw(self, surface: pygame.Surface, offset: Vector2D, rate: float = 1.0) -> None:
        super().draw(surface, offset, 1.0)
        text = _get_font().render("Goal", True, _TEXT_COLOR)
        surface.blit(text, (int(offset.x + 2), int(self.location.y)))


class Enemy(CharaBase):
    """A character that is not controlled by the player."""