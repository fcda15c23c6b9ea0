"""Scenes: the object container, the main stage scene and the scene switcher."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Mapping
from enum import Enum, auto
from functools import partial
from itertools import combinations
from pathlib import Path
from typing import Any, ClassVar

import pygame

from bocchi.input_control import InputControl
from bocchi.objects import Block, GameObject, GoalPoint, ObjectType
from bocchi.player import Player
from bocchi.settings import (
    BOX_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STAGE_MAX_HEIGHT,
    STAGE_MAX_WIDTH,
)
from bocchi.vector2d import Vector2D

DEFAULT_STAGE_PATH = "Resource/file/stage.csv"

_BACKGROUND_COLOR = (150, 150, 150)
_TEXT_COLOR = (255, 255, 255)
_FONT_SIZE = 24
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SceneType(Enum):
    TITLE = auto()
    GAME_MAIN = auto()
    RESULT = auto()


class SceneError(Exception):
    """A scene, a stage or an object in it could not be set up."""


def _to_int(text: str) -> int:
    """Read the leading integer of ``text``, as a lenient C++ parser would."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise SceneError(f"not a number: {text!r}")
    return int(match.group(1))


def _fields(line: str) -> list[str]:
    """Comma-separated fields, without the empty field after a final comma."""
    if not line:
        return []
    parts = line.split(",")
    if line.endswith(","):
        parts.pop()
    return parts


def parse_stage(text: str) -> tuple[int, int, dict[tuple[int, int], int]]:
    """Parse stage CSV into ``(width, height, cells)``.

    The first line holds the width and height in blocks; each following line
    is one row.  ``cells`` maps ``(row, column)`` to the tile number of every
    cell present in the text.  An empty text is an empty stage.
    """
    lines = text.split("\n")
    if not text or text.endswith("\n"):
        lines.pop()
    if not lines:
        return 0, 0, {}

    header = _fields(lines[0])
    width = _to_int(header[0] if header else "")
    height = _to_int(header[1] if len(header) > 1 else "")
    if width > STAGE_MAX_WIDTH or height > STAGE_MAX_HEIGHT:
        raise SceneError(
            f"stage of {width}x{height} exceeds {STAGE_MAX_WIDTH}x{STAGE_MAX_HEIGHT}"
        )

    cells: dict[tuple[int, int], int] = {}
    for row, line in enumerate(lines[1 : 1 + max(height, 0)]):
        for column, value in enumerate(_fields(line)[: max(width, 0)]):
            cells[(row, column)] = _to_int(value)
    return width, height, cells


class SceneBase:
    """Holds the objects of a scene, updates them and resolves collisions."""

    scene_type: ClassVar[SceneType]

    def __init__(self) -> None:
        self.objects: list[GameObject] = []
        self.camera_location = Vector2D()
        self.clear_count = 0
        self.stage_reload = False

    def initialize(self) -> None:
        """Prepare the scene; the base scene has nothing to prepare."""

    def update(self) -> SceneType:
        """Advance every object, resolve collisions and return the next scene."""
        for obj in self.objects:
            obj.update()

        for first, second in combinations(self.objects, 2):
            if first.check_box_collision(second):
                first.on_hit_collision(second)
                second.on_hit_collision(first)
                if (
                    first.object_type == ObjectType.PLAYER
                    and second.object_type == ObjectType.GOAL
                ):
                    self.clear_count += 1
                    self.stage_reload = True

        return self.scene_type

    def draw(self, surface: pygame.Surface) -> None:
        for obj in self.objects:
            obj.draw(surface, obj.location - self.camera_location, 1.0)

    def finalize(self) -> None:
        """Finalize and drop every object."""
        for obj in self.objects:
            obj.finalize()
        self.objects.clear()

    def create_object(
        self, cls: Callable[[], Any], location: Vector2D, box_size: Vector2D
    ) -> GameObject:
        """Build an object with ``cls()``, place it and add it to the scene."""
        instance = cls()
        if not isinstance(instance, GameObject):
            raise SceneError("could not create a game object")
        instance.location = Vector2D(location.x, location.y)
        instance.initialize(location, box_size)
        self.objects.append(instance)
        return instance

    def delete_object(self, obj: GameObject | None) -> None:
        """Finalize and remove ``obj`` if it belongs to this scene."""
        if obj is None:
            return
        for index, candidate in enumerate(self.objects):
            if candidate is obj:
                obj.finalize()
                del self.objects[index]
                return


class GameMainScene(SceneBase):
    """The playable stage, built from a CSV file of tile numbers."""

    scene_type = SceneType.GAME_MAIN

    def __init__(
        self,
        stage_path: str | Path = DEFAULT_STAGE_PATH,
        input_control: InputControl | None = None,
    ) -> None:
        super().__init__()
        self.stage_path = Path(stage_path)
        self.input_control = input_control
        self.stage_width_num = 0
        self.stage_height_num = 0
        self.stage_data: dict[tuple[int, int], int] = {}
        self.player: GameObject | None = None
        self._font: pygame.font.Font | None = None

    def initialize(self) -> None:
        self.load_stage()
        self.camera_location = Vector2D(0.0, 0.0)

    def update(self) -> SceneType:
        if self.stage_reload:
            self.reload_stage()
        self.find_player()
        self.update_camera()
        return super().update()

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(_BACKGROUND_COLOR, pygame.Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT))
        font = self._get_font()
        lines = (
            (10, "Main"),
            (
                40,
                f"Stage size: width = {self.stage_width_num}"
                f"      height = {self.stage_height_num}",
            ),
            (70, f"LOOP : {self.clear_count}"),
        )
        for y, text in lines:
            surface.blit(font.render(text, True, _TEXT_COLOR), (10, y))
        super().draw(surface)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        return self._font

    def load_stage(self) -> None:
        """Read the stage file and build its objects.

        A file that cannot be opened is reported on stderr and leaves the
        stage empty; a malformed file raises :class:`SceneError`.
        """
        try:
            text = self.stage_path.read_text(encoding="utf-8")
        except OSError:
            print(f"could not open stage file: {self.stage_path}", file=sys.stderr)
            return

        width, height, cells = parse_stage(text)
        self.stage_width_num = width
        self.stage_height_num = height
        self.stage_data.update(cells)
        self.set_stage()

    def set_stage(self) -> None:
        """Create an object for every block, player and goal tile."""
        factories: dict[int, tuple[Callable[[], GameObject], Vector2D]] = {
            ObjectType.BLOCK: (Block, Vector2D(float(BOX_SIZE))),
            ObjectType.PLAYER: (
                partial(Player, self.input_control),
                Vector2D(64.0, 96.0),
            ),
            ObjectType.GOAL: (GoalPoint, Vector2D(float(BOX_SIZE))),
        }
        for row in range(self.stage_height_num):
            y = SCREEN_HEIGHT - (self.stage_height_num - 1 - row) * BOX_SIZE
            for column in range(self.stage_width_num):
                entry = factories.get(self.stage_data.get((row, column), ObjectType.EMPTY))
                if entry is None:
                    continue
                factory, size = entry
                self.create_object(
                    factory, Vector2D(column * BOX_SIZE, y), Vector2D(size.x, size.y)
                )

    def update_camera(self) -> None:
        """Centre the camera on the player, kept inside the stage."""
        if self.player is None:
            return
        screen_half_width = SCREEN_WIDTH / 2
        limit_left = 0.0
        limit_right = float(self.stage_width_num * BOX_SIZE - SCREEN_WIDTH)

        self.camera_location.x = self.player.location.x - screen_half_width
        if self.camera_location.x < limit_left:
            self.camera_location.x = limit_left
        if self.camera_location.x > limit_right:
            self.camera_location.x = limit_right

    def reload_stage(self) -> None:
        """Drop every object and build the stage again from its file."""
        self.objects.clear()
        self.player = None
        self.stage_reload = False
        self.load_stage()

    def find_player(self) -> None:
        player = next(
            (obj for obj in self.objects if obj.object_type == ObjectType.PLAYER), None
        )
        if player is not None:
            self.player = player

    def finalize(self) -> None:
        super().finalize()


class SceneManager:
    """Runs the current scene and switches to the one it asks for."""

    def __init__(
        self, factories: Mapping[SceneType, Callable[[], SceneBase]] | None = None
    ) -> None:
        if factories is None:
            factories = {
                SceneType.TITLE: GameMainScene,
                SceneType.GAME_MAIN: GameMainScene,
            }
        self.factories = dict(factories)
        self.current_scene: SceneBase | None = None

    def initialize(self) -> None:
        self.change_scene(SceneType.GAME_MAIN)

    def update(self, surface: pygame.Surface) -> None:
        """Update and draw the current scene, then switch if it asked to."""
        scene = self.current_scene
        if scene is None:
            raise SceneError("no scene is running")
        next_type = scene.update()
        scene.draw(surface)
        if next_type != scene.scene_type:
            self.change_scene(next_type)

    def finalize(self) -> None:
        if self.current_scene is not None:
            self.current_scene.finalize()
            self.current_scene = None

    def change_scene(self, scene_type: SceneType) -> None:
        """Replace the current scene with a new scene of ``scene_type``."""
        factory = self.factories.get(scene_type)
        if factory is None:
            raise SceneError(f"cannot create a scene of type {scene_type.name}")
        new_scene = factory()
        if self.current_scene is not None:
            self.current_scene.finalize()
        new_scene.initialize()
        self.current_scene = new_scene