"""Cache of loaded images and sounds, keyed by file name."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

import pygame

ImageLoader = Callable[[str, int, int, int, int, int], Sequence[Any]]
SoundLoader = Callable[[str], Any]


class ResourceError(Exception):
    """A resource file could not be loaded."""


@dataclass(frozen=True)
class MaterialParam:
    """Where an image sheet lives and how it is cut into frames."""

    file_path: str
    all_num: int = 1
    num_x: int = 1
    num_y: int = 1
    size_x: int = 0
    size_y: int = 0


@dataclass(frozen=True)
class SoundParam:
    file_path: str


def _load_pygame_images(
    file_name: str, all_num: int, num_x: int, num_y: int, size_x: int, size_y: int
) -> tuple[pygame.Surface, ...]:
    sheet = pygame.image.load(file_name)
    if all_num == 1:
        return (sheet,)
    if num_x <= 0 or all_num > num_x * num_y:
        raise ValueError(f"{file_name}: {all_num} frames do not fit a {num_x}x{num_y} grid")
    frames = []
    for index in range(all_num):
        row, column = divmod(index, num_x)
        rect = pygame.Rect(column * size_x, row * size_y, size_x, size_y)
        frames.append(sheet.subsurface(rect))
    return tuple(frames)


def _load_pygame_sound(file_name: str) -> pygame.mixer.Sound:
    return pygame.mixer.Sound(file_name)


class ResourceManager:
    """Loads each file once and hands back the same frames afterwards."""

    _instance: ClassVar[ResourceManager | None] = None

    def __init__(
        self,
        image_loader: ImageLoader | None = None,
        sound_loader: SoundLoader | None = None,
    ) -> None:
        self._image_loader = image_loader or _load_pygame_images
        self._sound_loader = sound_loader or _load_pygame_sound
        self._images: dict[str, tuple[Any, ...]] = {}
        self._sounds: dict[str, tuple[Any, ...]] = {}

    @classmethod
    def get_instance(cls) -> ResourceManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def delete_instance(cls) -> None:
        if cls._instance is not None:
            cls._instance.unload_resources_all()
            cls._instance = None

    def get_images(
        self,
        file_name: str,
        all_num: int = 1,
        num_x: int = 1,
        num_y: int = 1,
        size_x: int = 0,
        size_y: int = 0,
    ) -> tuple[Any, ...]:
        """Frames of ``file_name``; the grid is used only on the first load."""
        if file_name not in self._images:
            try:
                frames = self._image_loader(file_name, all_num, num_x, num_y, size_x, size_y)
            except (OSError, RuntimeError, ValueError) as exc:
                raise ResourceError(f"{file_name} could not be loaded") from exc
            self._images[file_name] = tuple(frames)
        return self._images[file_name]

    def get_images_for(self, param: MaterialParam) -> tuple[Any, ...]:
        return self.get_images(
            param.file_path, param.all_num, param.num_x, param.num_y, param.size_x, param.size_y
        )

    def get_sound(self, file_name: str) -> tuple[Any, ...]:
        if file_name not in self._sounds:
            try:
                sound = self._sound_loader(file_name)
            except (OSError, RuntimeError, ValueError) as exc:
                raise ResourceError(f"{file_name} could not be loaded") from exc
            self._sounds[file_name] = (sound,)
        return self._sounds[file_name]

    def get_sound_for(self, param: SoundParam) -> tuple[Any, ...]:
        return self.get_sound(param.file_path)

    def unload_resources_all(self) -> None:
        """Forget every cached resource; does nothing while no image is cached."""
        if not self._images:
            return
        self._images.clear()
        self._sounds.clear()