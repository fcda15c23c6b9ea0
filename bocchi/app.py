"""Window, main loop and command line of the game."""

from __future__ import annotations

import argparse
import sys
from functools import partial

import pygame

from bocchi.fps import FpsController
from bocchi.input_control import KEY_ESCAPE, InputControl
from bocchi.resources import ResourceError, ResourceManager
from bocchi.scene import DEFAULT_STAGE_PATH, GameMainScene, SceneError, SceneManager, SceneType
from bocchi.settings import FRAMERATE, SCREEN_HEIGHT, SCREEN_WIDTH

_CLEAR_COLOR = (0, 0, 0)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bocchi", description="Run the side-scrolling stage.")
    parser.add_argument("--stage", default=DEFAULT_STAGE_PATH, help="stage CSV file")
    parser.add_argument("--show-fps", action="store_true", help="draw the measured frame rate")
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    return parser.parse_args(argv)


def _quit_requested() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed or Escape is released."""
    args = _parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    except pygame.error as exc:
        print(f"could not open the window: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    pygame.display.set_caption("bocchi")

    fps = FpsController(FRAMERATE, 800)
    ResourceManager.get_instance()
    stage_scene = partial(GameMainScene, args.stage)
    manager = SceneManager({SceneType.TITLE: stage_scene, SceneType.GAME_MAIN: stage_scene})

    try:
        manager.initialize()
        control = InputControl.get_instance()
        frame = 0
        while not _quit_requested():
            if args.frames is not None and frame >= args.frames:
                break
            control.poll()
            screen.fill(_CLEAR_COLOR)
            manager.update(screen)
            fps.all()
            if args.show_fps:
                fps.draw(screen)
            if control.get_key_up(KEY_ESCAPE):
                break
            pygame.display.flip()
            frame += 1
    except (SceneError, ResourceError) as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        InputControl.delete_instance()
        ResourceManager.delete_instance()
        manager.finalize()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())