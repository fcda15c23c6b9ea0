"""Frame pacing and frame-rate measurement."""

from __future__ import annotations

import time
from collections.abc import Callable

import pygame

from bocchi.settings import FRAMERATE

_FONT_SIZE = 20
_TEXT_COLOR = (255, 255, 255)


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def _sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000.0)


class FpsController:
    """Keeps frames at a fixed rate and measures the rate achieved.

    ``clock`` returns the current time in milliseconds and ``sleep`` waits for
    a number of milliseconds; both default to the real clock.
    """

    def __init__(
        self,
        refresh_rate: float = FRAMERATE,
        update_time: int = 800,
        clock: Callable[[], int] | None = None,
        sleep: Callable[[int], None] | None = None,
    ) -> None:
        self._clock = clock or _now_ms
        self._sleep = sleep or _sleep_ms
        self.frame_time = int(1000.0 / refresh_rate)
        self.update_time = update_time
        self.wait_time = 0
        self.last_time = 0
        self.now_time = 0
        self.count = 0.0
        self.fps = 0.0
        self.last_update = 0
        self._font: pygame.font.Font | None = None

    def wait(self) -> None:
        """Sleep for whatever remains of the current frame."""
        self.now_time = self._clock()
        self.wait_time = self.frame_time - (self.now_time - self.last_time)
        if self.wait_time > 0:
            self._sleep(self.wait_time)
        self.last_time = self._clock()

    def get(self) -> float:
        """Count a frame and refresh the measured rate once per update period."""
        self.count += 1.0
        elapsed = self.last_time - self.last_update
        if self.update_time < elapsed:
            self.fps = self.count / float(elapsed) * 1000.0
            self.last_update = self.last_time
            self.count = 0.0
        return self.fps

    def all(self) -> float:
        """Measure, then pace; returns the measured rate."""
        self.get()
        self.wait()
        return self.fps

    def update_frame_rate(self, refresh_rate: float) -> None:
        self.frame_time = int(1000.0 / refresh_rate)

    def draw(self, surface: pygame.Surface) -> None:
        """Write the measured rate in the top-left corner of ``surface``."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        text = self._font.render(f"{self.fps:f}", True, _TEXT_COLOR)
        surface.blit(text, (0, 0))