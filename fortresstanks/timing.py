"""Frame timing: delta time and frames per second."""

from __future__ import annotations

import time
from collections.abc import Callable


class TimeManager:
    """Measures the time between frames and the frame rate over each second."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._prev = 0.0
        self._delta_time = 0.0
        self._frame_count = 0
        self._frame_time = 0.0
        self._fps = 0

    @property
    def delta_time(self) -> float:
        """Seconds elapsed between the last two updates."""
        return self._delta_time

    @property
    def fps(self) -> int:
        """Frames counted over the most recent full second."""
        return self._fps

    def init(self) -> None:
        """Start measuring from now."""
        self._prev = self._clock()

    def update(self) -> None:
        """Record a frame."""
        now = self._clock()
        self._delta_time = now - self._prev
        self._prev = now

        self._frame_count += 1
        self._frame_time += self._delta_time

        if self._frame_time >= 1.0:
            self._fps = int(self._frame_count / self._frame_time)
            self._frame_time = 0.0
            self._frame_count = 0