"""Frame pacing, frame-rate counting and world time keeping."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

TARGET_FPS = 60
FRAME_DURATION_MS = 1000 // TARGET_FPS
FRAME_DURATION_S = FRAME_DURATION_MS / 1000


@dataclass
class FrameClock:
    """Counts frames, tracks world time and paces the main loop."""

    clock: Callable[[], float] = time.perf_counter
    wall_clock: Callable[[], float] = time.time
    sleep: Callable[[float], None] = time.sleep

    frame_count: int = 0
    fps: int = 0
    world_time: float = 0.0
    world_epoch: float = 0.0
    world_time_last_reset: int = 0
    paused: bool = False

    _last_frame_time: float = field(default=0.0, repr=False)
    _current_second: Optional[int] = field(default=None, repr=False)
    _frames_this_second: int = field(default=0, repr=False)

    @property
    def is_paused(self) -> bool:
        return self.paused

    def new_frame(self) -> None:
        """Advance the frame counter and world clocks by one frame."""
        self.frame_count += 1
        self.world_time += FRAME_DURATION_S
        if not self.paused:
            self.world_epoch += FRAME_DURATION_S

        second = int(self.wall_clock())
        self._frames_this_second += 1
        if self._current_second is None or second > self._current_second:
            self._current_second = second
            self.fps = self._frames_this_second
            self._frames_this_second = 0

    def wait_for_next_frame(self) -> None:
        """Sleep for whatever remains of the frame's time budget."""
        elapsed_ms = (self.clock() - self._last_frame_time) * 1000.0
        if elapsed_ms < FRAME_DURATION_MS:
            self.sleep((FRAME_DURATION_MS - elapsed_ms) / 1000.0)
        self._last_frame_time = self.clock()

    def reset_world_epoch(self) -> None:
        """Restart the epoch and remember when it was reset."""
        self.world_epoch = 0.0
        self.world_time_last_reset = int(self.world_time)

    def pause(self) -> None:
        """Stop the world epoch from advancing."""
        self.paused = True

    def resume(self) -> None:
        """Let the world epoch advance again."""
        self.paused = False