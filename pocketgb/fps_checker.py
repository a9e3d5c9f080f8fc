"""Measures frame rate to decide whether rendering must be throttled."""

import time


class FpsChecker:
    """Averages frames per second over two one-second samples, then stops."""

    def __init__(self, fps_bound: int) -> None:
        self.fps_bound = fps_bound
        self.average_frames = 0
        self._frame_counter = 0
        self._started = time.monotonic()
        self._frame_sum = 0
        self._sample_count = 0
        self._active = True

    def count_frame(self) -> None:
        """Record one rendered frame."""
        if not self._active:
            return

        self._frame_counter += 1

        if time.monotonic() - self._started >= 1.0:
            self._frame_sum += self._frame_counter
            self._sample_count += 1
            self._frame_counter = 0
            self._started = time.monotonic()

            if self._sample_count > 1:
                self.average_frames = self._frame_sum // self._sample_count
                self._frame_sum = 0
                self._sample_count = 0
                self._active = False

    def should_limit_frames(self) -> bool:
        """True once measuring is done and the average exceeded the bound."""
        if self._active:
            return False
        return self.average_frames > self.fps_bound