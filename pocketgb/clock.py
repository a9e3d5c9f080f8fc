"""Frame-based accounting of CPU clock cycles."""

CPU_CLOCK_HZ = 4_194_304
"""Clock rate of the Game Boy CPU in hertz."""


class Clock:
    """Tracks clock and machine cycles elapsed within the current frame."""

    def __init__(self, cpu_clock_hz: int, fps: float) -> None:
        self.cpu_clock_hz = cpu_clock_hz
        self.clock_cycles_passed_frame = 0
        self.machine_cycles_passed_frame = 0
        self.clock_cycles_per_frame = int(cpu_clock_hz / fps)
        self.frame_time_s = 1.0 / fps

    def cycle(self, clock_cycles: int) -> None:
        """Account for ``clock_cycles`` clock cycles."""
        self.clock_cycles_passed_frame += clock_cycles
        self.machine_cycles_passed_frame += clock_cycles // 4

    def reset(self) -> None:
        """Start a new frame, carrying over cycles beyond the frame length."""
        remaining = self.clock_cycles_passed_frame - self.clock_cycles_per_frame
        if remaining < 0:
            raise ValueError("the current frame has not completed yet")
        self.clock_cycles_passed_frame = remaining
        self.machine_cycles_passed_frame = remaining // 4