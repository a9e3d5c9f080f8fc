"""Frame sequencer that clocks the envelope, length and sweep units."""

from pocketgb.clock import CPU_CLOCK_HZ

CYCLES_VOLUME_ENVELOPE_TIMER = CPU_CLOCK_HZ // 64
CYCLES_LENGTH_COUNTER_TIMER = CPU_CLOCK_HZ // 256
CYCLES_SWEEP_TIMER = CPU_CLOCK_HZ // 128


class FrameSequencer:
    """Raises a trigger flag for each unit when its period has elapsed.

    A trigger stays set only for the step in which its period completed.
    """

    def __init__(self) -> None:
        self.volume_envelope_trigger = False
        self.length_counter_trigger = False
        self.sweep_timer_trigger = False
        self._volume_envelope_timer = 0
        self._length_counter_timer = 0
        self._sweep_timer = 0

    def step(self, clock_cycles: int) -> None:
        """Advance all timers by ``clock_cycles``."""
        self._volume_envelope_timer, self.volume_envelope_trigger = _cycle_timer(
            self._volume_envelope_timer, CYCLES_VOLUME_ENVELOPE_TIMER, clock_cycles
        )
        self._length_counter_timer, self.length_counter_trigger = _cycle_timer(
            self._length_counter_timer, CYCLES_LENGTH_COUNTER_TIMER, clock_cycles
        )
        self._sweep_timer, self.sweep_timer_trigger = _cycle_timer(
            self._sweep_timer, CYCLES_SWEEP_TIMER, clock_cycles
        )

    def reset(self) -> None:
        """Restart all timers from zero."""
        self._volume_envelope_timer = 0
        self._length_counter_timer = 0
        self._sweep_timer = 0


def _cycle_timer(timer: int, limit: int, clock_cycles: int) -> tuple[int, bool]:
    timer += clock_cycles
    if limit <= timer:
        return timer - limit, True
    return timer, False