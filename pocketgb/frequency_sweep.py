"""Frequency sweep unit of the first square channel."""

from enum import Enum


class SweepResult(Enum):
    """Outcome of clocking or triggering the sweep unit."""

    NONE = "none"
    OVERFLOWED = "overflowed"
    SWEPT = "swept"


_MAX_FREQUENCY = 2047


class FrequencySweep:
    """Periodically shifts the channel frequency up or down."""

    def __init__(self) -> None:
        self.frequency = 0
        self._period = 0
        self._period_load = 0
        self._period_counter = 0
        self._negate = 0
        self._shift = 0
        self.enabled = False

    def write(self, value: int) -> None:
        """Load period, direction and shift from the sweep register."""
        self._period_load = (value & 0x70) >> 4
        self._negate = (value & 0x08) >> 3
        self._shift = value & 0x07

    def step(self) -> SweepResult:
        """Clock the sweep; on ``SWEPT`` the new value is in ``frequency``."""
        if not self.enabled:
            return SweepResult.NONE

        self._period -= 1
        if self._period <= 0:
            self._period = self._period_load
            if self._period == 0:
                return SweepResult.NONE
            if not self.calculate_frequency():
                return SweepResult.OVERFLOWED
            return SweepResult.SWEPT

        return SweepResult.NONE

    def calculate_frequency(self) -> bool:
        """Apply one sweep; return False if the result is out of range."""
        delta = self.frequency >> self._shift
        if self._negate == 0:
            frequency = self.frequency + delta
            if frequency > _MAX_FREQUENCY:
                return False
        else:
            frequency = self.frequency - delta
            if frequency < 0:
                return False
        self.frequency = frequency
        return True

    def trigger(self, frequency: int) -> SweepResult:
        """Restart the sweep from ``frequency``."""
        self.frequency = frequency
        self._period_counter = 0
        if self._shift > 0 and self._period_load > 0:
            self._period = self._period_load
            self.enabled = True
        else:
            self.enabled = False
        return SweepResult.NONE