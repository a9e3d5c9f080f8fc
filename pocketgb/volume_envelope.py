"""Volume envelope shared by the square and noise channels."""

_MAX_VOLUME = 15


class VolumeEnvelope:
    """Scales a channel signal and ramps the volume up or down over time."""

    def __init__(self) -> None:
        self.starting_volume = 0
        self.add_mode = 0
        self.period = 0
        self._period_load = 0
        self.current_volume = 0
        self._period_counter = 0

    def step(self) -> None:
        """Clock the envelope, adjusting the volume once per period."""
        if self.period == 0:
            return

        if self._period_counter < self.period - 1:
            self._period_counter += 1
            return

        self._period_counter = 0
        if self.add_mode == 0:
            self.current_volume = max(self.current_volume - 1, 0)
        else:
            self.current_volume = (self.current_volume + 1) & 0xFF

    def process_signal(self, signal: int) -> int:
        """Scale ``signal`` by the current volume."""
        if self.current_volume < _MAX_VOLUME:
            step = abs(signal) // _MAX_VOLUME
            if signal < 0:
                step = -step
            return step * self.current_volume
        return signal

    def write(self, value: int) -> None:
        """Load start volume, direction and period from the envelope register."""
        self.starting_volume = (value & 0xF0) >> 4
        self.add_mode = (value & 0x08) >> 3
        self._period_load = value & 0x07

    def trigger(self) -> None:
        """Restart the envelope from its programmed values."""
        self.current_volume = self.starting_volume
        self.period = self._period_load
        self._period_counter = 0