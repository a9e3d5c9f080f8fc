"""Programmable wave channel playing 4-bit samples from a wavetable."""

from pocketgb.frame_sequencer import FrameSequencer
from pocketgb.length_counter import LengthCounter

WAVETABLE_START_ADDRESS = 0xFF30
WAVETABLE_SIZE = 32

_SIGNAL_MAX = 32767
_VOLUME_SHIFTS = {0: 4, 1: 0, 2: 1, 3: 2}


class WaveChannel:
    """The wave channel driven by its five registers and the wavetable."""

    def __init__(self, base_address: int) -> None:
        self.frequency = 0
        self.length_counter = LengthCounter(256)
        self.timer = 0
        self.wavetable_pointer = 0
        self.enabled = False
        self.wavetable = [0] * WAVETABLE_SIZE
        self.volume_code = 0
        self.dac_enabled = False
        self.base_address = base_address

    def set_frequency_lsb(self, value: int) -> None:
        self.frequency = (self.frequency & 0x700) | value

    def set_frequency_msb(self, value: int) -> None:
        self.frequency = (self.frequency & 0xFF) | ((value & 0x7) << 8)

    def set_volume_code(self, value: int) -> None:
        self.volume_code = (value & 0x60) >> 5

    def set_dac_power(self, value: int) -> None:
        """Power the DAC from bit 7; powering off also stops the channel."""
        if value & 0x80:
            self.dac_enabled = True
            return
        self.dac_enabled = False
        self.enabled = False

    def write_wavetable(self, address: int, value: int) -> None:
        """Store the two 4-bit samples packed in ``value``."""
        offset = address - WAVETABLE_START_ADDRESS
        if not 0 <= offset < WAVETABLE_SIZE // 2:
            raise ValueError(f"address 0x{address:X} is outside the wavetable")
        position = offset * 2
        self.wavetable[position] = (value & 0xF0) >> 4
        self.wavetable[position + 1] = value & 0xF

    def trigger(self, value: int) -> None:
        """Restart playback if bit 7 of ``value`` is set."""
        if not value & 0x80:
            return
        if self.dac_enabled:
            self.enabled = True
        self.timer = self._period()
        self.length_counter.trigger()
        self.wavetable_pointer = 0

    def _period(self) -> int:
        return (2048 - self.frequency) * 2

    def _process_signal(self, sample: int) -> int:
        if not self.dac_enabled or self.volume_code == 0:
            return 0
        unit = _SIGNAL_MAX // 7
        if sample <= 7:
            out = -(unit * (7 - sample))
        else:
            out = unit * (sample - 8)
        return out >> _VOLUME_SHIFTS[self.volume_code]

    def step(self, frame_sequencer: FrameSequencer, clock_cycles: int) -> None:
        """Advance the channel by ``clock_cycles``."""
        if not self.enabled:
            return

        if frame_sequencer.length_counter_trigger and self.length_counter.step():
            self.enabled = False

        if self.timer <= 0:
            self.timer += self._period()
            self.wavetable_pointer = (self.wavetable_pointer + 1) % WAVETABLE_SIZE

        if self._period() >= clock_cycles:
            self.timer -= clock_cycles

    def output(self) -> int:
        """Current signed sample of the channel."""
        if not self.enabled:
            return 0
        return self._process_signal(self.wavetable[self.wavetable_pointer])

    def write(self, address: int, value: int) -> None:
        """Write one of the channel's registers."""
        if address < self.base_address:
            return

        register = address - self.base_address
        if register == 0:
            self.set_dac_power(value)
        elif register == 1:
            self.length_counter.set_length(value)
        elif register == 2:
            self.set_volume_code(value)
        elif register == 3:
            self.set_frequency_lsb(value)
        elif register == 4:
            self.trigger(value)
            self.set_frequency_msb(value)
            self.length_counter.set_enabled(value)