"""Noise channel driven by a linear-feedback shift register."""

from pocketgb.frame_sequencer import FrameSequencer
from pocketgb.length_counter import LengthCounter
from pocketgb.volume_envelope import VolumeEnvelope

DIVISOR_CODE_MAP = (8, 16, 32, 48, 64, 80, 96, 112)

_SIGNAL_MAX = 32767


class NoiseChannel:
    """The noise channel driven by its memory-mapped registers."""

    def __init__(self, base_address: int) -> None:
        self.volume_envelope = VolumeEnvelope()
        self.length_counter = LengthCounter(64)
        self.timer = 0
        self.lfsr = 0
        self.clock_shift = 0
        self.lfsr_width_mode = 0
        self.divisor_code = 0
        self.enabled = False
        self.base_address = base_address

    def _period(self) -> int:
        return DIVISOR_CODE_MAP[self.divisor_code] << self.clock_shift

    def trigger(self, value: int) -> None:
        """Restart the channel if bit 7 of ``value`` is set."""
        if not value & 0x80:
            return
        self.lfsr = 0xFFFF
        self.enabled = True
        self.volume_envelope.trigger()
        self.length_counter.trigger()
        self.timer = self._period()

    def _cycle_lfsr(self) -> None:
        bit_0 = self.lfsr & 0x1
        bit_1 = (self.lfsr & 0x2) >> 1
        feedback = bit_1 ^ bit_0
        self.lfsr = ((self.lfsr & 0x7FFF) | (feedback << 15)) >> 1
        if self.lfsr_width_mode == 1:
            self.lfsr = (self.lfsr & 0x1FBF) | (feedback << 6)

    def step(self, frame_sequencer: FrameSequencer, clock_cycles: int) -> None:
        """Advance the channel by ``clock_cycles``."""
        if not self.enabled:
            return

        if frame_sequencer.length_counter_trigger and self.length_counter.step():
            self.enabled = False
        if frame_sequencer.volume_envelope_trigger:
            self.volume_envelope.step()

        if self.timer <= 0:
            self._cycle_lfsr()
            self.timer += self._period()

        self.timer -= clock_cycles

    def output(self) -> int:
        """Current signed sample of the channel."""
        if not self.enabled:
            return 0
        signal = _SIGNAL_MAX if self.lfsr & 0x1 == 0 else -_SIGNAL_MAX
        return self.volume_envelope.process_signal(signal)

    def write(self, address: int, value: int) -> None:
        """Write one of the channel's registers."""
        if address < self.base_address:
            return

        register = address - self.base_address
        if register == 1:
            self.length_counter.set_length(value & 0x3F)
        elif register == 2:
            self.volume_envelope.write(value)
        elif register == 3:
            self.clock_shift = (value & 0xF0) >> 4
            self.lfsr_width_mode = (value & 0x8) >> 3
            self.divisor_code = value & 0x7
        elif register == 4:
            self.length_counter.set_enabled(value)
            self.trigger(value)