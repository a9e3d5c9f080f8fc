"""Square wave channel with optional frequency sweep."""

from pocketgb.frame_sequencer import FrameSequencer
from pocketgb.frequency_sweep import FrequencySweep, SweepResult
from pocketgb.length_counter import LengthCounter
from pocketgb.volume_envelope import VolumeEnvelope

_SIGNAL_MAX = 32767

DUTY_MAP = (
    (-1, -1, -1, -1, -1, -1, -1, 1),  # 12.5%
    (1, -1, -1, -1, -1, -1, -1, 1),  # 25%
    (1, -1, -1, -1, -1, 1, 1, 1),  # 50%
    (-1, 1, 1, 1, 1, 1, 1, -1),  # 75%
)


class SquareChannel:
    """A pulse channel driven by its five memory-mapped registers."""

    def __init__(self, base_address: int, sweep_enabled: bool) -> None:
        self.frequency = 0
        self.frequency_sweep = FrequencySweep() if sweep_enabled else None
        self.duty = 0
        self.volume_envelope = VolumeEnvelope()
        self.length_counter = LengthCounter(64)
        self.timer = 0
        self.waveform_pointer = 0
        self.enabled = False
        self.base_address = base_address

    def set_frequency_lsb(self, value: int) -> None:
        self.frequency = (self.frequency & 0x700) | value

    def set_frequency_msb(self, value: int) -> None:
        self.frequency = (self.frequency & 0xFF) | ((value & 0x7) << 8)

    def set_length_counter_length(self, value: int) -> None:
        self.length_counter.set_length(value & 0x3F)

    def set_duty(self, value: int) -> None:
        self.duty = (value & 0xC0) >> 6

    def trigger(self, value: int) -> None:
        """Restart the channel if bit 7 of ``value`` is set."""
        if not value & 0x80:
            return

        self.enabled = True
        self.volume_envelope.trigger()
        self.length_counter.trigger()
        self.timer = self._period()

        if self.frequency_sweep is not None:
            self._handle_sweep_result(self.frequency_sweep.trigger(self.frequency))

    def _period(self) -> int:
        return (2048 - self.frequency) * 4

    def _handle_sweep_result(self, result: SweepResult) -> None:
        if result is SweepResult.OVERFLOWED:
            self.enabled = False
        elif result is SweepResult.SWEPT and self.frequency_sweep is not None:
            self.frequency = self.frequency_sweep.frequency

    def step(self, frame_sequencer: FrameSequencer, clock_cycles: int) -> None:
        """Advance the channel by ``clock_cycles``."""
        if not self.enabled:
            return

        if frame_sequencer.volume_envelope_trigger:
            self.volume_envelope.step()
        if frame_sequencer.length_counter_trigger and self.length_counter.step():
            self.enabled = False
        if frame_sequencer.sweep_timer_trigger and self.frequency_sweep is not None:
            self._handle_sweep_result(self.frequency_sweep.step())

        if self.timer <= 0:
            self.timer += self._period()
            self.waveform_pointer = (self.waveform_pointer + 1) % 8

        if self._period() >= clock_cycles:
            self.timer -= clock_cycles

    def output(self) -> int:
        """Current signed sample of the channel."""
        if not self.enabled:
            return 0
        signal = DUTY_MAP[self.duty][self.waveform_pointer] * _SIGNAL_MAX
        return self.volume_envelope.process_signal(signal)

    def write(self, address: int, value: int) -> None:
        """Write one of the channel's registers."""
        if address < self.base_address:
            return

        register = address - self.base_address
        if register == 0:
            if self.frequency_sweep is not None:
                self.frequency_sweep.write(value)
        elif register == 1:
            self.set_duty(value)
            self.set_length_counter_length(value)
        elif register == 2:
            self.volume_envelope.write(value)
        elif register == 3:
            self.set_frequency_lsb(value)
        elif register == 4:
            self.set_frequency_msb(value)
            self.length_counter.set_enabled(value)
            self.trigger(value)