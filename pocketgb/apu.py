"""Audio processing unit: the four channels, mixer and sample output."""

from abc import ABC, abstractmethod

from pocketgb.clock import CPU_CLOCK_HZ
from pocketgb.frame_sequencer import FrameSequencer
from pocketgb.mixer import Mixer
from pocketgb.noise_channel import NoiseChannel
from pocketgb.square_channel import SquareChannel
from pocketgb.wave_channel import WaveChannel

SQUARE_CHANNEL_1_START_ADDRESS = 0xFF10
SQUARE_CHANNEL_1_END_ADDRESS = 0xFF14
SQUARE_CHANNEL_2_START_ADDRESS = 0xFF15
SQUARE_CHANNEL_2_END_ADDRESS = 0xFF19
WAVE_CHANNEL_START_ADDRESS = 0xFF1A
WAVE_CHANNEL_END_ADDRESS = 0xFF1E
NOISE_CHANNEL_START_ADDRESS = 0xFF1F
NOISE_CHANNEL_END_ADDRESS = 0xFF23


class AudioOutput(ABC):
    """Destination for the stereo samples the APU produces."""

    @abstractmethod
    def output(self, sample: tuple[int, int]) -> None:
        """Accept one (left, right) sample."""

    @abstractmethod
    def get_sample_rate(self) -> int:
        """Sample rate of the output in hertz."""


class Apu:
    """Steps the sound hardware and feeds mixed samples to an output."""

    def __init__(self, audio_output: AudioOutput) -> None:
        sample_rate = audio_output.get_sample_rate()
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        output_step = CPU_CLOCK_HZ // sample_rate
        if output_step == 0:
            raise ValueError("sample rate exceeds the CPU clock rate")

        self.audio_output = audio_output
        self.frame_sequencer = FrameSequencer()
        self.square_channel1 = SquareChannel(SQUARE_CHANNEL_1_START_ADDRESS, True)
        self.square_channel2 = SquareChannel(SQUARE_CHANNEL_2_START_ADDRESS, False)
        self.wave_channel = WaveChannel(WAVE_CHANNEL_START_ADDRESS)
        self.noise_channel = NoiseChannel(NOISE_CHANNEL_START_ADDRESS)
        self.mixer = Mixer()
        self.clock = 0
        self.output_step = output_step
        self.enabled = False

    def step(self, clock_cycles: int) -> None:
        """Advance the hardware and emit any samples now due."""
        self.clock += clock_cycles

        if self.enabled:
            self.frame_sequencer.step(clock_cycles)
            for channel in (
                self.square_channel1,
                self.square_channel2,
                self.wave_channel,
                self.noise_channel,
            ):
                channel.step(self.frame_sequencer, clock_cycles)

        while self.clock >= self.output_step:
            sample = self.mixer.mix(
                self.enabled,
                self.square_channel1,
                self.square_channel2,
                self.wave_channel,
                self.noise_channel,
            )
            self.audio_output.output(sample)
            self.clock -= self.output_step

    def write(self, address: int, value: int) -> None:
        """Write a sound register."""
        if SQUARE_CHANNEL_1_START_ADDRESS <= address <= SQUARE_CHANNEL_1_END_ADDRESS:
            self.square_channel1.write(address, value)
        elif SQUARE_CHANNEL_2_START_ADDRESS <= address <= SQUARE_CHANNEL_2_END_ADDRESS:
            self.square_channel2.write(address, value)
        elif WAVE_CHANNEL_START_ADDRESS <= address <= WAVE_CHANNEL_END_ADDRESS:
            self.wave_channel.write(address, value)
        elif NOISE_CHANNEL_START_ADDRESS <= address <= NOISE_CHANNEL_END_ADDRESS:
            self.noise_channel.write(address, value)
        elif 0xFF24 <= address <= 0xFF25:
            self.mixer.write(address, value)
        elif address == 0xFF26:
            self.enabled = bool(value & 0x80)
            if self.enabled:
                self.frame_sequencer.reset()
        elif 0xFF30 <= address <= 0xFF3F:
            self.wave_channel.write_wavetable(address, value)

    def read(self, address: int) -> int:
        """Read a sound register; unsupported registers read as zero."""
        if 0xFF24 <= address <= 0xFF26:
            return self.mixer.read(address)
        return 0