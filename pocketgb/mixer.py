"""Stereo mixer combining the four sound channels."""

from typing import Protocol

BASE_ADDRESS = 0xFF24


class _Channel(Protocol):
    def output(self) -> int: ...


def _quarter(signal: int) -> int:
    """Divide by four, truncating toward zero."""
    quarter = abs(signal) // 4
    return -quarter if signal < 0 else quarter


class Mixer:
    """Routes each channel to the left and/or right output."""

    def __init__(self) -> None:
        self.square1_left_enabled = False
        self.square1_right_enabled = False
        self.square2_left_enabled = False
        self.square2_right_enabled = False
        self.wave_left_enabled = False
        self.wave_right_enabled = False
        self.noise_left_enabled = False
        self.noise_right_enabled = False

    def mix(
        self,
        enabled: bool,
        square_channel1: _Channel,
        square_channel2: _Channel,
        wave_channel: _Channel,
        noise_channel: _Channel,
    ) -> tuple[int, int]:
        """Return the (left, right) sample of all routed channels."""
        left = right = 0
        if not enabled:
            return left, right

        routes = (
            (self.square1_left_enabled, self.square1_right_enabled, square_channel1),
            (self.square2_left_enabled, self.square2_right_enabled, square_channel2),
            (self.wave_left_enabled, self.wave_right_enabled, wave_channel),
            (self.noise_left_enabled, self.noise_right_enabled, noise_channel),
        )
        for to_left, to_right, channel in routes:
            signal = _quarter(channel.output())
            if to_left:
                left += signal
            if to_right:
                right += signal
        return left, right

    def write(self, address: int, value: int) -> None:
        """Write a mixer register."""
        if address < BASE_ADDRESS:
            return
        if address - BASE_ADDRESS == 1:
            self._set_channel_enables(value)

    def read(self, address: int) -> int:
        """Read a mixer register."""
        if address < BASE_ADDRESS:
            return 0
        if address - BASE_ADDRESS == 1:
            return self._channel_enables()
        return 0

    def _set_channel_enables(self, value: int) -> None:
        self.square1_left_enabled = value & 0x10 == 0x10
        self.square1_right_enabled = value & 0x01 == 0x01
        self.square2_left_enabled = value & 0x20 == 0x20
        self.square2_right_enabled = value & 0x02 == 0x02
        self.wave_left_enabled = value & 0x40 == 0x40
        self.wave_right_enabled = value & 0x04 == 0x04
        self.noise_left_enabled = value & 0x80 == 0x80
        self.noise_right_enabled = value & 0x08 == 0x08

    def _channel_enables(self) -> int:
        flags = (
            (self.square1_left_enabled, 0x10),
            (self.square1_right_enabled, 0x01),
            (self.square2_left_enabled, 0x20),
            (self.square2_right_enabled, 0x02),
            (self.wave_left_enabled, 0x40),
            (self.wave_right_enabled, 0x04),
            (self.noise_left_enabled, 0x80),
            (self.noise_right_enabled, 0x08),
        )
        result = 0
        for flag, bit in flags:
            if flag:
                result |= bit
        return result