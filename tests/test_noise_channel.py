from pocketgb.frame_sequencer import FrameSequencer
from pocketgb.noise_channel import NoiseChannel

BASE = 0xFF1F


def _full_volume_channel(width_value=0x00):
    channel = NoiseChannel(BASE)
    channel.write(BASE + 2, 0xF0)
    channel.write(BASE + 3, width_value)
    channel.write(BASE + 4, 0x80)
    return channel


def test_output_is_silent_before_trigger():
    channel = NoiseChannel(BASE)
    assert channel.output() == 0
    assert channel.enabled is False


def test_trigger_requires_bit_seven():
    channel = NoiseChannel(BASE)
    channel.write(BASE + 4, 0x40)
    assert channel.enabled is False


def test_trigger_fills_lfsr_and_outputs_negative_full_scale():
    channel = _full_volume_channel()
    assert channel.lfsr == 0xFFFF
    assert channel.output() == -32767


def test_zero_volume_silences_output():
    channel = NoiseChannel(BASE)
    channel.write(BASE + 2, 0x00)
    channel.write(BASE + 4, 0x80)
    assert channel.enabled is True
    assert channel.output() == 0


def test_register_three_fields():
    channel = NoiseChannel(BASE)
    channel.write(BASE + 3, 0x5B)
    assert channel.clock_shift == 0x5
    assert channel.lfsr_width_mode == 1
    assert channel.divisor_code == 0x3


def test_lfsr_cycles_after_timer_expires_in_wide_mode():
    channel = _full_volume_channel()
    sequencer = FrameSequencer()
    start_timer = channel.timer
    channel.step(sequencer, start_timer)
    assert channel.lfsr == 0xFFFF
    channel.step(sequencer, 4)
    assert channel.lfsr < 0x8000
    assert channel.lfsr != 0xFFFF


def test_lfsr_is_narrow_in_seven_bit_mode():
    channel = _full_volume_channel(width_value=0x08)
    sequencer = FrameSequencer()
    for _ in range(50):
        channel.step(sequencer, 8)
        assert channel.lfsr <= 0x1FFF


def test_length_counter_disables_channel():
    channel = NoiseChannel(BASE)
    channel.write(BASE + 1, 63)
    channel.write(BASE + 2, 0xF0)
    channel.write(BASE + 4, 0xC0)
    assert channel.enabled is True
    sequencer = FrameSequencer()
    sequencer.length_counter_trigger = True
    channel.step(sequencer, 4)
    assert channel.enabled is False
    assert channel.output() == 0


def test_writes_below_base_address_are_ignored():
    channel = NoiseChannel(BASE)
    channel.write(BASE - 1, 0xFF)
    assert channel.enabled is False
    assert channel.clock_shift == 0