from pocketgb.volume_envelope import VolumeEnvelope


def _envelope(register):
    envelope = VolumeEnvelope()
    envelope.write(register)
    envelope.trigger()
    return envelope


def test_write_splits_register():
    envelope = VolumeEnvelope()
    envelope.write(0xA9)
    assert envelope.starting_volume == 0xA
    assert envelope.add_mode == 1
    envelope.trigger()
    assert envelope.current_volume == 0xA
    assert envelope.period == 0x1


def test_full_volume_passes_signal():
    envelope = _envelope(0xF0)
    assert envelope.process_signal(32767) == 32767
    assert envelope.process_signal(-32767) == -32767


def test_zero_volume_silences():
    envelope = _envelope(0x00)
    assert envelope.process_signal(32767) == 0
    assert envelope.process_signal(-32767) == 0


def test_negative_signal_truncates_toward_zero():
    envelope = _envelope(0x10)
    assert envelope.process_signal(-20) == -1
    assert envelope.process_signal(-20) == -envelope.process_signal(20)


def test_decreasing_envelope_saturates_at_zero():
    envelope = _envelope(0xF1)
    envelope.step()
    assert envelope.current_volume == 14
    for _ in range(40):
        envelope.step()
    assert envelope.current_volume == 0


def test_increasing_envelope():
    envelope = _envelope(0x09)
    for expected in range(1, 6):
        envelope.step()
        assert envelope.current_volume == expected


def test_zero_period_freezes_volume():
    envelope = _envelope(0x80)
    for _ in range(10):
        envelope.step()
    assert envelope.current_volume == 8


def test_period_spreads_changes():
    envelope = _envelope(0xF3)
    volumes = []
    for _ in range(6):
        envelope.step()
        volumes.append(envelope.current_volume)
    assert volumes == [15, 15, 14, 14, 14, 13]


def test_volume_scaling_is_monotonic():
    outputs = [_envelope(volume << 4).process_signal(32767) for volume in range(16)]
    assert outputs == sorted(outputs)
    assert outputs[0] == 0
    assert outputs[-1] == 32767