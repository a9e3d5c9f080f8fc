from pocketgb.frame_sequencer import (
    CYCLES_LENGTH_COUNTER_TIMER,
    CYCLES_SWEEP_TIMER,
    CYCLES_VOLUME_ENVELOPE_TIMER,
    FrameSequencer,
)


def _firing_steps(seq, steps, attribute, cycles=4):
    fired = []
    for index in range(steps):
        seq.step(cycles)
        if getattr(seq, attribute):
            fired.append(index)
    return fired


def _expected_firings(total_steps, period_cycles):
    period_steps = period_cycles // 4
    return list(range(period_steps - 1, total_steps, period_steps))


def test_fresh_sequencer_has_no_triggers():
    seq = FrameSequencer()
    seq.step(0)
    assert (
        seq.volume_envelope_trigger,
        seq.length_counter_trigger,
        seq.sweep_timer_trigger,
    ) == (False, False, False)


def test_length_trigger_fires_once_per_period():
    seq = FrameSequencer()
    period_steps = CYCLES_LENGTH_COUNTER_TIMER // 4
    fired = _firing_steps(seq, period_steps * 2, "length_counter_trigger")
    assert fired == [period_steps - 1, 2 * period_steps - 1]


def test_sweep_trigger_fires_once_per_period():
    seq = FrameSequencer()
    period_steps = CYCLES_SWEEP_TIMER // 4
    fired = _firing_steps(seq, period_steps, "sweep_timer_trigger")
    assert fired == [period_steps - 1]


def test_trigger_schedules_over_envelope_period():
    total_steps = CYCLES_VOLUME_ENVELOPE_TIMER // 4

    volume = _firing_steps(FrameSequencer(), total_steps, "volume_envelope_trigger")
    length = _firing_steps(FrameSequencer(), total_steps, "length_counter_trigger")
    sweep = _firing_steps(FrameSequencer(), total_steps, "sweep_timer_trigger")

    assert volume == [total_steps - 1]
    assert length == _expected_firings(total_steps, CYCLES_LENGTH_COUNTER_TIMER)
    assert sweep == _expected_firings(total_steps, CYCLES_SWEEP_TIMER)
    assert len(length) == 2 * len(sweep)


def test_trigger_is_cleared_on_next_step():
    seq = FrameSequencer()
    for _ in range(CYCLES_LENGTH_COUNTER_TIMER // 4):
        seq.step(4)
    assert seq.length_counter_trigger is True
    seq.step(4)
    assert seq.length_counter_trigger is False


def test_reset_restarts_timers():
    seq = FrameSequencer()
    for _ in range(CYCLES_LENGTH_COUNTER_TIMER // 4 - 1):
        seq.step(4)
    seq.reset()
    seq.step(4)
    assert seq.length_counter_trigger is False

    other = FrameSequencer()
    for _ in range(CYCLES_LENGTH_COUNTER_TIMER // 4 - 1):
        other.step(4)
    other.step(4)
    assert other.length_counter_trigger is True