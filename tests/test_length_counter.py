from pocketgb.length_counter import LengthCounter


def _steps_until_disable(counter, limit=1000):
    for index in range(1, limit + 1):
        if counter.step():
            return index
    return None


def test_set_enabled_reads_bit_six():
    counter = LengthCounter(64)
    counter.set_enabled(0x40)
    assert counter.enabled is True
    counter.set_enabled(0xBF)
    assert counter.enabled is False


def test_counts_down_to_disable():
    counter = LengthCounter(64)
    counter.set_length(60)
    counter.set_enabled(0x40)
    results = [counter.step() for _ in range(4)]
    assert results == [False, False, False, True]
    assert counter.enabled is False


def test_no_disable_when_not_enabled():
    counter = LengthCounter(64)
    counter.set_length(63)
    assert not any(counter.step() for _ in range(100))
    assert counter.counter == 1


def test_trigger_reloads_expired_counter():
    counter = LengthCounter(256)
    counter.trigger()
    assert counter.counter == counter.counter_size
    counter.set_enabled(0x40)
    assert _steps_until_disable(counter) == counter.counter_size


def test_trigger_keeps_running_counter():
    counter = LengthCounter(64)
    counter.set_length(50)
    before = counter.counter
    counter.trigger()
    assert counter.counter == before


def test_step_after_disable_reports_nothing():
    counter = LengthCounter(64)
    counter.set_length(63)
    counter.set_enabled(0x40)
    assert counter.step() is True
    assert counter.step() is False