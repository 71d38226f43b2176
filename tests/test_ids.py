# tests/test_ids.py
from eventflow.lib.ids import MonotonicIdGenerator

def test_uses_millisecond_timestamps():
    ids = MonotonicIdGenerator(clock=lambda: 1_700_000_000.5)
    assert ids() == 1_700_000_000_500

def test_same_millisecond_still_unique():
    ids = MonotonicIdGenerator(clock=lambda: 1_700_000_000.0)
    issued = [ids() for _ in range(5)]
    assert issued == sorted(set(issued))
    assert len(issued) == 5

def test_clock_going_backwards():
    ticks = iter([2.0, 1.0])
    ids = MonotonicIdGenerator(clock=lambda: next(ticks))
    assert ids() == 2000
    assert ids() == 2001

def test_seed_skips_past_existing_ids():
    ids = MonotonicIdGenerator(clock=lambda: 1.0)
    ids.seed([5000, 12, 4000])
    assert ids() == 5001
