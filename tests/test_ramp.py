import pytest
from hypothesis import given
from hypothesis import strategies as st

from sentrybot.ramp import SpeedRamp


def test_step_adds_rate():
    ramp = SpeedRamp(count=0.0, rate=5.0, min_count=-100, max_count=100)
    assert ramp.step() == 5
    assert ramp.step() == 10
    assert ramp.count == 10.0


def test_step_clamps_to_max_and_min():
    ramp = SpeedRamp(count=0.0, rate=30.0, min_count=-50, max_count=50)
    results = [ramp.step() for _ in range(5)]
    assert results[-1] == ramp.max_count
    ramp.rate = -30.0
    results = [ramp.step() for _ in range(10)]
    assert results[-1] == ramp.min_count


@given(
    st.floats(min_value=-1000, max_value=1000, allow_nan=False),
    st.integers(min_value=-1000, max_value=0),
    st.integers(min_value=0, max_value=1000),
)
def test_step_stays_within_bounds(rate, lo, hi):
    ramp = SpeedRamp(rate=rate, min_count=lo, max_count=hi)
    for _ in range(20):
        value = ramp.step()
        assert lo <= value <= hi


def test_step_truncates_fraction():
    ramp = SpeedRamp(rate=-2.5, min_count=-100, max_count=100)
    assert ramp.step() == int(-2.5)


def test_decay_zeroes_small_count():
    ramp = SpeedRamp(count=3.0, rate=5.0, min_count=-100, max_count=100)
    ramp.decay()
    assert ramp.count == 0


def test_decay_shrinks_by_a_fifth():
    ramp = SpeedRamp(count=50.0, rate=5.0, min_count=-100, max_count=100)
    ramp.decay()
    assert ramp.count == pytest.approx(50.0 * 0.8)


@given(st.floats(min_value=-30000, max_value=30000, allow_nan=False))
def test_decay_reaches_zero(start):
    ramp = SpeedRamp(count=start, rate=1.0, min_count=-32768, max_count=32767)
    for _ in range(200):
        previous = abs(ramp.count)
        ramp.decay()
        assert abs(ramp.count) <= previous
    assert ramp.count == 0


def test_out_of_range_bounds_rejected():
    with pytest.raises(ValueError):
        SpeedRamp(max_count=40000)
    with pytest.raises(ValueError):
        SpeedRamp(min_count=-40000)