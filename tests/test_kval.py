import pytest

from mcf8316.kval import (
    CurrentKiVal,
    CurrentKpVal,
    SpeedKiVal,
    SpeedKpVal,
    SpeedLoopKpHigh3,
    SpeedLoopKpLow7,
)


def test_auto_is_zero():
    assert CurrentKpVal.auto().raw_value() == 0
    assert SpeedKiVal.auto() == SpeedKiVal.new_with_raw_value(0)


def test_scale_and_value_round_trip():
    k = CurrentKpVal.auto()
    k.set_scale(2)
    k.set_value(77)
    assert k.scale() == 2
    assert k.value() == 77
    rebuilt = CurrentKpVal.new_with_raw_value(k.raw_value())
    assert rebuilt == k


def test_set_value_keeps_scale_and_set_scale_keeps_value():
    k = CurrentKiVal.auto()
    k.set_scale(3)
    k.set_value(255)
    k.set_value(1)
    assert k.scale() == 3
    k.set_scale(0)
    assert k.value() == 1


def test_calculated_value_scale_zero():
    k = CurrentKpVal.auto()
    k.set_value(200)
    assert k.calculated_value() == pytest.approx(200.0)


@pytest.mark.parametrize("raw", [0x001, 0x155, 0x2FF, 0x3A0])
def test_multipliers_relative_to_current_kp(raw):
    base = CurrentKpVal.new_with_raw_value(raw).calculated_value()
    assert CurrentKiVal.new_with_raw_value(raw).calculated_value() == pytest.approx(base * 1000)
    assert SpeedKpVal.new_with_raw_value(raw).calculated_value() == pytest.approx(base * 0.01)
    assert SpeedKiVal.new_with_raw_value(raw).calculated_value() == pytest.approx(base * 0.1)


def test_higher_scale_divides_by_ten():
    low = CurrentKpVal.auto()
    low.set_value(50)
    high = CurrentKpVal.new_with_raw_value(low.raw_value())
    high.set_scale(1)
    assert high.calculated_value() == pytest.approx(low.calculated_value() / 10)


def test_from_high_low_joins_parts():
    high = SpeedLoopKpHigh3(0b101)
    low = SpeedLoopKpLow7(0b0110011)
    k = SpeedKpVal.from_high_low(high, low)
    assert k.raw_value() >> 7 == high.inner
    assert k.raw_value() & 0x7F == low.inner


def test_from_high_low_max():
    k = SpeedKpVal.from_high_low(SpeedLoopKpHigh3(7), SpeedLoopKpLow7(0x7F))
    assert k.raw_value() == 0x3FF


def test_different_types_not_equal():
    assert CurrentKpVal.new_with_raw_value(5) != CurrentKiVal.new_with_raw_value(5)


@pytest.mark.parametrize("bad", [-1, 0x400])
def test_raw_value_out_of_range(bad):
    with pytest.raises(ValueError):
        CurrentKpVal.new_with_raw_value(bad)


def test_setters_reject_out_of_range():
    k = SpeedKiVal.auto()
    with pytest.raises(ValueError):
        k.set_scale(4)
    with pytest.raises(ValueError):
        k.set_value(256)
    assert k.raw_value() == 0


def test_parts_reject_out_of_range():
    with pytest.raises(ValueError):
        SpeedLoopKpHigh3(8)
    with pytest.raises(ValueError):
        SpeedLoopKpLow7(0x80)


def test_parts_raw_round_trip():
    assert SpeedLoopKpHigh3.new_with_raw_value(6).raw_value() == 6
    assert SpeedLoopKpLow7.new_with_raw_value(100).raw_value() == 100