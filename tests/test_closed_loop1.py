import pytest

from mcf8316.closed_loop1 import (
    ClosedLoop1,
    ClosedLoopAcceleration,
    FgBemfThreshold,
    FgDiv,
    FgSelect,
    PwmOutputFrequency,
)


def test_default_fields():
    reg = ClosedLoop1()
    assert reg.ADDRESS == 0x0088
    assert reg.value() == 0
    assert reg.cl_acc is ClosedLoopAcceleration.HZ0_5
    assert reg.pwm_freq_out is PwmOutputFrequency.KHZ10
    assert reg.fg_sel is FgSelect.OPEN_CLOSED
    assert reg.fg_div is FgDiv.DIV1
    assert reg.fg_bemf_thr is FgBemfThreshold.MV1
    assert reg.speed_loop_dis is False


def test_all_bits_set():
    reg = ClosedLoop1.from_value(0x7FFFFFFE)
    assert reg.overmodulation_enable is True
    assert reg.cl_acc is ClosedLoopAcceleration.NO_LIMIT
    assert reg.cl_dec is ClosedLoopAcceleration.NO_LIMIT
    assert reg.pwm_freq_out is None
    assert reg.fg_sel is None
    assert reg.fg_div is FgDiv.DIV15
    assert reg.fg_bemf_thr is None
    assert reg.speed_loop_dis is True


def test_undefined_values_read_as_none():
    reg = ClosedLoop1()
    reg.fg_bemf_thr = 6
    assert reg.fg_bemf_thr is None
    reg.fg_sel = 3
    assert reg.fg_sel is None


def test_setting_none_rejected():
    reg = ClosedLoop1()
    with pytest.raises(TypeError):
        reg.pwm_freq_out = None
    assert reg.value() == 0
    assert reg.pwm_freq_out is PwmOutputFrequency.KHZ10


def test_fields_are_independent():
    reg = ClosedLoop1()
    reg.cl_acc = ClosedLoopAcceleration.HZ500
    reg.cl_dec = ClosedLoopAcceleration.HZ2_5
    reg.pwm_freq_out = PwmOutputFrequency.KHZ45
    reg.fg_div = FgDiv.DIV7
    assert reg.cl_acc is ClosedLoopAcceleration.HZ500
    assert reg.cl_dec is ClosedLoopAcceleration.HZ2_5
    assert reg.pwm_freq_out is PwmOutputFrequency.KHZ45
    assert reg.fg_div is FgDiv.DIV7
    assert reg.cl_dec_config is False


def test_round_trip_through_value():
    reg = ClosedLoop1(
        overmodulation_enable=True,
        cl_dec_config=True,
        pwm_mode=True,
        fg_sel=FgSelect.OPEN_LOOP_FIRST_RUN,
        fg_bemf_thr=FgBemfThreshold.MV30,
        avs_en=True,
    )
    assert ClosedLoop1.from_value(reg.value()) == reg


def test_speed_loop_dis_bit_position():
    assert ClosedLoop1(speed_loop_dis=True).value() == 1 << 1


def test_labels():
    assert str(ClosedLoopAcceleration(0x1F)) == "No Limit"
    assert str(ClosedLoopAcceleration(0x00)) == "0.5 Hz/s"
    assert str(PwmOutputFrequency(0x0A)) == "60 kHz"
    assert str(FgSelect(0x1)) == "Closed Loop Only"


def test_fg_div_duplicate_labels_are_distinct_members():
    assert str(FgDiv(0x0)) == str(FgDiv(0x1))
    assert FgDiv(0x0) is not FgDiv(0x1)
    assert len({FgDiv(code) for code in range(16)}) == 16


def test_acceleration_ordering():
    assert ClosedLoopAcceleration(0x00) < ClosedLoopAcceleration(0x1E) < ClosedLoopAcceleration(0x1F)
    assert len({ClosedLoopAcceleration(code) for code in range(32)}) == 32


def test_wrong_enum_rejected():
    reg = ClosedLoop1()
    with pytest.raises(TypeError):
        reg.cl_acc = FgDiv.DIV2
    assert reg.value() == 0