import pytest

from mcf8316.isd_config import (
    BemfStationaryVoltageThreshold,
    BrakeCurrentThreshold,
    IsdConfig,
    ResyncThreshold,
    ReverseDriveHandoffThreshold,
    ReverseDriveOpenLoopCurrent,
    TimeFormatA,
)


def test_default_fields():
    cfg = IsdConfig()
    assert cfg.ADDRESS == 0x0080
    assert cfg.value() == 0
    assert cfg.isd_en is False
    assert cfg.fw_drv_resyn_thr is ResyncThreshold.P5
    assert cfg.brk_time is TimeFormatA.MS10
    assert cfg.rev_drv_open_loop_current is ReverseDriveOpenLoopCurrent.A1_5


def test_isd_en_bit_position():
    cfg = IsdConfig(isd_en=True)
    assert cfg.value() == 1 << 30


def test_all_ones_decode_to_maximum_members():
    cfg = IsdConfig.from_value(0x7FFFFFFF)
    assert cfg.isd_en and cfg.brake_en and cfg.hiz_en and cfg.rvs_dr_en and cfg.resync_en
    assert cfg.brk_mode and cfg.brk_config
    assert cfg.fw_drv_resyn_thr is ResyncThreshold.P100
    assert cfg.brk_curr_thr is BrakeCurrentThreshold.A8_0
    assert cfg.brk_time is TimeFormatA.S15
    assert cfg.hiz_time is TimeFormatA.S15
    assert cfg.stat_detect_thr is BemfStationaryVoltageThreshold.MV1500
    assert cfg.rev_drv_handoff_thr is ReverseDriveHandoffThreshold.P100
    assert cfg.rev_drv_open_loop_current is ReverseDriveOpenLoopCurrent.A5_0


def test_fields_do_not_overlap():
    cfg = IsdConfig()
    cfg.brk_time = TimeFormatA.S7_5
    cfg.hiz_time = TimeFormatA.MS200
    cfg.stat_detect_thr = BemfStationaryVoltageThreshold.MV250
    cfg.rev_drv_handoff_thr = ReverseDriveHandoffThreshold.P12_5
    assert cfg.brk_time is TimeFormatA.S7_5
    assert cfg.hiz_time is TimeFormatA.MS200
    assert cfg.stat_detect_thr is BemfStationaryVoltageThreshold.MV250
    assert cfg.rev_drv_handoff_thr is ReverseDriveHandoffThreshold.P12_5
    assert cfg.isd_en is False


def test_round_trip_through_value():
    cfg = IsdConfig(
        brake_en=True,
        fw_drv_resyn_thr=ResyncThreshold.P45,
        brk_curr_thr=BrakeCurrentThreshold.A0_5,
        rev_drv_open_loop_current=ReverseDriveOpenLoopCurrent.A3_5,
    )
    assert IsdConfig.from_value(cfg.value()) == cfg


def test_labels():
    assert str(TimeFormatA(0xD)) == "7.5 s"
    assert str(BrakeCurrentThreshold(0x0)) == "0.1 A"
    assert str(ReverseDriveHandoffThreshold(0x0)) == "2.5%"
    assert str(BemfStationaryVoltageThreshold(0x6)) == "1000 mV"


def test_ordering_follows_values():
    assert ResyncThreshold(0x0) < ResyncThreshold(0xF)
    assert TimeFormatA(0x7) < TimeFormatA(0x8)
    assert max(BrakeCurrentThreshold(code) for code in range(8)) is BrakeCurrentThreshold.A8_0


def test_wrong_enum_rejected():
    cfg = IsdConfig()
    with pytest.raises(TypeError):
        cfg.brk_time = ResyncThreshold.P10
    assert cfg.value() == 0


def test_out_of_range_int_rejected():
    cfg = IsdConfig()
    with pytest.raises(ValueError):
        cfg.rev_drv_open_loop_current = 4
    assert cfg.value() == 0
    assert cfg.rev_drv_open_loop_current is ReverseDriveOpenLoopCurrent.A1_5


def test_unknown_field_rejected():
    with pytest.raises(TypeError):
        IsdConfig(not_a_field=True)