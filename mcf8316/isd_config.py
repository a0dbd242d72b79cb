"""Initial speed detect configuration register."""

from __future__ import annotations

from .register import ISD_CONFIG, BitField, LabeledEnum, Register


class ResyncThreshold(LabeledEnum):
    """Minimum speed to resynchronise to closed loop (% of MAX_SPEED)."""

    P5 = 0x0, "5%"
    P10 = 0x1, "10%"
    P15 = 0x2, "15%"
    P20 = 0x3, "20%"
    P25 = 0x4, "25%"
    P30 = 0x5, "30%"
    P35 = 0x6, "35%"
    P40 = 0x7, "40%"
    P45 = 0x8, "45%"
    P50 = 0x9, "50%"
    P55 = 0xA, "55%"
    P60 = 0xB, "60%"
    P70 = 0xC, "70%"
    P80 = 0xD, "80%"
    P90 = 0xE, "90%"
    P100 = 0xF, "100%"


class BrakeCurrentThreshold(LabeledEnum):
    """Brake current threshold."""

    A0_1 = 0x0, "0.1 A"
    A0_2 = 0x1, "0.2 A"
    A0_3 = 0x2, "0.3 A"
    A0_5 = 0x3, "0.5 A"
    A1_0 = 0x4, "1.0 A"
    A2_0 = 0x5, "2.0 A"
    A4_0 = 0x6, "4.0 A"
    A8_0 = 0x7, "8.0 A"


class TimeFormatA(LabeledEnum):
    """A set of durations in milliseconds or seconds."""

    MS10 = 0x0, "10 ms"
    MS50 = 0x1, "50 ms"
    MS100 = 0x2, "100 ms"
    MS200 = 0x3, "200 ms"
    MS300 = 0x4, "300 ms"
    MS400 = 0x5, "400 ms"
    MS500 = 0x6, "500 ms"
    MS750 = 0x7, "750 ms"
    S1 = 0x8, "1 s"
    S2 = 0x9, "2 s"
    S3 = 0xA, "3 s"
    S4 = 0xB, "4 s"
    S5 = 0xC, "5 s"
    S7_5 = 0xD, "7.5 s"
    S10 = 0xE, "10 s"
    S15 = 0xF, "15 s"


class BemfStationaryVoltageThreshold(LabeledEnum):
    """BEMF threshold to detect a stationary motor."""

    MV50 = 0x0, "50 mV"
    MV75 = 0x1, "75 mV"
    MV100 = 0x2, "100 mV"
    MV250 = 0x3, "250 mV"
    MV500 = 0x4, "500 mV"
    MV750 = 0x5, "750 mV"
    MV1000 = 0x6, "1000 mV"
    MV1500 = 0x7, "1500 mV"


class ReverseDriveHandoffThreshold(LabeledEnum):
    """Speed to hand off to open loop during reverse drive (% of MAX_SPEED)."""

    P2_5 = 0x0, "2.5%"
    P5 = 0x1, "5%"
    P7_5 = 0x2, "7.5%"
    P10 = 0x3, "10%"
    P12_5 = 0x4, "12.5%"
    P15 = 0x5, "15%"
    P20 = 0x6, "20%"
    P25 = 0x7, "25%"
    P30 = 0x8, "30%"
    P40 = 0x9, "40%"
    P50 = 0xA, "50%"
    P60 = 0xB, "60%"
    P70 = 0xC, "70%"
    P80 = 0xD, "80%"
    P90 = 0xE, "90%"
    P100 = 0xF, "100%"


class ReverseDriveOpenLoopCurrent(LabeledEnum):
    """Open loop current limit during reverse drive."""

    A1_5 = 0x0, "1.5 A"
    A2_5 = 0x1, "2.5 A"
    A3_5 = 0x2, "3.5 A"
    A5_0 = 0x3, "5.0 A"


class IsdConfig(Register):
    """Initial speed detect settings."""

    ADDRESS = ISD_CONFIG

    isd_en = BitField(30, kind=bool)
    brake_en = BitField(29, kind=bool)
    hiz_en = BitField(28, kind=bool)
    rvs_dr_en = BitField(27, kind=bool)
    resync_en = BitField(26, kind=bool)
    fw_drv_resyn_thr = BitField(22, 25, ResyncThreshold)
    # 0 = all high-side FETs on, 1 = all low-side FETs on
    brk_mode = BitField(21, kind=bool)
    # 0 = brake time only, 1 = brake current threshold and brake time
    brk_config = BitField(20, kind=bool)
    brk_curr_thr = BitField(17, 19, BrakeCurrentThreshold)
    brk_time = BitField(13, 16, TimeFormatA)
    hiz_time = BitField(9, 12, TimeFormatA)
    stat_detect_thr = BitField(6, 8, BemfStationaryVoltageThreshold)
    rev_drv_handoff_thr = BitField(2, 5, ReverseDriveHandoffThreshold)
    rev_drv_open_loop_current = BitField(0, 1, ReverseDriveOpenLoopCurrent)