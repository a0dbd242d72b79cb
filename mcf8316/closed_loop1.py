"""Closed loop configuration register 1."""

from __future__ import annotations

from .register import CLOSED_LOOP1, BitField, LabeledEnum, Register


class ClosedLoopAcceleration(LabeledEnum):
    """Closed loop acceleration or deceleration rate."""

    HZ0_5 = 0x00, "0.5 Hz/s"
    HZ1 = 0x01, "1 Hz/s"
    HZ2_5 = 0x02, "2.5 Hz/s"
    HZ5 = 0x03, "5 Hz/s"
    HZ7_5 = 0x04, "7.5 Hz/s"
    HZ10 = 0x05, "10 Hz/s"
    HZ20 = 0x06, "20 Hz/s"
    HZ40 = 0x07, "40 Hz/s"
    HZ60 = 0x08, "60 Hz/s"
    HZ80 = 0x09, "80 Hz/s"
    HZ100 = 0x0A, "100 Hz/s"
    HZ200 = 0x0B, "200 Hz/s"
    HZ300 = 0x0C, "300 Hz/s"
    HZ400 = 0x0D, "400 Hz/s"
    HZ500 = 0x0E, "500 Hz/s"
    HZ600 = 0x0F, "600 Hz/s"
    HZ700 = 0x10, "700 Hz/s"
    HZ800 = 0x11, "800 Hz/s"
    HZ900 = 0x12, "900 Hz/s"
    HZ1000 = 0x13, "1000 Hz/s"
    HZ2000 = 0x14, "2000 Hz/s"
    HZ4000 = 0x15, "4000 Hz/s"
    HZ6000 = 0x16, "6000 Hz/s"
    HZ8000 = 0x17, "8000 Hz/s"
    HZ10000 = 0x18, "10000 Hz/s"
    HZ20000 = 0x19, "20000 Hz/s"
    HZ30000 = 0x1A, "30000 Hz/s"
    HZ40000 = 0x1B, "40000 Hz/s"
    HZ50000 = 0x1C, "50000 Hz/s"
    HZ60000 = 0x1D, "60000 Hz/s"
    HZ70000 = 0x1E, "70000 Hz/s"
    NO_LIMIT = 0x1F, "No Limit"


class PwmOutputFrequency(LabeledEnum):
    """PWM output frequency; values above 0xA are not applicable."""

    KHZ10 = 0x00, "10 kHz"
    KHZ15 = 0x01, "15 kHz"
    KHZ20 = 0x02, "20 kHz"
    KHZ25 = 0x03, "25 kHz"
    KHZ30 = 0x04, "30 kHz"
    KHZ35 = 0x05, "35 kHz"
    KHZ40 = 0x06, "40 kHz"
    KHZ45 = 0x07, "45 kHz"
    KHZ50 = 0x08, "50 kHz"
    KHZ55 = 0x09, "55 kHz"
    KHZ60 = 0x0A, "60 kHz"


class FgSelect(LabeledEnum):
    """When the FG output is active."""

    OPEN_CLOSED = 0x0, "Open and Closed Loop"
    CLOSED_LOOP = 0x1, "Closed Loop Only"
    OPEN_LOOP_FIRST_RUN = 0x2, "Open Loop First Run"


class FgDiv(LabeledEnum):
    """FG division factor; 0 and 1 both divide by 1."""

    DIV1 = 0x0, "Divide by 1"
    THE_COOLER_DIV1 = 0x1, "Divide by 1"
    DIV2 = 0x2, "Divide by 2"
    DIV3 = 0x3, "Divide by 3"
    DIV4 = 0x4, "Divide by 4"
    DIV5 = 0x5, "Divide by 5"
    DIV6 = 0x6, "Divide by 6"
    DIV7 = 0x7, "Divide by 7"
    DIV8 = 0x8, "Divide by 8"
    DIV9 = 0x9, "Divide by 9"
    DIV10 = 0xA, "Divide by 10"
    DIV11 = 0xB, "Divide by 11"
    DIV12 = 0xC, "Divide by 12"
    DIV13 = 0xD, "Divide by 13"
    DIV14 = 0xE, "Divide by 14"
    DIV15 = 0xF, "Divide by 15"


class FgBemfThreshold(LabeledEnum):
    """FG output BEMF threshold; values above 0x5 are not applicable."""

    MV1 = 0x0, "1 mV"
    MV2 = 0x1, "2 mV"
    MV5 = 0x2, "5 mV"
    MV10 = 0x3, "10 mV"
    MV20 = 0x4, "20 mV"
    MV30 = 0x5, "30 mV"


class ClosedLoop1(Register):
    """Closed loop settings 1."""

    ADDRESS = CLOSED_LOOP1

    overmodulation_enable = BitField(30, kind=bool)
    cl_acc = BitField(25, 29, ClosedLoopAcceleration)
    # 0 = deceleration from cl_dec, 1 = deceleration from cl_acc
    cl_dec_config = BitField(24, kind=bool)
    cl_dec = BitField(19, 23, ClosedLoopAcceleration)
    pwm_freq_out = BitField(15, 18, PwmOutputFrequency, optional=True)
    # 0 = continuous SVM, 1 = discontinuous SVM
    pwm_mode = BitField(14, kind=bool)
    fg_sel = BitField(12, 13, FgSelect, optional=True)
    fg_div = BitField(8, 11, FgDiv)
    # 0 = FG active while driven, 1 = FG active until BEMF drops below threshold
    fg_config = BitField(7, kind=bool)
    fg_bemf_thr = BitField(4, 6, FgBemfThreshold, optional=True)
    avs_en = BitField(3, kind=bool)
    deadtime_comp_en = BitField(2, kind=bool)
    # 1 = speed loop disabled (torque mode)
    speed_loop_dis = BitField(1, kind=bool)