"""Closed loop configuration register 4."""

from __future__ import annotations

from .kval import SpeedKiVal, SpeedLoopKpLow7
from .register import CLOSED_LOOP4, BitField, Register


class ClosedLoop4(Register):
    """Closed loop settings 4.

    ``max_speed`` is the maximum speed in Hz times 6: 0x2710 (10000) means
    10000 / 6 = 1666 Hz.
    """

    ADDRESS = CLOSED_LOOP4

    spd_loop_kp = BitField(24, 30, SpeedLoopKpLow7)
    spd_loop_ki = BitField(14, 23, SpeedKiVal)
    max_speed = BitField(0, 13)