"""Closed loop configuration register 2."""

from __future__ import annotations

from .motor_values import MotorInductance, MotorResistance
from .register import CLOSED_LOOP2, BitField, LabeledEnum, Register

__all__ = [
    "ClosedLoop2",
    "MotorInductance",
    "MotorResistance",
    "MotorStop",
    "MotorStopBrakeTime",
    "PercentDecreasing",
]


class MotorStop(LabeledEnum):
    """How the motor is stopped; codes 0x6 and 0x7 are not defined."""

    HI_Z = 0x0, "Hi-Z"
    NOT_APPLICABLE = 0x1, "Not Applicable"
    LOW_SIDE_BRAKING = 0x2, "Low Side Braking"
    HIGH_SIDE_BRAKING = 0x3, "High Side Braking"
    ACTIVE_SPIN_DOWN = 0x4, "Active Spin Down"
    ALIGN_BRAKING = 0x5, "Align Braking"


class MotorStopBrakeTime(LabeledEnum):
    """Brake time during motor stop.

    Codes 0x0 to 0x4 all stand for 1 ms; they compare equal to each other
    and order as the same duration.
    """

    MS1_1 = 0x0, "1 ms"
    MS1_2 = 0x1, "1 ms"
    MS1_3 = 0x2, "1 ms"
    MS1_4 = 0x3, "1 ms"
    MS1_5 = 0x4, "1 ms"
    MS5 = 0x5, "5 ms"
    MS10 = 0x6, "10 ms"
    MS50 = 0x7, "50 ms"
    MS100 = 0x8, "100 ms"
    MS250 = 0x9, "250 ms"
    MS500 = 0xA, "500 ms"
    MS1000 = 0xB, "1000 ms"
    MS2500 = 0xC, "2500 ms"
    MS5000 = 0xD, "5000 ms"
    MS10000 = 0xE, "10000 ms"
    MS15000 = 0xF, "15000 ms"

    @property
    def _rank(self) -> int:
        return 0 if self.value <= 4 else self.value

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._rank == other._rank  # type: ignore[attr-defined]
        return int.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return hash(self._rank)

    def __lt__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._rank < other._rank  # type: ignore[attr-defined]
        return int.__lt__(self, other)

    def __le__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._rank <= other._rank  # type: ignore[attr-defined]
        return int.__le__(self, other)

    def __gt__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._rank > other._rank  # type: ignore[attr-defined]
        return int.__gt__(self, other)

    def __ge__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._rank >= other._rank  # type: ignore[attr-defined]
        return int.__ge__(self, other)


class PercentDecreasing(LabeledEnum):
    """Percentages listed from largest to smallest.

    Members order by the percentage they stand for, so a lower code is a
    greater member.
    """

    P100 = 0x0, "100%"
    P90 = 0x1, "90%"
    P80 = 0x2, "80%"
    P70 = 0x3, "70%"
    P60 = 0x4, "60%"
    P50 = 0x5, "50%"
    P45 = 0x6, "45%"
    P40 = 0x7, "40%"
    P35 = 0x8, "35%"
    P30 = 0x9, "30%"
    P25 = 0xA, "25%"
    P20 = 0xB, "20%"
    P15 = 0xC, "15%"
    P10 = 0xD, "10%"
    P5 = 0xE, "5%"
    P2_5 = 0xF, "2.5%"

    def __lt__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value > other.value  # type: ignore[attr-defined]
        return int.__lt__(self, other)

    def __le__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value >= other.value  # type: ignore[attr-defined]
        return int.__le__(self, other)

    def __gt__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value < other.value  # type: ignore[attr-defined]
        return int.__gt__(self, other)

    def __ge__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value <= other.value  # type: ignore[attr-defined]
        return int.__ge__(self, other)


class ClosedLoop2(Register):
    """Closed loop settings 2."""

    ADDRESS = CLOSED_LOOP2

    mtr_stop = BitField(28, 30, MotorStop, optional=True)
    mtr_stop_brk_time = BitField(24, 27, MotorStopBrakeTime)
    # speed threshold for active spin down (% of MAX_SPEED)
    act_spin_thr = BitField(20, 23, PercentDecreasing)
    # speed threshold for BRAKE pin and braking stop options (% of MAX_SPEED)
    brake_speed_threshold = BitField(16, 19, PercentDecreasing)
    motor_res = BitField(8, 15, MotorResistance)
    motor_ind = BitField(0, 7, MotorInductance)