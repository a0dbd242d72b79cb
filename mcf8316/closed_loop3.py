"""Closed loop configuration register 3."""

from __future__ import annotations

from itertools import chain

from .kval import CurrentKiVal, CurrentKpVal, SpeedLoopKpHigh3
from .register import CLOSED_LOOP3, BitField, LabeledEnum, Register

__all__ = ["ClosedLoop3", "MotorBemf"]

# Each run is (first, last, step) in tenths of mV/Hz. Codes 0x01..0xFF walk
# through these runs in order; code 0x00 means "self measurement".
_RUNS = (
    (6, 20, 1),
    (22, 100, 2),
    (105, 495, 5),
    (500, 700, 10),
    (720, 1000, 20),
    (1050, 2100, 50),
    (2200, 3000, 100),
    (3200, 10000, 200),
    (10500, 19000, 500),
    (20000, 20000, 1),
)

_TENTHS = tuple(chain.from_iterable(range(first, last + 1, step) for first, last, step in _RUNS))


def _member_name(tenths: int) -> str:
    whole, fraction = divmod(tenths, 10)
    return f"B{whole}" if tenths >= 500 else f"B{whole}_{fraction}"


def _members() -> list[tuple[str, tuple[int, str]]]:
    members = [("SELF_MEASUREMENT", (0, "Self Measurement"))]
    members.extend(
        (_member_name(tenths), (code, f"{tenths // 10}.{tenths % 10} mV/Hz"))
        for code, tenths in enumerate(_TENTHS, start=1)
    )
    return members


MotorBemf = LabeledEnum(
    "MotorBemf",
    _members(),
    module=__name__,
    qualname="MotorBemf",
)
MotorBemf.__doc__ = "Motor BEMF constant codes; every 8-bit value is defined."


class ClosedLoop3(Register):
    """Closed loop settings 3.

    A raw gain of 0 in ``curr_loop_kp`` or ``curr_loop_ki`` lets the device
    choose the gain itself. ``spd_loop_kp`` holds only the 3 most significant
    bits of the speed loop Kp; the rest live in closed loop register 4.
    """

    ADDRESS = CLOSED_LOOP3

    motor_bemf_const = BitField(23, 30, MotorBemf)
    curr_loop_kp = BitField(13, 22, CurrentKpVal)
    curr_loop_ki = BitField(3, 12, CurrentKiVal)
    spd_loop_kp = BitField(0, 2, SpeedLoopKpHigh3)