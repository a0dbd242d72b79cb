"""Motor phase resistance and inductance codes (8-bit lookup tables)."""

from __future__ import annotations

from decimal import Decimal
from itertools import chain

from .register import LabeledEnum

# Each run is (first, last, step) in thousandths of the unit. Codes 0x01..0xFF
# walk through these runs in order; code 0x00 means "self measurement".
_RUNS = (
    (6, 20, 1),
    (22, 100, 2),
    (105, 500, 5),
    (510, 700, 10),
    (720, 1000, 20),
    (1050, 2100, 50),
    (2200, 3000, 100),
    (3200, 10000, 200),
    (10500, 19000, 500),
    (20000, 20000, 1),
)

_THOUSANDTHS = tuple(chain.from_iterable(range(first, last + 1, step) for first, last, step in _RUNS))

_SELF_MEASUREMENT_LABEL = "Self Measurement"


def _members(prefix: str, unit: str) -> list[tuple[str, tuple[int, str]]]:
    members = [("SELF_MEASUREMENT", (0, _SELF_MEASUREMENT_LABEL))]
    members.extend(
        (f"{prefix}{amount:03d}", (code, f"{amount // 1000}.{amount % 1000:03d} {unit}"))
        for code, amount in enumerate(_THOUSANDTHS, start=1)
    )
    return members


class _MotorValue(LabeledEnum):
    """An 8-bit motor parameter code that is only partly ordered.

    Code 0 asks the device to measure the parameter itself; it compares
    equal only to itself and cannot be ordered against the other codes.
    """

    @property
    def is_self_measurement(self) -> bool:
        """Whether this code asks the device to measure the parameter."""
        return self.value == 0

    @property
    def amount(self) -> Decimal | None:
        """The parameter in its unit, or ``None`` for self measurement."""
        if self.is_self_measurement:
            return None
        return Decimal(self.label.split()[0])

    def _ordered_pair(self, other: object) -> tuple[int, int] | None:
        if type(other) is not type(self):
            return None
        if self.is_self_measurement or other.is_self_measurement:  # type: ignore[attr-defined]
            raise TypeError(f"{type(self).__name__}.SELF_MEASUREMENT cannot be ordered")
        return self.value, other.value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        pair = self._ordered_pair(other)
        return NotImplemented if pair is None else pair[0] < pair[1]

    def __le__(self, other: object) -> bool:
        pair = self._ordered_pair(other)
        return NotImplemented if pair is None else pair[0] <= pair[1]

    def __gt__(self, other: object) -> bool:
        pair = self._ordered_pair(other)
        return NotImplemented if pair is None else pair[0] > pair[1]

    def __ge__(self, other: object) -> bool:
        pair = self._ordered_pair(other)
        return NotImplemented if pair is None else pair[0] >= pair[1]

    __hash__ = LabeledEnum.__hash__


MotorResistance = _MotorValue(
    "MotorResistance",
    _members("R", "Ω"),
    module=__name__,
    qualname="MotorResistance",
)
MotorResistance.__doc__ = "Motor phase resistance codes; every 8-bit value is defined."

MotorInductance = _MotorValue(
    "MotorInductance",
    _members("L", "mH"),
    module=__name__,
    qualname="MotorInductance",
)
MotorInductance.__doc__ = "Motor phase inductance codes; every 8-bit value is defined."