"""Register addresses, labelled field enums and the 32-bit register model."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, ClassVar

ISD_CONFIG = 0x0080
REV_DRIVE_CONFIG = 0x0082
MOTOR_STARTUP1 = 0x0084
MOTOR_STARTUP2 = 0x0086
CLOSED_LOOP1 = 0x0088
CLOSED_LOOP2 = 0x008A
CLOSED_LOOP3 = 0x008C
CLOSED_LOOP4 = 0x008E
REF_PROFILES1 = 0x0094
REF_PROFILES2 = 0x0096
REF_PROFILES3 = 0x0098
REF_PROFILES4 = 0x009A
REF_PROFILES5 = 0x009C
REF_PROFILES6 = 0x009E
FAULT_CONFIG1 = 0x0090
FAULT_CONFIG2 = 0x0092
INT_ALGO_1 = 0x00A0
INT_ALGO_2 = 0x00A2
PIN_CONFIG = 0x00A4
DEVICE_CONFIG1 = 0x00A6
DEVICE_CONFIG2 = 0x00A8
PERI_CONFIG1 = 0x00AA
GD_CONFIG1 = 0x00AC
GD_CONFIG2 = 0x00AE
GATE_DRIVER_FAULT_STATUS = 0x00E0
CONTROLLER_FAULT_STATUS = 0x00E2
ALGO_STATUS = 0x00E4
MTR_PARAMS = 0x00E6
ALGO_STATUS_MPET = 0x00E8
ALGO_CTRL1 = 0x00EA
ALGO_DEBUG1 = 0x00EC
ALGO_DEBUG2 = 0x00EE
CURRENT_PI = 0x00F0
SPEED_PI = 0x00F2
DAC_1 = 0x00F4
DAC_2 = 0x00F6
ALGORITHM_STATE = 0x0190
FG_SPEED_FDBK = 0x0196
BUS_CURRENT = 0x0410
PHASE_CURRENT_A = 0x0440
PHASE_CURRENT_B = 0x0442
PHASE_CURRENT_C = 0x0444
CSA_GAIN_FEEDBACK = 0x0468
VOLTAGE_GAIN_FEEDBACK = 0x0472
VM_VOLTAGE = 0x0476
PHASE_VOLTAGE_VA = 0x047A
PHASE_VOLTAGE_VB = 0x047C
PHASE_VOLTAGE_VC = 0x047E
SIN_COMMUTATION_ANGLE = 0x04B6
COS_COMMUTATION_ANGLE = 0x04B8
IALPHA = 0x04D2
IBETA = 0x04D4
VALPHA = 0x04D6
VBETA = 0x04D8
ID = 0x04E2
IQ = 0x04E4
VD = 0x04E6
VQ = 0x04E8
IQ_REF_ROTOR_ALIGN = 0x0524
SPEED_REF_OPEN_LOOP = 0x053C
IQ_REF_OPEN_LOOP = 0x054C
SPEED_REF_CLOSED_LOOP = 0x05D4
ID_REF_CLOSED_LOOP = 0x0606
IQ_REF_CLOSED_LOOP = 0x0608
ISD_STATE = 0x0682
ISD_SPEED = 0x068C
IPD_STATE = 0x06C0
IPD_ANGLE = 0x0704
ED = 0x074A
EQ = 0x074C
SPEED_FDBK = 0x075A
THETA_EST = 0x075E

_U32_MAX = 0xFFFF_FFFF


class LabeledEnum(int, Enum):
    """Integer enum whose members carry a human-readable label.

    Members are declared as ``NAME = value, "label"``; ``str()`` gives the label.
    """

    label: str

    def __new__(cls, value: int, label: str):
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    def __str__(self) -> str:
        return self.label

    def __format__(self, format_spec: str) -> str:
        return format(self.label, format_spec)


class BitField:
    """Descriptor for a run of bits ``low..=high`` inside a register.

    ``kind`` decides what the field reads as: ``int``, ``bool``, an ``Enum``
    class, or a class offering ``new_with_raw_value(raw)`` and ``raw_value()``.
    With ``optional=True`` an enum field reads as ``None`` for undefined values.
    """

    def __init__(self, low: int, high: int | None = None, kind: Any = int, *, optional: bool = False):
        high = low if high is None else high
        if not 0 <= low <= high < 32:
            raise ValueError(f"invalid bit range {low}..={high}")
        self.low = low
        self.high = high
        self.width = high - low + 1
        self.mask = (1 << self.width) - 1
        self.kind = kind
        self.optional = optional
        self.name = f"bits {low}..={high}"

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def _is_enum(self) -> bool:
        return isinstance(self.kind, type) and issubclass(self.kind, Enum)

    def _decode(self, raw: int) -> Any:
        if self.kind is bool:
            return bool(raw)
        if self.kind is int:
            return raw
        if self._is_enum():
            try:
                return self.kind(raw)
            except ValueError:
                if self.optional:
                    return None
                raise ValueError(f"{self.name}: {raw:#x} is not a valid {self.kind.__name__}") from None
        return self.kind.new_with_raw_value(raw)

    def _encode(self, value: Any) -> int:
        if value is None:
            raise TypeError(f"{self.name} cannot be set to None")
        if self._is_enum() and isinstance(value, Enum) and not isinstance(value, self.kind):
            raise TypeError(f"{self.name} expects {self.kind.__name__}, got {type(value).__name__}")
        if isinstance(value, Enum):
            raw = value.value
        elif callable(getattr(value, "raw_value", None)):
            raw = value.raw_value()
        else:
            raw = operator.index(value)
        if not 0 <= raw <= self.mask:
            raise ValueError(f"{self.name} must fit in {self.width} bits, got {raw!r}")
        return raw

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self._decode((instance._raw >> self.low) & self.mask)

    def __set__(self, instance: Any, value: Any) -> None:
        raw = self._encode(value)
        instance._raw = (instance._raw & ~(self.mask << self.low)) | (raw << self.low)


def _check_u32(value: int) -> int:
    value = operator.index(value)
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"register value must fit in 32 bits, got {value!r}")
    return value


class Register:
    """A 32-bit device register made of ``BitField`` descriptors."""

    ADDRESS: ClassVar[int]

    def __init__(self, raw: int = 0, **fields: Any):
        self._raw = _check_u32(raw)
        known = self._bit_fields()
        for name, value in fields.items():
            if name not in known:
                raise TypeError(f"{type(self).__name__} has no field {name!r}")
            setattr(self, name, value)

    @classmethod
    def _bit_fields(cls) -> dict[str, BitField]:
        found: dict[str, BitField] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, BitField):
                    found[name] = attr
        return found

    def value(self) -> int:
        """Return the raw 32-bit register contents."""
        return self._raw

    @classmethod
    def from_value(cls, value: int) -> Register:
        """Build a register from its raw 32-bit contents."""
        return cls(value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._bit_fields())
        return f"{type(self).__name__}({parts})"