"""Gain values for the current and speed PI loops."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import ClassVar, TypeVar

K = TypeVar("K", bound="KVal")

_RAW_MASK = 0x3FF
_VALUE_MASK = 0xFF
_SCALE_MASK = 0x3


def _checked(value: int, limit: int, name: str) -> int:
    value = operator.index(value)
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be in 0..{limit:#x}, got {value!r}")
    return value


class KVal:
    """10-bit PI loop gain: 2 scale bits above 8 value bits.

    The gain is ``value / 10 ** (scale + SCALE_SHIFT)``, where each loop
    type fixes its own ``SCALE_SHIFT``. A raw value of 0 means "automatic".
    """

    SCALE_SHIFT: ClassVar[int]

    def __init__(self, raw_value: int = 0):
        self._raw = _checked(raw_value, _RAW_MASK, "raw value")

    @classmethod
    def new_with_raw_value(cls: type[K], raw_value: int) -> K:
        """Build a gain from its 10 raw bits."""
        return cls(raw_value)

    @classmethod
    def auto(cls: type[K]) -> K:
        """The gain that lets the device choose the value itself."""
        return cls(0)

    def raw_value(self) -> int:
        """Return the 10 raw bits."""
        return self._raw

    def scale(self) -> int:
        """Return the 2 scale bits."""
        return (self._raw >> 8) & _SCALE_MASK

    def set_scale(self, scale: int) -> None:
        """Replace the 2 scale bits."""
        scale = _checked(scale, _SCALE_MASK, "scale")
        self._raw = (self._raw & _VALUE_MASK) | (scale << 8)

    def value(self) -> int:
        """Return the 8 value bits."""
        return self._raw & _VALUE_MASK

    def set_value(self, value: int) -> None:
        """Replace the 8 value bits."""
        value = _checked(value, _VALUE_MASK, "value")
        self._raw = (self._raw & 0x300) | value

    def calculated_value(self) -> float:
        """Return the gain the raw bits stand for."""
        return self.value() / 10.0 ** (self.scale() + self.SCALE_SHIFT)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scale={self.scale()}, value={self.value()})"


class CurrentKpVal(KVal):
    """Kp of the current loop; multiplier 1."""

    SCALE_SHIFT = 0


class CurrentKiVal(KVal):
    """Ki of the current loop; multiplier 1000."""

    SCALE_SHIFT = -3


class SpeedKiVal(KVal):
    """Ki of the speed loop; multiplier 0.1."""

    SCALE_SHIFT = 1


@dataclass(frozen=True)
class SpeedLoopKpHigh3:
    """The 3 most significant bits of the speed loop Kp."""

    inner: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", _checked(self.inner, 0x7, "inner"))

    @classmethod
    def new_with_raw_value(cls, raw_value: int) -> SpeedLoopKpHigh3:
        """Build from the 3 raw bits."""
        return cls(raw_value)

    def raw_value(self) -> int:
        """Return the 3 raw bits."""
        return self.inner


@dataclass(frozen=True)
class SpeedLoopKpLow7:
    """The 7 least significant bits of the speed loop Kp."""

    inner: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", _checked(self.inner, 0x7F, "inner"))

    @classmethod
    def new_with_raw_value(cls, raw_value: int) -> SpeedLoopKpLow7:
        """Build from the 7 raw bits."""
        return cls(raw_value)

    def raw_value(self) -> int:
        """Return the 7 raw bits."""
        return self.inner


class SpeedKpVal(KVal):
    """Kp of the speed loop; multiplier 0.01."""

    SCALE_SHIFT = 2

    @classmethod
    def from_high_low(cls, high: SpeedLoopKpHigh3, low: SpeedLoopKpLow7) -> SpeedKpVal:
        """Join the two register parts of the speed loop Kp."""
        return cls(((high.inner << 7) | low.inner) & _RAW_MASK)