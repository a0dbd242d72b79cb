"""Control word framing and CRC-8 for the MCF8316C-Q1 I2C protocol."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

CRC8_WIDTH = 8
CRC8_POLY = 0x07
CRC8_INIT = 0xFF
CRC8_XOROUT = 0x00
CRC8_CHECK = 0xA1


def _build_crc_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc << 1) ^ CRC8_POLY if crc & 0x80 else crc << 1
            crc &= 0xFF
        table.append(crc)
    return tuple(table)


_CRC_TABLE = _build_crc_table()


def crc8(data: Iterable[int]) -> int:
    """Return the CRC-8 (poly 0x07, init 0xFF, unreflected) of ``data``."""
    crc = CRC8_INIT
    for byte in data:
        crc = _CRC_TABLE[crc ^ byte]
    return crc ^ CRC8_XOROUT


class DataLength(IntEnum):
    """Length of the data that follows a control word."""

    LEN16 = 0b00
    LEN32 = 0b01
    LEN64 = 0b10

    @property
    def byte_count(self) -> int:
        """Number of data bytes this length stands for."""
        return {DataLength.LEN16: 2, DataLength.LEN32: 4, DataLength.LEN64: 8}[self]


@dataclass(frozen=True)
class ControlWord:
    """The 24-bit control word that starts every transaction.

    Bit layout, most significant first: OP_R/W, CRC_EN, DLEN (2 bits),
    MEM_SEC (4 bits), MEM_PAGE (4 bits), MEM_ADDR (12 bits).
    """

    is_read: bool
    crc_en: bool
    dlen: DataLength
    mem_addr: int
    mem_sec: int = 0
    mem_page: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "dlen", DataLength(self.dlen))
        for name, limit in (("mem_addr", 0xFFF), ("mem_sec", 0xF), ("mem_page", 0xF)):
            value = getattr(self, name)
            if not 0 <= value <= limit:
                raise ValueError(f"{name} must be in 0..{limit:#x}, got {value!r}")

    def to_bytes(self) -> bytes:
        """Return the three wire bytes of the control word."""
        first = (
            (int(bool(self.is_read)) << 7)
            | (int(bool(self.crc_en)) << 6)
            | (int(self.dlen) << 4)
            | (self.mem_sec & 0x0F)
        )
        second = ((self.mem_page & 0x0F) << 4) | ((self.mem_addr >> 8) & 0x0F)
        third = self.mem_addr & 0xFF
        return bytes((first, second, third))