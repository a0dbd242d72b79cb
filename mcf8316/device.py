"""I2C driver for the MCF8316C-Q1 BLDC motor driver.

The chip uses I2C clock stretching; the bus in use must support it.
"""

from __future__ import annotations

import operator
from typing import Protocol, TypeVar

from .control_word import ControlWord, DataLength, crc8
from .register import Register

R = TypeVar("R", bound=Register)


class I2cBus(Protocol):
    """What the driver needs from an I2C bus with 7-bit addressing."""

    def write(self, address: int, data: bytes) -> None:
        """Write ``data`` to the device at ``address``."""

    def write_read(self, address: int, data: bytes, read_length: int) -> bytes:
        """Write ``data`` then read ``read_length`` bytes with a repeated start."""


class ReadError(Exception):
    """A register read failed."""


class I2CError(ReadError):
    """The bus failed during a read.

    Frequent failures, especially missing acknowledgements, often mean the
    bus does not support clock stretching.
    """

    def __init__(self, error: object):
        super().__init__(f"I2C error: {error}")
        self.error = error


class CrcMismatchError(ReadError):
    """The CRC received did not match the data; retrying may help."""

    def __init__(self, expected: int, received: int):
        super().__init__("CRC mismatch")
        self.expected = expected
        self.received = received


def _encode(data: int, size: int) -> bytes:
    data = operator.index(data)
    if not 0 <= data < 1 << (8 * size):
        raise ValueError(f"data must fit in {8 * size} bits, got {data!r}")
    return data.to_bytes(size, "little")


class MCF8316C:
    """MCF8316C-Q1 driver talking over an ``I2cBus``."""

    def __init__(self, i2c: I2cBus, address: int = 0x00):
        if not 0 <= address <= 0x7F:
            raise ValueError(f"I2C address must be 7-bit, got {address!r}")
        self.i2c = i2c
        self.address = address

    @property
    def _tx_byte(self) -> int:
        return (self.address << 1) & 0xFF

    def _write_packet(self, address: int, dlen: DataLength, payload: bytes, crc_span: int) -> bytes:
        body = ControlWord(False, True, dlen, address).to_bytes() + payload
        checksum = crc8(bytes([self._tx_byte]) + body[:crc_span])
        return body + bytes([checksum])

    def create_write_u16_packet(self, address: int, data: int) -> bytes:
        """Return the 6-byte packet that writes a 16-bit value to ``address``."""
        return self._write_packet(address, DataLength.LEN16, _encode(data, 2), 5)

    def create_write_u32_packet(self, address: int, data: int) -> bytes:
        """Return the 8-byte packet that writes a 32-bit value to ``address``."""
        return self._write_packet(address, DataLength.LEN32, _encode(data, 4), 7)

    def create_write_u64_packet(self, address: int, data: int) -> bytes:
        """Return the 12-byte packet that writes a 64-bit value to ``address``.

        The CRC byte covers the first 9 bytes of the packet.
        """
        return self._write_packet(address, DataLength.LEN64, _encode(data, 8), 9)

    def write_u16(self, address: int, data: int) -> None:
        """Write a 16-bit value to ``address``."""
        self.i2c.write(self.address, self.create_write_u16_packet(address, data))

    def write_u32(self, address: int, data: int) -> None:
        """Write a 32-bit value to ``address``."""
        self.i2c.write(self.address, self.create_write_u32_packet(address, data))

    def write_u64(self, address: int, data: int) -> None:
        """Write a 64-bit value to ``address``."""
        self.i2c.write(self.address, self.create_write_u64_packet(address, data))

    def write(self, register: Register) -> None:
        """Write a register to its address."""
        self.write_u32(register.ADDRESS, register.value())

    def _read(self, address: int, dlen: DataLength) -> int:
        size = dlen.byte_count
        control = ControlWord(True, True, dlen, address).to_bytes()
        try:
            response = bytes(self.i2c.write_read(self.address, control, size + 1))
        except Exception as exc:
            raise I2CError(exc) from exc
        if len(response) != size + 1:
            raise I2CError(f"expected {size + 1} bytes, received {len(response)}")
        data, received = response[:size], response[size]
        tx = self._tx_byte
        expected = crc8(bytes([tx]) + control + bytes([tx | 1]) + data)
        if expected != received:
            raise CrcMismatchError(expected, received)
        return int.from_bytes(data, "little")

    def read_u16(self, address: int) -> int:
        """Read a 16-bit value from ``address``."""
        return self._read(address, DataLength.LEN16)

    def read_u32(self, address: int) -> int:
        """Read a 32-bit value from ``address``."""
        return self._read(address, DataLength.LEN32)

    def read_u64(self, address: int) -> int:
        """Read a 64-bit value from ``address``."""
        return self._read(address, DataLength.LEN64)

    def read(self, register_type: type[R]) -> R:
        """Read and return a register of the given type."""
        return register_type.from_value(self.read_u32(register_type.ADDRESS))