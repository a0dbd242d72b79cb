# mcf8316

A Python driver for the MCF8316C-Q1 BLDC motor driver over I2C.

The package does three things:

- It builds the chip's 24-bit control words.
- It builds and checks the CRC-8 protected read and write frames.
- It models the algorithm configuration registers ISD_CONFIG and
  CLOSED_LOOP1 to CLOSED_LOOP4. Each register is an object with named,
  typed bit fields.

It has no dependencies outside the standard library.

The chip uses I2C clock stretching, so the bus adapter you use must
support it.

## Connecting a bus

`mcf8316.device.MCF8316C` talks to any object that follows the
`mcf8316.device.I2cBus` protocol. That protocol has two methods:

- `write(address, data)` sends bytes to a 7-bit address.
- `write_read(address, data, read_length)` sends bytes, then reads
  `read_length` bytes back with a repeated start and returns them.

Wrap your adapter's library in a small class that provides these two
methods. The package ships no adapter of its own.

## Usage

```python
from mcf8316.device import MCF8316C
from mcf8316.closed_loop2 import ClosedLoop2
from mcf8316.motor_values import MotorResistance

driver = MCF8316C(bus, 0x5A)      # the address defaults to 0x00

closed_loop = driver.read(ClosedLoop2)
print(closed_loop)                # ClosedLoop2(mtr_stop=..., motor_res=..., ...)

closed_loop.motor_res = MotorResistance.R600
driver.write(closed_loop)
```

### Raw access

These methods work on a 12-bit memory address:

- `read_u16`, `read_u32` and `read_u64` read a value. The value is sent
  little-endian.
- `write_u16`, `write_u32` and `write_u64` write a value.
- `create_write_u16_packet`, `create_write_u32_packet` and
  `create_write_u64_packet` return the bytes of a write frame without
  sending it. The frame is the control word, then the data, then the CRC
  byte.

Every frame is sent with CRC enabled. The CRC of a write covers the
device's write address byte and the frame bytes before the CRC. For the
64-bit frame, the CRC covers only the first 9 frame bytes.

A data value that does not fit the chosen width raises `ValueError`. So
does a memory address outside 0..0xFFF, and an I2C address that is not
7-bit.

### Registers

Each register class has an `ADDRESS` and is built on
`mcf8316.register.Register`:

| Class | Module |
| --- | --- |
| `IsdConfig` | `mcf8316.isd_config` |
| `ClosedLoop1` | `mcf8316.closed_loop1` |
| `ClosedLoop2` | `mcf8316.closed_loop2` |
| `ClosedLoop3` | `mcf8316.closed_loop3` |
| `ClosedLoop4` | `mcf8316.closed_loop4` |

You can create and convert registers in these ways:

- `Cls(raw=0, **fields)` creates a register and sets the fields you name.
- `Cls.from_value(raw)` creates a register from its raw contents.
- `value()` returns the raw 32-bit contents.

Two registers of the same class compare equal when their raw contents
are equal.

Fields read and write as `bool`, `int`, enums, or PI gain objects. If you
give a value that does not fit its bits, you get `ValueError`.

Some fields do not define every code. These are `pwm_freq_out`, `fg_sel`
and `fg_bemf_thr` in `ClosedLoop1`, and `mtr_stop` in `ClosedLoop2`.
Such a field reads as `None` when it holds an undefined code. Setting any
field to `None` raises `TypeError`.

All field enums derive from `mcf8316.register.LabeledEnum`. They are
integers, and `str()` gives their label, such as `"0.600 Ω"`,
`"10 kHz"` or `"No Limit"`. Some enums have comparison rules of their own:

- `MotorResistance` and `MotorInductance` are in `mcf8316.motor_values`.
  They have an `amount` property, which is a `Decimal`, or `None` for
  `SELF_MEASUREMENT`. Ordering `SELF_MEASUREMENT` against another code
  raises `TypeError`.
- `MotorStopBrakeTime` codes 0 to 4 all mean 1 ms. They compare equal to
  each other.
- `PercentDecreasing` orders by percentage, so `P100` is greater than
  `P2_5`.

`mcf8316.register` also holds the addresses of the device's other
registers as integer constants, such as `ALGO_CTRL1` and `SPEED_FDBK`.
Only the five registers above have field models. For any other address,
use the raw `read_*` and `write_*` methods.

## Errors

A failed read raises a subclass of `mcf8316.device.ReadError`:

- `I2CError` means the bus raised an exception, or returned the wrong
  number of bytes. The original exception is kept in `error`. Frequent
  failures often mean clock stretching is not supported or not enabled.
- `CrcMismatchError` means the CRC in the reply did not match the data.
  It carries the `expected` and `received` CRC values. The data was
  probably corrupted in transit, so retrying usually works.

Exceptions raised by the bus during a write are not wrapped. If the CRC of
a write does not match, the chip discards the write and reports no error.

## PI loop gains

`mcf8316.kval` holds `KVal` and its subclasses `CurrentKpVal`,
`CurrentKiVal`, `SpeedKpVal` and `SpeedKiVal`. They split a 10-bit gain
into 2 scale bits and 8 value bits, which you read with `scale()` and
`value()` and set with `set_scale()` and `set_value()`.

`calculated_value()` returns `value / 10 ** (scale + SCALE_SHIFT)` as a
float. `auto()` returns the zero gain, which lets the device choose the
gain itself.

The speed-loop Kp is split across two registers: the 3 high bits are in
`ClosedLoop3.spd_loop_kp` and the 7 low bits are in
`ClosedLoop4.spd_loop_kp`. Put the two halves together like this:

```python
from mcf8316.kval import SpeedKpVal

kp = SpeedKpVal.from_high_low(cl3.spd_loop_kp, cl4.spd_loop_kp)
print(kp.calculated_value())
```

## CRC and control words

`mcf8316.control_word.crc8(data)` computes the chip's CRC-8. It uses
polynomial 0x07 and initial value 0xFF, and is not reflected.
`crc8(b"123456789")` is `0xA1`.

`ControlWord(is_read, crc_en, dlen, mem_addr).to_bytes()` gives the three
bytes of a control word. `dlen` is a `DataLength`: `LEN16`, `LEN32` or
`LEN64`.

## What this package does not do

- It has no command-line tool.
- It does not talk to any bus adapter hardware itself.
- It does not model the fault, device, pin, gate driver, reference
  profile or status registers field by field. Only their addresses are
  provided.