"""Conversions between integers and fixed-size two's complement buffers."""

from operator import index
from typing import SupportsIndex, TypeAlias

from .errors import OutOfRangeError
from .kinds import Numeric

NumberConvertible: TypeAlias = str | bytes | SupportsIndex


def extend_bytes(data: bytes, size: int, *, signed: bool) -> bytes:
    """
    Widen a big-endian buffer to `size` bytes.

    Signed buffers are sign-extended, unsigned ones are zero-extended.
    """
    if len(data) > size:
        raise ValueError(f"cannot extend {len(data)} bytes into {size} bytes")
    fill = b"\xff" if signed and data and data[0] & 0x80 else b"\x00"
    return fill * (size - len(data)) + bytes(data)


def to_number(value: SupportsIndex) -> int:
    """Convert an integer-like value into an `int`, rejecting floats and bools."""
    if isinstance(value, bool):
        raise TypeError("invalid type for number: bool")
    return index(value)


def to_buffer(value: int, numeric: Numeric) -> bytes:
    """Return the two's complement buffer of `value` as `numeric`."""
    if not numeric.contains(value):
        raise OutOfRangeError(value, numeric.type_name)
    return value.to_bytes(numeric.byte_length, byteorder="big", signed=numeric.signed)


def from_buffer(data: bytes, numeric: Numeric) -> int:
    """Interpret `data` as a two's complement integer of kind `numeric`."""
    return int.from_bytes(data, byteorder="big", signed=numeric.signed)
