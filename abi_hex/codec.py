"""
Hex encoding and decoding of raw byte buffers.

Decoding always runs the same validation routine and only branches on the
requested mode when checking the length and writing the output:

- `Expanded`: the text may represent up to `len(target)` bytes; the decoded
  bytes are written to the low-order end of the target and the remaining
  high-order bytes are zeroed.
- `Exact`: the text must represent exactly `len(target)` bytes.
- `Unbounded`: any even number of digits is accepted and a new buffer is
  returned.

In the fixed-length modes an odd number of digits is read as if it had an
implicit leading zero nibble (`"0xf"` is `b"\\x0f"`), the way numeric
literals are usually written. The unbounded mode rejects it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, SupportsBytes, TypeAlias

from .errors import (
    HexError,
    IncorrectLenError,
    InvalidCharError,
    LenTooLongError,
    OddLenError,
)

logger = logging.getLogger(__name__)

BytesLike: TypeAlias = bytes | bytearray | memoryview | SupportsBytes | List[int]
WritableBuffer: TypeAlias = bytearray | memoryview

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class PrefixPolicy(str, Enum):
    """How a `0x`/`0X` prefix is treated when decoding."""

    OPTIONAL = "optional"
    """The prefix may be present or absent."""
    REQUIRED = "required"
    """A missing prefix is reported as an invalid character."""
    FORBIDDEN = "forbidden"
    """A present prefix is reported as an invalid character."""


@dataclass(frozen=True)
class Expanded:
    """Decode into the low-order end of `target`, zero-filling the rest."""

    target: WritableBuffer


@dataclass(frozen=True)
class Exact:
    """Decode into `target`, which must be filled exactly."""

    target: WritableBuffer


@dataclass(frozen=True)
class Unbounded:
    """Decode into a new buffer of whatever (even) length the text has."""

    pass


HexVisitor: TypeAlias = Expanded | Exact | Unbounded


def encode(data: BytesLike) -> str:
    """Return `data` as a `0x`-prefixed lowercase hex string."""
    return "0x" + bytes(data).hex()


def encode_compact(data: BytesLike) -> str:
    """Return `data` as a hex quantity, without leading zero digits."""
    hex_str = bytes(data).hex().lstrip("0")
    return "0x" + (hex_str or "0")


def _prefix_length(text: str, prefix: PrefixPolicy) -> int:
    has_prefix = len(text) >= 2 and text[0] == "0" and text[1] in "xX"
    match prefix:
        case PrefixPolicy.OPTIONAL:
            return 2 if has_prefix else 0
        case PrefixPolicy.REQUIRED:
            if has_prefix:
                return 2
            if not text or text[0] != "0":
                raise InvalidCharError(0, text[:1])
            raise InvalidCharError(1, text[1:2])
        case PrefixPolicy.FORBIDDEN:
            if has_prefix:
                raise InvalidCharError(1, text[1])
            return 0
    raise ValueError(f"unknown prefix policy {prefix!r}")


def hex_digits(text: str, prefix: PrefixPolicy = PrefixPolicy.OPTIONAL) -> str:
    """
    Strip the prefix from `text` and return its hex digits.

    Raises `InvalidCharError` for the first non-hex character, with its
    position counted from the start of `text`.
    """
    offset = _prefix_length(text, prefix)
    digits = text[offset:]
    for index, char in enumerate(digits):
        if char not in HEX_DIGITS:
            raise InvalidCharError(offset + index, char)
    return digits


def decode(
    mode: HexVisitor,
    text: str,
    prefix: PrefixPolicy = PrefixPolicy.OPTIONAL,
) -> bytes:
    """
    Decode `text` according to `mode`.

    For `Expanded` and `Exact` the target buffer is written in full and a copy
    of it is returned; for `Unbounded` the decoded bytes are returned. On
    error nothing is written.
    """
    try:
        return _decode(mode, text, prefix)
    except HexError as e:
        logger.debug("Failed to decode %r with %s: %s", text, type(mode).__name__, e)
        raise


def _decode(mode: HexVisitor, text: str, prefix: PrefixPolicy) -> bytes:
    digits = hex_digits(text, prefix)
    digit_count = len(digits)
    match mode:
        case Unbounded():
            if digit_count % 2 == 1:
                raise OddLenError(digit_count)
            return bytes.fromhex(digits)
        case Exact(target=target):
            if (digit_count + 1) // 2 != len(target):
                raise IncorrectLenError(expected=len(target), len=digit_count)
            target[:] = _from_digits(digits)
            return bytes(target)
        case Expanded(target=target):
            if (digit_count + 1) // 2 > len(target):
                raise LenTooLongError(max=len(target), len=digit_count)
            target[:] = _from_digits(digits).rjust(len(target), b"\x00")
            return bytes(target)
    raise TypeError(f"unknown hex visitor {mode!r}")


def _from_digits(digits: str) -> bytes:
    if len(digits) % 2 == 1:
        digits = "0" + digits
    return bytes.fromhex(digits)


def decode_expanded(
    text: str, size: int, prefix: PrefixPolicy = PrefixPolicy.OPTIONAL
) -> bytes:
    """Decode `text` into `size` bytes, left-padding with zeros."""
    return decode(Expanded(bytearray(size)), text, prefix)


def decode_exact(text: str, size: int, prefix: PrefixPolicy = PrefixPolicy.OPTIONAL) -> bytes:
    """Decode `text`, which must represent exactly `size` bytes."""
    return decode(Exact(bytearray(size)), text, prefix)


def decode_unbounded(text: str, prefix: PrefixPolicy = PrefixPolicy.OPTIONAL) -> bytes:
    """Decode `text` into as many bytes as it represents."""
    return decode(Unbounded(), text, prefix)
