"""
Hex encoding and decoding of byte buffers.
"""

from .base_types import FixedHexBytes, HexBytes, PaddedHexBytes
from .codec import (
    Exact,
    Expanded,
    HexVisitor,
    PrefixPolicy,
    Unbounded,
    decode,
    decode_exact,
    decode_expanded,
    decode_unbounded,
    encode,
    encode_compact,
    hex_digits,
)
from .conversions import to_bytes, to_fixed_size_bytes, to_hex
from .errors import HexError, IncorrectLenError, InvalidCharError, LenTooLongError, OddLenError
from .pydantic import HexStringSchema, to_pydantic_error

__all__ = (
    "Exact",
    "Expanded",
    "FixedHexBytes",
    "HexBytes",
    "HexError",
    "HexStringSchema",
    "HexVisitor",
    "IncorrectLenError",
    "InvalidCharError",
    "LenTooLongError",
    "OddLenError",
    "PaddedHexBytes",
    "PrefixPolicy",
    "Unbounded",
    "decode",
    "decode_exact",
    "decode_expanded",
    "decode_unbounded",
    "encode",
    "encode_compact",
    "hex_digits",
    "to_bytes",
    "to_fixed_size_bytes",
    "to_hex",
    "to_pydantic_error",
)
