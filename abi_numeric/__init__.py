"""
Fixed-size signed and unsigned integer types from 8 to 256 bits.
"""

from .base_types import (
    CONVERSION_TABLE,
    FixedSizeNumber,
    Int,
    Int8,
    Int16,
    Int24,
    Int32,
    Int40,
    Int48,
    Int56,
    Int64,
    Int72,
    Int80,
    Int88,
    Int96,
    Int104,
    Int112,
    Int120,
    Int128,
    Int136,
    Int144,
    Int152,
    Int160,
    Int168,
    Int176,
    Int184,
    Int192,
    Int200,
    Int208,
    Int216,
    Int224,
    Int232,
    Int240,
    Int248,
    Int256,
    SignedInteger,
    Uint,
    Uint8,
    Uint16,
    Uint24,
    Uint32,
    Uint40,
    Uint48,
    Uint56,
    Uint64,
    Uint72,
    Uint80,
    Uint88,
    Uint96,
    Uint104,
    Uint112,
    Uint120,
    Uint128,
    Uint136,
    Uint144,
    Uint152,
    Uint160,
    Uint168,
    Uint176,
    Uint184,
    Uint192,
    Uint200,
    Uint208,
    Uint216,
    Uint224,
    Uint232,
    Uint240,
    Uint248,
    Uint256,
    UnsignedInteger,
    integer_type,
)
from .conversions import extend_bytes
from .errors import LengthError, OutOfRangeError
from .kinds import (
    PRIMITIVES,
    PRIMITIVES_128,
    ConversionRule,
    Kind,
    Numeric,
    Ordering,
    conversion_rule,
    conversion_table,
    format_table,
)

__all__ = (
    "CONVERSION_TABLE",
    "ConversionRule",
    "FixedSizeNumber",
    "Int",
    "Int8",
    "Int16",
    "Int24",
    "Int32",
    "Int40",
    "Int48",
    "Int56",
    "Int64",
    "Int72",
    "Int80",
    "Int88",
    "Int96",
    "Int104",
    "Int112",
    "Int120",
    "Int128",
    "Int136",
    "Int144",
    "Int152",
    "Int160",
    "Int168",
    "Int176",
    "Int184",
    "Int192",
    "Int200",
    "Int208",
    "Int216",
    "Int224",
    "Int232",
    "Int240",
    "Int248",
    "Int256",
    "Kind",
    "LengthError",
    "Numeric",
    "Ordering",
    "OutOfRangeError",
    "PRIMITIVES",
    "PRIMITIVES_128",
    "SignedInteger",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint24",
    "Uint32",
    "Uint40",
    "Uint48",
    "Uint56",
    "Uint64",
    "Uint72",
    "Uint80",
    "Uint88",
    "Uint96",
    "Uint104",
    "Uint112",
    "Uint120",
    "Uint128",
    "Uint136",
    "Uint144",
    "Uint152",
    "Uint160",
    "Uint168",
    "Uint176",
    "Uint184",
    "Uint192",
    "Uint200",
    "Uint208",
    "Uint216",
    "Uint224",
    "Uint232",
    "Uint240",
    "Uint248",
    "Uint256",
    "UnsignedInteger",
    "conversion_rule",
    "conversion_table",
    "extend_bytes",
    "format_table",
    "integer_type",
)
