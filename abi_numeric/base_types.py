"""
Fixed-size signed and unsigned integers used as ABI values.

Every type is a `bytes` subclass holding the big-endian two's complement
representation of its value, always exactly `bits / 8` bytes long. The types
are created by subscripting `SignedInteger` or `UnsignedInteger` with a width,
and receive `from_<primitive>` / `to_<primitive>` methods for every lossless
conversion found in the conversion table:

    >>> Int64.from_i32(-1).to_i64()
    -1
    >>> Uint16.from_u8(255).hex()
    '0x00ff'
"""

import logging
from typing import Any, Callable, ClassVar, Dict, Type, TypeVar

from ethereum_types.numeric import FixedUnsigned, U256

from abi_hex.codec import decode_expanded, encode, encode_compact
from abi_hex.pydantic import HexStringSchema

from .conversions import NumberConvertible, extend_bytes, from_buffer, to_buffer, to_number
from .errors import LengthError, OutOfRangeError
from .kinds import ConversionRule, Kind, Numeric, conversion_table

logger = logging.getLogger(__name__)

N = TypeVar("N", bound="FixedSizeNumber")

CONVERSION_TABLE: Dict[Numeric, ConversionRule] = conversion_table(include_128=True)
"""Conversion rules used to generate the typed conversion methods."""

_sized_types: Dict[Numeric, Type["FixedSizeNumber"]] = {}


def _from_primitive(primitive: Numeric) -> classmethod:
    def from_primitive(cls: Type[N], value: int) -> N:
        return cls._widen_from(primitive, value)

    from_primitive.__name__ = f"from_{primitive.name}"
    from_primitive.__doc__ = f"Convert a `{primitive.name}` value, which can never fail."
    return classmethod(from_primitive)


def _to_primitive(primitive: Numeric) -> Callable[["FixedSizeNumber"], int]:
    def to_primitive(self: "FixedSizeNumber") -> int:
        data = extend_bytes(self, primitive.byte_length, signed=self.numeric.signed)
        return from_buffer(data, primitive)

    to_primitive.__name__ = f"to_{primitive.name}"
    to_primitive.__doc__ = f"Convert into a `{primitive.name}` value, which can never fail."
    return to_primitive


class FixedSizeNumber(bytes, HexStringSchema):
    """
    A base class for integers of a fixed byte length.

    This class is used to dynamically generate subclasses of a specific kind
    and width, see `SignedInteger` and `UnsignedInteger`.
    """

    kind: ClassVar[Kind]
    numeric: ClassVar[Numeric]
    byte_length: ClassVar[int]
    conversions: ClassVar[ConversionRule]

    def __class_getitem__(cls, bits: int) -> Type["FixedSizeNumber"]:
        """Return the integer type of this kind with the given width."""
        if "numeric" in vars(cls) or not hasattr(cls, "kind"):
            raise TypeError(f"{cls.__name__} cannot be subscripted")
        numeric = Numeric(cls.kind, bits)
        if numeric in _sized_types:
            return _sized_types[numeric]

        class Sized(cls):  # type: ignore
            pass

        rule = CONVERSION_TABLE[numeric]
        Sized.numeric = numeric
        Sized.byte_length = numeric.byte_length
        Sized.conversions = rule
        Sized.__name__ = Sized.__qualname__ = numeric.type_name
        Sized.__module__ = cls.__module__
        for primitive in rule.from_primitives:
            setattr(Sized, f"from_{primitive.name}", _from_primitive(primitive))
        for primitive in rule.to_primitives:
            setattr(Sized, f"to_{primitive.name}", _to_primitive(primitive))

        _sized_types[numeric] = Sized
        return Sized

    def __new__(cls, value: "NumberConvertible | FixedSizeNumber" = 0):
        """
        Create a new number.

        `value` can be an integer (range checked), a buffer of exactly
        `byte_length` bytes, a hex string (left-padded with zeros when shorter
        than the type) or another fixed-size number (range checked).
        """
        if type(value) is cls:
            return value
        if not hasattr(cls, "numeric"):
            raise TypeError(f"{cls.__name__} must be sized, e.g. {cls.__name__}[256]")
        return super(FixedSizeNumber, cls).__new__(cls, cls._to_buffer(value))

    @classmethod
    def _to_buffer(cls, value: Any) -> bytes:
        if isinstance(value, FixedSizeNumber):
            return to_buffer(int(value), cls.numeric)
        if isinstance(value, (bytes, bytearray, memoryview)):
            if len(value) != cls.byte_length:
                raise LengthError(expected=cls.byte_length, len=len(value))
            return bytes(value)
        if isinstance(value, str):
            return decode_expanded(value, cls.byte_length)
        return to_buffer(to_number(value), cls.numeric)

    @classmethod
    def _from_buffer(cls: Type[N], data: bytes) -> N:
        return super(FixedSizeNumber, cls).__new__(cls, data)

    @classmethod
    def _widen_from(cls: Type[N], primitive: Numeric, value: Any) -> N:
        number = to_number(value)
        if not primitive.contains(number):
            raise OutOfRangeError(number, primitive.name)
        data = extend_bytes(
            to_buffer(number, primitive), cls.byte_length, signed=primitive.signed
        )
        return cls._from_buffer(data)

    @classmethod
    def from_bytes(cls: Type[N], data: bytes) -> N:
        """Create a number from a buffer of exactly `byte_length` bytes, copied verbatim."""
        if len(data) != cls.byte_length:
            raise LengthError(expected=cls.byte_length, len=len(data))
        return cls._from_buffer(bytes(data))

    @classmethod
    def checked_from(cls: Type[N], value: Any) -> N:
        """Create a number from any integer, failing when it is out of range."""
        return cls._from_buffer(to_buffer(to_number(value), cls.numeric))

    @classmethod
    def from_numeric(cls: Type[N], value: "FixedSizeNumber") -> N:
        """Widen another fixed-size number into this type."""
        return value.widen_to(cls)

    @classmethod
    def from_native(cls: Type[N], value: FixedUnsigned) -> N:
        """
        Convert an `ethereum_types` fixed unsigned integer, e.g. `U64`.

        Only conversions that can never lose information are accepted.
        """
        if not isinstance(value, FixedUnsigned):
            raise TypeError(f"expected a fixed unsigned integer, got {type(value).__name__}")
        source = Numeric(Kind.UINT, int(type(value).MAX_VALUE).bit_length())
        if not source.widens_into(cls.numeric):
            raise TypeError(f"no lossless conversion from {type(value).__name__} to {cls.__name__}")
        return cls._widen_from(source, value)

    def as_bytes(self) -> bytes:
        """Return the big-endian buffer of the number."""
        return bytes(self)

    def widen_to(self, target: Type[N]) -> N:
        """Convert into `target`, whose range must contain this type's range."""
        if not self.numeric.widens_into(target.numeric):
            raise TypeError(f"no lossless conversion from {type(self).__name__} to {target.__name__}")
        return target._from_buffer(
            extend_bytes(self, target.byte_length, signed=self.numeric.signed)
        )

    def to_u256(self) -> U256:
        """Convert into an `ethereum_types` `U256`, as two's complement for signed values."""
        if self.numeric.signed:
            return U256.from_signed(int(self))
        return U256(int(self))

    @property
    def value(self) -> int:
        """The integer value."""
        return from_buffer(self, self.numeric)

    def __int__(self) -> int:
        """Return the integer value."""
        return self.value

    def __hash__(self) -> int:
        """Return the hash of the integer value, consistent with `__eq__`."""
        return hash(self.value)

    def __repr__(self) -> str:
        """Return the type name and value."""
        return f"{type(self).__name__}({self.value})"

    def __str__(self) -> str:
        """Return the hexadecimal representation of the number."""
        return self.hex()

    def hex(self, *args, **kwargs) -> str:
        """Return the full-width hexadecimal representation of the number."""
        if args or kwargs:
            return "0x" + super().hex(*args, **kwargs)
        return encode(self)

    def to_compact_hex(self) -> str:
        """Return the buffer as hex without leading zero digits."""
        return encode_compact(self)

    def _other_value(self, other: object) -> int | None:
        if isinstance(other, FixedSizeNumber):
            return other.value
        if isinstance(other, int):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        """
        Compare by value against other numbers and integers.

        Numbers are never equal to raw buffers, which carry no kind; use
        `as_bytes()` to compare representations.
        """
        other_value = self._other_value(other)
        if other_value is None:
            if isinstance(other, (bytes, bytearray, memoryview)):
                return False
            return NotImplemented
        return self.value == other_value

    def __ne__(self, other: object) -> bool:
        """Compare two numbers to be not equal."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        """Compare by value."""
        other_value = self._other_value(other)
        if other_value is None:
            return NotImplemented
        return self.value < other_value

    def __le__(self, other: object) -> bool:
        """Compare by value."""
        other_value = self._other_value(other)
        if other_value is None:
            return NotImplemented
        return self.value <= other_value

    def __gt__(self, other: object) -> bool:
        """Compare by value."""
        other_value = self._other_value(other)
        if other_value is None:
            return NotImplemented
        return self.value > other_value

    def __ge__(self, other: object) -> bool:
        """Compare by value."""
        other_value = self._other_value(other)
        if other_value is None:
            return NotImplemented
        return self.value >= other_value


class SignedInteger(FixedSizeNumber):
    """Two's complement signed integer, e.g. `SignedInteger[64]`."""

    kind = Kind.INT

    def to_int256(self) -> "Int256":
        """Sign-extend into the canonical signed type."""
        return self.widen_to(Int256)


class UnsignedInteger(FixedSizeNumber):
    """Unsigned integer, e.g. `UnsignedInteger[64]`."""

    kind = Kind.UINT

    def to_uint256(self) -> "Uint256":
        """Zero-extend into the canonical unsigned type."""
        return self.widen_to(Uint256)


Int8 = SignedInteger[8]
Int16 = SignedInteger[16]
Int24 = SignedInteger[24]
Int32 = SignedInteger[32]
Int40 = SignedInteger[40]
Int48 = SignedInteger[48]
Int56 = SignedInteger[56]
Int64 = SignedInteger[64]
Int72 = SignedInteger[72]
Int80 = SignedInteger[80]
Int88 = SignedInteger[88]
Int96 = SignedInteger[96]
Int104 = SignedInteger[104]
Int112 = SignedInteger[112]
Int120 = SignedInteger[120]
Int128 = SignedInteger[128]
Int136 = SignedInteger[136]
Int144 = SignedInteger[144]
Int152 = SignedInteger[152]
Int160 = SignedInteger[160]
Int168 = SignedInteger[168]
Int176 = SignedInteger[176]
Int184 = SignedInteger[184]
Int192 = SignedInteger[192]
Int200 = SignedInteger[200]
Int208 = SignedInteger[208]
Int216 = SignedInteger[216]
Int224 = SignedInteger[224]
Int232 = SignedInteger[232]
Int240 = SignedInteger[240]
Int248 = SignedInteger[248]
Int256 = SignedInteger[256]
Int = Int256

Uint8 = UnsignedInteger[8]
Uint16 = UnsignedInteger[16]
Uint24 = UnsignedInteger[24]
Uint32 = UnsignedInteger[32]
Uint40 = UnsignedInteger[40]
Uint48 = UnsignedInteger[48]
Uint56 = UnsignedInteger[56]
Uint64 = UnsignedInteger[64]
Uint72 = UnsignedInteger[72]
Uint80 = UnsignedInteger[80]
Uint88 = UnsignedInteger[88]
Uint96 = UnsignedInteger[96]
Uint104 = UnsignedInteger[104]
Uint112 = UnsignedInteger[112]
Uint120 = UnsignedInteger[120]
Uint128 = UnsignedInteger[128]
Uint136 = UnsignedInteger[136]
Uint144 = UnsignedInteger[144]
Uint152 = UnsignedInteger[152]
Uint160 = UnsignedInteger[160]
Uint168 = UnsignedInteger[168]
Uint176 = UnsignedInteger[176]
Uint184 = UnsignedInteger[184]
Uint192 = UnsignedInteger[192]
Uint200 = UnsignedInteger[200]
Uint208 = UnsignedInteger[208]
Uint216 = UnsignedInteger[216]
Uint224 = UnsignedInteger[224]
Uint232 = UnsignedInteger[232]
Uint240 = UnsignedInteger[240]
Uint248 = UnsignedInteger[248]
Uint256 = UnsignedInteger[256]
Uint = Uint256

logger.debug("Generated %d fixed-size integer types", len(_sized_types))


def integer_type(kind: Kind, bits: int) -> Type[FixedSizeNumber]:
    """Return the generated type of the given kind and width."""
    return _sized_types[Numeric(kind, bits)]
