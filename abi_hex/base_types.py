"""Byte buffer types that serialize as hex strings."""

from typing import ClassVar, SupportsBytes, Type, TypeVar

from .codec import encode
from .conversions import (
    BytesConvertible,
    FixedSizeBytesConvertible,
    to_bytes,
    to_fixed_size_bytes,
)
from .pydantic import HexStringSchema


class HexBytes(bytes, HexStringSchema):
    """Bytes of variable length, decoded from hex without any padding."""

    def __new__(cls, input_bytes: BytesConvertible = b""):
        """Create a new HexBytes object."""
        if type(input_bytes) is cls:
            return input_bytes
        return super(HexBytes, cls).__new__(cls, to_bytes(input_bytes))

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return super(HexBytes, self).__hash__()

    def __str__(self) -> str:
        """Return the hexadecimal representation of the bytes."""
        return self.hex()

    def hex(self, *args, **kwargs) -> str:
        """Return the hexadecimal representation of the bytes."""
        if args or kwargs:
            return "0x" + super().hex(*args, **kwargs)
        return encode(self)

    @classmethod
    def or_none(cls, input_bytes: "HexBytes | BytesConvertible | None") -> "HexBytes | None":
        """Convert the input to a HexBytes while accepting None."""
        if input_bytes is None:
            return input_bytes
        return cls(input_bytes)


T = TypeVar("T", bound="FixedHexBytes")


class FixedHexBytes(HexBytes):
    """
    Bytes of a fixed length.

    Hex strings must represent exactly `byte_length` bytes unless the class is
    created with `left_padding=True`, in which case shorter strings are padded
    with leading zeros.
    """

    byte_length: ClassVar[int]
    left_padding: ClassVar[bool] = False
    _sized_: ClassVar[Type["FixedHexBytes"]]

    def __class_getitem__(cls, length: int) -> Type["FixedHexBytes"]:
        """Create a new FixedHexBytes class with the given length."""

        class Sized(cls):  # type: ignore
            byte_length = length

        Sized.__name__ = Sized.__qualname__ = f"{cls.__name__}[{length}]"
        Sized._sized_ = Sized
        return Sized

    def __new__(cls, input_bytes: FixedSizeBytesConvertible | T):
        """Create a new FixedHexBytes object."""
        if type(input_bytes) is cls:
            return input_bytes
        return super(HexBytes, cls).__new__(
            cls,
            to_fixed_size_bytes(input_bytes, cls.byte_length, left_padding=cls.left_padding),
        )

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return super(FixedHexBytes, self).__hash__()

    @classmethod
    def or_none(cls: Type[T], input_bytes: T | FixedSizeBytesConvertible | None) -> T | None:
        """Convert the input to a FixedHexBytes while accepting None."""
        if input_bytes is None:
            return input_bytes
        return cls(input_bytes)

    def __eq__(self, other: object) -> bool:
        """Compare two FixedHexBytes objects to be equal."""
        if other is None:
            return False
        if not isinstance(other, FixedHexBytes):
            if not isinstance(other, (str, int, bytes, SupportsBytes)):
                return NotImplemented
            try:
                other = self._sized_(other)
            except (ValueError, OverflowError):
                return False
        return super().__eq__(other)

    def __ne__(self, other: object) -> bool:
        """Compare two FixedHexBytes objects to be not equal."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


class PaddedHexBytes(FixedHexBytes):
    """Fixed-length bytes that accept shorter hex strings, left-padded with zeros."""

    left_padding = True
