"""Common conversion methods."""

from typing import List, SupportsBytes, TypeAlias

from .codec import PrefixPolicy, decode_exact, decode_expanded, decode_unbounded, encode

BytesConvertible: TypeAlias = str | bytes | SupportsBytes | List[int]
FixedSizeBytesConvertible: TypeAlias = str | bytes | SupportsBytes | List[int] | int


def to_bytes(
    input_bytes: BytesConvertible, *, prefix: PrefixPolicy = PrefixPolicy.OPTIONAL
) -> bytes:
    """Convert multiple types into bytes."""
    if input_bytes is None:
        raise TypeError("Cannot convert `None` input to bytes")

    if isinstance(input_bytes, str):
        return decode_unbounded(input_bytes, prefix)

    if isinstance(input_bytes, (bytes, bytearray, memoryview, list, SupportsBytes)):
        return bytes(input_bytes)

    raise TypeError(f"invalid type for `bytes`: {type(input_bytes).__name__}")


def to_fixed_size_bytes(
    input_bytes: FixedSizeBytesConvertible,
    size: int,
    *,
    left_padding: bool = False,
    prefix: PrefixPolicy = PrefixPolicy.OPTIONAL,
) -> bytes:
    """
    Convert multiple types into fixed-size bytes.

    :param input_bytes: The input data to convert.
    :param size: The size of the output bytes.
    :param left_padding: Whether to allow left-padding of the input data bytes using zeros. If the
        input data is an integer, padding is always performed.
    :param prefix: How a `0x` prefix is treated when the input is a hex string.
    """
    if isinstance(input_bytes, int):
        return input_bytes.to_bytes(length=size, byteorder="big", signed=input_bytes < 0)
    if isinstance(input_bytes, str):
        if left_padding:
            return decode_expanded(input_bytes, size, prefix)
        return decode_exact(input_bytes, size, prefix)
    input_bytes = to_bytes(input_bytes)
    if len(input_bytes) > size:
        raise ValueError(f"input is too large for fixed size bytes: {len(input_bytes)} > {size}")
    if len(input_bytes) < size:
        if left_padding:
            return input_bytes.rjust(size, b"\x00")
        raise ValueError(
            f"input is too small for fixed size bytes: {len(input_bytes)} < {size}\n"
            "Use `left_padding=True` to allow padding."
        )
    return input_bytes


def to_hex(input_bytes: BytesConvertible) -> str:
    """Convert multiple types into a bytes hex string."""
    return encode(to_bytes(input_bytes))
