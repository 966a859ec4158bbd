"""
Test suite for the fixed-size integer types.
"""

from typing import Any, Type

import pytest
from ethereum_types.numeric import U8, U32, U64, U256
from pydantic import BaseModel, ValidationError

from abi_hex import InvalidCharError, LenTooLongError

from ..base_types import (
    CONVERSION_TABLE,
    FixedSizeNumber,
    Int,
    Int8,
    Int16,
    Int24,
    Int32,
    Int64,
    Int128,
    Int136,
    Int256,
    SignedInteger,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    Uint128,
    Uint256,
    UnsignedInteger,
    integer_type,
)
from ..errors import LengthError, OutOfRangeError
from ..kinds import Kind, all_types

ALL_TYPES = [integer_type(numeric.kind, numeric.bits) for numeric in all_types()]


def test_generated_types():
    """Test that the family has one type per kind and width."""
    assert len(ALL_TYPES) == 62
    assert len(set(ALL_TYPES)) == 62
    assert SignedInteger[64] is Int64
    assert UnsignedInteger[24] is integer_type(Kind.UINT, 24)
    assert Int is Int256
    assert Uint is Uint256
    assert Int24.__name__ == "Int24"
    assert Int24.byte_length == 3


@pytest.mark.parametrize(
    "subscript",
    [
        lambda: FixedSizeNumber[8],
        lambda: Int8[16],
    ],
)
def test_invalid_subscript(subscript):
    """Test that only the kind base classes can be subscripted."""
    with pytest.raises(TypeError):
        subscript()


def test_unsized_type():
    """Test that the kind base classes cannot be instantiated."""
    with pytest.raises(TypeError):
        SignedInteger(1)
    with pytest.raises(ValueError):
        SignedInteger[12]


@pytest.mark.parametrize("integer_type", ALL_TYPES, ids=lambda t: t.__name__)
def test_from_bytes(integer_type: Type[FixedSizeNumber]):
    """Test that a buffer is accepted if and only if it has the exact length."""
    size = integer_type.byte_length
    data = bytes(range(1, size + 1))
    value = integer_type.from_bytes(data)
    assert value.as_bytes() == data
    assert len(value) == size
    assert integer_type.from_bytes(value.as_bytes()) == value
    for wrong_size in (size - 1, size + 1):
        with pytest.raises(LengthError) as e:
            integer_type.from_bytes(bytes(wrong_size))
        assert e.value.expected == size
        assert e.value.len == wrong_size


@pytest.mark.parametrize("integer_type", ALL_TYPES, ids=lambda t: t.__name__)
def test_generated_conversions_preserve_values(integer_type: Type[FixedSizeNumber]):
    """Test every generated `from_*` and `to_*` method at the range boundaries."""
    rule = integer_type.conversions
    for primitive in rule.from_primitives:
        convert = getattr(integer_type, f"from_{primitive.name}")
        for value in (primitive.min_value, 0, primitive.max_value):
            converted = convert(value)
            assert type(converted) is integer_type
            assert int(converted) == value
    for primitive in rule.to_primitives:
        for value in (integer_type.numeric.min_value, 0, integer_type.numeric.max_value):
            assert getattr(integer_type(value), f"to_{primitive.name}")() == value


@pytest.mark.parametrize("integer_type", ALL_TYPES, ids=lambda t: t.__name__)
def test_widening_into_canonical_type(integer_type: Type[FixedSizeNumber]):
    """Test that every type converts into the 256-bit type of its kind."""
    numeric = integer_type.numeric
    for value in (numeric.min_value, 0, numeric.max_value):
        number = integer_type(value)
        if numeric.signed:
            widened: FixedSizeNumber = number.to_int256()
            assert type(widened) is Int256
            assert Int256.from_numeric(number) == widened
        else:
            widened = number.to_uint256()
            assert type(widened) is Uint256
            assert Uint256.from_numeric(number) == widened
        assert int(widened) == value
        assert widened.as_bytes()[-numeric.byte_length :] == number.as_bytes()


def test_int256_from_i32_min():
    """Test the sign extension of the smallest `i32`."""
    value = Int256.from_i32(-(2**31))
    assert value.as_bytes() == b"\xff" * 28 + b"\x80\x00\x00\x00"
    assert value.as_bytes() == (-(2**31)).to_bytes(32, "big", signed=True)
    assert value == -(2**31)


@pytest.mark.parametrize(
    "number, expected",
    [
        (Int16.from_i8(-1), b"\xff\xff"),
        (Int16.from_u8(255), b"\x00\xff"),
        (Uint64.from_u32(2**32 - 1), b"\x00\x00\x00\x00\xff\xff\xff\xff"),
        (Int128.from_i128(-2), b"\xff" * 15 + b"\xfe"),
        (Int136.from_u128(2**128 - 1), b"\x00" + b"\xff" * 16),
        (Uint256.from_u64(1), b"\x00" * 31 + b"\x01"),
    ],
)
def test_conversion_buffers(number: FixedSizeNumber, expected: bytes):
    """Test that primitives are sign- or zero-extended into the buffer."""
    assert number.as_bytes() == expected


@pytest.mark.parametrize(
    "integer_type, method, present",
    [
        (Int16, "from_i8", True),
        (Int16, "from_u8", True),
        (Int16, "from_i32", False),
        (Int16, "from_u16", False),
        (Uint16, "from_i8", False),
        (Int8, "from_u8", False),
        (Int8, "to_i16", True),
        (Uint8, "to_u16", True),
        (Uint8, "to_i16", False),
        (Int8, "to_u8", False),
        (Int128, "from_i128", True),
        (Int128, "to_i128", True),
        (Int128, "from_u128", False),
        (Int136, "from_u128", True),
        (Int136, "to_i128", False),
        (Uint256, "to_u64", False),
        (Int8, "to_uint256", False),
        (Uint8, "to_int256", False),
    ],
)
def test_only_lossless_conversions_are_generated(
    integer_type: Type[FixedSizeNumber], method: str, present: bool
):
    """Test that conversions exist exactly where they can never fail."""
    assert hasattr(integer_type, method) == present


@pytest.mark.parametrize(
    "convert, value",
    [
        (Int64.from_i32, 2**31),
        (Int64.from_i32, -(2**31) - 1),
        (Uint16.from_u8, -1),
        (Uint16.from_u8, 256),
    ],
)
def test_primitive_out_of_range(convert, value: int):
    """Test that a value outside the declared primitive is rejected."""
    with pytest.raises(OutOfRangeError):
        convert(value)


@pytest.mark.parametrize(
    "integer_type, value, expected",
    [
        (Uint8, 255, b"\xff"),
        (Int8, -1, b"\xff"),
        (Int8, -128, b"\x80"),
        (Uint16, "0xff", b"\x00\xff"),
        (Uint16, "ff", b"\x00\xff"),
        (Int16, "0xffff", b"\xff\xff"),
        (Uint16, b"\x01\x02", b"\x01\x02"),
        (Int16, Int8(-1), b"\xff\xff"),
        (Uint8, Uint16(255), b"\xff"),
        (Uint32, U32(7), b"\x00\x00\x00\x07"),
        (Uint256, 0, b"\x00" * 32),
    ],
)
def test_constructor(integer_type: Type[FixedSizeNumber], value: Any, expected: bytes):
    """Test the accepted inputs of the constructor."""
    assert integer_type(value).as_bytes() == expected


@pytest.mark.parametrize(
    "integer_type, value, exception",
    [
        (Uint8, 256, OutOfRangeError),
        (Uint8, -1, OutOfRangeError),
        (Int8, -129, OutOfRangeError),
        (Int8, 128, OutOfRangeError),
        (Uint8, Int16(-1), OutOfRangeError),
        (Uint16, "0x123456", LenTooLongError),
        (Uint16, "0xzz", InvalidCharError),
        (Uint16, b"\x01", LengthError),
        (Uint8, 1.5, TypeError),
        (Uint8, True, TypeError),
    ],
)
def test_constructor_errors(integer_type: Type[FixedSizeNumber], value: Any, exception: type):
    """Test the rejected inputs of the constructor."""
    with pytest.raises(exception):
        integer_type(value)


def test_checked_from():
    """Test range checked construction."""
    assert Uint8.checked_from(255) == 255
    assert Uint8.checked_from(U8(3)) == 3
    with pytest.raises(OutOfRangeError) as e:
        Uint8.checked_from(256)
    assert e.value.value == 256
    assert e.value.type_name == "Uint8"


def test_widen_to():
    """Test widening between members of the family."""
    assert Int8(-1).widen_to(Int24).as_bytes() == b"\xff\xff\xff"
    assert Uint8(255).widen_to(Int16) == 255
    assert Uint8(255).widen_to(Uint32).as_bytes() == b"\x00\x00\x00\xff"
    with pytest.raises(TypeError):
        Int8(-1).widen_to(Uint256)
    with pytest.raises(TypeError):
        Int16(1).widen_to(Int8)
    with pytest.raises(TypeError):
        Uint8(1).widen_to(Int8)


def test_ethereum_types_interop():
    """Test conversions from and to `ethereum_types` integers."""
    assert Uint64.from_native(U32(7)) == 7
    assert Int64.from_native(U32(2**32 - 1)) == 2**32 - 1
    assert Uint256.from_native(U256.MAX_VALUE) == 2**256 - 1
    with pytest.raises(TypeError):
        Uint32.from_native(U64(1))
    with pytest.raises(TypeError):
        Int32.from_native(U32(1))
    with pytest.raises(TypeError):
        Uint32.from_native(1)  # type: ignore[arg-type]
    assert Uint256(5).to_u256() == U256(5)
    assert Int256(-1).to_u256() == U256.MAX_VALUE
    assert Int8(-2).to_u256() == U256.MAX_VALUE - U256(1)


@pytest.mark.parametrize(
    "a, b, equal",
    [
        (Int8(1), Int8(1), True),
        (Int8(1), Int8(2), False),
        (Int8(1), Uint8(1), True),
        (Int16(1), Int32(1), True),
        (Int8(-1), Uint8(255), False),
        (Int8(-1), -1, True),
        (Int8(-1), 255, False),
        (Uint8(255), 255, True),
        (1, Uint8(1), True),
        (Uint8(1), b"\x01", False),
        (b"\x01", Uint8(1), False),
        (Uint8(1), "0x01", False),
    ],
)
def test_comparisons(a: Any, b: Any, equal: bool):
    """Test that equality follows the integer value and ignores raw buffers."""
    if equal:
        assert a == b
        assert not a != b
    else:
        assert a != b
        assert not a == b


def test_ordering():
    """Test that ordering follows the integer value, not the buffer."""
    assert Int8(-1) < Int8(1)
    assert Int8(-1) <= -1
    assert Int16(300) > Int8(100)
    assert Uint8(255) >= 255
    assert sorted([Int8(1), Int8(-1), Int8(0)]) == [Int8(-1), Int8(0), Int8(1)]


@pytest.mark.parametrize(
    "a, b",
    [
        (Int16(1), Int32(1)),
        (Int8(-1), Uint8(255)),
        (Uint8(3), 3),
        (Int64(-5), Int8(2)),
    ],
)
def test_ordering_agrees_with_equality(a: Any, b: Any):
    """Test that two values ordered both ways are also equal."""
    assert (a <= b and a >= b) == (a == b)


def test_hashing():
    """Test that numbers hash like their integer value."""
    assert hash(Uint8(1)) == hash(Uint8(1))
    assert hash(Int8(1)) == hash(1)
    assert hash(Int8(-1)) == hash(Int256(-1))
    assert len({Uint8(1), Uint8(1), Uint8(2)}) == 2
    assert len({Int8(1), Uint16(1), 1}) == 1
    assert {1: "x"}.get(Int8(1)) == "x"
    assert {Uint256(2): "y"}[2] == "y"


@pytest.mark.parametrize(
    "number, hex_str, compact, representation",
    [
        (Int16(-1), "0xffff", "0xffff", "Int16(-1)"),
        (Uint32(1), "0x00000001", "0x1", "Uint32(1)"),
        (Uint8(0), "0x00", "0x0", "Uint8(0)"),
        (Int256(-1), "0x" + "ff" * 32, "0x" + "ff" * 32, "Int256(-1)"),
    ],
)
def test_text_forms(number: FixedSizeNumber, hex_str: str, compact: str, representation: str):
    """Test the hex and repr forms of a number."""
    assert number.hex() == hex_str
    assert str(number) == hex_str
    assert number.to_compact_hex() == compact
    assert repr(number) == representation
    assert type(number)(number.hex()) == number


class Transfer(BaseModel):
    """Model holding integers of both kinds."""

    amount: Uint256
    delta: Int64
    small: Uint128 | None = None


def test_model_round_trip():
    """Test that integers are parsed from ints or hex and serialized as full-width hex."""
    transfer = Transfer(amount="0x01", delta=-2)
    assert transfer.amount == 1
    assert transfer.delta == -2
    assert transfer.model_dump(mode="json", exclude_none=True) == {
        "amount": "0x" + "00" * 31 + "01",
        "delta": "0x" + "ff" * 7 + "fe",
    }
    assert Transfer.model_validate_json(transfer.model_dump_json()) == transfer


@pytest.mark.parametrize(
    "fields, error_type",
    [
        ({"amount": "0xzz", "delta": 0}, "hex_invalid_char"),
        ({"amount": "0x" + "00" * 33, "delta": 0}, "hex_len_too_long"),
        ({"amount": 0, "delta": 2**63}, "value_error"),
    ],
)
def test_model_errors(fields: dict, error_type: str):
    """Test that invalid integers are reported as pydantic errors."""
    with pytest.raises(ValidationError) as e:
        Transfer(**fields)
    assert e.value.errors()[0]["type"] == error_type


@pytest.mark.parametrize(
    "payload, input_type",
    [
        ('{"amount": 1.5, "delta": 0}', "float"),
        ('{"amount": true, "delta": 0}', "bool"),
        ('{"amount": null, "delta": 0}', "NoneType"),
        ('{"amount": [1], "delta": 0}', "list"),
    ],
)
def test_model_rejects_non_integer_json(payload: str, input_type: str):
    """Test that JSON values of the wrong type are reported as validation errors."""
    with pytest.raises(ValidationError) as e:
        Transfer.model_validate_json(payload)
    errors = e.value.errors()
    assert len(errors) == 1
    assert errors[0]["type"] == "hex_invalid_input"
    assert errors[0]["loc"] == ("amount",)
    assert errors[0]["ctx"]["input_type"] == input_type


def test_conversion_methods_include_128_bit_primitives():
    """Test that the generated methods always cover the 128-bit primitives."""
    assert Int128.from_i128(-1) == -1
    assert Uint128(5).to_u128() == 5
    assert Int136.from_u128(2**128 - 1) == 2**128 - 1
    assert all(
        {"i128", "u128"} <= {p.name for p in rule.greater + rule.equal + rule.less}
        for rule in CONVERSION_TABLE.values()
    )
