"""Pydantic integration for hex-serialized types."""

from typing import Any, Callable

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError
from pydantic_core.core_schema import (
    PlainValidatorFunctionSchema,
    no_info_plain_validator_function,
    to_string_ser_schema,
)

from .errors import HexError, IncorrectLenError, InvalidCharError, LenTooLongError, OddLenError


def to_pydantic_error(error: HexError) -> PydanticCustomError:
    """Convert a hex decoding error into a pydantic error keeping its fields."""
    match error:
        case InvalidCharError(position=position, char=char):
            return PydanticCustomError(
                "hex_invalid_char",
                "invalid hex character '{char}' at position {position}",
                {"char": char, "position": position},
            )
        case IncorrectLenError(expected=expected, len=length):
            return PydanticCustomError(
                "hex_incorrect_len",
                "hex string has {len} digits, expected exactly {expected} bytes",
                {"expected": expected, "len": length},
            )
        case LenTooLongError(max=max_len, len=length):
            return PydanticCustomError(
                "hex_len_too_long",
                "hex string has {len} digits, expected at most {max} bytes",
                {"max": max_len, "len": length},
            )
        case OddLenError(len=length):
            return PydanticCustomError(
                "hex_odd_len",
                "hex string has an odd number of digits: {len}",
                {"len": length},
            )
    return PydanticCustomError("hex_error", "{error}", {"error": str(error)})


def hex_validator(constructor: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Wrap a constructor so that hex errors, and inputs of a type the constructor
    does not accept, are reported as pydantic errors.
    """

    def validate(value: Any) -> Any:
        try:
            return constructor(value)
        except HexError as e:
            raise to_pydantic_error(e) from e
        except (TypeError, OverflowError) as e:
            raise PydanticCustomError(
                "hex_invalid_input",
                "cannot convert {input_type} input: {error}",
                {"input_type": type(value).__name__, "error": str(e)},
            ) from e

    return validate


class HexStringSchema:
    """
    Type converter to add a simple pydantic schema that parses the type with
    its constructor and serializes it with `str`, which must return hex.
    """

    @staticmethod
    def __get_pydantic_core_schema__(
        source_type: Any, handler: GetCoreSchemaHandler
    ) -> PlainValidatorFunctionSchema:
        """Call the class constructor without info and appends the serialization schema."""
        return no_info_plain_validator_function(
            hex_validator(source_type),
            serialization=to_string_ser_schema(),
        )
