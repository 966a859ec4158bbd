"""
A module for managing application configurations.

Classes:
- AppConfig: Holds the default configuration of the hex codec and the integer types.
"""

from pathlib import Path

from pydantic import BaseModel

from abi_hex import PrefixPolicy


class AppConfig(BaseModel):
    """A class for accessing the application configuration."""

    PREFIX_POLICY: PrefixPolicy = PrefixPolicy.OPTIONAL
    """How a missing or present `0x` prefix is treated when decoding hex strings."""

    INCLUDE_128: bool = True
    """
    Whether the `table` command lists the 128-bit native primitives by default.

    The conversion methods of the integer types are always generated against
    the 128-bit primitives too; this flag only affects the printed table.
    """

    LOG_LEVEL: str = "WARNING"
    """The level of the `abi_hex` and `abi_numeric` loggers."""

    ROOT_DIR: Path = Path(__file__).resolve().parents[1]
    """The root directory of the project."""
