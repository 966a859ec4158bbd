"""
Kinds and widths of the fixed-size integer types, and the relation that
decides which conversions between them are lossless.
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterable, Tuple

logger = logging.getLogger(__name__)

MIN_BITS = 8
MAX_BITS = 256
WIDTHS = tuple(range(MIN_BITS, MAX_BITS + 1, 8))


class Kind(Enum):
    """Signedness of an integer type."""

    INT = "int"
    UINT = "uint"

    @property
    def signed(self) -> bool:
        """Whether values of this kind can be negative."""
        return self is Kind.INT

    @property
    def type_prefix(self) -> str:
        """Prefix of the generated type names, e.g. `Int` in `Int64`."""
        return "Int" if self is Kind.INT else "Uint"

    @property
    def primitive_prefix(self) -> str:
        """Prefix of the native primitive names, e.g. `i` in `i64`."""
        return "i" if self is Kind.INT else "u"


class Ordering(IntEnum):
    """Result of comparing the ranges of two integer types."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Numeric:
    """An integer type identified by its kind and bit width."""

    kind: Kind
    bits: int

    def __post_init__(self):
        """Validate the width."""
        if self.bits % 8 != 0 or not MIN_BITS <= self.bits <= MAX_BITS:
            raise ValueError(f"unsupported integer width: {self.bits}")

    def __str__(self) -> str:
        """Return the primitive-style name, e.g. `i64`."""
        return self.name

    @property
    def name(self) -> str:
        """Primitive-style name, e.g. `u128`."""
        return f"{self.kind.primitive_prefix}{self.bits}"

    @property
    def type_name(self) -> str:
        """Name of the generated type, e.g. `Uint128`."""
        return f"{self.kind.type_prefix}{self.bits}"

    @property
    def signed(self) -> bool:
        """Whether the type is signed."""
        return self.kind.signed

    @property
    def byte_length(self) -> int:
        """Length in bytes of the type's buffer."""
        return self.bits // 8

    @property
    def min_value(self) -> int:
        """Smallest representable value."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest representable value."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Whether `value` is representable by this type."""
        return self.min_value <= value <= self.max_value

    def fits_in(self, other: "Numeric") -> Ordering:
        """
        Compare this type against `other`.

        Types of the same kind are compared by width. A signed type is
        `GREATER` than an unsigned type only when it is strictly wider,
        otherwise `LESS`. An unsigned type is always `LESS` than a signed
        type; no conversion between them is assumed to be lossless.
        """
        if self.kind == other.kind:
            if self.bits == other.bits:
                return Ordering.EQUAL
            return Ordering.GREATER if self.bits > other.bits else Ordering.LESS
        if self.kind is Kind.INT:
            return Ordering.GREATER if self.bits > other.bits else Ordering.LESS
        return Ordering.LESS

    def widens_into(self, other: "Numeric") -> bool:
        """Whether every value of this type is representable by `other`."""
        if self.kind == other.kind:
            return self.bits <= other.bits
        if self.kind is Kind.UINT:
            return self.bits < other.bits
        return False

    def query_types(self, ordering: Ordering, types: Iterable["Numeric"]) -> Tuple["Numeric", ...]:
        """Return the members of `types` that compare to this type as `ordering`."""
        return tuple(t for t in types if self.fits_in(t) == ordering)


def i(bits: int) -> Numeric:
    """Signed integer descriptor of the given width."""
    return Numeric(Kind.INT, bits)


def u(bits: int) -> Numeric:
    """Unsigned integer descriptor of the given width."""
    return Numeric(Kind.UINT, bits)


PRIMITIVES: Tuple[Numeric, ...] = (i(8), i(16), i(32), i(64), u(8), u(16), u(32), u(64))
"""Native primitive integers."""

PRIMITIVES_128: Tuple[Numeric, ...] = (i(128), u(128))
"""128-bit native primitive integers, included when enabled."""

ORDERINGS: Tuple[Ordering, ...] = (Ordering.GREATER, Ordering.EQUAL, Ordering.LESS)


@dataclass(frozen=True)
class ConversionRule:
    """
    Primitives partitioned by how they compare to `target`, and the lossless
    conversions that follow from the partition.
    """

    target: Numeric
    greater: Tuple[Numeric, ...]
    equal: Tuple[Numeric, ...]
    less: Tuple[Numeric, ...]

    @property
    def from_primitives(self) -> Tuple[Numeric, ...]:
        """Primitives that convert into `target` without loss."""
        return self.equal + tuple(p for p in self.greater if p.widens_into(self.target))

    @property
    def to_primitives(self) -> Tuple[Numeric, ...]:
        """Primitives that `target` converts into without loss."""
        return self.equal + tuple(
            p for p in self.less if p.kind == self.target.kind and self.target.widens_into(p)
        )

    def by_ordering(self, ordering: Ordering) -> Tuple[Numeric, ...]:
        """Return the partition for `ordering`."""
        match ordering:
            case Ordering.GREATER:
                return self.greater
            case Ordering.EQUAL:
                return self.equal
            case Ordering.LESS:
                return self.less
        raise ValueError(f"unknown ordering {ordering!r}")


def conversion_rule(target: Numeric, primitives: Iterable[Numeric]) -> ConversionRule:
    """Derive the conversion rule of `target` against `primitives`."""
    primitives = tuple(primitives)
    return ConversionRule(
        target=target,
        greater=target.query_types(Ordering.GREATER, primitives),
        equal=target.query_types(Ordering.EQUAL, primitives),
        less=target.query_types(Ordering.LESS, primitives),
    )


def all_types() -> Tuple[Numeric, ...]:
    """All supported types, signed first, by increasing width."""
    return tuple(Numeric(kind, bits) for kind in Kind for bits in WIDTHS)


def conversion_table(include_128: bool = True) -> Dict[Numeric, ConversionRule]:
    """Derive the conversion rule of every supported type."""
    primitives = PRIMITIVES + (PRIMITIVES_128 if include_128 else ())
    table = {target: conversion_rule(target, primitives) for target in all_types()}
    logger.debug(
        "Derived conversion table for %d types against %d primitives", len(table), len(primitives)
    )
    return table


def format_rule(rule: ConversionRule) -> str:
    """Format a rule as a single line, e.g. `Int16: @gt i8, u8; @eq i16; ...`."""
    parts = [f"{rule.target.type_name}: size = {rule.target.byte_length}"]
    for ordering in ORDERINGS:
        primitives = rule.by_ordering(ordering)
        if primitives:
            names = ", ".join(p.name for p in primitives)
            parts.append(f"@{_ORDERING_TAGS[ordering]} {names}")
    return "; ".join(parts)


def format_table(table: Dict[Numeric, ConversionRule]) -> str:
    """Format a whole conversion table, one rule per line."""
    return "\n".join(format_rule(rule) for rule in table.values())


_ORDERING_TAGS = {Ordering.GREATER: "gt", Ordering.EQUAL: "eq", Ordering.LESS: "lt"}
