"""Index domains: the numeric capabilities some range forms need.

Clamping and intersecting only compare bounds, so any totally ordered type
works as an index. Forms that start at zero (``Full``, ``To``,
``ToInclusive``) or turn an inclusive end into an exclusive one
(``Inclusive``, ``ToInclusive``) additionally need a zero, a one and an
addition that never runs past the largest representable index. A
``Numeric`` object supplies those for one index type, together with the
conversion used to turn caller-supplied bounds into that type.
"""

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic

from typing_extensions import override

from ralgebra.interval import Idx
from ralgebra.util import BYTE, LONG, POINTER_WIDTH, SHORT, WIDE, WORD


class Numeric(ABC, Generic[Idx]):

    @abstractmethod
    def zero(self) -> Idx:
        pass

    @abstractmethod
    def one(self) -> Idx:
        pass

    @abstractmethod
    def saturating_add(self, left: Idx, right: Idx) -> Idx:
        """Add two indices; the result never exceeds ``max_value``."""
        pass

    @abstractmethod
    def convert(self, value: Any) -> Idx:
        """Convert a caller-supplied bound into this index type.

        Errors raised here are the caller's conversion failing and are
        never caught by range operations.
        """
        pass

    @property
    def max_value(self) -> Idx | None:
        return None

    @property
    def min_value(self) -> Idx | None:
        return None

    def saturating_increment(self, value: Idx) -> Idx:
        return self.saturating_add(value, self.one())


@dataclass(frozen=True, kw_only=True)
class FixedWidthInteger(Numeric[int]):
    """Machine integer of a fixed bit width, signed or unsigned."""

    bits: int
    signed: bool = False
    name: str = ""

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(
                f"FixedWidthInteger bits must be positive, got {self.bits}.\n"
                f"Example: FixedWidthInteger(bits=32, signed=True)"
            )

    def __str__(self) -> str:
        return self.name or f"{'i' if self.signed else 'u'}{self.bits}"

    @property
    @override
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    @override
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @override
    def zero(self) -> int:
        return 0

    @override
    def one(self) -> int:
        return 1

    @override
    def saturating_add(self, left: int, right: int) -> int:
        return max(self.min_value, min(left + right, self.max_value))

    @override
    def convert(self, value: Any) -> int:
        try:
            converted = operator.index(value)
        except TypeError:
            raise TypeError(
                f"Range bound for {self} must be an integer.\n"
                f"Got {type(value).__name__!r}: {value!r}\n"
                f"Hint: Pass an int or an object implementing __index__"
            ) from None
        if not self.min_value <= converted <= self.max_value:
            raise OverflowError(
                f"Range bound {converted} does not fit in {self} "
                f"(valid bounds: {self.min_value}..={self.max_value})"
            )
        return converted


class BigInteger(Numeric[int]):
    """Arbitrary-precision integers; addition cannot saturate."""

    def __repr__(self) -> str:
        return "BigInteger()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BigInteger)

    def __hash__(self) -> int:
        return hash(BigInteger)

    @override
    def zero(self) -> int:
        return 0

    @override
    def one(self) -> int:
        return 1

    @override
    def saturating_add(self, left: int, right: int) -> int:
        return left + right

    @override
    def convert(self, value: Any) -> int:
        try:
            return operator.index(value)
        except TypeError:
            raise TypeError(
                f"Range bound must be an integer.\n"
                f"Got {type(value).__name__!r}: {value!r}"
            ) from None


U8: FixedWidthInteger = FixedWidthInteger(bits=BYTE, name="u8")
U16: FixedWidthInteger = FixedWidthInteger(bits=SHORT, name="u16")
U32: FixedWidthInteger = FixedWidthInteger(bits=WORD, name="u32")
U64: FixedWidthInteger = FixedWidthInteger(bits=LONG, name="u64")
U128: FixedWidthInteger = FixedWidthInteger(bits=WIDE, name="u128")
USIZE: FixedWidthInteger = FixedWidthInteger(bits=POINTER_WIDTH, name="usize")
I8: FixedWidthInteger = FixedWidthInteger(bits=BYTE, signed=True, name="i8")
I16: FixedWidthInteger = FixedWidthInteger(bits=SHORT, signed=True, name="i16")
I32: FixedWidthInteger = FixedWidthInteger(bits=WORD, signed=True, name="i32")
I64: FixedWidthInteger = FixedWidthInteger(bits=LONG, signed=True, name="i64")
I128: FixedWidthInteger = FixedWidthInteger(bits=WIDE, signed=True, name="i128")
INT: BigInteger = BigInteger()

DOMAINS: dict[str, Numeric[int]] = {
    "u8": U8,
    "u16": U16,
    "u32": U32,
    "u64": U64,
    "u128": U128,
    "usize": USIZE,
    "i8": I8,
    "i16": I16,
    "i32": I32,
    "i64": I64,
    "i128": I128,
    "int": INT,
}

DEFAULT_NUMERIC: Numeric[int] = USIZE


__all__ = [
    "Numeric",
    "FixedWidthInteger",
    "BigInteger",
    "DEFAULT_NUMERIC",
    "DOMAINS",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "INT",
]
