import logging

from .adapters import From, Full, Inclusive, R, RangeBuilder, To, ToInclusive, adapt
from .core import Bounded, OpenRange, PartialRange, StrictRange
from .numeric import (
    DEFAULT_NUMERIC,
    I8,
    I16,
    I32,
    I64,
    I128,
    INT,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    BigInteger,
    FixedWidthInteger,
    Numeric,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "StrictRange",
    "PartialRange",
    "OpenRange",
    "Bounded",
    "From",
    "Full",
    "Inclusive",
    "To",
    "ToInclusive",
    "RangeBuilder",
    "R",
    "adapt",
    "Numeric",
    "FixedWidthInteger",
    "BigInteger",
    "DEFAULT_NUMERIC",
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
