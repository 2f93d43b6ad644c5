"""Adapters for every interval form, plus Python's native slice syntax.

``Bounded`` (``[a, b)``) lives in ``ralgebra.core`` since every bounded
clamp produces one. The remaining forms are defined here:

    From(start=a)             [a, ∞)     partial only
    Full()                    [0, ∞)     partial only
    Inclusive(start=a, last=b) [a, b]    strict and partial
    To(end=b)                 [0, b)     strict and partial
    ToInclusive(last=b)       [0, b]     strict and partial

Inclusive ends become exclusive by saturating increment, so a range ending
at the largest index of its domain keeps that index as its exclusive end
instead of overflowing.

Example:
    >>> from ralgebra import Inclusive, R, U8
    >>> R[3:10].clamp(5, 8)
    Bounded(start=5, end=8)
    >>> Inclusive(start=0, last=255, numeric=U8).end
    255
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from ralgebra.core import Bounded, PartialRange, StrictRange
from ralgebra.interval import Idx
from ralgebra.numeric import DEFAULT_NUMERIC, Numeric

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class From(PartialRange[Idx]):
    start: Idx
    numeric: "Numeric[Any] | None" = field(default=None, compare=False, repr=False)

    @property
    def end(self) -> None:
        return None

    def __str__(self) -> str:
        return f"[{self.start}, ∞)"


@dataclass(frozen=True, kw_only=True)
class Full(PartialRange[Idx]):
    """Every index of the domain, starting at its zero."""

    numeric: "Numeric[Any]" = field(
        default=DEFAULT_NUMERIC, compare=False, repr=False
    )

    @property
    def start(self) -> Idx:
        return self.numeric.zero()

    @property
    def end(self) -> None:
        return None

    def __str__(self) -> str:
        return "[.., ∞)"


@dataclass(frozen=True, kw_only=True)
class Inclusive(StrictRange[Idx], PartialRange[Idx]):
    """The closed range ``[start, last]``.

    ``last`` is converted through ``numeric`` whenever ``end`` is read, so a
    ``last`` outside the domain raises instead of saturating.
    """

    start: Idx
    last: Idx
    numeric: "Numeric[Any]" = field(
        default=DEFAULT_NUMERIC, compare=False, repr=False
    )

    @property
    def end(self) -> Idx:
        return self.numeric.saturating_increment(self.numeric.convert(self.last))

    def __str__(self) -> str:
        return f"[{self.start}, {self.last}]"


@dataclass(frozen=True, kw_only=True)
class To(StrictRange[Idx], PartialRange[Idx]):
    end: Idx
    numeric: "Numeric[Any]" = field(
        default=DEFAULT_NUMERIC, compare=False, repr=False
    )

    @property
    def start(self) -> Idx:
        return self.numeric.zero()

    def __str__(self) -> str:
        return f"[.., {self.end})"


@dataclass(frozen=True, kw_only=True)
class ToInclusive(StrictRange[Idx], PartialRange[Idx]):
    last: Idx
    numeric: "Numeric[Any]" = field(
        default=DEFAULT_NUMERIC, compare=False, repr=False
    )

    @property
    def start(self) -> Idx:
        return self.numeric.zero()

    @property
    def end(self) -> Idx:
        return self.numeric.saturating_increment(self.numeric.convert(self.last))

    def __str__(self) -> str:
        return f"[.., {self.last}]"


def adapt(
    value: Any, numeric: "Numeric[Any] | None" = None
) -> "PartialRange[Any]":
    """Turn a native interval into the matching range adapter.

    Accepts:
    - slice: ``a:b`` -> Bounded, ``a:`` -> From, ``:`` -> Full, ``:b`` -> To
    - range: ``range(a, b)`` with step 1 -> Bounded
    - any StrictRange or PartialRange: returned unchanged

    Bounds are converted through ``numeric`` when given; conversion errors
    propagate unchanged.

    Raises:
        ValueError: If a slice or range has a step other than 1
        TypeError: If value is not an interval form
    """
    if isinstance(value, (StrictRange, PartialRange)):
        return value

    if isinstance(value, range):
        if value.step != 1:
            raise ValueError(
                f"Only unit-step ranges describe an interval, got {value!r}.\n"
                f"Hint: Use range({value.start}, {value.stop}) instead"
            )
        value = slice(value.start, value.stop)

    if not isinstance(value, slice):
        raise TypeError(
            f"Cannot adapt {type(value).__name__!r} to a range: {value!r}\n"
            f"Examples:\n"
            f"  adapt(slice(3, 10))  # [3, 10)\n"
            f"  adapt(range(3, 10))  # [3, 10)\n"
            f"  R[3:]                # [3, ∞)"
        )
    if value.step not in (None, 1):
        raise ValueError(
            f"Range slices cannot have a step, got {value!r}.\n"
            f"Hint: Write R[a:b] rather than R[a:b:step]"
        )

    start = _convert(value.start, numeric)
    stop = _convert(value.stop, numeric)
    adapted: "PartialRange[Any]"
    if start is None and stop is None:
        adapted = Full(numeric=numeric or DEFAULT_NUMERIC)
    elif start is None:
        adapted = To(end=stop, numeric=numeric or DEFAULT_NUMERIC)
    elif stop is None:
        adapted = From(start=start, numeric=numeric)
    else:
        adapted = Bounded(start=start, end=stop, numeric=numeric)

    logger.debug("Adapted %r to %r", value, adapted)
    return adapted


def _convert(bound: Any, numeric: "Numeric[Any] | None") -> Any:
    if bound is None or numeric is None:
        return bound
    return numeric.convert(bound)


class RangeBuilder:
    """Slice-syntax constructor for range adapters.

    ``R[3:10]``, ``R[3:]``, ``R[:]`` and ``R[:10]`` build the bounded, from,
    full and to forms. Inclusive forms have no slice syntax, so they get
    methods.
    """

    def __init__(self, numeric: "Numeric[Any] | None" = None):
        self.numeric: "Numeric[Any] | None" = numeric

    def __repr__(self) -> str:
        if self.numeric is None:
            return "RangeBuilder()"
        return f"RangeBuilder(numeric={self.numeric})"

    def __getitem__(self, item: slice) -> "PartialRange[Any]":
        if not isinstance(item, slice):
            raise TypeError(
                f"R[...] expects slice syntax, got {type(item).__name__!r}: "
                f"{item!r}\n"
                f"Hint: Write R[3:10] or R[3:], not R[3]"
            )
        return adapt(item, self.numeric)

    def inclusive(self, start: Any, last: Any) -> "Inclusive[Any]":
        numeric = self.numeric or DEFAULT_NUMERIC
        return Inclusive(
            start=numeric.convert(start), last=numeric.convert(last), numeric=numeric
        )

    def to_inclusive(self, last: Any) -> "ToInclusive[Any]":
        numeric = self.numeric or DEFAULT_NUMERIC
        return ToInclusive(last=numeric.convert(last), numeric=numeric)


R: RangeBuilder = RangeBuilder()


__all__ = [
    "From",
    "Full",
    "Inclusive",
    "To",
    "ToInclusive",
    "RangeBuilder",
    "R",
    "adapt",
]
