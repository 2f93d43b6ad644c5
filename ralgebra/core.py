from abc import ABC
from dataclasses import dataclass, field
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Generic

from ralgebra.interval import HasBounds, Idx

if TYPE_CHECKING:
    from ralgebra.numeric import Numeric


class _Coercing:
    # Index domain used to convert bounds passed to range operations.
    # None means bounds are used as given.
    numeric: "Numeric[Any] | None" = None

    def _coerce(self, bound: Any) -> Any:
        if self.numeric is None:
            return bound
        return self.numeric.convert(bound)


class StrictRange(_Coercing, ABC, Generic[Idx]):
    """A range with a definite start and a definite exclusive end.

    Implementations expose ``start`` and ``end`` (both ``Idx``). Every
    operation returns a new ``Bounded`` whose start never exceeds its end:
    out-of-order or disjoint bounds collapse to an empty range instead of
    raising.
    """

    start: Idx
    end: Idx

    def clamp(self, start: Any, end: Any) -> "Bounded[Idx]":
        """Restrict this range to ``[start, end)``."""
        hi = min(self.end, self._coerce(end))
        lo = min(max(self.start, self._coerce(start)), hi)
        return Bounded(start=lo, end=hi, numeric=self.numeric)

    def clamp_left(self, start: Any) -> "Bounded[Idx]":
        return self.clamp(start, self.end)

    def clamp_right(self, end: Any) -> "Bounded[Idx]":
        return self.clamp(self.start, end)

    def intersection(self, other: HasBounds) -> "Bounded[Idx] | OpenRange[Idx]":
        """Overlap with another range, possibly over another index type.

        A strict ``other`` gives a ``Bounded``. An open ``other`` (``end`` is
        None) falls back to the partial intersection and gives an
        ``OpenRange``, so both argument orders cover the same indices.
        """
        if other.end is None:
            return PartialRange.intersection(self, other)
        return self.clamp(other.start, other.end)

    def to_open_range(self) -> "OpenRange[Idx]":
        return OpenRange(start=self.start, end=self.end, numeric=self.numeric)

    def is_empty(self) -> bool:
        return not self.start < self.end


class PartialRange(_Coercing, ABC, Generic[Idx]):
    """A range with a definite start and an end that may be absent.

    Implementations expose ``start`` (``Idx``) and ``end`` (``Idx | None``,
    where None means unbounded above).

    Forms that are also strict ranges resolve plain calls to the strict
    operations. Reach the partial ones with an explicit base call, e.g.
    ``PartialRange.clamp_left(rng, 5)``, or go through ``to_open_range()``.
    """

    start: Idx
    end: Idx | None

    def clamp(self, start: Any, end: Any) -> "Bounded[Idx]":
        """Restrict to ``[start, end)``; an absent end is taken to be ``end``."""
        lo = self._coerce(start)
        hi = self._coerce(end)
        if self.end is not None:
            hi = min(hi, self.end)
        lo = min(max(lo, self.start), hi)
        return Bounded(start=lo, end=hi, numeric=self.numeric)

    def clamp_left(self, start: Any) -> "OpenRange[Idx]":
        """Raise the start to at least ``start``; openness is preserved."""
        return OpenRange(
            start=max(self.start, self._coerce(start)),
            end=self.end,
            numeric=self.numeric,
        )

    def clamp_right(self, end: Any) -> "Bounded[Idx]":
        hi = self._coerce(end)
        if self.end is not None:
            hi = min(hi, self.end)
        lo = min(self.start, hi)
        return Bounded(start=lo, end=hi, numeric=self.numeric)

    def intersection(self, other: HasBounds) -> "OpenRange[Idx]":
        """Overlap with any range; stays open only if both sides are open.

        ``other`` may be a strict or a partial range, over any index type
        this range's bounds convert from.
        """
        if other.end is None:
            return PartialRange.clamp_left(self, other.start)
        clamped = PartialRange.clamp(self, other.start, other.end)
        return clamped.to_open_range()

    def is_bounded(self) -> bool:
        return self.end is not None


@dataclass(frozen=True, kw_only=True, order=True)
class Bounded(StrictRange[Idx], PartialRange[Idx]):
    """The half-open range ``[start, end)``.

    No ordering is enforced on construction; ranges produced by clamping
    and intersection always have ``start <= end``.
    """

    start: Idx
    end: Idx
    numeric: "Numeric[Any] | None" = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


@total_ordering
@dataclass(frozen=True, kw_only=True)
class OpenRange(PartialRange[Idx]):
    """A range whose end may be absent (``end=None`` is unbounded above).

    Ordering is componentwise, with an absent end sorting before any
    present one.
    """

    start: Idx
    end: Idx | None = None
    numeric: "Numeric[Any] | None" = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        if self.end is None:
            return f"[{self.start}, ∞)"
        return f"[{self.start}, {self.end})"

    def _sort_key(self) -> tuple[Any, ...]:
        if self.end is None:
            return (self.start, False)
        return (self.start, True, self.end)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OpenRange):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def to_open_range(self) -> "OpenRange[Idx]":
        return self
