from __future__ import annotations
import math
from typing import Iterator, Tuple, cast

from .types.number_types import Scalar, IntervalLike


class Interval:
    """
    Closed numeric range [low, high].

    Bounds are kept as given, so numpy floating scalars keep their dtype.
    Instances are immutable and compare by value.
    """
    __slots__ = ('_low', '_high', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, low: Scalar, high: Scalar) -> None:
        if not (math.isfinite(low) and math.isfinite(high)):
            raise ValueError(f"Interval bounds must be finite, got [{low}, {high}]")
        if low > high:
            raise ValueError(f"Interval low bound {low} is greater than high bound {high}")
        self._low = low
        self._high = high
        self._is_frozen = True

    @classmethod
    def coerce(cls, interval: IntervalLike) -> Interval:
        """Accept an Interval or any (low, high) pair."""
        if isinstance(interval, Interval):
            return interval
        try:
            low, high = cast(Tuple[Scalar, Scalar], interval)
        except (TypeError, ValueError):
            raise ValueError(f"Expected an Interval or a (low, high) pair, got {interval!r}") from None
        return cls(low, high)

    @property
    def low(self) -> Scalar:
        return self._low

    @property
    def high(self) -> Scalar:
        return self._high

    lower_bound = low
    upper_bound = high

    @property
    def span(self) -> Scalar:
        return self._high - self._low

    @property
    def is_degenerate(self) -> bool:
        return self._low == self._high

    def contains(self, value: Scalar) -> bool:
        """Inclusive membership test."""
        return self._low <= value <= self._high

    __contains__ = contains

    def __iter__(self) -> Iterator[Scalar]:
        yield self._low
        yield self._high

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._low == other._low and self._high == other._high

    def __hash__(self) -> int:
        return hash((float(self._low), float(self._high)))

    def __repr__(self) -> str:
        return f"Interval({self._low!r}, {self._high!r})"
