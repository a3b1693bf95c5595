# ===================== mapper.py =====================
"""
Interval mapping with easing and rubberband extrapolation.

An IntervalMapper rescales values from a source interval into a destination
interval in two phases:

1. Boundary resolution: out-of-range inputs are clamped to the source edges,
   or elastically extrapolated when a rubberband coefficient is set.
2. Curve-mapped rescale: the resolved value is normalized against the source
   interval, passed through the easing curve and scaled into the destination.

Mappers are immutable. The ``with_*`` methods return reconfigured copies.
"""

from __future__ import annotations
import math
from typing import Any, Optional

import numpy as np

from .boundaries import resolve_boundary
from .easing import easing_functions
from .interval import Interval
from .types.easing_types import EasingKind, EasingLike
from .types.number_types import Scalar, ScalarOrArray, IntervalLike

DEFAULT_EASING = EasingKind.LINEAR
DEFAULT_RUBBERBAND = 0.0


def _validate_coefficient(coefficient: Scalar) -> Scalar:
    if not math.isfinite(coefficient) or coefficient < 0:
        raise ValueError(f"Rubberband coefficient must be a finite non-negative number, got {coefficient}")
    return coefficient


class IntervalMapper:
    """
    Map values from a source interval to a destination interval.

    Args:
        source: Interval raw inputs are expected to lie in. Must not be degenerate.
        destination: Output interval. Defaults to ``source``.
        rubberband: Elastic stiffness beyond the source edges. 0 means hard clamp.
        easing: Curve applied to normalized progress.

    Example:
        >>> mapper = (
        ...     IntervalMapper((0.0, 1.0))
        ...     .with_destination((0.0, 10.0))
        ...     .with_easing(EasingKind.EASE_OUT)
        ... )
        >>> mapper.interpolate(0.5)
        8.75
    """
    __slots__ = ('_source', '_destination', '_rubberband_coefficient', '_easing', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        source: IntervalLike,
        destination: Optional[IntervalLike] = None,
        rubberband: Scalar = DEFAULT_RUBBERBAND,
        easing: EasingLike = DEFAULT_EASING,
    ) -> None:
        source = Interval.coerce(source)
        if source.is_degenerate:
            raise ValueError(f"Source interval must have a non-zero span, got {source!r}")

        self._source = source
        self._destination = source if destination is None else Interval.coerce(destination)
        self._rubberband_coefficient = _validate_coefficient(rubberband)
        self._easing = EasingKind.coerce(easing)
        self._is_frozen = True

    # =========================================================================
    # Properties
    # =========================================================================
    @property
    def source(self) -> Interval:
        return self._source

    @property
    def destination(self) -> Interval:
        return self._destination

    @property
    def rubberband_coefficient(self) -> Scalar:
        return self._rubberband_coefficient

    @property
    def easing(self) -> EasingKind:
        return self._easing

    # =========================================================================
    # Builders
    # =========================================================================
    def _replace(self, **changes: Any) -> IntervalMapper:
        fields = {
            'source': self._source,
            'destination': self._destination,
            'rubberband': self._rubberband_coefficient,
            'easing': self._easing,
        }
        fields.update(changes)
        return IntervalMapper(**fields)

    def with_destination(self, destination: IntervalLike) -> IntervalMapper:
        """Return a copy that maps into ``destination``."""
        return self._replace(destination=destination)

    def with_rubberband(self, coefficient: Scalar) -> IntervalMapper:
        """Return a copy with a new rubberband coefficient (0 disables it)."""
        return self._replace(rubberband=coefficient)

    def with_easing(self, easing: EasingLike) -> IntervalMapper:
        """Return a copy using a different easing curve."""
        return self._replace(easing=easing)

    # =========================================================================
    # Evaluation
    # =========================================================================
    def interpolate(self, value: ScalarOrArray) -> ScalarOrArray:
        """
        Map a value (or an array of values) into the destination interval.

        Args:
            value: Scalar or array-like of scalars

        Returns:
            float for scalar input, otherwise an ndarray of the same shape
        """
        is_scalar = np.ndim(value) == 0
        if is_scalar:
            value = float(value)
        else:
            value = np.asarray(value, dtype=np.float64)

        # float64 throughout, whatever the dtype of the bounds
        src_low, src_high = float(self._source.low), float(self._source.high)
        dst_low, dst_high = float(self._destination.low), float(self._destination.high)
        resolved = resolve_boundary(value, src_low, src_high, self._rubberband_coefficient)

        u = (resolved - src_low) / (src_high - src_low)
        eased = easing_functions[self._easing](u)
        result = dst_low + eased * (dst_high - dst_low)

        return float(result) if is_scalar else result

    __call__ = interpolate

    # =========================================================================
    # Value semantics
    # =========================================================================
    def _key(self):
        return (self._source, self._destination, self._rubberband_coefficient, self._easing)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalMapper):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(source={self._source!r}, destination={self._destination!r}, "
            f"rubberband={self._rubberband_coefficient!r}, easing={self._easing.value!r})"
        )


__all__ = [
    'DEFAULT_EASING',
    'DEFAULT_RUBBERBAND',
    'IntervalMapper',
]
