"""
One-shot interval mapping (deprecated, uses IntervalMapper).

This module is deprecated. Use rubberease.mapper.IntervalMapper directly instead.
"""

import warnings

from ..mapper import IntervalMapper
from ..types.easing_types import EasingKind, EasingLike
from ..types.number_types import IntervalLike, ScalarOrArray


def map_value(
    value: ScalarOrArray,
    source: IntervalLike,
    destination: IntervalLike,
    easing: EasingLike = EasingKind.LINEAR,
) -> ScalarOrArray:
    """
    Map a value from source to destination with an easing curve.

    Deprecated: Kept for callers of the earlier one-shot, non-builder API.
    Build an IntervalMapper once and reuse it instead.

    Out-of-range values are clamped to the source edges before mapping.

    Args:
        value: Value(s) to map
        source: Input interval or (low, high) pair
        destination: Output interval or (low, high) pair
        easing: Easing kind or its name

    Returns:
        Mapped value(s)
    """
    warnings.warn(
        "map_value is deprecated. Use rubberease.IntervalMapper instead.",
        DeprecationWarning,
        stacklevel=2
    )
    mapper = IntervalMapper(source, destination=destination, easing=easing)
    return mapper.interpolate(value)
