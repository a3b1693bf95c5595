"""
Boundary resolution for values outside a source interval.

Two policies exist:

    CLAMP (coefficient == 0):  snap to the nearest edge
    RUBBERBAND (coefficient > 0): logarithmic elastic extrapolation

Rubberbanding keeps the value outside the interval but shrinks its excess:

    below: low  - c * ln(1 + (low - x) / c)
    above: high + c * ln(1 + (x - high) / c)

Small coefficients approach hard clamping; large ones allow large excursions.
Logarithms are taken in float64.
"""

import math
import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers import clamp as clamp_scalar
from boundednumbers.functions import extract_excess
from boundednumbers.np_functions import extract_excess as np_extract_excess

from .types.number_types import Scalar, ScalarOrArray


def clamp(value: ScalarOrArray, low: Scalar, high: Scalar) -> ScalarOrArray:
    """
    Clamp value to range [low, high].

    Args:
        value: Scalar or array to clamp
        low: Minimum value
        high: Maximum value

    Returns:
        Clamped value
    """
    if isinstance(value, np.ndarray):
        return bound_type_to_np_function[BoundType.CLAMP](value, low, high)
    return clamp_scalar(value, low, high)


def rubberband(value: ScalarOrArray, low: Scalar, high: Scalar, coefficient: Scalar) -> ScalarOrArray:
    """
    Elastically pull out-of-range values toward [low, high].

    In-range values are returned unchanged. The result is never clamped back
    into the interval.

    Args:
        value: Scalar or array
        low: Lower edge of the interval
        high: Upper edge of the interval
        coefficient: Stiffness, must be > 0

    Returns:
        Resolved value (float64 for arrays)
    """
    c = float(coefficient)
    if isinstance(value, np.ndarray):
        edge, excess = np_extract_excess(value.astype(np.float64), low, high)
        # excess is signed: negative below low, positive above high, 0 inside
        return edge + np.sign(excess) * c * np.log1p(np.abs(excess) / c)

    edge, excess = extract_excess(value, low, high)
    if excess == 0:
        return value
    return float(edge) + math.copysign(c * math.log1p(abs(float(excess)) / c), excess)


def resolve_boundary(value: ScalarOrArray, low: Scalar, high: Scalar, coefficient: Scalar = 0.0) -> ScalarOrArray:
    """Dispatch to clamp or rubberband based on the coefficient."""
    if coefficient == 0:
        return clamp(value, low, high)
    return rubberband(value, low, high, coefficient)


__all__ = [
    'clamp',
    'rubberband',
    'resolve_boundary',
]
