"""
Cubic easing curves.

Formulas follow the cubic family from https://easings.net/. Every curve maps
0 -> 0 and 1 -> 1 and is evaluated without clamping, so progress values
outside [0, 1] (from rubberbanding) extend the polynomial naturally.

All functions accept a scalar or an ndarray and return the same kind.
"""

from typing import Callable, Dict
import numpy as np

from .types.easing_types import EasingKind, EasingLike
from .types.number_types import ScalarOrArray

EasingFunction = Callable[[ScalarOrArray], ScalarOrArray]


def linear(u):
    """Identity curve."""
    return u


def ease_in_cubic(u):
    """Slow start, fast end."""
    return u ** 3


def ease_out_cubic(u):
    """Fast start, slow end."""
    return 1.0 - (1.0 - u) ** 3


def ease_in_out_cubic(u):
    """Smooth acceleration and deceleration, symmetric about u = 0.5."""
    if isinstance(u, np.ndarray):
        return np.where(u < 0.5, 4.0 * u ** 3, 1.0 - (-2.0 * u + 2.0) ** 3 / 2.0)
    if u < 0.5:
        return 4.0 * u ** 3
    return 1.0 - (-2.0 * u + 2.0) ** 3 / 2.0


easing_functions: Dict[EasingKind, EasingFunction] = {
    EasingKind.LINEAR: linear,
    EasingKind.EASE_IN: ease_in_cubic,
    EasingKind.EASE_OUT: ease_out_cubic,
    EasingKind.EASE_IN_OUT: ease_in_out_cubic,
}


def apply_easing(u: ScalarOrArray, easing: EasingLike = EasingKind.LINEAR) -> ScalarOrArray:
    """
    Apply an easing curve to normalized progress.

    Args:
        u: Normalized progress, nominally in [0, 1]
        easing: EasingKind or its name

    Returns:
        Re-paced progress, same shape as u
    """
    return easing_functions[EasingKind.coerce(easing)](u)


__all__ = [
    'EasingFunction',
    'linear',
    'ease_in_cubic',
    'ease_out_cubic',
    'ease_in_out_cubic',
    'easing_functions',
    'apply_easing',
]
