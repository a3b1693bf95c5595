"""rubberease: eased interval mapping with rubberband extrapolation."""

from .types.easing_types import EasingKind
from .interval import Interval
from .easing import (
    apply_easing,
    linear,
    ease_in_cubic,
    ease_out_cubic,
    ease_in_out_cubic,
)
from .boundaries import clamp, rubberband, resolve_boundary
from .mapper import IntervalMapper, DEFAULT_EASING, DEFAULT_RUBBERBAND
from .utils.map_value import map_value

__version__ = "1.0.0"

__all__ = [
    # core types
    "Interval",
    "EasingKind",
    "IntervalMapper",
    "DEFAULT_EASING",
    "DEFAULT_RUBBERBAND",
    # easing curves
    "apply_easing",
    "linear",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
    # boundary handling
    "clamp",
    "rubberband",
    "resolve_boundary",
    # deprecated
    "map_value",
    "__version__",
]
