from .easing_types import EasingKind, EasingLike
from .number_types import Scalar, ScalarOrArray, IntervalLike

__all__ = [
    "EasingKind",
    "EasingLike",
    "Scalar",
    "ScalarOrArray",
    "IntervalLike",
]
