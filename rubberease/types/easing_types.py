# No dependencies
from __future__ import annotations
from enum import Enum
from typing import Union


class EasingKind(str, Enum):
    """
    Easing curves available to an interval mapper.

    LINEAR:      Constant pace
    EASE_IN:     Cubic, slow start
    EASE_OUT:    Cubic, slow end
    EASE_IN_OUT: Cubic, slow start and slow end
    """
    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"

    @classmethod
    def coerce(cls, value: EasingLike) -> EasingKind:
        """Convert a member or its name ('ease-in', 'easeInOut', ...) to an EasingKind."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Easing must be an EasingKind or str, got {type(value).__name__}")
        key = _normalize_name(value)
        for kind in cls:
            if kind.value == key:
                return kind
        raise ValueError(f"Invalid easing kind: {value!r}")


EasingLike = Union[EasingKind, str]


def _normalize_name(name: str) -> str:
    # camelCase -> snake_case, then fold separators
    name = name.strip()
    chars = []
    for i, ch in enumerate(name):
        if ch.isupper() and i > 0 and name[i - 1].islower():
            chars.append("_")
        chars.append(ch.lower())
    return "".join(chars).replace("-", "_").replace(" ", "_")
