from typing import TypeAlias, Union, Sequence, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from ..interval import Interval

Scalar: TypeAlias = Union[float, int, np.floating]
ScalarOrArray: TypeAlias = Union[Scalar, np.ndarray]
IntervalLike: TypeAlias = Union["Interval", Sequence[Scalar]]
