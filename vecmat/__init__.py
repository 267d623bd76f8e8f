"""
vecmat - generic numeric Vector and Matrix algebra

Example:
    >>> from vecmat import Matrix3, Vector3
    >>> Matrix3.identity().times(Vector3(1, 2, 3))
    Vector3(<1.0, 2.0, 3.0>)
"""

from .core.errors import (
    ComponentError,
    DivideByZeroError,
    FixedDimensionViolationError,
    ImaginaryResultError,
    IndexOutOfRangeError,
    MismatchedDimensionalityError,
    NotInvertibleError,
    NotSquareError,
    NullComponentError,
    NumberFormatError,
)
from .math import *  # noqa: F401,F403
from .math import __all__ as _math_all

__version__ = "0.1.0"

__all__ = [
    *_math_all,
    "ComponentError",
    "MismatchedDimensionalityError",
    "IndexOutOfRangeError",
    "NotSquareError",
    "NotInvertibleError",
    "DivideByZeroError",
    "FixedDimensionViolationError",
    "NullComponentError",
    "NumberFormatError",
    "ImaginaryResultError",
]
