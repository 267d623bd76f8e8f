"""Core utilities package"""

from .config import Settings, settings, get_settings
from .logging import setup_logging, get_context_logger
from .errors import (
    ComponentError,
    MismatchedDimensionalityError,
    IndexOutOfRangeError,
    NotSquareError,
    NotInvertibleError,
    DivideByZeroError,
    FixedDimensionViolationError,
    NullComponentError,
    NumberFormatError,
    ImaginaryResultError,
)

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "setup_logging",
    "get_context_logger",
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
