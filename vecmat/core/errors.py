"""
Library exceptions.

Every error raised by the algebra core derives from ``ComponentError`` and
from the closest built-in exception, so callers may catch either. All of them
are raised before any partial computation takes place.
"""

from typing import Any, Dict, Optional


class ComponentError(Exception):
    """Base exception for Component algebra errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MismatchedDimensionalityError(ComponentError, ArithmeticError):
    """Raised when operands do not have the required dimensionality"""


class IndexOutOfRangeError(ComponentError, IndexError):
    """Raised when an index, coordinate or range falls outside a Component"""


class NotSquareError(ComponentError, ArithmeticError):
    """Raised when a Matrix would not be square"""


class NotInvertibleError(ComponentError, ArithmeticError):
    """Raised when inverting a Matrix whose determinant is zero"""


class DivideByZeroError(ComponentError, ZeroDivisionError):
    """Raised when a divisor is zero"""

    def __init__(self, message: str = "Attempted to divide by zero", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class FixedDimensionViolationError(ComponentError, ArithmeticError):
    """Raised when a fixed-size Component receives a different size"""


class NullComponentError(ComponentError, TypeError):
    """Raised when a Component would contain a None entry"""


class NumberFormatError(ComponentError, ValueError):
    """Raised when a string cannot be parsed by a numeric representation"""

    def __init__(self, text: Any, representation: str):
        super().__init__(
            message=f"Cannot parse '{text}' as a {representation} value",
            details={"text": text, "representation": representation}
        )


class ImaginaryResultError(ComponentError, ArithmeticError):
    """Raised when a root of a negative value is requested"""
