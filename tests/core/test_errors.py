"""Tests for the error hierarchy and the public package surface."""

import pytest

import vecmat
from vecmat.core.errors import (
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


@pytest.mark.parametrize("error_class,builtin", [
    (MismatchedDimensionalityError, ArithmeticError),
    (IndexOutOfRangeError, IndexError),
    (NotSquareError, ArithmeticError),
    (NotInvertibleError, ArithmeticError),
    (DivideByZeroError, ZeroDivisionError),
    (FixedDimensionViolationError, ArithmeticError),
    (NullComponentError, TypeError),
    (ImaginaryResultError, ArithmeticError),
])
def test_errors_extend_component_error_and_builtin(error_class, builtin):
    """Test that every error can be caught either way."""
    error = error_class("boom", details={"key": "value"})
    assert isinstance(error, ComponentError)
    assert isinstance(error, builtin)
    assert error.message == "boom"
    assert error.details == {"key": "value"}


def test_details_default_to_empty():
    """Test the default details."""
    assert NotSquareError("boom").details == {}


def test_divide_by_zero_default_message():
    """Test the default divide-by-zero message."""
    assert str(DivideByZeroError()) == "Attempted to divide by zero"


def test_number_format_error():
    """Test the parse failure message."""
    error = NumberFormatError("x1", "decimal")
    assert str(error) == "Cannot parse 'x1' as a decimal value"
    assert isinstance(error, ValueError)
    assert error.details == {"text": "x1", "representation": "decimal"}


def test_package_exports():
    """Test the top-level package surface."""
    assert vecmat.__version__ == "0.1.0"
    assert vecmat.Matrix3.identity().times(vecmat.Vector3(1, 2, 3)) == vecmat.Vector3(1, 2, 3)
    assert vecmat.NotInvertibleError is NotInvertibleError
    for name in vecmat.__all__:
        assert hasattr(vecmat, name), name
