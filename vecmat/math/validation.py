"""
Validation and error policy for Component math.

Every guard here is a pure predicate plus a message, and is called before any
math runs, so a failing operation never leaves a Component half-updated.

Messages come from a replaceable ``ErrorMessages`` object; install a subclass
with ``set_error_messages`` to change the wording library-wide.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Sequence

from ..core.errors import (
    DivideByZeroError,
    FixedDimensionViolationError,
    IndexOutOfRangeError,
    MismatchedDimensionalityError,
    NotSquareError,
    NullComponentError,
)

if TYPE_CHECKING:
    from .component import Component
    from .matrix import BaseMatrix


def _values_string(values: Sequence[Any]) -> str:
    return "[" + ",".join(format(v, "f") if isinstance(v, Decimal) else str(v) for v in values) + "]"


def _name_of(component: Any) -> str:
    return getattr(component, "name", type(component).__name__)


class ErrorMessages:
    """Builds the messages attached to Component errors."""

    def dimensionality_not_same(self, component1: Component, component2: Component) -> str:
        return (
            f"The {_name_of(component1)}: {component1} and the {_name_of(component2)}: {component2} "
            f"do not have the same dimensionality"
        )

    def dimensionality_not_equal(self, component: Component, dimensionality: int) -> str:
        return (
            f"The {component.name}: {component} does not have the expected dimensionality of: "
            f"{dimensionality}"
        )

    def length_not_equal(self, values: Sequence[Any], length: int) -> str:
        return (
            f"The components: {_values_string(values)} has a length of: {len(values)} "
            f"but was expecting a length of: {length}"
        )

    def length_not_square(self, values: Sequence[Any]) -> str:
        return (
            f"The components: {_values_string(values)} has a length of: {len(values)} "
            f"but was expecting a perfect square"
        )

    def null_component(self, index: int) -> str:
        return f"The component at index: {index} is None"

    def index_out_of_bounds(self, component: Component, index: int) -> str:
        return f"The {component.name}: {component} does not have a component at index: {index}"

    def coordinate_out_of_bounds(self, component: Component, x: int, y: int) -> str:
        return f"The {component.name}: {component} does not have a component at coordinate: ({x},{y})"

    def range_out_of_bounds(self, component: Component, start: int, stop: int) -> str:
        return f"The range: [{start},{stop}) is out of bounds of the {component.name}: {component}"

    def coordinate_range_out_of_bounds(
        self, component: Component, x1: int, y1: int, x2: int, y2: int
    ) -> str:
        return (
            f"The coordinate range: ({x1},{y1}) to ({x2},{y2}) is out of bounds of the "
            f"{component.name}: {component}"
        )

    def region_not_square(self, x1: int, y1: int, x2: int, y2: int) -> str:
        return (
            f"The coordinate range: ({x1},{y1}) to ({x2},{y2}) has a size of: "
            f"{x2 - x1 + 1}x{y2 - y1 + 1} but was expecting a square"
        )

    def divide_by_zero(self, component: Component) -> str:
        return f"Attempted to divide by zero: the {component.name}: {component} contains a zero component"


_error_messages: ErrorMessages = ErrorMessages()


def get_error_messages() -> ErrorMessages:
    """Get the active message policy."""
    return _error_messages


def set_error_messages(messages: ErrorMessages) -> None:
    """Replace the active message policy."""
    global _error_messages
    _error_messages = messages


# Predicates

def in_bounds(value: int, lower: int, upper: int) -> bool:
    """Check lower <= value < upper."""
    return lower <= value < upper


def is_square(n: int) -> bool:
    """Check whether n is a perfect square."""
    return n >= 0 and math.isqrt(n) ** 2 == n


# Assertions

def assert_dimensionality_same(component1: Component, component2: Component) -> None:
    """
    Require two Components to have the same dimensionality.

    Raises:
        MismatchedDimensionalityError: If the dimensionalities differ
    """
    if not component1.dimensionality_equal(component2):
        raise MismatchedDimensionalityError(
            _error_messages.dimensionality_not_same(component1, component2),
            details={
                "expected": component1.dimensionality,
                "actual": getattr(component2, "dimensionality", None),
            }
        )


def assert_shape_same(component1: Component, component2: Component) -> None:
    """
    Require two Components to have the same dimensionality and length.

    A Vector and a Matrix of equal dimensionality have different lengths
    and never combine elementwise.

    Raises:
        MismatchedDimensionalityError: If the dimensionalities or lengths differ
    """
    assert_dimensionality_same(component1, component2)
    if not component1.length_equal(component2):
        raise MismatchedDimensionalityError(
            _error_messages.dimensionality_not_same(component1, component2),
            details={"expected": component1.length, "actual": component2.length}
        )


def assert_dimensionality_equal(component: Component, dimensionality: int) -> None:
    """
    Require a Component to have exactly the given dimensionality.

    Raises:
        MismatchedDimensionalityError: If the dimensionality differs
    """
    if component.dimensionality != dimensionality:
        raise MismatchedDimensionalityError(
            _error_messages.dimensionality_not_equal(component, dimensionality),
            details={"expected": dimensionality, "actual": component.dimensionality}
        )


def assert_index_in_bounds(component: Component, index: int) -> None:
    if not in_bounds(index, 0, component.length):
        raise IndexOutOfRangeError(
            _error_messages.index_out_of_bounds(component, index),
            details={"index": index, "length": component.length}
        )


def assert_coordinate_in_bounds(component: BaseMatrix, x: int, y: int) -> None:
    if not in_bounds(x, 0, component.width) or not in_bounds(y, 0, component.height):
        raise IndexOutOfRangeError(
            _error_messages.coordinate_out_of_bounds(component, x, y),
            details={"x": x, "y": y, "width": component.width, "height": component.height}
        )


def assert_range_in_bounds(component: Component, start: int, stop: int) -> None:
    if start < 0 or start > stop or stop > component.length:
        raise IndexOutOfRangeError(
            _error_messages.range_out_of_bounds(component, start, stop),
            details={"start": start, "stop": stop, "length": component.length}
        )


def assert_coordinate_range_in_bounds(component: BaseMatrix, x1: int, y1: int, x2: int, y2: int) -> None:
    if (
        x2 < x1 or y2 < y1
        or not in_bounds(x1, 0, component.width) or not in_bounds(x2, 0, component.width)
        or not in_bounds(y1, 0, component.height) or not in_bounds(y2, 0, component.height)
    ):
        raise IndexOutOfRangeError(
            _error_messages.coordinate_range_out_of_bounds(component, x1, y1, x2, y2),
            details={"from": (x1, y1), "to": (x2, y2)}
        )


def assert_square_length(values: Sequence[Any]) -> None:
    """
    Require a flat value list to describe a square Matrix.

    Raises:
        NotSquareError: If the length is not a perfect square
    """
    if not is_square(len(values)):
        raise NotSquareError(
            _error_messages.length_not_square(values),
            details={"length": len(values)}
        )


def assert_square_region(x1: int, y1: int, x2: int, y2: int) -> None:
    """
    Require a Matrix region to be as wide as it is high.

    Raises:
        NotSquareError: If the region is not square
    """
    if (x2 - x1) != (y2 - y1):
        raise NotSquareError(
            _error_messages.region_not_square(x1, y1, x2, y2),
            details={"width": x2 - x1 + 1, "height": y2 - y1 + 1}
        )


def assert_fixed_length(values: Sequence[Any], length: int) -> None:
    """
    Require a fixed-size Component to receive exactly ``length`` values.

    Raises:
        FixedDimensionViolationError: If the length differs
    """
    if len(values) != length:
        raise FixedDimensionViolationError(
            _error_messages.length_not_equal(values, length),
            details={"expected": length, "actual": len(values)}
        )


def assert_fixed_dimensionality(component: Component, dimensionality: int) -> None:
    """
    Require a non-resizeable Component to keep its dimensionality.

    Raises:
        FixedDimensionViolationError: If the requested dimensionality differs
    """
    if not component.is_resizeable() and component.dimensionality != dimensionality:
        raise FixedDimensionViolationError(
            _error_messages.dimensionality_not_equal(component, component.dimensionality),
            details={"expected": component.dimensionality, "actual": dimensionality}
        )


def assert_no_null(values: Sequence[Any]) -> None:
    for index, value in enumerate(values):
        if value is None:
            raise NullComponentError(
                _error_messages.null_component(index),
                details={"index": index}
            )


def assert_no_zero_divisor(component: Component) -> None:
    """
    Require every element of a divisor Component to be non-zero.

    Raises:
        DivideByZeroError: If any element is zero
    """
    arithmetic = component.arithmetic
    if any(arithmetic.is_zero(value) for value in component.components):
        raise DivideByZeroError(
            _error_messages.divide_by_zero(component),
            details={"divisor": component.to_string()}
        )
