"""
Component base class shared by Vector and Matrix types.

A Component is an ordered, fixed-length sequence of values of one numeric
representation, plus the arithmetic strategy that does all math on them.
Everything that only needs the flat value list lives here: elementwise
arithmetic, distance, averaging, rounding, resizing, copying and equality.

Concrete classes differ only in their class variables:

- ``arithmetic_type``: the strategy class for the representation
- ``fixed_dimensionality``: set for fixed-size types (``Vector3``, ``Matrix4`` ...)
- ``resizeable``: whether ``redim`` may change the size

Every arithmetic operation returns a new instance and leaves its operands
untouched. The derived instance receives the source's (immutable) strategy,
which is how decimal precision settings follow a value through a computation.
"""

from __future__ import annotations

import numbers
from typing import Any, ClassVar, Iterable, Iterator, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..core.logging import get_context_logger
from .arithmetic import Arithmetic, DecimalArithmetic, FloatArithmetic, IntArithmetic
from .validation import (
    assert_fixed_length,
    assert_index_in_bounds,
    assert_no_null,
    assert_no_zero_divisor,
    assert_shape_same,
)

logger = get_context_logger(__name__)


class Component(BaseModel):
    """
    Fixed-length container of numeric values.

    Construction patterns (the same for every subclass):
        Vector(1, 2, 3)             explicit values
        Vector([1, 2, 3])           a list, tuple or numpy array
        Vector("1.5", "2")          strings, parsed by the representation
        Vector(other)               another Component, converted
        Vector(other, 4, 5)         another Component followed by extra values
        Vector(dim=3)               zero-filled of the given dimensionality

    Args:
        arithmetic: Strategy to use; defaults to a new ``arithmetic_type``
            or, when copying a Component of the same representation, the
            source's strategy
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    components: list[Any] = Field(default_factory=list)
    arithmetic: Arithmetic

    name: ClassVar[str] = "Component"
    arithmetic_type: ClassVar[type[Arithmetic]] = FloatArithmetic
    fixed_dimensionality: ClassVar[Optional[int]] = None
    resizeable: ClassVar[bool] = True

    def __init__(
        self,
        *args: Any,
        dim: Optional[int] = None,
        arithmetic: Optional[Arithmetic] = None,
        components: Optional[Iterable[Any]] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a Component supporting all construction patterns."""
        if components is not None and args:
            raise ValueError(f"{self.name} accepts either components or positional arguments, not both")
        if components is not None:
            args = (list(components),)

        cls = type(self)
        resolved = cls._resolve_arithmetic(args, arithmetic)
        values = cls._parse_arguments(args, dim, resolved)
        cls._validate_length(values)

        super().__init__(components=values, arithmetic=resolved, **kwargs)

    # Construction helpers

    @classmethod
    def _resolve_arithmetic(cls, args: tuple[Any, ...], arithmetic: Optional[Arithmetic]) -> Arithmetic:
        if arithmetic is not None:
            if type(arithmetic) is not cls.arithmetic_type:
                raise TypeError(
                    f"{cls.name} requires {cls.arithmetic_type.__name__}, got {type(arithmetic).__name__}"
                )
            return arithmetic

        source = args[0] if args and isinstance(args[0], Component) else None
        if source is not None and type(source.arithmetic) is cls.arithmetic_type:
            return source.arithmetic
        return cls.arithmetic_type()

    @classmethod
    def _parse_arguments(
        cls,
        args: tuple[Any, ...],
        dim: Optional[int],
        arithmetic: Arithmetic,
    ) -> list[Any]:
        """Parse constructor arguments into a flat list of converted values."""
        if len(args) == 0:
            if cls.fixed_dimensionality is not None:
                dim = cls.fixed_dimensionality
            return [arithmetic.zero()] * cls.dimensionality_to_length(dim or 0)

        raw = cls._flatten(args)
        assert_no_null(raw)
        return [cls._coerce(arithmetic, value) for value in raw]

    @classmethod
    def _flatten(cls, args: tuple[Any, ...]) -> list[Any]:
        if len(args) == 1:
            single = args[0]
            if isinstance(single, Component):
                return cls._from_component(single)
            if isinstance(single, np.ndarray):
                return single.ravel().tolist()
            if isinstance(single, (list, tuple)):
                args = tuple(single)

        values: list[Any] = []
        for arg in args:
            if isinstance(arg, Component):
                values.extend(arg.components)
            elif isinstance(arg, np.ndarray):
                values.extend(arg.ravel().tolist())
            elif isinstance(arg, (list, tuple)):
                # nested rows
                values.extend(arg)
            else:
                values.append(arg)
        return values

    @classmethod
    def _from_component(cls, source: Component) -> list[Any]:
        return list(source.components)

    @staticmethod
    def _coerce(arithmetic: Arithmetic, value: Any) -> Any:
        if isinstance(value, str):
            return arithmetic.parse(value)
        return arithmetic.value_of(value)

    @classmethod
    def _validate_length(cls, values: list[Any]) -> None:
        if cls.fixed_dimensionality is not None:
            assert_fixed_length(values, cls.dimensionality_to_length(cls.fixed_dimensionality))

    # Dimensionality

    @classmethod
    def dimensionality_to_length(cls, dim: int) -> int:
        """Calculate the length of a Component from its dimensionality."""
        return max(dim, 0)

    @classmethod
    def length_to_dimensionality(cls, length: int) -> int:
        """Calculate the dimensionality of a Component from its length."""
        return max(length, 0)

    @property
    def dimensionality(self) -> int:
        return type(self).length_to_dimensionality(len(self.components))

    @property
    def length(self) -> int:
        return len(self.components)

    @property
    def precision(self) -> Any:
        """Tolerance used by equality comparisons."""
        return self.arithmetic.tolerance

    def is_resizeable(self) -> bool:
        return self.resizeable

    def dimensionality_equal(self, other: Any) -> bool:
        return isinstance(other, Component) and self.dimensionality == other.dimensionality

    def length_equal(self, other: Any) -> bool:
        return isinstance(other, Component) and self.length == other.length

    def component_type_equal(self, other: Any) -> bool:
        return isinstance(other, Component) and type(self.arithmetic) is type(other.arithmetic)

    # Instances

    def _derive(self, values: list[Any]) -> Any:
        """Build a new instance of this type holding values, carrying the strategy."""
        return type(self)(values, arithmetic=self.arithmetic)

    def _values_of(self, other: Component) -> list[Any]:
        """Return another Component's raw values in this Component's representation."""
        if self.component_type_equal(other):
            return other.components
        return [self.arithmetic.value_of(value) for value in other.components]

    def cloned(self) -> Any:
        """Create a copy of this Component."""
        return self._derive(list(self.components))

    def empty_copy(self) -> Any:
        """Create a zero-filled Component of the same type and dimensionality."""
        return type(self)(dim=self.dimensionality, arithmetic=self.arithmetic)

    def create_new_instance(self, dim: int) -> Any:
        """Create a zero-filled Component of the same type with the given dimensionality."""
        return type(self)(dim=max(dim, 0), arithmetic=self.arithmetic)

    @classmethod
    def create_instance(cls, dim: Optional[int] = None) -> Any:
        """Create a zero-filled Component; fixed-size types ignore dim."""
        return cls(dim=max(dim or 0, 0))

    def copy(self, to: Component) -> None:
        """
        Copy this Component's values and metadata into another Component.

        Args:
            to: Component of the same dimensionality and length

        Raises:
            MismatchedDimensionalityError: If the shapes differ
        """
        assert_shape_same(self, to)
        values = to._values_of(self)
        for index, value in enumerate(values):
            to.components[index] = value
        self.copy_meta(to)

    def copy_meta(self, to: Component) -> None:
        """Copy representation metadata (the arithmetic strategy) to another Component."""
        if self.component_type_equal(to):
            to.arithmetic = self.arithmetic

    # Math

    def _elementwise(self, other: Component, operation) -> Any:
        assert_shape_same(self, other)
        theirs = self._values_of(other)
        return self._derive([operation(mine, their) for mine, their in zip(self.components, theirs)])

    def plus(self, other: Component) -> Any:
        return self._elementwise(other, self.arithmetic.add)

    def minus(self, other: Component) -> Any:
        return self._elementwise(other, self.arithmetic.subtract)

    def times(self, other: Component) -> Any:
        """Elementwise product with another Component."""
        return self._elementwise(other, self.arithmetic.multiply)

    def divided_by(self, other: Component) -> Any:
        """
        Elementwise quotient with another Component.

        Raises:
            MismatchedDimensionalityError: If the shapes differ
            DivideByZeroError: If any divisor element is zero
        """
        assert_shape_same(self, other)
        assert_no_zero_divisor(other)
        return self._elementwise(other, self.arithmetic.divide)

    def scale(self, scalar: Any) -> Any:
        factor = self.arithmetic.value_of(scalar)
        return self._derive([self.arithmetic.multiply(value, factor) for value in self.components])

    def distance(self, other: Component) -> Any:
        """
        Calculate the Euclidean distance to another Component.

        Returns:
            sqrt of the summed squared per-element differences
        """
        assert_shape_same(self, other)
        a = self.arithmetic
        two = a.value_of(2)
        total = a.zero()
        for mine, theirs in zip(self.components, self._values_of(other)):
            total = a.add(total, a.power(a.subtract(theirs, mine), two))
        return a.sqrt(total)

    def midpoint(self, other: Component) -> Any:
        return self.average(other)

    def average(self, *others: Any) -> Any:
        """
        Calculate the elementwise mean of this Component and others.

        Accepts the others either as separate arguments or as one list.
        """
        if len(others) == 1 and isinstance(others[0], (list, tuple)):
            others = tuple(others[0])
        for other in others:
            assert_shape_same(self, other)

        a = self.arithmetic
        count = a.value_of(len(others) + 1)
        columns = [self._values_of(other) for other in others]
        values = []
        for index, value in enumerate(self.components):
            total = value
            for column in columns:
                total = a.add(total, column[index])
            values.append(a.divide(total, count))
        return self._derive(values)

    def sum(self) -> Any:
        a = self.arithmetic
        total = a.zero()
        for value in self.components:
            total = a.add(total, value)
        return total

    def square_sum(self) -> Any:
        a = self.arithmetic
        two = a.value_of(2)
        total = a.zero()
        for value in self.components:
            total = a.add(total, a.power(value, two))
        return total

    def round(self) -> Any:
        return self._derive([self.arithmetic.round(value) for value in self.components])

    def reverse(self) -> Any:
        return self._derive(self.components[::-1])

    # Resizing

    def redim(self, new_dim: int) -> None:
        """
        Resize the Component in place.

        Does nothing for fixed-size types or an unchanged dimensionality.
        A dimensionality of zero or less empties the Component; shrinking
        truncates and growing pads with zeros.
        """
        old_dim = self.dimensionality
        if not self.is_resizeable() or new_dim == old_dim:
            return
        if new_dim <= 0:
            self.set_components([])
        else:
            self.set_components(self._resized(new_dim))
        logger.debug(
            f"Resized {self.name}",
            extra_data={"from": old_dim, "to": self.dimensionality}
        )

    def _resized(self, new_dim: int) -> list[Any]:
        length = type(self).dimensionality_to_length(new_dim)
        values = self.components[:length]
        return values + [self.arithmetic.zero()] * (length - len(values))

    # Accessors

    def get_raw(self, index: int) -> Any:
        assert_index_in_bounds(self, index)
        return self.components[index]

    def get(self, index: int) -> Any:
        return self.arithmetic.clean(self.get_raw(index))

    def get_raw_components(self) -> list[Any]:
        return list(self.components)

    def get_components(self) -> list[Any]:
        """Return the cleaned values, as used for display and comparison output."""
        return [self.arithmetic.clean(value) for value in self.components]

    def set(self, index: int, value: Any) -> None:
        """Set one value; a None value is ignored."""
        assert_index_in_bounds(self, index)
        if value is not None:
            self.components[index] = self._coerce(self.arithmetic, value)

    def set_components(self, values: Iterable[Any]) -> None:
        """
        Replace all values.

        Raises:
            NullComponentError: If any value is None
            FixedDimensionViolationError: If a fixed-size type would change size
        """
        values = list(values)
        assert_no_null(values)
        type(self)._validate_length(values)
        self.components = [self._coerce(self.arithmetic, value) for value in values]

    # Output

    def _strings(self) -> list[str]:
        return [self.arithmetic.to_string(value) for value in self.get_components()]

    def to_string(self) -> str:
        return "[" + ", ".join(self._strings()) + "]"

    def to_python(self) -> list[Any]:
        return self.get_components()

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        if isinstance(self.arithmetic, IntArithmetic):
            return np.array(self.get_components())
        return np.array([float(value) for value in self.get_components()], dtype=float)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()})"

    # Comparison

    def __eq__(self, other: Any) -> bool:
        """Same concrete type, same shape and tolerance-equal values."""
        if type(other) is not type(self):
            return False
        if not self.dimensionality_equal(other) or not self.length_equal(other):
            return False
        return all(
            self.arithmetic.is_equal(mine, theirs)
            for mine, theirs in zip(self.components, other.components)
        )

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    __hash__ = None

    # Python protocol

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self.components))

    def __getitem__(self, index: int) -> Any:
        return self.get_raw(index)

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Component):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Component):
            return self.minus(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Component):
            return self.times(other)
        if isinstance(other, numbers.Number):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, numbers.Number):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, Component):
            return self.divided_by(other)
        if isinstance(other, numbers.Number):
            a = self.arithmetic
            divisor = a.value_of(other)
            return self._derive([a.divide(value, divisor) for value in self.components])
        return NotImplemented

    def __neg__(self) -> Any:
        return self.scale(self.arithmetic.negative_one())

    def __pos__(self) -> Any:
        return self.cloned()


class DecimalComponentMixin:
    """Precision controls for decimal-backed Components."""

    @property
    def math_context(self) -> tuple[int, str]:
        """The (decimal places, rounding mode) pair applied to every result."""
        return (self.arithmetic.precision, self.arithmetic.rounding)

    def set_math_context(self, precision: Optional[int] = None, rounding: Optional[str] = None) -> None:
        """
        Replace the decimal precision configuration of this Component.

        Components already derived from this one keep the configuration they
        were created with.
        """
        current = self.arithmetic
        self.arithmetic = DecimalArithmetic(
            precision=current.precision if precision is None else precision,
            rounding=rounding or current.rounding,
        )
