"""
Vector types.

``BaseVector`` adds the vector-only operations (dot product, hypotenuse,
normalization, sub-vectors and x/y/z/w access) on top of ``Component``.
One concrete class exists per numeric representation, plus fixed-size float
vectors ``Vector2``, ``Vector3`` and ``Vector4``.

Example:
    >>> v = Vector3(1, 2, 3)
    >>> v.cross(Vector3(4, 5, 6))
    Vector3(<-3.0, 6.0, -3.0>)
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from .arithmetic import DecimalArithmetic, FloatArithmetic, IntArithmetic, NumberArithmetic
from .component import Component, DecimalComponentMixin
from .validation import (
    assert_dimensionality_equal,
    assert_fixed_dimensionality,
    assert_range_in_bounds,
    assert_shape_same,
)


class BaseVector(Component):
    """
    Vector over any numeric representation.

    The dimensionality of a vector equals its length.
    """

    name: ClassVar[str] = "Vector Component"

    @classmethod
    def _from_component(cls, source: Component) -> list[Any]:
        # Fixed-size vectors built from one vector take its leading x/y/z/w values
        if cls.fixed_dimensionality is None or not isinstance(source, BaseVector):
            return super()._from_component(source)
        zero = source.arithmetic.zero()
        return [
            source.components[index] if index < source.length else zero
            for index in range(cls.fixed_dimensionality)
        ]

    def to_string(self) -> str:
        return "<" + ", ".join(self._strings()) + ">"

    # Vector math

    def dot(self, other: BaseVector) -> Any:
        """Calculate the dot product with another vector."""
        assert_shape_same(self, other)
        a = self.arithmetic
        total = a.zero()
        for mine, theirs in zip(self.components, self._values_of(other)):
            total = a.add(total, a.multiply(mine, theirs))
        return total

    def hypotenuse(self) -> Any:
        """Euclidean length of the vector."""
        return self.arithmetic.sqrt(self.square_sum())

    def normalize(self) -> Any:
        """
        Scale the vector to unit length.

        A zero-length vector is returned unchanged, as a copy.
        """
        a = self.arithmetic
        hypotenuse = self.hypotenuse()
        if a.is_zero(hypotenuse):
            return self.cloned()
        return self.scale(a.reciprocal(hypotenuse))

    def sub_vector(self, start: int, stop: Optional[int] = None) -> Any:
        """
        Extract the values in [start, stop) as a new vector.

        Raises:
            IndexOutOfRangeError: If the range is outside the vector
            FixedDimensionViolationError: If a fixed-size vector would change size
        """
        if stop is None:
            stop = self.length
        assert_range_in_bounds(self, start, stop)
        assert_fixed_dimensionality(self, stop - start)
        return self._derive(self.components[start:stop])

    def _fixed_result(self, fixed_type: type[BaseVector], values: list[Any]) -> Any:
        if isinstance(self, Vector):
            return fixed_type(values)
        return type(self)(values, arithmetic=self.arithmetic)

    # Named coordinates

    def _slot(self, index: int) -> Any:
        if self.dimensionality > index:
            return self.components[index]
        return self.arithmetic.zero()

    def _set_slot(self, index: int, value: Any) -> None:
        if value is None or self.dimensionality <= index:
            return
        self.components[index] = self._coerce(self.arithmetic, value)

    @property
    def raw_x(self) -> Any:
        return self._slot(0)

    @property
    def raw_y(self) -> Any:
        return self._slot(1)

    @property
    def raw_z(self) -> Any:
        return self._slot(2)

    @property
    def raw_w(self) -> Any:
        return self._slot(3)

    @property
    def x(self) -> Any:
        """The first value, or zero when the vector is too small."""
        return self.arithmetic.clean(self.raw_x)

    @property
    def y(self) -> Any:
        return self.arithmetic.clean(self.raw_y)

    @property
    def z(self) -> Any:
        return self.arithmetic.clean(self.raw_z)

    @property
    def w(self) -> Any:
        return self.arithmetic.clean(self.raw_w)

    def set_x(self, value: Any) -> None:
        """Set the first value; ignored for None or a vector that is too small."""
        self._set_slot(0, value)

    def set_y(self, value: Any) -> None:
        self._set_slot(1, value)

    def set_z(self, value: Any) -> None:
        self._set_slot(2, value)

    def set_w(self, value: Any) -> None:
        self._set_slot(3, value)

    # Factories

    @classmethod
    def identity(cls, dim: Optional[int] = None) -> Any:
        """Create a vector of ones."""
        instance = cls.create_instance(dim)
        instance.set_components([instance.arithmetic.one()] * instance.length)
        return instance

    @classmethod
    def origin(cls, dim: Optional[int] = None) -> Any:
        """Create a vector of zeros."""
        return cls.create_instance(dim)

    @classmethod
    def average_vector(cls, *vectors: Any) -> Any:
        """
        Calculate the mean of several vectors.

        Accepts the vectors either as separate arguments or as one list.
        No vectors gives an empty vector.
        """
        if len(vectors) == 1 and isinstance(vectors[0], (list, tuple)):
            vectors = tuple(vectors[0])
        if not vectors:
            return cls()
        if len(vectors) == 1:
            return vectors[0].cloned()
        return vectors[0].average(list(vectors[1:]))

    # Python protocol

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, BaseVector):
            return self.dot(other)
        return NotImplemented

    def __abs__(self) -> Any:
        return self.hypotenuse()


class Vector(BaseVector):
    """Vector of 64-bit floats."""

    name: ClassVar[str] = "Vector"
    arithmetic_type: ClassVar[type] = FloatArithmetic


class IntVector(BaseVector):
    """Vector of integers; division truncates."""

    name: ClassVar[str] = "Int Vector"
    arithmetic_type: ClassVar[type] = IntArithmetic


class DecimalVector(DecimalComponentMixin, BaseVector):
    """
    Vector of arbitrary-precision decimals.

    Example:
        >>> v = DecimalVector("0.1", "0.2", arithmetic=DecimalArithmetic(precision=4))
        >>> v.scale(3)
        DecimalVector(<0.3, 0.6>)
    """

    name: ClassVar[str] = "Decimal Vector"
    arithmetic_type: ClassVar[type] = DecimalArithmetic


class NumberVector(BaseVector):
    """Vector keeping arbitrary Python numbers; math runs in float."""

    name: ClassVar[str] = "Number Vector"
    arithmetic_type: ClassVar[type] = NumberArithmetic


class Vector2(Vector):
    """Fixed two-dimensional float vector."""

    name: ClassVar[str] = "2D Vector"
    fixed_dimensionality: ClassVar[Optional[int]] = 2
    resizeable: ClassVar[bool] = False

    def square_difference(self) -> float:
        return square_difference(self)

    def dot_flop(self, other: BaseVector) -> Any:
        return dot_flop(self, other)

    def dot_flop_negative(self, other: BaseVector) -> Any:
        return dot_flop_negative(self, other)


class Vector3(Vector):
    """Fixed three-dimensional float vector."""

    name: ClassVar[str] = "3D Vector"
    fixed_dimensionality: ClassVar[Optional[int]] = 3
    resizeable: ClassVar[bool] = False

    def cross(self, other: BaseVector) -> Any:
        return cross(self, other)


class Vector4(Vector):
    """Fixed four-dimensional float vector."""

    name: ClassVar[str] = "4D Vector"
    fixed_dimensionality: ClassVar[Optional[int]] = 4
    resizeable: ClassVar[bool] = False


# Dimension-specific operations. They accept vectors of any representation
# with the right dimensionality; float vectors produce the fixed-size type.

def square_difference(vector: BaseVector) -> Any:
    """Calculate x^2 - y^2 of a 2-dimensional vector."""
    assert_dimensionality_equal(vector, 2)
    a = vector.arithmetic
    two = a.value_of(2)
    return a.subtract(a.power(vector.raw_x, two), a.power(vector.raw_y, two))


def dot_flop(vector1: BaseVector, vector2: BaseVector) -> Any:
    """Calculate the complex-style product <x1*x2 - y1*y2, x1*y2 + y1*x2> of two 2-dimensional vectors."""
    assert_dimensionality_equal(vector1, 2)
    assert_dimensionality_equal(vector2, 2)
    a = vector1.arithmetic
    x1, y1 = vector1.components
    x2, y2 = vector1._values_of(vector2)
    return vector1._fixed_result(Vector2, [
        a.subtract(a.multiply(x1, x2), a.multiply(y1, y2)),
        a.add(a.multiply(x1, y2), a.multiply(y1, x2)),
    ])


def dot_flop_negative(vector1: BaseVector, vector2: BaseVector) -> Any:
    """Calculate <x1*x2 + y1*y2, x1*y2 - y1*x2> of two 2-dimensional vectors."""
    assert_dimensionality_equal(vector1, 2)
    assert_dimensionality_equal(vector2, 2)
    a = vector1.arithmetic
    x1, y1 = vector1.components
    x2, y2 = vector1._values_of(vector2)
    return vector1._fixed_result(Vector2, [
        a.add(a.multiply(x1, x2), a.multiply(y1, y2)),
        a.subtract(a.multiply(x1, y2), a.multiply(y1, x2)),
    ])


def cross(vector1: BaseVector, vector2: BaseVector) -> Any:
    """
    Calculate the cross product of two 3-dimensional vectors.

    Raises:
        MismatchedDimensionalityError: If either vector is not 3-dimensional
    """
    assert_dimensionality_equal(vector1, 3)
    assert_dimensionality_equal(vector2, 3)
    a = vector1.arithmetic
    x1, y1, z1 = vector1.components
    x2, y2, z2 = vector1._values_of(vector2)
    return vector1._fixed_result(Vector3, [
        a.subtract(a.multiply(y1, z2), a.multiply(z1, y2)),
        a.subtract(a.multiply(z1, x2), a.multiply(x1, z2)),
        a.subtract(a.multiply(x1, y2), a.multiply(y1, x2)),
    ])
