"""
Square matrix types.

Matrices are stored row-major as one flat list of ``dimensionality ** 2``
values; ``to_index(x, y) = y * width + x``, where x is the column and y the
row. ``BaseMatrix`` implements the whole algorithm suite (products,
determinant, minors, cofactor, adjoint, inverse, system solving, sub-matrices
and resizing) for every numeric representation.

Two conventions are part of the public contract and must not be "fixed":
the determinant expands along column 0, and ``transform`` multiplies by the
transpose (row-vector convention).
"""

from __future__ import annotations

import math
from typing import Any, ClassVar, Optional

from ..core.errors import NotInvertibleError
from ..core.logging import get_context_logger
from .arithmetic import Arithmetic, DecimalArithmetic, FloatArithmetic, IntArithmetic, NumberArithmetic
from .component import Component, DecimalComponentMixin
from .validation import (
    assert_coordinate_in_bounds,
    assert_coordinate_range_in_bounds,
    assert_dimensionality_same,
    assert_fixed_dimensionality,
    assert_index_in_bounds,
    assert_shape_same,
    assert_square_length,
    assert_square_region,
)
from .vector import BaseVector, DecimalVector, IntVector, NumberVector, Vector, Vector3, Vector4

logger = get_context_logger(__name__, component="matrix")

_UNSET = object()


def _sign(x: int, y: int, arithmetic: Arithmetic) -> Any:
    return arithmetic.one() if x % 2 == y % 2 else arithmetic.negative_one()


def _determinant(values: list[Any], dim: int, arithmetic: Arithmetic) -> Any:
    """Determinant of a flat row-major square block, expanding along column 0."""
    a = arithmetic
    if dim <= 0:
        return a.zero()
    if dim == 1:
        return values[0]
    if dim == 2:
        return a.subtract(a.multiply(values[0], values[3]), a.multiply(values[1], values[2]))

    determinant = a.zero()
    for h in range(dim):
        sub = [
            values[row * dim + col]
            for row in range(dim) if row != h
            for col in range(1, dim)
        ]
        term = a.multiply(a.multiply(values[h * dim], _sign(0, h, a)), _determinant(sub, dim - 1, a))
        determinant = a.add(determinant, term)
    return determinant


class BaseMatrix(Component):
    """
    Square matrix over any numeric representation.

    Accepts the Component construction patterns plus nested rows:

        Matrix([[1, 2], [3, 4]])
        Matrix(1, 2, 3, 4)
        Matrix(np.eye(3))

    Raises:
        NotSquareError: If the number of values is not a perfect square
    """

    name: ClassVar[str] = "Matrix Component"
    vector_type: ClassVar[type[BaseVector]] = Vector

    @classmethod
    def dimensionality_to_length(cls, dim: int) -> int:
        return 0 if dim <= 0 else dim * dim

    @classmethod
    def length_to_dimensionality(cls, length: int) -> int:
        return 0 if length <= 0 else math.isqrt(length)

    @classmethod
    def _validate_length(cls, values: list[Any]) -> None:
        assert_square_length(values)
        super()._validate_length(values)

    # Geometry

    @property
    def width(self) -> int:
        return self.dimensionality

    @property
    def height(self) -> int:
        return self.dimensionality

    def to_index(self, x: int, y: int) -> int:
        """Flat index of column x, row y."""
        return y * self.width + x

    def _coordinates(self, x: int, y: Optional[int]) -> tuple[int, int]:
        if y is None:
            assert_index_in_bounds(self, x)
            return x % self.width, x // self.width
        assert_coordinate_in_bounds(self, x, y)
        return x, y

    def _rows(self, values: list[Any]) -> list[list[Any]]:
        n = self.dimensionality
        return [values[row * n:(row + 1) * n] for row in range(n)]

    # Accessors

    def get_raw(self, x: int, y: Optional[int] = None) -> Any:
        """Raw value at flat index x, or at column x and row y."""
        if y is None:
            return super().get_raw(x)
        assert_coordinate_in_bounds(self, x, y)
        return self.components[self.to_index(x, y)]

    def get(self, x: int, y: Optional[int] = None) -> Any:
        return self.arithmetic.clean(self.get_raw(x, y))

    def set(self, x: int, y: Any, value: Any = _UNSET) -> None:
        """
        Set one value, either ``set(index, value)`` or ``set(x, y, value)``.

        A None value is ignored.
        """
        if value is _UNSET:
            super().set(x, y)
            return
        assert_coordinate_in_bounds(self, x, y)
        super().set(self.to_index(x, y), value)

    def new_vector(self) -> Any:
        """Create a zero vector of matching dimensionality and representation."""
        return self.vector_type(dim=self.dimensionality, arithmetic=self.arithmetic)

    # Products

    def times(self, other: Component) -> Any:
        """
        Multiply by another matrix, or by a column vector.

        Raises:
            MismatchedDimensionalityError: If the shapes differ
        """
        if isinstance(other, BaseVector):
            return self._times_vector(other)

        assert_shape_same(self, other)
        a = self.arithmetic
        n = self.dimensionality
        mine = self.components
        theirs = self._values_of(other)
        values = []
        for row in range(n):
            for col in range(n):
                total = a.zero()
                for d in range(n):
                    total = a.add(total, a.multiply(mine[row * n + d], theirs[d * n + col]))
                values.append(total)
        return self._derive(values)

    def _times_vector(self, vector: BaseVector) -> Any:
        assert_dimensionality_same(self, vector)
        a = self.arithmetic
        n = self.dimensionality
        mine = self.components
        theirs = self._values_of(vector)
        values = []
        for row in range(n):
            total = a.zero()
            for col in range(n):
                total = a.add(total, a.multiply(mine[row * n + col], theirs[col]))
            values.append(total)
        result = self.new_vector()
        result.set_components(values)
        return result

    def scale(self, scalar: Any) -> Any:
        """Scale by a scalar, or elementwise by a matrix of equal dimensionality."""
        if isinstance(scalar, BaseMatrix):
            return self._elementwise(scalar, self.arithmetic.multiply)
        return super().scale(scalar)

    # Determinant and friends

    def determinant(self) -> Any:
        return _determinant(self.components, self.dimensionality, self.arithmetic)

    def minor(self, x: int, y: Optional[int] = None) -> Any:
        """
        Determinant of the matrix without row y and column x.

        With y omitted, x is a flat index. The minor of a 1x1 matrix is one.
        """
        x, y = self._coordinates(x, y)
        n = self.dimensionality
        if n == 1:
            return self.arithmetic.one()
        sub = [
            self.components[row * n + col]
            for row in range(n) if row != y
            for col in range(n) if col != x
        ]
        return _determinant(sub, n - 1, self.arithmetic)

    def minors(self) -> Any:
        return self._derive([self.minor(index) for index in range(self.length)])

    def cofactor_scalar(self, x: int, y: Optional[int] = None) -> Any:
        """One where (x + y) is even, negative one otherwise."""
        x, y = self._coordinates(x, y)
        return _sign(x, y, self.arithmetic)

    def cofactor(self) -> Any:
        a = self.arithmetic
        return self._derive([
            a.multiply(value, self.cofactor_scalar(index))
            for index, value in enumerate(self.components)
        ])

    def transpose(self) -> Any:
        n = self.dimensionality
        return self._derive([
            self.components[col * n + row]
            for row in range(n)
            for col in range(n)
        ])

    def adjoint(self) -> Any:
        return self.minors().cofactor().transpose()

    def inverse(self) -> Any:
        """
        Calculate the inverse matrix.

        Raises:
            NotInvertibleError: If the determinant is zero
        """
        a = self.arithmetic
        determinant = self.determinant()
        if a.is_zero(determinant):
            logger.debug(
                f"Singular {self.name}",
                extra_data={"dimensionality": self.dimensionality, "determinant": a.to_string(determinant)}
            )
            raise NotInvertibleError(
                f"The {self.name}: {self} is not invertible",
                details={"determinant": a.to_string(determinant)}
            )
        return self.adjoint().scale(a.reciprocal(determinant))

    def solve_system(self, vector: BaseVector) -> Any:
        """
        Solve the linear system M * x = vector.

        Raises:
            NotInvertibleError: If the system has no unique solution
        """
        logger.debug("Solving linear system", extra_data={"dimensionality": self.dimensionality})
        return self.inverse().times(vector)

    def transform(self, vector: BaseVector) -> Any:
        """Transform a vector by the transpose of this matrix."""
        return self.transpose().times(vector)

    # Structure

    def sub_matrix(self, x1: int, y1: int, x2: int, y2: int) -> Any:
        """
        Extract the square region between two inclusive corners.

        Raises:
            IndexOutOfRangeError: If a corner is outside the matrix
            NotSquareError: If the region is not square
            FixedDimensionViolationError: If a fixed-size matrix would change size
        """
        assert_coordinate_range_in_bounds(self, x1, y1, x2, y2)
        assert_square_region(x1, y1, x2, y2)
        assert_fixed_dimensionality(self, x2 - x1 + 1)
        return self._derive([
            self.components[self.to_index(col, row)]
            for row in range(y1, y2 + 1)
            for col in range(x1, x2 + 1)
        ])

    def sub_matrix_of(self, x1: int, y1: int, dim: int) -> Any:
        """Extract the dim x dim region whose top-left corner is (x1, y1)."""
        return self.sub_matrix(x1, y1, x1 + dim - 1, y1 + dim - 1)

    def _resized(self, new_dim: int) -> list[Any]:
        n = self.dimensionality
        if new_dim < n:
            return [
                self.components[row * n + col]
                for row in range(new_dim)
                for col in range(new_dim)
            ]
        values = [self.arithmetic.zero()] * (new_dim * new_dim)
        for row in range(n):
            for col in range(n):
                values[row * new_dim + col] = self.components[row * n + col]
        return values

    # Factories

    @classmethod
    def identity(cls, dim: Optional[int] = None) -> Any:
        """Create a matrix with ones on the diagonal."""
        instance = cls.create_instance(dim)
        a = instance.arithmetic
        n = instance.dimensionality
        instance.set_components([
            a.one() if row == col else a.zero()
            for row in range(n)
            for col in range(n)
        ])
        return instance

    @classmethod
    def origin(cls, dim: Optional[int] = None) -> Any:
        return cls.create_instance(dim)

    @classmethod
    def sign_chart(cls, dim: Optional[int] = None) -> Any:
        """Create the checkerboard of cofactor signs."""
        instance = cls.create_instance(dim)
        a = instance.arithmetic
        n = instance.dimensionality
        instance.set_components([_sign(col, row, a) for row in range(n) for col in range(n)])
        return instance

    # Output

    def to_string(self) -> str:
        rows = self._rows(self._strings())
        return "[" + ", ".join("<" + ", ".join(row) + ">" for row in rows) + "]"

    def to_python(self) -> list[list[Any]]:
        return self._rows(self.get_components())

    def to_numpy(self):
        """Convert to a (dim, dim) NumPy array."""
        n = self.dimensionality
        return super().to_numpy().reshape(n, n)

    def pretty_print(self) -> str:
        """Render the matrix as an aligned, box-drawn block of text."""
        rows = self._rows(self._strings())
        if not rows:
            return "[]"
        if len(rows) == 1:
            return "[  " + "  ".join(rows[0]) + "  ]"

        widths = [0] * self.width
        for row in rows:
            for col, element in enumerate(row):
                widths[col] = max(widths[col], len(element) - (1 if element.startswith("-") else 0))

        last = len(rows) - 1
        lines = []
        for index, row in enumerate(rows):
            left, right = ("┌", "┐") if index == 0 else (("└", "┘") if index == last else ("│", "│"))
            line = left + " "
            for col, element in enumerate(row):
                negative = element.startswith("-")
                line += ("" if negative else " ") + element
                line += " " * (widths[col] + 2 - len(element) + (1 if negative else 0))
            lines.append(line + right)
        return "\n".join(lines)

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Component):
            return self.times(other)
        return NotImplemented


class Matrix(BaseMatrix):
    """Square matrix of 64-bit floats."""

    name: ClassVar[str] = "Matrix"
    arithmetic_type: ClassVar[type] = FloatArithmetic
    vector_type: ClassVar[type[BaseVector]] = Vector


class IntMatrix(BaseMatrix):
    """Square matrix of integers."""

    name: ClassVar[str] = "Int Matrix"
    arithmetic_type: ClassVar[type] = IntArithmetic
    vector_type: ClassVar[type[BaseVector]] = IntVector


class DecimalMatrix(DecimalComponentMixin, BaseMatrix):
    """Square matrix of arbitrary-precision decimals."""

    name: ClassVar[str] = "Decimal Matrix"
    arithmetic_type: ClassVar[type] = DecimalArithmetic
    vector_type: ClassVar[type[BaseVector]] = DecimalVector


class NumberMatrix(BaseMatrix):
    name: ClassVar[str] = "Number Matrix"
    arithmetic_type: ClassVar[type] = NumberArithmetic
    vector_type: ClassVar[type[BaseVector]] = NumberVector


class Matrix3(Matrix):
    """Fixed 3x3 float matrix; products with vectors give ``Vector3``."""

    name: ClassVar[str] = "3D Matrix"
    fixed_dimensionality: ClassVar[Optional[int]] = 3
    resizeable: ClassVar[bool] = False
    vector_type: ClassVar[type[BaseVector]] = Vector3


class Matrix4(Matrix):
    """Fixed 4x4 float matrix; products with vectors give ``Vector4``."""

    name: ClassVar[str] = "4D Matrix"
    fixed_dimensionality: ClassVar[Optional[int]] = 4
    resizeable: ClassVar[bool] = False
    vector_type: ClassVar[type[BaseVector]] = Vector4
