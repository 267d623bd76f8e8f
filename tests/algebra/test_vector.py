"""Tests for Vector types and vector operations."""

import pytest

from vecmat.core.errors import (
    FixedDimensionViolationError,
    IndexOutOfRangeError,
    MismatchedDimensionalityError,
)
from vecmat.math.vector import (
    IntVector,
    Vector,
    Vector2,
    Vector3,
    Vector4,
    cross,
    dot_flop,
    dot_flop_negative,
    square_difference,
)


class TestVectorCoordinates:
    """Test named x/y/z/w access."""

    def test_getters(self):
        """Test the named getters."""
        vector = Vector(1, 2, 3, 4)
        assert (vector.x, vector.y, vector.z, vector.w) == (1.0, 2.0, 3.0, 4.0)

    def test_getters_degrade_to_zero(self):
        """Test slots beyond the dimensionality read as zero."""
        vector = Vector(1, 2)
        assert vector.z == 0.0
        assert vector.raw_w == 0.0
        assert Vector().x == 0.0

    def test_clean_and_raw_getters(self):
        """Test the cleaned and raw getter variants."""
        vector = Vector(0.1 + 0.2)
        assert vector.x == 0.3
        assert vector.raw_x == 0.1 + 0.2

    def test_setters(self):
        """Test the named setters."""
        vector = Vector(1, 2)
        vector.set_y(7)
        assert vector == Vector(1, 7)

    def test_setters_ignore_none_and_missing_slots(self):
        """Test that setters never fail."""
        vector = Vector(1, 2)
        vector.set_x(None)
        vector.set_z(5)
        vector.set_w(5)
        assert vector == Vector(1, 2)


class TestVectorMath:
    """Test vector-only operations."""

    def test_dot(self):
        """Test the dot product."""
        assert Vector(1, 2, 3).dot(Vector(4, 5, 6)) == 32.0
        assert Vector(1, 2, 3) @ Vector(4, 5, 6) == 32.0

    def test_dot_mismatched_raises(self):
        """Test that the dot product needs equal dimensionality."""
        with pytest.raises(MismatchedDimensionalityError):
            Vector(1, 2).dot(Vector(1, 2, 3))

    def test_hypotenuse(self):
        """Test the Euclidean length."""
        assert Vector(3, 4).hypotenuse() == 5.0
        assert abs(Vector(3, 4)) == 5.0

    def test_normalize(self):
        """Test scaling to unit length."""
        assert Vector(3, 4).normalize() == Vector(0.6, 0.8)

    def test_normalize_zero_vector_returns_clone(self):
        """Test that a zero vector is never divided."""
        zero = Vector(0, 0)
        result = zero.normalize()
        assert result == zero
        assert result is not zero

    def test_sub_vector(self):
        """Test extracting a range of values."""
        vector = Vector(1, 2, 3, 4)
        assert vector.sub_vector(1, 3) == Vector(2, 3)
        assert vector.sub_vector(2) == Vector(3, 4)

    def test_sub_vector_out_of_range_raises(self):
        """Test range validation."""
        with pytest.raises(IndexOutOfRangeError):
            Vector(1, 2, 3).sub_vector(1, 4)

    def test_sub_vector_of_fixed_type(self):
        """Test that fixed vectors only allow full-size sub-vectors."""
        vector = Vector3(1, 2, 3)
        assert vector.sub_vector(0, 3) == vector
        with pytest.raises(FixedDimensionViolationError):
            vector.sub_vector(0, 2)


class TestVectorFactories:
    """Test class-level factories."""

    def test_identity_and_origin(self):
        """Test all-ones and all-zeros vectors."""
        assert Vector.identity(3) == Vector(1, 1, 1)
        assert Vector.origin(2) == Vector(0, 0)
        assert IntVector.identity(2) == IntVector(1, 1)

    def test_fixed_factories_ignore_dimensionality(self):
        """Test that fixed types keep their size."""
        assert Vector3.identity(7) == Vector3(1, 1, 1)
        assert Vector4.origin(2) == Vector4(0, 0, 0, 0)

    def test_average_vector(self):
        """Test the n-ary mean."""
        vectors = [Vector(0, 0), Vector(2, 2), Vector(4, 4)]
        assert Vector.average_vector(*vectors) == Vector(2, 2)
        assert Vector.average_vector(vectors) == Vector(2, 2)

    def test_average_vector_edge_cases(self):
        """Test the mean of zero and one vectors."""
        assert Vector.average_vector() == Vector()
        single = Vector(1, 2)
        result = Vector.average_vector(single)
        assert result == single
        assert result is not single


class TestFixedVectors:
    """Test the fixed-size float vectors."""

    def test_default_is_zero(self):
        """Test that no arguments gives the zero vector of the fixed size."""
        assert Vector4().components == [0.0, 0.0, 0.0, 0.0]
        assert Vector3(dim=7).dimensionality == 3

    def test_wrong_size_raises(self):
        """Test that explicit values must match the fixed size."""
        with pytest.raises(FixedDimensionViolationError):
            Vector3(1, 2)

    def test_from_single_vector_takes_leading_values(self):
        """Test construction from a vector of another size."""
        assert Vector3(Vector2(1, 2)) == Vector3(1, 2, 0)
        assert Vector2(Vector3(1, 2, 3)) == Vector2(1, 2)

    def test_from_vector_with_extra_values(self):
        """Test merging a smaller vector with trailing values."""
        assert Vector3(Vector2(1, 2), 5) == Vector3(1, 2, 5)

    def test_operations_keep_fixed_type(self):
        """Test that arithmetic returns the same fixed type."""
        result = Vector3(1, 2, 3) + Vector3(1, 1, 1)
        assert type(result) is Vector3
        assert result == Vector3(2, 3, 4)

    def test_rendering(self):
        """Test the string form."""
        assert str(Vector3(1, 2, 3)) == "<1.0, 2.0, 3.0>"
        assert repr(Vector2(1, 2)) == "Vector2(<1.0, 2.0>)"


class TestVector2:
    """Test 2-D operations."""

    def test_square_difference(self):
        """Test x^2 - y^2."""
        assert Vector2(3, 2).square_difference() == 5.0

    def test_dot_flop(self):
        """Test the complex-style product."""
        result = Vector2(1, 2).dot_flop(Vector2(3, 4))
        assert result == Vector2(-5, 10)
        assert type(result) is Vector2

    def test_dot_flop_negative(self):
        """Test the conjugate-style product."""
        assert Vector2(1, 2).dot_flop_negative(Vector2(3, 4)) == Vector2(11, -2)

    def test_module_functions_accept_plain_vectors(self):
        """Test that any 2-dimensional float vector gives a Vector2."""
        result = dot_flop(Vector(1, 2), Vector(3, 4))
        assert type(result) is Vector2
        assert result == Vector2(-5, 10)
        assert square_difference(Vector(3, 2)) == 5.0

    def test_module_functions_keep_representation(self):
        """Test that integer vectors produce integer vectors."""
        result = dot_flop_negative(IntVector(1, 2), IntVector(3, 4))
        assert result == IntVector(11, -2)

    def test_wrong_dimensionality_raises(self):
        """Test that operands must be exactly 2-dimensional."""
        with pytest.raises(MismatchedDimensionalityError):
            dot_flop(Vector(1, 2, 3), Vector(1, 2))
        with pytest.raises(MismatchedDimensionalityError):
            Vector2(1, 2).dot_flop(Vector(1, 2, 3))
        with pytest.raises(MismatchedDimensionalityError):
            square_difference(Vector(1))


class TestVector3:
    """Test 3-D operations."""

    def test_cross_of_unit_vectors(self):
        """Test the right-hand rule."""
        assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)

    def test_cross(self):
        """Test a general cross product."""
        assert Vector3(1, 2, 3).cross(Vector3(4, 5, 6)) == Vector3(-3, 6, -3)

    def test_cross_is_orthogonal(self):
        """Test that the cross product is orthogonal to both operands."""
        a = Vector3(1.5, -2, 3.25)
        b = Vector3(0.5, 4, -1)
        product = a.cross(b)
        assert product.dot(a) == pytest.approx(0.0, abs=1e-9)
        assert product.dot(b) == pytest.approx(0.0, abs=1e-9)

    def test_cross_is_anticommutative(self):
        """Test b x a == -(a x b)."""
        a = Vector3(1.5, -2, 3.25)
        b = Vector3(0.5, 4, -1)
        assert b.cross(a) == a.cross(b).scale(-1)

    def test_module_function(self):
        """Test cross on plain 3-dimensional vectors."""
        result = cross(Vector(1, 0, 0), Vector(0, 1, 0))
        assert type(result) is Vector3
        assert cross(IntVector(1, 2, 3), IntVector(4, 5, 6)) == IntVector(-3, 6, -3)

    def test_wrong_dimensionality_raises(self):
        """Test that operands must be exactly 3-dimensional."""
        with pytest.raises(MismatchedDimensionalityError):
            cross(Vector(1, 2), Vector(1, 2, 3))
        with pytest.raises(MismatchedDimensionalityError):
            Vector3(1, 2, 3).cross(Vector(1, 2))
