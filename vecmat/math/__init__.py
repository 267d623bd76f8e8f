"""
vecmat.math - Component algebra

Vector and Matrix types that work uniformly over several numeric
representations through pluggable arithmetic strategies:
- float (``Vector``, ``Matrix`` and the fixed ``Vector2/3/4``, ``Matrix3/4``)
- integer (``IntVector``, ``IntMatrix``)
- arbitrary-precision decimal (``DecimalVector``, ``DecimalMatrix``)
- generic Python numbers (``NumberVector``, ``NumberMatrix``)
"""

from .arithmetic import (
    Arithmetic,
    DecimalArithmetic,
    FloatArithmetic,
    IntArithmetic,
    NumberArithmetic,
    round_with_precision,
)
from .component import Component
from .matrix import (
    BaseMatrix,
    DecimalMatrix,
    IntMatrix,
    Matrix,
    Matrix3,
    Matrix4,
    NumberMatrix,
)
from .validation import ErrorMessages, get_error_messages, set_error_messages
from .vector import (
    BaseVector,
    DecimalVector,
    IntVector,
    NumberVector,
    Vector,
    Vector2,
    Vector3,
    Vector4,
    cross,
    dot_flop,
    dot_flop_negative,
    square_difference,
)

__all__ = [
    "Arithmetic",
    "FloatArithmetic",
    "IntArithmetic",
    "DecimalArithmetic",
    "NumberArithmetic",
    "round_with_precision",
    "Component",
    "BaseVector",
    "Vector",
    "IntVector",
    "DecimalVector",
    "NumberVector",
    "Vector2",
    "Vector3",
    "Vector4",
    "cross",
    "dot_flop",
    "dot_flop_negative",
    "square_difference",
    "BaseMatrix",
    "Matrix",
    "IntMatrix",
    "DecimalMatrix",
    "NumberMatrix",
    "Matrix3",
    "Matrix4",
    "ErrorMessages",
    "get_error_messages",
    "set_error_messages",
]
