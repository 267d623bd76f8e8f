"""
Arithmetic strategies for Component math.

Each numeric representation a Component can hold (float, integer, decimal and
generic number) is served by one strategy object. Components never do math on
their values directly; they always go through their strategy, which is what
lets one Vector/Matrix implementation run over all representations.

Strategies are immutable pydantic models. The only one carrying configuration
is ``DecimalArithmetic`` (decimal places and rounding mode), and since it is
frozen it can be handed from a Component to everything derived from it.
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from decimal import (
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
)
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.config import get_settings
from ..core.errors import DivideByZeroError, ImaginaryResultError, NumberFormatError

# Comparison tolerance and display rounding shared by the binary float strategies
DEFAULT_PRECISION = 1e-12
DEFAULT_SIGNIFICANT_FIGURES = 12


class Arithmetic(BaseModel, ABC):
    """
    Numeric operations for one value representation.

    Subclasses must implement every abstract operation. ``tolerance`` is the
    threshold used by ``is_equal``; ``significant_figures`` is the number of
    decimal places ``clean`` keeps.
    """

    model_config = ConfigDict(frozen=True)

    name: ClassVar[str] = "number"
    tolerance: ClassVar[Any] = DEFAULT_PRECISION
    significant_figures: ClassVar[int] = DEFAULT_SIGNIFICANT_FIGURES

    # Constants

    @abstractmethod
    def zero(self) -> Any:
        """Additive identity."""

    @abstractmethod
    def one(self) -> Any:
        """Multiplicative identity."""

    @abstractmethod
    def negative_one(self) -> Any:
        """Negative multiplicative identity."""

    # Conversion

    @abstractmethod
    def value_of(self, n: Any) -> Any:
        """Convert any numeric literal into this representation."""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """
        Parse a string into this representation.

        Raises:
            NumberFormatError: If the text is not a valid number
        """

    def to_string(self, value: Any) -> str:
        """Render a value for display."""
        return str(value)

    # Operations

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def subtract(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def divide(self, a: Any, b: Any) -> Any:
        """
        Divide a by b.

        Raises:
            DivideByZeroError: If b is zero
        """

    @abstractmethod
    def power(self, a: Any, n: Any) -> Any:
        pass

    @abstractmethod
    def root(self, a: Any, n: Any) -> Any:
        """
        Calculate the n-th root of a.

        Raises:
            DivideByZeroError: If n is zero
            ImaginaryResultError: If a is negative
        """

    @abstractmethod
    def sqrt(self, a: Any) -> Any:
        """
        Calculate the square root of a.

        Raises:
            ImaginaryResultError: If a is negative
        """

    def reciprocal(self, a: Any) -> Any:
        """Calculate 1 / a."""
        return self.divide(self.one(), a)

    @abstractmethod
    def abs(self, a: Any) -> Any:
        pass

    def negate(self, a: Any) -> Any:
        return self.multiply(a, self.negative_one())

    @abstractmethod
    def round(self, a: Any) -> Any:
        """Round a to an integral value."""

    # Comparison

    def compare(self, a: Any, b: Any) -> int:
        """Three-way comparison returning -1, 0 or 1."""
        return (a > b) - (a < b)

    @abstractmethod
    def is_equal(self, a: Any, b: Any) -> bool:
        """Tolerance-based equality."""

    def is_zero(self, a: Any) -> bool:
        return self.clean(a) == self.zero()

    @abstractmethod
    def clean(self, a: Any) -> Any:
        """Canonicalize a value for display, trimming representation artifacts."""

    def _check_root(self, a: Any, label: str = "root") -> None:
        if self.compare(a, self.zero()) < 0:
            raise ImaginaryResultError(
                f"Result of {label} is imaginary",
                details={"value": self.to_string(a)}
            )


class FloatArithmetic(Arithmetic):
    """64-bit float arithmetic."""

    name: ClassVar[str] = "float"

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def negative_one(self) -> float:
        return -1.0

    def value_of(self, n: Any) -> float:
        return float(n)

    def parse(self, text: str) -> float:
        try:
            return float(text.strip())
        except ValueError as e:
            raise NumberFormatError(text, self.name) from e

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        if self.is_zero(b):
            raise DivideByZeroError()
        return a / b

    def power(self, a: float, n: float) -> float:
        if a == 0.0 and n < 0:
            raise DivideByZeroError()
        try:
            return math.pow(a, n)
        except ValueError as e:
            raise ImaginaryResultError(
                "Result of power is imaginary",
                details={"base": a, "exponent": n}
            ) from e

    def root(self, a: float, n: float) -> float:
        self._check_root(a)
        return math.pow(a, self.reciprocal(n))

    def sqrt(self, a: float) -> float:
        self._check_root(a, "square root")
        return math.sqrt(a)

    def abs(self, a: float) -> float:
        return math.fabs(a)

    def round(self, a: float) -> float:
        # Half-up, so -2.5 rounds to -2.0
        if not math.isfinite(a):
            return a
        return float(math.floor(a + 0.5))

    def is_equal(self, a: float, b: float) -> bool:
        return self.abs(self.subtract(b, a)) <= self.tolerance

    def clean(self, a: float) -> float:
        return round(a, self.significant_figures)


class IntArithmetic(Arithmetic):
    """
    Exact integer arithmetic.

    Division truncates toward zero and roots are floored, so results always
    stay integers.
    """

    name: ClassVar[str] = "integer"
    tolerance: ClassVar[Any] = 0
    significant_figures: ClassVar[int] = 0

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def negative_one(self) -> int:
        return -1

    def value_of(self, n: Any) -> int:
        return int(n)

    def parse(self, text: str) -> int:
        try:
            return int(text.strip())
        except ValueError as e:
            raise NumberFormatError(text, self.name) from e

    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def divide(self, a: int, b: int) -> int:
        if self.is_zero(b):
            raise DivideByZeroError()
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient

    def power(self, a: int, n: int) -> int:
        if n >= 0:
            return a ** n
        return self.reciprocal(a ** -n)

    def root(self, a: int, n: int) -> int:
        if self.is_zero(n):
            raise DivideByZeroError()
        self._check_root(a)
        if n < 0:
            return self.reciprocal(self.root(a, -n))
        if n == 2:
            return math.isqrt(a)
        result = int(round(a ** (1.0 / n)))
        while result > 0 and result ** n > a:
            result -= 1
        while (result + 1) ** n <= a:
            result += 1
        return result

    def sqrt(self, a: int) -> int:
        self._check_root(a, "square root")
        return math.isqrt(a)

    def abs(self, a: int) -> int:
        return abs(a)

    def round(self, a: int) -> int:
        return a

    def is_equal(self, a: int, b: int) -> bool:
        return a == b

    def clean(self, a: int) -> int:
        return a


# Working precision for intermediate decimal results (significant digits)
CALCULATION_PRECISION = 1024

_CALCULATION_CONTEXT = Context(prec=CALCULATION_PRECISION, rounding=ROUND_HALF_UP)

_ROUNDING_MODES = frozenset({
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
})


def _strip(value: Decimal) -> Decimal:
    """Strip trailing zeros without switching to exponent notation."""
    if value.is_zero():
        return Decimal(0)
    normalized = value.normalize(_CALCULATION_CONTEXT)
    if normalized.as_tuple().exponent > 0:
        normalized = normalized.quantize(Decimal(1), context=_CALCULATION_CONTEXT)
    return normalized


def round_with_precision(value: Decimal, places: int, rounding: str = ROUND_HALF_UP) -> Decimal:
    """
    Round a decimal to a number of decimal places and strip trailing zeros.

    Args:
        value: The value to round
        places: Maximum number of decimal places of the result
        rounding: A ``decimal`` rounding mode

    Returns:
        The rounded value
    """
    quantum = Decimal(1).scaleb(-places)
    return _strip(value.quantize(quantum, rounding=rounding, context=_CALCULATION_CONTEXT))


class DecimalArithmetic(Arithmetic):
    """
    Arbitrary-precision decimal arithmetic.

    Every result is rounded to ``precision`` decimal places using ``rounding``.
    Intermediate division, power and root results are computed with
    CALCULATION_PRECISION significant digits first.
    """

    name: ClassVar[str] = "decimal"
    tolerance: ClassVar[Any] = Decimal("1e-36")
    significant_figures: ClassVar[int] = 36

    precision: int = Field(
        default_factory=lambda: get_settings().DECIMAL_PRECISION,
        ge=0,
        description="Decimal places kept after each operation",
    )
    rounding: str = Field(
        default_factory=lambda: get_settings().DECIMAL_ROUNDING,
        description="A decimal module rounding mode",
    )

    @field_validator("rounding")
    @classmethod
    def _validate_rounding(cls, value: str) -> str:
        if value not in _ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {value}")
        return value

    def _fit(self, value: Decimal) -> Decimal:
        return round_with_precision(value, self.precision, self.rounding)

    def zero(self) -> Decimal:
        return Decimal(0)

    def one(self) -> Decimal:
        return Decimal(1)

    def negative_one(self) -> Decimal:
        return Decimal(-1)

    def value_of(self, n: Any) -> Decimal:
        if isinstance(n, Decimal):
            return n
        if isinstance(n, int):
            return Decimal(n)
        if isinstance(n, numbers.Rational):
            return _CALCULATION_CONTEXT.divide(Decimal(n.numerator), Decimal(n.denominator))
        try:
            # str() keeps the shortest repr, so 0.1 becomes Decimal('0.1')
            return Decimal(str(n))
        except InvalidOperation as e:
            raise NumberFormatError(n, self.name) from e

    def parse(self, text: str) -> Decimal:
        try:
            return Decimal(text.strip())
        except InvalidOperation as e:
            raise NumberFormatError(text, self.name) from e

    def to_string(self, value: Decimal) -> str:
        return format(value, "f")

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self._fit(_CALCULATION_CONTEXT.add(a, b))

    def subtract(self, a: Decimal, b: Decimal) -> Decimal:
        return self._fit(_CALCULATION_CONTEXT.subtract(a, b))

    def multiply(self, a: Decimal, b: Decimal) -> Decimal:
        return self._fit(_CALCULATION_CONTEXT.multiply(a, b))

    def divide(self, a: Decimal, b: Decimal) -> Decimal:
        if self.is_zero(b):
            raise DivideByZeroError()
        return self._fit(_CALCULATION_CONTEXT.divide(a, b))

    def power(self, a: Decimal, n: Decimal) -> Decimal:
        try:
            return self._fit(_CALCULATION_CONTEXT.power(a, n))
        except DivisionByZero as e:
            raise DivideByZeroError() from e
        except InvalidOperation as e:
            raise ImaginaryResultError(
                "Result of power is imaginary",
                details={"base": self.to_string(a), "exponent": self.to_string(n)}
            ) from e

    def root(self, a: Decimal, n: Decimal) -> Decimal:
        if self.is_zero(n):
            raise DivideByZeroError()
        self._check_root(a)
        exponent = _CALCULATION_CONTEXT.divide(Decimal(1), n)
        return self._fit(_CALCULATION_CONTEXT.power(a, exponent))

    def sqrt(self, a: Decimal) -> Decimal:
        self._check_root(a, "square root")
        return self._fit(_CALCULATION_CONTEXT.sqrt(a))

    def reciprocal(self, a: Decimal) -> Decimal:
        return self.divide(self.one(), a)

    def abs(self, a: Decimal) -> Decimal:
        return self._fit(_CALCULATION_CONTEXT.abs(a))

    def negate(self, a: Decimal) -> Decimal:
        return self._fit(_CALCULATION_CONTEXT.minus(a))

    def round(self, a: Decimal) -> Decimal:
        return a.quantize(Decimal(1), rounding=self.rounding, context=_CALCULATION_CONTEXT)

    def is_equal(self, a: Decimal, b: Decimal) -> bool:
        return self.abs(self.subtract(b, a)) < self.tolerance

    def clean(self, a: Decimal) -> Decimal:
        return round_with_precision(a, self.significant_figures)


class NumberArithmetic(FloatArithmetic):
    """
    Generic boxed-number arithmetic.

    Values keep whatever numeric type they were supplied with; operations are
    carried out in float.
    """

    name: ClassVar[str] = "number"

    def value_of(self, n: Any) -> Any:
        if isinstance(n, numbers.Number):
            return n
        return float(n)

    def parse(self, text: str) -> Any:
        text = text.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError as e:
            raise NumberFormatError(text, self.name) from e

    def add(self, a: Any, b: Any) -> float:
        return super().add(float(a), float(b))

    def subtract(self, a: Any, b: Any) -> float:
        return super().subtract(float(a), float(b))

    def multiply(self, a: Any, b: Any) -> float:
        return super().multiply(float(a), float(b))

    def divide(self, a: Any, b: Any) -> float:
        return super().divide(float(a), float(b))

    def power(self, a: Any, n: Any) -> float:
        return super().power(float(a), float(n))

    def root(self, a: Any, n: Any) -> float:
        return super().root(float(a), float(n))

    def sqrt(self, a: Any) -> float:
        return super().sqrt(float(a))

    def abs(self, a: Any) -> float:
        return super().abs(float(a))

    def round(self, a: Any) -> int:
        return int(super().round(float(a)))

    def compare(self, a: Any, b: Any) -> int:
        return super().compare(float(a), float(b))

    def is_equal(self, a: Any, b: Any) -> bool:
        return self.abs(self.subtract(b, a)) < self.tolerance

    def clean(self, a: Any) -> float:
        return super().clean(float(a))
