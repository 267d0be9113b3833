"""Calculator class exposing the arithmetic operations as methods."""

from __future__ import annotations

from ci_calculator import operations
from ci_calculator.validators import Number


class Calculator:
    """
    A stateless calculator.

    Every method delegates to the function of the same name in
    ci_calculator.operations. Instances hold no state, so any two are
    interchangeable and may be shared freely between threads.

    Example:
        >>> calc = Calculator()
        >>> calc.add(10, 5)
        15.0
        >>> calc.sqrt(25)
        5.0
    """

    __slots__ = ()

    def add(self, a: Number, b: Number) -> float:
        """Return a + b."""
        return operations.add(a, b)

    def subtract(self, a: Number, b: Number) -> float:
        """Return a - b."""
        return operations.subtract(a, b)

    def multiply(self, a: Number, b: Number) -> float:
        """Return a * b."""
        return operations.multiply(a, b)

    def divide(self, a: Number, b: Number) -> float:
        """
        Return a / b.

        Raises:
            DivisionByZeroError: If b is zero
        """
        return operations.divide(a, b)

    def sqrt(self, a: Number) -> float:
        """
        Return the square root of a.

        Raises:
            NegativeSquareRootError: If a is negative
        """
        return operations.sqrt(a)

    def power(self, base: Number, exponent: Number) -> float:
        """Return base raised to exponent."""
        return operations.power(base, exponent)

    def __repr__(self) -> str:
        return "Calculator()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculator):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Calculator)
