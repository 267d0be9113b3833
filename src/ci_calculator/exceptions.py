"""Custom exceptions for the calculator package."""

from typing import Any

DIVISION_BY_ZERO_MESSAGE = "Cannot divide by zero"
NEGATIVE_SQRT_MESSAGE = "Cannot calculate square root of negative number"


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidArgumentError(CalculatorError, ValueError):
    """
    Raised when an argument violates an operation's precondition.

    The string form is the bare message. Callers match on it, so the
    offending value is kept on the instance but never appended.
    """

    def __str__(self) -> str:
        return self.message


class DivisionByZeroError(InvalidArgumentError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__(DIVISION_BY_ZERO_MESSAGE, numerator)
        self.numerator = numerator


class NegativeSquareRootError(InvalidArgumentError):
    """Raised when taking the square root of a negative number."""

    def __init__(self, radicand: float) -> None:
        super().__init__(NEGATIVE_SQRT_MESSAGE, radicand)
        self.radicand = radicand


class InvalidInputError(CalculatorError, TypeError):
    """Raised when input is not a real number."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
