"""Input validation functions with strict type checking."""

import logging

from ci_calculator.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    NegativeSquareRootError,
)

logger = logging.getLogger(__name__)

Number = int | float


def validate_number(value: Number) -> float:
    """
    Validate that a value is a real number and coerce it to float.

    NaN and infinities are valid doubles and pass through unchanged.

    Args:
        value: The value to validate

    Returns:
        The value as a float

    Raises:
        InvalidInputError: If value is not a number or too large for a float
    """
    if not isinstance(value, (int, float)):
        logger.debug("Rejected non-numeric input %r", value)
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    try:
        return float(value)
    except OverflowError as e:
        logger.debug("Rejected integer too large for a float")
        raise InvalidInputError(value, "Integer too large to convert to float") from e


def validate_divisor(value: Number, numerator: Number = 0.0) -> float:
    """
    Validate that a divisor is not zero.

    The comparison is exact: tiny nonzero divisors are accepted.

    Args:
        value: The divisor to validate
        numerator: The dividend, reported on the error

    Returns:
        The divisor as a float

    Raises:
        InvalidInputError: If value is not a number
        DivisionByZeroError: If value is zero
    """
    value = validate_number(value)

    if value == 0:
        logger.debug("Rejected zero divisor for numerator %r", numerator)
        raise DivisionByZeroError(numerator)

    return value


def validate_radicand(value: Number) -> float:
    """
    Validate that a square root argument is not negative.

    Args:
        value: The radicand to validate

    Returns:
        The radicand as a float

    Raises:
        InvalidInputError: If value is not a number
        NegativeSquareRootError: If value is below zero
    """
    value = validate_number(value)

    if value < 0:
        logger.debug("Rejected negative radicand %r", value)
        raise NegativeSquareRootError(value)

    return value
