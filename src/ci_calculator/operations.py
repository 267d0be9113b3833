"""Core arithmetic operations over double-precision floats."""

import math

from ci_calculator.validators import (
    Number,
    validate_divisor,
    validate_number,
    validate_radicand,
)


def add(a: Number, b: Number) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Args:
        a: First operand
        b: Second operand

    Returns:
        Sum of a and b

    Raises:
        InvalidInputError: If inputs are not numbers
    """
    return validate_number(a) + validate_number(b)


def subtract(a: Number, b: Number) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are not numbers
    """
    return validate_number(a) - validate_number(b)


def multiply(a: Number, b: Number) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If inputs are not numbers
    """
    return validate_number(a) * validate_number(b)


def divide(a: Number, b: Number) -> float:
    """
    Divide a by b.

    Only an exact zero divisor is rejected. A quotient that overflows
    from finite nonzero operands is returned as an infinity.

    Properties:
        - Inverse of multiply: multiply(divide(a, b), b) ≈ a (for b != 0)
        - Identity: divide(a, 1) == a

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        InvalidInputError: If inputs are not numbers
        DivisionByZeroError: If b is zero
    """
    a = validate_number(a)
    b = validate_divisor(b, numerator=a)
    return a / b


def sqrt(a: Number) -> float:
    """
    Calculate the non-negative square root of a.

    Args:
        a: The radicand

    Returns:
        Square root of a

    Raises:
        InvalidInputError: If input is not a number
        NegativeSquareRootError: If a is negative
    """
    return math.sqrt(validate_radicand(a))


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and math.fmod(value, 2.0) != 0


def _signed_infinity(base: float, exponent: float) -> float:
    # Negative bases keep their sign only under odd integer exponents.
    if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
        return -math.inf
    return math.inf


def power(base: Number, exponent: Number) -> float:
    """
    Raise base to the power of exponent.

    Never raises on numeric input. math.pow signals the cases where
    IEEE-754 pow returns a special value, so those are mapped back:

        - overflow returns a signed infinity
        - zero base with a negative exponent returns a signed infinity
        - negative finite base with a non-integer exponent returns NaN

    A NaN exponent returns NaN even for a base of one, and so does a base
    of magnitude one with an infinite exponent. math.pow returns 1.0 there.

    Properties:
        - Zero exponent: power(a, 0) == 1 (for every a, NaN included)
        - One base: power(1, n) == 1 (for finite n)

    Args:
        base: The base number
        exponent: The exponent

    Returns:
        base raised to the power of exponent

    Raises:
        InvalidInputError: If inputs are not numbers
    """
    base = validate_number(base)
    exponent = validate_number(exponent)

    if math.isnan(exponent) or (abs(base) == 1 and math.isinf(exponent)):
        return math.nan

    try:
        return math.pow(base, exponent)
    except OverflowError:
        return _signed_infinity(base, exponent)
    except ValueError:
        if base == 0:
            return _signed_infinity(base, exponent)
        return math.nan
