"""
Calculator package with validated arithmetic operations.

Six pure operations over double-precision floats: add, subtract,
multiply, divide, sqrt and power. Dividing by zero and taking the square
root of a negative number raise InvalidArgumentError subclasses whose
messages are fixed.
"""

import logging

from ci_calculator.core import Calculator
from ci_calculator.exceptions import (
    DIVISION_BY_ZERO_MESSAGE,
    NEGATIVE_SQRT_MESSAGE,
    CalculatorError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidInputError,
    NegativeSquareRootError,
)
from ci_calculator.operations import (
    add,
    divide,
    multiply,
    power,
    sqrt,
    subtract,
)
from ci_calculator.validators import (
    validate_divisor,
    validate_number,
    validate_radicand,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DIVISION_BY_ZERO_MESSAGE",
    "NEGATIVE_SQRT_MESSAGE",
    "Calculator",
    "CalculatorError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "InvalidInputError",
    "NegativeSquareRootError",
    "add",
    "divide",
    "multiply",
    "power",
    "sqrt",
    "subtract",
    "validate_divisor",
    "validate_number",
    "validate_radicand",
]

__version__ = "0.1.0"
