"""
Property-based tests for the Calculator class.

The calculator is stateless: its methods agree with the module functions
for any input, and concurrent use from many threads gives the same
answers as sequential use.
"""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ci_calculator import Calculator, CalculatorError, operations

any_floats = st.floats()

small_floats = st.floats(
    min_value=-1e5,
    max_value=1e5,
    allow_nan=False,
    allow_infinity=False,
)

OPERATION_NAMES = ["add", "subtract", "multiply", "divide", "power"]


def _outcome(func, *args):
    """Return a comparable result or the error message."""
    try:
        result = func(*args)
    except CalculatorError as e:
        return ("error", str(e))
    if math.isnan(result):
        return ("nan",)
    return ("value", result)


@pytest.mark.property
class TestCalculatorProperties:
    """Property-based tests for Calculator."""

    @given(name=st.sampled_from(OPERATION_NAMES), a=any_floats, b=any_floats)
    def test_binary_methods_match_functions(self, name: str, a: float, b: float):
        calc = Calculator()
        assert _outcome(getattr(calc, name), a, b) == _outcome(
            getattr(operations, name), a, b
        )

    @given(a=any_floats)
    def test_sqrt_method_matches_function(self, a: float):
        assert _outcome(Calculator().sqrt, a) == _outcome(operations.sqrt, a)

    @given(a=any_floats, b=any_floats)
    def test_calls_are_deterministic(self, a: float, b: float):
        calc = Calculator()
        for name in OPERATION_NAMES:
            method = getattr(calc, name)
            assert _outcome(method, a, b) == _outcome(method, a, b)

    @given(a=small_floats, b=small_floats)
    def test_separate_instances_agree(self, a: float, b: float):
        first, second = Calculator(), Calculator()
        for name in OPERATION_NAMES:
            assert _outcome(getattr(first, name), a, b) == _outcome(
                getattr(second, name), a, b
            )


@pytest.mark.property
@pytest.mark.slow
class TestConcurrentUse:
    """A shared Calculator may be used from many threads without locking."""

    @given(
        pairs=st.lists(st.tuples(small_floats, small_floats), min_size=1, max_size=50),
        name=st.sampled_from(OPERATION_NAMES),
    )
    def test_threaded_results_match_sequential(self, pairs, name: str):
        calc = Calculator()
        method = getattr(calc, name)

        expected = [_outcome(method, a, b) for a, b in pairs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(lambda pair: _outcome(method, *pair), pairs))

        assert actual == expected
