"""Test the arithmetic primitives."""
from functools import reduce
import math
import operator

from hypothesis import assume, given
from hypothesis import strategies as st
import pytest

from arithmetic_calculator.common.errors import CalculatorError, DivideByZeroError, InvalidDomainError
from arithmetic_calculator.common.operations import add, divide, multiply, sqrt, subtract


finite = st.floats(allow_nan=False, allow_infinity=False, min_value=-1e6, max_value=1e6)
non_zero = finite.filter(lambda x: x != 0)


@pytest.mark.parametrize("function,a,b,expected", [
    (add, 2, 2, 4),               # two positives summing to a positive
    (add, 7, -2, 5),              # positive and negative summing to a positive
    (add, 3, -5, -2),             # positive and negative summing to a negative
    (subtract, 2, 9, -7),         # difference is negative
    (subtract, 7, 2, 5),          # difference is positive
    (subtract, 3, -2.5, 5.5),     # decimal difference
    (multiply, 2, 20, 40),        # product is positive
    (multiply, 7, -2, -14),       # product is negative
    (multiply, 8.4, -2.5, -21),   # decimal product
])
def test_add_subtract_multiply(function, a, b, expected) -> None:
    """Two-operand calls return the expected value."""
    assert function(a, b) == expected


@pytest.mark.parametrize("a,b,expected", [
    (20, 2, 10),
    (10, -2, -5),
    (8.4, -2.5, -3.3600000000000003),
])
def test_divide(a, b, expected) -> None:
    """Two-operand division returns the quotient."""
    assert divide(a, b) == expected


def test_variadic_calls_fold_left_to_right() -> None:
    """Extra operands are applied in encounter order."""
    assert add(1, 2, 3, 4) == 10
    assert subtract(10, 1, 2, 3) == 4
    assert multiply(2, 3, 4) == 24
    assert divide(100, 2, 5) == 10


@given(a=finite, b=finite)
def test_two_operand_primitives_match_operators(a: float, b: float) -> None:
    """add, subtract and multiply agree with the built-in operators."""
    assert add(a, b) == a + b
    assert subtract(a, b) == a - b
    assert multiply(a, b) == a * b


@given(a=finite, b=finite, rest=st.lists(finite, max_size=5))
def test_variadic_primitives_match_left_fold(a: float, b: float, rest: list) -> None:
    """Variadic calls equal the left fold over [a, b] + rest."""
    operands = [b, *rest]
    assert add(a, b, *rest) == reduce(operator.add, operands, a)
    assert subtract(a, b, *rest) == reduce(operator.sub, operands, a)
    assert multiply(a, b, *rest) == reduce(operator.mul, operands, a)


@given(a=finite, b=non_zero, rest=st.lists(non_zero, max_size=5))
def test_divide_matches_left_fold(a: float, b: float, rest: list) -> None:
    """Division chains without zeros equal the left fold of truediv."""
    assert divide(a, b, *rest) == reduce(operator.truediv, [b, *rest], a)


@given(a=finite)
def test_divide_by_zero_always_fails(a: float) -> None:
    """Dividing any finite number by zero raises DivideByZeroError."""
    with pytest.raises(DivideByZeroError):
        divide(a, 0)


@given(a=finite, b=finite)
def test_divide_matches_truediv(a: float, b: float) -> None:
    """divide(a, b) equals a / b for any non-zero b."""
    assume(b != 0)
    assert divide(a, b) == a / b


def test_divide_by_zero_reports_operands_and_position() -> None:
    """The error identifies the running dividend, the divisor and where it occurred."""
    with pytest.raises(DivideByZeroError) as exc_info:
        divide(100, 2, 5, 0, 3)

    err = exc_info.value
    assert err.dividend == 10
    assert err.divisor == 0
    assert err.position == 3
    assert str(err) == "divide-by-zero for divide(10.000000, 0.000000) at position 3"


def test_divide_by_zero_first_divisor() -> None:
    """A zero as the first divisor is reported at position 1."""
    with pytest.raises(DivideByZeroError) as exc_info:
        divide(2, 0)
    assert exc_info.value.position == 1
    assert exc_info.value.dividend == 2


def test_divide_by_zero_error_hierarchy() -> None:
    """DivideByZeroError can be caught as a CalculatorError or a ZeroDivisionError."""
    with pytest.raises(CalculatorError):
        divide(1, 0)
    with pytest.raises(ZeroDivisionError):
        divide(1, 0)


@pytest.mark.parametrize("a,expected", [
    (64, 8),
    (2.25, 1.5),
    (1, 1),
])
def test_sqrt(a, expected) -> None:
    """sqrt returns the non-negative root."""
    assert sqrt(a) == expected


def test_sqrt_of_zero_fails() -> None:
    """Zero is the rejected input of sqrt."""
    with pytest.raises(InvalidDomainError) as exc_info:
        sqrt(0)
    assert exc_info.value.value == 0
    assert "sqrt(0.000000)" in str(exc_info.value)


@pytest.mark.parametrize("a", [-64, -4, -0.5])
def test_sqrt_of_negative_number_does_not_fail(a) -> None:
    """Negative inputs are not checked and yield NaN."""
    assert math.isnan(sqrt(a))
