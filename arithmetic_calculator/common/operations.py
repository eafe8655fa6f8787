"""Arithmetic primitives dispatched to by the expression parser."""
from functools import reduce
import math
import operator

from arithmetic_calculator.common.errors import DivideByZeroError, InvalidDomainError


def add(a: float, b: float, *rest: float) -> float:
    """Return the sum of all operands, accumulated left to right."""
    return reduce(operator.add, (b, *rest), a)


def subtract(a: float, b: float, *rest: float) -> float:
    """Subtract every following operand from `a`, left to right."""
    return reduce(operator.sub, (b, *rest), a)


def multiply(a: float, b: float, *rest: float) -> float:
    """Return the product of all operands, accumulated left to right."""
    return reduce(operator.mul, (b, *rest), a)


def divide(a: float, b: float, *rest: float) -> float:
    """
    Divide `a` by every following operand, left to right.

    :param float a: Dividend
    :param float b: First divisor
    :param float rest: Further divisors, applied in order

    :return: Quotient of the whole chain
    :rtype: float
    :raises DivideByZeroError: On the first divisor equal to zero
    """
    result: float = a
    for position, divisor in enumerate((b, *rest), start=1):
        if divisor == 0:
            raise DivideByZeroError(result, divisor, position)
        result = result / divisor
    return result


def sqrt(a: float) -> float:
    """
    Return the square root of `a`.

    Only an input of exactly zero is rejected. A negative input is not
    checked and yields NaN.

    :param float a: Radicand

    :return: Square root of `a`, NaN when `a` is negative
    :rtype: float
    :raises InvalidDomainError: If `a` equals zero
    """
    if a == 0:
        raise InvalidDomainError(a)
    if a < 0:
        return math.nan
    return math.sqrt(a)
