"""Error types raised by the arithmetic primitives and the expression parser."""


class CalculatorError(Exception):
    """Base class for every calculator failure."""


class DivideByZeroError(CalculatorError, ZeroDivisionError):
    """
    Raised when a divisor in a division chain is exactly zero.

    :param float dividend: Running result at the point of failure
    :param float divisor: The zero divisor
    :param int position: 1-based position of the divisor in the chain
    """

    def __init__(self, dividend: float, divisor: float, position: int = 1) -> None:
        self.dividend = dividend
        self.divisor = divisor
        self.position = position
        super().__init__(
            f"divide-by-zero for divide({dividend:f}, {divisor:f}) at position {position}"
        )


class InvalidDomainError(CalculatorError, ValueError):
    """Raised by sqrt when its input is outside the accepted domain."""

    def __init__(self, value: float) -> None:
        self.value = value
        # Message wording kept as-is, the check itself is on zero
        super().__init__(f"cannot-get-square-root-of-a-negative-number for sqrt({value:f})")


class ParseError(CalculatorError, ValueError):
    """Raised when an expression does not match the `<number> <op> <number>` shape."""

    def __init__(self, message: str, expression: str) -> None:
        self.expression = expression
        super().__init__(message)
