"""Parse and evaluate single-operator arithmetic expressions."""
import math
import re
from typing import Callable, Dict, Optional

from arithmetic_calculator.common.errors import CalculatorError, ParseError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.models import Operator, OperationResult, ParsedExpression
from arithmetic_calculator.common.operations import add, divide, multiply, subtract


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]

# Mapping of operators to the primitive they dispatch to
OPERATORS: Dict[Operator, OperatorFn] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}

# <number> <operator> <number>, a number being digits with an optional decimal part.
# Whitespace is only allowed around the operator and around the whole expression.
EXPRESSION_PATTERN = re.compile(r"\s*(\d+\.?\d*)\s*(\S)\s*(\d+\.?\d*)\s*", re.ASCII)


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions made of exactly one binary operation.

    Design constraints:
        - No eval(), no dynamic code execution
        - One operator only: "2 + 2 * 2" is rejected, not evaluated with precedence

    Algorithm:
        1. Match the whole string against `EXPRESSION_PATTERN`
        2. Convert both operands to float and look up the operator
        3. Dispatch to the matching arithmetic primitive

    Examples:
        - "2+2" -> 4.0
        - " 20 / 2 " -> 10.0
        - "2 X 2" -> ParseError (unknown operator)
    """

    @staticmethod
    def _to_float(token: str, expr: str) -> float:
        """
        Convert a numeric token to float.

        :param str token: Numeric token matched by the pattern
        :param str expr: Whole expression, used in the error message

        :return: Token value
        :rtype: float
        :raises ParseError: If the token is not a valid float or overflows to infinity
        """
        message = f'unable to parse "{token}" to a float in expression "{expr}"'
        try:
            value = float(token)
        except ValueError:
            raise ParseError(message, expr)
        # Out-of-range literals overflow to inf rather than raising
        if math.isinf(value):
            raise ParseError(message, expr)
        return value

    @staticmethod
    def parse(expr: str) -> ParsedExpression:
        """
        Split an expression into its two operands and its operator.

        :param str expr: Arithmetic expression such as "2 + 2"

        :return: Parsed operands and operator
        :rtype: ParsedExpression
        :raises ParseError: If the expression is malformed or uses an unknown operator
        """
        match: Optional[re.Match] = EXPRESSION_PATTERN.fullmatch(expr)
        if match is None:
            raise ParseError(f'unable to parse expression "{expr}"', expr)

        left_token, op_token, right_token = match.groups()
        try:
            op = Operator(op_token)
        except ValueError:
            raise ParseError(f'unknown operator {op_token} in expression "{expr}"', expr)

        parsed = ParsedExpression(
            left=ExpressionParser._to_float(left_token, expr),
            operator=op,
            right=ExpressionParser._to_float(right_token, expr),
        )
        logger.debug("Parsed expression", expression=expr, parsed=parsed.model_dump(mode="json"))
        return parsed

    @staticmethod
    def apply(parsed: ParsedExpression) -> float:
        """
        Evaluate a parsed expression with exactly its two operands.

        Arithmetic errors from the primitives (e.g. DivideByZeroError) propagate unchanged.

        :param ParsedExpression parsed: Output of `parse`

        :return: Computed result
        :rtype: float
        """
        return OPERATORS[parsed.operator](parsed.left, parsed.right)

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Parse and evaluate an arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises ParseError: If the expression is malformed
        :raises DivideByZeroError: If the expression divides by zero
        """
        return ExpressionParser.apply(ExpressionParser.parse(expr))


def evaluate_expression(expr: str) -> float:
    """Evaluate `expr`, raising a CalculatorError subclass on failure."""
    return ExpressionParser.evaluate(expr)


def evaluate_to_result(expr: str, line: Optional[int] = None) -> OperationResult:
    """
    Evaluate `expr` and report the outcome as an OperationResult instead of raising.

    :param str expr: Arithmetic expression string
    :param int line: Line number of the expression in its input, if any

    :return: Success or failure result
    :rtype: OperationResult
    """
    try:
        return OperationResult.success(expr, ExpressionParser.evaluate(expr), line=line)
    except CalculatorError as exc:
        return OperationResult.failure(expr, exc, line=line)
