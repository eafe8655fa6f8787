"""Pydantic models for parsed expressions, requests and evaluation results."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from arithmetic_calculator.common.errors import CalculatorError


class Operator(str, Enum):
    """Binary operators accepted in an expression, keyed by their token."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class ParsedExpression(BaseModel):
    """A single binary operation extracted from an expression string."""

    model_config = ConfigDict(frozen=True)

    left: float = Field(..., description="Left operand")
    operator: Operator = Field(..., description="Operator token")
    right: float = Field(..., description="Right operand")


class OperationRequest(BaseModel):
    """Represents a single arithmetic expression to evaluate."""

    expression: str = Field(..., description="Arithmetic expression as a string")

    @field_validator("expression")
    def expression_must_not_be_empty(cls, v: str) -> str:
        """Ensure that the expression is not empty."""
        if not v.strip():
            raise ValueError("Expression cannot be empty")
        return v


class OperationResult(BaseModel):
    """
    Outcome of evaluating one expression.

    Exactly one of `result` and `error` is set. Failures also carry the name of
    the calculator error class in `error_kind`.
    """

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    line: Optional[int] = Field(default=None, ge=1, description="Line number in the input, if any")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result")
    error: Optional[str] = Field(default=None, description="Error message when evaluation failed")
    error_kind: Optional[str] = Field(default=None, description="Calculator error class name")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "OperationResult":
        """Reject results carrying both or neither of a value and an error."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' and 'error' must be set")
        if (self.error is None) != (self.error_kind is None):
            raise ValueError("'error_kind' must be set together with 'error'")
        return self

    @classmethod
    def success(cls, expression: str, result: float, line: Optional[int] = None) -> "OperationResult":
        return cls(expression=expression, result=result, line=line)

    @classmethod
    def failure(
        cls, expression: str, exc: CalculatorError, line: Optional[int] = None
    ) -> "OperationResult":
        return cls(expression=expression, error=str(exc), error_kind=type(exc).__name__, line=line)

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self, precision: Optional[int] = None) -> str:
        """
        Format the result as one output line, without trailing newline.

        :param int precision: Round the value to this many decimals, if given

        :return: `"<expr> = <result>"` or `"<expr> -> ERROR: <message>"`
        :rtype: str
        """
        if not self.ok:
            return f"{self.expression} -> ERROR: {self.error}"
        value = self.result if precision is None else round(self.result, precision)
        return f"{self.expression} = {value}"
