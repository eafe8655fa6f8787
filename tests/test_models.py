"""Test the OperationRequest, OperationResult and ParsedExpression models."""
import math

from pydantic import ValidationError
import pytest

from arithmetic_calculator.common.errors import ParseError
from arithmetic_calculator.common.models import (
    Operator,
    OperationRequest,
    OperationResult,
    ParsedExpression,
)


def test_operation_request_valid() -> None:
    """Test that a valid OperationRequest can be created."""
    req = OperationRequest(expression="2 + 2")
    assert req.expression == "2 + 2"


def test_operation_request_invalid_type() -> None:
    """Test that non-string expressions raise a validation error."""
    with pytest.raises(ValidationError):
        OperationRequest(expression=123)


def test_operation_request_rejects_blank() -> None:
    """Blank expressions are rejected."""
    with pytest.raises(ValidationError):
        OperationRequest(expression="   ")


def test_operation_result_success() -> None:
    res = OperationResult.success("2 + 2", 4.0, line=1)
    assert res.ok
    assert res.result == 4.0
    assert res.render() == "2 + 2 = 4.0"


def test_operation_result_failure() -> None:
    exc = ParseError('unable to parse expression "2 +"', "2 +")
    res = OperationResult.failure("2 +", exc)
    assert not res.ok
    assert res.error_kind == "ParseError"
    assert res.render() == '2 + -> ERROR: unable to parse expression "2 +"'


def test_operation_result_render_precision() -> None:
    """Precision only affects the rendered line."""
    res = OperationResult.success("1 / 3", 1 / 3)
    assert res.render(precision=3) == "1 / 3 = 0.333"
    assert res.result == 1 / 3


def test_operation_result_accepts_nan() -> None:
    res = OperationResult.success("sqrt", math.nan)
    assert res.ok
    assert math.isnan(res.result)


@pytest.mark.parametrize("kwargs", [
    {"expression": "2 + 2"},                                                    # neither
    {"expression": "2 + 2", "result": 4.0, "error": "x", "error_kind": "X"},    # both
    {"expression": "2 + 2", "error": "x"},                                      # missing kind
    {"expression": "2 + 2", "result": 4.0, "error_kind": "X"},                  # stray kind
    {"expression": "2 + 2", "result": 4.0, "line": 0},                          # bad line
])
def test_operation_result_invalid(kwargs) -> None:
    """Results must carry exactly one outcome."""
    with pytest.raises(ValidationError):
        OperationResult(**kwargs)


def test_operation_result_is_immutable() -> None:
    res = OperationResult.success("2 + 2", 4.0)
    with pytest.raises(ValidationError):
        res.result = 5.0


def test_parsed_expression_rejects_unknown_operator() -> None:
    with pytest.raises(ValidationError):
        ParsedExpression(left=1, operator="%", right=2)


def test_operator_tokens() -> None:
    assert [op.value for op in Operator] == ["+", "-", "*", "/"]
