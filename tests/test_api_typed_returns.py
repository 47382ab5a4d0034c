"""Tests for the public API: typed results, no exceptions across the boundary."""

import math

import pytest

from calcbot_pkg.api import evaluate, validate_expression
from calcbot_pkg.types import EvalResult


class TestAPITypedReturns:
    """Test that API functions return typed values."""

    def test_evaluate_returns_eval_result(self):
        """Test that evaluate() returns EvalResult."""
        result = evaluate("2 + 2")
        assert isinstance(result, EvalResult)
        assert result.ok is True
        assert result.value == 4
        assert result.error is None

    def test_evaluate_error_returns_eval_result(self):
        """Test that evaluate() errors return EvalResult."""
        result = evaluate("1/0")
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert result.value is None
        assert result.error == "Division by zero"
        assert result.code == "DIVISION_BY_ZERO"

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("2+3*4", 14),
            ("(2+3)*4", 20),
            ("sqrt(16)+2", 6),
            ("sin(0)", 0),
            ("log(100)", 2),
            ("ln(e)", 1),
            ("2^3^2", 64),
            ("pi", math.pi),
            ("e", math.e),
        ],
    )
    def test_documented_values(self, expression, expected):
        result = evaluate(expression)
        assert result.ok is True
        assert result.value == expected

    def test_infinity_is_success(self):
        result = evaluate("0^(0-1)")
        assert result.ok is True
        assert result.value == math.inf

    def test_nan_is_success(self):
        result = evaluate("(-8)^0.5")
        assert result.ok is True
        assert math.isnan(result.value)

    @pytest.mark.parametrize(
        "expression, message",
        [
            ("1/0", "Division by zero"),
            ("sqrt(-1)", "Cannot calculate square root of negative number"),
            ("log(-1)", "Cannot calculate logarithm of non-positive number"),
            ("ln(0)", "Cannot calculate natural logarithm of non-positive number"),
            ("", "Expression cannot be empty"),
            ("   ", "Expression cannot be empty"),
        ],
    )
    def test_error_messages(self, expression, message):
        result = evaluate(expression)
        assert result.ok is False
        assert result.error == message

    def test_malformed_input_fails(self):
        result = evaluate("2 + * 3")
        assert result.ok is False
        assert result.error

    def test_scientific_notation_fails(self):
        assert evaluate("1e5").ok is False

    def test_validate_expression_returns_tuple(self):
        """Test that validate_expression() returns tuple."""
        assert validate_expression("x + 1") == (False, "Invalid character: x")
        assert validate_expression("2 + 2") == (True, None)

    def test_validate_expression_only_lexes(self):
        # Structure and domain are checked by evaluate()
        assert validate_expression("1/0") == (True, None)
        assert validate_expression("2+") == (True, None)

    def test_result_has_repr(self):
        """Test that result types have __repr__."""
        assert repr(evaluate("2+2")) == "EvalResult(ok=True, value=4.0)"
        assert "DIVISION_BY_ZERO" in repr(evaluate("1/0"))

    def test_result_has_to_dict(self):
        """Test that result types have to_dict()."""
        assert evaluate("2+2").to_dict() == {"ok": True, "value": 4.0}
        assert evaluate("(1").to_dict() == {
            "ok": False,
            "error": "Mismatched parentheses",
            "code": "MISMATCHED_PARENTHESES",
        }

    def test_determinism(self):
        first = evaluate("sin(1)^2+cos(1)^2")
        for _ in range(10):
            again = evaluate("sin(1)^2+cos(1)^2")
            assert again.value == first.value
