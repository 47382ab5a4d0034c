"""Tests for failure modes and invalid input handling."""

import pytest

from calcbot_pkg.api import evaluate
from calcbot_pkg.evaluator import evaluate_tokens
from calcbot_pkg.lexer import tokenize
from calcbot_pkg.types import (
    DomainError,
    EmptyExpressionError,
    ExpressionSyntaxError,
    StructuralError,
)


class TestInputValidationFailures:
    """Test lexer-level failure modes."""

    def test_empty_input(self):
        with pytest.raises(EmptyExpressionError):
            tokenize("")

    def test_whitespace_only(self):
        with pytest.raises(EmptyExpressionError):
            tokenize("   ")

    def test_too_long_input(self):
        with pytest.raises(ExpressionSyntaxError):
            tokenize("1+" * 5001)

    def test_unbalanced_parentheses(self):
        with pytest.raises(ExpressionSyntaxError):
            tokenize("(1 + 1")

    def test_brackets_are_not_grouping(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            tokenize("[1 + 1]")
        assert "Invalid character" in str(exc_info.value)

    def test_parenthesis_count_checked_before_characters(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            tokenize("(x")
        assert str(exc_info.value) == "Mismatched parentheses"


class TestEvaluationFailures:
    """Test evaluator-level failure modes."""

    @pytest.mark.parametrize("expr", ["+", "2+", "*2", "2 + * 3", "(+)", "2--3"])
    def test_missing_operands(self, expr):
        with pytest.raises(StructuralError):
            evaluate_tokens(tokenize(expr))

    @pytest.mark.parametrize("expr", ["sin", "cos 1", "tan2+3", "log", "ln ln(2)"])
    def test_functions_without_group(self, expr):
        with pytest.raises(StructuralError):
            evaluate_tokens(tokenize(expr))

    @pytest.mark.parametrize("expr", ["1/0", "1/(1-1)", "sqrt(-0.5)", "log(-10)", "ln(0)"])
    def test_domain(self, expr):
        with pytest.raises(DomainError):
            evaluate_tokens(tokenize(expr))


class TestNoExceptionsCrossBoundary:
    """evaluate() reports failures as values."""

    @pytest.mark.parametrize(
        "expr", ["", "(", ")(", "1..1", "@", "2 + * 3", "sin", "1/0", "sqrt(-1)", "()"]
    )
    def test_failures_are_values(self, expr):
        result = evaluate(expr)
        assert result.ok is False
        assert isinstance(result.error, str) and result.error
        assert isinstance(result.code, str) and result.code
