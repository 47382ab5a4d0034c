"""Public API for calcbot - returns structured objects without raising on bad input."""

from __future__ import annotations

from .evaluator import evaluate_tokens
from .lexer import tokenize
from .logging_config import get_logger
from .types import CalculationError, EvalResult

logger = get_logger("api")


def evaluate(expression: str) -> EvalResult:
    """Evaluate an arithmetic expression.

    Args:
        expression: Expression string (e.g., "2+3*4", "sqrt(16)+2", "ln(e)")

    Returns:
        EvalResult with the numeric value, or the error message and code

    Example:
        >>> from calcbot_pkg.api import evaluate
        >>> evaluate("2^3^2").value
        64.0
        >>> evaluate("1/0").error
        'Division by zero'
    """
    try:
        value = evaluate_tokens(tokenize(expression))
    except CalculationError as e:
        logger.debug(
            f"Evaluation failed: {e.message}",
            extra={"expression": expression, "code": e.code},
        )
        return EvalResult(ok=False, error=e.message, code=e.code)
    return EvalResult(ok=True, value=value)


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate an expression's syntax without evaluating it.

    Only lexing is performed, so structural and domain problems such as
    "2+" or "1/0" are reported by ``evaluate`` rather than here.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from calcbot_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("2 $ 2")
        (False, 'Invalid character: $')
    """
    try:
        tokenize(expression)
    except CalculationError as e:
        return False, e.message
    return True, None
