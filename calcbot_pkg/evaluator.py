"""Two-stack precedence evaluator.

Numbers go on an operand stack; operators, functions and open parentheses
go on an operator stack. An incoming operator first applies every stacked
operator of greater or equal precedence, so all binary operators, ``^``
included, group left to right: ``2^3^2`` is ``(2^3)^2 = 64``.

A function is applied only when the ``)`` closing its argument is reached,
so every function must be followed directly by a parenthesized argument.

``+ - * /`` use plain float arithmetic. Power and the elementary functions
go through NumPy so that overflow, ``0^-1`` and negative bases with
fractional exponents give ``inf``/``nan`` instead of raising.
"""

from __future__ import annotations

import numpy as np

from .logging_config import get_logger
from .types import (
    DomainError,
    FunctionKind,
    OperatorKind,
    StructuralError,
    Token,
    TokenType,
)

logger = get_logger("evaluator")

PRECEDENCE = {
    OperatorKind.ADD: 1,
    OperatorKind.SUB: 1,
    OperatorKind.MUL: 2,
    OperatorKind.DIV: 2,
    OperatorKind.POW: 3,
}
FUNCTION_PRECEDENCE = 4

NUMPY_FUNCTIONS = {
    FunctionKind.SIN: np.sin,
    FunctionKind.COS: np.cos,
    FunctionKind.TAN: np.tan,
    FunctionKind.SQRT: np.sqrt,
    FunctionKind.LOG10: np.log10,
    FunctionKind.LN: np.log,
}


def get_precedence(token: Token) -> int:
    """Return the binding rank of an operator or function token."""
    if token.type is TokenType.FUNCTION:
        return FUNCTION_PRECEDENCE
    if token.type is TokenType.OPERATOR:
        return PRECEDENCE[token.kind]
    return 0


def _pop_operand(operands: list[float], symbol: str) -> float:
    if not operands:
        raise StructuralError(f"Missing operand for '{symbol}'", "MISSING_OPERAND")
    return operands.pop()


def _power(base: float, exponent: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))


def apply_operator(operands: list[float], kind: OperatorKind) -> None:
    """Pop two operands, apply a binary operator and push the result."""
    right = _pop_operand(operands, kind.value)
    left = _pop_operand(operands, kind.value)
    if kind is OperatorKind.ADD:
        result = left + right
    elif kind is OperatorKind.SUB:
        result = left - right
    elif kind is OperatorKind.MUL:
        result = left * right
    elif kind is OperatorKind.DIV:
        if right == 0.0:
            raise DomainError("Division by zero", "DIVISION_BY_ZERO")
        result = left / right
    elif kind is OperatorKind.POW:
        result = _power(left, right)
    else:
        raise StructuralError(f"Unknown operator: {kind}")
    operands.append(result)


def apply_function(operands: list[float], kind: FunctionKind) -> None:
    """Pop one operand, apply a function and push the result."""
    x = _pop_operand(operands, kind.value)
    if kind is FunctionKind.SQRT and x < 0:
        raise DomainError(
            "Cannot calculate square root of negative number", "NEGATIVE_SQRT"
        )
    if kind is FunctionKind.LOG10 and x <= 0:
        raise DomainError(
            "Cannot calculate logarithm of non-positive number", "NON_POSITIVE_LOG"
        )
    if kind is FunctionKind.LN and x <= 0:
        raise DomainError(
            "Cannot calculate natural logarithm of non-positive number",
            "NON_POSITIVE_LOG",
        )
    with np.errstate(all="ignore"):
        operands.append(float(NUMPY_FUNCTIONS[kind](np.float64(x))))


def _apply_stacked(operands: list[float], token: Token) -> None:
    if token.type is TokenType.OPERATOR:
        apply_operator(operands, token.kind)
    elif token.type is TokenType.FUNCTION:
        raise StructuralError(
            f"Function '{token.kind.value}' requires a parenthesized argument",
            "MISSING_ARGUMENT",
        )
    else:
        raise StructuralError("Mismatched parentheses", "MALFORMED_EXPRESSION")


def _close_group(operands: list[float], operators: list[Token]) -> None:
    while operators and operators[-1].type is not TokenType.LEFT_PAREN:
        _apply_stacked(operands, operators.pop())
    if not operators:
        raise StructuralError("Mismatched parentheses", "MALFORMED_EXPRESSION")
    operators.pop()
    if operators and operators[-1].type is TokenType.FUNCTION:
        apply_function(operands, operators.pop().kind)


def evaluate_tokens(tokens: list[Token]) -> float:
    """Reduce a token sequence to a single float.

    Args:
        tokens: Tokens as produced by ``lexer.tokenize``

    Returns:
        The value of the expression; ``inf`` and ``nan`` are valid results

    Raises:
        StructuralError: If the tokens do not reduce to exactly one value
        DomainError: On division by zero or an out-of-domain function argument
    """
    operands: list[float] = []
    operators: list[Token] = []

    for index, token in enumerate(tokens):
        if token.type is TokenType.NUMBER:
            operands.append(token.value)
        elif token.type is TokenType.LEFT_PAREN:
            operators.append(token)
        elif token.type is TokenType.RIGHT_PAREN:
            _close_group(operands, operators)
        elif token.type is TokenType.FUNCTION:
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            if following is None or following.type is not TokenType.LEFT_PAREN:
                raise StructuralError(
                    f"Function '{token.kind.value}' requires a parenthesized argument",
                    "MISSING_ARGUMENT",
                )
            operators.append(token)
        elif token.type is TokenType.OPERATOR:
            current = get_precedence(token)
            while (
                operators
                and operators[-1].type is TokenType.OPERATOR
                and get_precedence(operators[-1]) >= current
            ):
                apply_operator(operands, operators.pop().kind)
            operators.append(token)

    while operators:
        _apply_stacked(operands, operators.pop())

    if len(operands) != 1:
        raise StructuralError(
            "Expression does not reduce to a single value", "MALFORMED_EXPRESSION"
        )
    result = operands[0]
    logger.debug(f"Reduced to {result!r}", extra={"tokens": len(tokens)})
    return result
