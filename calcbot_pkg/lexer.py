"""Lexer: turns a free-form formula into a list of typed tokens.

This module handles:
- Whitespace stripping and lower-casing
- The global parenthesis balance check
- Numeric literals, including the folded constants ``pi`` and ``e`` and
  signed literals at the start of the expression or of a group
- Function keywords and single-character operator symbols
"""

from __future__ import annotations

import math

from .config import DECIMAL_SEPARATOR, DIGITS, MAX_INPUT_LENGTH
from .logging_config import get_logger
from .types import (
    EmptyExpressionError,
    ExpressionSyntaxError,
    FunctionKind,
    OperatorKind,
    Token,
    TokenType,
)

logger = get_logger("lexer")

# Checked in this order; "e" is handled separately because it must not
# swallow the first letter of a longer word.
FUNCTION_KEYWORDS = (
    ("sin", FunctionKind.SIN),
    ("cos", FunctionKind.COS),
    ("tan", FunctionKind.TAN),
    ("sqrt", FunctionKind.SQRT),
    ("log", FunctionKind.LOG10),
    ("ln", FunctionKind.LN),
)

SYMBOL_TOKENS = {
    "+": Token(TokenType.OPERATOR, kind=OperatorKind.ADD),
    "-": Token(TokenType.OPERATOR, kind=OperatorKind.SUB),
    "*": Token(TokenType.OPERATOR, kind=OperatorKind.MUL),
    "/": Token(TokenType.OPERATOR, kind=OperatorKind.DIV),
    "^": Token(TokenType.OPERATOR, kind=OperatorKind.POW),
    "(": Token(TokenType.LEFT_PAREN),
    ")": Token(TokenType.RIGHT_PAREN),
}


def preprocess(expression: str) -> str:
    """Remove all whitespace and lower-case the expression.

    Args:
        expression: Raw user input (e.g., "2 + Sqrt( 16 )")

    Returns:
        Compact lower-case string (e.g., "2+sqrt(16)")
    """
    return "".join(expression.split()).lower()


def _is_number_char(char: str) -> bool:
    return char in DIGITS or char == DECIMAL_SEPARATOR


def _scan_number(expr: str, start: int) -> tuple[Token, int]:
    end = start
    while end < len(expr) and _is_number_char(expr[end]):
        end += 1
    literal = expr[start:end]
    if literal.count(DECIMAL_SEPARATOR) > 1:
        raise ExpressionSyntaxError(
            "Invalid number format: multiple decimal points", "INVALID_NUMBER"
        )
    if literal.endswith(DECIMAL_SEPARATOR):
        raise ExpressionSyntaxError(
            "Invalid number format: ends with decimal point", "INVALID_NUMBER"
        )
    return Token(TokenType.NUMBER, value=float(literal)), end


def _starts_signed_literal(expr: str, pos: int, tokens: list[Token]) -> bool:
    """A '-' opening the expression or a group, directly followed by a digit,
    belongs to the numeric literal: "sqrt(-1)" but not "2*-1" or "-(1)"."""
    if expr[pos] != "-" or pos + 1 >= len(expr) or not _is_number_char(expr[pos + 1]):
        return False
    return not tokens or tokens[-1].type is TokenType.LEFT_PAREN


def _scan_keyword(expr: str, pos: int) -> tuple[Token, int] | None:
    if expr.startswith("pi", pos):
        return Token(TokenType.NUMBER, value=math.pi), pos + 2
    if expr.startswith("e", pos) and (pos + 1 >= len(expr) or not expr[pos + 1].isalpha()):
        return Token(TokenType.NUMBER, value=math.e), pos + 1
    for keyword, kind in FUNCTION_KEYWORDS:
        if expr.startswith(keyword, pos):
            return Token(TokenType.FUNCTION, kind=kind), pos + len(keyword)
    return None


def tokenize(expression: str) -> list[Token]:
    """Lex an expression into tokens in scan order.

    Args:
        expression: Raw expression string (e.g., "sqrt(16) + 2")

    Returns:
        List of tokens

    Raises:
        EmptyExpressionError: If the expression is blank
        ExpressionSyntaxError: On unbalanced parentheses, malformed numbers,
            unknown characters or overly long input
    """
    if not expression or not expression.strip():
        raise EmptyExpressionError()
    expr = preprocess(expression)
    # Whitespace does not count towards the limit
    if len(expr) > MAX_INPUT_LENGTH:
        raise ExpressionSyntaxError(
            f"Expression too long (max {MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    if expr.count("(") != expr.count(")"):
        raise ExpressionSyntaxError("Mismatched parentheses", "MISMATCHED_PARENTHESES")

    tokens: list[Token] = []
    pos = 0
    while pos < len(expr):
        char = expr[pos]
        if _is_number_char(char):
            token, pos = _scan_number(expr, pos)
            tokens.append(token)
            continue
        if _starts_signed_literal(expr, pos, tokens):
            token, pos = _scan_number(expr, pos + 1)
            tokens.append(Token(TokenType.NUMBER, value=-token.value))
            continue
        keyword = _scan_keyword(expr, pos)
        if keyword is not None:
            token, pos = keyword
            tokens.append(token)
            continue
        if char in SYMBOL_TOKENS:
            tokens.append(SYMBOL_TOKENS[char])
            pos += 1
            continue
        raise ExpressionSyntaxError(f"Invalid character: {char}", "INVALID_CHARACTER")

    logger.debug("Tokenized expression", extra={"expression": expr, "tokens": len(tokens)})
    return tokens
