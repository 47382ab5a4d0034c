"""Token types, result dataclasses and the error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


class OperatorKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


class FunctionKind(Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SQRT = "sqrt"
    LOG10 = "log"
    LN = "ln"


@dataclass(frozen=True)
class Token:
    """A single lexed unit.

    ``value`` is only set for NUMBER tokens, ``kind`` only for OPERATOR and
    FUNCTION tokens.
    """

    type: TokenType
    value: float | None = None
    kind: OperatorKind | FunctionKind | None = None

    def __repr__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"Token(NUMBER, {self.value!r})"
        if self.kind is not None:
            return f"Token({self.type.name}, {self.kind.value!r})"
        return f"Token({self.type.name})"


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    value: float | None = None
    error: str | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = self.value
        if self.error is not None:
            result_dict["error"] = self.error
        if self.code is not None:
            result_dict["code"] = self.code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, code={self.code!r})"
        return f"EvalResult(ok=True, value={self.value!r})"


@dataclass
class ChatReply:
    """Reply to a chat message addressed to the calculator."""

    success: bool
    message: str | None = None
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"success": self.success}
        if self.message is not None:
            result_dict["message"] = self.message
        if self.note is not None:
            result_dict["note"] = self.note
        return result_dict


class CalculationError(Exception):
    """Base class for every failure raised while lexing or evaluating."""

    default_code = "CALCULATION_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class EmptyExpressionError(CalculationError):
    """Raised when the expression is empty or only whitespace."""

    default_code = "EMPTY_EXPRESSION"

    def __init__(self, message: str = "Expression cannot be empty", code: str | None = None):
        super().__init__(message, code)


class ExpressionSyntaxError(CalculationError):
    """Raised by the lexer for invalid characters, unbalanced parentheses
    and malformed numeric literals."""

    default_code = "SYNTAX_ERROR"


class StructuralError(CalculationError):
    """Raised when a token sequence does not reduce to a single value."""

    default_code = "MALFORMED_EXPRESSION"


class DomainError(CalculationError):
    """Raised for mathematically undefined operations."""

    default_code = "DOMAIN_ERROR"
