"""Display formatting for evaluation results and errors."""

from __future__ import annotations

import math

from .config import ERROR_LABEL, INFINITY_TEXT, MAX_EXACT_INTEGER, NAN_TEXT, OUTPUT_DECIMALS


def format_result(value: float, decimals: int | None = None) -> str:
    """Format a numeric result for display.

    Args:
        value: Evaluation result
        decimals: Decimal places for non-integral values (default: OUTPUT_DECIMALS)

    Returns:
        Formatted string (e.g., 4.0 -> "4", math.pi -> "3.141593")
    """
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return INFINITY_TEXT if value > 0 else f"-{INFINITY_TEXT}"
    if abs(value) >= MAX_EXACT_INTEGER:
        return repr(value)
    if value.is_integer():
        return str(int(value))
    places = OUTPUT_DECIMALS if decimals is None else int(decimals)
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Values that round away entirely, e.g. -1e-9 -> "-0"
    if text == "-0":
        return "0"
    return text


def format_error(message: str | None) -> str:
    """Prefix an error message with the generic label shown to users."""
    if not message:
        return ERROR_LABEL
    return f"{ERROR_LABEL}: {message}"
