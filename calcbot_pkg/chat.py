"""Chat message handling: trigger-prefix detection and reply text."""

from __future__ import annotations

from .api import evaluate
from .config import TRIGGER_PREFIX, USAGE_TEMPLATE
from .formatting import format_error, format_result
from .logging_config import get_logger
from .types import ChatReply

logger = get_logger("chat")


def extract_expression(message: str, prefix: str = TRIGGER_PREFIX) -> str | None:
    """Return the text after the trigger prefix, or None if the message is not addressed to us."""
    text = message.strip()
    if not text.startswith(prefix):
        return None
    return text[len(prefix):].strip()


def handle_message(
    message: str | None, prefix: str = TRIGGER_PREFIX, decimals: int | None = None
) -> ChatReply:
    """Build the reply for one chat message.

    Args:
        message: Raw message text (may be None when the payload had none)
        prefix: Trigger prefix that marks a message as a calculation
        decimals: Decimal places for non-integral results

    Returns:
        ChatReply; messages without the prefix are acknowledged with no reply
    """
    if message is None:
        return ChatReply(success=False, note="No message provided")

    expression = extract_expression(message, prefix)
    if expression is None:
        return ChatReply(success=True)
    if not expression:
        return ChatReply(
            success=False,
            note="Please provide an expression to calculate",
            message=USAGE_TEMPLATE.format(prefix=prefix),
        )

    result = evaluate(expression)
    if not result.ok:
        logger.info(
            f"Rejected expression: {result.error}",
            extra={"expression": expression, "code": result.code, "prefix": prefix},
        )
        return ChatReply(
            success=False,
            note=result.error,
            message=f"Error: {format_error(result.error)}",
        )
    return ChatReply(success=True, message=format_result(result.value, decimals))
