"""Logging setup for the calcbot logger hierarchy.

Every module logs through ``get_logger(<module>)``, which hangs off the
``calcbot`` logger configured here. Evaluation context is passed with
``extra=`` rather than baked into the message, so a failure line reads::

    2024-05-01T12:00:00.000000 [DEBUG] calcbot.api: Evaluation failed: Division by zero code='DIVISION_BY_ZERO' expression='1/0'
"""

import logging
import sys
from datetime import datetime
from typing import Optional, Union

from .config import LOG_LEVEL

ROOT_LOGGER = "calcbot"

# Record attributes appended as key=value pairs, in this order
CONTEXT_FIELDS = ("code", "expression", "tokens", "prefix")


class StructuredFormatter(logging.Formatter):
    """Render ``<iso timestamp> [LEVEL] logger: message`` plus evaluation context."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        message = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        context = " ".join(
            f"{field}={getattr(record, field)!r}"
            for field in CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        )
        if context:
            message = f"{message} {context}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def resolve_level(level: Union[str, int, None]) -> int:
    """Map a level name or number to a logging level; unknown names mean WARNING."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(
    level: Union[str, int, None] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Configure the ``calcbot`` logger.

    Calling it again replaces the previous handlers, so the CLI and tests can
    reconfigure freely.

    Args:
        level: Level name or number (default: CALCBOT_LOG_LEVEL, else WARNING)
        log_file: Optional file that receives the same lines as stderr

    Returns:
        The configured ``calcbot`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # stdout carries results (and JSON), so diagnostics go to stderr
    handlers: list = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``calcbot.<name>`` child logger for a module."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
