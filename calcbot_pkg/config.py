"""Centralized configuration for calcbot.

This module defines:
- Input validation limits
- Display settings for results and errors
- The chat trigger prefix and usage text
- The default logging level

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with CALCBOT_)
"""

import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("calcbot")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("CALCBOT_MAX_INPUT_LENGTH", "10000"))  # characters

# Display configuration
OUTPUT_DECIMALS = int(
    os.getenv("CALCBOT_OUTPUT_DECIMALS", "6")
)  # decimal places for non-integral results
# Integral results at or above this magnitude are shown in exponent form
MAX_EXACT_INTEGER = 2**63
INFINITY_TEXT = "Infinity"
NAN_TEXT = "Not a number"
ERROR_LABEL = "Invalid expression"

# Logging
LOG_LEVEL = os.getenv("CALCBOT_LOG_LEVEL", "WARNING")

# Chat configuration
TRIGGER_PREFIX = os.getenv("CALCBOT_TRIGGER_PREFIX", "@calc")
USAGE_TEMPLATE = "Usage: {prefix} [expression]\nExample: {prefix} 2 + 2"

# Lexer alphabet
DECIMAL_SEPARATOR = "."
DIGITS = frozenset("0123456789")
