"""calcbot package: arithmetic-expression lexer, evaluator, chat handler and CLI."""

__all__ = [
    "config",
    "lexer",
    "evaluator",
    "formatting",
    "chat",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "validate_expression",
    "handle_message",
    "format_result",
    "format_error",
]
