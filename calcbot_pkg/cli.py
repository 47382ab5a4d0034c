from __future__ import annotations

import argparse
import json
import math
import sys
from typing import Any

from .api import evaluate
from .chat import handle_message
from .config import VERSION
from .formatting import format_error, format_result
from .logging_config import get_logger
from .types import EvalResult

logger = get_logger("cli")

REPL_COMMANDS = {"help", "quit", "exit"}


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running calcbot health check...")
    print("-" * 50)

    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        checks_failed += 1

    try:
        result = evaluate("2 + 3 * 4")
        if result.ok and result.value == 14:
            print("[OK] Basic evaluation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Basic evaluation failed: expected 14, got {result}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Evaluation check failed: {e}")
        checks_failed += 1

    try:
        result = evaluate("1/0")
        if not result.ok and result.code == "DIVISION_BY_ZERO":
            print("[OK] Error reporting works")
            checks_passed += 1
        else:
            print(f"[FAIL] Error reporting check failed: {result}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Error reporting check failed: {e}")
        checks_failed += 1

    try:
        reply = handle_message("@calc sqrt(16) + 2")
        if reply.success and reply.message == "6":
            print("[OK] Chat handling works")
            checks_passed += 1
        else:
            print(f"[FAIL] Chat handling check failed: {reply}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Chat handling check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def result_to_dict(result: EvalResult, decimals: int | None = None) -> dict[str, Any]:
    """Convert an EvalResult to a JSON-ready dict with the display string added.

    Infinity and NaN have no JSON literal, so their ``value`` is null and only
    the ``result`` display string ("Infinity", "Not a number") carries them.
    """
    data = result.to_dict()
    if result.ok:
        data["result"] = format_result(result.value, decimals)
        if not math.isfinite(result.value):
            data["value"] = None
    return data


def dump_json(data: dict[str, Any]) -> str:
    """Serialize to strict JSON (no bare NaN or Infinity tokens)."""
    return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)


def print_result_pretty(
    result: EvalResult, output_format: str = "human", decimals: int | None = None
) -> None:
    """Print result in specified format.

    Args:
        result: Evaluation result
        output_format: "json" for JSON output, "human" for human-readable
        decimals: Decimal places for non-integral values
    """
    if output_format == "json":
        print(dump_json(result_to_dict(result, decimals)))
        return
    if not result.ok:
        print("Error:", format_error(result.error))
        return
    print(format_result(result.value, decimals))


def print_help_text() -> None:
    """Print help text for REPL commands."""
    print(
        f"""calcbot version {VERSION}

Operators:  +  -  *  /  ^        (^ groups left to right: 2^3^2 = 64)
Functions:  sin cos tan sqrt log ln   (argument must be in parentheses)
Constants:  pi  e

Examples:
  2 + 3 * 4
  (2 + 3) * 4
  sqrt(16) + 2
  log(100) / ln(e)

Commands: help, quit, exit"""
    )


def repl_loop(output_format: str = "human", decimals: int | None = None) -> None:
    """Interactive REPL loop with graceful interrupt handling."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print("calcbot - type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue
        command = raw.lower()
        if command in REPL_COMMANDS:
            if command == "help":
                print_help_text()
                continue
            print("Goodbye.")
            break
        print_result_pretty(evaluate(raw), output_format, decimals)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for calcbot CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="calcbot")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--message",
        type=str,
        help="Handle one chat message (e.g. '@calc 2+2') and print the reply",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Emit JSON for machine parsing (deprecated, use --format json)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set decimal places for non-integral results"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: CALCBOT_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    output_format = args.format
    if args.json:  # Backward compatibility for deprecated -j flag
        output_format = "json"

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)
    logger.debug(f"CLI arguments: {vars(args)}")

    decimals = args.precision if args.precision is not None and args.precision >= 0 else None

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.message is not None:
        reply = handle_message(args.message, decimals=decimals)
        if output_format == "json":
            print(dump_json(reply.to_dict()))
        elif reply.message is not None:
            print(reply.message)
        return 0 if reply.success else 1
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        # Remove ">>>" prompt if present
        if expr.startswith(">>>"):
            expr = expr[3:].strip()
        result = evaluate(expr)
        print_result_pretty(result, output_format, decimals)
        return 0 if result.ok else 1

    repl_loop(output_format=output_format, decimals=decimals)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m calcbot_pkg.cli"""
    sys.exit(main_entry())
