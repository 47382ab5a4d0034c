"""Fuzzing tests for lexer and evaluator with random inputs."""

import random
import string
import unittest

from calcbot_pkg.api import evaluate
from calcbot_pkg.lexer import tokenize
from calcbot_pkg.types import CalculationError, EvalResult

ALPHABET = "0123456789.+-*/^() " + "pielnsqrtcoag"


class TestLexerFuzzing(unittest.TestCase):
    """Fuzz test lexer with random inputs."""

    def test_random_strings(self):
        """Lexer either tokenizes or raises a CalculationError."""
        rng = random.Random(1234)
        for _ in range(300):
            length = rng.randint(1, 60)
            random_str = "".join(rng.choices(string.printable, k=length))
            try:
                tokenize(random_str)
            except CalculationError:
                pass  # Expected


class TestEvaluateFuzzing(unittest.TestCase):
    """Fuzz test the public entry point."""

    def test_random_expressions_never_raise(self):
        rng = random.Random(98765)
        for _ in range(1000):
            length = rng.randint(0, 40)
            expr = "".join(rng.choices(ALPHABET, k=length))
            try:
                result = evaluate(expr)
            except Exception as e:
                self.fail(f"evaluate raised {type(e).__name__} for {expr!r}: {e}")
            self.assertIsInstance(result, EvalResult)
            if result.ok:
                self.assertIsInstance(result.value, float)
            else:
                self.assertTrue(result.error)

    def test_malformed_expressions(self):
        malformed = ["(((", ")))", "1++2", "2^", "*/2", "", "   ", "..", "sqrt()", "pi pi"]
        for expr in malformed:
            with self.subTest(expr=expr):
                self.assertFalse(evaluate(expr).ok)


if __name__ == "__main__":
    unittest.main()
