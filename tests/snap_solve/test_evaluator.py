"""
Unit tests for the Snap & Solve local evaluator.
"""
import unittest

from app.projects.snap_solve.core.evaluator import Evaluator
from app.projects.snap_solve.core.result import ErrorKind


class TestEvaluateResult(unittest.TestCase):

    def setUp(self):
        self.evaluator = Evaluator()

    def test_precedence(self):
        self.assertEqual(self.evaluator.evaluate_result("2+3*4").to_tagged(), "14")
        self.assertEqual(self.evaluator.evaluate_result("(2+3)*4").to_tagged(), "20")

    def test_sum_of_column(self):
        result = self.evaluator.evaluate_result("34+54+67+87")
        self.assertTrue(result.ok)
        self.assertEqual(result.value, "242")

    def test_fractional_result(self):
        self.assertEqual(self.evaluator.evaluate_result("7/2").to_tagged(), "3.5")

    def test_invalid_characters(self):
        for text in ["2+x", "3=3", "2^3", "5%2"]:
            with self.subTest(text=text):
                result = self.evaluator.evaluate_result(text)
                self.assertFalse(result.ok)
                self.assertEqual(result.kind, ErrorKind.INVALID_CHARACTERS)
                self.assertEqual(result.to_tagged(), "ERROR: Expression contains invalid characters.")

    def test_operator_sequences_rejected(self):
        for text in ["3++4", "5*/2", "3 + + 4", "3+-4", "5*-2"]:
            with self.subTest(text=text):
                self.assertEqual(
                    self.evaluator.evaluate_result(text).to_tagged(),
                    "ERROR: Invalid operator sequence.",
                )

    def test_unary_minus_at_start_and_after_paren(self):
        self.assertEqual(self.evaluator.evaluate_result("-3+4").to_tagged(), "1")
        self.assertEqual(self.evaluator.evaluate_result("5*(-2)").to_tagged(), "-10")

    def test_division_by_zero(self):
        for text in ["5/0", "0/0", "1/(2-2)"]:
            with self.subTest(text=text):
                self.assertEqual(
                    self.evaluator.evaluate_result(text).to_tagged(),
                    "ERROR: Calculation resulted in an invalid number.",
                )

    def test_overflow_is_invalid_number(self):
        result = self.evaluator.evaluate_result("9" * 400 + "*10")
        self.assertEqual(result.kind, ErrorKind.INVALID_NUMBER)

    def test_malformed_expressions(self):
        for text in ["", "  ", "(2+3", "2 3", "2(3)", "1.2.3", "3+", "()"]:
            with self.subTest(text=text):
                self.assertEqual(
                    self.evaluator.evaluate_result(text).to_tagged(),
                    "ERROR: Invalid or unrecognized mathematical expression.",
                )

    def test_deep_nesting_does_not_raise(self):
        result = self.evaluator.evaluate_result("(" * 5000 + "1" + ")" * 5000)
        self.assertFalse(result.ok)
        self.assertEqual(result.kind, ErrorKind.MALFORMED_EXPRESSION)

    def test_non_string_input(self):
        self.assertEqual(self.evaluator.evaluate_result(None).kind, ErrorKind.INVALID_CHARACTERS)

    def test_always_number_or_tagged_error(self):
        samples = ["1", "1+", "((2))", "2*3/4-1", ".", "1/3", "0.1+0.2", "6/-", " ( ) ", "4/2/0"]
        for text in samples:
            with self.subTest(text=text):
                output = self.evaluator.evaluate_result(text).to_tagged()
                self.assertTrue(output)
                if not output.startswith("ERROR:"):
                    float(output)


class TestEvaluateAsync(unittest.IsolatedAsyncioTestCase):

    async def test_returns_strings(self):
        evaluator = Evaluator()
        self.assertEqual(await evaluator.evaluate("2+3*4"), "14")
        self.assertEqual(await evaluator.evaluate("3++4"), "ERROR: Invalid operator sequence.")
        self.assertTrue((await evaluator.evaluate("5/0")).startswith("ERROR:"))
