"""
Unit tests for the Snap & Solve arithmetic engine.

Run (with venv activated):
  python -m unittest tests.snap_solve.test_arithmetic -v
  pytest tests/snap_solve/ -v
"""
import unittest

from app.projects.snap_solve.core.arithmetic import (
    BinaryOp,
    ExpressionSyntaxError,
    Number,
    UnaryOp,
    evaluate_expression,
    format_number,
    parse,
    tokenize,
)


class TestTokenize(unittest.TestCase):

    def test_tokens_and_positions(self):
        tokens = tokenize("12 + (3.5*.5)")
        self.assertEqual(
            [(t.kind, t.text, t.position) for t in tokens],
            [
                ("number", "12", 0),
                ("op", "+", 3),
                ("lparen", "(", 5),
                ("number", "3.5", 6),
                ("op", "*", 9),
                ("number", ".5", 10),
                ("rparen", ")", 12),
                ("end", "", 13),
            ],
        )

    def test_unknown_character_raises(self):
        with self.assertRaises(ExpressionSyntaxError) as ctx:
            tokenize("2+x")
        self.assertEqual(ctx.exception.position, 2)

    def test_lone_decimal_point_raises(self):
        with self.assertRaises(ExpressionSyntaxError):
            tokenize("2+.")


class TestParseTree(unittest.TestCase):

    def test_multiplication_binds_tighter(self):
        tree = parse("2+3*4")
        self.assertEqual(
            tree,
            BinaryOp("+", Number(2.0), BinaryOp("*", Number(3.0), Number(4.0))),
        )

    def test_left_associative_subtraction(self):
        tree = parse("10-4-3")
        self.assertEqual(
            tree,
            BinaryOp("-", BinaryOp("-", Number(10.0), Number(4.0)), Number(3.0)),
        )

    def test_leading_unary_minus(self):
        self.assertEqual(parse("-3"), UnaryOp("-", Number(3.0)))


class TestEvaluateExpression(unittest.TestCase):

    def test_precedence(self):
        self.assertEqual(evaluate_expression("2+3*4"), 14)
        self.assertEqual(evaluate_expression("(2+3)*4"), 20)

    def test_left_associativity(self):
        self.assertEqual(evaluate_expression("10-4-3"), 3)
        self.assertEqual(evaluate_expression("100/10/5"), 2)

    def test_unary_signs(self):
        self.assertEqual(evaluate_expression("-3+4"), 1)
        self.assertEqual(evaluate_expression("2*(-3)"), -6)
        self.assertEqual(evaluate_expression("+(5)"), 5)

    def test_decimal_forms(self):
        self.assertEqual(evaluate_expression(".5+5."), 5.5)

    def test_nested_parentheses(self):
        self.assertEqual(evaluate_expression("((1+2)*(3+4))/7"), 3)

    def test_whitespace_ignored(self):
        self.assertEqual(evaluate_expression(" 34 + 54\n+ 67 +87 "), 242)

    def test_division_by_zero_raises(self):
        with self.assertRaises(ZeroDivisionError):
            evaluate_expression("5/0")

    def test_malformed_expressions_raise(self):
        for text in ["", "   ", "(2+3", "2+3)", "2 3", "2(3)", "1.2.3", "3+", "*3", "()"]:
            with self.subTest(text=text):
                with self.assertRaises(ExpressionSyntaxError):
                    evaluate_expression(text)


class TestFormatNumber(unittest.TestCase):

    def test_integers_have_no_fraction(self):
        self.assertEqual(format_number(14.0), "14")
        self.assertEqual(format_number(-3.0), "-3")
        self.assertEqual(format_number(242.0), "242")

    def test_zero_and_negative_zero(self):
        self.assertEqual(format_number(0.0), "0")
        self.assertEqual(format_number(-0.0), "0")

    def test_fractions_keep_shortest_digits(self):
        self.assertEqual(format_number(2.5), "2.5")
        self.assertEqual(format_number(0.1 + 0.2), "0.30000000000000004")
        self.assertEqual(format_number(1 / 3), "0.3333333333333333")
        self.assertEqual(format_number(0.00001), "0.00001")

    def test_large_integers(self):
        self.assertEqual(format_number(1e20), "100000000000000000000")
        self.assertEqual(format_number(123456789012345680000.0), "123456789012345680000")
        self.assertEqual(format_number(1e21), "1e+21")

    def test_tiny_values_use_exponent(self):
        self.assertEqual(format_number(1e-7), "1e-7")
        self.assertEqual(format_number(-1.5e-7), "-1.5e-7")

    def test_non_finite_raises(self):
        with self.assertRaises(ValueError):
            format_number(float("inf"))
