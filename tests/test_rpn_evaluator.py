"""
Unit tests for RPNEvaluator and the convert-then-evaluate pipeline.
"""

import math
import unittest

from core.converter import to_postfix
from core.errors import (
    DivisionByZero, EmptyResult, InvalidOperator, InvalidToken, StackOverflow, StackUnderflow
)
from core.rpn_evaluator import RPNEvaluator, evaluate_expression


class TestRPNEvaluator(unittest.TestCase):

    def test_simple_expressions(self):
        self.assertEqual(RPNEvaluator.evaluate("3 4 2 * + "), 11.0)
        self.assertEqual(RPNEvaluator.evaluate("8 3 - 2 -"), 3.0)
        self.assertEqual(RPNEvaluator.evaluate("1 2 + 3 *"), 9.0)

    def test_result_is_float(self):
        self.assertIs(type(RPNEvaluator.evaluate("2 3 +")), float)

    def test_operand_order(self):
        # operand2 是后入栈的右操作数
        self.assertEqual(RPNEvaluator.evaluate("10 4 -"), 6.0)
        self.assertEqual(RPNEvaluator.evaluate("10 4 /"), 2.5)
        self.assertEqual(RPNEvaluator.evaluate("2 5 ^"), 32.0)

    def test_negative_literal(self):
        self.assertEqual(RPNEvaluator.evaluate("-3 2 +"), -1.0)
        self.assertEqual(RPNEvaluator.evaluate("-3 -2 *"), 6.0)

    def test_malformed_literal_uses_numeric_prefix(self):
        self.assertAlmostEqual(RPNEvaluator.evaluate("1.2.3 1 +"), 2.2)

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            RPNEvaluator.evaluate("5 0 /")
        with self.assertRaises(DivisionByZero):
            RPNEvaluator.evaluate("5 -0 /")

    def test_invalid_operator(self):
        with self.assertRaises(InvalidOperator):
            RPNEvaluator.evaluate("2 3 **")
        with self.assertRaises(InvalidOperator):
            RPNEvaluator.evaluate("2 3 +x")

    def test_empty_input(self):
        with self.assertRaises(EmptyResult) as ctx:
            RPNEvaluator.evaluate("")
        self.assertEqual(str(ctx.exception), "Empty operand stack")
        with self.assertRaises(EmptyResult):
            RPNEvaluator.evaluate("   ")

    def test_missing_operand_underflows(self):
        with self.assertRaises(StackUnderflow):
            RPNEvaluator.evaluate("1 +")
        with self.assertRaises(StackUnderflow):
            RPNEvaluator.evaluate("+")

    def test_leftover_values_not_validated(self):
        self.assertEqual(RPNEvaluator.evaluate("1 2"), 2.0)

    def test_unrecognized_tokens(self):
        self.assertEqual(RPNEvaluator.evaluate("abc 7"), 7.0)
        self.assertEqual(RPNEvaluator.evaluate(".5 7"), 7.0)
        with self.assertRaises(InvalidToken):
            RPNEvaluator.evaluate("abc 7", strict=True)

    def test_operand_stack_capacity(self):
        self.assertEqual(RPNEvaluator.evaluate("1 2 + 3 +", stack_capacity=2), 6.0)
        with self.assertRaises(StackOverflow):
            RPNEvaluator.evaluate("1 2 3 + +", stack_capacity=2)

    def test_power_overflow_is_inf(self):
        self.assertTrue(math.isinf(RPNEvaluator.evaluate("10 400 ^")))


class TestPipeline(unittest.TestCase):

    EXPRESSIONS = {
        "3+4*2": 11.0,
        "8-3-2": 3.0,
        "(1+2)*3": 9.0,
        "2^3^2": 64.0,
        "2*3^2": 18.0,
        "100/10/5": 2.0,
        "(1.5+2.5)*(10-4)/3": 8.0,
        "2^(1+2)": 8.0,
        "7": 7.0,
    }

    def test_documented_values(self):
        for infix, expected in self.EXPRESSIONS.items():
            postfix, result = evaluate_expression(infix)
            self.assertEqual(result, expected, msg=f"{infix} -> {postfix}")

    def test_matches_standard_arithmetic_without_power(self):
        for infix in ("1+2*3-4/5", "(1+2)*(3+4)", "10-(2-3)*4", "6/(1+2)-7*2"):
            _, result = evaluate_expression(infix)
            self.assertAlmostEqual(result, eval(infix))

    def test_power_is_not_right_associative(self):
        _, result = evaluate_expression("2^3^2")
        self.assertNotEqual(result, 512.0)
        self.assertEqual(result, 64.0)

    def test_division_by_zero_surfaces_at_evaluation(self):
        postfix = to_postfix("5/0")
        self.assertEqual(postfix, "5 0 / ")
        with self.assertRaises(DivisionByZero):
            RPNEvaluator.evaluate(postfix)

    def test_repeated_runs_are_stable(self):
        first = [evaluate_expression(infix) for infix in self.EXPRESSIONS]
        for _ in range(3):
            again = [evaluate_expression(infix) for infix in self.EXPRESSIONS]
            self.assertEqual(again, first)

    def test_failure_does_not_leak_into_next_call(self):
        with self.assertRaises(DivisionByZero):
            evaluate_expression("1/0")
        self.assertEqual(evaluate_expression("1+1"), ("1 1 + ", 2.0))


if __name__ == '__main__':
    unittest.main()
