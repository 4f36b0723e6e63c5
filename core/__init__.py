"""核心模块 - 有界栈、Token系统、操作符、调度场转换器和RPN求值器"""
from .errors import (
    CalculatorError, StackError, StackOverflow, StackUnderflow, EmptyAccess,
    ConversionError, MismatchedParentheses, InvalidCharacter, MalformedNumber,
    BufferOverflow, EvaluationError, DivisionByZero, InvalidOperator,
    EmptyResult, InvalidToken
)
from .stack import BoundedStack
from .token_system import TokenType, Token, TOKEN_DEFINITIONS, OPERATOR_SYMBOLS, scan_infix, split_postfix
from .operators import Operators, is_operator, precedence
from .converter import ShuntingYardConverter, to_postfix, to_postfix_tokens
from .rpn_evaluator import RPNEvaluator, evaluate_expression

__all__ = [
    'CalculatorError', 'StackError', 'StackOverflow', 'StackUnderflow', 'EmptyAccess',
    'ConversionError', 'MismatchedParentheses', 'InvalidCharacter', 'MalformedNumber',
    'BufferOverflow', 'EvaluationError', 'DivisionByZero', 'InvalidOperator',
    'EmptyResult', 'InvalidToken',
    'BoundedStack',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_SYMBOLS', 'scan_infix', 'split_postfix',
    'Operators', 'is_operator', 'precedence',
    'ShuntingYardConverter', 'to_postfix', 'to_postfix_tokens',
    'RPNEvaluator', 'evaluate_expression',
]
