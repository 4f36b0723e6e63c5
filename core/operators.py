"""core/operators.py"""
import numpy as np
import logging

from core.errors import DivisionByZero, InvalidOperator
from core.token_system import TOKEN_DEFINITIONS, OPERATOR_SYMBOLS

logger = logging.getLogger(__name__)


def is_operator(c):
    """c 是否为五个二元操作符之一"""
    return c in OPERATOR_SYMBOLS


def precedence(c):
    """操作符优先级；非操作符返回0，作为比较时的哨兵值"""
    if not is_operator(c):
        return 0
    return TOKEN_DEFINITIONS[c].precedence


class Operators:
    """所有操作符的静态方法集合，统一用 float64 计算"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，右操作数严格等于0时报错"""
        if operand2 == 0:
            raise DivisionByZero()
        with np.errstate(all='ignore'):
            return np.float64(operand1) / np.float64(operand2)

    @staticmethod
    def pow(operand1, operand2):
        """乘方：溢出得 inf，负数的非整数次幂得 nan，与 C 的 pow 一致"""
        with np.errstate(all='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def apply(symbol, operand1, operand2):
        """
        对两个操作数执行 symbol 对应的运算
        Args:
            symbol: 操作符字符串，必须恰好是 + - * / ^ 之一
            operand1: 左操作数
            operand2: 右操作数（后入栈的那个）
        Returns:
            float 结果
        """
        op_method = _DISPATCH.get(symbol)
        if op_method is None:
            logger.error(f"Unknown binary operator: {symbol!r}")
            raise InvalidOperator(symbol)
        return float(op_method(operand1, operand2))


_DISPATCH = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.pow,
}
