"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from config.config import EVALUATOR_CONFIG
from core.converter import ShuntingYardConverter
from core.errors import EmptyResult, InvalidToken
from core.operators import Operators, is_operator
from core.stack import BoundedStack
from core.token_system import split_postfix, is_numeric_token, parse_number

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(postfix, stack_capacity=None, strict=None):
        """
        评估以空格分隔的后缀表达式
        Args:
            postfix: 后缀表达式字符串（允许末尾空格）
            stack_capacity: 操作数栈容量，默认取配置
            strict: 是否对无法识别的token报错，默认取配置
        Returns:
            float 结果
        """
        if strict is None:
            strict = EVALUATOR_CONFIG["strict"]
        operand_stack = BoundedStack(stack_capacity, name="operand stack")

        for token in split_postfix(postfix):
            if is_numeric_token(token):
                operand_stack.push(parse_number(token))

            elif is_operator(token[0]):
                operand2 = operand_stack.pop()
                operand1 = operand_stack.pop()
                operand_stack.push(Operators.apply(token, operand1, operand2))

            elif strict:
                raise InvalidToken(token)
            else:
                logger.debug(f"Skipping unrecognized token {token!r}")

        # 只检查是否为空，多余的元素不校验
        if operand_stack.is_empty():
            logger.error("Empty stack after evaluation")
            raise EmptyResult()
        if len(operand_stack) > 1:
            logger.debug(f"Stack has {len(operand_stack)} elements after evaluation, returning top")
        return operand_stack.pop()


def evaluate_expression(infix, stack_capacity=None, buffer_size=None, strict=None):
    """
    中缀表达式一步求值
    Returns:
        (postfix, result)
    """
    converter = ShuntingYardConverter(stack_capacity=stack_capacity, buffer_size=buffer_size, strict=strict)
    postfix = converter.convert(infix)
    return postfix, RPNEvaluator.evaluate(postfix, stack_capacity=stack_capacity, strict=strict)
