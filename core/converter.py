"""中缀 -> 后缀（RPN）转换器 - 调度场算法"""
import logging

from config.config import BUFFER_CONFIG, CONVERTER_CONFIG
from core.errors import BufferOverflow, MismatchedParentheses
from core.operators import is_operator, precedence
from core.stack import BoundedStack
from core.token_system import TokenType, scan_infix

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """把中缀表达式转换为以空格分隔的后缀表达式"""

    def __init__(self, stack_capacity=None, buffer_size=None, strict=None, skip_whitespace=None):
        self.stack_capacity = stack_capacity
        self.buffer_size = buffer_size if buffer_size is not None else BUFFER_CONFIG["buffer_size"]
        self.strict = strict if strict is not None else CONVERTER_CONFIG["strict"]
        self.skip_whitespace = (skip_whitespace if skip_whitespace is not None
                                else CONVERTER_CONFIG["skip_whitespace"])

    def convert(self, infix):
        """
        转换中缀表达式
        Args:
            infix: 中缀表达式
        Returns:
            后缀表达式字符串，每个token后跟一个空格（非空时以空格结尾）
        """
        return "".join(token + " " for token in self.convert_tokens(infix))

    def convert_tokens(self, infix):
        """转换中缀表达式，返回后缀token列表"""
        # 预留一个位置给结束符
        limit = self.buffer_size - 1
        if len(infix) > limit:
            raise BufferOverflow("Infix expression", limit)

        operator_stack = BoundedStack(self.stack_capacity, name="operator stack")
        output = []
        written = 0

        def emit(text):
            nonlocal written
            written += len(text) + 1
            if written > limit:
                raise BufferOverflow("Postfix expression", limit)
            output.append(text)

        for token in scan_infix(infix, strict=self.strict, skip_whitespace=self.skip_whitespace):
            if token.type == TokenType.NUMBER:
                emit(token.text)

            elif token.type == TokenType.OPERATOR:
                # 栈顶优先级 >= 当前优先级就弹出，所以 ^ 也是左结合
                while (not operator_stack.is_empty() and is_operator(operator_stack.peek())
                       and precedence(operator_stack.peek()) >= token.precedence):
                    emit(operator_stack.pop())
                operator_stack.push(token.text)

            elif token.type == TokenType.LEFT_PAREN:
                operator_stack.push(token.text)

            elif token.type == TokenType.RIGHT_PAREN:
                while not operator_stack.is_empty() and operator_stack.peek() != '(':
                    emit(operator_stack.pop())
                if operator_stack.is_empty():
                    logger.debug(f"Unmatched ')' in {infix!r}")
                    raise MismatchedParentheses()
                operator_stack.pop()

        while not operator_stack.is_empty():
            if operator_stack.peek() == '(':
                logger.debug(f"Unclosed '(' in {infix!r}")
                raise MismatchedParentheses()
            emit(operator_stack.pop())

        logger.debug(f"Converted {infix!r} -> {' '.join(output)!r}")
        return output


def to_postfix(infix, **kwargs):
    """使用默认配置把中缀表达式转换为后缀字符串"""
    return ShuntingYardConverter(**kwargs).convert(infix)


def to_postfix_tokens(infix, **kwargs):
    """使用默认配置把中缀表达式转换为后缀token列表"""
    return ShuntingYardConverter(**kwargs).convert_tokens(infix)
