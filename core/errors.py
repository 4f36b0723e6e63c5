"""core/errors.py - 计算器的异常层次"""


class CalculatorError(Exception):
    """所有计算器错误的基类；message 为可直接展示给用户的文本"""
    message = "Calculator error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# 栈错误========================================
class StackError(CalculatorError):
    message = "Stack error"


class StackOverflow(StackError):
    message = "Stack overflow"


class StackUnderflow(StackError):
    message = "Stack underflow"


class EmptyAccess(StackError):
    message = "Stack is empty"


# 转换错误========================================
class ConversionError(CalculatorError):
    message = "Conversion error"


class MismatchedParentheses(ConversionError):
    message = "Mismatched parentheses"


class InvalidCharacter(ConversionError):
    """严格模式下遇到无法识别的字符"""
    message = "Invalid character"

    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


class MalformedNumber(ConversionError):
    """严格模式下数字字面量格式错误（如 1.2.3）"""
    message = "Malformed number"

    def __init__(self, literal):
        self.literal = literal
        super().__init__(f"Malformed number {literal!r}")


class BufferOverflow(ConversionError):
    message = "Buffer overflow"

    def __init__(self, what, limit):
        self.what = what
        self.limit = limit
        super().__init__(f"{what} exceeds buffer of {limit} characters")


# 求值错误========================================
class EvaluationError(CalculatorError):
    message = "Evaluation error"


class DivisionByZero(EvaluationError):
    message = "Division by zero"


class InvalidOperator(EvaluationError):
    message = "Invalid operator"

    def __init__(self, symbol=None):
        self.symbol = symbol
        if symbol is None:
            super().__init__()
        else:
            super().__init__(f"Invalid operator {symbol!r}")


class EmptyResult(EvaluationError):
    message = "Empty operand stack"


class InvalidToken(EvaluationError):
    """严格模式下后缀表达式中出现既非数字也非操作符的token"""
    message = "Invalid token"

    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid token {token!r}")
