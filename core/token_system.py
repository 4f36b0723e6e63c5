"""core/token_system.py"""
import logging
import re
from enum import Enum

from core.errors import InvalidCharacter, MalformedNumber

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    OPERATOR = "operator"  # + - * / ^
    LEFT_PAREN = "left_paren"  # (
    RIGHT_PAREN = "right_paren"  # )


class Token:
    def __init__(self, token_type, text, precedence=0):
        self.type = token_type
        self.text = text
        self.precedence = precedence

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"


# 符号表：优先级 +,- = 1；*,/ = 2；^ = 3（全部左结合）
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, '+', precedence=1),
    '-': Token(TokenType.OPERATOR, '-', precedence=1),
    '*': Token(TokenType.OPERATOR, '*', precedence=2),
    '/': Token(TokenType.OPERATOR, '/', precedence=2),
    '^': Token(TokenType.OPERATOR, '^', precedence=3),
    '(': Token(TokenType.LEFT_PAREN, '('),
    ')': Token(TokenType.RIGHT_PAREN, ')'),
}

OPERATOR_SYMBOLS = frozenset(s for s, t in TOKEN_DEFINITIONS.items() if t.type == TokenType.OPERATOR)

# 只接受ASCII数字，str.isdigit 会放行 '²' 之类的字符
DIGITS = frozenset("0123456789")
NUMBER_CHARS = DIGITS | {'.'}

_STRICT_NUMBER = re.compile(r"[0-9]+(\.[0-9]*)?")
# 与 C 的 atof 相同：只取最长的合法数字前缀
_NUMBER_PREFIX = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")


def scan_infix(infix, strict=False, skip_whitespace=True):
    """
    从左到右扫描中缀表达式，逐个产出Token
    Args:
        infix: 中缀表达式字符串
        strict: 严格模式下未知字符和畸形数字直接报错
        skip_whitespace: 空白是否作为分隔符跳过
    Yields:
        Token
    """
    i = 0
    n = len(infix)
    while i < n:
        ch = infix[i]

        if ch in NUMBER_CHARS:
            # 连续的数字/小数点作为一个字面量，不校验小数点个数
            start = i
            while i < n and infix[i] in NUMBER_CHARS:
                i += 1
            literal = infix[start:i]
            if strict and not _STRICT_NUMBER.fullmatch(literal):
                raise MalformedNumber(literal)
            yield Token(TokenType.NUMBER, literal)
            continue

        if ch in TOKEN_DEFINITIONS:
            yield TOKEN_DEFINITIONS[ch]
        elif ch.isspace() and skip_whitespace:
            pass
        elif strict:
            raise InvalidCharacter(ch, i)
        else:
            logger.debug(f"Skipping unrecognized character {ch!r} at position {i}")
        i += 1


def split_postfix(postfix):
    """按单个空格切分后缀表达式，连续空格与末尾空格产生的空串被丢弃"""
    return [token for token in postfix.split(" ") if token]


def is_numeric_token(token):
    """首字符是数字，或者是 '-' 后跟数字"""
    if not token:
        return False
    if token[0] in DIGITS:
        return True
    return token[0] == '-' and len(token) > 1 and token[1] in DIGITS


def parse_number(token):
    """按 atof 语义解析：'1.2.3' -> 1.2，'-3' -> -3.0，无合法前缀时返回 0.0"""
    match = _NUMBER_PREFIX.match(token)
    if match is None:
        return 0.0
    return float(match.group(0))
