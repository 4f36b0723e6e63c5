"""配置文件"""

# 栈参数
STACK_CONFIG = {
    "capacity": 100,  # 操作符栈/操作数栈的最大容量
}

# 缓冲区参数（中缀输入与后缀输出各一个）
BUFFER_CONFIG = {
    "buffer_size": 100,  # 含结束符，实际可写 buffer_size - 1 个字符
}

# 中缀 -> 后缀 转换参数
CONVERTER_CONFIG = {
    "strict": False,  # 严格模式：未知字符/畸形数字直接报错
    "skip_whitespace": True,  # 中缀中的空白视为分隔符并跳过
}

# 后缀求值参数
EVALUATOR_CONFIG = {
    "strict": False,  # 严格模式：无法识别的后缀token报错而不是跳过
}

# 输出格式
OUTPUT_CONFIG = {
    "prompt": "Enter an infix expression: ",
    "postfix_label": "Postfix (RPN) expression: ",
    "result_label": "Result: ",
    "result_format": "{:f}",  # 与 %lf 一致：定点，6位小数
}

# 批量求值
BATCH_CONFIG = {
    "expression_column": "expression",
    "comment_prefix": "#",
    "columns": ["expression", "postfix", "result", "error"],
}

# 日志
LOG_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert STACK_CONFIG["capacity"] > 0, "栈容量必须为正数"
    assert BUFFER_CONFIG["buffer_size"] > 1, "缓冲区至少要容纳一个字符和结束符"
    assert OUTPUT_CONFIG["result_format"].format(1.0) == "1.000000", "结果需为定点格式"
    assert BATCH_CONFIG["expression_column"] in BATCH_CONFIG["columns"]
    print("Configuration validated successfully!")
