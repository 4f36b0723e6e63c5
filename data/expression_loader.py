"""表达式文件加载与批量求值模块"""
import logging

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from core.converter import ShuntingYardConverter
from core.errors import CalculatorError
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column=None):
    """
    加载表达式文件。

    Parameters:
    - file_path: .csv 文件（取 expression 列）或纯文本文件（每行一个表达式）
    - expression_column: CSV 中表达式所在列名, 默认取配置

    Returns:
    - pd.Series，表达式字符串
    """
    if expression_column is None:
        expression_column = BATCH_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if expression_column not in frame.columns:
            raise ValueError(f"Expression column '{expression_column}' not found in {file_path}.")
        expressions = frame[expression_column].str.strip()
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            expressions = pd.Series(f.read().splitlines(), dtype=object).str.strip()

    # 去掉空行和注释行
    comment_prefix = BATCH_CONFIG["comment_prefix"]
    keep = (expressions != "") & ~expressions.str.startswith(comment_prefix)
    expressions = expressions[keep].reset_index(drop=True)
    expressions.name = expression_column

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_batch(expressions, stack_capacity=None, buffer_size=None, strict=None):
    """
    逐个转换并求值；单个表达式失败只记录在该行，不中断整批

    Returns:
    - pd.DataFrame，列为 expression / postfix / result / error
    """
    converter = ShuntingYardConverter(stack_capacity=stack_capacity, buffer_size=buffer_size, strict=strict)
    rows = []
    for expression in expressions:
        postfix = None
        result = np.nan
        error = None
        try:
            postfix = converter.convert(expression)
            result = RPNEvaluator.evaluate(postfix, stack_capacity=stack_capacity, strict=strict)
        except CalculatorError as e:
            error = e.message
            logger.warning(f"Failed to evaluate {expression!r}: {error}")
        rows.append({
            "expression": expression,
            "postfix": postfix,
            "result": result,
            "error": error,
        })

    df = pd.DataFrame(rows, columns=BATCH_CONFIG["columns"])
    df["result"] = df["result"].astype(float)
    return df


def save_results(df, output_path):
    logger.info(f"Saving {len(df)} results to {output_path}")
    df.to_csv(output_path, index=False)
