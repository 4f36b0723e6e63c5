"""主程序入口 - 中缀表达式转RPN并求值（交互模式 / 单次模式 / 批量模式）"""
import argparse
import logging
import sys

import pandas as pd

from config.config import LOG_CONFIG, OUTPUT_CONFIG
from core.converter import ShuntingYardConverter
from core.errors import CalculatorError
from core.rpn_evaluator import RPNEvaluator
from data.expression_loader import load_expressions, evaluate_batch, save_results
from utils.formatting import format_result, summarize_batch

logger = logging.getLogger(__name__)


def read_expression(stream=None):
    """提示并读取一个以空白分隔的token，与 scanf("%s") 一样，空格后的内容被丢弃"""
    if stream is None:
        stream = sys.stdin
    print(OUTPUT_CONFIG["prompt"], end="", flush=True)
    line = stream.readline()
    parts = line.split()
    return parts[0] if parts else ""


def run_single(infix, args):
    converter = ShuntingYardConverter(stack_capacity=args.stack_capacity,
                                      buffer_size=args.buffer_size, strict=args.strict)
    postfix = converter.convert(infix)
    print(f"{OUTPUT_CONFIG['postfix_label']}{postfix}")

    result = RPNEvaluator.evaluate(postfix, stack_capacity=args.stack_capacity, strict=args.strict)
    print(f"{OUTPUT_CONFIG['result_label']}{format_result(result)}")
    return 0


def run_batch(args):
    expressions = load_expressions(args.batch)
    df = evaluate_batch(expressions, stack_capacity=args.stack_capacity,
                        buffer_size=args.buffer_size, strict=args.strict)

    for row in df.itertuples(index=False):
        if pd.isna(row.error):
            print(f"{row.expression} => {row.postfix}=> {format_result(row.result)}")
        else:
            print(f"{row.expression} => Error: {row.error}")

    summary = summarize_batch(df)
    logger.info(f"Batch finished: {summary['succeeded']}/{summary['total']} succeeded")
    for message, count in summary["errors"].items():
        logger.info(f"  - {message}: {count}")

    if args.output:
        save_results(df, args.output)
    return 0 if summary["failed"] == 0 else 1


def main(argv=None):
    parser = argparse.ArgumentParser(description="Shunting-yard infix to RPN calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Infix expression to evaluate (skips the interactive prompt)"
    )
    parser.add_argument(
        "--batch",
        type=str,
        default=None,
        help="Path to a text file (one expression per line) or CSV with an 'expression' column"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save batch results as CSV"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject unrecognized characters and malformed numbers instead of skipping them"
    )
    parser.add_argument(
        "--stack_capacity",
        type=int,
        default=None,
        help="Maximum number of elements on the operator/operand stacks (default: 100)"
    )
    parser.add_argument(
        "--buffer_size",
        type=int,
        default=None,
        help="Size of the infix/postfix buffers including the terminator (default: 100)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOG_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_CONFIG["format"])

    try:
        if args.batch:
            return run_batch(args)
        infix = args.expression if args.expression is not None else read_expression()
        return run_single(infix, args)
    except CalculatorError as e:
        print(f"Error: {e}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
