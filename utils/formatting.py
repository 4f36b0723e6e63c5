"""utils/formatting.py"""
from config.config import OUTPUT_CONFIG


def format_result(value, fmt=None):
    """定点格式输出结果，等价于 printf("%lf")"""
    if fmt is None:
        fmt = OUTPUT_CONFIG["result_format"]
    return fmt.format(value)


def summarize_batch(df):
    """
    统计批量求值结果
    Returns:
        dict: total / succeeded / failed / errors（错误信息 -> 次数）
    """
    failed = df["error"].notna()
    errors = df.loc[failed, "error"].value_counts()
    return {
        "total": int(len(df)),
        "succeeded": int((~failed).sum()),
        "failed": int(failed.sum()),
        "errors": {str(k): int(v) for k, v in errors.items()},
    }
