"""工具模块"""
from .formatting import format_result, summarize_batch

__all__ = ['format_result', 'summarize_batch']
