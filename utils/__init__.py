"""工具模块"""
from .formatting import format_value

__all__ = ['format_value']
