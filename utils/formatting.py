"""utils/formatting.py"""
from config.config import OUTPUT_CONFIG


def format_value(value, precision=None):
    """定点格式输出，不使用科学计数法；inf/nan原样输出"""
    if precision is None:
        precision = OUTPUT_CONFIG['precision']
    return f"{value:.{precision}f}"
