"""core/literal_parser.py - 二元操作的数字参数解析"""
import logging

from config.config import PARSER_CONFIG

logger = logging.getLogger(__name__)

# 只认ASCII空白，与C的isspace一致
WHITESPACE = " \t\n\v\f\r"


def skip_whitespace(line, pos):
    """跳过空白字符，返回新位置"""
    while pos < len(line) and line[pos] in WHITESPACE:
        pos += 1
    return pos


def parse_argument(line, pos=0, max_digits=None):
    """
    解析无符号十进制数（最多一个小数点），不支持指数和正负号
    Args:
        line: 输入行
        pos: 起始位置
        max_digits: 最多读取的数字个数，默认取PARSER_CONFIG
    Returns:
        (数值, 新位置)
    """
    if max_digits is None:
        max_digits = PARSER_CONFIG['max_decimal_digits']

    result = 0.0
    fraction = 1.0
    integer = True
    count = 0

    while pos < len(line) and count < max_digits:
        char = line[pos]
        if '0' <= char <= '9':
            digit = ord(char) - ord('0')
            if integer:
                result = result * 10 + digit
            else:
                fraction /= 10
                result += digit * fraction
            count += 1
        elif char == '.' and integer:
            integer = False
        else:
            # 第二个小数点或其他字符
            break
        pos += 1

    if pos < len(line):
        logger.warning(f"Argument isn't fully parsed, suffix left: '{line[pos:]}'")
    return result, pos
