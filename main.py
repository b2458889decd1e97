"""主程序入口 - 逐行读取命令，输出累加器的值"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, validate_config
from core import CalcState, LineEvaluator
from utils.formatting import format_value

logger = logging.getLogger(__name__)


def run(stream_in, stream_out, state=None):
    """
    REPL主循环：每行处理一次，输出一个数
    Args:
        stream_in: 输入流（按行迭代）
        stream_out: 结果输出流
        state: 初始状态，默认(0.0, 角度模式)
    Returns:
        最终的CalcState
    """
    if state is None:
        state = CalcState()

    for line in stream_in:
        line = line.rstrip('\r\n')
        state = LineEvaluator.process_line(state, line)
        stream_out.write(format_value(state.current) + '\n')
        stream_out.flush()

    return state


def main(args):
    logging.basicConfig(
        stream=sys.stderr,
        level=LOGGING_CONFIG['level'],
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    try:
        run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Line-oriented calculator: one command per line on stdin, "
                    "the accumulator is printed after every line"
    )
    args = parser.parse_args()
    main(args)
