"""逐行求值器 - 识别操作、解析参数、调用Operators"""
import logging
from collections import namedtuple

from core.token_system import TokenRecognizer, arity
from core.literal_parser import skip_whitespace, parse_argument
from core.operators import Operators

logger = logging.getLogger(__name__)


class CalcState(namedtuple("CalcState", ["current", "rad_on"])):
    """累加器当前值和角度模式（True为弧度）"""
    __slots__ = ()

    def __new__(cls, current=0.0, rad_on=False):
        return super().__new__(cls, float(current), bool(rad_on))


class LineEvaluator:
    """对累加器执行一行命令"""

    @staticmethod
    def evaluate(state, op, argument=None):
        """
        按操作的参数个数分派
        Args:
            state: CalcState
            op: Operation
            argument: 二元操作的右操作数
        Returns:
            新的CalcState
        """
        n = arity(op)

        if n == 0:
            current, rad_on = Operators.nullary(state.current, op, state.rad_on)
            return CalcState(current, rad_on)

        if n == 1:
            return CalcState(Operators.unary(state.current, op, state.rad_on), state.rad_on)

        if argument is None:
            logger.error(f"Missing argument for {op.name}")
            return state
        return CalcState(Operators.binary(op, state.current, argument), state.rad_on)

    @staticmethod
    def process_line(state, line):
        """处理一行输入，返回新的CalcState；任何错误都不会抛出"""
        op, pos = TokenRecognizer.recognize(line)

        argument = None
        if arity(op) == 2:
            pos = skip_whitespace(line, pos)
            argument, pos = parse_argument(line, pos)

        new_state = LineEvaluator.evaluate(state, op, argument)
        logger.debug(f"{line!r}: {op.name} {state.current} -> {new_state.current}")
        return new_state
