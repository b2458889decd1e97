"""core/token_system.py"""
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class Operation(Enum):
    ERR = "err"    # 无法识别，按空操作处理
    SET = "set"    # 赋值（以数字开头）
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    REM = "rem"
    NEG = "neg"
    POW = "pow"
    SQRT = "sqrt"
    SIN = "sin"
    COS = "cos"
    RAD = "rad"    # 切换到弧度
    DEG = "deg"    # 切换到角度
    TAN = "tan"
    CTN = "ctn"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    ACTN = "actn"


class Token:
    def __init__(self, name, op, arity=0):
        self.name = name
        self.op = op
        self.arity = arity

    def __repr__(self):
        return f"Token({self.name!r}, {self.op.name}, arity={self.arity})"


# Token定义字典
TOKEN_DEFINITIONS = {
    # 单字符二元操作符（后面跟数字参数）
    '+': Token('+', Operation.ADD, arity=2),
    '-': Token('-', Operation.SUB, arity=2),
    '*': Token('*', Operation.MUL, arity=2),
    '/': Token('/', Operation.DIV, arity=2),
    '%': Token('%', Operation.REM, arity=2),
    '^': Token('^', Operation.POW, arity=2),

    # 单字符一元操作符
    '_': Token('_', Operation.NEG, arity=1),

    # 角度模式（无参数）
    'RAD': Token('RAD', Operation.RAD, arity=0),
    'DEG': Token('DEG', Operation.DEG, arity=0),

    # 一元函数
    'SQRT': Token('SQRT', Operation.SQRT, arity=1),
    'SIN': Token('SIN', Operation.SIN, arity=1),
    'COS': Token('COS', Operation.COS, arity=1),
    'TAN': Token('TAN', Operation.TAN, arity=1),
    'CTN': Token('CTN', Operation.CTN, arity=1),
    'ASIN': Token('ASIN', Operation.ASIN, arity=1),
    'ACOS': Token('ACOS', Operation.ACOS, arity=1),
    'ATAN': Token('ATAN', Operation.ATAN, arity=1),
    'ACTN': Token('ACTN', Operation.ACTN, arity=1),
}

# 不在字典里的操作：SET由首位数字触发，ERR是识别失败
OPERATION_ARITY = {token.op: token.arity for token in TOKEN_DEFINITIONS.values()}
OPERATION_ARITY[Operation.SET] = 2
OPERATION_ARITY[Operation.ERR] = 0

# 所有助记符的真前缀，用于逐字符匹配
MNEMONIC_PREFIXES = frozenset(
    name[:i] for name in TOKEN_DEFINITIONS for i in range(1, len(name))
)

DIGITS = '0123456789'


def arity(op):
    """操作的参数个数：0、1或2"""
    return OPERATION_ARITY[op]


class TokenRecognizer:
    @staticmethod
    def recognize(line, pos=0):
        """
        识别行首的操作
        Args:
            line: 输入行（不含换行符）
            pos: 起始位置
        Returns:
            (Operation, 新位置)；识别失败时位置回到pos
        """
        if pos < len(line) and line[pos] in DIGITS:
            # 首位数字属于参数，不消耗
            return Operation.SET, pos

        # 逐字符前进，一旦前缀不再匹配任何助记符就失败，不回退到更短的候选
        end = pos
        while end < len(line):
            end += 1
            candidate = line[pos:end]
            if candidate in TOKEN_DEFINITIONS:
                return TOKEN_DEFINITIONS[candidate].op, end
            if candidate not in MNEMONIC_PREFIXES:
                break

        logger.error(f"Unknown operation {line}")
        return Operation.ERR, pos
