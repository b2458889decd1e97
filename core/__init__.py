"""核心模块 - Token系统、参数解析、操作符和逐行求值器"""
from .token_system import (
    Operation, Token, TOKEN_DEFINITIONS, OPERATION_ARITY,
    TokenRecognizer, arity
)
from .literal_parser import skip_whitespace, parse_argument
from .operators import Operators
from .line_evaluator import CalcState, LineEvaluator

__all__ = [
    'Operation', 'Token', 'TOKEN_DEFINITIONS', 'OPERATION_ARITY',
    'TokenRecognizer', 'arity', 'skip_whitespace', 'parse_argument',
    'Operators', 'CalcState', 'LineEvaluator'
]
