"""core/operators.py"""
import math
import logging

import numpy as np

from config.config import EVALUATOR_CONFIG
from core.token_system import Operation

EPSILON = EVALUATOR_CONFIG['eps']  # tan/ctn极点判断
TAN_POLE_VALUE = EVALUATOR_CONFIG['tan_pole_value']

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合"""

    @staticmethod
    def to_radians(angle, rad_on):
        return angle if rad_on else angle / 180 * np.pi

    @staticmethod
    def to_degrees(angle, rad_on):
        return angle if rad_on else angle * 180 / np.pi

    # 无参数操作====================

    @staticmethod
    def nullary(current, op, rad_on):
        """
        Returns:
            (current, rad_on)，只有RAD/DEG会改变角度模式
        """
        if op == Operation.RAD:
            return current, True
        if op == Operation.DEG:
            return current, False
        return current, rad_on

    # 一元操作符====================

    @staticmethod
    def neg(current, rad_on):
        return -current

    @staticmethod
    def sqrt(current, rad_on):
        """只接受正数，0也被拒绝"""
        if current > 0:
            return float(np.sqrt(current))
        logger.error(f"Bad argument for SQRT: {current}")
        return current

    @staticmethod
    def sin(current, rad_on):
        with np.errstate(all='ignore'):
            return float(np.sin(Operators.to_radians(current, rad_on)))

    @staticmethod
    def cos(current, rad_on):
        with np.errstate(all='ignore'):
            return float(np.cos(Operators.to_radians(current, rad_on)))

    @staticmethod
    def tan(current, rad_on):
        """极点附近返回TAN_POLE_VALUE（有限大数）"""
        angle = Operators.to_radians(current, rad_on)
        with np.errstate(all='ignore'):
            if np.abs(np.cos(angle)) > EPSILON:
                return float(np.tan(angle))
        return TAN_POLE_VALUE

    @staticmethod
    def ctn(current, rad_on):
        """极点附近返回inf（与tan不同）"""
        angle = Operators.to_radians(current, rad_on)
        with np.errstate(all='ignore'):
            if np.abs(np.sin(angle)) > EPSILON:
                return float(1 / np.tan(angle))
        return math.inf

    @staticmethod
    def asin(current, rad_on):
        """定义域外返回inf"""
        if abs(current) <= 1:
            return Operators.to_degrees(float(np.arcsin(current)), rad_on)
        logger.error(f"Bad argument for ASIN: {current}")
        return math.inf

    @staticmethod
    def acos(current, rad_on):
        if abs(current) <= 1:
            return Operators.to_degrees(float(np.arccos(current)), rad_on)
        logger.error(f"Bad argument for ACOS: {current}")
        return current

    @staticmethod
    def atan(current, rad_on):
        # arctan本身处处有定义，这里仍然限制|x| < pi/2
        if abs(current) < np.pi / 2:
            return Operators.to_degrees(float(np.arctan(current)), rad_on)
        logger.error(f"Bad argument for ATAN: {current}")
        return current

    @staticmethod
    def actn(current, rad_on):
        """arccot(x) = atan(1/x)，负值加pi落到(0, pi)"""
        if 0 < abs(current) < np.pi:
            angle = float(np.arctan(1 / current))
            if angle < 0:
                angle += np.pi
            return Operators.to_degrees(angle, rad_on)
        logger.error(f"Bad argument for ACTN: {current}")
        return current

    @staticmethod
    def unary(current, op, rad_on):
        op_method = UNARY_METHODS.get(op)
        if op_method is None:
            return current
        return op_method(current, rad_on)

    # 二元操作符========================================

    @staticmethod
    def set(left, right):
        return right

    @staticmethod
    def add(left, right):
        with np.errstate(all='ignore'):
            return float(np.float64(left) + right)

    @staticmethod
    def sub(left, right):
        with np.errstate(all='ignore'):
            return float(np.float64(left) - right)

    @staticmethod
    def mul(left, right):
        with np.errstate(all='ignore'):
            return float(np.float64(left) * right)

    @staticmethod
    def div(left, right):
        """除数为0时保持左操作数不变"""
        if right == 0:
            logger.error(f"Bad right argument for division: {right}")
            return left
        with np.errstate(all='ignore'):
            return float(np.float64(left) / right)

    @staticmethod
    def rem(left, right):
        """IEEE余数（不是截断取模）"""
        if right == 0:
            logger.error(f"Bad right argument for remainder: {right}")
            return left
        if math.isinf(left) or math.isnan(left) or math.isnan(right):
            return math.nan
        return math.remainder(left, right)

    @staticmethod
    def pow(left, right):
        """不做定义域检查，非法组合得到nan"""
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(left), np.float64(right)))

    @staticmethod
    def binary(op, left, right):
        op_method = BINARY_METHODS.get(op)
        if op_method is None:
            return left
        return op_method(left, right)


UNARY_METHODS = {
    Operation.NEG: Operators.neg,
    Operation.SQRT: Operators.sqrt,
    Operation.SIN: Operators.sin,
    Operation.COS: Operators.cos,
    Operation.TAN: Operators.tan,
    Operation.CTN: Operators.ctn,
    Operation.ASIN: Operators.asin,
    Operation.ACOS: Operators.acos,
    Operation.ATAN: Operators.atan,
    Operation.ACTN: Operators.actn,
}

BINARY_METHODS = {
    Operation.SET: Operators.set,
    Operation.ADD: Operators.add,
    Operation.SUB: Operators.sub,
    Operation.MUL: Operators.mul,
    Operation.DIV: Operators.div,
    Operation.REM: Operators.rem,
    Operation.POW: Operators.pow,
}
