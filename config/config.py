"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 参数解析
PARSER_CONFIG = {
    "max_decimal_digits": 10,  # 参数最多10位有效数字
}

# 求值器参数
EVALUATOR_CONFIG = {
    "eps": 1e-10,  # 判断tan/ctn极点的阈值
    "tan_pole_value": 16331239353195370.0,  # TAN在极点附近返回的大数（不是inf）
}

# 输出格式
OUTPUT_CONFIG = {
    "precision": 20,  # 小数点后20位，定点格式
}

# 日志（诊断信息写到stderr，结果写到stdout）
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(levelname)s - %(name)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert PARSER_CONFIG["max_decimal_digits"] == 10, "参数最多10位数字"
    assert EVALUATOR_CONFIG["eps"] == 1e-10, "极点阈值为1e-10"
    assert EVALUATOR_CONFIG["tan_pole_value"] > 0, "TAN极点返回正的大数"
    assert OUTPUT_CONFIG["precision"] == 20, "输出保留20位小数"
    logger.debug("Configuration validated successfully!")
