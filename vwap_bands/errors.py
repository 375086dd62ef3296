class VWAPBandsError(Exception):
    """vwap_bands 的基础异常"""


class ConfigurationError(VWAPBandsError, ValueError):
    """参数配置错误 (窗口大小非法、数据列缺失等)"""
