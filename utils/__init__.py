"""
工具模块
包含随机数源和日志配置
"""

from .logging_setup import setup_logging
from .random_source import RandomSource

__all__ = ['RandomSource', 'setup_logging']
