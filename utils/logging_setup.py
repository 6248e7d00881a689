import logging

from config import LogConfig


def setup_logging(level=None):
    """
    配置根日志记录器，供驱动脚本调用
    库代码本身只创建 logger，不调用 basicConfig
    """
    level = level or LogConfig.LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.basicConfig(level=level, format=LogConfig.FORMAT)
    logging.getLogger().setLevel(level)
    return logging.getLogger("game")
