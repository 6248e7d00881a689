"""
错误类型定义
所有错误都是编程错误，立即抛出，不做重试
"""


class GameError(Exception):
    """引擎错误基类"""


class PreconditionViolation(GameError, ValueError):
    """前置条件不满足：快照尺寸不合法、数值不合法等"""


class EmptyBoardError(PreconditionViolation):
    """没有空位时尝试出块（棋盘已满，驱动方应先判负）"""


class InvalidDirectionError(GameError, ValueError):
    """无法识别的移动方向"""
