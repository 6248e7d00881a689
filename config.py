"""
2048 规则引擎配置文件
包含所有可调参数的默认值
"""


class GameConfig:
    """棋盘与出块配置"""

    # 棋盘尺寸（N x N）
    BOARD_SIZE = 4

    # 新方块参数 - 10%概率出4，否则出2
    FOUR_TILE_PROBABILITY = 0.1
    TWO_TILE = 2
    FOUR_TILE = 4

    # 随机种子，None表示不固定
    SEED = None


class LogConfig:
    """日志配置"""

    LEVEL = "WARNING"
    FORMAT = "[%(levelname)s] %(name)s: %(message)s"
