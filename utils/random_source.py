import numpy as np


class RandomSource:
    """
    可注入的随机数源
    引擎只依赖 uniform / uniform_int 两个方法，测试时可以传入任何实现了它们的对象
    """
    def __init__(self, seed=None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, low, high):
        """返回 [low, high) 区间内的浮点数"""
        return float(self._rng.uniform(low, high))

    def uniform_int(self, low, high):
        """返回 [low, high) 区间内的整数"""
        return int(self._rng.integers(low, high))

    def reseed(self, seed):
        """用新种子重新开始随机序列"""
        self.seed = seed
        self._rng = np.random.default_rng(seed)
