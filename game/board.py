import logging

import numpy as np

from config import GameConfig
from utils.random_source import RandomSource

from .errors import EmptyBoardError, PreconditionViolation
from .game_2048 import (
    check_valid_actions_2048,
    find_open_cells,
    has_merge_available,
    normalize_direction,
    simulate_move_2048,
    validate_grid,
)

logger = logging.getLogger(__name__)


class Board:
    """
    2048 规则引擎
    持有 N x N 棋盘，负责移动、出块、判负和计分

    每回合的调用顺序（由外部驱动）:
        apply_move(direction) -> is_lost() -> 未输则 spawn_tile()

    引擎不是线程安全的，并发使用时调用方需要串行化
    """
    def __init__(self, initial_grid=None, size=None, rng=None, seed=None):
        """
        参数:
            initial_grid: 初始棋盘快照（二维列表或数组），会被深拷贝；
                          传入整数时视为棋盘边长
            size: 棋盘边长，默认 GameConfig.BOARD_SIZE
            rng: 随机数源，需要提供 uniform / uniform_int
            seed: 未传入 rng 时，用该种子创建 RandomSource
        """
        if isinstance(initial_grid, (int, np.integer)) and not isinstance(initial_grid, bool):
            initial_grid, size = None, int(initial_grid)

        if initial_grid is None:
            size = GameConfig.BOARD_SIZE if size is None else size
            if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
                raise PreconditionViolation(f"Board size must be a positive integer, got {size!r}")
            self._grid = np.zeros((int(size), int(size)), dtype=np.int64)
        else:
            self._grid = validate_grid(initial_grid, size)

        self.size = self._grid.shape[0]
        if rng is None:
            rng = RandomSource(GameConfig.SEED if seed is None else seed)
        self.rng = rng
        self.four_tile_probability = GameConfig.FOUR_TILE_PROBABILITY

        self.move_count = 0
        self.last_merge_value = 0

    @classmethod
    def from_grid(cls, grid, rng=None, seed=None):
        """从快照创建棋盘"""
        return cls(initial_grid=grid, rng=rng, seed=seed)

    # ----------------------------------------------------- 查询
    def get_grid(self):
        """返回只读的棋盘副本，修改它不会影响引擎"""
        view = self._grid.copy()
        view.flags.writeable = False
        return view

    def to_list(self):
        return self._grid.tolist()

    def get_open_cells(self):
        """当前所有空位（按行优先排列），每次都根据棋盘重新计算"""
        return find_open_cells(self._grid)

    def refresh_open_cells(self):
        """
        重新计算空位并返回
        空位集合是棋盘的纯函数，spawn_tile / is_lost 内部会自行计算，
        保留此方法是为了兼容"移动后刷新再出块"的驱动流程
        """
        return self.get_open_cells()

    def is_lost(self):
        """
        棋盘没有空位即判负
        注意：不检查满盘时是否仍有可合并的相邻方块，见 has_merge_available()
        """
        return not np.any(self._grid == 0)

    def score(self):
        """所有格子数值之和，每次重新计算"""
        return int(self._grid.sum())

    def max_tile(self):
        return int(self._grid.max())

    def has_merge_available(self):
        return has_merge_available(self._grid)

    def valid_actions(self):
        """按 Direction 编号返回每个方向是否会改变棋盘 (0/1)"""
        return check_valid_actions_2048(self._grid)

    # ----------------------------------------------------- 修改
    def spawn_tile(self):
        """
        在随机空位放置新方块：随机小数 < 0.1 放4，否则放2

        返回:
            新方块所在的 BoardSpot

        异常:
            EmptyBoardError: 棋盘已满
        """
        open_cells = find_open_cells(self._grid)
        if not open_cells:
            raise EmptyBoardError("Cannot spawn a tile: the board has no open cells")

        spot = open_cells[self.rng.uniform_int(0, len(open_cells))]
        fraction = self.rng.uniform(0.0, 1.0)
        value = GameConfig.FOUR_TILE if fraction < self.four_tile_probability else GameConfig.TWO_TILE

        self._grid[spot.row, spot.col] = value
        logger.debug("Spawned %d at (%d, %d)", value, spot.row, spot.col)
        return spot

    def apply_move(self, direction):
        """
        向指定方向移动：旋转到"左" -> 压缩 -> 合并 -> 压缩 -> 旋转还原
        移动后空位会变化，出块前由 spawn_tile 自行重新计算

        参数:
            direction: Direction、动作编号 0-3 或 'left'/'right'/'up'/'down'
        """
        direction = normalize_direction(direction)
        new_grid, merged_value = simulate_move_2048(self._grid, direction)

        moved = not np.array_equal(new_grid, self._grid)
        self._grid = new_grid
        self.move_count += 1
        self.last_merge_value = merged_value
        logger.debug("Move %s: moved=%s merged=%d score=%d",
                     direction.name, moved, merged_value, self.score())

    def copy(self):
        """深拷贝棋盘（共享随机数源）"""
        clone = Board(self._grid, rng=self.rng)
        clone.four_tile_probability = self.four_tile_probability
        clone.move_count = self.move_count
        clone.last_merge_value = self.last_merge_value
        return clone

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._grid, other._grid)

    def __repr__(self):
        return f"Board(size={self.size}, score={self.score()}, grid={self.to_list()})"
