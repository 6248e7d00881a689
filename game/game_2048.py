"""
2048 棋盘基本操作
所有函数都是纯函数：输入棋盘不会被修改，返回新的 numpy 数组

移动算法只实现"向左"一种：
先把棋盘顺时针旋转 k 次，让目标方向变成左，
执行 压缩-合并-压缩，再旋转 (4 - k) % 4 次还原
"""

from enum import IntEnum
from typing import List, NamedTuple, Tuple

import numpy as np

from .errors import InvalidDirectionError, PreconditionViolation


class Direction(IntEnum):
    """移动方向，取值与动作编号一致 (0=UP, 1=RIGHT, 2=DOWN, 3=LEFT)"""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


# 每个方向需要的顺时针预旋转次数
ROTATIONS = {
    Direction.LEFT: 0,
    Direction.DOWN: 1,
    Direction.RIGHT: 2,
    Direction.UP: 3,
}

_DIRECTION_ALIASES = {
    "up": Direction.UP, "u": Direction.UP,
    "right": Direction.RIGHT, "r": Direction.RIGHT,
    "down": Direction.DOWN, "d": Direction.DOWN,
    "left": Direction.LEFT, "l": Direction.LEFT,
}


class BoardSpot(NamedTuple):
    """棋盘坐标 (行, 列)"""
    row: int
    col: int


def normalize_direction(direction) -> Direction:
    """
    把各种方向表示统一转换为 Direction

    参数:
    direction: Direction、动作编号 0-3，或字符串 ('left' / 'L' 等，不区分大小写)

    返回:
    Direction 枚举值
    """
    if isinstance(direction, Direction):
        return direction
    # bool 是 int 的子类，这里单独排除
    if isinstance(direction, (int, np.integer)) and not isinstance(direction, (bool, np.bool_)):
        try:
            return Direction(int(direction))
        except ValueError:
            raise InvalidDirectionError(f"Invalid direction: {direction!r}. Must be 0-3") from None
    if isinstance(direction, str):
        key = direction.strip().lower()
        if key in _DIRECTION_ALIASES:
            return _DIRECTION_ALIASES[key]
    raise InvalidDirectionError(
        f"Invalid direction: {direction!r}. Must be 'left', 'right', 'up', or 'down'"
    )


def validate_grid(grid, size=None) -> np.ndarray:
    """
    检查并复制一个外部传入的棋盘快照

    参数:
    grid: 二维列表或 numpy 数组
    size: 期望的边长，None 表示不限制

    返回:
    int64 类型的新数组（不与调用方共享内存）
    """
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise PreconditionViolation(f"Grid must be 2-dimensional, got {grid.ndim} dimensions")
        rows = grid
    else:
        try:
            rows = [list(row) for row in grid]
        except TypeError:
            raise PreconditionViolation("Grid must be a sequence of rows") from None
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise PreconditionViolation(f"Grid rows have mismatched lengths: {sorted(widths)}")

    board = np.array(rows)
    if board.size == 0 or board.ndim != 2:
        raise PreconditionViolation("Grid must be a non-empty 2-dimensional array")
    if board.shape[0] != board.shape[1]:
        raise PreconditionViolation(f"Grid must be square, got shape {board.shape}")
    if size is not None and board.shape[0] != size:
        raise PreconditionViolation(f"Grid size {board.shape[0]} does not match board size {size}")
    if board.dtype.kind not in "iu":
        raise PreconditionViolation(f"Grid values must be integers, got dtype {board.dtype}")

    board = board.astype(np.int64)
    tiles = board[board != 0]
    if np.any(tiles < 2) or np.any(tiles & (tiles - 1)):
        raise PreconditionViolation("Every non-zero cell must be a power of two >= 2")
    return board


def transpose(board: np.ndarray) -> np.ndarray:
    """沿主对角线翻转：(r, c) 与 (c, r) 互换"""
    return np.ascontiguousarray(board.T)


def flip_rows(board: np.ndarray) -> np.ndarray:
    """每一行左右翻转"""
    return np.ascontiguousarray(board[:, ::-1])


def rotate_clockwise(board: np.ndarray, times: int = 1) -> np.ndarray:
    """
    顺时针旋转90度 times 次
    一次旋转 = 转置 + 行翻转，旋转4次等于不变
    """
    new_board = np.array(board, dtype=np.int64)
    for _ in range(times % 4):
        new_board = flip_rows(transpose(new_board))
    return new_board


def compact_left(board: np.ndarray) -> np.ndarray:
    """把每行的非零值推到最左边，保持相对顺序，右侧补0"""
    new_board = np.zeros_like(board)
    for i, row in enumerate(board):
        non_zero = row[row != 0]
        new_board[i, :len(non_zero)] = non_zero
    return new_board


def merge_left(board: np.ndarray) -> Tuple[np.ndarray, int]:
    """
    单次从左到右合并相邻的相同数字
    合并后的格子不会在同一次移动中再次合并 ([2,2,2,2] -> [4,0,4,0])

    返回:
    (new_board, merged_value)  merged_value 为本次合并产生的新方块之和
    """
    new_board = np.array(board, dtype=np.int64)
    merged_value = 0
    width = new_board.shape[1]
    for row in new_board:
        j = 0
        while j < width - 1:
            if row[j] != 0 and row[j] == row[j + 1]:
                row[j] *= 2
                row[j + 1] = 0
                merged_value += int(row[j])
                j += 2  # 跳过被合并的格子
            else:
                j += 1
    return new_board, merged_value


def slide_left(board: np.ndarray) -> Tuple[np.ndarray, int]:
    """压缩 -> 合并 -> 再压缩（合并会在中间留下0）"""
    merged_board, merged_value = merge_left(compact_left(board))
    return compact_left(merged_board), merged_value


def simulate_move_2048(board, direction) -> Tuple[np.ndarray, int]:
    """
    模拟2048游戏移动，返回新的游戏板和合并得到的数值
    不修改输入棋盘

    参数:
    board: N x N 的游戏板
    direction: 任意 normalize_direction 能识别的方向

    返回:
    (new_board, merged_value)
    """
    direction = normalize_direction(direction)
    turns = ROTATIONS[direction]

    oriented = rotate_clockwise(board, turns)
    moved, merged_value = slide_left(oriented)
    return rotate_clockwise(moved, (4 - turns) % 4), merged_value


def check_valid_actions_2048(board) -> np.ndarray:
    """
    检查2048游戏板的有效移动方向
    通过模拟每个方向的移动来检查是否有效

    返回:
    valid_actions: 长度为4的数组，按 Direction 编号排列 (0=无效, 1=有效)
    """
    board = np.asarray(board, dtype=np.int64)
    valid_actions = np.zeros(4, dtype=np.int32)
    for direction in Direction:
        new_board, _ = simulate_move_2048(board, direction)
        if not np.array_equal(new_board, board):
            valid_actions[direction] = 1
    return valid_actions


def find_open_cells(board) -> List[BoardSpot]:
    """按行优先顺序返回所有值为0的坐标"""
    rows, cols = np.where(np.asarray(board) == 0)
    return [BoardSpot(int(r), int(c)) for r, c in zip(rows, cols)]


def has_merge_available(board) -> bool:
    """是否存在横向或纵向相邻且相等的非零方块"""
    board = np.asarray(board)
    horizontal = (board[:, :-1] == board[:, 1:]) & (board[:, :-1] != 0)
    vertical = (board[:-1, :] == board[1:, :]) & (board[:-1, :] != 0)
    return bool(horizontal.any() or vertical.any())
