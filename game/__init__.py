"""
游戏模块
包含2048游戏规则引擎
"""

from .board import Board
from .errors import EmptyBoardError, GameError, InvalidDirectionError, PreconditionViolation
from .game_2048 import (
    BoardSpot,
    Direction,
    check_valid_actions_2048,
    compact_left,
    find_open_cells,
    flip_rows,
    has_merge_available,
    merge_left,
    normalize_direction,
    rotate_clockwise,
    simulate_move_2048,
    slide_left,
    transpose,
)

__all__ = [
    'Board', 'BoardSpot', 'Direction',
    'GameError', 'PreconditionViolation', 'EmptyBoardError', 'InvalidDirectionError',
    'check_valid_actions_2048', 'compact_left', 'find_open_cells', 'flip_rows',
    'has_merge_available', 'merge_left', 'normalize_direction', 'rotate_clockwise',
    'simulate_move_2048', 'slide_left', 'transpose',
]
