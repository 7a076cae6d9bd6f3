"""
Domain entities for the snake engine.

This module contains the core game entities: the board, the snake and the
game state transition. They do no I/O.
"""

from .constants import (
    Direction, LossReason,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    MIN_BOARD_SIZE, INITIAL_SNAKE_LENGTH,
)
from .board import Board, Cell
from .snake import Snake
from .errors import NoSpaceLeft, SnakeLostError
from .game import Game, MoveResult

__all__ = [
    'Direction', 'LossReason',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'MIN_BOARD_SIZE', 'INITIAL_SNAKE_LENGTH',
    'Board', 'Cell',
    'Snake',
    'NoSpaceLeft', 'SnakeLostError',
    'Game', 'MoveResult',
]
