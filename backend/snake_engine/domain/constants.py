"""
Game constants for the snake engine.
"""

from enum import Enum


class Direction(str, Enum):
    """Movement directions. (0, 0) is the bottom left cell."""
    UP = "UP"        # y + 1
    DOWN = "DOWN"    # y - 1
    LEFT = "LEFT"    # x - 1
    RIGHT = "RIGHT"  # x + 1


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}


class LossReason(str, Enum):
    """Why a move lost the game."""
    RAN_INTO_WALL = "wall"
    RAN_INTO_SNAKE = "body_collision"


# Board settings
MIN_BOARD_SIZE = 5
INITIAL_SNAKE_LENGTH = 3
