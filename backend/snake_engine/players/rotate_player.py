"""
Rotate player - a rule-based bot that sweeps the board column by column.

The snake climbs even columns in the lower half of the board and descends odd
columns in the upper half, running along the bottom row to the left and the
top row to the right. When the apple sits next to its column in the same half
it cuts across to it instead of finishing the sweep.
"""

from snake_engine.domain.constants import Direction, UP, DOWN, LEFT, RIGHT
from snake_engine.domain.game import Game
from .base import Player


class RotatePlayer(Player):

    def get_move(self, game: Game) -> Direction:
        head_x, head_y = game.snake_head
        apple_x, apple_y = game.apple_position
        width, height = game.board.size

        diff_x = apple_x - head_x
        diff_y = apple_y - head_y
        in_lower_half = head_y < height // 2
        in_upward_col = head_x % 2 == 0
        apple_in_same_half = (apple_y < height // 2) == in_lower_half

        at_left = head_x == 0
        at_right = head_x == width - 1
        at_bottom = head_y == 0
        at_top = head_y == height - 1

        if at_left:
            direction = RIGHT if at_top else UP
        elif at_right:
            direction = LEFT if at_bottom else DOWN
        elif at_bottom:
            if apple_in_same_half and in_upward_col and diff_x in (0, -1) and diff_y != 0:
                direction = UP
            else:
                direction = LEFT
        elif at_top:
            if apple_in_same_half and not in_upward_col and diff_x in (0, 1) and diff_y != 0:
                direction = DOWN
            else:
                direction = RIGHT
        else:
            direction = self._inner_move(
                in_lower_half, in_upward_col, apple_in_same_half, diff_x, diff_y
            )

        if game.is_move_safe(direction):
            return direction
        return UP if in_lower_half else DOWN

    @staticmethod
    def _inner_move(in_lower_half, in_upward_col, apple_in_same_half, diff_x, diff_y) -> Direction:
        # Order matters: the apple checks come before the sweep defaults
        if in_lower_half:
            if not in_upward_col:
                return DOWN
            if diff_x == -1 and diff_y == 0:
                return LEFT
            if apple_in_same_half and diff_x in (-1, 0) and diff_y > 0:
                return UP
            return LEFT

        if in_upward_col:
            return UP
        if diff_x == 1 and diff_y == 0:
            return RIGHT
        if apple_in_same_half and diff_x in (1, 0) and diff_y < 0:
            return DOWN
        return RIGHT
