"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from snake_engine.domain.constants import Direction, UP, DOWN, LEFT, RIGHT
from snake_engine.domain.game import Game
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and the snake's body.
    """

    def __init__(self, name: Optional[str] = None, rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game: Game) -> Direction:
        # Fixed order so a seeded rng picks the same move every run
        moves = [UP, DOWN, LEFT, RIGHT]
        valid_moves: List[Direction] = [move for move in moves if game.is_move_safe(move)]

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(moves)

        return self.rng.choice(valid_moves)
