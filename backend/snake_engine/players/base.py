"""
Base player interface for the game engine.
"""

from typing import Optional

from snake_engine.domain.constants import Direction
from snake_engine.domain.game import Game


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a move for the snake
    given the current game.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__

    def get_move(self, game: Game) -> Optional[Direction]:
        """
        Return a move direction given the current game.

        Args:
            game: Current game. Players must not modify it.

        Returns:
            One of Direction.UP, DOWN, LEFT, RIGHT, or None to give up.
        """
        raise NotImplementedError
