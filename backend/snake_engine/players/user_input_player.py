"""
Interactive player - reads arrow keys from the terminal.
"""

from typing import Optional

import blessed

from snake_engine.domain.constants import Direction, UP, DOWN, LEFT, RIGHT
from snake_engine.domain.game import Game
from .base import Player

KEY_DIRECTIONS = {
    "KEY_UP": UP,
    "KEY_DOWN": DOWN,
    "KEY_LEFT": LEFT,
    "KEY_RIGHT": RIGHT,
}
GIVE_UP_KEY = "KEY_ESCAPE"


class UserInputPlayer(Player):
    """
    Blocks until the user presses an arrow key (move) or Escape (give up).
    Any other key is ignored.
    """

    def __init__(self, name: Optional[str] = None, term: Optional[blessed.Terminal] = None):
        super().__init__(name)
        self.term = term if term is not None else blessed.Terminal()

    def get_move(self, game: Game) -> Optional[Direction]:
        with self.term.cbreak():
            while True:
                key = self.term.inkey()
                if key.name in KEY_DIRECTIONS:
                    return KEY_DIRECTIONS[key.name]
                if key.name == GIVE_UP_KEY:
                    return None
