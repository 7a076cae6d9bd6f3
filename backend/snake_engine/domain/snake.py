"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def advance(self, new_head: Tuple[int, int], grow: bool = False) -> Tuple[int, int]:
        """
        Move the head to new_head and shift every segment one step toward the tail.

        The old tail is dropped unless grow is set, in which case it stays and
        the snake becomes one segment longer. Returns the old tail.
        """
        old_tail = self.positions[-1]
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()
        return old_tail

    def to_list(self) -> List[Tuple[int, int]]:
        return list(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, position) -> bool:
        return position in self.positions
