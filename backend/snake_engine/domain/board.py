"""
Board entity - the grid of cells the snake moves on.
"""

from enum import Enum
from typing import List, Tuple, Union


class Cell(Enum):
    """State of one grid position. The value is its terminal glyph."""
    EMPTY = "░"
    SNAKE = "s"
    APPLE = "a"

    def __str__(self) -> str:
        return self.value


class Board:
    """
    Fixed-size grid of cells stored as a flat row-major list.

    Cells can be addressed either by an (x, y) tuple, which is bounds-checked,
    or by a linear index (index = x + width * y), which is not.
    (0, 0) is the bottom left cell.
    """

    def __init__(self, width: int, height: int):
        self._cells: List[Cell] = [Cell.EMPTY] * (width * height)
        self._size = (width, height)

    @property
    def width(self) -> int:
        return self._size[0]

    @property
    def height(self) -> int:
        return self._size[1]

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    @property
    def cells(self) -> List[Cell]:
        """Return a copy of the flat cell list."""
        return list(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def _linear(self, key: Union[int, Tuple[int, int]]) -> int:
        if isinstance(key, tuple):
            x, y = key
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise IndexError(
                    f"Position {key} is outside the {self.width}x{self.height} board."
                )
            return x + self.width * y
        return key

    def __getitem__(self, key: Union[int, Tuple[int, int]]) -> Cell:
        return self._cells[self._linear(key)]

    def __setitem__(self, key: Union[int, Tuple[int, int]], cell: Cell) -> None:
        self._cells[self._linear(key)] = cell

    def empty_indices(self) -> List[int]:
        """Linear indices of every EMPTY cell, in board order."""
        return [i for i, cell in enumerate(self._cells) if cell is Cell.EMPTY]

    def to_position(self, index: int) -> Tuple[int, int]:
        """Convert a linear index back to (x, y)."""
        return (index % self.width, index // self.width)

    def __str__(self) -> str:
        rows = [
            self._cells[y * self.width:(y + 1) * self.width]
            for y in range(self.height)
        ]
        # Print rows in reverse order (top row first)
        return "".join(
            " ".join(str(cell) for cell in row) + "\n"
            for row in reversed(rows)
        )

    def __repr__(self):
        return f"<Board {self.width}x{self.height}>"
