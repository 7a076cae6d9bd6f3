"""
Game entity - the board, the snake and the apple, plus the move transition.
"""

import copy
import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .board import Board, Cell
from .constants import (
    Direction,
    LossReason,
    UP, DOWN, LEFT, RIGHT,
    MIN_BOARD_SIZE,
    INITIAL_SNAKE_LENGTH,
)
from .errors import NoSpaceLeft, SnakeLostError
from .snake import Snake

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


@dataclass
class MoveResult:
    """
    Outcome of Game.try_move_snake.

    Attributes:
        game: the game after the move, or the untouched game if the move lost
        won: True when the last apple was eaten and the board is full
        lost: the LossReason if the move lost the game, else None
    """
    game: "Game"
    won: bool = False
    lost: Optional[LossReason] = None

    @property
    def ok(self) -> bool:
        return self.lost is None


class Game:
    """
    A single-player snake match on a fixed-size board.

    The board and the snake are kept consistent at all times: a cell is SNAKE
    iff its position is in the snake, and APPLE iff it is the apple position.
    A win leaves the board with no APPLE cell.

    The random generator is owned by the game so a seeded game replays the
    same apple placements for the same moves.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        self._check_size(width, height)

        self._rng = rng if rng is not None else random.Random()
        self._board = Board(width, height)
        self._move_count = 0

        self._snake = Snake(self._initial_snake(width, height))
        for position in self._snake.positions:
            self._board[position] = Cell.SNAKE

        self._apple_position = self._new_apple_position(self._board, self._rng)
        self._board[self._apple_position] = Cell.APPLE

    @classmethod
    def with_seed(cls, width: int, height: int, seed: Union[int, str, None]) -> "Game":
        """Build a game whose apple placements are reproducible."""
        return cls(width, height, rng=random.Random(seed))

    @classmethod
    def from_layout(
        cls,
        width: int,
        height: int,
        snake: Iterable[Position],
        apple: Position,
        rng: Optional[random.Random] = None,
        move_count: int = 0,
    ) -> "Game":
        """
        Build a game from an explicit snake (head first) and apple position.

        Raises:
            ValueError: if the layout breaks a board invariant.
        """
        cls._check_size(width, height)
        positions = list(snake)

        if len(positions) < INITIAL_SNAKE_LENGTH:
            raise ValueError(
                f"Snake needs at least {INITIAL_SNAKE_LENGTH} segments, got {len(positions)}."
            )
        if len(set(positions)) != len(positions):
            raise ValueError(f"Snake segments must be distinct: {positions}")
        for (x, y) in positions + [apple]:
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"Position out of bounds at {(x, y)}.")
        if apple in positions:
            raise ValueError(f"Apple at {apple} overlaps the snake.")

        game = cls.__new__(cls)
        game._rng = rng if rng is not None else random.Random()
        game._board = Board(width, height)
        game._move_count = move_count
        game._snake = Snake(positions)
        for position in positions:
            game._board[position] = Cell.SNAKE
        game._apple_position = apple
        game._board[apple] = Cell.APPLE
        return game

    @staticmethod
    def _check_size(width: int, height: int) -> None:
        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, "
                f"got {width}x{height}."
            )

    @staticmethod
    def _initial_snake(width: int, height: int) -> List[Position]:
        center_x = ((width + 1) // 2) - 1
        center_y = ((height + 1) // 2) - 1

        # Center tile and the two below it. Both exist because the board
        # is at least 5 tall.
        return [
            (center_x, center_y),
            (center_x, center_y - 1),
            (center_x, center_y - 2),
        ]

    @staticmethod
    def _new_apple_position(board: Board, rng: random.Random) -> Position:
        empty_spaces = board.empty_indices()
        if not empty_spaces:
            raise NoSpaceLeft()

        position = board.to_position(rng.choice(empty_spaces))
        logger.debug(f"Placed apple at {position} ({len(empty_spaces)} empty cells)")
        return position

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def _next_head(self, direction: Direction) -> Optional[Position]:
        """Return the head position after moving, or None if it leaves the board."""
        hx, hy = self._snake.head

        if direction == UP:
            if hy + 1 == self._board.height:
                return None
            return (hx, hy + 1)
        if direction == DOWN:
            if hy == 0:
                return None
            return (hx, hy - 1)
        if direction == RIGHT:
            if hx + 1 == self._board.width:
                return None
            return (hx + 1, hy)
        if direction == LEFT:
            if hx == 0:
                return None
            return (hx - 1, hy)
        raise ValueError(f"Unknown direction: {direction!r}")

    def check_move(self, direction: Union[Direction, str]) -> Optional[LossReason]:
        """
        Return the LossReason the move would cause, or None if it is safe.

        Does not change the game.
        """
        new_head = self._next_head(Direction(direction))
        if new_head is None:
            return LossReason.RAN_INTO_WALL

        # Moving onto the tail is fine: it vacates the cell this same tick
        if self._board[new_head] is Cell.SNAKE and new_head != self._snake.tail:
            return LossReason.RAN_INTO_SNAKE

        return None

    def is_move_safe(self, direction: Union[Direction, str]) -> bool:
        return self.check_move(direction) is None

    def try_move_snake(self, direction: Union[Direction, str]) -> MoveResult:
        """
        Move the snake one cell in the given direction.

        On a loss the game is left exactly as it was and the result carries the
        reason. Otherwise the result carries the moved game and whether the
        move won it. Callers must stop moving once a result is terminal.
        """
        direction = Direction(direction)
        reason = self.check_move(direction)
        if reason is not None:
            return MoveResult(game=self, lost=reason)

        new_head = self._next_head(direction)
        before_head = self._board[new_head]
        ate_apple = before_head is Cell.APPLE

        old_tail = self._snake.advance(new_head, grow=ate_apple)
        self._board[new_head] = Cell.SNAKE

        won = False
        if ate_apple:
            try:
                self._apple_position = self._new_apple_position(self._board, self._rng)
                self._board[self._apple_position] = Cell.APPLE
            except NoSpaceLeft:
                logger.debug(f"Board full after {self._move_count + 1} moves, game won")
                won = True
        elif old_tail != new_head:
            self._board[old_tail] = Cell.EMPTY

        self._move_count += 1
        return MoveResult(game=self, won=won)

    def move_snake(self, direction: Union[Direction, str]) -> Tuple["Game", bool]:
        """
        Like try_move_snake, for callers that already know the move is safe.

        Raises:
            SnakeLostError: if the move loses the game.
        """
        result = self.try_move_snake(direction)
        if not result.ok:
            raise SnakeLostError(result.lost, result.game)
        return result.game, result.won

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def snake(self) -> List[Position]:
        """Snake positions from head to tail."""
        return self._snake.to_list()

    @property
    def apple_position(self) -> Position:
        return self._apple_position

    @property
    def snake_len(self) -> int:
        return len(self._snake)

    @property
    def snake_head(self) -> Position:
        return self._snake.head

    @property
    def snake_tail(self) -> Position:
        return self._snake.tail

    @property
    def move_count(self) -> int:
        return self._move_count

    def copy(self) -> "Game":
        """Independent copy, including the random generator's state."""
        return copy.deepcopy(self)

    def format_state(self) -> str:
        return (
            f"Move Count: {self._move_count}  Apple position: {self._apple_position}\n"
            f"{self._board}"
        )

    def print_state(self):
        """
        Prints the move count, apple position and board.
        """
        print(self.format_state(), end="")

    def __repr__(self):
        return (
            f"<Game {self._board.width}x{self._board.height} moves={self._move_count}, "
            f"apple={self._apple_position}, length={len(self._snake)}>"
        )
