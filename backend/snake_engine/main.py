#!/usr/bin/env python3
"""
Run a game of snake in the terminal.

Usage:
    snake-engine
    snake-engine --player user --width 10 --height 10
    snake-engine --player random --seed 42 --tick-ms 50
    snake-engine --list-players
"""

import argparse
import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from snake_engine.config import GameSettings
from snake_engine.domain import Game, LossReason
from snake_engine.players import Player, get_player_class, list_variants, AVAILABLE_VARIANTS

logger = logging.getLogger(__name__)

WON_MESSAGE = "You won!"
GAVE_UP_MESSAGE = "You gave up like the loser you are"
LOSS_MESSAGES = {
    LossReason.RAN_INTO_WALL: "You ran into a wall dummy",
    LossReason.RAN_INTO_SNAKE: "You ran into yourself dummy",
}


@dataclass
class GameSummary:
    """How a game ended."""
    outcome: str  # 'won', 'lost' or 'gave_up'
    message: str
    game: Game
    reason: Optional[LossReason] = None

    @property
    def moves(self) -> int:
        return self.game.move_count

    @property
    def snake_length(self) -> int:
        return self.game.snake_len


def print_game(game: Game) -> None:
    game.print_state()


def run_game(
    game: Game,
    player: Player,
    tick_seconds: float = 0.1,
    render: Callable[[Game], None] = print_game,
    sleep: Callable[[float], None] = time.sleep,
) -> GameSummary:
    """
    Run the game loop until the snake wins, loses or the player gives up.

    Each tick: wait, render, ask the player for a move, apply it.
    """
    logger.info(f"Starting {game.board.width}x{game.board.height} game with {player.name}")

    while True:
        sleep(tick_seconds)
        render(game)

        direction = player.get_move(game)
        if direction is None:
            summary = GameSummary(outcome="gave_up", message=GAVE_UP_MESSAGE, game=game)
            break

        result = game.try_move_snake(direction)
        game = result.game
        if not result.ok:
            summary = GameSummary(
                outcome="lost",
                message=LOSS_MESSAGES[result.lost],
                game=game,
                reason=result.lost,
            )
            break
        if result.won:
            render(game)
            summary = GameSummary(outcome="won", message=WON_MESSAGE, game=game)
            break

    logger.info(
        f"Game ended ({summary.outcome}) after {summary.moves} moves, "
        f"snake length {summary.snake_length}"
    )
    return summary


def build_parser(settings: GameSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play single-player snake in the terminal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--width", type=int, default=settings.width,
                        help="Width of the board (at least 5)")
    parser.add_argument("--height", type=int, default=settings.height,
                        help="Height of the board (at least 5)")
    parser.add_argument("--player", type=str, default=settings.player,
                        choices=AVAILABLE_VARIANTS,
                        help="Who decides the moves")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for apple placement, for reproducible games")
    parser.add_argument("--tick-ms", type=int, default=settings.tick_ms,
                        help="Delay between moves in milliseconds")
    parser.add_argument("--list-players", action="store_true",
                        help="List the available players and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = GameSettings.from_env()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.list_players:
        for variant in list_variants():
            print(f"{variant['key']:8} {variant['description']}")
        return 0

    try:
        game = Game(args.width, args.height, rng=random.Random(args.seed))
        player = get_player_class(args.player)()
    except ValueError as e:
        parser.error(str(e))

    summary = run_game(game, player, tick_seconds=args.tick_ms / 1000)

    print(f"Game over!\n{summary.message}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
