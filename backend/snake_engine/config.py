"""
Runtime settings for the snake engine, read from the environment.

A .env file (found by python-dotenv, or passed explicitly) is loaded first,
so settings can be kept there instead of being exported.

    SNAKE_WIDTH     board width (default 6)
    SNAKE_HEIGHT    board height (default 6)
    SNAKE_PLAYER    player variant key (default 'rotate')
    SNAKE_SEED      seed for apple placement (default: unseeded)
    SNAKE_TICK_MS   delay between moves in milliseconds (default 100)
    LOG_LEVEL       logging level name (default WARNING)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_WIDTH = 6
DEFAULT_HEIGHT = 6
DEFAULT_PLAYER = "rotate"
DEFAULT_TICK_MS = 100
DEFAULT_LOG_LEVEL = "WARNING"


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class GameSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    player: str = DEFAULT_PLAYER
    seed: Optional[int] = None
    tick_ms: int = DEFAULT_TICK_MS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, load_env_file: bool = True, env_file: Optional[str] = None) -> "GameSettings":
        if load_env_file:
            load_dotenv(env_file)

        return cls(
            width=_env_int("SNAKE_WIDTH", DEFAULT_WIDTH),
            height=_env_int("SNAKE_HEIGHT", DEFAULT_HEIGHT),
            player=os.getenv("SNAKE_PLAYER", DEFAULT_PLAYER).strip() or DEFAULT_PLAYER,
            seed=_env_int("SNAKE_SEED", None),
            tick_ms=_env_int("SNAKE_TICK_MS", DEFAULT_TICK_MS),
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        )
