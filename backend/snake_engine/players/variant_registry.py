"""
Registry for player variants.

Maps variant keys (e.g. 'rotate', 'user') to player classes. To add a new
variant, create <name>_player.py with its Player subclass, add a loader here
and an entry to PLAYER_VARIANT_LOADERS.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player

DEFAULT_VARIANT = "rotate"


# Lazy imports so the terminal dependency is only loaded when it is used
def _get_rotate_player() -> Type[Player]:
    from .rotate_player import RotatePlayer
    return RotatePlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_user_input_player() -> Type[Player]:
    from .user_input_player import UserInputPlayer
    return UserInputPlayer


PLAYER_VARIANT_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "rotate": _get_rotate_player,
    "random": _get_random_player,
    "user": _get_user_input_player,
}

AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of 'rotate', 'random', 'user'. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip().lower()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key]()


def list_variants() -> List[Dict[str, str]]:
    """
    Return metadata about all available player variants.
    """
    return [
        {"key": "rotate", "description": "Rule-based bot sweeping the board column by column"},
        {"key": "random", "description": "Random move that avoids walls and the snake's body"},
        {"key": "user", "description": "Interactive: arrow keys to move, Escape to give up"},
    ]
