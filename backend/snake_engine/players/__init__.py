"""
Player implementations for the snake engine.

This module contains the player abstraction and the strategies that
decide the snake's next move. The interactive player is loaded lazily
through the variant registry.
"""

from .base import Player
from .random_player import RandomPlayer
from .rotate_player import RotatePlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'RotatePlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
