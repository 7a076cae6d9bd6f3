"""
Exceptions raised by the game engine.
"""


class NoSpaceLeft(Exception):
    """No empty cell remains for a new apple. The engine turns this into a win."""


class SnakeLostError(Exception):
    """
    Raised by Game.move_snake when the move loses the game.

    Attributes:
        reason: the LossReason
        game: the unchanged game, as it was before the move
    """

    def __init__(self, reason, game):
        super().__init__(f"Snake lost: {reason.value}")
        self.reason = reason
        self.game = game
