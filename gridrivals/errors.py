"""Exception taxonomy for the game engine.

Move-level errors (IllegalMove, GameOver) are raised inside the action
resolver's validation step and converted into rejected MoveOutcome records,
so drivers can always retry with different input. ConfigurationError is the
only exception that escapes the engine: it signals a driver bug such as a
non-positive grid dimension.
"""

from enum import Enum


class RejectionType(Enum):
    """Classification of rejected moves."""

    NOT_YOUR_TURN = "not_your_turn"
    ELIMINATED = "eliminated"
    INVALID_DIRECTION = "invalid_direction"
    BLOCKED_BY_WATER = "blocked_by_water"
    GAME_OVER = "game_over"


class GameError(Exception):
    """Base class for engine errors."""


class IllegalMove(GameError):
    """Move violates turn ownership, direction, or terrain rules. State unchanged."""

    def __init__(self, rejection: RejectionType, message: str):
        """Initialize illegal move error.

        Args:
            rejection: Classification of the rejection
            message: Human-readable error message
        """
        self.rejection = rejection
        self.message = message
        super().__init__(message)


class GameOver(GameError):
    """Action attempted after a winner was declared. State unchanged."""

    rejection = RejectionType.GAME_OVER

    def __init__(self, winner_id: int | None):
        self.winner_id = winner_id
        self.message = f"Game is over (winner: agent {winner_id})"
        super().__init__(self.message)


class ConfigurationError(ValueError):
    """Invalid game construction parameters."""
