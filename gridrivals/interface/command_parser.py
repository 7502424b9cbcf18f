"""Command parser for the human seat.

Turns keyboard-style input ("w", "left", "go up") into a Command the game
loop can act on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models import Direction


class ErrorType(Enum):
    """Classification of command input errors."""

    UNKNOWN_COMMAND = "unknown_command"
    EMPTY_INPUT = "empty_input"


class CommandParseError(Exception):
    """Raised when command parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class CommandType(Enum):
    MOVE = "move"
    RESTART = "restart"
    HELP = "help"
    QUIT = "quit"


@dataclass
class Command:
    type: CommandType
    direction: Optional[Direction] = None


MOVE_KEYS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
    "up": Direction.UP,
    "left": Direction.LEFT,
    "down": Direction.DOWN,
    "right": Direction.RIGHT,
    "north": Direction.UP,
    "west": Direction.LEFT,
    "south": Direction.DOWN,
    "east": Direction.RIGHT,
}

SPECIAL_COMMANDS = {
    "restart": CommandType.RESTART,
    "r": CommandType.RESTART,
    "help": CommandType.HELP,
    "h": CommandType.HELP,
    "?": CommandType.HELP,
    "quit": CommandType.QUIT,
    "q": CommandType.QUIT,
    "exit": CommandType.QUIT,
}


class CommandParser:
    """Parse user input into Commands."""

    def parse(self, text: str) -> Command:
        """Parse a command string.

        Supported formats:
        - "w" / "a" / "s" / "d"
        - "up" / "down" / "left" / "right" (also north/south/east/west)
        - "move <direction>" or "go <direction>"
        - "restart", "help", "quit" (and their one-letter forms)

        Args:
            text: Raw input line

        Returns:
            Parsed Command

        Raises:
            CommandParseError: If input is empty or not recognized
        """
        words = text.strip().lower().split()
        if not words:
            raise CommandParseError(ErrorType.EMPTY_INPUT, "Please enter a command")

        if words[0] in ("move", "go") and len(words) == 2:
            words = words[1:]

        if len(words) == 1:
            word = words[0]
            if word in MOVE_KEYS:
                return Command(CommandType.MOVE, MOVE_KEYS[word])
            if word in SPECIAL_COMMANDS:
                return Command(SPECIAL_COMMANDS[word])

        raise CommandParseError(
            ErrorType.UNKNOWN_COMMAND, f"Unknown command: '{text.strip()}'"
        )
