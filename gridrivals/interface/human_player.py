"""Human player controller for CLI interaction.

This module provides the HumanPlayer class which reads commands for the
human seat from the terminal.
"""

from .command_parser import Command, CommandParseError, CommandParser, CommandType, ErrorType
from .display import DisplayManager


class HumanPlayer:
    """Human player controller class.

    Reads lines until one parses into a command. Help is handled here and
    never returned to the game loop.
    """

    def __init__(self, agent_id: int, input_func=input):
        """Initialize human player controller.

        Args:
            agent_id: Agent this player controls
            input_func: Line reader (replaced in tests)
        """
        self.agent_id = agent_id
        self.display = DisplayManager()
        self.parser = CommandParser()
        self.input_func = input_func

    def _format_error_message(self, error: CommandParseError) -> str:
        formatted = f"❌ {error.message}"
        if error.error_type == ErrorType.UNKNOWN_COMMAND:
            formatted += "\nAvailable commands: w, a, s, d, restart, help, quit"
        return formatted

    def get_command(self) -> Command:
        """Prompt until the user enters a move, restart, or quit."""
        while True:
            try:
                command = self.parser.parse(self.input_func(f"Agent {self.agent_id}> "))
            except CommandParseError as e:
                print(self._format_error_message(e))
                continue

            if command.type == CommandType.HELP:
                self.display.show_help()
                continue

            return command
