#!/usr/bin/env python3
"""Grid Rivals - Main entry point.

A turn-based grid strategy game where up to four agents collect resources
and fight until one is left standing.
"""

import argparse
import logging
import sys
import time

from gridrivals.engine import (
    current_agent_id,
    new_game,
    play_scripted_turn,
    submit_move,
)
from gridrivals.interface.command_parser import CommandType
from gridrivals.interface.display import DisplayManager
from gridrivals.interface.human_player import HumanPlayer
from gridrivals.models import WorldState
from gridrivals.utils.constants import (
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_AGENTS,
    SCRIPTED_TURN_DELAY,
)

logger = logging.getLogger(__name__)


class GameOrchestrator:
    """Manages the turn loop and player coordination."""

    def __init__(
        self,
        game_factory,
        human: HumanPlayer | None = None,
        delay: float = SCRIPTED_TURN_DELAY,
        max_turns: int | None = None,
        show_board: bool = True,
    ):
        """Initialize game orchestrator.

        Args:
            game_factory: Zero-argument callable returning a fresh WorldState
                (called at start and on every restart)
            human: Controller for the human seat, or None for a scripted-only game
            delay: Seconds to wait before each scripted turn
            max_turns: Stop after this many turns (scripted-only games)
            show_board: Print the map after each human-visible turn
        """
        self.game_factory = game_factory
        self.human = human
        self.delay = delay
        self.max_turns = max_turns
        self.show_board = show_board
        self.display = DisplayManager()
        self.state: WorldState = game_factory()

    @property
    def focus_id(self) -> int | None:
        if self.human is not None:
            return self.human.agent_id
        return None if self.state.is_terminal else self.state.current_agent().id

    def run(self) -> WorldState:
        """Main game loop. Returns the final state."""
        if self.show_board:
            self.display.show_board(self.state, self.focus_id)

        try:
            while current_agent_id(self.state) is not None:
                if self.max_turns is not None and self.state.turn_count >= self.max_turns:
                    print(f"\nStopped after {self.state.turn_count} turns.")
                    return self.state

                if self._human_eliminated():
                    if not self._eliminated_turn():
                        return self.state
                    continue

                agent = self.state.current_agent()
                if agent.is_human and self.human is not None:
                    if not self._human_turn():
                        return self.state
                else:
                    self._scripted_turn()

            self.display.show_victory(self.state, self.human.agent_id if self.human else None)

        except KeyboardInterrupt:
            print("\n\nGame interrupted by user. Exiting...")

        return self.state

    def restart(self) -> None:
        """Discard the current game and start a new one."""
        self.state = self.game_factory()
        logger.info(f"Game restarted (seed={self.state.seed})")
        print("\nNew game started.")

    def _human_turn(self) -> bool:
        """Read and apply one human command. Returns False when the user quits."""
        command = self.human.get_command()

        if command.type == CommandType.QUIT:
            print("Goodbye.")
            return False
        if command.type == CommandType.RESTART:
            self.restart()
        else:
            outcome = submit_move(self.state, self.human.agent_id, command.direction)
            self.display.show_outcome(outcome)

        if self.show_board:
            self.display.show_board(self.state, self.focus_id)
        return True

    def _human_eliminated(self) -> bool:
        return self.human is not None and self.state.agent_by_id(self.human.agent_id) is None

    def _eliminated_turn(self) -> bool:
        """Ask an eliminated player to restart or quit. Returns False on quit."""
        print(
            f"\nAgent {self.human.agent_id} has been eliminated. "
            "Type 'restart' for a new game or 'quit' to exit."
        )
        while True:
            command = self.human.get_command()
            if command.type == CommandType.QUIT:
                print("Goodbye.")
                return False
            if command.type == CommandType.RESTART:
                self.restart()
                if self.show_board:
                    self.display.show_board(self.state, self.focus_id)
                return True
            print("You are out of this game. Type 'restart' or 'quit'.")

    def _scripted_turn(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)
        outcome = play_scripted_turn(self.state)
        if outcome.combat is not None or outcome.forced_pass or self.human is None:
            self.display.show_outcome(outcome)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Grid Rivals - Turn-based grid strategy game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Human (agent 0) vs three scripted agents
  %(prog)s --seed 42                    # Reproducible map
  %(prog)s --width 30 --height 20       # Smaller map
  %(prog)s --watch --delay 0 --max-turns 500   # Scripted agents only
        """,
    )

    parser.add_argument("--width", type=int, default=MAP_WIDTH, help="Grid width (default: 100)")
    parser.add_argument(
        "--height", type=int, default=MAP_HEIGHT, help="Grid height (default: 100)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for map generation (default: random)",
    )
    parser.add_argument(
        "--agents",
        type=int,
        default=MAX_AGENTS,
        help="Number of agents, 2-4 (default: 4)",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Make every agent scripted and watch them play",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=SCRIPTED_TURN_DELAY,
        help="Seconds between scripted turns (default: 0.5)",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=None,
        help="Stop after this many turns (useful with --watch)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    human_seats = () if args.watch else (0,)

    # Only the first game uses the requested seed; restarts get a new map
    seeds = iter([args.seed])

    def game_factory() -> WorldState:
        return new_game(
            width=args.width,
            height=args.height,
            seed=next(seeds, None),
            num_agents=args.agents,
            human_seats=human_seats,
        )

    try:
        human = None if args.watch else HumanPlayer(0)
        orchestrator = GameOrchestrator(
            game_factory,
            human=human,
            delay=args.delay,
            max_turns=args.max_turns,
            show_board=not args.watch,
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("\n" + "=" * 60)
    print("Grid Rivals")
    print("=" * 60)
    print(f"Seed: {orchestrator.state.seed}. Last agent standing wins. Type 'help' for commands.\n")

    final_state = orchestrator.run()
    if args.watch and final_state.winner_id is None:
        print(f"No winner yet, {len(final_state.agents)} agents remain.")


if __name__ == "__main__":
    main()
