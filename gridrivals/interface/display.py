"""Terminal output: status panel, turn log, and victory screen."""

from ..engine.actions import MoveOutcome
from ..models import Resource, WorldState
from .renderer import MapRenderer


class DisplayManager:
    """Prints game state to stdout for the terminal driver."""

    def __init__(self, renderer: MapRenderer | None = None):
        self.renderer = renderer or MapRenderer()

    def show_board(self, state: WorldState, focus_id: int | None) -> None:
        """Print the map viewport followed by the status panel."""
        print()
        print(self.renderer.render(state, focus_id))
        print()
        self.show_status(state, focus_id)

    def show_status(self, state: WorldState, focus_id: int | None) -> None:
        """Print the focus agent's stats and the turn counter."""
        agent = state.agent_by_id(focus_id) if focus_id is not None else None
        if agent is not None:
            print(
                f"Agent {agent.id} at ({agent.x}, {agent.y})  "
                f"Gold: {agent.resources[Resource.GOLD]}  "
                f"Food: {agent.resources[Resource.FOOD]}  "
                f"Weapons: {agent.resources[Resource.WEAPON]}  "
                f"Health: {agent.health:g}  "
                f"Experience: {agent.experience}"
            )
        elif focus_id is not None:
            print(f"Agent {focus_id} has been eliminated.")
        print(f"Turn: {state.turn_count}  Agents left: {len(state.agents)}")

    def format_outcome(self, outcome: MoveOutcome) -> str:
        """Describe one move outcome in a single line."""
        who = f"Agent {outcome.agent_id}"
        if outcome.forced_pass:
            return f"{who} is surrounded by water and passes."
        if not outcome.accepted:
            return f"❌ {outcome.reason}"

        x, y = outcome.destination
        line = f"{who} moves {outcome.direction.name.lower()} to ({x}, {y})"
        if outcome.collected is not None:
            line += f" and collects {outcome.collected.value}"
        if outcome.combat is not None:
            combat = outcome.combat
            line += (
                f". ⚔ Attacks agent {combat.defender_id} for {combat.damage:g} damage"
            )
            if combat.eliminated:
                line += f", agent {combat.defender_id} is eliminated"
        return line + "."

    def show_outcome(self, outcome: MoveOutcome) -> None:
        print(self.format_outcome(outcome))

    def show_help(self) -> None:
        print(
            "\nCommands:\n"
            "  w / a / s / d       Move up / left / down / right\n"
            "  up, down, left, right\n"
            "  restart             Start a new game\n"
            "  help                Show this help\n"
            "  quit                Exit\n"
            "\nLegend: 0-3 agents, $ gold, % food, ! weapon, "
            ". grass, f forest, ^ mountain, ~ water (impassable)\n"
        )

    def show_victory(self, state: WorldState, human_id: int | None) -> None:
        """Print the end-of-game banner."""
        print("\n" + "=" * 60)
        if state.winner_id is not None and state.winner_id == human_id:
            print("You win!")
        else:
            print(f"Agent {state.winner_id} wins.")
        print(f"Game over after {state.turn_count} turns.")
        print("=" * 60)
