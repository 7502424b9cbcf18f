"""Win-condition queries.

The game ends when one agent remains. WorldState.remove_agent declares the
winner as it splices the roster; these helpers are what drivers read.
"""

from typing import Optional

from ..models import WorldState


def is_terminal(state: WorldState) -> bool:
    """Return True once a winner has been declared."""
    return state.winner_id is not None


def winner(state: WorldState) -> Optional[int]:
    """Return the winning agent id, or None while the game is running."""
    return state.winner_id


def check_victory(state: WorldState) -> bool:
    """Declare the sole survivor the winner if only one agent is left.

    Roster removal already does this; the check exists for states assembled
    by hand (tests, scenarios) with a single agent.

    Args:
        state: Current world state

    Returns:
        True if the game has a winner, False otherwise
    """
    if state.winner_id is None and len(state.agents) == 1:
        state.winner_id = state.agents[0].id
        state.turn_cursor = 0
    return state.winner_id is not None
