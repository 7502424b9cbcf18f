"""Turn orchestration: the engine surface that drivers call.

A turn is one agent's action:
1. Human seat: the driver passes the user's direction to submit_move
2. Scripted seat: play_scripted_turn asks the decision procedure for a
   direction and applies it

Each call is atomic with respect to the world state. Scheduling (delays
between scripted turns, cancellation on restart) belongs to the driver.
"""

import logging
from typing import Optional, Union

from ..errors import GameOver, IllegalMove, RejectionType
from ..models import Direction, WorldState
from .actions import MoveOutcome, apply_move
from .decision import decide
from .victory import check_victory

logger = logging.getLogger(__name__)


def current_agent_id(state: WorldState) -> Optional[int]:
    """Return the id of the agent expected to act, or None once the game is over."""
    if check_victory(state):
        return None
    return state.current_agent().id


def is_stranded(state: WorldState, agent_id: int) -> bool:
    """Return True if every step for the agent lands on water.

    A step off the edge lands on the agent's own cell, so an agent at the edge
    of the map can be stranded by water under its own feet.
    """
    agent = state.agent_by_id(agent_id)
    if agent is None:
        return False
    for direction in Direction:
        x, y = state.grid.clamp(agent.x + direction.dx, agent.y + direction.dy)
        if state.grid.tile_at(x, y).passable:
            return False
    return True


def submit_move(
    state: WorldState, agent_id: int, direction: Union[Direction, str]
) -> MoveOutcome:
    """Submit a move for an agent, by Direction or by name ("up", "left", ...).

    Illegal input (wrong turn, unknown direction, water, finished game) is
    returned as a rejected outcome and leaves the state unchanged. The one
    exception is an agent with no legal move at all: its blocked move is
    recorded as a forced pass and the turn moves on.

    Args:
        state: Current world state
        agent_id: Agent making the move
        direction: Direction member or its case-insensitive name

    Returns:
        MoveOutcome for the attempt
    """
    check_victory(state)

    if not isinstance(direction, Direction):
        try:
            direction = Direction.from_name(str(direction))
        except ValueError as e:
            logger.debug(f"Rejected move for agent {agent_id}: {e}")
            return MoveOutcome(
                agent_id=agent_id,
                accepted=False,
                error=IllegalMove(RejectionType.INVALID_DIRECTION, str(e)),
            )

    outcome = apply_move(state, agent_id, direction.dx, direction.dy)
    if outcome.rejection == RejectionType.BLOCKED_BY_WATER and is_stranded(state, agent_id):
        _force_pass(state, outcome)
    return outcome


def play_scripted_turn(state: WorldState) -> MoveOutcome:
    """Decide and apply a move for the agent whose turn it is.

    A scripted agent always uses its turn. If the chosen direction is blocked
    by water (only possible when every neighbour is water) the agent stays
    where it is and the turn passes anyway.

    Args:
        state: Current world state

    Returns:
        MoveOutcome; ``forced_pass`` is set when the move was blocked
    """
    agent_id = current_agent_id(state)
    if agent_id is None:
        return MoveOutcome(
            agent_id=state.winner_id, accepted=False, error=GameOver(state.winner_id)
        )

    direction = decide(state, agent_id)
    outcome = apply_move(state, agent_id, direction.dx, direction.dy)

    if outcome.rejection == RejectionType.BLOCKED_BY_WATER:
        _force_pass(state, outcome)

    return outcome


def run_scripted_turns(state: WorldState, max_turns: Optional[int] = None) -> list[MoveOutcome]:
    """Play scripted turns until a human seat is up or the game ends.

    Args:
        state: Current world state
        max_turns: Optional cap on the number of turns played (headless runs
            with no human seat use this to bound the game)

    Returns:
        Outcomes in the order they happened
    """
    outcomes = []
    while current_agent_id(state) is not None and not state.current_agent().is_human:
        if max_turns is not None and len(outcomes) >= max_turns:
            break
        outcomes.append(play_scripted_turn(state))
    return outcomes


def _force_pass(state: WorldState, outcome: MoveOutcome) -> None:
    state.advance_turn()
    outcome.forced_pass = True
    logger.info(f"Agent {outcome.agent_id} is surrounded by water and passes")
