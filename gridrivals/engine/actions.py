"""Action resolution: validate and apply a single agent's move.

This module handles:
1. Turn-ownership and game-over checks
2. Clamping the destination to the grid
3. The water blocking rule (rejected, turn not consumed)
4. Relocation and exactly-once resource pickup
5. Turn advance, then combat against an agent already on the cell

Rejected moves never raise. The validation step raises IllegalMove or
GameOver internally and the resolver turns that into a rejected outcome
with the state left untouched.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from ..errors import GameError, GameOver, IllegalMove, RejectionType
from ..models import Direction, Resource, WorldState
from ..utils.constants import PICKUP_EXPERIENCE
from .combat import CombatEvent, apply_combat

logger = logging.getLogger(__name__)


@dataclass
class MoveOutcome:
    """Result of a move attempt.

    Attributes:
        agent_id: Agent that tried to move
        accepted: True if the move was applied and the turn consumed
        direction: Direction requested (None if it could not be parsed)
        origin: Position before the move
        destination: Position after the move (same as origin when rejected)
        collected: Resource picked up on arrival, if any
        combat: Combat triggered by the move, if any
        forced_pass: True when a blocked move still used the turn
        error: IllegalMove or GameOver explaining a rejection
    """

    agent_id: int
    accepted: bool
    direction: Optional[Direction] = None
    origin: Optional[tuple[int, int]] = None
    destination: Optional[tuple[int, int]] = None
    collected: Optional[Resource] = None
    combat: Optional[CombatEvent] = None
    forced_pass: bool = False
    error: Optional[GameError] = None

    @property
    def rejection(self) -> Optional[RejectionType]:
        return self.error.rejection if self.error is not None else None

    @property
    def reason(self) -> Optional[str]:
        return self.error.message if self.error is not None else None


def apply_move(state: WorldState, agent_id: int, dx: int, dy: int) -> MoveOutcome:
    """Validate and apply one cardinal step for an agent.

    Steps:
    1. Reject if the game is over, the agent is eliminated, or it is not
       this agent's turn
    2. Reject anything other than a single cardinal step
    3. Clamp the destination to the grid (moving off the edge stays put)
    4. Reject water destinations; the same agent must choose again
    5. Relocate, collect any resource (+1 counter, +1 experience, tile cleared)
    6. Advance the turn
    7. Fight the first other agent standing on the destination

    Args:
        state: Current world state (mutated in place on success)
        agent_id: ID of the agent moving
        dx: Column delta
        dy: Row delta

    Returns:
        MoveOutcome describing what happened
    """
    try:
        direction = _validate_move(state, agent_id, dx, dy)
    except GameError as e:
        logger.debug(f"Rejected move for agent {agent_id} ({dx}, {dy}): {e}")
        return MoveOutcome(agent_id=agent_id, accepted=False, error=e)

    agent = state.current_agent()
    origin = agent.position
    x, y = state.grid.clamp(agent.x + dx, agent.y + dy)

    try:
        _check_passable(state, x, y)
    except IllegalMove as e:
        logger.debug(f"Rejected move for agent {agent_id} {direction.name}: {e}")
        return MoveOutcome(
            agent_id=agent_id,
            accepted=False,
            direction=direction,
            origin=origin,
            destination=origin,
            error=e,
        )

    resources = dict(agent.resources)
    experience = agent.experience
    collected = state.grid.collect_resource(x, y)
    if collected is not None:
        resources[collected] += 1
        experience += PICKUP_EXPERIENCE

    mover = replace(agent, x=x, y=y, resources=resources, experience=experience)
    state.replace_agent(mover)
    state.advance_turn()

    logger.info(
        f"Agent {agent_id} moved {direction.name.lower()} to ({x}, {y})"
        + (f", collected {collected.value}" if collected else "")
    )

    combat = None
    defender = state.agent_at(x, y, exclude=agent_id)
    if defender is not None:
        combat = apply_combat(state, mover, defender)

    return MoveOutcome(
        agent_id=agent_id,
        accepted=True,
        direction=direction,
        origin=origin,
        destination=(x, y),
        collected=collected,
        combat=combat,
    )


def _validate_move(state: WorldState, agent_id: int, dx: int, dy: int) -> Direction:
    """Check game state, turn ownership and step shape. Raises on failure.

    Returns:
        The Direction matching (dx, dy)

    Raises:
        GameOver: If a winner has been declared
        IllegalMove: If the agent was eliminated, it is not its turn, or the
            step is not cardinal
    """
    if state.is_terminal:
        raise GameOver(state.winner_id)

    if state.agent_by_id(agent_id) is None:
        raise IllegalMove(RejectionType.ELIMINATED, f"Agent {agent_id} has been eliminated")

    current = state.current_agent()
    if current.id != agent_id:
        raise IllegalMove(
            RejectionType.NOT_YOUR_TURN,
            f"It is agent {current.id}'s turn, not agent {agent_id}'s",
        )

    try:
        return Direction.from_delta(dx, dy)
    except ValueError as e:
        raise IllegalMove(RejectionType.INVALID_DIRECTION, str(e)) from None


def _check_passable(state: WorldState, x: int, y: int) -> None:
    if not state.grid.tile_at(x, y).passable:
        raise IllegalMove(RejectionType.BLOCKED_BY_WATER, f"({x}, {y}) is water")
