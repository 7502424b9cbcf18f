"""One-ply greedy move selection for scripted agents."""

import logging
import math
from typing import Optional

from ..models import Agent, Direction, WorldState
from ..utils.constants import (
    AGGRESSION_MULTIPLIER,
    FAVORABLE_FIGHT_SCORE,
    RESOURCE_SCORE,
    UNFAVORABLE_FIGHT_SCORE,
)
from .combat import attack_power, defense_power

logger = logging.getLogger(__name__)


def score_move(state: WorldState, agent: Agent, direction: Direction) -> Optional[float]:
    """Score one candidate step for an agent.

    Scoring:
    - water destination: unscoreable (None)
    - +10 if the destination holds a resource
    - +20 if another agent is there and we would out-power it, else -20
    - subtotal multiplied by the aggression multiplier (2)

    Args:
        state: Current world state
        agent: Agent choosing a move
        direction: Candidate direction

    Returns:
        Score, or None if the destination is water
    """
    x, y = state.grid.clamp(agent.x + direction.dx, agent.y + direction.dy)
    tile = state.grid.tile_at(x, y)
    if not tile.passable:
        return None

    score = 0
    if tile.resource is not None:
        score += RESOURCE_SCORE

    opponent = state.agent_at(x, y, exclude=agent.id)
    if opponent is not None:
        if attack_power(agent) > defense_power(opponent):
            score += FAVORABLE_FIGHT_SCORE
        else:
            score += UNFAVORABLE_FIGHT_SCORE

    return score * AGGRESSION_MULTIPLIER


def decide(state: WorldState, agent_id: int) -> Direction:
    """Choose a direction for a scripted agent.

    Candidates are evaluated left, right, up, down. The first candidate whose
    score strictly beats the best so far wins, so ties keep the earlier one.
    If every candidate is water, LEFT is returned.

    Args:
        state: Current world state
        agent_id: Agent to decide for

    Returns:
        Chosen Direction
    """
    agent = state.agent_by_id(agent_id)
    if agent is None:
        raise KeyError(f"Agent {agent_id} is not in the roster")

    best_direction = Direction.LEFT
    best_score = -math.inf
    for direction in Direction:
        score = score_move(state, agent, direction)
        if score is not None and score > best_score:
            best_score = score
            best_direction = direction

    logger.debug(f"Agent {agent_id} chose {best_direction.name.lower()} (score {best_score})")
    return best_direction
