"""Combat resolution between two agents on the same cell.

This module handles:
1. Attack and defense power
2. Single-exchange damage (no counter-attack, no rounds)
3. Elimination: resource transfer and bonus experience

``resolve_combat`` is pure: it returns new agent values and never touches the
world. ``apply_combat`` commits a result to the world in one step.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from ..models import Agent, Resource, WorldState
from ..utils.constants import (
    ATTACK_WEAPON_FACTOR,
    COMBAT_EXPERIENCE,
    DEFENSE_EXPERIENCE_DIVISOR,
    DEFENSE_WEAPON_FACTOR,
    ELIMINATION_BONUS_EXPERIENCE,
)

logger = logging.getLogger(__name__)


@dataclass
class CombatResult:
    """Result of a combat resolution.

    Attributes:
        attacker: Attacker after the exchange
        defender: Defender after the exchange (health may be <= 0)
        attack_power: Attacker's attack power before the exchange
        defense_power: Defender's defense power before the exchange
        damage: Health removed from the defender
        eliminated: True if the defender dropped to 0 health or below
    """

    attacker: Agent
    defender: Agent
    attack_power: float
    defense_power: float
    damage: float
    eliminated: bool


@dataclass
class CombatEvent:
    """Record of a combat that occurred, for drivers and logs.

    Attributes:
        attacker_id: ID of the moving agent
        defender_id: ID of the agent that was standing on the cell
        x: Column where combat occurred
        y: Row where combat occurred
        attack_power: Attacker's power
        defense_power: Defender's power
        damage: Damage dealt
        defender_health: Defender health after damage
        eliminated: Whether the defender was removed
        winner_id: Set when this combat ended the game
    """

    attacker_id: int
    defender_id: int
    x: int
    y: int
    attack_power: float
    defense_power: float
    damage: float
    defender_health: float
    eliminated: bool
    winner_id: Optional[int] = None


def attack_power(agent: Agent) -> float:
    return agent.weapon * ATTACK_WEAPON_FACTOR + agent.experience


def defense_power(agent: Agent) -> float:
    return agent.weapon * DEFENSE_WEAPON_FACTOR + agent.experience / DEFENSE_EXPERIENCE_DIVISOR


def resolve_combat(attacker: Agent, defender: Agent) -> CombatResult:
    """Resolve one exchange between attacker and defender.

    Combat rules:
    - damage = max(0, attack_power - defense_power), never negative
    - defender loses damage health, attacker gains 2 experience either way
    - defender at 0 health or below is eliminated: attacker takes all of the
      defender's gold, food and weapons and gains 10 bonus experience

    Args:
        attacker: Agent that moved onto the cell
        defender: Agent already on the cell

    Returns:
        CombatResult holding new agent values (inputs are not modified)
    """
    attack = attack_power(attacker)
    defense = defense_power(defender)
    damage = max(0, attack - defense)

    new_defender = replace(defender, health=defender.health - damage)
    experience = attacker.experience + COMBAT_EXPERIENCE
    resources = dict(attacker.resources)

    eliminated = new_defender.health <= 0
    if eliminated:
        for kind in Resource:
            resources[kind] += defender.resources[kind]
        experience += ELIMINATION_BONUS_EXPERIENCE

    new_attacker = replace(attacker, experience=experience, resources=resources)

    return CombatResult(
        attacker=new_attacker,
        defender=new_defender,
        attack_power=attack,
        defense_power=defense,
        damage=damage,
        eliminated=eliminated,
    )


def apply_combat(state: WorldState, attacker: Agent, defender: Agent) -> CombatEvent:
    """Resolve combat and commit both agents to the world.

    On elimination the defender is removed from the roster, which may end
    the game (see WorldState.remove_agent).

    Args:
        state: Current world state
        attacker: Moving agent (already relocated)
        defender: Agent occupying the destination

    Returns:
        CombatEvent describing the exchange
    """
    result = resolve_combat(attacker, defender)

    state.replace_agent(result.attacker)
    if result.eliminated:
        state.remove_agent(defender.id)
    else:
        state.replace_agent(result.defender)

    logger.info(
        f"Agent {attacker.id} attacks agent {defender.id} at ({attacker.x}, {attacker.y}): "
        f"{result.attack_power} vs {result.defense_power}, damage {result.damage}, "
        f"defender health {result.defender.health}"
        + (" (eliminated)" if result.eliminated else "")
    )

    return CombatEvent(
        attacker_id=attacker.id,
        defender_id=defender.id,
        x=attacker.x,
        y=attacker.y,
        attack_power=result.attack_power,
        defense_power=result.defense_power,
        damage=result.damage,
        defender_health=result.defender.health,
        eliminated=result.eliminated,
        winner_id=state.winner_id,
    )
