"""Read-only snapshots of game state for rendering and the web API.

Snapshots are plain JSON-compatible dicts built fresh on each call, so
drivers can hold on to them without aliasing engine state.
"""

from typing import Any, Optional

from ..engine.actions import MoveOutcome
from ..engine.combat import CombatEvent
from ..models import Agent, Tile, WorldState


def serialize_tile(tile: Tile) -> dict[str, Any]:
    return {
        "type": tile.terrain.value,
        "resource": tile.resource.value if tile.resource else None,
    }


def serialize_agent(agent: Agent) -> dict[str, Any]:
    """Convert Agent to dict for rendering or API responses."""
    return {
        "id": agent.id,
        "x": agent.x,
        "y": agent.y,
        "control": agent.control.value,
        "health": agent.health,
        "experience": agent.experience,
        "resources": {kind.value: count for kind, count in agent.resources.items()},
    }


def serialize_world(
    state: WorldState, viewport: Optional[tuple[int, int, int, int]] = None
) -> dict[str, Any]:
    """Convert world state to a JSON-compatible dict.

    Args:
        state: World state to serialize
        viewport: Optional (x, y, width, height) window; only those tiles are
            included, clipped to the grid. The full grid is sent otherwise.

    Returns:
        Dictionary with grid, agents, and turn information

    Example:
        serialize_world(state, viewport=(40, 40, 21, 11))
    """
    if viewport is None:
        x0, y0, width, height = 0, 0, state.grid.width, state.grid.height
    else:
        x0, y0, width, height = viewport
        x0 = max(0, min(x0, state.grid.width - 1))
        y0 = max(0, min(y0, state.grid.height - 1))
        width = max(0, min(width, state.grid.width - x0))
        height = max(0, min(height, state.grid.height - y0))

    tiles = [
        [serialize_tile(state.grid.tile_at(x, y)) for x in range(x0, x0 + width)]
        for y in range(y0, y0 + height)
    ]

    current = None if state.is_terminal else state.current_agent().id

    return {
        "width": state.grid.width,
        "height": state.grid.height,
        "seed": state.seed,
        "viewport": {"x": x0, "y": y0, "width": width, "height": height},
        "tiles": tiles,
        "agents": [serialize_agent(agent) for agent in state.agents],
        "currentAgent": current,
        "turn": state.turn_count,
        "winner": state.winner_id,
    }


def serialize_combat(event: CombatEvent) -> dict[str, Any]:
    return {
        "attacker": event.attacker_id,
        "defender": event.defender_id,
        "x": event.x,
        "y": event.y,
        "attackPower": event.attack_power,
        "defensePower": event.defense_power,
        "damage": event.damage,
        "defenderHealth": event.defender_health,
        "eliminated": event.eliminated,
        "winner": event.winner_id,
    }


def serialize_outcome(outcome: MoveOutcome) -> dict[str, Any]:
    """Convert a MoveOutcome to dict (used for WebSocket turn events)."""
    return {
        "agent": outcome.agent_id,
        "accepted": outcome.accepted,
        "direction": outcome.direction.name.lower() if outcome.direction else None,
        "from": list(outcome.origin) if outcome.origin else None,
        "to": list(outcome.destination) if outcome.destination else None,
        "collected": outcome.collected.value if outcome.collected else None,
        "combat": serialize_combat(outcome.combat) if outcome.combat else None,
        "forcedPass": outcome.forced_pass,
        "rejection": outcome.rejection.value if outcome.rejection else None,
        "reason": outcome.reason,
    }
