"""World state container and turn sequencer."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .agent import Agent
from .grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class WorldState:
    """Authoritative game state: grid, roster, and whose turn it is.

    The order of ``agents`` is the turn order. Eliminated agents are spliced
    out of the roster rather than flagged, so ``turn_cursor`` is always kept
    inside the current roster. Once ``winner_id`` is set the state is terminal
    and every mutator here becomes a no-op.
    """

    grid: Grid
    agents: List[Agent] = field(default_factory=list)
    turn_cursor: int = 0  # Index into agents
    turn_count: int = 0  # Accepted actions so far
    winner_id: Optional[int] = None
    seed: Optional[int] = None  # Map seed, when generated

    def __post_init__(self):
        """Validate world state after initialization."""
        if not self.agents:
            raise ValueError("World needs at least one agent")
        ids = [agent.id for agent in self.agents]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate agent ids: {ids}")
        for agent in self.agents:
            if not self.grid.in_bounds(agent.x, agent.y):
                raise ValueError(
                    f"Agent {agent.id} at ({agent.x}, {agent.y}) is outside the grid"
                )
        if not (0 <= self.turn_cursor < len(self.agents)):
            raise ValueError(
                f"Invalid turn_cursor: {self.turn_cursor} (roster has {len(self.agents)} agents)"
            )
        if self.turn_count < 0:
            raise ValueError(f"Invalid turn_count: {self.turn_count} (must be >= 0)")

    @property
    def is_terminal(self) -> bool:
        return self.winner_id is not None

    def current_agent(self) -> Agent:
        return self.agents[self.turn_cursor]

    def agent_by_id(self, agent_id: int) -> Optional[Agent]:
        for agent in self.agents:
            if agent.id == agent_id:
                return agent
        return None

    def agent_at(self, x: int, y: int, exclude: Optional[int] = None) -> Optional[Agent]:
        """Return the first live agent (in turn order) standing on (x, y).

        Args:
            x: Column
            y: Row
            exclude: Agent id to skip (usually the one asking)

        Returns:
            Agent on that cell, or None
        """
        for agent in self.agents:
            if agent.id != exclude and agent.x == x and agent.y == y:
                return agent
        return None

    def replace_agent(self, agent: Agent) -> None:
        """Commit a new value for the roster entry with the same id."""
        for i, existing in enumerate(self.agents):
            if existing.id == agent.id:
                self.agents[i] = agent
                return
        raise KeyError(f"Agent {agent.id} is not in the roster")

    def advance_turn(self) -> None:
        """Hand the turn to the next live agent and count the action."""
        if self.is_terminal:
            return
        self.turn_cursor = (self.turn_cursor + 1) % len(self.agents)
        self.turn_count += 1

    def remove_agent(self, agent_id: int) -> None:
        """Splice an eliminated agent out of the roster.

        The cursor keeps pointing at the same upcoming agent: removing an
        entry before it shifts it down by one, and it is then wrapped to the
        new roster length. When one agent remains it becomes the winner.
        """
        if self.is_terminal:
            return
        index = next((i for i, a in enumerate(self.agents) if a.id == agent_id), None)
        if index is None:
            raise KeyError(f"Agent {agent_id} is not in the roster")

        del self.agents[index]
        if index < self.turn_cursor:
            self.turn_cursor -= 1
        self.turn_cursor %= len(self.agents)
        logger.info(f"Agent {agent_id} eliminated, {len(self.agents)} remaining")

        if len(self.agents) == 1:
            self.winner_id = self.agents[0].id
            self.turn_cursor = 0
            logger.info(f"Agent {self.winner_id} wins after {self.turn_count} turns")
