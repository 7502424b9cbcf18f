"""Agent data model: a player occupying one grid cell."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from ..utils.constants import (
    STARTING_FOOD,
    STARTING_GOLD,
    STARTING_HEALTH,
    STARTING_WEAPON,
)
from .tile import Resource


class ControlMode(str, Enum):
    """Who chooses the agent's moves."""

    HUMAN = "human"
    SCRIPTED = "scripted"


def starting_resources() -> Dict[Resource, int]:
    """Return a fresh starting inventory."""
    return {
        Resource.GOLD: STARTING_GOLD,
        Resource.FOOD: STARTING_FOOD,
        Resource.WEAPON: STARTING_WEAPON,
    }


@dataclass
class Agent:
    """A human- or script-controlled player.

    Health starts at 100 and the agent is eliminated (removed from the roster)
    once it drops to 0 or below. Defence uses half of experience, so health can
    carry a half point after a fight.
    """

    id: int  # Stable id, also the starting corner index
    x: int
    y: int
    resources: Dict[Resource, int] = field(default_factory=starting_resources)
    control: ControlMode = ControlMode.SCRIPTED
    health: float = STARTING_HEALTH
    experience: int = 0

    def __post_init__(self):
        """Validate agent data after initialization."""
        if self.id < 0:
            raise ValueError(f"Invalid agent id: {self.id} (must be >= 0)")
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Invalid position: ({self.x}, {self.y}) (must be >= 0)")
        self.control = ControlMode(self.control)
        # Normalize keys and fill in missing kinds so every counter exists
        resources = {kind: 0 for kind in Resource}
        for kind, count in self.resources.items():
            if count < 0:
                raise ValueError(f"Invalid {kind} count: {count} (must be >= 0)")
            resources[Resource(kind)] = count
        self.resources = resources
        if self.experience < 0:
            raise ValueError(f"Invalid experience: {self.experience} (must be >= 0)")

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_human(self) -> bool:
        return self.control == ControlMode.HUMAN

    @property
    def weapon(self) -> int:
        return self.resources[Resource.WEAPON]
