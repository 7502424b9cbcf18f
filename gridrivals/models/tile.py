"""Tile data model: terrain plus an optional resource deposit."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Terrain(str, Enum):
    """Terrain types. Water blocks movement."""

    GRASS = "grass"
    FOREST = "forest"
    MOUNTAIN = "mountain"
    WATER = "water"


class Resource(str, Enum):
    """Collectable resource kinds."""

    GOLD = "gold"
    FOOD = "food"
    WEAPON = "weapon"


@dataclass
class Tile:
    """One grid cell.

    Terrain never changes after generation. The resource is cleared exactly
    once, by the first agent to step onto the cell.
    """

    terrain: Terrain
    resource: Optional[Resource] = None

    def __post_init__(self):
        """Coerce string values so hand-built grids can use plain names."""
        self.terrain = Terrain(self.terrain)
        if self.resource is not None:
            self.resource = Resource(self.resource)

    @property
    def passable(self) -> bool:
        return self.terrain != Terrain.WATER
