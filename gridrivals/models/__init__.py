"""Data models for Grid Rivals."""

from .agent import Agent, ControlMode
from .direction import Direction
from .grid import Grid
from .tile import Resource, Terrain, Tile
from .world import WorldState

__all__ = [
    "Agent",
    "ControlMode",
    "Direction",
    "Grid",
    "Resource",
    "Terrain",
    "Tile",
    "WorldState",
]
