"""Shared fixtures: hand-built grids and worlds."""

import pytest

from gridrivals.models import Agent, ControlMode, Grid, Resource, Terrain, Tile, WorldState

# One character per cell
TILE_CODES = {
    ".": (Terrain.GRASS, None),
    "f": (Terrain.FOREST, None),
    "^": (Terrain.MOUNTAIN, None),
    "~": (Terrain.WATER, None),
    "$": (Terrain.GRASS, Resource.GOLD),
    "%": (Terrain.GRASS, Resource.FOOD),
    "!": (Terrain.GRASS, Resource.WEAPON),
}


def grid_from_strings(rows: list[str]) -> Grid:
    """Build a Grid from strings such as [".$~", "f^."]."""
    return Grid.from_rows([[Tile(*TILE_CODES[c]) for c in row] for row in rows])


def world_from_strings(
    rows: list[str],
    positions: list[tuple[int, int]],
    human_seats: tuple[int, ...] = (0,),
    cursor: int = 0,
) -> WorldState:
    """Build a WorldState with agents 0..N-1 at the given positions."""
    agents = [
        Agent(
            id=i,
            x=x,
            y=y,
            control=ControlMode.HUMAN if i in human_seats else ControlMode.SCRIPTED,
        )
        for i, (x, y) in enumerate(positions)
    ]
    return WorldState(grid=grid_from_strings(rows), agents=agents, turn_cursor=cursor)


@pytest.fixture
def make_grid():
    return grid_from_strings


@pytest.fixture
def make_world():
    return world_from_strings
