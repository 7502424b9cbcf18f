"""Grid generation and new-game setup."""

import logging
from typing import Iterable, Optional

from ..errors import ConfigurationError
from ..models import Agent, ControlMode, Grid, Resource, Terrain, Tile, WorldState
from ..utils import GameRNG
from ..utils.constants import (
    FOOD_THRESHOLD,
    FOREST_THRESHOLD,
    GOLD_THRESHOLD,
    GRASS_THRESHOLD,
    HUMAN_SEATS,
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_AGENTS,
    MIN_AGENTS,
    MOUNTAIN_THRESHOLD,
    RESOURCE_PROB,
)

logger = logging.getLogger(__name__)


def generate_grid(width: int, height: int, rng: GameRNG) -> Grid:
    """Generate a grid by independent per-cell sampling.

    Algorithm, for each cell in row-major order:
    1. Draw terrain: grass < 0.60 <= forest < 0.75 <= mountain < 0.85 <= water
    2. If grass or forest, with probability 0.10 place a resource drawn as
       gold < 0.40 <= food < 0.70 <= weapon
    3. Mountain and water cells never carry a resource

    No connectivity or fairness is guaranteed between starting corners.

    Args:
        width: Number of columns (must be > 0)
        height: Number of rows (must be > 0)
        rng: Random number generator (same seed, same grid)

    Returns:
        Generated Grid

    Raises:
        ConfigurationError: If a dimension is not positive
    """
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"Invalid grid dimensions: {width}x{height} (must be positive)")

    tiles = []
    for _ in range(width * height):
        terrain = _sample_terrain(rng)
        resource = None
        if terrain in (Terrain.GRASS, Terrain.FOREST) and rng.random() < RESOURCE_PROB:
            resource = _sample_resource(rng)
        tiles.append(Tile(terrain, resource))

    return Grid(width=width, height=height, tiles=tiles)


def new_game(
    width: int = MAP_WIDTH,
    height: int = MAP_HEIGHT,
    seed: Optional[int] = None,
    num_agents: int = MAX_AGENTS,
    human_seats: Iterable[int] = HUMAN_SEATS,
) -> WorldState:
    """Create a fresh game: new grid, full roster at the corners, cursor at 0.

    Corners are assigned in agent order: (0,0), (W-1,0), (0,H-1), (W-1,H-1).
    Every agent starts with gold=0, food=10, weapon=1, health=100, experience=0.

    Args:
        width: Grid width
        height: Grid height
        seed: RNG seed; a random one is drawn (and recorded) when omitted
        num_agents: Roster size, 2 to 4
        human_seats: Agent ids driven by user input, all others are scripted

    Returns:
        New WorldState

    Raises:
        ConfigurationError: If dimensions or roster size are invalid
    """
    if not (MIN_AGENTS <= num_agents <= MAX_AGENTS):
        raise ConfigurationError(
            f"Invalid num_agents: {num_agents} (must be {MIN_AGENTS}-{MAX_AGENTS})"
        )
    human_seats = set(human_seats)

    rng = GameRNG(seed)
    grid = generate_grid(width, height, rng)

    corners = [(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)]
    agents = [
        Agent(
            id=i,
            x=corners[i][0],
            y=corners[i][1],
            control=ControlMode.HUMAN if i in human_seats else ControlMode.SCRIPTED,
        )
        for i in range(num_agents)
    ]

    logger.info(
        f"New game: {width}x{height} grid, {num_agents} agents, seed={rng.seed}, "
        f"human seats={sorted(human_seats)}"
    )

    return WorldState(grid=grid, agents=agents, seed=rng.seed)


def _sample_terrain(rng: GameRNG) -> Terrain:
    roll = rng.random()
    if roll < GRASS_THRESHOLD:
        return Terrain.GRASS
    if roll < FOREST_THRESHOLD:
        return Terrain.FOREST
    if roll < MOUNTAIN_THRESHOLD:
        return Terrain.MOUNTAIN
    return Terrain.WATER


def _sample_resource(rng: GameRNG) -> Resource:
    roll = rng.random()
    if roll < GOLD_THRESHOLD:
        return Resource.GOLD
    if roll < FOOD_THRESHOLD:
        return Resource.FOOD
    return Resource.WEAPON
