"""ASCII map rendering through a scrolling viewport.

This module renders the part of the grid around a focus agent as ASCII art.
The viewport follows the focus agent and stops at the grid edges.
"""

from typing import Optional

from ..models import Resource, Terrain, WorldState
from ..utils.constants import VIEWPORT_HEIGHT, VIEWPORT_WIDTH

TERRAIN_CHARS = {
    Terrain.GRASS: ".",
    Terrain.FOREST: "f",
    Terrain.MOUNTAIN: "^",
    Terrain.WATER: "~",
}

RESOURCE_CHARS = {
    Resource.GOLD: "$",
    Resource.FOOD: "%",
    Resource.WEAPON: "!",
}


def viewport_offset(
    focus: tuple[int, int], grid_size: tuple[int, int], view_size: tuple[int, int]
) -> tuple[int, int]:
    """Top-left corner of a viewport centred on focus and clamped to the grid.

    Args:
        focus: (x, y) to centre on
        grid_size: (width, height) of the grid
        view_size: (width, height) of the viewport

    Returns:
        (x, y) offset of the viewport's top-left tile
    """
    offset = []
    for pos, grid_len, view_len in zip(focus, grid_size, view_size):
        view_len = min(view_len, grid_len)
        offset.append(max(0, min(grid_len - view_len, pos - view_len // 2)))
    return offset[0], offset[1]


class MapRenderer:
    """Renders a window of the grid as ASCII."""

    def __init__(self, width: int = VIEWPORT_WIDTH, height: int = VIEWPORT_HEIGHT):
        self.width = width
        self.height = height

    def render(self, state: WorldState, focus_id: Optional[int] = None) -> str:
        """Render the viewport around an agent.

        Output format (one char per cell, one row per line):
        0.f.$~~..
        .^^..%...

        Legend:
        - '0'-'3' = agent id (drawn over terrain and resources)
        - '$' gold, '%' food, '!' weapon
        - '.' grass, 'f' forest, '^' mountain, '~' water

        Args:
            state: World state to render
            focus_id: Agent to centre on; falls back to the first live agent

        Returns:
            Multi-line ASCII art string
        """
        focus = state.agent_by_id(focus_id) if focus_id is not None else None
        if focus is None:
            focus = state.agents[0]

        grid = state.grid
        x0, y0 = viewport_offset(
            focus.position, (grid.width, grid.height), (self.width, self.height)
        )
        width = min(self.width, grid.width)
        height = min(self.height, grid.height)

        agents_by_cell = {}
        for agent in state.agents:
            # First agent in turn order wins the cell when several share it
            agents_by_cell.setdefault(agent.position, agent)

        lines = []
        for y in range(y0, y0 + height):
            row = []
            for x in range(x0, x0 + width):
                agent = agents_by_cell.get((x, y))
                if agent is not None:
                    row.append(str(agent.id))
                    continue
                tile = grid.tile_at(x, y)
                if tile.resource is not None:
                    row.append(RESOURCE_CHARS[tile.resource])
                else:
                    row.append(TERRAIN_CHARS[tile.terrain])
            lines.append("".join(row))

        return "\n".join(lines)
