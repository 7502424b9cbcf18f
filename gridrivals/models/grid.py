"""Grid container: a flat, owned array of tiles."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..errors import ConfigurationError
from .tile import Resource, Tile


@dataclass
class Grid:
    """Fixed-size 2-D map stored as a flat list indexed by ``y * width + x``.

    The grid is the sole owner of its tiles. Callers read tiles through
    ``tile_at`` and clear deposits through ``collect_resource``; nothing else
    mutates a tile.
    """

    width: int
    height: int
    tiles: List[Tile] = field(default_factory=list)

    def __post_init__(self):
        """Validate dimensions and tile count after initialization."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Invalid grid dimensions: {self.width}x{self.height} (must be positive)"
            )
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"Invalid tile count: {len(self.tiles)} "
                f"(expected {self.width * self.height} for {self.width}x{self.height})"
            )

    @classmethod
    def from_rows(cls, rows: List[List[Tile]]) -> "Grid":
        """Build a grid from row-major nested lists (rows[y][x]).

        Args:
            rows: Non-empty list of equally sized rows

        Returns:
            Grid owning copies of the given tiles
        """
        if not rows or not rows[0]:
            raise ConfigurationError("Grid needs at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ConfigurationError("All grid rows must have the same length")
        tiles = [Tile(tile.terrain, tile.resource) for row in rows for tile in row]
        return cls(width=width, height=len(rows), tiles=tiles)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clamp(self, x: int, y: int) -> tuple[int, int]:
        """Clamp a coordinate onto the grid. Off-edge moves stop at the boundary."""
        return (
            max(0, min(self.width - 1, x)),
            max(0, min(self.height - 1, y)),
        )

    def tile_at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} grid")
        return self.tiles[y * self.width + x]

    def collect_resource(self, x: int, y: int) -> Optional[Resource]:
        """Remove and return the resource at (x, y), or None if there is none."""
        tile = self.tile_at(x, y)
        resource = tile.resource
        tile.resource = None
        return resource

    def rows(self) -> Iterator[List[Tile]]:
        """Yield tiles row by row (top to bottom)."""
        for y in range(self.height):
            yield self.tiles[y * self.width : (y + 1) * self.width]
