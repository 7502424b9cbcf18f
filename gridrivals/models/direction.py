"""Direction model for single-step cardinal moves."""

from enum import Enum


class Direction(Enum):
    """Cardinal unit moves, declared in the order scripted agents evaluate them."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Look up a direction by case-insensitive name ("up", "Left", ...).

        Raises:
            ValueError: If the name is not a direction
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> "Direction":
        """Look up a direction by its (dx, dy) delta.

        Raises:
            ValueError: If the delta is not a cardinal unit step
        """
        try:
            return cls((dx, dy))
        except ValueError:
            raise ValueError(f"Not a cardinal unit step: ({dx}, {dy})") from None
