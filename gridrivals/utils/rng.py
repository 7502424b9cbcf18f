"""Seedable RNG wrapper for deterministic map generation."""

import random
import uuid


def random_seed() -> int:
    """Draw a fresh 32-bit seed for games started without one."""
    return uuid.uuid4().int % (2**32)


class GameRNG:
    """Wrapper around Python's random.Random for deterministic game behavior.

    All randomness in the engine goes through this class so that a seeded
    game reproduces the same grid. The seed is kept on the instance so a
    driver can report it and replay the same map later.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness. A random seed
                is drawn when omitted.
        """
        self.seed = random_seed() if seed is None else seed
        self.rng = random.Random(self.seed)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()

    def get_state(self):
        """Get the current state of the RNG (for tests that rewind a draw)."""
        return self.rng.getstate()

    def set_state(self, state):
        """Restore a state captured with get_state."""
        self.rng.setstate(state)
