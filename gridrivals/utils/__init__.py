"""Utility functions and constants for Grid Rivals."""

from .constants import (
    AGGRESSION_MULTIPLIER,
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_AGENTS,
    MIN_AGENTS,
    RNG_SEED_DEFAULT,
    SCRIPTED_TURN_DELAY,
)
from .rng import GameRNG, random_seed

__all__ = [
    "AGGRESSION_MULTIPLIER",
    "MAP_HEIGHT",
    "MAP_WIDTH",
    "MAX_AGENTS",
    "MIN_AGENTS",
    "RNG_SEED_DEFAULT",
    "SCRIPTED_TURN_DELAY",
    "GameRNG",
    "random_seed",
]
