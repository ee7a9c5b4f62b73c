"""Utility functions and constants for Idle Galaxy."""

from .constants import (
    KEPLER_ITERATIONS,
    PLANET_COUNT_RANGE,
    RNG_SEED_DEFAULT,
    STAR_AGE_RANGE_MYR,
    STAR_MASS_RANGE,
)
from .distance import cardinal_direction, distance_2d, distance_3d
from .math_utils import clamp, lerp, map_range, seeded_random, to_roman
from .rng import GameRNG

__all__ = [
    "KEPLER_ITERATIONS",
    "PLANET_COUNT_RANGE",
    "RNG_SEED_DEFAULT",
    "STAR_AGE_RANGE_MYR",
    "STAR_MASS_RANGE",
    "cardinal_direction",
    "clamp",
    "distance_2d",
    "distance_3d",
    "lerp",
    "map_range",
    "seeded_random",
    "to_roman",
    "GameRNG",
]
