"""Star system aggregate."""

from dataclasses import dataclass, field
from typing import List, Optional

from .catalogs import HABITABLE_ZONE_PREFERENCES, MULTIPLE_SYSTEM_TYPES
from .planet import Planet
from .star import CompanionStar, Star


@dataclass
class MinorBody:
    """Asteroid or Kuiper belt around the primary star."""

    type: str  # "asteroid_belt" or "kuiper_belt"
    inner_radius: float  # AU
    outer_radius: float  # AU
    resource_density: float


@dataclass
class Coordinates:
    """Position on the galaxy map."""

    x: float
    y: float
    quadrant: str  # alpha, beta, gamma or delta


@dataclass
class StarSystem:
    """A complete star system snapshot.

    The snapshot is what the external store persists. ``version`` is bumped
    on every time advance so the store can detect lost updates.
    """

    id: str
    name: str
    primary_star: Star
    coordinates: Coordinates
    multiple_system: str = "single"
    companions: List[CompanionStar] = field(default_factory=list)
    planets: List[Planet] = field(default_factory=list)
    minor_bodies: List[MinorBody] = field(default_factory=list)
    hill_sphere: float = 0.0  # AU, for an Earth-mass body at 1 AU
    stability_index: float = 1.0  # [0.1, 1]
    habitable_zone_preference: str = "optimal"
    galactic_year: int = 0
    version: int = 0
    owner_id: Optional[str] = None
    discoverers: List[str] = field(default_factory=list)
    discovery_status: str = "claimed"  # unexplored, discovered or claimed
    first_discoverer: Optional[str] = None
    discovery_date: Optional[str] = None  # ISO 8601, latest discovery

    def __post_init__(self):
        """Validate system data after initialization."""
        if not self.name:
            raise ValueError("name cannot be empty")
        if self.multiple_system not in MULTIPLE_SYSTEM_TYPES:
            raise ValueError(f"Invalid multiple_system: {self.multiple_system}")
        if self.habitable_zone_preference not in HABITABLE_ZONE_PREFERENCES:
            raise ValueError(
                f"Invalid habitable_zone_preference: {self.habitable_zone_preference}"
            )
        if self.version < 0:
            raise ValueError(f"Invalid version: {self.version} (must be >= 0)")

    @property
    def has_civilization(self) -> bool:
        return any(planet.civilization is not None for planet in self.planets)

    def get_planet(self, planet_id: str) -> Planet:
        """Look up a planet by id.

        Raises:
            KeyError: If no planet has the given id
        """
        for planet in self.planets:
            if planet.id == planet_id:
                return planet
        raise KeyError(planet_id)
