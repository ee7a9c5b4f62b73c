"""Procedural star system generation.

Algorithm:
1. Validate creation parameters (star mass, age, planet count, enums)
2. Derive the primary star from (mass, age) and its habitable zone
3. For each planet index, in order from the star outwards:
   - Pick a type by relative position: first 30% rocky, next 30% oceanic
     (70%) or rocky, next 20% gaseous, remainder icy
   - Place it at 0.4 AU (index 0) or 0.4 + 1.7 * 2^(index-1) AU
   - Draw size, mass, orbit, rotation, atmosphere, climate, resources,
     a seed civilization and its moons
4. Add companion stars and the asteroid and Kuiper belts
5. Score system stability from resonances and Hill-sphere crowding

Generation is deterministic for a given seed.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from ..models.catalogs import (
    GASEOUS,
    GOVERNMENT_TYPES,
    HABITABLE_ZONE_PREFERENCES,
    ICY,
    MULTIPLE_SYSTEM_TYPES,
    OCEANIC,
    PLANET_TYPES,
    RED_DWARF,
    ROCKY,
    STAR_TYPES,
    YELLOW_DWARF,
)
from ..models.civilization import Civilization, Government, Kardashev
from ..models.planet import Atmosphere, Conditions, Moon, Orbit, Planet, Resource, Rotation
from ..models.star import CompanionStar, Star
from ..models.star_system import Coordinates, MinorBody, StarSystem
from ..physics.climate_model import (
    HabitableZone,
    equilibrium_temperature,
    habitable_zone,
    surface_pressure,
)
from ..physics.orbital_mechanics import (
    find_orbital_resonances,
    hill_sphere,
    is_orbit_stable,
    orbital_period,
)
from ..physics.stellar_evolution import derive_star
from ..utils.constants import (
    COORDINATE_RANGE,
    EARTH_MASS,
    GALAXY_CENTER,
    PLANET_COUNT_RANGE,
    SOLAR_MASS,
    STAR_AGE_RANGE_MYR,
    STAR_MASS_RANGE,
)
from ..utils.math_utils import to_roman
from ..utils.rng import GameRNG
from .errors import SystemValidationError

logger = logging.getLogger(__name__)

# Titius-Bode style spacing
BASE_DISTANCE = 0.4  # AU
DISTANCE_MULTIPLIER = 1.7

# Seed civilization
INITIAL_POPULATION = 1_000_000
INITIAL_GROWTH_RATE = 1.02
INITIAL_HAPPINESS = 70
INITIAL_STABILITY = 75
INITIAL_KARDASHEV = 0.1

DANGEROUS_RESONANCES = ("2:1", "3:1")
MIN_STABILITY_INDEX = 0.1


@dataclass
class GenerationParams:
    """User-supplied parameters for a new star system.

    ``star_age`` is in millions of years, as entered on the creation form.
    """

    name: str
    star_type: str
    star_mass: float  # Solar masses
    star_age: float = 4500  # Millions of years
    planets_count: int = 4
    multiple_system: str = "single"
    habitable_zone: str = "optimal"
    government_type: str = "democratica"
    coordinates: Optional[Tuple[float, float]] = None


def validate_params(params: GenerationParams) -> None:
    """Check creation parameters against the allowed ranges.

    Raises:
        SystemValidationError: Listing every invalid field
    """
    errors = []

    if not params.name or not params.name.strip():
        errors.append("Missing required field: name")
    if params.star_type not in STAR_TYPES:
        errors.append(f"Unknown star type: {params.star_type}")

    min_mass, max_mass = STAR_MASS_RANGE
    if not (min_mass <= params.star_mass <= max_mass):
        errors.append(
            f"Star mass must be between {min_mass} and {max_mass} solar masses "
            f"(got {params.star_mass})"
        )

    min_age, max_age = STAR_AGE_RANGE_MYR
    if not (min_age <= params.star_age <= max_age):
        errors.append(
            f"Star age must be between {min_age} and {max_age} million years "
            f"(got {params.star_age})"
        )

    min_planets, max_planets = PLANET_COUNT_RANGE
    if not (min_planets <= params.planets_count <= max_planets):
        errors.append(
            f"Planet count must be between {min_planets} and {max_planets} "
            f"(got {params.planets_count})"
        )

    if params.multiple_system not in MULTIPLE_SYSTEM_TYPES:
        errors.append(f"Unknown multiple system type: {params.multiple_system}")
    if params.habitable_zone not in HABITABLE_ZONE_PREFERENCES:
        errors.append(f"Unknown habitable zone preference: {params.habitable_zone}")
    if params.government_type not in GOVERNMENT_TYPES:
        errors.append(f"Unknown government type: {params.government_type}")

    if errors:
        raise SystemValidationError(errors)


def generate_system(
    params: GenerationParams,
    seed: Optional[int] = None,
    owner_id: Optional[str] = None,
    discovered_at: Optional[datetime] = None,
) -> StarSystem:
    """Generate a complete star system from creation parameters.

    Args:
        params: Creation parameters
        seed: RNG seed for deterministic generation
        owner_id: Player who claims the system and its first discoverer
        discovered_at: Creation time recorded as the discovery date

    Returns:
        New StarSystem at galactic year 0, version 0

    Raises:
        SystemValidationError: If parameters are out of range
    """
    validate_params(params)
    rng = GameRNG(seed)

    system_id = f"system_{rng.token()}"
    primary = derive_star(params.star_type, params.star_mass, params.star_age * 1e6)
    zone = habitable_zone(primary.luminosity)

    planets = [
        _generate_planet(rng, params, primary, zone, system_id, index)
        for index in range(params.planets_count)
    ]

    if params.coordinates is not None:
        x, y = params.coordinates
    else:
        x = rng.uniform(*COORDINATE_RANGE)
        y = rng.uniform(*COORDINATE_RANGE)

    system = StarSystem(
        id=system_id,
        name=params.name.strip(),
        primary_star=primary,
        coordinates=Coordinates(x=x, y=y, quadrant=quadrant(x, y)),
        multiple_system=params.multiple_system,
        companions=_generate_companions(rng, params),
        planets=planets,
        minor_bodies=_generate_minor_bodies(),
        hill_sphere=hill_sphere(EARTH_MASS / SOLAR_MASS, params.star_mass, 1.0),
        habitable_zone_preference=params.habitable_zone,
        owner_id=owner_id,
        discoverers=[owner_id] if owner_id else [],
        first_discoverer=owner_id,
        discovery_date=discovered_at.isoformat() if discovered_at else None,
    )
    system.stability_index = system_stability(system.planets, primary)

    logger.info(
        f"Generated system {system.id} '{system.name}': {primary.spectral_class}-class "
        f"{primary.type}, {len(planets)} planets, stability {system.stability_index:.2f}"
    )
    return system


def quadrant(x: float, y: float) -> str:
    """Galaxy quadrant of a map position."""
    center_x, center_y = GALAXY_CENTER

    if x < center_x and y < center_y:
        return "alpha"
    if x >= center_x and y < center_y:
        return "beta"
    if x < center_x and y >= center_y:
        return "gamma"
    return "delta"


def planet_type_for_position(rng: GameRNG, index: int, total: int) -> str:
    """Planet type from the planet's relative position in the system."""
    position = index / total

    if position < 0.3:
        return ROCKY
    if position < 0.6:
        return OCEANIC if rng.random() > 0.3 else ROCKY
    if position < 0.8:
        return GASEOUS
    return ICY


def orbital_distance(index: int) -> float:
    """Semi-major axis in AU for the planet at ``index``.

    Index 0 is pinned to 0.4 AU; later planets follow 0.4 + 1.7 * 2^(index-1),
    giving 2.1, 3.8, 7.2, ... AU.
    """
    if index == 0:
        return BASE_DISTANCE
    return BASE_DISTANCE + DISTANCE_MULTIPLIER * 2 ** (index - 1)


def generate_atmosphere(planet_type: str, distance: float, zone: HabitableZone) -> Atmosphere:
    """Atmosphere for a planet type at a given distance."""
    atmosphere = Atmosphere(albedo=0.3, pressure=1.0, quality=0.8)

    if planet_type == ROCKY:
        if zone.contains(distance):
            atmosphere.composition = {"N2": 0.78, "O2": 0.21, "CO2": 0.01}
        else:
            atmosphere.composition = {"CO2": 0.95, "N2": 0.05}
    elif planet_type == OCEANIC:
        atmosphere.composition = {"N2": 0.78, "O2": 0.21, "H2O": 0.01}
        atmosphere.albedo = 0.25
    elif planet_type == GASEOUS:
        atmosphere.composition = {"H2": 0.90, "He": 0.10}
        atmosphere.pressure = 100.0
    elif planet_type == ICY:
        atmosphere.composition = {"CO2": 0.95, "N2": 0.05}
        atmosphere.pressure = 0.1

    return atmosphere


def generate_moons(rng: GameRNG, planet_type: str, planet_id: str) -> List[Moon]:
    """Moons for a planet: 5-14 for gas giants, 0-2 otherwise."""
    if planet_type == GASEOUS:
        count = rng.randint(5, 14)
    else:
        count = rng.randint(0, 2)

    return [
        Moon(
            id=f"{planet_id}_moon_{i}",
            name=f"Moon {i + 1}",
            mass=rng.uniform(0, 0.1),
            radius=rng.uniform(0, 0.5),
            distance=rng.uniform(0.001, 0.011),
            orbital_period=rng.uniform(1, 31),
        )
        for i in range(count)
    ]


def seed_resources() -> dict[str, Resource]:
    """Starting resource stocks shared by every new planet."""
    return {
        "metals": Resource(
            current=100000, initial=100000, depletion_rate=100, years_remaining=1000
        ),
        "energy": Resource(current=50000, initial=50000),
        "rareElements": Resource(
            current=5000, initial=5000, depletion_rate=10, years_remaining=500
        ),
    }


def seed_civilization(government_type: str) -> Civilization:
    """Starting civilization placed on every generated planet."""
    return Civilization(
        population=INITIAL_POPULATION,
        growth_rate=INITIAL_GROWTH_RATE,
        happiness=INITIAL_HAPPINESS,
        stability=INITIAL_STABILITY,
        government=Government(type=government_type),
        kardashev=Kardashev(level=INITIAL_KARDASHEV, energy_consumption=1e12, progress_to_next=0.1),
    )


def system_stability(planets: List[Planet], star: Star) -> float:
    """Stability index in [0.1, 1].

    Each 2:1 or 3:1 resonance multiplies by 0.8 and each planet with a
    neighbour inside 3.5 Hill radii multiplies by 0.5.
    """
    stability = 1.0

    for resonance in find_orbital_resonances(planets):
        if resonance.resonance in DANGEROUS_RESONANCES:
            stability *= 0.8

    for planet in planets:
        if not is_orbit_stable(planet, star, planets):
            stability *= 0.5

    return max(MIN_STABILITY_INDEX, stability)


def _generate_planet(
    rng: GameRNG,
    params: GenerationParams,
    star: Star,
    zone: HabitableZone,
    system_id: str,
    index: int,
) -> Planet:
    planet_type = planet_type_for_position(rng, index, params.planets_count)
    planet_id = f"{system_id}_planet_{index}"
    distance = orbital_distance(index)
    type_info = PLANET_TYPES[planet_type]

    size = rng.normal_range(*type_info["size_range"])
    mass = rng.normal_range(0.1, 10, 1, 2)
    atmosphere = generate_atmosphere(planet_type, distance, zone)

    conditions = Conditions(
        temperature=equilibrium_temperature(star.luminosity, distance, atmosphere),
        atmosphere=atmosphere,
        pressure=surface_pressure(mass, size, atmosphere),
        habitability=rng.normal_range(*type_info["habitability"]),
    )

    return Planet(
        id=planet_id,
        name=f"{params.name.strip()} {to_roman(index + 1)}",
        index=index,
        type=planet_type,
        size=size,
        mass=mass,
        orbit=Orbit(
            semi_major_axis=distance,
            eccentricity=rng.uniform(0, 0.1),
            period=orbital_period(star.mass, distance),
            inclination=rng.uniform(0, 10),
        ),
        rotation=Rotation(period=rng.uniform(10, 40), axial_tilt=rng.uniform(0, 45)),
        conditions=conditions,
        resources=seed_resources(),
        civilization=seed_civilization(params.government_type),
        moons=generate_moons(rng, planet_type, planet_id),
    )


def _generate_companions(rng: GameRNG, params: GenerationParams) -> List[CompanionStar]:
    if params.multiple_system == "single":
        return []

    count = 1 if params.multiple_system == "binary" else 2
    return [
        CompanionStar(
            type=RED_DWARF if rng.random() > 0.5 else YELLOW_DWARF,
            mass=params.star_mass * rng.uniform(0.2, 0.7),
            orbit_distance=rng.uniform(10, 110),
        )
        for _ in range(count)
    ]


def _generate_minor_bodies() -> List[MinorBody]:
    return [
        MinorBody(type="asteroid_belt", inner_radius=2.0, outer_radius=4.0, resource_density=0.7),
        MinorBody(type="kuiper_belt", inner_radius=30.0, outer_radius=50.0, resource_density=0.3),
    ]
