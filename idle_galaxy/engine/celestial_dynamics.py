"""Comets, orbital batch simulation and impact detection.

Comets are transient: they are generated on demand for display and threat
assessment and are not stored on the system snapshot.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from ..models.star_system import StarSystem
from ..physics.orbital_mechanics import OrbitalPosition, orbital_period, orbital_position
from ..utils.distance import distance_2d
from ..utils.rng import GameRNG

COMET_DENSITY = 1000  # kg/m^3
SIZE_TO_RADIUS = 500  # Comet size units to meters of radius
JOULES_PER_MEGATON = 4.184e15
IMPACT_VELOCITY_RANGE = (20, 70)  # km/s
INFLUENCE_RADIUS_FACTOR = 0.1


@dataclass
class CometOrbit:
    semi_major_axis: float  # AU
    eccentricity: float
    inclination: float  # Degrees
    period: float  # Years


@dataclass
class Comet:
    """A long-period comet.

    Composition fractions are sampled independently and are not
    normalised, so they need not sum to 1.
    """

    id: str
    name: str
    orbit: CometOrbit
    size: float  # Meters
    composition: Dict[str, float]
    threat_level: float  # [0, 1]
    discovered: bool = False
    type: str = "comet"


@dataclass
class TrackedPosition:
    """Simulated position of one orbiting object."""

    id: str
    position: OrbitalPosition
    distance: float
    size: float = 0.0


@dataclass
class PlanetPosition:
    """Planet placement used as a collision target."""

    id: str
    x: float
    y: float
    radius: float


@dataclass
class Collision:
    object_id: str
    planet_id: str
    distance: float
    energy: float  # Megatons of TNT
    time: float  # Simulated years


def threat_level(semi_major_axis: float, eccentricity: float) -> float:
    """Threat score of a comet orbit in [0, 1].

    Adds 0.6 for a perihelion inside 1 AU, 0.3 more inside 0.5 AU and 0.1
    for eccentricity above 0.9.
    """
    perihelion = semi_major_axis * (1 - eccentricity)
    threat = 0.0

    if perihelion < 1.0:
        threat += 0.6
    if perihelion < 0.5:
        threat += 0.3
    if eccentricity > 0.9:
        threat += 0.1

    return min(1.0, threat)


def generate_comet(system: StarSystem, rng: GameRNG, year: int = 0) -> Comet:
    """Generate a random long-period comet for a system.

    Args:
        system: System whose primary star the comet orbits
        rng: Random number generator
        year: Calendar year used in the comet designation

    Returns:
        New undiscovered Comet
    """
    semi_major_axis = rng.uniform(30, 1000)
    eccentricity = rng.uniform(0.7, 0.99)

    orbit = CometOrbit(
        semi_major_axis=semi_major_axis,
        eccentricity=eccentricity,
        inclination=rng.uniform(0, 180),
        period=orbital_period(system.primary_star.mass, semi_major_axis),
    )

    return Comet(
        id=f"comet_{system.id}_{rng.token()}",
        name=f"C/{year} {rng.token(3).upper()}",
        orbit=orbit,
        size=rng.uniform(100, 5000),
        composition={
            "ice": rng.uniform(0.6, 0.9),
            "dust": rng.uniform(0.2, 0.4),
            "organic": rng.uniform(0, 0.1),
        },
        threat_level=threat_level(semi_major_axis, eccentricity),
    )


def simulate_orbital_motion(
    objects: Iterable, time: float, time_step: float = 0.0, central_mass: float = 1.0
) -> List[TrackedPosition]:
    """Evaluate orbital positions for every object that has an orbit.

    Node, periapsis and epoch anomaly are taken as zero.

    Args:
        objects: Comets, planets or any object with ``id`` and ``orbit``
        time: Simulated time in years
        time_step: Offset added to ``time`` before evaluating
        central_mass: Mass of the central star in solar masses

    Returns:
        List of TrackedPosition, one per object with an orbit
    """
    positions = []
    at = time + time_step

    for obj in objects:
        orbit = getattr(obj, "orbit", None)
        if orbit is None:
            continue

        position = orbital_position(
            at,
            orbit.semi_major_axis,
            orbit.eccentricity,
            math.radians(orbit.inclination),
            0.0,
            0.0,
            0.0,
            central_mass=central_mass,
        )
        positions.append(
            TrackedPosition(
                id=obj.id,
                position=position,
                distance=position.distance,
                size=getattr(obj, "size", 0.0),
            )
        )

    return positions


def impact_energy(size: float, rng: GameRNG, velocity: Optional[float] = None) -> float:
    """Kinetic energy of an impactor in megatons of TNT.

    Args:
        size: Impactor size; radius is ``size * 500`` meters
        rng: Random number generator used to draw the impact velocity
        velocity: Impact speed in km/s, drawn from [20, 70) when None

    Returns:
        Energy in megatons
    """
    if velocity is None:
        velocity = rng.uniform(*IMPACT_VELOCITY_RANGE)

    volume = (4 / 3) * math.pi * (size * SIZE_TO_RADIUS) ** 3
    mass = COMET_DENSITY * volume
    energy = 0.5 * mass * (velocity * 1000) ** 2
    return energy / JOULES_PER_MEGATON


def check_collisions(
    positions: Sequence[TrackedPosition],
    planets: Sequence[PlanetPosition],
    rng: GameRNG,
    time: float = 0.0,
) -> List[Collision]:
    """Detect objects inside a planet's influence radius.

    Every object is tested against every planet in the plane of the
    system. The influence radius is 10% of the planet radius.

    Args:
        positions: Simulated object positions
        planets: Planet positions and radii
        rng: Random number generator for impact velocities
        time: Simulated time stamped on each collision

    Returns:
        List of Collision records
    """
    collisions = []

    for tracked in positions:
        for planet in planets:
            separation = distance_2d(
                tracked.position.x, tracked.position.y, planet.x, planet.y
            )
            if separation < planet.radius * INFLUENCE_RADIUS_FACTOR:
                collisions.append(
                    Collision(
                        object_id=tracked.id,
                        planet_id=planet.id,
                        distance=separation,
                        energy=impact_energy(tracked.size, rng),
                        time=time,
                    )
                )

    return collisions
