"""Keplerian orbital mechanics.

Distances are in AU, stellar masses in solar masses, planet masses in
Earth masses and times in years unless stated otherwise.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..models.planet import Planet
from ..models.star import Star
from ..utils.constants import (
    AU,
    EARTH_MASS,
    G,
    KEPLER_ITERATIONS,
    RESONANCE_TOLERANCE,
    SOLAR_MASS,
    STABILITY_HILL_FACTOR,
    YEAR_SECONDS,
)

# Low-order mean motion resonances checked between planet pairs
COMMON_RESONANCES = ((2, 1), (3, 2), (3, 1), (4, 3), (5, 4), (5, 2))


@dataclass
class OrbitalPosition:
    """Cartesian position (AU) of a body and its distance from the focus."""

    x: float
    y: float
    z: float
    distance: float


@dataclass
class Resonance:
    """A near-commensurability between two planets' orbital periods.

    Attributes:
        planets: IDs of the two planets, inner first
        resonance: Ratio label such as "2:1"
        exact_ratio: Measured period ratio (outer over inner)
        strength: 1 at exact commensurability, falling to 0 at the tolerance
    """

    planets: tuple[str, str]
    resonance: str
    exact_ratio: float
    strength: float


def orbital_period(central_mass: float, semi_major_axis: float) -> float:
    """Orbital period in years from Kepler's third law.

    Args:
        central_mass: Mass of the central body in solar masses
        semi_major_axis: Semi-major axis in AU

    Returns:
        Period in years
    """
    if central_mass <= 0:
        raise ValueError(f"Invalid central_mass: {central_mass} (must be > 0)")

    a = semi_major_axis * AU
    period_squared = (4 * math.pi**2 * a**3) / (G * central_mass * SOLAR_MASS)
    return math.sqrt(period_squared) / YEAR_SECONDS


def orbital_velocity(central_mass: float, distance: float) -> float:
    """Circular orbital speed in km/s at the given distance in AU."""
    r = distance * AU
    m = central_mass * SOLAR_MASS
    return math.sqrt(G * m / r) / 1000


def solve_kepler(
    mean_anomaly: float, eccentricity: float, iterations: int = KEPLER_ITERATIONS
) -> float:
    """Eccentric anomaly for M = E - e sin(E) by fixed-point iteration.

    The iteration count is fixed rather than convergence-checked so that
    results are reproducible. Ten iterations are accurate for the low
    eccentricities of planets but drift for e close to 1.
    """
    eccentric_anomaly = mean_anomaly
    for _ in range(iterations):
        eccentric_anomaly = mean_anomaly + eccentricity * math.sin(eccentric_anomaly)
    return eccentric_anomaly


def orbital_position(
    time: float,
    semi_major_axis: float,
    eccentricity: float,
    inclination: float,
    longitude_ascending_node: float,
    argument_periapsis: float,
    mean_anomaly_epoch: float,
    central_mass: float = 1.0,
    iterations: int = KEPLER_ITERATIONS,
) -> OrbitalPosition:
    """Position of a body on an elliptical orbit at the given time.

    Args:
        time: Simulated time since epoch in years
        semi_major_axis: AU
        eccentricity: [0, 1)
        inclination: Radians
        longitude_ascending_node: Radians
        argument_periapsis: Radians
        mean_anomaly_epoch: Mean anomaly at time 0, radians
        central_mass: Central body mass in solar masses
        iterations: Kepler solver iterations

    Returns:
        OrbitalPosition with heliocentric coordinates in AU
    """
    period = orbital_period(central_mass, semi_major_axis)
    mean_anomaly = mean_anomaly_epoch + (2 * math.pi * time) / period

    eccentric_anomaly = solve_kepler(mean_anomaly, eccentricity, iterations)

    true_anomaly = 2 * math.atan2(
        math.sqrt(1 + eccentricity) * math.sin(eccentric_anomaly / 2),
        math.sqrt(1 - eccentricity) * math.cos(eccentric_anomaly / 2),
    )

    # Position in the orbital plane
    distance = semi_major_axis * (1 - eccentricity * math.cos(eccentric_anomaly))
    x_orbital = distance * math.cos(true_anomaly)
    y_orbital = distance * math.sin(true_anomaly)

    # Rotate by argument of periapsis, inclination and ascending node
    cos_lan = math.cos(longitude_ascending_node)
    sin_lan = math.sin(longitude_ascending_node)
    cos_ap = math.cos(argument_periapsis)
    sin_ap = math.sin(argument_periapsis)
    cos_i = math.cos(inclination)
    sin_i = math.sin(inclination)

    x = x_orbital * (cos_ap * cos_lan - sin_ap * cos_i * sin_lan) - y_orbital * (
        sin_ap * cos_lan + cos_ap * cos_i * sin_lan
    )
    y = x_orbital * (cos_ap * sin_lan + sin_ap * cos_i * cos_lan) + y_orbital * (
        cos_ap * cos_i * cos_lan - sin_ap * sin_lan
    )
    z = x_orbital * (sin_ap * sin_i) + y_orbital * (cos_ap * sin_i)

    return OrbitalPosition(x=x, y=y, z=z, distance=distance)


def hill_sphere(planet_mass: float, star_mass: float, distance: float) -> float:
    """Hill sphere radius, in the units of distance.

    Both masses must be in the same unit.
    """
    return distance * (planet_mass / (3 * star_mass)) ** (1 / 3)


def planet_hill_radius(planet: Planet, star: Star) -> float:
    """Hill radius in AU of a planet (Earth masses) around a star (solar masses)."""
    planet_mass_solar = planet.mass * EARTH_MASS / SOLAR_MASS
    return hill_sphere(planet_mass_solar, star.mass, planet.orbit.semi_major_axis)


def is_orbit_stable(planet: Planet, star: Star, other_planets: Iterable[Planet]) -> bool:
    """Check that no other planet orbits within 3.5 Hill radii.

    Args:
        planet: Planet to check
        star: Primary star
        other_planets: Planets of the system, may include ``planet`` itself

    Returns:
        False on the first neighbour closer than 3.5 Hill radii, else True
    """
    hill_radius = planet_hill_radius(planet, star)

    for other in other_planets:
        if other.id == planet.id:
            continue

        separation = abs(planet.orbit.semi_major_axis - other.orbit.semi_major_axis)
        if separation < STABILITY_HILL_FACTOR * hill_radius:
            return False

    return True


def find_orbital_resonances(
    planets: Sequence[Planet], tolerance: float = RESONANCE_TOLERANCE
) -> List[Resonance]:
    """Find planet pairs whose period ratio is near a low-order resonance.

    Every pair is compared once. The ratio is the longer period over the
    shorter one, so it is always >= 1.

    Args:
        planets: Planets with orbital periods set
        tolerance: Maximum absolute difference from p/q

    Returns:
        List of Resonance records, in pair order
    """
    resonances = []

    for i in range(len(planets)):
        for j in range(i + 1, len(planets)):
            period_i = planets[i].orbit.period
            period_j = planets[j].orbit.period
            if period_i <= 0 or period_j <= 0:
                continue
            ratio = max(period_i, period_j) / min(period_i, period_j)

            for p, q in COMMON_RESONANCES:
                offset = abs(ratio - p / q)
                if offset < tolerance:
                    resonances.append(
                        Resonance(
                            planets=(planets[i].id, planets[j].id),
                            resonance=f"{p}:{q}",
                            exact_ratio=ratio,
                            strength=1 - offset / tolerance,
                        )
                    )

    return resonances
