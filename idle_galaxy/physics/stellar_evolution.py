"""Stellar evolution approximations.

Closed-form relations that derive a star's luminosity, temperature, radius,
spectral class and evolutionary stage from its mass (solar masses) and
age (years). These are game approximations, not stellar models:

- Main sequence lifetime follows a piecewise power law in mass.
- Luminosity is M^3.5 on the main sequence and brightens linearly with
  time past the end of it. The jump at the lifetime boundary is
  intentional.
- Temperature inverts Stefan-Boltzmann using a mass-radius relation.

All functions require mass >= MINIMUM_FUSION_MASS (0.08 solar masses) and
raise ValueError otherwise. Lighter bodies never ignite, and the power laws
underflow or overflow for vanishing masses.
"""

import math
from dataclasses import dataclass
from enum import Enum

from ..models.star import Star
from ..utils.constants import (
    MINIMUM_FUSION_MASS,
    SIGMA,
    SOLAR_LIFETIME,
    SOLAR_LUMINOSITY,
    SOLAR_RADIUS,
)


class EvolutionaryStage(str, Enum):
    """Life stage of a star relative to its main sequence lifetime."""

    YOUNG = "joven"
    MAIN_SEQUENCE = "secuencia_principal"
    GIANT = "gigante"
    SUPERGIANT = "supergigante"
    REMNANT = "remanente"


# (minimum temperature in K, class), hottest first
SPECTRAL_THRESHOLDS = (
    (30000, "O"),
    (10000, "B"),
    (7500, "A"),
    (6000, "F"),
    (5200, "G"),
    (3700, "K"),
)

SPECTRAL_COLORS = {
    "O": "#9BB0FF",
    "B": "#AABFFF",
    "A": "#CAD7FF",
    "F": "#F8F7FF",
    "G": "#FFF4EA",
    "K": "#FFD2A1",
    "M": "#FFCC6F",
}


@dataclass
class HabitableZoneDrift:
    """Habitable zone now and one billion years from now."""

    current_inner: float
    current_outer: float
    future_inner: float
    future_outer: float
    has_moved: bool


def _require_stellar_mass(mass: float) -> None:
    if not mass >= MINIMUM_FUSION_MASS:
        raise ValueError(f"Invalid mass: {mass} (must be >= {MINIMUM_FUSION_MASS})")


def main_sequence_lifetime(mass: float) -> float:
    """Main sequence lifetime in years.

    Args:
        mass: Stellar mass in solar masses

    Returns:
        10 Gyr scaled by M^-2.3 (M <= 0.43), M^-2.5 (M <= 1.0) or M^-3.5
    """
    _require_stellar_mass(mass)

    if mass <= 0.43:
        return SOLAR_LIFETIME * mass**-2.3
    if mass <= 1.0:
        return SOLAR_LIFETIME * mass**-2.5
    return SOLAR_LIFETIME * mass**-3.5


def luminosity(mass: float, age: float) -> float:
    """Luminosity in solar units for a star of the given mass and age."""
    _require_stellar_mass(mass)
    if age < 0:
        raise ValueError(f"Invalid age: {age} (must be >= 0)")

    lifetime = main_sequence_lifetime(mass)
    base = mass**3.5

    if age <= lifetime:
        return base
    # Post main sequence brightening
    return base * (1 + (age - lifetime) / 1e9)


def radius(mass: float) -> float:
    """Stellar radius in solar radii from the mass-radius relation."""
    _require_stellar_mass(mass)

    if mass < 1.0:
        return mass**0.8
    return mass**0.57


def temperature(mass: float, star_luminosity: float) -> float:
    """Effective temperature in Kelvin.

    Inverts L = 4 pi R^2 sigma T^4 with R from the mass-radius relation.
    """
    r = radius(mass) * SOLAR_RADIUS
    watts = star_luminosity * SOLAR_LUMINOSITY
    return (watts / (4 * math.pi * r**2 * SIGMA)) ** 0.25


def spectral_class(star_temperature: float) -> str:
    """Harvard spectral class for an effective temperature.

    Examples:
        >>> spectral_class(30000)
        'O'
        >>> spectral_class(5778)
        'G'
    """
    for threshold, letter in SPECTRAL_THRESHOLDS:
        if star_temperature >= threshold:
            return letter
    return "M"


def star_color(spectral: str) -> str:
    return SPECTRAL_COLORS.get(spectral, "#FFFFFF")


def evolutionary_stage(mass: float, age: float) -> EvolutionaryStage:
    """Stage from the age as a fraction of the main sequence lifetime.

    Boundaries are at 0.1, 0.9, 1.1 and 1.5 lifetimes.
    """
    lifetime = main_sequence_lifetime(mass)

    if age < lifetime * 0.1:
        return EvolutionaryStage.YOUNG
    if age < lifetime * 0.9:
        return EvolutionaryStage.MAIN_SEQUENCE
    if age < lifetime * 1.1:
        return EvolutionaryStage.GIANT
    if age < lifetime * 1.5:
        return EvolutionaryStage.SUPERGIANT
    return EvolutionaryStage.REMNANT


def is_star_stable(mass: float, age: float) -> bool:
    """True while the star is still on the main sequence."""
    return age <= main_sequence_lifetime(mass)


def evolving_habitable_zone(mass: float, age: float) -> HabitableZoneDrift:
    """Compare the habitable zone now with the zone one Gyr later."""
    current = luminosity(mass, age)
    future = luminosity(mass, age + 1e9)

    return HabitableZoneDrift(
        current_inner=0.95 * math.sqrt(current),
        current_outer=1.37 * math.sqrt(current),
        future_inner=0.95 * math.sqrt(future),
        future_outer=1.37 * math.sqrt(future),
        has_moved=abs(future - current) > 0.1,
    )


def derive_star(star_type: str, mass: float, age: float) -> Star:
    """Build a Star with every derived property computed from (mass, age).

    Args:
        star_type: Key into STAR_TYPES
        mass: Solar masses
        age: Years

    Returns:
        Star with luminosity, temperature, radius, class, stage and color
    """
    star_luminosity = luminosity(mass, age)
    star_temperature = temperature(mass, star_luminosity)
    spectral = spectral_class(star_temperature)

    return Star(
        type=star_type,
        mass=mass,
        age=age,
        luminosity=star_luminosity,
        temperature=star_temperature,
        radius=radius(mass),
        spectral_class=spectral,
        evolutionary_stage=evolutionary_stage(mass, age).value,
        color=star_color(spectral),
    )
