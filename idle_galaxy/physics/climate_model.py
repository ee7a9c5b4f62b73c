"""Planetary climate approximations."""

import math
from dataclasses import dataclass

from ..models.planet import Atmosphere, SurfaceTemperature
from ..utils.constants import (
    AU,
    CLIMATE_SENSITIVITY,
    DEFAULT_ALBEDO,
    EARTH_MASS,
    EARTH_RADIUS,
    G,
    KELVIN_OFFSET,
    KPA_PER_ATMOSPHERE_GRAVITY,
    PREINDUSTRIAL_REFERENCE,
    SIGMA,
    SOLAR_LUMINOSITY,
)

# Radiative forcing coefficient (W/m^2) and concentration assumed when the
# gas is missing from the composition
GREENHOUSE_GASES = {
    "CO2": (5.35, 0.0004),
    "CH4": (0.5, 0.0000018),
    "N2O": (0.15, 0.00000032),
    "H2O": (2.0, 0.01),
}


@dataclass
class HabitableZone:
    inner: float  # AU
    outer: float  # AU
    width: float  # AU

    def contains(self, distance: float) -> bool:
        return self.inner <= distance <= self.outer


def greenhouse_effect(atmosphere: Atmosphere) -> float:
    """Warming in Kelvin from logarithmic greenhouse forcing.

    Each gas contributes ``forcing * ln(concentration / 0.00028)`` W/m^2,
    converted with a sensitivity of 0.8 degC per W/m^2. Gases with a
    concentration <= 0 contribute nothing.
    """
    forcing = 0.0

    for gas, (coefficient, default_concentration) in GREENHOUSE_GASES.items():
        concentration = atmosphere.composition.get(gas, default_concentration)
        if concentration > 0:
            forcing += coefficient * math.log(concentration / PREINDUSTRIAL_REFERENCE)

    return forcing * CLIMATE_SENSITIVITY


def equilibrium_temperature(
    star_luminosity: float, semi_major_axis: float, atmosphere: Atmosphere
) -> SurfaceTemperature:
    """Effective and surface temperature of a planet.

    Args:
        star_luminosity: Luminosity of the star in solar units
        semi_major_axis: Orbital distance in AU
        atmosphere: Atmosphere providing albedo and composition

    Returns:
        SurfaceTemperature in degrees Celsius
    """
    if semi_major_axis <= 0:
        raise ValueError(f"Invalid semi_major_axis: {semi_major_axis} (must be > 0)")

    flux = (star_luminosity * SOLAR_LUMINOSITY) / (4 * math.pi * (semi_major_axis * AU) ** 2)

    albedo = atmosphere.albedo if atmosphere.albedo is not None else DEFAULT_ALBEDO
    absorbed = flux * (1 - albedo) / 4

    effective = (absorbed / SIGMA) ** 0.25
    greenhouse = greenhouse_effect(atmosphere)

    return SurfaceTemperature(
        effective=effective - KELVIN_OFFSET,
        surface=effective + greenhouse - KELVIN_OFFSET,
        greenhouse=greenhouse,
        albedo=albedo,
    )


def habitable_zone(star_luminosity: float) -> HabitableZone:
    """Habitable zone bounds scaled by the square root of luminosity."""
    if star_luminosity <= 0:
        raise ValueError(f"Invalid luminosity: {star_luminosity} (must be > 0)")

    inner = 0.95 * math.sqrt(star_luminosity)
    outer = 1.37 * math.sqrt(star_luminosity)
    return HabitableZone(inner=inner, outer=outer, width=outer - inner)


def surface_gravity(planet_mass: float, planet_radius: float) -> float:
    """Surface gravity in m/s^2 for mass in Earth masses and radius in Earth radii."""
    return (G * planet_mass * EARTH_MASS) / (planet_radius * EARTH_RADIUS) ** 2


def surface_pressure(planet_mass: float, planet_radius: float, atmosphere: Atmosphere) -> float:
    """Surface pressure in kPa from gravity and atmospheric mass."""
    gravity = surface_gravity(planet_mass, planet_radius)
    return atmosphere.mass * gravity * KPA_PER_ATMOSPHERE_GRAVITY
