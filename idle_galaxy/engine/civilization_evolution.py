"""Civilization evolution rate and crisis projection.

The evolution rate is a per-century progress figure:

    rate = 0.01 * resources * environment * stability * moons

clamped to [0.001, 0.1]. The time advance engine scales it by the number of
elapsed years to raise Kardashev level and technology.

Crisis projection looks ahead 100, 1000 and 10000 years for resource
exhaustion and habitability collapse.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..models.planet import Conditions, Planet, Resource
from ..utils.constants import MIGRATION_HORIZONS

BASE_EVOLUTION_RATE = 0.01  # Per century
MIN_EVOLUTION_RATE = 0.001
MAX_EVOLUTION_RATE = 0.1

# Resource name -> weight in the resource factor
RESOURCE_WEIGHTS = {
    "metals": 0.4,
    "energy": 0.3,
    "rareElements": 0.3,
}

MOON_BONUS = 0.05
LARGE_MOON_MASS = 0.01  # Earth masses
LARGE_MOON_BONUS = 0.1
MAX_STABILITY_FACTOR = 1.5

HABITABILITY_DECLINE_PER_YEAR = 0.0001
COLLAPSE_HABITABILITY = 0.3


class CrisisType(str, Enum):
    RESOURCE_DEPLETION = "resource_depletion"
    ENVIRONMENTAL_COLLAPSE = "environmental_collapse"


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"


@dataclass
class ResourceCrisis:
    resource: str
    severity: Severity
    years_remaining: int


@dataclass
class FutureState:
    """Projected state of a planet some years ahead."""

    resource_crisis: Optional[ResourceCrisis] = None
    environmental_collapse: bool = False


@dataclass
class Crisis:
    """A crisis flagged for a planet.

    Attributes:
        type: resource_depletion or environmental_collapse
        severity: critical, high or medium
        planet_id: Planet affected
        message: Human-readable summary for notifications
        horizon: Projection horizon (years) that raised the crisis
        year: Galactic year the projection was made in
        resource: Depleting resource, for resource crises
        years_remaining: Whole years until the resource runs out
    """

    type: CrisisType
    severity: Severity
    planet_id: str
    message: str
    horizon: int
    year: int = 0
    resource: Optional[str] = None
    years_remaining: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "planetId": self.planet_id,
            "message": self.message,
            "horizon": self.horizon,
            "year": self.year,
            "resource": self.resource,
            "yearsRemaining": self.years_remaining,
        }


def resource_factor(resources: Dict[str, Resource]) -> float:
    """Weighted remaining fraction of metals, energy and rare elements.

    Each fraction is capped at 1 before weighting. Missing resources
    contribute nothing, so a planet with every stock full scores 1.0.
    """
    factor = 0.0

    for name, weight in RESOURCE_WEIGHTS.items():
        resource = resources.get(name)
        if resource is None:
            continue
        factor += min(1.0, resource.current / resource.initial) * weight

    return factor


def environment_factor(conditions: Conditions) -> float:
    """Multiplier from habitability tier and temperature stability."""
    factor = 1.0
    habitability = conditions.habitability

    if habitability < 0.3:
        factor *= 0.3
    elif habitability < 0.6:
        factor *= 0.7
    elif habitability > 0.9:
        factor *= 1.2

    if conditions.temperature_stability < 0.5:
        factor *= 0.8

    return factor


def stability_factor(planet: Planet) -> float:
    """Multiplier from orbit, tectonics and axis-stabilising moons, capped at 1.5."""
    stability = 1.0

    if planet.orbit.eccentricity > 0.2:
        stability *= 0.9

    if planet.tectonic_activity == "high":
        stability *= 0.8

    large_moons = [moon for moon in planet.moons if moon.mass > LARGE_MOON_MASS]
    stability *= 1 + len(large_moons) * LARGE_MOON_BONUS

    return min(MAX_STABILITY_FACTOR, stability)


def moon_factor(planet: Planet) -> float:
    return 1 + len(planet.moons) * MOON_BONUS


def evolution_rate(planet: Planet, years: int = 100) -> float:
    """Civilization progress per century for a planet.

    Args:
        planet: Planet to evaluate
        years: Period being simulated. The rate itself is per century and
            does not depend on it; callers scale the result.

    Returns:
        Rate clamped to [0.001, 0.1]
    """
    rate = (
        BASE_EVOLUTION_RATE
        * resource_factor(planet.resources)
        * environment_factor(planet.conditions)
        * stability_factor(planet)
        * moon_factor(planet)
    )

    return max(MIN_EVOLUTION_RATE, min(MAX_EVOLUTION_RATE, rate))


def _severity(years_remaining: float) -> Severity:
    if years_remaining <= 100:
        return Severity.CRITICAL
    if years_remaining <= 1000:
        return Severity.HIGH
    return Severity.MEDIUM


def project_future_state(planet: Planet, years: int) -> FutureState:
    """Project resource and habitability state ``years`` ahead.

    Resources are checked in order and the last one that runs out within
    the horizon is reported. Habitability decays linearly at 0.0001 per
    year; dropping below 0.3 is a collapse.
    """
    projection = FutureState()

    for name, resource in planet.resources.items():
        if resource.current <= 0 or resource.depletion_rate <= 0:
            continue

        years_remaining = resource.current / resource.depletion_rate
        if years_remaining <= years:
            projection.resource_crisis = ResourceCrisis(
                resource=name,
                severity=_severity(years_remaining),
                years_remaining=math.floor(years_remaining),
            )

    habitability = planet.conditions.habitability
    if habitability > 0:
        decline = years * HABITABILITY_DECLINE_PER_YEAR
        if habitability - decline < COLLAPSE_HABITABILITY:
            projection.environmental_collapse = True

    return projection


def check_migration_needed(planet: Planet, current_year: int = 0) -> List[Crisis]:
    """Flag crises expected at each projection horizon.

    One resource crisis and one environmental crisis can be raised per
    horizon, so a planet in trouble soon is flagged at every horizon.

    Args:
        planet: Planet to project
        current_year: Galactic year stamped on the crises

    Returns:
        Crises ordered by horizon
    """
    crises = []

    for horizon in MIGRATION_HORIZONS:
        future = project_future_state(planet, horizon)

        if future.resource_crisis is not None:
            crisis = future.resource_crisis
            crises.append(
                Crisis(
                    type=CrisisType.RESOURCE_DEPLETION,
                    severity=crisis.severity,
                    planet_id=planet.id,
                    message=f"{crisis.resource} will run out in ~{horizon} years on {planet.name}",
                    horizon=horizon,
                    year=current_year,
                    resource=crisis.resource,
                    years_remaining=crisis.years_remaining,
                )
            )

        if future.environmental_collapse:
            crises.append(
                Crisis(
                    type=CrisisType.ENVIRONMENTAL_COLLAPSE,
                    severity=Severity.CRITICAL,
                    planet_id=planet.id,
                    message=f"Critical habitability on {planet.name} in ~{horizon} years",
                    horizon=horizon,
                    year=current_year,
                )
            )

    return crises
