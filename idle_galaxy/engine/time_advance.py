"""Time advance engine.

Ages a star system by a number of years. For each planet, in order:

1. Civilization growth (inhabited, non-extinct planets only):
   - Kardashev level += rate * years / 100
   - Population *= growth_rate ^ years (floored)
   - Every technology domain += rate * years / 50
   - Resources deplete by depletion_rate * years (floored at 0)
   - Migration check; crises are applied to the civilization
2. Environmental drift (every planet):
   - Surface temperature += 0.001 degC per year
   - Habitability -0.01 per century if the star brightens by more than
     10% over the period, and -0.005 per century if the civilization
     is past Kardashev 0.5; clamped to [0, 1]

After all planets, the primary star is aged and its derived properties
recomputed, the galactic year advances and the snapshot version is bumped.

The input snapshot is never modified: the engine works on a deep copy and
returns it together with the crises raised.

Architecture:
Each step is an independent method on TimeAdvanceEngine so it can be
tested in isolation. ``advance_system`` composes them.
"""

import copy
import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List

from ..models.civilization import Civilization
from ..models.planet import Planet
from ..models.star import Star
from ..models.star_system import StarSystem
from ..physics.stellar_evolution import derive_star, luminosity
from ..utils.math_utils import clamp
from .civilization_evolution import Crisis, CrisisType, check_migration_needed, evolution_rate

logger = logging.getLogger(__name__)

CLIMATE_DRIFT_PER_YEAR = 0.001  # degC
BRIGHTENING_THRESHOLD = 1.1
BRIGHTENING_PENALTY = 0.01  # Habitability per century
INDUSTRIAL_KARDASHEV = 0.5
INDUSTRIAL_PENALTY = 0.005  # Habitability per century
MAX_POPULATION = 10**18

RESOURCE_CRISIS_IMPACT = {"happiness": 20, "stability": 15}
ENVIRONMENTAL_CRISIS_IMPACT = {"happiness": 30, "stability": 25}
ENVIRONMENTAL_POPULATION_FACTOR = 0.8


@dataclass
class AdvanceResult:
    """Outcome of advancing one system.

    Attributes:
        system: New snapshot after the advance
        crises: Crises raised and applied, in planet order
    """

    system: StarSystem
    crises: List[Crisis] = field(default_factory=list)


class TimeAdvanceEngine:
    """Applies civilization, resource and environmental evolution to systems."""

    # =========================================================================
    # PER-PLANET STEPS
    # =========================================================================

    def evolve_civilization(
        self, planet: Planet, years: int, current_year: int = 0
    ) -> List[Crisis]:
        """Grow the planet's civilization and apply any crises.

        Args:
            planet: Planet to evolve (modified in place)
            years: Elapsed years
            current_year: Galactic year stamped on crises

        Returns:
            Crises raised for this planet
        """
        civilization = planet.civilization
        if civilization is None or civilization.extinct:
            return []

        rate = evolution_rate(planet, years)

        civilization.kardashev.level += rate * years / 100
        civilization.population = self._grow_population(civilization, years)

        for domain in civilization.technology:
            civilization.technology[domain] += rate * years / 50

        self.consume_resources(planet, years)

        crises = check_migration_needed(planet, current_year)
        for crisis in crises:
            self.apply_crisis(planet, crisis)

        if civilization.population == 0:
            civilization.extinct = True
            logger.warning(f"Civilization on {planet.name} has gone extinct")

        return crises

    def consume_resources(self, planet: Planet, years: int) -> None:
        """Deplete each consumed resource and recompute years remaining."""
        for resource in planet.resources.values():
            if resource.current <= 0 or resource.depletion_rate <= 0:
                continue

            resource.current = max(0, resource.current - resource.depletion_rate * years)
            resource.years_remaining = math.floor(resource.current / resource.depletion_rate)

    def apply_crisis(self, planet: Planet, crisis: Crisis) -> None:
        """Apply a crisis to the planet's civilization.

        Resource depletion costs 20 happiness and 15 stability. An
        environmental collapse costs 30 happiness, 25 stability and a
        fifth of the population. Values never go below zero.
        """
        civilization = planet.civilization
        if civilization is None:
            return

        if crisis.type == CrisisType.RESOURCE_DEPLETION:
            impact = RESOURCE_CRISIS_IMPACT
            logger.warning(f"Resource crisis on {planet.name}: {crisis.message}")
        elif crisis.type == CrisisType.ENVIRONMENTAL_COLLAPSE:
            impact = ENVIRONMENTAL_CRISIS_IMPACT
            civilization.population = math.floor(
                civilization.population * ENVIRONMENTAL_POPULATION_FACTOR
            )
            logger.warning(f"Environmental crisis on {planet.name}: {crisis.message}")
        else:
            raise ValueError(f"Unknown crisis type: {crisis.type}")

        civilization.happiness = max(0, civilization.happiness - impact["happiness"])
        civilization.stability = max(0, civilization.stability - impact["stability"])

    def apply_environmental_changes(self, planet: Planet, star: Star, years: int) -> None:
        """Drift temperature and habitability, with or without a civilization."""
        planet.conditions.temperature.surface += years * CLIMATE_DRIFT_PER_YEAR

        change = self.habitability_change(planet, star, years)
        planet.conditions.habitability = clamp(planet.conditions.habitability + change, 0, 1)

    def habitability_change(self, planet: Planet, star: Star, years: int) -> float:
        """Habitability delta from stellar brightening and industry."""
        change = 0.0

        future_luminosity = luminosity(star.mass, star.age + years)
        if future_luminosity > star.luminosity * BRIGHTENING_THRESHOLD:
            change -= BRIGHTENING_PENALTY * years / 100

        civilization = planet.civilization
        if civilization is not None and civilization.kardashev.level > INDUSTRIAL_KARDASHEV:
            change -= INDUSTRIAL_PENALTY * years / 100

        return change

    # =========================================================================
    # SYSTEM ORCHESTRATION
    # =========================================================================

    def evolve_planet(
        self, planet: Planet, star: Star, years: int, current_year: int = 0
    ) -> List[Crisis]:
        """Run every per-planet step in order."""
        crises = self.evolve_civilization(planet, years, current_year)
        self.apply_environmental_changes(planet, star, years)
        return crises

    def age_star(self, star: Star, years: int) -> Star:
        """Return the star aged by ``years`` with derived properties recomputed."""
        return derive_star(star.type, star.mass, star.age + years)

    def advance(self, system: StarSystem, years: int) -> AdvanceResult:
        """Advance a copy of ``system`` by ``years``.

        Args:
            system: Snapshot to advance (not modified)
            years: Whole non-negative number of years

        Returns:
            AdvanceResult with the new snapshot and crises

        Raises:
            ValueError: If years is not a non-negative integer
        """
        if isinstance(years, bool) or not isinstance(years, int) or years < 0:
            raise ValueError(f"Invalid years: {years!r} (must be a non-negative integer)")

        evolved = copy.deepcopy(system)
        star = evolved.primary_star
        crises = []
        evolved.galactic_year += years

        for planet in evolved.planets:
            crises.extend(self.evolve_planet(planet, star, years, evolved.galactic_year))

        evolved.primary_star = self.age_star(star, years)
        evolved.version += 1

        logger.info(
            f"Advanced system {evolved.id} by {years} years to year "
            f"{evolved.galactic_year} ({len(crises)} crises)"
        )
        return AdvanceResult(system=evolved, crises=crises)

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    def _grow_population(self, civilization: Civilization, years: int) -> int:
        try:
            grown = civilization.population * civilization.growth_rate**years
        except OverflowError:
            return MAX_POPULATION
        if grown >= MAX_POPULATION:
            return MAX_POPULATION
        return math.floor(grown)


def advance_system(system: StarSystem, years: int) -> AdvanceResult:
    """Advance one system snapshot by ``years``. See TimeAdvanceEngine.advance."""
    return TimeAdvanceEngine().advance(system, years)


def advance_systems(systems: Iterable[StarSystem], years: int) -> List[AdvanceResult]:
    """Advance every owned system by the same number of years."""
    engine = TimeAdvanceEngine()
    return [engine.advance(system, years) for system in systems]
