"""Tests for the time advance engine."""

import copy

import pytest

from idle_galaxy.engine.civilization_evolution import Crisis, CrisisType, Severity
from idle_galaxy.engine.system_generator import GenerationParams, generate_system
from idle_galaxy.engine.time_advance import (
    MAX_POPULATION,
    TimeAdvanceEngine,
    advance_system,
    advance_systems,
)
from idle_galaxy.models.planet import Resource
from idle_galaxy.physics.stellar_evolution import derive_star
from idle_galaxy.utils.serialization import system_to_dict


def create_system(seed=42, planets=3):
    """Create a Sun-like system for testing."""
    params = GenerationParams(
        name="Test", star_type="enana_amarilla", star_mass=1.0, planets_count=planets
    )
    return generate_system(params, seed=seed, owner_id="player-1")


def non_civilization_fields(system):
    """Snapshot fields that must not change when no time passes."""
    data = system_to_dict(system)
    for planet in data["planets"]:
        planet.pop("civilization")
    data.pop("version")
    return data


def make_crisis(crisis_type):
    return Crisis(
        type=crisis_type,
        severity=Severity.CRITICAL,
        planet_id="p",
        message="test crisis",
        horizon=100,
    )


class TestAdvance:
    """Test advancing a whole system."""

    def test_input_snapshot_untouched(self):
        """Test that advancing returns a new snapshot and leaves the input alone."""
        system = create_system()
        before = copy.deepcopy(system)

        result = advance_system(system, 1000)

        assert system == before
        assert result.system is not system
        assert result.system.galactic_year == 1000
        assert result.system.version == system.version + 1

    def test_crises_stamped_with_new_year(self):
        """Test that crises carry the galactic year reached by the advance."""
        first = advance_system(create_system(), 100)
        second = advance_system(first.system, 50)

        assert first.crises
        assert {crisis.year for crisis in first.crises} == {100}
        assert second.crises
        assert {crisis.year for crisis in second.crises} == {150}

    def test_zero_years_is_a_no_op(self):
        """Test that advancing zero years changes nothing outside civilizations."""
        system = create_system()

        result = advance_system(system, 0)

        assert non_civilization_fields(result.system) == non_civilization_fields(system)
        for before, after in zip(system.planets, result.system.planets):
            assert after.civilization.kardashev.level == before.civilization.kardashev.level
            assert after.civilization.technology == before.civilization.technology

    def test_star_ages_and_recomputes(self):
        """Test that the primary star's age and derived values move together."""
        system = create_system()

        result = advance_system(system, 1000)
        star = result.system.primary_star

        assert star.age == system.primary_star.age + 1000
        assert star == derive_star(star.type, star.mass, star.age)

    @pytest.mark.parametrize("years", [-1, 1.5, True, "100"])
    def test_rejects_invalid_years(self, years):
        """Test that only whole non-negative years are accepted."""
        with pytest.raises(ValueError, match="Invalid years"):
            advance_system(create_system(), years)

    def test_invariants_hold_over_many_advances(self):
        """Test habitability clamp and non-negative resources over long runs."""
        system = create_system(planets=6)

        for years in [100, 1000, 10000, 100000, 1, 0, 50000]:
            system = advance_system(system, years).system

            for planet in system.planets:
                assert 0 <= planet.conditions.habitability <= 1
                for resource in planet.resources.values():
                    assert resource.current >= 0
                civilization = planet.civilization
                assert 0 <= civilization.happiness <= 100
                assert 0 <= civilization.stability <= 100
                assert 0 <= civilization.population <= MAX_POPULATION

    def test_crises_reported(self):
        """Test that crises are returned with the new snapshot."""
        system = create_system()

        result = advance_system(system, 1000)

        assert result.crises
        assert all(c.planet_id.startswith(system.id) for c in result.crises)

    def test_advance_many(self):
        """Test advancing several systems by the same period."""
        systems = [create_system(seed=1), create_system(seed=2)]

        results = advance_systems(systems, 100)

        assert [r.system.galactic_year for r in results] == [100, 100]


class TestCivilizationStep:
    """Test per-planet civilization evolution."""

    def test_growth(self):
        """Test Kardashev, population and technology growth over a century."""
        planet = create_system().planets[0]
        planet.resources = {}
        planet.conditions.habitability = 0.95
        engine = TimeAdvanceEngine()

        engine.evolve_civilization(planet, 100)
        civilization = planet.civilization

        # Empty resources give the minimum rate of 0.001 per century
        assert civilization.kardashev.level == pytest.approx(0.1 + 0.001)
        assert civilization.technology["energy"] == pytest.approx(1.0 + 0.002)
        # 20% environmental loss from the 10000 year projection
        assert civilization.population == int(int(1_000_000 * 1.02**100) * 0.8)

    def test_population_capped(self):
        """Test that exponential growth saturates instead of overflowing."""
        planet = create_system().planets[0]

        TimeAdvanceEngine().evolve_civilization(planet, 10**7)

        assert planet.civilization.population <= MAX_POPULATION

    def test_extinction_freezes_civilization(self):
        """Test that an empty civilization is marked extinct and stops evolving."""
        planet = create_system().planets[0]
        planet.civilization.population = 0
        engine = TimeAdvanceEngine()

        engine.evolve_civilization(planet, 100)
        assert planet.civilization.extinct is True

        level = planet.civilization.kardashev.level
        assert engine.evolve_civilization(planet, 100) == []
        assert planet.civilization.kardashev.level == level

    def test_uninhabited_planet_skipped(self):
        """Test that planets without civilization raise no crises."""
        planet = create_system().planets[0]
        planet.civilization = None

        assert TimeAdvanceEngine().evolve_civilization(planet, 100) == []


class TestResourceStep:
    """Test resource consumption."""

    def test_depletion_floors_at_zero(self):
        """Test that overconsumption empties the stock without going negative."""
        planet = create_system().planets[0]
        planet.resources = {"metals": Resource(current=1000, initial=100000, depletion_rate=100)}

        TimeAdvanceEngine().consume_resources(planet, 50)

        assert planet.resources["metals"].current == 0
        assert planet.resources["metals"].years_remaining == 0

    def test_partial_consumption(self):
        """Test stock and years remaining after partial use."""
        planet = create_system().planets[0]
        planet.resources = {"metals": Resource(current=1000, initial=100000, depletion_rate=100)}

        TimeAdvanceEngine().consume_resources(planet, 3)

        assert planet.resources["metals"].current == 700
        assert planet.resources["metals"].years_remaining == 7

    def test_renewable_untouched(self):
        """Test that zero depletion stocks are not consumed."""
        planet = create_system().planets[0]
        planet.resources = {"energy": Resource(current=50000, initial=50000)}

        TimeAdvanceEngine().consume_resources(planet, 1000)

        assert planet.resources["energy"].current == 50000


class TestCrisisStep:
    """Test crisis effects on civilizations."""

    def test_resource_crisis(self):
        """Test happiness and stability loss from resource depletion."""
        planet = create_system().planets[0]

        TimeAdvanceEngine().apply_crisis(planet, make_crisis(CrisisType.RESOURCE_DEPLETION))

        assert planet.civilization.happiness == 50
        assert planet.civilization.stability == 60
        assert planet.civilization.population == 1_000_000

    def test_environmental_crisis(self):
        """Test population loss from environmental collapse."""
        planet = create_system().planets[0]

        TimeAdvanceEngine().apply_crisis(planet, make_crisis(CrisisType.ENVIRONMENTAL_COLLAPSE))

        assert planet.civilization.happiness == 40
        assert planet.civilization.stability == 50
        assert planet.civilization.population == 800_000

    def test_values_floor_at_zero(self):
        """Test that repeated crises never push values negative."""
        planet = create_system().planets[0]
        engine = TimeAdvanceEngine()

        for _ in range(10):
            engine.apply_crisis(planet, make_crisis(CrisisType.ENVIRONMENTAL_COLLAPSE))

        assert planet.civilization.happiness == 0
        assert planet.civilization.stability == 0


class TestEnvironmentStep:
    """Test climate and habitability drift."""

    def test_temperature_drift(self):
        """Test warming of 0.001 degC per year."""
        system = create_system()
        planet = system.planets[0]
        before = planet.conditions.temperature.surface

        TimeAdvanceEngine().apply_environmental_changes(planet, system.primary_star, 1000)

        assert planet.conditions.temperature.surface == pytest.approx(before + 1.0)

    def test_industrial_civilization_penalty(self):
        """Test habitability loss past Kardashev 0.5."""
        system = create_system()
        planet = system.planets[0]
        planet.civilization.kardashev.level = 0.6

        change = TimeAdvanceEngine().habitability_change(planet, system.primary_star, 100)

        assert change == pytest.approx(-0.005)

    def test_brightening_star_penalty(self):
        """Test habitability loss when the star brightens by more than 10%."""
        system = create_system()
        planet = system.planets[0]
        planet.civilization = None
        star = derive_star("enana_amarilla", 1.0, 1e10)

        change = TimeAdvanceEngine().habitability_change(planet, star, 200_000_000)

        assert change == pytest.approx(-0.01 * 2_000_000)

    def test_habitability_clamped(self):
        """Test that large penalties stop at zero."""
        system = create_system()
        planet = system.planets[0]
        star = derive_star("enana_amarilla", 1.0, 1e10)

        TimeAdvanceEngine().apply_environmental_changes(planet, star, 200_000_000)

        assert planet.conditions.habitability == 0
