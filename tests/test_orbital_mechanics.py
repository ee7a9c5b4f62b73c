"""Tests for Keplerian orbital mechanics."""

import math

import pytest

from idle_galaxy.models.catalogs import YELLOW_DWARF
from idle_galaxy.models.planet import (
    Atmosphere,
    Conditions,
    Orbit,
    Planet,
    Rotation,
    SurfaceTemperature,
)
from idle_galaxy.physics.orbital_mechanics import (
    find_orbital_resonances,
    hill_sphere,
    is_orbit_stable,
    orbital_period,
    orbital_position,
    orbital_velocity,
    planet_hill_radius,
    solve_kepler,
)
from idle_galaxy.physics.stellar_evolution import derive_star


def make_planet(planet_id, distance, period=1.0, mass=1.0):
    """Create an Earth-like planet at the given distance."""
    return Planet(
        id=planet_id,
        name=planet_id,
        index=0,
        type="rocoso",
        size=1.0,
        mass=mass,
        orbit=Orbit(semi_major_axis=distance, eccentricity=0.0, period=period, inclination=0.0),
        rotation=Rotation(period=24, axial_tilt=23.4),
        conditions=Conditions(
            temperature=SurfaceTemperature(effective=-18, surface=15, greenhouse=33, albedo=0.3),
            atmosphere=Atmosphere(),
            pressure=101.3,
            habitability=0.8,
        ),
    )


class TestKeplerThirdLaw:
    """Test orbital period and velocity."""

    def test_earth_year(self):
        """Test that 1 AU around one solar mass takes one year."""
        assert orbital_period(1.0, 1.0) == pytest.approx(1.0, rel=1e-3)

    def test_period_scales_with_distance(self):
        """Test that four times the distance gives eight times the period."""
        assert orbital_period(1.0, 4.0) == pytest.approx(8.0, rel=1e-3)

    def test_heavier_star_shortens_period(self):
        """Test that period falls as the central mass grows."""
        assert orbital_period(4.0, 1.0) == pytest.approx(0.5, rel=1e-3)

    def test_rejects_massless_star(self):
        """Test that a zero central mass is rejected."""
        with pytest.raises(ValueError, match="Invalid central_mass"):
            orbital_period(0, 1.0)

    def test_earth_orbital_velocity(self):
        """Test that Earth moves at about 29.8 km/s."""
        assert orbital_velocity(1.0, 1.0) == pytest.approx(29.78, abs=0.1)


class TestSolveKepler:
    """Test the fixed-iteration Kepler solver."""

    def test_circular_orbit_is_identity(self):
        """Test that E == M when e == 0."""
        assert solve_kepler(1.234, 0.0) == pytest.approx(1.234)

    def test_satisfies_keplers_equation(self):
        """Test that the result solves M = E - e sin E for low eccentricity."""
        mean_anomaly = 1.0
        eccentricity = 0.1

        eccentric = solve_kepler(mean_anomaly, eccentricity)

        assert eccentric - eccentricity * math.sin(eccentric) == pytest.approx(
            mean_anomaly, abs=1e-8
        )

    def test_fixed_iterations_are_reproducible(self):
        """Test that the same inputs always give the same answer."""
        assert solve_kepler(2.5, 0.6) == solve_kepler(2.5, 0.6)
        assert solve_kepler(2.5, 0.6, iterations=1) != solve_kepler(2.5, 0.6, iterations=10)


class TestOrbitalPosition:
    """Test positions along an orbit."""

    @pytest.mark.parametrize("time", [0.0, 0.3, 1.7, 12.5, 100.0])
    def test_circular_orbit_keeps_distance(self, time):
        """Test that a circular orbit stays at the semi-major axis."""
        position = orbital_position(time, 2.5, 0.0, 0.4, 1.0, 0.5, 0.2)

        assert position.distance == pytest.approx(2.5)
        radius = math.sqrt(position.x**2 + position.y**2 + position.z**2)
        assert radius == pytest.approx(2.5)

    def test_starts_at_periapsis(self):
        """Test that zero anomaly at epoch places the body at periapsis."""
        position = orbital_position(0.0, 1.0, 0.5, 0.0, 0.0, 0.0, 0.0)

        assert position.distance == pytest.approx(0.5)
        assert position.x == pytest.approx(0.5)
        assert position.y == pytest.approx(0.0, abs=1e-12)
        assert position.z == pytest.approx(0.0, abs=1e-12)

    def test_flat_orbit_has_no_height(self):
        """Test that an uninclined orbit stays in the plane."""
        position = orbital_position(0.37, 1.0, 0.1, 0.0, 0.3, 0.7, 0.0)
        assert position.z == pytest.approx(0.0, abs=1e-12)


class TestHillSphere:
    """Test Hill radii and orbital stability."""

    def test_hill_sphere_formula(self):
        """Test r = a * (m / 3M)^(1/3)."""
        assert hill_sphere(1.0, 3.0, 1.0) == pytest.approx((1 / 9) ** (1 / 3))
        assert hill_sphere(1.0, 3.0, 2.0) == pytest.approx(2 * (1 / 9) ** (1 / 3))

    def test_earth_hill_radius(self):
        """Test that Earth's Hill radius is about 0.01 AU."""
        star = derive_star(YELLOW_DWARF, 1.0, 4.5e9)
        earth = make_planet("earth", 1.0)

        assert planet_hill_radius(earth, star) == pytest.approx(0.01, rel=0.02)

    def test_crowded_orbits_are_unstable(self):
        """Test that a neighbour inside 3.5 Hill radii destabilises the orbit."""
        star = derive_star(YELLOW_DWARF, 1.0, 4.5e9)
        planet = make_planet("a", 1.0)
        neighbour = make_planet("b", 1.01)

        assert not is_orbit_stable(planet, star, [planet, neighbour])

    def test_spaced_orbits_are_stable(self):
        """Test that well separated planets are stable, ignoring the planet itself."""
        star = derive_star(YELLOW_DWARF, 1.0, 4.5e9)
        planet = make_planet("a", 1.0)
        neighbour = make_planet("b", 2.0)

        assert is_orbit_stable(planet, star, [planet, neighbour])
        assert is_orbit_stable(planet, star, [planet])


class TestResonances:
    """Test mean motion resonance detection."""

    def test_exact_two_to_one(self):
        """Test that doubled periods form a full strength 2:1 resonance."""
        planets = [make_planet("inner", 1.0, period=1.0), make_planet("outer", 1.6, period=2.0)]

        resonances = find_orbital_resonances(planets)

        assert len(resonances) == 1
        assert resonances[0].resonance == "2:1"
        assert resonances[0].planets == ("inner", "outer")
        assert resonances[0].exact_ratio == pytest.approx(2.0)
        assert resonances[0].strength == pytest.approx(1.0)

    def test_ratio_independent_of_order(self):
        """Test that listing the outer planet first still finds the resonance."""
        planets = [make_planet("outer", 1.3, period=1.5), make_planet("inner", 1.0, period=1.0)]

        resonances = find_orbital_resonances(planets)

        assert [r.resonance for r in resonances] == ["3:2"]

    def test_near_resonance_has_partial_strength(self):
        """Test that strength falls as the ratio drifts from p/q."""
        planets = [make_planet("a", 1.0, period=1.0), make_planet("b", 1.6, period=2.01)]

        resonances = find_orbital_resonances(planets)

        assert len(resonances) == 1
        assert resonances[0].strength == pytest.approx(0.5)

    def test_no_resonance_outside_tolerance(self):
        """Test that unrelated periods produce nothing."""
        planets = [make_planet("a", 1.0, period=1.0), make_planet("b", 1.5, period=1.7)]
        assert find_orbital_resonances(planets) == []

    def test_zero_periods_are_skipped(self):
        """Test that planets without a period are ignored."""
        planets = [make_planet("a", 1.0, period=0.0), make_planet("b", 1.5, period=2.0)]
        assert find_orbital_resonances(planets) == []
