"""Tests for data models."""

import pytest

from idle_galaxy.models import (
    Atmosphere,
    Civilization,
    CompanionStar,
    Conditions,
    Coordinates,
    Government,
    Kardashev,
    Orbit,
    Planet,
    Resource,
    Rotation,
    Star,
    StarSystem,
    SurfaceTemperature,
)
from idle_galaxy.models.catalogs import PLANET_TYPES, STAR_TYPES


def make_star(**overrides):
    values = {
        "type": "enana_amarilla",
        "mass": 1.0,
        "age": 4.5e9,
        "luminosity": 1.0,
        "temperature": 5772,
        "radius": 1.0,
        "spectral_class": "G",
        "evolutionary_stage": "secuencia_principal",
        "color": "#FFF4EA",
    }
    values.update(overrides)
    return Star(**values)


def make_conditions(habitability=0.8):
    return Conditions(
        temperature=SurfaceTemperature(effective=-18, surface=15, greenhouse=33, albedo=0.3),
        atmosphere=Atmosphere(),
        pressure=101.3,
        habitability=habitability,
    )


def make_planet(planet_id="p0", civilization=None):
    return Planet(
        id=planet_id,
        name="Terra",
        index=0,
        type="rocoso",
        size=1.0,
        mass=1.0,
        orbit=Orbit(semi_major_axis=1.0, eccentricity=0.0167, period=1.0, inclination=0.0),
        rotation=Rotation(period=24, axial_tilt=23.4),
        conditions=make_conditions(),
        civilization=civilization,
    )


def make_civilization(**overrides):
    values = {
        "population": 1_000_000,
        "growth_rate": 1.02,
        "happiness": 70,
        "stability": 75,
        "government": Government(type="democratica"),
    }
    values.update(overrides)
    return Civilization(**values)


class TestStar:
    """Test Star dataclass."""

    def test_create_star(self):
        """Test basic star creation."""
        star = make_star()
        assert star.type == "enana_amarilla"
        assert star.spectral_class == "G"

    def test_invalid_type(self):
        """Test that unknown star types are rejected."""
        with pytest.raises(ValueError, match="Invalid star type"):
            make_star(type="quasar")

    def test_invalid_mass_and_age(self):
        """Test mass and age validation."""
        with pytest.raises(ValueError, match="Invalid mass"):
            make_star(mass=0)
        with pytest.raises(ValueError, match="Invalid age"):
            make_star(age=-1)

    def test_companion_validation(self):
        """Test companion star validation."""
        assert CompanionStar(type="enana_roja", mass=0.3, orbit_distance=50).mass == 0.3
        with pytest.raises(ValueError, match="Invalid mass"):
            CompanionStar(type="enana_roja", mass=-0.3, orbit_distance=50)


class TestPlanet:
    """Test Planet and its component records."""

    def test_uninhabited_by_default(self):
        """Test that a planet without civilization is uninhabited."""
        planet = make_planet()
        assert not planet.inhabited
        assert planet.radius == planet.size

    def test_inhabited(self):
        """Test that a civilization makes the planet inhabited."""
        assert make_planet(civilization=make_civilization()).inhabited

    def test_invalid_orbit(self):
        """Test eccentricity and semi-major axis validation."""
        with pytest.raises(ValueError, match="Invalid eccentricity"):
            Orbit(semi_major_axis=1.0, eccentricity=1.0, period=1.0, inclination=0.0)
        with pytest.raises(ValueError, match="Invalid semi_major_axis"):
            Orbit(semi_major_axis=0.0, eccentricity=0.1, period=1.0, inclination=0.0)

    def test_invalid_habitability(self):
        """Test that habitability must be in [0, 1]."""
        with pytest.raises(ValueError, match="Invalid habitability"):
            make_conditions(habitability=1.5)

    def test_invalid_resource(self):
        """Test that resource stocks cannot be negative."""
        with pytest.raises(ValueError, match="Invalid current"):
            Resource(current=-1, initial=100)
        with pytest.raises(ValueError, match="Invalid initial"):
            Resource(current=0, initial=0)

    def test_invalid_planet_type(self):
        """Test that unknown planet types are rejected."""
        with pytest.raises(ValueError, match="Invalid planet type"):
            Planet(
                id="p",
                name="X",
                index=0,
                type="lava",
                size=1.0,
                mass=1.0,
                orbit=Orbit(semi_major_axis=1.0, eccentricity=0.0, period=1.0, inclination=0.0),
                rotation=Rotation(period=24, axial_tilt=0),
                conditions=make_conditions(),
            )


class TestCivilization:
    """Test Civilization dataclass."""

    def test_defaults(self):
        """Test default technology, laws and Kardashev state."""
        civilization = make_civilization()

        assert civilization.technology["spaceTravel"] == 0.5
        assert civilization.government.laws["economicSystem"] == "mixed"
        assert civilization.kardashev.level == 0.1
        assert civilization.extinct is False

    def test_defaults_not_shared(self):
        """Test that default dictionaries are independent per instance."""
        first = make_civilization()
        second = make_civilization()
        first.technology["energy"] = 5.0

        assert second.technology["energy"] == 1.0

    @pytest.mark.parametrize(
        "overrides,match",
        [
            ({"population": -1}, "Invalid population"),
            ({"happiness": 101}, "Invalid happiness"),
            ({"stability": -5}, "Invalid stability"),
            ({"technology": {"energy": -1}}, "Invalid technology"),
        ],
    )
    def test_validation(self, overrides, match):
        """Test civilization field validation."""
        with pytest.raises(ValueError, match=match):
            make_civilization(**overrides)

    def test_negative_kardashev(self):
        """Test that Kardashev level cannot be negative."""
        with pytest.raises(ValueError, match="Invalid kardashev level"):
            Kardashev(level=-0.1)


class TestStarSystem:
    """Test StarSystem aggregate."""

    def make_system(self, **overrides):
        values = {
            "id": "system_1",
            "name": "Sol",
            "primary_star": make_star(),
            "coordinates": Coordinates(x=100, y=100, quadrant="alpha"),
            "planets": [make_planet("p0"), make_planet("p1", make_civilization())],
        }
        values.update(overrides)
        return StarSystem(**values)

    def test_get_planet(self):
        """Test planet lookup by id."""
        system = self.make_system()

        assert system.get_planet("p1").id == "p1"
        with pytest.raises(KeyError):
            system.get_planet("missing")

    def test_has_civilization(self):
        """Test detection of inhabited planets."""
        assert self.make_system().has_civilization
        assert not self.make_system(planets=[make_planet()]).has_civilization

    @pytest.mark.parametrize(
        "overrides,match",
        [
            ({"name": ""}, "name cannot be empty"),
            ({"multiple_system": "quad"}, "Invalid multiple_system"),
            ({"habitable_zone_preference": "any"}, "Invalid habitable_zone_preference"),
            ({"version": -1}, "Invalid version"),
        ],
    )
    def test_validation(self, overrides, match):
        """Test system field validation."""
        with pytest.raises(ValueError, match=match):
            self.make_system(**overrides)


class TestCatalogs:
    """Test static catalogs."""

    def test_catalogs_are_read_only(self):
        """Test that catalog tables cannot be modified."""
        with pytest.raises(TypeError):
            STAR_TYPES["neutron"] = {}
        with pytest.raises(TypeError):
            PLANET_TYPES["rocoso"]["habitability"] = (0, 1)

    def test_every_type_has_ranges(self):
        """Test that planet types define size and habitability ranges."""
        for info in PLANET_TYPES.values():
            low, high = info["habitability"]
            assert 0 <= low <= high <= 1
            assert info["size_range"][0] > 0
