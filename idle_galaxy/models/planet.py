"""Planet data model and its component records."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .catalogs import PLANET_TYPES
from .civilization import Civilization


@dataclass
class Orbit:
    semi_major_axis: float  # AU
    eccentricity: float  # [0, 1)
    period: float  # Years
    inclination: float  # Degrees

    def __post_init__(self):
        """Validate orbit data after initialization."""
        if self.semi_major_axis <= 0:
            raise ValueError(
                f"Invalid semi_major_axis: {self.semi_major_axis} (must be > 0)"
            )
        if not (0 <= self.eccentricity < 1):
            raise ValueError(f"Invalid eccentricity: {self.eccentricity} (must be in [0, 1))")


@dataclass
class Rotation:
    period: float  # Hours
    axial_tilt: float  # Degrees


@dataclass
class Atmosphere:
    """Atmosphere composition as gas -> fraction, plus radiative properties."""

    composition: Dict[str, float] = field(default_factory=dict)
    albedo: float = 0.3
    pressure: float = 1.0  # Atmospheres
    quality: float = 0.8
    mass: float = 1.0  # Earth atmosphere masses


@dataclass
class SurfaceTemperature:
    """Planet temperatures in degrees Celsius."""

    effective: float
    surface: float
    greenhouse: float  # Kelvin added by greenhouse forcing
    albedo: float


@dataclass
class Conditions:
    temperature: SurfaceTemperature
    atmosphere: Atmosphere
    pressure: float  # kPa
    habitability: float  # [0, 1]
    temperature_stability: float = 1.0  # [0, 1], below 0.5 slows evolution

    def __post_init__(self):
        """Validate conditions after initialization."""
        if not (0 <= self.habitability <= 1):
            raise ValueError(f"Invalid habitability: {self.habitability} (must be 0-1)")


@dataclass
class Resource:
    """A planetary resource stock.

    ``initial`` doubles as capacity for renewable stocks such as energy.
    A depletion rate of 0 means the stock is not consumed.
    """

    current: float
    initial: float
    depletion_rate: float = 0.0  # Units per year
    years_remaining: Optional[float] = None

    def __post_init__(self):
        """Validate resource data after initialization."""
        if self.current < 0:
            raise ValueError(f"Invalid current: {self.current} (must be >= 0)")
        if self.initial <= 0:
            raise ValueError(f"Invalid initial: {self.initial} (must be > 0)")
        if self.depletion_rate < 0:
            raise ValueError(
                f"Invalid depletion_rate: {self.depletion_rate} (must be >= 0)"
            )


@dataclass
class Moon:
    id: str
    name: str
    mass: float  # Earth masses
    radius: float  # Earth radii
    distance: float  # AU from the planet
    orbital_period: float  # Days
    composition: str = "rocky"


@dataclass
class Planet:
    """A planet orbiting the primary star.

    Planets without a civilization are uninhabited. ``size`` is the planet
    radius in Earth radii and ``mass`` is in Earth masses.
    """

    id: str
    name: str
    index: int  # Ordinal position from the star (0 = innermost)
    type: str  # Key into PLANET_TYPES
    size: float  # Earth radii
    mass: float  # Earth masses
    orbit: Orbit
    rotation: Rotation
    conditions: Conditions
    resources: Dict[str, Resource] = field(default_factory=dict)
    civilization: Optional[Civilization] = None
    moons: List[Moon] = field(default_factory=list)
    tectonic_activity: str = "medium"  # low, medium or high

    def __post_init__(self):
        """Validate planet data after initialization."""
        if self.type not in PLANET_TYPES:
            raise ValueError(f"Invalid planet type: {self.type}")
        if self.index < 0:
            raise ValueError(f"Invalid index: {self.index} (must be >= 0)")
        if self.size <= 0:
            raise ValueError(f"Invalid size: {self.size} (must be > 0)")
        if self.mass <= 0:
            raise ValueError(f"Invalid mass: {self.mass} (must be > 0)")

    @property
    def radius(self) -> float:
        """Planet radius in Earth radii."""
        return self.size

    @property
    def inhabited(self) -> bool:
        return self.civilization is not None
