"""Star data models."""

from dataclasses import dataclass

from .catalogs import STAR_TYPES


@dataclass
class Star:
    """Primary star of a system.

    Luminosity, temperature, radius, spectral class, stage and color are
    derived from (mass, age) by the stellar evolution formulas. They are
    stored for display but must be recomputed whenever the age changes.
    """

    type: str  # Key into STAR_TYPES (e.g. "enana_amarilla")
    mass: float  # Solar masses
    age: float  # Years
    luminosity: float  # Solar luminosities
    temperature: float  # Kelvin
    radius: float  # Solar radii
    spectral_class: str  # O, B, A, F, G, K or M
    evolutionary_stage: str  # joven, secuencia_principal, gigante, ...
    color: str  # Hex color for the spectral class

    def __post_init__(self):
        """Validate star data after initialization."""
        if self.type not in STAR_TYPES:
            raise ValueError(f"Invalid star type: {self.type}")
        if self.mass <= 0:
            raise ValueError(f"Invalid mass: {self.mass} (must be > 0)")
        if self.age < 0:
            raise ValueError(f"Invalid age: {self.age} (must be >= 0)")


@dataclass
class CompanionStar:
    """Secondary star in a binary or trinary system."""

    type: str
    mass: float  # Solar masses
    orbit_distance: float  # AU from the primary

    def __post_init__(self):
        """Validate companion data after initialization."""
        if self.type not in STAR_TYPES:
            raise ValueError(f"Invalid star type: {self.type}")
        if self.mass <= 0:
            raise ValueError(f"Invalid mass: {self.mass} (must be > 0)")
