"""Civilization data model."""

from dataclasses import dataclass, field
from typing import Dict

DEFAULT_LAWS = {
    "economicSystem": "mixed",
    "individualRights": "medium",
    "environmentalProtection": "medium",
    "technologicalDevelopment": "medium",
    "militaryFocus": "low",
}

DEFAULT_TECHNOLOGY = {
    "energy": 1.0,
    "computing": 1.0,
    "biotechnology": 1.0,
    "spaceTravel": 0.5,
    "weapons": 0.5,
    "medicine": 1.0,
}


@dataclass
class Government:
    type: str  # democratica, tecnocratica, imperio, colectiva, corporativista
    laws: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LAWS))


@dataclass
class Kardashev:
    """Continuous Kardashev progress of a civilization."""

    level: float = 0.1
    energy_consumption: float = 1e12  # Watts
    progress_to_next: float = 0.1

    def __post_init__(self):
        if self.level < 0:
            raise ValueError(f"Invalid kardashev level: {self.level} (must be >= 0)")


@dataclass
class Civilization:
    """Intelligent life living on a planet.

    Created at system generation and only changed by the time advance
    engine. A civilization whose population reaches zero is kept on the
    planet with ``extinct`` set, and no longer evolves.
    """

    population: int
    growth_rate: float  # Per-year multiplier, e.g. 1.02
    happiness: float  # 0-100
    stability: float  # 0-100
    government: Government
    technology: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_TECHNOLOGY))
    kardashev: Kardashev = field(default_factory=Kardashev)
    current_era: str = "pre_industrial"
    extinct: bool = False

    def __post_init__(self):
        """Validate civilization data after initialization."""
        if self.population < 0:
            raise ValueError(f"Invalid population: {self.population} (must be >= 0)")
        if not (0 <= self.happiness <= 100):
            raise ValueError(f"Invalid happiness: {self.happiness} (must be 0-100)")
        if not (0 <= self.stability <= 100):
            raise ValueError(f"Invalid stability: {self.stability} (must be 0-100)")
        for domain, level in self.technology.items():
            if level < 0:
                raise ValueError(f"Invalid technology level for {domain}: {level}")
