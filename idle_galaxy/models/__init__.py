"""Data models for Idle Galaxy."""

from .civilization import Civilization, Government, Kardashev
from .planet import (
    Atmosphere,
    Conditions,
    Moon,
    Orbit,
    Planet,
    Resource,
    Rotation,
    SurfaceTemperature,
)
from .star import CompanionStar, Star
from .star_system import Coordinates, MinorBody, StarSystem

__all__ = [
    "Atmosphere",
    "Civilization",
    "CompanionStar",
    "Conditions",
    "Coordinates",
    "Government",
    "Kardashev",
    "MinorBody",
    "Moon",
    "Orbit",
    "Planet",
    "Resource",
    "Rotation",
    "Star",
    "StarSystem",
    "SurfaceTemperature",
]
