"""Physical approximations used to build and age star systems."""

from . import climate_model, orbital_mechanics, stellar_evolution

__all__ = [
    "climate_model",
    "orbital_mechanics",
    "stellar_evolution",
]
