"""Star system serialization to/from JSON.

Snapshots are stored as plain dictionaries with numeric and string leaves,
the shape an external document store expects.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from ..models.civilization import Civilization, Government, Kardashev
from ..models.planet import (
    Atmosphere,
    Conditions,
    Moon,
    Orbit,
    Planet,
    Resource,
    Rotation,
    SurfaceTemperature,
)
from ..models.star import CompanionStar, Star
from ..models.star_system import Coordinates, MinorBody, StarSystem


def _resolve_path(filepath: str) -> Path:
    """Relative paths land in the ``state`` directory next to the package."""
    path = Path(filepath)
    if not path.is_absolute():
        state_dir = Path(__file__).parent.parent.parent / "state"
        state_dir.mkdir(exist_ok=True)
        path = state_dir / filepath
    return path


def save_system(system: StarSystem, filepath: str) -> None:
    """Save a system snapshot to a JSON file.

    Args:
        system: Snapshot to save
        filepath: Path to save file (placed in the state directory if relative)

    Example:
        save_system(system, "sol.json")  # Saves to state/sol.json
    """
    path = _resolve_path(filepath)

    with open(path, "w") as f:
        json.dump(system_to_dict(system), f, indent=2)


def load_system(filepath: str) -> StarSystem:
    """Load a system snapshot from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or malformed
    """
    path = _resolve_path(filepath)

    with open(path) as f:
        data = json.load(f)

    try:
        return system_from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed system file {path}: {e}") from e


def system_to_dict(system: StarSystem) -> dict[str, Any]:
    """Convert a StarSystem to a JSON-compatible dictionary."""
    return asdict(system)


def system_from_dict(data: dict[str, Any]) -> StarSystem:
    """Reconstruct a StarSystem from its dictionary form."""
    return StarSystem(
        id=data["id"],
        name=data["name"],
        primary_star=Star(**data["primary_star"]),
        coordinates=Coordinates(**data["coordinates"]),
        multiple_system=data.get("multiple_system", "single"),
        companions=[CompanionStar(**c) for c in data.get("companions", [])],
        planets=[_deserialize_planet(p) for p in data.get("planets", [])],
        minor_bodies=[MinorBody(**b) for b in data.get("minor_bodies", [])],
        hill_sphere=data.get("hill_sphere", 0.0),
        stability_index=data.get("stability_index", 1.0),
        habitable_zone_preference=data.get("habitable_zone_preference", "optimal"),
        galactic_year=data.get("galactic_year", 0),
        version=data.get("version", 0),
        owner_id=data.get("owner_id"),
        discoverers=list(data.get("discoverers", [])),
        discovery_status=data.get("discovery_status", "claimed"),
        first_discoverer=data.get("first_discoverer"),
        discovery_date=data.get("discovery_date"),
    )


def _deserialize_planet(data: dict[str, Any]) -> Planet:
    """Reconstruct Planet from dictionary."""
    conditions = data["conditions"]
    civilization = data.get("civilization")

    return Planet(
        id=data["id"],
        name=data["name"],
        index=data["index"],
        type=data["type"],
        size=data["size"],
        mass=data["mass"],
        orbit=Orbit(**data["orbit"]),
        rotation=Rotation(**data["rotation"]),
        conditions=Conditions(
            temperature=SurfaceTemperature(**conditions["temperature"]),
            atmosphere=Atmosphere(**conditions["atmosphere"]),
            pressure=conditions["pressure"],
            habitability=conditions["habitability"],
            temperature_stability=conditions.get("temperature_stability", 1.0),
        ),
        resources={name: Resource(**r) for name, r in data.get("resources", {}).items()},
        civilization=_deserialize_civilization(civilization) if civilization else None,
        moons=[Moon(**m) for m in data.get("moons", [])],
        tectonic_activity=data.get("tectonic_activity", "medium"),
    )


def _deserialize_civilization(data: dict[str, Any]) -> Civilization:
    """Reconstruct Civilization from dictionary."""
    return Civilization(
        population=data["population"],
        growth_rate=data["growth_rate"],
        happiness=data["happiness"],
        stability=data["stability"],
        government=Government(**data["government"]),
        technology=dict(data.get("technology", {})),
        kardashev=Kardashev(**data.get("kardashev", {})),
        current_era=data.get("current_era", "pre_industrial"),
        extinct=data.get("extinct", False),
    )
