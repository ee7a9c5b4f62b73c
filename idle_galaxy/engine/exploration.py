"""Exploration and search helpers over generated systems.

Everything here reads snapshots without modifying them. ``explore_area``
returns updated copies for the caller to persist.
"""

import copy
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence

from ..models.star_system import StarSystem
from ..utils.distance import cardinal_direction, distance_2d
from ..utils.rng import GameRNG

logger = logging.getLogger(__name__)

EXPLORABLE_STATUSES = ("discovered", "claimed")

# (minimum discoveries, rank), highest first
DISCOVERY_RANKS = (
    (100, "Pionero Galáctico"),
    (50, "Explorador Estelar"),
    (25, "Navegante Espacial"),
    (10, "Cartógrafo"),
    (5, "Astrónomo"),
)
DEFAULT_RANK = "Novato"

EVENT_CATALOG = (
    {
        "type": "supernova",
        "name": "Supernova Brillante",
        "message": "A star has exploded as a supernova. Nearby systems are easier to detect.",
        "effect": "boost_exploration",
        "duration_hours": 24,
        "radius": 2000,
    },
    {
        "type": "wormhole",
        "name": "Agujero de Gusano",
        "message": "An interstellar portal has opened, revealing distant systems.",
        "effect": "reveal_distant",
        "duration_hours": 48,
        "radius": None,
    },
    {
        "type": "nebula",
        "name": "Nebulosa Misteriosa",
        "message": "An interstellar nebula hides the systems in this region.",
        "effect": "hide_systems",
        "duration_hours": 12,
        "radius": 1500,
    },
    {
        "type": "alien_signal",
        "name": "Señal Alienígena",
        "message": "A signal of artificial origin has been detected.",
        "effect": "reveal_civilizations",
        "duration_hours": 36,
        "radius": None,
    },
)


@dataclass
class NearbySystem:
    system: StarSystem
    distance: int  # Whole map units
    direction: str


@dataclass
class RecentDiscovery:
    system: StarSystem
    discovered_at: datetime
    discoverer_name: str
    time_ago: str  # e.g. "hace 3 h"


@dataclass
class ExplorationStats:
    total_systems: int
    user_discovered: int
    user_created: int
    exploration_percentage: float
    discovery_rank: str


@dataclass
class GalacticEvent:
    """Temporary galaxy-wide event triggered by discoveries."""

    id: str
    type: str
    name: str
    message: str
    effect: str
    timestamp: datetime
    expires_at: datetime
    radius: Optional[float] = None
    related_systems: List[str] = field(default_factory=list)
    discovered_by: Optional[str] = None
    active: bool = True

    def is_active(self, now: datetime) -> bool:
        return self.active and self.expires_at > now


def _distance_to(system: StarSystem, x: float, y: float) -> float:
    return distance_2d(system.coordinates.x, system.coordinates.y, x, y)


def systems_in_area(
    systems: Iterable[StarSystem], center_x: float, center_y: float, radius: float = 1000
) -> List[StarSystem]:
    """Systems within ``radius`` map units of a point."""
    return [s for s in systems if _distance_to(s, center_x, center_y) <= radius]


def explore_area(
    systems: Iterable[StarSystem],
    center_x: float,
    center_y: float,
    user_id: str,
    radius: float = 1000,
    now: Optional[datetime] = None,
) -> List[StarSystem]:
    """Discover systems in an area that the user neither owns nor knows.

    Args:
        systems: Explorable systems
        center_x: Area center X
        center_y: Area center Y
        user_id: Exploring player
        radius: Area radius in map units
        now: Discovery time (defaults to the current time)

    Returns:
        Copies of the newly discovered systems with the user added as a
        discoverer and the discovery date set. The caller persists them.
    """
    discovered = []
    discovery_date = (now or datetime.now()).isoformat()

    for system in systems_in_area(systems, center_x, center_y, radius):
        if system.owner_id == user_id or user_id in system.discoverers:
            continue

        updated = copy.deepcopy(system)
        updated.discoverers.append(user_id)
        updated.discovery_date = discovery_date
        if updated.first_discoverer is None:
            updated.first_discoverer = user_id
        if updated.discovery_status == "unexplored":
            updated.discovery_status = "discovered"
        discovered.append(updated)

    logger.info(
        f"Exploration by {user_id} at ({center_x:.0f}, {center_y:.0f}) r={radius}: "
        f"{len(discovered)} new systems"
    )
    return discovered


def nearby_systems(
    systems: Iterable[StarSystem], x: float, y: float, max_distance: float = 2000
) -> List[NearbySystem]:
    """Systems within ``max_distance``, closest first, with a compass direction."""
    nearby = []

    for system in systems:
        distance = int(_distance_to(system, x, y))
        if distance <= max_distance:
            nearby.append(
                NearbySystem(
                    system=system,
                    distance=distance,
                    direction=cardinal_direction(x, y, system.coordinates.x, system.coordinates.y),
                )
            )

    return sorted(nearby, key=lambda entry: entry.distance)


def search_systems(
    systems: Iterable[StarSystem],
    query: str = "",
    star_type: Optional[str] = None,
    min_planets: Optional[int] = None,
    user_id: Optional[str] = None,
) -> List[StarSystem]:
    """Case-insensitive search over explorable systems.

    Matches ``query`` as a substring of the system name or star type. When
    ``user_id`` is given, the user's own systems sort first, then the ones
    they discovered.
    """
    needle = query.strip().lower()
    results = []

    for system in systems:
        if system.discovery_status not in EXPLORABLE_STATUSES:
            continue
        if needle and not (
            needle in system.name.lower() or needle in system.primary_star.type.lower()
        ):
            continue
        if star_type and system.primary_star.type != star_type:
            continue
        if min_planets and len(system.planets) < min_planets:
            continue
        results.append(system)

    if user_id is not None:
        results.sort(
            key=lambda s: (s.owner_id != user_id, user_id not in s.discoverers)
        )

    return results


def popular_systems(systems: Iterable[StarSystem], limit: int = 10) -> List[StarSystem]:
    """Systems with the most discoverers."""
    ranked = sorted(systems, key=lambda s: len(s.discoverers), reverse=True)
    return ranked[:limit]


def discoverer_name(system: StarSystem, viewer_id: Optional[str] = None) -> str:
    """Display name for whoever discovered ``system`` first."""
    if viewer_id is not None and viewer_id in (system.owner_id, system.first_discoverer):
        return "Tú"
    if system.first_discoverer is None:
        return "Desconocido"
    return f"Explorador {system.first_discoverer[:8]}"


def time_ago(timestamp: datetime, now: datetime) -> str:
    """Short elapsed-time label such as "hace 5 min" or "hace 3 días"."""
    minutes = int((now - timestamp).total_seconds() // 60)

    if minutes < 1:
        return "ahora mismo"
    if minutes < 60:
        return f"hace {minutes} min"
    if minutes < 60 * 24:
        return f"hace {minutes // 60} h"
    days = minutes // (60 * 24)
    if days == 1:
        return "hace 1 día"
    return f"hace {days} días"


def recently_discovered(
    systems: Iterable[StarSystem],
    limit: int = 5,
    viewer_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> List[RecentDiscovery]:
    """Latest discoveries, newest first.

    Systems without a discovery date are skipped.
    """
    now = now or datetime.now()
    dated = [
        (datetime.fromisoformat(s.discovery_date), s)
        for s in systems
        if s.discovery_status in EXPLORABLE_STATUSES and s.discovery_date
    ]
    dated.sort(key=lambda entry: entry[0], reverse=True)

    return [
        RecentDiscovery(
            system=system,
            discovered_at=discovered_at,
            discoverer_name=discoverer_name(system, viewer_id),
            time_ago=time_ago(discovered_at, now),
        )
        for discovered_at, system in dated[:limit]
    ]


def discovery_rank(discovered_count: int) -> str:
    for threshold, rank in DISCOVERY_RANKS:
        if discovered_count >= threshold:
            return rank
    return DEFAULT_RANK


def exploration_stats(systems: Sequence[StarSystem], user_id: str) -> ExplorationStats:
    """Discovery statistics for a player across all explorable systems."""
    total = len(systems)
    discovered = sum(1 for s in systems if user_id in s.discoverers)
    created = sum(1 for s in systems if s.owner_id == user_id)

    return ExplorationStats(
        total_systems=total,
        user_discovered=discovered,
        user_created=created,
        exploration_percentage=(discovered / total) * 100 if total > 0 else 0.0,
        discovery_rank=discovery_rank(discovered),
    )


def generate_galactic_event(
    rng: GameRNG,
    now: datetime,
    related_systems: Sequence[str] = (),
    discovered_by: Optional[str] = None,
) -> GalacticEvent:
    """Pick a random galactic event starting at ``now``."""
    template = rng.choice(EVENT_CATALOG)

    return GalacticEvent(
        id=f"event_{rng.token()}",
        type=template["type"],
        name=template["name"],
        message=template["message"],
        effect=template["effect"],
        timestamp=now,
        expires_at=now + timedelta(hours=template["duration_hours"]),
        radius=template["radius"],
        related_systems=list(related_systems),
        discovered_by=discovered_by,
    )


def active_events(events: Iterable[GalacticEvent], now: datetime) -> List[GalacticEvent]:
    """Events that have not expired."""
    return [event for event in events if event.is_active(now)]
