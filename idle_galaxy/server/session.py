"""In-memory star system store.

Stands in for the external document store. Every snapshot carries a
version counter; a write is accepted only when it is based on the stored
version, so two writers that read the same snapshot cannot silently
overwrite each other. Time advances that lose such a race are retried
from a fresh read.
"""

import copy
import logging
from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..engine.errors import SystemNotFoundError, VersionConflictError
from ..engine.exploration import (
    EXPLORABLE_STATUSES,
    GalacticEvent,
    active_events,
    explore_area,
    generate_galactic_event,
)
from ..engine.system_generator import GenerationParams, generate_system
from ..engine.time_advance import AdvanceResult, TimeAdvanceEngine
from ..models.star_system import StarSystem
from ..utils.rng import GameRNG

logger = logging.getLogger(__name__)

EVENT_CHANCE = 0.3  # Chance of a galactic event after a successful exploration


class SystemStore:
    """Holds system snapshots, player statistics and galactic events.

    In-memory storage. Can be replaced with a document database for
    production as long as ``put`` keeps the version check.
    """

    def __init__(self, seed: Optional[int] = None):
        self.systems: Dict[str, StarSystem] = {}
        self.statistics: Dict[str, Dict[str, int]] = defaultdict(lambda: defaultdict(int))
        self.events: List[GalacticEvent] = []
        self.galactic_year = 0
        self.engine = TimeAdvanceEngine()
        self.rng = GameRNG(seed)

    # =========================================================================
    # SNAPSHOT ACCESS
    # =========================================================================

    def get(self, system_id: str) -> StarSystem:
        """Return a private copy of a stored snapshot.

        Raises:
            SystemNotFoundError: If the id is unknown
        """
        system = self.systems.get(system_id)
        if system is None:
            raise SystemNotFoundError(system_id)
        return copy.deepcopy(system)

    def put(self, system: StarSystem) -> None:
        """Store a snapshot derived from the currently stored version.

        New systems must have version 0. Updates must carry exactly the
        stored version + 1.

        Raises:
            VersionConflictError: If the snapshot was based on a stale read
        """
        current = self.systems.get(system.id)
        stored_version = current.version if current is not None else -1

        if system.version != stored_version + 1:
            raise VersionConflictError(system.id, system.version - 1, stored_version)

        self.systems[system.id] = copy.deepcopy(system)

    def list(self, owner_id: Optional[str] = None) -> List[StarSystem]:
        """Stored systems, optionally only those owned by ``owner_id``."""
        return [
            copy.deepcopy(system)
            for system in self.systems.values()
            if owner_id is None or system.owner_id == owner_id
        ]

    def delete(self, system_id: str) -> bool:
        """Remove a system.

        Returns:
            True if the system existed
        """
        if system_id in self.systems:
            del self.systems[system_id]
            logger.info(f"Deleted system {system_id}")
            return True
        return False

    def explorable(self) -> List[StarSystem]:
        return [
            copy.deepcopy(system)
            for system in self.systems.values()
            if system.discovery_status in EXPLORABLE_STATUSES
        ]

    # =========================================================================
    # GAME ACTIONS
    # =========================================================================

    def create(
        self, params: GenerationParams, owner_id: str, seed: Optional[int] = None
    ) -> Tuple[StarSystem, int]:
        """Generate and store a new system claimed by ``owner_id``.

        Returns:
            The stored system and the seed it was generated from, drawn
            from the store RNG when none is given

        Raises:
            SystemValidationError: If the parameters are out of range
        """
        if seed is None:
            seed = self.rng.randint(0, 2**32 - 1)

        system = generate_system(
            params, seed=seed, owner_id=owner_id, discovered_at=datetime.now()
        )
        self.put(system)
        self.update_statistics(owner_id, "worldsCreated")

        logger.info(f"Stored system {system.id} for {owner_id} (seed={seed})")
        return system, seed

    @retry(
        retry=retry_if_exception_type(VersionConflictError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, max=1),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    def advance(self, system_id: str, years: int) -> AdvanceResult:
        """Advance one stored system, retrying on version conflicts."""
        snapshot = self.get(system_id)
        result = self.engine.advance(snapshot, years)
        self.put(result.system)
        return result

    def advance_owned(self, owner_id: str, years: int) -> List[AdvanceResult]:
        """Advance every system owned by ``owner_id`` by ``years``."""
        if isinstance(years, bool) or not isinstance(years, int) or years < 0:
            raise ValueError(f"Invalid years: {years!r} (must be a non-negative integer)")

        owned_ids = [s.id for s in self.systems.values() if s.owner_id == owner_id]
        results = [self.advance(system_id, years) for system_id in owned_ids]
        self.galactic_year += years

        if any(result.crises for result in results):
            self.update_statistics(owner_id, "civilizationsEvolved")

        logger.info(
            f"Advanced {len(results)} systems of {owner_id} by {years} years, "
            f"galactic year {self.galactic_year}"
        )
        return results

    def explore(
        self, user_id: str, center_x: float, center_y: float, radius: float = 1000
    ) -> List[StarSystem]:
        """Discover systems around a point and record the user as discoverer."""
        now = datetime.now()
        discovered = explore_area(self.explorable(), center_x, center_y, user_id, radius, now)

        for system in discovered:
            system.version += 1
            self.put(system)

        if discovered:
            self.update_statistics(user_id, "systemsDiscovered", len(discovered))
            if self.rng.random() < EVENT_CHANCE:
                event = generate_galactic_event(
                    self.rng,
                    now,
                    related_systems=[s.id for s in discovered],
                    discovered_by=user_id,
                )
                self.events.append(event)
                logger.info(f"Galactic event: {event.name}")

        return discovered

    def active_events(self, now: Optional[datetime] = None) -> List[GalacticEvent]:
        """Drop expired events and return the remaining ones."""
        self.events = active_events(self.events, now or datetime.now())
        return list(self.events)

    def update_statistics(self, user_id: str, stat: str, increment: int = 1) -> None:
        """Bump a per-player counter such as ``worldsCreated``."""
        self.statistics[user_id][stat] += increment
        logger.debug(f"Statistic {stat} for {user_id} is now {self.statistics[user_id][stat]}")
