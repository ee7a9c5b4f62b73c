"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class SystemResponse(BaseModel):
    """A single system snapshot."""

    systemId: str  # noqa: N815
    version: int
    system: dict


class CreateSystemResponse(BaseModel):
    """Response after creating a new system."""

    systemId: str  # noqa: N815
    seed: int
    system: dict


class SystemListResponse(BaseModel):
    """A list of system snapshots."""

    count: int
    systems: list[dict] = Field(default_factory=list)


class AdvanceTimeResponse(BaseModel):
    """Response after advancing a player's systems."""

    galacticYear: int  # noqa: N815
    systems: list[dict] = Field(default_factory=list)
    crises: list[dict] = Field(default_factory=list)


class NearbySystemResponse(BaseModel):
    """A system close to a point, with distance and compass direction."""

    systemId: str  # noqa: N815
    name: str
    distance: int
    direction: str


class RecentDiscoveryResponse(BaseModel):
    """A recent discovery with who made it and how long ago."""

    systemId: str  # noqa: N815
    name: str
    discoveryDate: str  # noqa: N815
    discovererName: str  # noqa: N815
    timeAgo: str  # noqa: N815


class ExploreResponse(BaseModel):
    """Systems discovered by an exploration."""

    discovered: list[dict] = Field(default_factory=list)
    events: list[dict] = Field(default_factory=list)


class StatsResponse(BaseModel):
    """Exploration statistics for a player."""

    userId: str  # noqa: N815
    totalSystems: int  # noqa: N815
    userDiscovered: int  # noqa: N815
    userCreated: int  # noqa: N815
    explorationPercentage: float  # noqa: N815
    discoveryRank: str  # noqa: N815
    counters: dict = Field(default_factory=dict)
