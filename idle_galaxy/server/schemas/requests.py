"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field


class CreateSystemRequest(BaseModel):
    """Request to create a new star system.

    Ranges are checked by the generator so every problem is reported at once.
    """

    ownerId: str = Field(description="Player creating the system")  # noqa: N815
    name: str = Field(description="System name")
    starType: str = Field(  # noqa: N815
        default="enana_amarilla", description="Star type key, e.g. 'enana_amarilla'"
    )
    starMass: float = Field(default=1.0, description="Star mass in solar masses")  # noqa: N815
    starAge: float = Field(  # noqa: N815
        default=4500, description="Star age in millions of years"
    )
    planetsCount: int = Field(default=4, description="Number of planets (1-15)")  # noqa: N815
    multipleSystem: str = Field(  # noqa: N815
        default="single", description="'single', 'binary' or 'trinary'"
    )
    habitableZone: str = Field(  # noqa: N815
        default="optimal", description="Habitable zone preference"
    )
    governmentType: str = Field(  # noqa: N815
        default="democratica", description="Government of the seeded civilizations"
    )
    coordinates: tuple[float, float] | None = Field(
        default=None, description="Optional galaxy position; random if omitted"
    )
    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")


class AdvanceTimeRequest(BaseModel):
    """Request to advance every system owned by a player."""

    ownerId: str = Field(description="Player whose systems advance")  # noqa: N815
    years: int = Field(default=100, ge=0, description="Whole years to advance")


class ExploreRequest(BaseModel):
    """Request to explore an area of the galaxy."""

    userId: str = Field(description="Exploring player")  # noqa: N815
    x: float = Field(description="Area center X")
    y: float = Field(description="Area center Y")
    radius: float = Field(default=1000, gt=0, description="Area radius in map units")
