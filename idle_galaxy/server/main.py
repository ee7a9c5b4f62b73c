"""FastAPI server for Idle Galaxy.

Provides the HTTP API for creating, exploring and advancing star systems.
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from ..engine.errors import SystemNotFoundError, SystemValidationError, VersionConflictError
from ..engine.exploration import (
    GalacticEvent,
    exploration_stats,
    nearby_systems,
    popular_systems,
    recently_discovered,
    search_systems,
)
from ..engine.system_generator import GenerationParams
from ..models.star_system import StarSystem
from ..utils.serialization import system_to_dict
from .schemas.requests import AdvanceTimeRequest, CreateSystemRequest, ExploreRequest
from .schemas.responses import (
    AdvanceTimeResponse,
    CreateSystemResponse,
    ExploreResponse,
    NearbySystemResponse,
    RecentDiscoveryResponse,
    StatsResponse,
    SystemListResponse,
    SystemResponse,
)
from .session import SystemStore

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global system store
store = SystemStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Idle Galaxy server starting...")
    yield
    logger.info(f"Idle Galaxy server shutting down ({len(store.systems)} systems in memory)")


app = FastAPI(
    title="Idle Galaxy API",
    description="Procedural star systems with long-term civilization evolution",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _event_to_dict(event: GalacticEvent) -> dict:
    data = asdict(event)
    data["timestamp"] = event.timestamp.isoformat()
    data["expires_at"] = event.expires_at.isoformat()
    return data


def _list_response(systems: list[StarSystem]) -> SystemListResponse:
    return SystemListResponse(
        count=len(systems), systems=[system_to_dict(s) for s in systems]
    )


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Idle Galaxy",
        "status": "operational",
        "systems": len(store.systems),
        "galacticYear": store.galactic_year,
    }


@app.post("/api/systems", response_model=CreateSystemResponse, status_code=201)
async def create_system(request: CreateSystemRequest):
    """Generate a new star system for a player.

    Example:
        POST /api/systems
        {
          "ownerId": "player-1",
          "name": "Sol",
          "starType": "enana_amarilla",
          "starMass": 1.0,
          "starAge": 4500,
          "planetsCount": 3,
          "seed": 42
        }
    """
    params = GenerationParams(
        name=request.name,
        star_type=request.starType,
        star_mass=request.starMass,
        star_age=request.starAge,
        planets_count=request.planetsCount,
        multiple_system=request.multipleSystem,
        habitable_zone=request.habitableZone,
        government_type=request.governmentType,
        coordinates=request.coordinates,
    )

    try:
        system, seed = store.create(params, owner_id=request.ownerId, seed=request.seed)
    except SystemValidationError as e:
        logger.warning(f"Rejected system for {request.ownerId}: {e.errors}")
        raise HTTPException(status_code=422, detail=e.errors)
    except Exception as e:
        logger.error(f"Failed to create system: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create system: {str(e)}")

    return CreateSystemResponse(
        systemId=system.id, seed=seed, system=system_to_dict(system)
    )


@app.get("/api/systems", response_model=SystemListResponse)
async def list_systems(owner_id: str | None = Query(default=None, alias="ownerId")):
    """List stored systems, optionally only those of one owner."""
    return _list_response(store.list(owner_id))


@app.get("/api/systems/{system_id}", response_model=SystemResponse)
async def get_system(system_id: str):
    """Get the current snapshot of a system."""
    try:
        system = store.get(system_id)
    except SystemNotFoundError:
        raise HTTPException(status_code=404, detail="System not found")

    return SystemResponse(systemId=system.id, version=system.version, system=system_to_dict(system))


@app.delete("/api/systems/{system_id}")
async def delete_system(system_id: str):
    """Delete a system."""
    if store.delete(system_id):
        return {"message": f"System {system_id} deleted"}
    else:
        raise HTTPException(status_code=404, detail="System not found")


@app.post("/api/advance", response_model=AdvanceTimeResponse)
def advance_time(request: AdvanceTimeRequest):
    """Advance every system owned by a player.

    Example:
        POST /api/advance
        {"ownerId": "player-1", "years": 100}
    """
    try:
        results = store.advance_owned(request.ownerId, request.years)
    except VersionConflictError as e:
        logger.error(f"Advance for {request.ownerId} kept conflicting: {e}")
        raise HTTPException(status_code=409, detail=str(e))
    except SystemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to advance systems of {request.ownerId}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to advance time: {str(e)}")

    return AdvanceTimeResponse(
        galacticYear=store.galactic_year,
        systems=[system_to_dict(result.system) for result in results],
        crises=[crisis.to_dict() for result in results for crisis in result.crises],
    )


@app.post("/api/explore", response_model=ExploreResponse)
def explore(request: ExploreRequest):
    """Explore an area and record the player as discoverer of new systems."""
    try:
        discovered = store.explore(request.userId, request.x, request.y, request.radius)
    except Exception as e:
        logger.error(f"Exploration by {request.userId} failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to explore: {str(e)}")

    return ExploreResponse(
        discovered=[system_to_dict(s) for s in discovered],
        events=[_event_to_dict(e) for e in store.active_events()],
    )


@app.get("/api/search", response_model=SystemListResponse)
async def search(
    q: str = "",
    star_type: str | None = Query(default=None, alias="starType"),
    min_planets: int | None = Query(default=None, alias="minPlanets", ge=1),
    user_id: str | None = Query(default=None, alias="userId"),
):
    """Search explorable systems by name or star type."""
    results = search_systems(store.explorable(), q, star_type, min_planets, user_id)
    return _list_response(results)


@app.get("/api/nearby", response_model=list[NearbySystemResponse])
async def nearby(
    x: float,
    y: float,
    max_distance: float = Query(default=2000, alias="maxDistance", gt=0),
):
    """Systems near a point, closest first."""
    return [
        NearbySystemResponse(
            systemId=entry.system.id,
            name=entry.system.name,
            distance=entry.distance,
            direction=entry.direction,
        )
        for entry in nearby_systems(store.explorable(), x, y, max_distance)
    ]


@app.get("/api/popular", response_model=SystemListResponse)
async def popular(limit: int = Query(default=10, ge=1)):
    """Systems with the most discoverers."""
    return _list_response(popular_systems(store.explorable(), limit))


@app.get("/api/recent", response_model=list[RecentDiscoveryResponse])
async def recent(
    limit: int = Query(default=5, ge=1),
    user_id: str | None = Query(default=None, alias="userId"),
):
    """Latest discoveries, newest first."""
    return [
        RecentDiscoveryResponse(
            systemId=entry.system.id,
            name=entry.system.name,
            discoveryDate=entry.system.discovery_date,
            discovererName=entry.discoverer_name,
            timeAgo=entry.time_ago,
        )
        for entry in recently_discovered(store.explorable(), limit, viewer_id=user_id)
    ]


@app.get("/api/stats/{user_id}", response_model=StatsResponse)
async def stats(user_id: str):
    """Exploration statistics and counters for a player."""
    summary = exploration_stats(store.explorable(), user_id)

    return StatsResponse(
        userId=user_id,
        totalSystems=summary.total_systems,
        userDiscovered=summary.user_discovered,
        userCreated=summary.user_created,
        explorationPercentage=summary.exploration_percentage,
        discoveryRank=summary.discovery_rank,
        counters=dict(store.statistics.get(user_id, {})),
    )


@app.get("/api/events")
async def events():
    """Galactic events that have not expired."""
    return {"events": [_event_to_dict(e) for e in store.active_events()]}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
