"""
Route Routes

Endpoints for catalog routes, drawn-route measurement and position
lookup, and the streamed runner simulation.
"""

import json
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from marathon_tracker.api.v1.deps import get_route_catalog
from marathon_tracker.config import settings
from marathon_tracker.features.route import GeoPath, MarathonRoute, RouteCatalog
from marathon_tracker.features.route.schemas import (
    CoordinatesRequest,
    LocationRequest,
    LocationResponse,
    PathSchema,
    RouteDetail,
    RoutePointSchema,
    RouteSummary,
)
from marathon_tracker.features.simulation import SimulationState, simulate
from marathon_tracker.features.simulation.schemas import SimulationStateResponse

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_SIMULATION_SPEED = 16


def _get_route_or_404(catalog: RouteCatalog, route_id: str) -> MarathonRoute:
    route = catalog.get_route(route_id)
    if not route:
        raise HTTPException(status_code=404, detail=f"Route '{route_id}' not found")
    return route


def _location(path: GeoPath, distance: float) -> LocationResponse:
    point = path.point_at_distance(distance)
    return LocationResponse(
        distance=distance,
        total_distance=round(path.total_distance(), 4),
        point=RoutePointSchema.from_point(point) if point else None,
    )


@router.get("", response_model=List[RouteSummary])
async def list_routes(catalog: RouteCatalog = Depends(get_route_catalog)):
    """Example marathon routes."""
    return [RouteSummary.from_route(r) for r in catalog.routes]


@router.get("/{route_id}", response_model=RouteDetail)
async def get_route(
    route_id: str,
    catalog: RouteCatalog = Depends(get_route_catalog),
):
    """Catalog route with geometry and mile markers."""
    return RouteDetail.from_route(_get_route_or_404(catalog, route_id))


@router.get("/{route_id}/location", response_model=LocationResponse)
async def route_location(
    route_id: str,
    distance: float = Query(..., allow_inf_nan=False, description="Miles from the start"),
    catalog: RouteCatalog = Depends(get_route_catalog),
):
    """Interpolated position on a catalog route."""
    route = _get_route_or_404(catalog, route_id)
    return _location(route.path, distance)


@router.post("/measure", response_model=PathSchema)
async def measure_route(data: CoordinatesRequest):
    """Cumulative distances and mile markers for a drawn route."""
    return PathSchema.from_path(data.to_path())


@router.post("/location", response_model=LocationResponse)
async def drawn_route_location(data: LocationRequest):
    """Interpolated position on a drawn route."""
    return _location(data.to_path(), data.distance)


@router.get("/{route_id}/simulate")
async def simulate_route(
    route_id: str,
    speed: float = Query(1.0, gt=0, le=MAX_SIMULATION_SPEED, allow_inf_nan=False),
    start: float = Query(0.0, ge=0, allow_inf_nan=False, description="Starting mile"),
    catalog: RouteCatalog = Depends(get_route_catalog),
):
    """
    Stream a simulated run as NDJSON, one line per frame.

    Each line holds the simulation state and the runner's position.
    The stream ends at the finish.
    """
    route = _get_route_or_404(catalog, route_id)
    path = route.path
    total = path.total_distance()

    state = SimulationState(
        position=min(start, total),
        total_distance=total,
        speed=speed,
    )
    frame_interval = settings.simulation_frame_ms / 1000

    async def frames():
        async for frame in simulate(state, frame_interval):
            point = path.point_at_distance(frame.position)
            payload = {
                "state": SimulationStateResponse.from_state(frame).model_dump(),
                "point": RoutePointSchema.from_point(point).model_dump() if point else None,
            }
            yield json.dumps(payload) + "\n"

    logger.info(f"Simulating {route_id} from mile {state.position:.1f} at {speed}x")
    return StreamingResponse(frames(), media_type="application/x-ndjson")
