"""
Tracker Routes

Dashboard for a whole tracking session snapshot.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from marathon_tracker.api.v1.deps import get_route_catalog, resolve_path
from marathon_tracker.features.route import RouteCatalog
from marathon_tracker.features.tracker import build_dashboard
from marathon_tracker.features.tracker.schemas import DashboardRequest, DashboardResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/dashboard", response_model=DashboardResponse)
async def tracker_dashboard(
    data: DashboardRequest,
    catalog: RouteCatalog = Depends(get_route_catalog),
):
    """
    Position, pace, finish projections and splits for a session.

    The route is a catalog route (route_id) or drawn coordinates; without
    either the marathon distance is assumed.
    """
    path = resolve_path(catalog, data.route_id, data.coordinates)

    try:
        state = data.to_state(path)
    except ValueError as e:
        logger.warning(f"Tracker state rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return DashboardResponse.from_dashboard(build_dashboard(state))
