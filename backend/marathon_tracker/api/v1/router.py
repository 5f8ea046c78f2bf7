"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from marathon_tracker.api.v1.routes import gpx, markers, pacing, routes, simulation, tracker

api_router = APIRouter()

api_router.include_router(routes.router, prefix="/routes", tags=["Routes"])
api_router.include_router(markers.router, prefix="/markers", tags=["Markers"])
api_router.include_router(gpx.router, prefix="/gpx", tags=["GPX"])
api_router.include_router(pacing.router, prefix="/pacing", tags=["Pacing"])
api_router.include_router(simulation.router, prefix="/simulation", tags=["Simulation"])
api_router.include_router(tracker.router, prefix="/tracker", tags=["Tracker"])
