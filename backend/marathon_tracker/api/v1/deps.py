"""
Shared API dependencies.
"""

from functools import lru_cache
from typing import Optional, Sequence, Tuple

from fastapi import HTTPException

from marathon_tracker.config import settings
from marathon_tracker.features.route import GeoPath, RouteCatalog


@lru_cache
def get_route_catalog() -> RouteCatalog:
    """Route catalog, loaded once per process."""
    return RouteCatalog(settings.content_dir)


def resolve_path(
    catalog: RouteCatalog,
    route_id: Optional[str],
    coordinates: Sequence[Tuple[float, float]],
) -> GeoPath:
    """
    Path for a request: a catalog route when route_id is given,
    otherwise the drawn coordinates.

    Raises:
        HTTPException: 404 for an unknown route_id
    """
    if route_id:
        route = catalog.get_route(route_id)
        if not route:
            raise HTTPException(status_code=404, detail=f"Route '{route_id}' not found")
        return route.path
    return GeoPath.from_coordinates(coordinates)
