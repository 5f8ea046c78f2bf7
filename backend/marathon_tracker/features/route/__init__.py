"""
Route geometry module.

Usage:
    from marathon_tracker.features.route import GeoPath, GeoPoint, RoutePoint
    from marathon_tracker.features.route import RouteCatalog

Components:
- GeoPoint / RoutePoint: Immutable positions
- GeoPath: Cumulative distance and position-at-distance lookup
- RouteCatalog: Read-only example routes loaded from YAML
"""

from .models import GeoPoint, RoutePoint
from .path import GeoPath, EXACT_POINT_TOLERANCE_MILES
from .catalog import RouteCatalog, MarathonRoute

__all__ = [
    # Models
    "GeoPoint",
    "RoutePoint",
    # Geometry
    "GeoPath",
    "EXACT_POINT_TOLERANCE_MILES",
    # Catalog
    "RouteCatalog",
    "MarathonRoute",
]
