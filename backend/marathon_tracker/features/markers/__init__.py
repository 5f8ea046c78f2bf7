"""
Markers module.

Usage:
    from marathon_tracker.features.markers import MarkerService, MarkerRepository

Components:
- Marker: SQLAlchemy model (table "markers")
- MarkerRepository: Data access
- MarkerService: Samples from markers, race-distance markers, CSV import
"""

from .models import Marker
from .repository import MarkerRepository
from .service import MarkerService

__all__ = [
    "Marker",
    "MarkerRepository",
    "MarkerService",
]
