"""
GPX-related schemas.

Pydantic models for GPX file operations.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from marathon_tracker.features.route import GeoPath
from marathon_tracker.features.route.schemas import PathSchema, CoordinatesRequest
from marathon_tracker.shared.geo import haversine

from .exporter import DEFAULT_EXPORT_NAME, DEFAULT_EXPORT_DESCRIPTION

# Start and finish closer than this make a loop course
LOOP_THRESHOLD_MILES = 0.3


class GPXInfo(BaseModel):
    """GPX route metadata."""

    filename: str
    name: str
    description: str = ""

    # Metrics
    distance_miles: float
    elevation_gain_ft: int
    points_count: int = 0

    # Coordinates
    start: Optional[Tuple[float, float]] = None
    finish: Optional[Tuple[float, float]] = None

    # Route type
    is_loop: bool = False

    @classmethod
    def from_path(cls, filename: str, name: str, description: str, path: GeoPath) -> "GPXInfo":
        start = path.points[0] if path.points else None
        finish = path.points[-1] if path.points else None

        is_loop = False
        if start and finish and len(path) > 1:
            is_loop = haversine(
                start.latitude, start.longitude,
                finish.latitude, finish.longitude,
            ) < LOOP_THRESHOLD_MILES

        return cls(
            filename=filename,
            name=name,
            description=description,
            distance_miles=round(path.total_distance(), 2),
            elevation_gain_ft=path.elevation_gain(),
            points_count=len(path),
            start=start.as_tuple() if start else None,
            finish=finish.as_tuple() if finish else None,
            is_loop=is_loop,
        )


class GPXUploadResponse(BaseModel):
    """Response for GPX upload."""

    success: bool
    info: GPXInfo
    path: PathSchema


class GPXExportRequest(CoordinatesRequest):
    """Drawn route to export."""

    coordinates: List[Tuple[float, float]] = Field(..., min_length=1)
    name: str = DEFAULT_EXPORT_NAME
    description: str = DEFAULT_EXPORT_DESCRIPTION
