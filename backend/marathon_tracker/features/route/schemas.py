"""
Route-related schemas.

Pydantic models for route geometry requests and responses.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .catalog import MarathonRoute
from .models import RoutePoint
from .path import GeoPath


Coordinate = Tuple[float, float]


class RoutePointSchema(BaseModel):
    """Single point on a route."""

    lon: float
    lat: float
    mile: float
    elevation: Optional[float] = None
    landmark: Optional[str] = None

    @classmethod
    def from_point(cls, point: RoutePoint) -> "RoutePointSchema":
        return cls(
            lon=point.longitude,
            lat=point.latitude,
            mile=round(point.distance, 4),
            elevation=point.elevation,
            landmark=point.landmark,
        )


class RouteSummary(BaseModel):
    """Catalog entry without geometry."""

    id: str
    name: str
    description: str = ""
    start_location: Optional[str] = None
    finish_location: Optional[str] = None
    total_distance: float
    elevation_gain: int

    @classmethod
    def from_route(cls, route: MarathonRoute) -> "RouteSummary":
        return cls(
            id=route.id,
            name=route.name,
            description=route.description,
            start_location=route.start_location,
            finish_location=route.finish_location,
            total_distance=route.total_distance,
            elevation_gain=route.elevation_gain,
        )


class PathSchema(BaseModel):
    """Route geometry with derived metrics."""

    total_distance: float
    elevation_gain: int
    points: List[RoutePointSchema] = Field(default_factory=list)
    mile_markers: List[RoutePointSchema] = Field(default_factory=list)

    @classmethod
    def from_path(cls, path: GeoPath) -> "PathSchema":
        return cls(
            total_distance=round(path.total_distance(), 4),
            elevation_gain=path.elevation_gain(),
            points=[RoutePointSchema.from_point(p) for p in path],
            mile_markers=[RoutePointSchema.from_point(p) for p in path.mile_markers()],
        )


class RouteDetail(RouteSummary):
    """Catalog entry with geometry."""

    path: PathSchema

    @classmethod
    def from_route(cls, route: MarathonRoute) -> "RouteDetail":
        summary = RouteSummary.from_route(route)
        return cls(**summary.model_dump(), path=PathSchema.from_path(route.path))


class CoordinatesRequest(BaseModel):
    """A drawn route as (lon, lat) pairs."""

    coordinates: List[Coordinate] = Field(default_factory=list, max_length=100_000)

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(cls, v: List[Coordinate]) -> List[Coordinate]:
        """Reject out-of-range longitudes/latitudes."""
        for index, (lon, lat) in enumerate(v):
            if not -180 <= lon <= 180:
                raise ValueError(f"Longitude out of range at point {index}: {lon}")
            if not -90 <= lat <= 90:
                raise ValueError(f"Latitude out of range at point {index}: {lat}")
        return v

    def to_path(self) -> GeoPath:
        return GeoPath.from_coordinates(self.coordinates)


class LocationRequest(CoordinatesRequest):
    """Position lookup along a drawn route."""

    distance: float = Field(..., allow_inf_nan=False, description="Miles from the start")


class LocationResponse(BaseModel):
    """Position lookup result; point is null when nothing can be resolved."""

    distance: float
    total_distance: float
    point: Optional[RoutePointSchema] = None
