"""Route geometry value types (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """WGS84 position in degrees."""

    longitude: float
    latitude: float

    def as_tuple(self) -> tuple[float, float]:
        """(lon, lat), the order map widgets expect."""
        return (self.longitude, self.latitude)


@dataclass(frozen=True)
class RoutePoint(GeoPoint):
    """A point on a route with its cumulative distance from the start."""

    distance: float = 0.0  # miles
    elevation: float | None = None  # feet
    landmark: str | None = None  # "Halfway Point"

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(self.longitude, self.latitude)
