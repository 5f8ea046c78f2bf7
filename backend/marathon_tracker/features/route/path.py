"""
GeoPath: ordered route geometry.

Cumulative distance, location-at-distance lookup and interpolation along
a route. Query methods never raise; missing results come back as None.

Interpolation is linear in lon/lat between neighbouring points, which is
accurate enough at GPS track-point density.
"""

from __future__ import annotations

import math
from bisect import bisect_left
from typing import Iterable, Iterator, Optional, Sequence

from marathon_tracker.shared.elevation import calculate_elevation_gain
from marathon_tracker.shared.geo import haversine

from .models import GeoPoint, RoutePoint

# Recorded points this close to the target are returned as-is
EXACT_POINT_TOLERANCE_MILES = 0.01


def _is_valid_target(target: Optional[float]) -> bool:
    return target is not None and not math.isnan(target) and target >= 0


def _lerp(start: float, end: float, ratio: float) -> float:
    return start + (end - start) * ratio


class GeoPath:
    """
    Immutable sequence of RoutePoints in traversal order.

    Invariants (checked on construction):
    - first point has distance 0
    - distance is non-decreasing
    """

    __slots__ = ("_points", "_distances")

    def __init__(self, points: Iterable[RoutePoint] = ()):
        points = tuple(points)

        if points and points[0].distance != 0:
            raise ValueError(
                f"Route must start at distance 0, got {points[0].distance}"
            )
        for index in range(1, len(points)):
            if points[index].distance < points[index - 1].distance:
                raise ValueError(
                    f"Route distance decreases at point {index}: "
                    f"{points[index - 1].distance} -> {points[index].distance}"
                )

        self._points = points
        self._distances = tuple(p.distance for p in points)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def empty(cls) -> "GeoPath":
        return cls(())

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Sequence[tuple[float, float]],
        elevations: Optional[Sequence[Optional[float]]] = None,
        landmarks: Optional[Sequence[Optional[str]]] = None,
    ) -> "GeoPath":
        """
        Build a path from drawn or imported coordinates.

        Args:
            coordinates: (lon, lat) pairs in traversal order
            elevations: Optional elevation (feet) per coordinate
            landmarks: Optional label per coordinate

        Returns:
            GeoPath with cumulative Haversine distances
        """
        points: list[RoutePoint] = []
        cumulative = 0.0
        previous: Optional[GeoPoint] = None

        for index, (lon, lat) in enumerate(coordinates):
            current = GeoPoint(float(lon), float(lat))
            if previous is not None:
                cumulative += cls.segment_length(previous, current)

            points.append(RoutePoint(
                longitude=current.longitude,
                latitude=current.latitude,
                distance=cumulative,
                elevation=elevations[index] if elevations else None,
                landmark=landmarks[index] if landmarks else None,
            ))
            previous = current

        return cls(points)

    # =========================================================================
    # Geometry
    # =========================================================================

    @staticmethod
    def segment_length(a: GeoPoint, b: GeoPoint) -> float:
        """Great-circle distance between two points in miles."""
        return haversine(a.latitude, a.longitude, b.latitude, b.longitude)

    def total_distance(self) -> float:
        """Distance of the last point, 0 for an empty path."""
        if not self._points:
            return 0.0
        return self._points[-1].distance

    def location_at_distance(self, target: float) -> Optional[GeoPoint]:
        """
        Position after travelling `target` miles along the route.

        Returns:
            Interpolated GeoPoint, the final point when target exceeds the
            route, None for an empty path or an invalid target
        """
        if not self._points or not _is_valid_target(target):
            return None

        index = bisect_left(self._distances, target)
        if index >= len(self._points):
            return self._points[-1].location

        after = self._points[index]
        if after.distance == target or index == 0:
            return after.location

        before = self._points[index - 1]
        ratio = (target - before.distance) / (after.distance - before.distance)
        return GeoPoint(
            longitude=_lerp(before.longitude, after.longitude, ratio),
            latitude=_lerp(before.latitude, after.latitude, ratio),
        )

    def point_at_distance(self, target: float) -> Optional[RoutePoint]:
        """
        Like location_at_distance, but returns a full RoutePoint.

        A recorded point within 0.01 mi of the target is returned unchanged,
        landmark included. Otherwise coordinates and elevation are
        interpolated (elevation only when both neighbours have one).
        """
        if not self._points or not _is_valid_target(target):
            return None

        index = bisect_left(self._distances, target)
        for candidate in (index - 1, index):
            if 0 <= candidate < len(self._points):
                point = self._points[candidate]
                if abs(point.distance - target) < EXACT_POINT_TOLERANCE_MILES:
                    return point

        if index >= len(self._points):
            return self._points[-1]
        if index == 0:
            return self._points[0]

        before = self._points[index - 1]
        after = self._points[index]
        ratio = (target - before.distance) / (after.distance - before.distance)

        elevation = None
        if before.elevation is not None and after.elevation is not None:
            elevation = _lerp(before.elevation, after.elevation, ratio)

        return RoutePoint(
            longitude=_lerp(before.longitude, after.longitude, ratio),
            latitude=_lerp(before.latitude, after.latitude, ratio),
            distance=target,
            elevation=elevation,
        )

    # =========================================================================
    # Views
    # =========================================================================

    @property
    def points(self) -> tuple[RoutePoint, ...]:
        return self._points

    @property
    def is_empty(self) -> bool:
        return not self._points

    @property
    def has_elevation(self) -> bool:
        return any(p.elevation is not None for p in self._points)

    def coordinates(self) -> list[tuple[float, float]]:
        """(lon, lat) pairs for map rendering."""
        return [p.as_tuple() for p in self._points]

    def mile_markers(self) -> list[RoutePoint]:
        """Points on a whole mile or carrying a landmark."""
        return [
            p for p in self._points
            if p.landmark or float(p.distance).is_integer()
        ]

    def elevation_gain(self) -> int:
        """Total climb in feet (descents ignored)."""
        return calculate_elevation_gain([p.elevation for p in self._points])

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[RoutePoint]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoPath):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"<GeoPath {len(self._points)} points, {self.total_distance():.2f} mi>"
