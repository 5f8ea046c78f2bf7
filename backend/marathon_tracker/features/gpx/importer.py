"""
GPX Importer

Turns parsed track points into a GeoPath with cumulative distance,
feet elevations and inferred landmarks.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from marathon_tracker.features.route import GeoPath, GeoPoint, RoutePoint
from marathon_tracker.shared.constants import HALF_MARATHON_MILES, WALL_MILE
from marathon_tracker.shared.elevation import calculate_elevation_gain
from marathon_tracker.shared.geo import meters_to_feet

from .parser import GPXTrackPoint

MILE_MARKER_TOLERANCE = 0.1
HALFWAY_TOLERANCE = 0.2
WALL_TOLERANCE = 0.2
LAST_MILE_MARKER = 26


def _nearest_whole_mile(miles: float) -> int:
    # round-half-up; Python's round() would send 0.5 to 0
    return math.floor(miles + 0.5)


class GPXImporter:
    """Converts GPX track points into route geometry."""

    @staticmethod
    def infer_landmark(
        mile: float,
        is_start: bool,
        is_finish: bool,
        point_name: Optional[str] = None,
    ) -> Optional[str]:
        """
        Label a point by its position on the course.

        Precedence: start, finish, halfway, the wall, whole mile,
        then the point's own name.
        """
        if is_start:
            return point_name or "Start"
        if is_finish:
            return point_name or "Finish"
        if abs(mile - HALF_MARATHON_MILES) < HALFWAY_TOLERANCE:
            return "Halfway Point"
        if abs(mile - WALL_MILE) < WALL_TOLERANCE:
            return "The Wall"

        whole_mile = _nearest_whole_mile(mile)
        if (
            abs(mile - whole_mile) < MILE_MARKER_TOLERANCE
            and 0 < whole_mile <= LAST_MILE_MARKER
        ):
            return f"Mile {whole_mile}"

        return point_name

    @staticmethod
    def to_geo_path(track_points: Sequence[GPXTrackPoint]) -> GeoPath:
        """
        Convert track points to a GeoPath, keeping every point.

        Args:
            track_points: Points in file order (elevation in meters)

        Returns:
            GeoPath with one RoutePoint per track point
        """
        if not track_points:
            return GeoPath.empty()

        route_points: list[RoutePoint] = []
        cumulative = 0.0
        last_index = len(track_points) - 1

        for index, point in enumerate(track_points):
            if index > 0:
                previous = track_points[index - 1]
                cumulative += GeoPath.segment_length(
                    GeoPoint(previous.lon, previous.lat),
                    GeoPoint(point.lon, point.lat),
                )

            elevation = None
            if point.elevation is not None:
                elevation = round(meters_to_feet(point.elevation))

            route_points.append(RoutePoint(
                longitude=point.lon,
                latitude=point.lat,
                distance=cumulative,
                elevation=elevation,
                landmark=GPXImporter.infer_landmark(
                    cumulative,
                    is_start=index == 0,
                    is_finish=index == last_index,
                    point_name=point.name,
                ),
            ))

        return GeoPath(route_points)

    @staticmethod
    def elevation_gain(route_points: Sequence[RoutePoint]) -> int:
        """Total climb in feet; descents and missing elevations are ignored."""
        return calculate_elevation_gain([p.elevation for p in route_points])
