"""
GPX Parser Service

Parses GPX files into track points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import gpxpy
import gpxpy.gpx

logger = logging.getLogger(__name__)

DEFAULT_ROUTE_NAME = "Untitled Route"


@dataclass(frozen=True)
class GPXTrackPoint:
    """Raw track point as found in the file (elevation in meters)."""

    lat: float
    lon: float
    elevation: Optional[float] = None
    name: Optional[str] = None


@dataclass
class GPXData:
    """Parsed GPX document."""

    name: str
    description: str = ""
    track_points: List[GPXTrackPoint] = field(default_factory=list)


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def parse(content: bytes) -> GPXData:
        """
        Parse GPX content and extract track points.

        Track points are preferred; route points are used when the file
        has no tracks.

        Args:
            content: GPX file content as bytes

        Returns:
            GPXData with name, description and all points

        Raises:
            ValueError: If GPX is invalid or has no points
        """
        try:
            gpx = gpxpy.parse(content.decode('utf-8'))
        except Exception as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise ValueError(f"Invalid GPX file: {e}") from e

        points: List[GPXTrackPoint] = []

        # From tracks
        for track in gpx.tracks:
            for segment in track.segments:
                for point in segment.points:
                    points.append(GPXParserService._to_track_point(point))

        # From routes (if no tracks)
        if not points:
            for route in gpx.routes:
                for point in route.points:
                    points.append(GPXParserService._to_track_point(point))

        if not points:
            raise ValueError("GPX file contains no track or route points")

        name = gpx.name
        description = gpx.description
        if gpx.tracks:
            name = gpx.tracks[0].name or name
            description = gpx.tracks[0].description or description

        logger.debug(f"Parsed GPX '{name}' with {len(points)} points")

        return GPXData(
            name=name or DEFAULT_ROUTE_NAME,
            description=description or "",
            track_points=points,
        )

    @staticmethod
    def _to_track_point(point) -> GPXTrackPoint:
        return GPXTrackPoint(
            lat=point.latitude,
            lon=point.longitude,
            elevation=point.elevation,
            name=point.name or None,
        )
