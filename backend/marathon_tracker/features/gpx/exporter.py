"""
GPX Exporter

Writes drawn route coordinates as a GPX 1.1 track.
"""

from typing import Sequence, Tuple

import gpxpy
import gpxpy.gpx

GPX_CREATOR = "Marathon Route Tracker"
DEFAULT_EXPORT_NAME = "Custom Marathon Route"
DEFAULT_EXPORT_DESCRIPTION = "Custom drawn marathon route"

# Drawn routes carry no elevation data
PLACEHOLDER_ELEVATION_M = 300


class GPXExporter:
    """Builds GPX documents from route coordinates."""

    @staticmethod
    def build(
        coordinates: Sequence[Tuple[float, float]],
        name: str = DEFAULT_EXPORT_NAME,
        description: str = DEFAULT_EXPORT_DESCRIPTION,
    ) -> gpxpy.gpx.GPX:
        """
        Build a GPX object with one track segment.

        Args:
            coordinates: (lon, lat) pairs
            name: Track name
            description: Track description

        Returns:
            gpxpy GPX object
        """
        gpx = gpxpy.gpx.GPX()
        gpx.creator = GPX_CREATOR

        track = gpxpy.gpx.GPXTrack(name=name, description=description)
        segment = gpxpy.gpx.GPXTrackSegment()
        last_index = len(coordinates) - 1

        for index, (lon, lat) in enumerate(coordinates):
            point_name = None
            if index == 0:
                point_name = "Start"
            elif index == last_index:
                point_name = "Finish"

            segment.points.append(gpxpy.gpx.GPXTrackPoint(
                latitude=lat,
                longitude=lon,
                elevation=PLACEHOLDER_ELEVATION_M,
                name=point_name,
            ))

        track.segments.append(segment)
        gpx.tracks.append(track)
        return gpx

    @staticmethod
    def export(
        coordinates: Sequence[Tuple[float, float]],
        name: str = DEFAULT_EXPORT_NAME,
        description: str = DEFAULT_EXPORT_DESCRIPTION,
    ) -> str:
        """Serialize coordinates to GPX XML."""
        return GPXExporter.build(coordinates, name, description).to_xml(version="1.1")
