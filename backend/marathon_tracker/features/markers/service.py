"""
Marker Service

Turns stored markers into pace samples and places race-time markers at
standard distances along a route.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from marathon_tracker.features.pacing import (
    DistanceTimeSample,
    SplitRecord,
    build_split_records,
    sort_samples,
)
from marathon_tracker.features.route import GeoPath
from marathon_tracker.shared.constants import get_race_distance
from marathon_tracker.shared.formatters import format_duration, parse_duration
from marathon_tracker.shared.geo import km_to_miles, miles_to_km

from .models import Marker
from .repository import MarkerRepository

logger = logging.getLogger(__name__)


class MarkerService:
    """
    Marker operations on top of MarkerRepository.

    Pure helpers (to_samples, build_race_marker, build_sample_marker) are
    static so that pacing code and tests can use them without a session.
    """

    def __init__(self, db: AsyncSession):
        self.repository = MarkerRepository(db)

    # =========================================================================
    # Pure helpers
    # =========================================================================

    @staticmethod
    def to_samples(markers: Sequence[Marker]) -> list[DistanceTimeSample]:
        """
        Markers with a race time as samples, ordered by distance.

        Markers whose race time is missing or malformed are skipped.
        """
        samples = []
        for marker in markers:
            elapsed = parse_duration(marker.race_time) if marker.race_time else None
            if elapsed is None:
                continue
            samples.append(DistanceTimeSample(
                distance=km_to_miles(marker.distance_km),
                elapsed=elapsed,
                note=marker.note,
            ))
        return sort_samples(samples)

    @staticmethod
    def build_race_marker(
        path: GeoPath,
        label: str,
        race_time: str,
        note: Optional[str] = None,
        existing: Sequence[Marker] = (),
    ) -> dict:
        """
        Field values for a marker at a standard race distance.

        Args:
            path: Route the marker is placed on
            label: Race distance label ("5K" ... "Finish")
            race_time: Elapsed time H:MM:SS
            note: Optional note
            existing: Markers already recorded

        Returns:
            Keyword arguments for MarkerRepository.create

        Raises:
            ValueError: Unknown label, malformed time, empty route, or a
                distance at or below one already recorded
        """
        race_distance = get_race_distance(label)
        if race_distance is None:
            raise ValueError(f"Unknown race distance '{label}'")

        if parse_duration(race_time) is None:
            raise ValueError(f"Invalid time '{race_time}', expected H:MM:SS")

        # Compared in km, the unit markers are stored in
        recorded = [m.distance_km for m in existing if m.race_time]
        if recorded and race_distance.km <= max(recorded):
            raise ValueError(
                f"{label} ({race_distance.km} km) must be beyond the last "
                f"recorded distance ({max(recorded):.2f} km)"
            )

        location = path.location_at_distance(race_distance.miles)
        if location is None:
            raise ValueError("Route has no coordinates")

        description = note or (
            f"Race marker at {label} ({race_distance.km:g}K) - Time: {race_time}"
        )

        return {
            "name": label,
            "description": description,
            "latitude": location.latitude,
            "longitude": location.longitude,
            "distance_km": race_distance.km,
            "race_time": race_time,
            "note": note,
        }

    @staticmethod
    def build_sample_marker(path: GeoPath, sample: DistanceTimeSample) -> dict:
        """
        Field values for a marker at an arbitrary sample distance.

        Raises:
            ValueError: Route has no coordinates
        """
        location = path.location_at_distance(sample.distance)
        if location is None:
            raise ValueError("Route has no coordinates")

        return {
            "name": f"Mile {sample.distance:.2f}",
            "latitude": location.latitude,
            "longitude": location.longitude,
            "distance_km": miles_to_km(sample.distance),
            "race_time": format_duration(sample.elapsed),
            "note": sample.note,
        }

    # =========================================================================
    # Persistence
    # =========================================================================

    async def list_samples(self) -> list[DistanceTimeSample]:
        return self.to_samples(await self.repository.list())

    async def split_records(self) -> list[SplitRecord]:
        """Split records for all stored markers with a race time."""
        return build_split_records(await self.list_samples())

    async def record_race_marker(
        self,
        path: GeoPath,
        label: str,
        race_time: str,
        note: Optional[str] = None,
    ) -> Marker:
        """Validate and store a race-time marker. Raises ValueError."""
        existing = await self.repository.list()
        values = self.build_race_marker(path, label, race_time, note, existing)
        marker = await self.repository.create(**values)
        logger.info(f"Recorded {label} at {race_time}")
        return marker

    async def import_samples(
        self,
        path: GeoPath,
        samples: Sequence[DistanceTimeSample],
    ) -> list[Marker]:
        """Store imported samples as markers placed along the route."""
        values = [self.build_sample_marker(path, s) for s in sort_samples(samples)]
        markers = [await self.repository.create(**v) for v in values]
        logger.info(f"Imported {len(markers)} markers")
        return markers
