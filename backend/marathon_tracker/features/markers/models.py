"""
Marker Model

Stores race markers placed along a route.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Float, Integer, Text

from marathon_tracker.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Marker(Base):
    """A named point on the course, optionally with the race time there."""

    __tablename__ = "markers"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Position
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    distance_km = Column(Float, nullable=False, default=0.0)

    # Elapsed race time "H:MM:SS"
    race_time = Column(String(20), nullable=True)
    note = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=_utcnow, index=True)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<Marker {self.id} {self.name!r} at {self.distance_km} km>"
