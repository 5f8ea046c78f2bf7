"""
Marker repository.

Data access layer for Marker model.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from marathon_tracker.shared.repository import BaseRepository
from .models import Marker


class MarkerRepository(BaseRepository[Marker]):
    """Repository for marker operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Marker)

    async def list(self) -> list[Marker]:
        """
        All markers, nearest the start first.

        Returns:
            Markers ordered by distance_km ascending
        """
        return await self.fetch_all(
            self.query().order_by(Marker.distance_km.asc(), Marker.id.asc())
        )

    async def latest(self) -> Marker | None:
        """Most recently created marker."""
        return await self.fetch_one(
            self.query().order_by(Marker.created_at.desc(), Marker.id.desc())
        )

    async def delete(self, marker_id: int) -> bool:
        """
        Delete marker by ID.

        Returns:
            True if a marker was deleted
        """
        marker = await self.get_by_id(marker_id)
        if marker is None:
            return False
        await self.remove(marker)
        return True
