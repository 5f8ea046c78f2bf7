"""
Async repository base.

Feature repositories subclass BaseRepository with their model and build
their own queries on top of `query`, `fetch_all` and `fetch_one`.
Nothing here commits; routes own the transaction.

Usage:
    class MarkerRepository(BaseRepository[Marker]):
        def __init__(self, db: AsyncSession):
            super().__init__(db, Marker)
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """CRUD helpers over one mapped model."""

    def __init__(self, db: AsyncSession, model: Type[ModelT]):
        self.db = db
        self.model = model

    def query(self) -> Select:
        return select(self.model)

    async def fetch_all(self, query: Select) -> list[ModelT]:
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def fetch_one(self, query: Select) -> ModelT | None:
        """First entity of a query, or None."""
        result = await self.db.execute(query.limit(1))
        return result.scalars().first()

    async def get_by_id(self, id: int) -> ModelT | None:
        return await self.db.get(self.model, id)

    async def create(self, **values: Any) -> ModelT:
        """
        Insert a row.

        The row is flushed, not committed: it gets its id and timestamps
        but disappears if the caller rolls back.
        """
        entity = self.model(**values)
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def remove(self, entity: ModelT) -> None:
        await self.db.delete(entity)
        await self.db.flush()
