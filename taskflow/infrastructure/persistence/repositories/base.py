"""Base repository for read-only reference rows (users, statuses, labels)."""

from typing import Any, Generic, TypeVar

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with live-row lookups.

    Reference rows are written by other services; this service only resolves
    them. Soft-deleted rows are treated as missing.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_row(self, entity_id: str) -> ModelType | None:
        """Return a single live record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).where(
                and_(model.id == entity_id, model.deleted_at.is_(None))
            )
        )
        return result.scalar_one_or_none()

    async def exists(self, entity_id: str) -> bool:
        """Return True when a live record with this id exists."""
        return await self.get_row(entity_id) is not None
