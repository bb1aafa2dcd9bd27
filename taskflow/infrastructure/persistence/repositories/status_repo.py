"""Status repository. Lookup only."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.reference import StatusResult
from taskflow.infrastructure.persistence.models.status import Status
from taskflow.infrastructure.persistence.repositories.base import BaseRepository


class StatusRepository(BaseRepository[Status]):
    """Status repository. Implements IStatusRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Status)

    async def get_by_id(self, status_id: str) -> StatusResult | None:
        row = await self.get_row(status_id)
        return StatusResult(id=row.id, title=row.title) if row else None
