"""Label repository. Lookup only."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.reference import LabelResult
from taskflow.infrastructure.persistence.models.label import Label
from taskflow.infrastructure.persistence.repositories.base import BaseRepository


class LabelRepository(BaseRepository[Label]):
    """Label repository. Implements ILabelRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Label)

    async def get_by_id(self, label_id: str) -> LabelResult | None:
        row = await self.get_row(label_id)
        if row is None:
            return None
        return LabelResult(id=row.id, name=row.name, color=row.color)
