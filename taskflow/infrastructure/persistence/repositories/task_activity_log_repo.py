"""Task activity log repository. Append-only; implements ITaskActivityLogRepository."""

from __future__ import annotations

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.activity_log import (
    ActivityLogDateFilter,
    ActivityLogEntryCreate,
    ActivityLogResult,
)
from taskflow.domain.enums import TaskAction
from taskflow.infrastructure.persistence.models.task_activity_log import TaskActivityLog
from taskflow.shared.utils.datetime import ensure_utc
from taskflow.shared.utils.generators import generate_id


def _orm_to_result(row: TaskActivityLog) -> ActivityLogResult:
    """Map ORM to application DTO."""
    return ActivityLogResult(
        id=row.id,
        task_id=row.task_id,
        user_id=row.user_id,
        action=TaskAction(row.action),
        field=row.field,
        old_value=row.old_value,
        new_value=row.new_value,
        created_at=ensure_utc(row.created_at),
    )


def _date_conditions(date_filter: ActivityLogDateFilter | None) -> list:
    """Inclusive created_at bounds as SQL conditions."""
    conditions = []
    if date_filter is None:
        return conditions
    if date_filter.start_date is not None:
        conditions.append(
            TaskActivityLog.created_at >= ensure_utc(date_filter.start_date)
        )
    if date_filter.end_date is not None:
        conditions.append(TaskActivityLog.created_at <= ensure_utc(date_filter.end_date))
    return conditions


class TaskActivityLogRepository:
    """Append-only activity log repository. No update/delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def append(self, entry: ActivityLogEntryCreate) -> ActivityLogResult:
        """Append one entry; return created record."""
        results = await self.append_many([entry])
        return results[0]

    async def append_many(
        self, entries: list[ActivityLogEntryCreate]
    ) -> list[ActivityLogResult]:
        """Append entries in one flush; insertion order follows list order."""
        if not entries:
            return []
        rows = [
            TaskActivityLog(
                id=generate_id(),
                task_id=entry.task_id,
                user_id=entry.user_id,
                action=TaskAction(entry.action).value,
                field=entry.field,
                old_value=entry.old_value,
                new_value=entry.new_value,
                created_at=entry.created_at,
            )
            for entry in entries
        ]
        self.db.add_all(rows)
        await self.db.flush()
        return [_orm_to_result(r) for r in rows]

    async def find_by_task(
        self,
        task_id: str,
        page: int,
        limit: int,
        date_filter: ActivityLogDateFilter | None = None,
    ) -> list[ActivityLogResult]:
        """List entries for one task (newest first)."""
        conditions = [TaskActivityLog.task_id == task_id, *_date_conditions(date_filter)]
        return await self._find(conditions, page, limit)

    async def count_by_task(
        self, task_id: str, date_filter: ActivityLogDateFilter | None = None
    ) -> int:
        conditions = [TaskActivityLog.task_id == task_id, *_date_conditions(date_filter)]
        return await self._count(conditions)

    async def find_by_tasks(
        self,
        task_ids: list[str],
        page: int,
        limit: int,
        date_filter: ActivityLogDateFilter | None = None,
    ) -> list[ActivityLogResult]:
        """List entries across several tasks (newest first)."""
        if not task_ids:
            return []
        conditions = [
            TaskActivityLog.task_id.in_(task_ids),
            *_date_conditions(date_filter),
        ]
        return await self._find(conditions, page, limit)

    async def count_by_tasks(
        self, task_ids: list[str], date_filter: ActivityLogDateFilter | None = None
    ) -> int:
        if not task_ids:
            return 0
        conditions = [
            TaskActivityLog.task_id.in_(task_ids),
            *_date_conditions(date_filter),
        ]
        return await self._count(conditions)

    async def _find(
        self, conditions: list, page: int, limit: int
    ) -> list[ActivityLogResult]:
        stmt = (
            select(TaskActivityLog)
            .where(and_(*conditions))
            .order_by(
                TaskActivityLog.created_at.desc(),
                TaskActivityLog.sequence.desc(),
            )
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [_orm_to_result(r) for r in result.scalars().all()]

    async def _count(self, conditions: list) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(TaskActivityLog).where(and_(*conditions))
        )
        return int(result.scalar_one())
