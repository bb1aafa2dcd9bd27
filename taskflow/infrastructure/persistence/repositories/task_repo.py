"""Task repository: task rows plus the assignee, possible-status and label sets."""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.task import TaskCreate, TaskResult
from taskflow.domain.enums import Priority
from taskflow.infrastructure.persistence.models.task import (
    Task,
    TaskAssignee,
    TaskLabel,
    TaskStatus,
)
from taskflow.shared.utils.datetime import ensure_utc, utc_now


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        title=t.title,
        description=t.description,
        parent_task_id=t.parent_task_id,
        assignor_id=t.assignor_id,
        current_status_id=t.current_status_id,
        priority=t.priority,
        predicted_finish_date=t.predicted_finish_date,
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
        created_by=t.created_by,
        updated_by=t.updated_by,
    )


class TaskRepository:
    """Task repository. Implements ITaskRepository. Reads skip soft-deleted tasks."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_row(self, task_id: str) -> Task | None:
        result = await self.db.execute(
            select(Task).where(and_(Task.id == task_id, Task.deleted_at.is_(None)))
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return live task by ID, or None."""
        row = await self._get_row(task_id)
        return _to_result(row) if row else None

    async def list_all(self) -> list[TaskResult]:
        """Return all live tasks, oldest first."""
        result = await self.db.execute(
            select(Task)
            .where(Task.deleted_at.is_(None))
            .order_by(Task.created_at.asc(), Task.id.asc())
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def create(self, data: TaskCreate, created_by: str) -> TaskResult:
        """Create a task and return the result DTO."""
        task = Task(
            title=data.title,
            description=data.description,
            parent_task_id=data.parent_task_id,
            assignor_id=data.assignor_id,
            priority=Priority(data.priority) if data.priority else None,
            predicted_finish_date=data.predicted_finish_date,
            created_by=created_by,
            updated_by=created_by,
        )
        self.db.add(task)
        await self.db.flush()
        await self.db.refresh(task)
        return _to_result(task)

    async def update(
        self, task_id: str, values: dict[str, Any], updated_by: str
    ) -> TaskResult | None:
        """Set the given columns on a live task; None when not found."""
        task = await self._get_row(task_id)
        if task is None:
            return None
        for key, value in values.items():
            if key == "priority" and value is not None:
                value = Priority(value)
            setattr(task, key, value)
        task.updated_by = updated_by
        await self.db.flush()
        await self.db.refresh(task)
        return _to_result(task)

    async def soft_delete(self, task_id: str, deleted_by: str) -> bool:
        """Set deleted_at/deleted_by on a live task. Association rows are kept."""
        task = await self._get_row(task_id)
        if task is None:
            return False
        task.deleted_at = utc_now()
        task.deleted_by = deleted_by
        await self.db.flush()
        return True

    # Assignees

    async def add_assignee(self, task_id: str, user_id: str) -> None:
        self.db.add(TaskAssignee(task_id=task_id, user_id=user_id))
        await self.db.flush()

    async def remove_assignee(self, task_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            delete(TaskAssignee).where(
                and_(TaskAssignee.task_id == task_id, TaskAssignee.user_id == user_id)
            )
        )
        return result.rowcount > 0

    async def get_assignee_ids(self, task_id: str) -> list[str]:
        result = await self.db.execute(
            select(TaskAssignee.user_id)
            .where(TaskAssignee.task_id == task_id)
            .order_by(TaskAssignee.id.asc())
        )
        return list(result.scalars().all())

    async def get_assignee_map(self) -> dict[str, list[str]]:
        """Return task_id -> assignee ids for every live task that has assignees."""
        result = await self.db.execute(
            select(TaskAssignee.task_id, TaskAssignee.user_id)
            .join(Task, Task.id == TaskAssignee.task_id)
            .where(Task.deleted_at.is_(None))
            .order_by(TaskAssignee.id.asc())
        )
        assignees: defaultdict[str, list[str]] = defaultdict(list)
        for task_id, user_id in result.all():
            assignees[task_id].append(user_id)
        return dict(assignees)

    # Possible statuses

    async def add_status(self, task_id: str, status_id: str) -> None:
        self.db.add(TaskStatus(task_id=task_id, status_id=status_id))
        await self.db.flush()

    async def remove_status(self, task_id: str, status_id: str) -> bool:
        result = await self.db.execute(
            delete(TaskStatus).where(
                and_(TaskStatus.task_id == task_id, TaskStatus.status_id == status_id)
            )
        )
        return result.rowcount > 0

    async def get_status_ids(self, task_id: str) -> list[str]:
        result = await self.db.execute(
            select(TaskStatus.status_id)
            .where(TaskStatus.task_id == task_id)
            .order_by(TaskStatus.id.asc())
        )
        return list(result.scalars().all())

    # Labels

    async def add_label(self, task_id: str, label_id: str) -> None:
        self.db.add(TaskLabel(task_id=task_id, label_id=label_id))
        await self.db.flush()

    async def remove_label(self, task_id: str, label_id: str) -> bool:
        result = await self.db.execute(
            delete(TaskLabel).where(
                and_(TaskLabel.task_id == task_id, TaskLabel.label_id == label_id)
            )
        )
        return result.rowcount > 0

    async def get_label_ids(self, task_id: str) -> list[str]:
        result = await self.db.execute(
            select(TaskLabel.label_id)
            .where(TaskLabel.task_id == task_id)
            .order_by(TaskLabel.id.asc())
        )
        return list(result.scalars().all())
