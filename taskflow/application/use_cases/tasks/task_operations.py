"""Task operations: create, get, list, update, delete, clone.

Every mutation writes its activity log entries through
ITaskActivityLogRepository.append_many in the same unit of work as the task
change, all stamped with one timestamp taken at the start of the call.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from taskflow.application.dtos.activity_log import ActivityLogEntryCreate
from taskflow.application.dtos.task import TaskCreate, TaskResult
from taskflow.application.interfaces.repositories import (
    ITaskActivityLogRepository,
    ITaskRepository,
    IUserRepository,
)
from taskflow.application.services.task_diff import diff_task_fields
from taskflow.application.services.task_hierarchy import (
    descendant_counts,
    would_create_cycle,
)
from taskflow.core.constants import CLONE_TITLE_SUFFIX
from taskflow.domain.enums import TaskAction
from taskflow.domain.exceptions import (
    InvalidStateException,
    ResourceNotFoundException,
    ValidationException,
)
from taskflow.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class TaskService:
    """Create, read, update, soft-delete and clone tasks; log every change."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        log_repo: ITaskActivityLogRepository,
        user_repo: IUserRepository,
    ) -> None:
        self.task_repo = task_repo
        self.log_repo = log_repo
        self.user_repo = user_repo

    async def create_task(self, data: TaskCreate, actor_id: str) -> TaskResult:
        """Create a task (no current status) and log TASK_CREATED."""
        if not data.title or not data.title.strip():
            raise ValidationException("Title is required", field="title")
        assignor = await self.user_repo.get_by_id(data.assignor_id)
        if not assignor:
            raise ResourceNotFoundException(
                "user", data.assignor_id, "Assignor not found"
            )
        if data.parent_task_id:
            await self._require_parent(data.parent_task_id)

        now = utc_now()
        task = await self.task_repo.create(data, created_by=actor_id)
        await self.log_repo.append_many(
            [
                ActivityLogEntryCreate(
                    task_id=task.id,
                    user_id=actor_id,
                    action=TaskAction.TASK_CREATED,
                    created_at=now,
                )
            ]
        )
        return task

    async def get_task(self, task_id: str) -> TaskResult:
        """Return a task with its assignee, possible-status and label ids."""
        task = await self._require_task(task_id)
        return replace(
            task,
            assignee_ids=tuple(await self.task_repo.get_assignee_ids(task_id)),
            possible_status_ids=tuple(await self.task_repo.get_status_ids(task_id)),
            label_ids=tuple(await self.task_repo.get_label_ids(task_id)),
        )

    async def list_tasks(self) -> list[TaskResult]:
        """Return all live tasks with assignee ids and total descendant counts."""
        tasks = await self.task_repo.list_all()
        assignees = await self.task_repo.get_assignee_map()
        counts = descendant_counts(tasks)
        return [
            replace(
                t,
                assignee_ids=tuple(assignees.get(t.id, ())),
                descendant_count=counts.get(t.id, 0),
            )
            for t in tasks
        ]

    async def update_task(
        self, task_id: str, changes: dict[str, Any], actor_id: str
    ) -> TaskResult:
        """Apply a partial update; log one TASK_UPDATED per changed field.

        Only keys present in changes are considered. When nothing differs from
        the stored values, no row is written and no entry is logged.
        """
        current = await self._require_task(task_id)

        if "title" in changes and (
            changes["title"] is None or not str(changes["title"]).strip()
        ):
            raise ValidationException("Title cannot be empty", field="title")

        new_parent_id = changes.get("parent_task_id")
        if new_parent_id is not None and new_parent_id != current.parent_task_id:
            if new_parent_id == task_id:
                raise InvalidStateException(
                    "A task cannot be its own parent", task_id=task_id
                )
            await self._require_parent(new_parent_id)
            all_tasks = await self.task_repo.list_all()
            if would_create_cycle(task_id, new_parent_id, all_tasks):
                raise InvalidStateException(
                    "A task cannot be moved under one of its own subtasks",
                    task_id=task_id,
                    parent_task_id=new_parent_id,
                )

        field_changes = diff_task_fields(current, changes)
        if not field_changes:
            return current

        now = utc_now()
        updated = await self.task_repo.update(
            task_id,
            {c.field: changes[c.field] for c in field_changes},
            updated_by=actor_id,
        )
        if updated is None:
            raise ResourceNotFoundException("task", task_id, "Task not found")
        await self.log_repo.append_many(
            [
                ActivityLogEntryCreate(
                    task_id=task_id,
                    user_id=actor_id,
                    action=TaskAction.TASK_UPDATED,
                    created_at=now,
                    field=c.field,
                    old_value=c.old_value,
                    new_value=c.new_value,
                )
                for c in field_changes
            ]
        )
        return updated

    async def delete_task(self, task_id: str, actor_id: str) -> None:
        """Soft-delete a task and log TASK_DELETED. Children keep their parent pointer."""
        await self._require_task(task_id)
        now = utc_now()
        deleted = await self.task_repo.soft_delete(task_id, deleted_by=actor_id)
        if not deleted:
            raise ResourceNotFoundException("task", task_id, "Task not found")
        await self.log_repo.append_many(
            [
                ActivityLogEntryCreate(
                    task_id=task_id,
                    user_id=actor_id,
                    action=TaskAction.TASK_DELETED,
                    created_at=now,
                )
            ]
        )
        logger.info("Task %s soft-deleted by %s", task_id, actor_id)

    async def clone_task(self, task_id: str, actor_id: str) -> TaskResult:
        """Copy a task and its possible-status set; the actor becomes the assignor.

        Logs TASK_CLONED on the source (new_value = clone id) and TASK_CREATED
        on the clone. Assignees, labels and the current status are not copied.
        """
        source = await self._require_task(task_id)
        now = utc_now()
        clone = await self.task_repo.create(
            TaskCreate(
                title=f"{source.title}{CLONE_TITLE_SUFFIX}",
                assignor_id=actor_id,
                description=source.description,
                parent_task_id=source.parent_task_id,
                priority=source.priority,
                predicted_finish_date=source.predicted_finish_date,
            ),
            created_by=actor_id,
        )
        status_ids = await self.task_repo.get_status_ids(task_id)
        for status_id in status_ids:
            await self.task_repo.add_status(clone.id, status_id)

        await self.log_repo.append_many(
            [
                ActivityLogEntryCreate(
                    task_id=task_id,
                    user_id=actor_id,
                    action=TaskAction.TASK_CLONED,
                    created_at=now,
                    new_value=clone.id,
                ),
                ActivityLogEntryCreate(
                    task_id=clone.id,
                    user_id=actor_id,
                    action=TaskAction.TASK_CREATED,
                    created_at=now,
                ),
            ]
        )
        logger.info("Task %s cloned to %s by %s", task_id, clone.id, actor_id)
        return replace(clone, possible_status_ids=tuple(status_ids))

    async def _require_task(self, task_id: str) -> TaskResult:
        """Return the live task or raise ResourceNotFoundException."""
        task = await self.task_repo.get_by_id(task_id)
        if not task:
            raise ResourceNotFoundException("task", task_id, "Task not found")
        return task

    async def _require_parent(self, parent_task_id: str) -> TaskResult:
        """Return the live parent task or raise ResourceNotFoundException."""
        parent = await self.task_repo.get_by_id(parent_task_id)
        if not parent:
            raise ResourceNotFoundException(
                "task", parent_task_id, "Parent task not found"
            )
        return parent
