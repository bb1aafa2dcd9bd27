"""Task association operations: assignees, possible statuses, current status, labels.

Each add/remove validates membership first (duplicate add -> 409, missing
remove -> 404) and writes exactly one activity log entry.
"""

from __future__ import annotations

from dataclasses import replace

from taskflow.application.dtos.activity_log import ActivityLogEntryCreate
from taskflow.application.dtos.task import TaskResult
from taskflow.application.interfaces.repositories import (
    ILabelRepository,
    IStatusRepository,
    ITaskActivityLogRepository,
    ITaskRepository,
    IUserRepository,
)
from taskflow.core.constants import CURRENT_STATUS_FIELD
from taskflow.domain.enums import TaskAction
from taskflow.domain.exceptions import (
    DuplicateAssignmentException,
    InvalidStateException,
    ResourceNotFoundException,
)
from taskflow.shared.utils.datetime import utc_now


class TaskAssociationService:
    """Manage the assignee, possible-status and label sets of a task."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        log_repo: ITaskActivityLogRepository,
        user_repo: IUserRepository,
        status_repo: IStatusRepository,
        label_repo: ILabelRepository,
    ) -> None:
        self.task_repo = task_repo
        self.log_repo = log_repo
        self.user_repo = user_repo
        self.status_repo = status_repo
        self.label_repo = label_repo

    # Assignees

    async def add_assignee(
        self, task_id: str, user_id: str, actor_id: str
    ) -> list[str]:
        """Add a user to the task's assignees. Returns the updated assignee ids."""
        await self._require_task(task_id)
        if not await self.user_repo.get_by_id(user_id):
            raise ResourceNotFoundException("user", user_id, "User not found")
        if user_id in await self.task_repo.get_assignee_ids(task_id):
            raise DuplicateAssignmentException(
                "User is already assigned to this task",
                "assignee",
                {"task_id": task_id, "user_id": user_id},
            )
        await self.task_repo.add_assignee(task_id, user_id)
        await self._log(task_id, actor_id, TaskAction.ASSIGNEE_ADDED, new_value=user_id)
        return await self.task_repo.get_assignee_ids(task_id)

    async def remove_assignee(self, task_id: str, user_id: str, actor_id: str) -> None:
        """Remove a user from the task's assignees."""
        await self._require_task(task_id)
        if not await self.task_repo.remove_assignee(task_id, user_id):
            raise ResourceNotFoundException(
                "user", user_id, "User is not assigned to this task"
            )
        await self._log(
            task_id, actor_id, TaskAction.ASSIGNEE_REMOVED, old_value=user_id
        )

    # Possible statuses

    async def add_possible_status(
        self, task_id: str, status_id: str, actor_id: str
    ) -> list[str]:
        """Add a status to the task's possible statuses. Returns the updated status ids."""
        await self._require_task(task_id)
        if not await self.status_repo.get_by_id(status_id):
            raise ResourceNotFoundException("status", status_id, "Status not found")
        if status_id in await self.task_repo.get_status_ids(task_id):
            raise DuplicateAssignmentException(
                "Status is already assigned to this task",
                "status",
                {"task_id": task_id, "status_id": status_id},
            )
        await self.task_repo.add_status(task_id, status_id)
        await self._log(task_id, actor_id, TaskAction.STATUS_ADDED, new_value=status_id)
        return await self.task_repo.get_status_ids(task_id)

    async def remove_possible_status(
        self, task_id: str, status_id: str, actor_id: str
    ) -> None:
        """Remove a status from the possible set; clears current status if it was this one.

        Only STATUS_REMOVED is logged; the cleared current status is implied.
        """
        task = await self._require_task(task_id)
        if status_id not in await self.task_repo.get_status_ids(task_id):
            raise ResourceNotFoundException(
                "status", status_id, "Status is not assigned to this task"
            )
        if task.current_status_id == status_id:
            await self.task_repo.update(
                task_id, {"current_status_id": None}, updated_by=actor_id
            )
        await self.task_repo.remove_status(task_id, status_id)
        await self._log(
            task_id, actor_id, TaskAction.STATUS_REMOVED, old_value=status_id
        )

    async def set_current_status(
        self, task_id: str, status_id: str, actor_id: str
    ) -> TaskResult:
        """Set the current status; it must already be one of the possible statuses."""
        task = await self._require_task(task_id)
        possible = await self.task_repo.get_status_ids(task_id)
        if status_id not in possible:
            raise InvalidStateException(
                "Status is not in the task's possible statuses. Add it first.",
                task_id=task_id,
                status_id=status_id,
            )
        if task.current_status_id == status_id:
            return replace(task, possible_status_ids=tuple(possible))

        updated = await self.task_repo.update(
            task_id, {"current_status_id": status_id}, updated_by=actor_id
        )
        if updated is None:
            raise ResourceNotFoundException("task", task_id, "Task not found")
        await self._log(
            task_id,
            actor_id,
            TaskAction.CURRENT_STATUS_CHANGED,
            field=CURRENT_STATUS_FIELD,
            old_value=task.current_status_id,
            new_value=status_id,
        )
        return replace(updated, possible_status_ids=tuple(possible))

    # Labels

    async def add_label(self, task_id: str, label_id: str, actor_id: str) -> list[str]:
        """Attach a label to the task. Returns the updated label ids."""
        await self._require_task(task_id)
        if not await self.label_repo.get_by_id(label_id):
            raise ResourceNotFoundException("label", label_id, "Label not found")
        if label_id in await self.task_repo.get_label_ids(task_id):
            raise DuplicateAssignmentException(
                "Label is already assigned to this task",
                "label",
                {"task_id": task_id, "label_id": label_id},
            )
        await self.task_repo.add_label(task_id, label_id)
        await self._log(task_id, actor_id, TaskAction.LABEL_ADDED, new_value=label_id)
        return await self.task_repo.get_label_ids(task_id)

    async def remove_label(self, task_id: str, label_id: str, actor_id: str) -> None:
        """Detach a label from the task."""
        await self._require_task(task_id)
        if not await self.task_repo.remove_label(task_id, label_id):
            raise ResourceNotFoundException(
                "label", label_id, "Label is not assigned to this task"
            )
        await self._log(task_id, actor_id, TaskAction.LABEL_REMOVED, old_value=label_id)

    async def _require_task(self, task_id: str) -> TaskResult:
        """Return the live task or raise ResourceNotFoundException."""
        task = await self.task_repo.get_by_id(task_id)
        if not task:
            raise ResourceNotFoundException("task", task_id, "Task not found")
        return task

    async def _log(
        self,
        task_id: str,
        actor_id: str,
        action: TaskAction,
        *,
        field: str | None = None,
        old_value: str | None = None,
        new_value: str | None = None,
    ) -> None:
        """Append a single entry for this task."""
        await self.log_repo.append_many(
            [
                ActivityLogEntryCreate(
                    task_id=task_id,
                    user_id=actor_id,
                    action=action,
                    created_at=utc_now(),
                    field=field,
                    old_value=old_value,
                    new_value=new_value,
                )
            ]
        )
