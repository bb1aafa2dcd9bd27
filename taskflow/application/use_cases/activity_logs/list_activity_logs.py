"""Activity log query: one task, or a task together with its whole subtree."""

from __future__ import annotations

import math

from taskflow.application.dtos.activity_log import (
    ActivityLogDateFilter,
    ActivityLogPage,
)
from taskflow.application.interfaces.repositories import (
    ITaskActivityLogRepository,
    ITaskRepository,
)
from taskflow.application.services.task_hierarchy import subtree_ids_including_root
from taskflow.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from taskflow.domain.exceptions import ResourceNotFoundException, ValidationException


class ActivityLogQueryService:
    """Paginated, date-filtered reads of the activity log (newest first)."""

    def __init__(
        self,
        log_repo: ITaskActivityLogRepository,
        task_repo: ITaskRepository,
    ) -> None:
        self.log_repo = log_repo
        self.task_repo = task_repo

    async def list_logs(
        self,
        task_id: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
        include_subtasks: bool = False,
        date_filter: ActivityLogDateFilter | None = None,
    ) -> ActivityLogPage:
        """Return one page of entries for task_id (and its descendants when include_subtasks).

        Raises:
            ResourceNotFoundException: task is missing or deleted.
            ValidationException: page < 1 or limit < 1.
        """
        if page < 1:
            raise ValidationException("page must be >= 1", field="page")
        if limit < 1:
            raise ValidationException("limit must be >= 1", field="limit")
        task = await self.task_repo.get_by_id(task_id)
        if not task:
            raise ResourceNotFoundException("task", task_id, "Task not found")

        if include_subtasks:
            all_tasks = await self.task_repo.list_all()
            task_ids = subtree_ids_including_root(task_id, all_tasks)
            items = await self.log_repo.find_by_tasks(task_ids, page, limit, date_filter)
            total = await self.log_repo.count_by_tasks(task_ids, date_filter)
        else:
            items = await self.log_repo.find_by_task(task_id, page, limit, date_filter)
            total = await self.log_repo.count_by_task(task_id, date_filter)

        return ActivityLogPage(
            items=items,
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
        )
