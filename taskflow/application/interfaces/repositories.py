"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Every read excludes soft-deleted rows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from taskflow.application.dtos.activity_log import (
        ActivityLogDateFilter,
        ActivityLogEntryCreate,
        ActivityLogResult,
    )
    from taskflow.application.dtos.comment import CommentResult
    from taskflow.application.dtos.reference import (
        LabelResult,
        StatusResult,
        UserResult,
    )
    from taskflow.application.dtos.task import TaskCreate, TaskResult


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for the task store: task rows plus assignee/status/label join sets."""

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return live task by ID."""

    async def list_all(self) -> list[TaskResult]:
        """Return all live tasks (oldest first)."""

    async def create(self, data: TaskCreate, created_by: str) -> TaskResult:
        """Insert a task with a generated id and no current status."""

    async def update(
        self, task_id: str, values: dict[str, Any], updated_by: str
    ) -> TaskResult | None:
        """Apply column values to a live task. Returns None when the task is gone."""

    async def soft_delete(self, task_id: str, deleted_by: str) -> bool:
        """Mark a live task deleted. Returns False when it was not found."""

    async def add_assignee(self, task_id: str, user_id: str) -> None:
        """Insert (task, user) into the assignee set."""

    async def remove_assignee(self, task_id: str, user_id: str) -> bool:
        """Delete (task, user) from the assignee set. Returns False if absent."""

    async def get_assignee_ids(self, task_id: str) -> list[str]:
        """Return assignee user ids in insertion order."""

    async def get_assignee_map(self) -> dict[str, list[str]]:
        """Return task_id -> assignee user ids for all tasks (list enrichment)."""

    async def add_status(self, task_id: str, status_id: str) -> None:
        """Insert (task, status) into the possible-status set."""

    async def remove_status(self, task_id: str, status_id: str) -> bool:
        """Delete (task, status) from the possible-status set. Returns False if absent."""

    async def get_status_ids(self, task_id: str) -> list[str]:
        """Return possible status ids in insertion order."""

    async def add_label(self, task_id: str, label_id: str) -> None:
        """Insert (task, label) into the label set."""

    async def remove_label(self, task_id: str, label_id: str) -> bool:
        """Delete (task, label) from the label set. Returns False if absent."""

    async def get_label_ids(self, task_id: str) -> list[str]:
        """Return label ids in insertion order."""


# Activity log repository interface
class ITaskActivityLogRepository(Protocol):
    """Protocol for the append-only activity log store.

    Reads are newest first (created_at desc, then insertion order desc) and
    offset-paginated with a 1-indexed page.
    """

    async def append(self, entry: ActivityLogEntryCreate) -> ActivityLogResult:
        """Append one entry."""

    async def append_many(
        self, entries: list[ActivityLogEntryCreate]
    ) -> list[ActivityLogResult]:
        """Append entries in one flush, preserving their order. Empty list is a no-op."""

    async def find_by_task(
        self,
        task_id: str,
        page: int,
        limit: int,
        date_filter: ActivityLogDateFilter | None = None,
    ) -> list[ActivityLogResult]:
        """Return one page of entries for a single task."""

    async def count_by_task(
        self, task_id: str, date_filter: ActivityLogDateFilter | None = None
    ) -> int:
        """Return the entry count for a single task."""

    async def find_by_tasks(
        self,
        task_ids: list[str],
        page: int,
        limit: int,
        date_filter: ActivityLogDateFilter | None = None,
    ) -> list[ActivityLogResult]:
        """Return one page of entries across task_ids. Empty task_ids -> []."""

    async def count_by_tasks(
        self, task_ids: list[str], date_filter: ActivityLogDateFilter | None = None
    ) -> int:
        """Return the entry count across task_ids. Empty task_ids -> 0."""


# Comment repository interface
class ICommentRepository(Protocol):
    """Protocol for task comments."""

    async def get_by_id(self, comment_id: str) -> CommentResult | None:
        """Return live comment by ID."""

    async def list_by_task(self, task_id: str) -> list[CommentResult]:
        """Return live comments of a task, oldest first."""

    async def create(
        self, task_id: str, creator_id: str, content: str
    ) -> CommentResult:
        """Insert a comment."""

    async def update(
        self, comment_id: str, content: str, updated_by: str
    ) -> CommentResult | None:
        """Replace comment content. Returns None when the comment is gone."""

    async def soft_delete(self, comment_id: str, deleted_by: str) -> bool:
        """Mark a live comment deleted. Returns False when it was not found."""


# Reference repositories (rows owned by other services; read-only here)
class IUserRepository(Protocol):
    """Protocol for user lookups."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return live user by ID."""


class IStatusRepository(Protocol):
    """Protocol for status lookups."""

    async def get_by_id(self, status_id: str) -> StatusResult | None:
        """Return live status by ID."""


class ILabelRepository(Protocol):
    """Protocol for label lookups."""

    async def get_by_id(self, label_id: str) -> LabelResult | None:
        """Return live label by ID."""
