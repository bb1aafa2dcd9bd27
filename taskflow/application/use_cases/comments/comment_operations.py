"""Comment operations: add (logged on the task), list, get, update, delete.

Only the creator may update or delete a comment.
"""

from __future__ import annotations

from taskflow.application.dtos.activity_log import ActivityLogEntryCreate
from taskflow.application.dtos.comment import CommentResult
from taskflow.application.interfaces.repositories import (
    ICommentRepository,
    ITaskActivityLogRepository,
    ITaskRepository,
)
from taskflow.domain.enums import TaskAction
from taskflow.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from taskflow.shared.telemetry.logging import get_logger
from taskflow.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class CommentService:
    """Comments on tasks. Adding a comment logs COMMENT_ADDED with the content."""

    def __init__(
        self,
        comment_repo: ICommentRepository,
        task_repo: ITaskRepository,
        log_repo: ITaskActivityLogRepository,
    ) -> None:
        self.comment_repo = comment_repo
        self.task_repo = task_repo
        self.log_repo = log_repo

    async def add_comment(
        self, task_id: str, content: str, actor_id: str
    ) -> CommentResult:
        """Create a comment by actor on a live task."""
        await self._ensure_task(task_id)
        if not content or not content.strip():
            raise ValidationException("Content is required", field="content")
        now = utc_now()
        comment = await self.comment_repo.create(task_id, actor_id, content)
        await self.log_repo.append_many(
            [
                ActivityLogEntryCreate(
                    task_id=task_id,
                    user_id=actor_id,
                    action=TaskAction.COMMENT_ADDED,
                    created_at=now,
                    new_value=content,
                )
            ]
        )
        return comment

    async def list_comments(self, task_id: str) -> list[CommentResult]:
        """Return comments of a live task, oldest first."""
        await self._ensure_task(task_id)
        return await self.comment_repo.list_by_task(task_id)

    async def get_comment(self, comment_id: str) -> CommentResult:
        """Return a live comment or raise ResourceNotFoundException."""
        comment = await self.comment_repo.get_by_id(comment_id)
        if not comment:
            raise ResourceNotFoundException("comment", comment_id, "Comment not found")
        return comment

    async def update_comment(
        self, comment_id: str, content: str, actor_id: str
    ) -> CommentResult:
        """Replace content; only the creator may do this."""
        existing = await self.get_comment(comment_id)
        if existing.creator_id != actor_id:
            raise AuthorizationException(
                "comment",
                "update",
                message="Only the comment creator can update this comment",
            )
        if not content or not content.strip():
            raise ValidationException("Content is required", field="content")
        updated = await self.comment_repo.update(comment_id, content, updated_by=actor_id)
        if updated is None:
            raise ResourceNotFoundException("comment", comment_id, "Comment not found")
        return updated

    async def delete_comment(self, comment_id: str, actor_id: str) -> None:
        """Soft-delete; only the creator may do this."""
        existing = await self.get_comment(comment_id)
        if existing.creator_id != actor_id:
            raise AuthorizationException(
                "comment",
                "delete",
                message="Only the comment creator can delete this comment",
            )
        await self.comment_repo.soft_delete(comment_id, deleted_by=actor_id)
        logger.info("Comment %s deleted by %s", comment_id, actor_id)

    async def _ensure_task(self, task_id: str) -> None:
        """Raise ResourceNotFoundException if the task is missing or deleted."""
        if not await self.task_repo.get_by_id(task_id):
            raise ResourceNotFoundException("task", task_id, "Task not found")
