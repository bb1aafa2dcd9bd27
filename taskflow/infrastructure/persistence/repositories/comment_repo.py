"""Comment repository. Implements ICommentRepository."""

from __future__ import annotations

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.comment import CommentResult
from taskflow.infrastructure.persistence.models.comment import Comment
from taskflow.shared.utils.datetime import ensure_utc, utc_now


def _to_result(c: Comment) -> CommentResult:
    return CommentResult(
        id=c.id,
        task_id=c.task_id,
        creator_id=c.created_by,
        content=c.content,
        created_at=ensure_utc(c.created_at),
        updated_at=ensure_utc(c.updated_at),
    )


class CommentRepository:
    """Comments on tasks. Reads skip soft-deleted comments."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_row(self, comment_id: str) -> Comment | None:
        result = await self.db.execute(
            select(Comment).where(
                and_(Comment.id == comment_id, Comment.deleted_at.is_(None))
            )
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, comment_id: str) -> CommentResult | None:
        row = await self._get_row(comment_id)
        return _to_result(row) if row else None

    async def list_by_task(self, task_id: str) -> list[CommentResult]:
        """Live comments of a task, oldest first."""
        result = await self.db.execute(
            select(Comment)
            .where(and_(Comment.task_id == task_id, Comment.deleted_at.is_(None)))
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        return [_to_result(c) for c in result.scalars().all()]

    async def create(
        self, task_id: str, creator_id: str, content: str
    ) -> CommentResult:
        comment = Comment(
            task_id=task_id,
            content=content,
            created_by=creator_id,
            updated_by=creator_id,
        )
        self.db.add(comment)
        await self.db.flush()
        await self.db.refresh(comment)
        return _to_result(comment)

    async def update(
        self, comment_id: str, content: str, updated_by: str
    ) -> CommentResult | None:
        comment = await self._get_row(comment_id)
        if comment is None:
            return None
        comment.content = content
        comment.updated_by = updated_by
        await self.db.flush()
        await self.db.refresh(comment)
        return _to_result(comment)

    async def soft_delete(self, comment_id: str, deleted_by: str) -> bool:
        comment = await self._get_row(comment_id)
        if comment is None:
            return False
        comment.deleted_at = utc_now()
        comment.deleted_by = deleted_by
        await self.db.flush()
        return True
