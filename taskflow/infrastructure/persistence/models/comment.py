"""Comment ORM model."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskflow.infrastructure.persistence.database import Base
from taskflow.infrastructure.persistence.models.mixins import AuditedModel


class Comment(AuditedModel, Base):
    """Comment on a task. Table: comment. created_by is the creator."""

    __tablename__ = "comment"

    task_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("task.id", ondelete="CASCADE"), nullable=False
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (Index("ix_comment_task_created", "task_id", "created_at"),)
