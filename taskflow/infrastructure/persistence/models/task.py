"""Task ORM model and its association tables (assignees, possible statuses, labels)."""

from datetime import date, datetime

from sqlalchemy import (
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from taskflow.domain.enums import Priority
from taskflow.infrastructure.persistence.database import Base
from taskflow.infrastructure.persistence.models.mixins import AuditedModel


class Task(AuditedModel, Base):
    """Task. Table: task. parent_task_id is a weak back-reference (no cascade)."""

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_task_id: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("task.id", ondelete="SET NULL"), nullable=True, index=True
    )
    assignor_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("app_user.id"), nullable=False, index=True
    )
    current_status_id: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("status.id", ondelete="SET NULL"), nullable=True
    )
    priority: Mapped[Priority | None] = mapped_column(
        Enum(Priority, name="task_priority"), nullable=True
    )
    predicted_finish_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class TaskAssignee(Base):
    """Many-to-many task-user. Table: task_assignee. id preserves insertion order."""

    __tablename__ = "task_assignee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("task.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("task_id", "user_id", name="uq_task_assignee"),
        Index("ix_task_assignee_user", "user_id"),
    )


class TaskStatus(Base):
    """Many-to-many task-status (the possible-status set). Table: task_status."""

    __tablename__ = "task_status"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("task.id", ondelete="CASCADE"), nullable=False
    )
    status_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("status.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("task_id", "status_id", name="uq_task_status"),
    )


class TaskLabel(Base):
    """Many-to-many task-label. Table: task_label."""

    __tablename__ = "task_label"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("task.id", ondelete="CASCADE"), nullable=False
    )
    label_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("label.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("task_id", "label_id", name="uq_task_label"),
    )
