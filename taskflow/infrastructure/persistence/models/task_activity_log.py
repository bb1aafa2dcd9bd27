"""Task activity log ORM model. Append-only, field-level history of task mutations."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    Connection,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    event,
)
from sqlalchemy.orm import Mapped, Mapper, mapped_column

from taskflow.infrastructure.persistence.database import Base
from taskflow.shared.utils.generators import generate_id


class TaskActivityLog(Base):
    """One state change on a task. No update/delete.

    created_at is shared by every entry of one mutation; sequence is a
    store-wide insertion counter and breaks timestamp ties, within a
    mutation and across mutations.
    """

    __tablename__ = "task_activity_log"

    sequence: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True, default=generate_id
    )
    task_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("task.id"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("app_user.id"), nullable=False, index=True
    )
    action: Mapped[str] = mapped_column(String(32), nullable=False)
    field: Mapped[str | None] = mapped_column(String(64), nullable=True)
    old_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    new_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("ix_task_activity_log_task_created", "task_id", "created_at"),
        Index("ix_task_activity_log_created", "created_at"),
    )


@event.listens_for(TaskActivityLog, "before_update")
def _prevent_activity_log_updates(
    _mapper: Mapper[Any], _connection: Connection, _target: TaskActivityLog
) -> None:
    """Activity log entries are append-only; updates are forbidden."""
    raise ValueError("Activity log entries are immutable and cannot be updated.")


@event.listens_for(TaskActivityLog, "before_delete")
def _prevent_activity_log_deletes(
    _mapper: Mapper[Any], _connection: Connection, _target: TaskActivityLog
) -> None:
    """Activity log entries cannot be deleted."""
    raise ValueError("Activity log entries cannot be deleted.")
