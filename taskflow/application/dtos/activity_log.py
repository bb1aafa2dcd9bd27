"""DTOs for the task activity log (append-only audit trail)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from taskflow.domain.enums import TaskAction


@dataclass(frozen=True)
class ActivityLogEntryCreate:
    """Input for appending one activity log record. Append-only; no update.

    created_at is supplied by the use case so that every entry of one
    mutation shares a single timestamp.
    """

    task_id: str
    user_id: str
    action: TaskAction
    created_at: datetime
    field: str | None = None
    old_value: str | None = None
    new_value: str | None = None


@dataclass(frozen=True)
class ActivityLogResult:
    """Single activity log entry (read-model for list)."""

    id: str
    task_id: str
    user_id: str
    action: TaskAction
    field: str | None
    old_value: str | None
    new_value: str | None
    created_at: datetime


@dataclass(frozen=True)
class ActivityLogDateFilter:
    """Inclusive created_at bounds; either side may be open."""

    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass(frozen=True)
class ActivityLogPage:
    """One page of activity log entries, newest first."""

    items: list[ActivityLogResult]
    total: int
    page: int
    limit: int
    total_pages: int
