"""DTOs for tasks and their association sets (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from taskflow.domain.enums import Priority


@dataclass(frozen=True)
class TaskCreate:
    """Input for creating a task. assignor_id is the acting user."""

    title: str
    assignor_id: str
    description: str | None = None
    parent_task_id: str | None = None
    priority: Priority | None = None
    predicted_finish_date: date | None = None


@dataclass(frozen=True)
class TaskResult:
    """Task read-model.

    Association id tuples are empty unless the use case enriched the result
    (get_task, clone_task, list_tasks fill the ones they need).
    """

    id: str
    title: str
    description: str | None
    parent_task_id: str | None
    assignor_id: str
    current_status_id: str | None
    priority: Priority | None
    predicted_finish_date: date | None
    created_at: datetime
    updated_at: datetime
    created_by: str | None = None
    updated_by: str | None = None
    assignee_ids: tuple[str, ...] = ()
    possible_status_ids: tuple[str, ...] = ()
    label_ids: tuple[str, ...] = ()
    descendant_count: int | None = None
