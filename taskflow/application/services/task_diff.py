"""Field-level diff for task updates (pure; no store access).

The activity log stores old/new values as opaque strings, so values are
serialized before comparison: None stays None, enums use their value, dates
use ISO-8601.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from taskflow.application.dtos.task import TaskResult
from taskflow.domain.exceptions import ValidationException

# Columns a caller may change through update_task, in log order.
UPDATABLE_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "parent_task_id",
    "priority",
    "predicted_finish_date",
)


@dataclass(frozen=True)
class FieldChange:
    """One changed column: becomes one TASK_UPDATED log entry."""

    field: str
    old_value: str | None
    new_value: str | None


def serialize_value(value: Any) -> str | None:
    """Render a column value as stored in activity log old/new_value."""
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def diff_task_fields(
    current: TaskResult, changes: Mapping[str, Any]
) -> list[FieldChange]:
    """Return one FieldChange per supplied field whose value differs from current.

    Fields absent from changes are untouched; an explicit None clears a
    nullable field. Result order follows UPDATABLE_FIELDS.

    Raises:
        ValidationException: if changes names a field that is not updatable.
    """
    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValidationException(
            f"Field(s) cannot be updated: {', '.join(sorted(unknown))}",
            field=sorted(unknown)[0],
        )
    result: list[FieldChange] = []
    for field in UPDATABLE_FIELDS:
        if field not in changes:
            continue
        old = serialize_value(getattr(current, field))
        new = serialize_value(changes[field])
        if old != new:
            result.append(FieldChange(field=field, old_value=old, new_value=new))
    return result
