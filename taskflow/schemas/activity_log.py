"""Task activity log API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from taskflow.domain.enums import TaskAction


class ActivityLogResponse(BaseModel):
    """Single activity log entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    task_id: str
    user_id: str
    action: TaskAction
    field: str | None
    old_value: str | None
    new_value: str | None
    created_at: datetime


class ActivityLogPageResponse(BaseModel):
    """One page of entries, newest first: {items, total, page, totalPages}."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[ActivityLogResponse]
    total: int
    page: int
    total_pages: int = Field(alias="totalPages")
