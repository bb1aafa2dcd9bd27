"""Task API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from taskflow.domain.enums import Priority
from taskflow.schemas.common import IdStr


class TaskCreateRequest(BaseModel):
    """Request body for creating a task. The caller becomes the assignor."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    parent_task_id: IdStr | None = None
    priority: Priority | None = None
    predicted_finish_date: date | None = None


class TaskUpdateRequest(BaseModel):
    """Request body for updating a task (partial).

    Only fields present in the body are applied; an explicit null clears a
    nullable field.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    parent_task_id: IdStr | None = None
    priority: Priority | None = None
    predicted_finish_date: date | None = None


class TaskResponse(BaseModel):
    """Task response. Association ids are filled where the route provides them."""

    model_config = ConfigDict(from_attributes=True)

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
    assignee_ids: list[str] = Field(default_factory=list)
    possible_status_ids: list[str] = Field(default_factory=list)
    label_ids: list[str] = Field(default_factory=list)
    descendant_count: int | None = None


class AssigneeAddRequest(BaseModel):
    """Request body for POST /tasks/{id}/assignees."""

    user_id: IdStr


class StatusAddRequest(BaseModel):
    """Request body for POST /tasks/{id}/statuses and PUT /tasks/{id}/current-status."""

    status_id: IdStr


class LabelAddRequest(BaseModel):
    """Request body for POST /tasks/{id}/labels."""

    label_id: IdStr
