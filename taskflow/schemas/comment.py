"""Comment API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreateRequest(BaseModel):
    """Request body for POST /tasks/{id}/comments."""

    content: str = Field(..., min_length=1)


class CommentUpdateRequest(BaseModel):
    """Request body for PUT /comments/{id}."""

    content: str = Field(..., min_length=1)


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    task_id: str
    creator_id: str
    content: str
    created_at: datetime
    updated_at: datetime
