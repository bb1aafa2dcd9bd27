"""Pydantic request/response schemas for the API."""

from taskflow.schemas.activity_log import ActivityLogPageResponse, ActivityLogResponse
from taskflow.schemas.comment import (
    CommentCreateRequest,
    CommentResponse,
    CommentUpdateRequest,
)
from taskflow.schemas.common import ApiResponse, IdStr
from taskflow.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from taskflow.schemas.task import (
    AssigneeAddRequest,
    LabelAddRequest,
    StatusAddRequest,
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)

__all__ = [
    "ActivityLogPageResponse",
    "ActivityLogResponse",
    "ApiResponse",
    "AssigneeAddRequest",
    "CommentCreateRequest",
    "CommentResponse",
    "CommentUpdateRequest",
    "HealthResponse",
    "IdStr",
    "LabelAddRequest",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "StatusAddRequest",
    "TaskCreateRequest",
    "TaskResponse",
    "TaskUpdateRequest",
]
