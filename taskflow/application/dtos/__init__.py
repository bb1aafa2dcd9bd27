"""Application DTOs (no ORM dependency)."""

from taskflow.application.dtos.activity_log import (
    ActivityLogDateFilter,
    ActivityLogEntryCreate,
    ActivityLogPage,
    ActivityLogResult,
)
from taskflow.application.dtos.comment import CommentResult
from taskflow.application.dtos.task import TaskCreate, TaskResult
from taskflow.application.dtos.reference import LabelResult, StatusResult, UserResult

__all__ = [
    "ActivityLogDateFilter",
    "ActivityLogEntryCreate",
    "ActivityLogPage",
    "ActivityLogResult",
    "CommentResult",
    "LabelResult",
    "StatusResult",
    "TaskCreate",
    "TaskResult",
    "UserResult",
]
