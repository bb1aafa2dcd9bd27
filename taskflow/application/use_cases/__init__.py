"""Application use cases: one entry point per workflow."""

from taskflow.application.use_cases.activity_logs import ActivityLogQueryService
from taskflow.application.use_cases.comments import CommentService
from taskflow.application.use_cases.tasks import TaskAssociationService, TaskService

__all__ = [
    "ActivityLogQueryService",
    "CommentService",
    "TaskAssociationService",
    "TaskService",
]
