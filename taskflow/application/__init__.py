"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions.
Infrastructure implements the repository interfaces.
"""

from taskflow.application.interfaces import (
    ICommentRepository,
    ILabelRepository,
    IStatusRepository,
    ITaskActivityLogRepository,
    ITaskRepository,
    IUserRepository,
)
from taskflow.application.use_cases.activity_logs import ActivityLogQueryService
from taskflow.application.use_cases.comments import CommentService
from taskflow.application.use_cases.tasks import TaskAssociationService, TaskService

__all__ = [
    "ActivityLogQueryService",
    "CommentService",
    "ICommentRepository",
    "ILabelRepository",
    "IStatusRepository",
    "ITaskActivityLogRepository",
    "ITaskRepository",
    "IUserRepository",
    "TaskAssociationService",
    "TaskService",
]
