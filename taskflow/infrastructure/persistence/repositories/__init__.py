"""Persistence repositories: SQLAlchemy implementations of the application ports."""

from taskflow.infrastructure.persistence.repositories.base import BaseRepository
from taskflow.infrastructure.persistence.repositories.comment_repo import (
    CommentRepository,
)
from taskflow.infrastructure.persistence.repositories.label_repo import LabelRepository
from taskflow.infrastructure.persistence.repositories.status_repo import (
    StatusRepository,
)
from taskflow.infrastructure.persistence.repositories.task_activity_log_repo import (
    TaskActivityLogRepository,
)
from taskflow.infrastructure.persistence.repositories.task_repo import TaskRepository
from taskflow.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "CommentRepository",
    "LabelRepository",
    "StatusRepository",
    "TaskActivityLogRepository",
    "TaskRepository",
    "UserRepository",
]
