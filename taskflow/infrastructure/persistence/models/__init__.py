"""Persistence models: ORM entities and mixins."""

from taskflow.infrastructure.persistence.models.comment import Comment
from taskflow.infrastructure.persistence.models.label import Label
from taskflow.infrastructure.persistence.models.mixins import (
    AuditedModel,
    CuidMixin,
    SoftDeleteMixin,
    TimestampMixin,
    UserAuditMixin,
)
from taskflow.infrastructure.persistence.models.status import Status
from taskflow.infrastructure.persistence.models.task import (
    Task,
    TaskAssignee,
    TaskLabel,
    TaskStatus,
)
from taskflow.infrastructure.persistence.models.task_activity_log import TaskActivityLog
from taskflow.infrastructure.persistence.models.user import User

__all__ = [
    "AuditedModel",
    "Comment",
    "CuidMixin",
    "Label",
    "SoftDeleteMixin",
    "Status",
    "Task",
    "TaskActivityLog",
    "TaskAssignee",
    "TaskLabel",
    "TaskStatus",
    "TimestampMixin",
    "User",
    "UserAuditMixin",
]
