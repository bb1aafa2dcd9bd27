"""Task use cases: the task mutation engine."""

from taskflow.application.use_cases.tasks.task_association_operations import (
    TaskAssociationService,
)
from taskflow.application.use_cases.tasks.task_operations import TaskService

__all__ = [
    "TaskAssociationService",
    "TaskService",
]
