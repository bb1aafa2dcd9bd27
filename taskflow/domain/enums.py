"""Domain enumerations for taskflow.

Enums represent fixed sets of domain values (task priority, activity log actions).
"""

from enum import Enum


class Priority(str, Enum):
    """Task priority. A task may also have no priority (None)."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid priority values as strings."""
        return [p.value for p in cls]


class TaskAction(str, Enum):
    """Closed vocabulary of activity log actions.

    One entry is written per discrete state change; TASK_UPDATED is the only
    multi-field action and always carries the changed field name.
    """

    TASK_CREATED = "TASK_CREATED"
    TASK_UPDATED = "TASK_UPDATED"
    TASK_DELETED = "TASK_DELETED"
    TASK_CLONED = "TASK_CLONED"
    ASSIGNEE_ADDED = "ASSIGNEE_ADDED"
    ASSIGNEE_REMOVED = "ASSIGNEE_REMOVED"
    STATUS_ADDED = "STATUS_ADDED"
    STATUS_REMOVED = "STATUS_REMOVED"
    CURRENT_STATUS_CHANGED = "CURRENT_STATUS_CHANGED"
    LABEL_ADDED = "LABEL_ADDED"
    LABEL_REMOVED = "LABEL_REMOVED"
    COMMENT_ADDED = "COMMENT_ADDED"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid action values as strings."""
        return [a.value for a in cls]
