"""DTOs for reference records owned by other services (users, statuses, labels)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """User read-model. Only what the task engine and auth need; no credentials."""

    id: str
    name: str
    email: str


@dataclass(frozen=True)
class StatusResult:
    """Workflow status that can be attached to a task's possible-status set."""

    id: str
    title: str


@dataclass(frozen=True)
class LabelResult:
    """Label that can be attached to a task."""

    id: str
    name: str
    color: str | None
