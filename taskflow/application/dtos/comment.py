"""DTOs for task comments (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CommentResult:
    """Comment read-model."""

    id: str
    task_id: str
    creator_id: str
    content: str
    created_at: datetime
    updated_at: datetime
