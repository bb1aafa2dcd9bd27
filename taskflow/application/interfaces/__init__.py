"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from taskflow.infrastructure or taskflow.api.
"""

from taskflow.application.interfaces.repositories import (
    ICommentRepository,
    ILabelRepository,
    IStatusRepository,
    ITaskActivityLogRepository,
    ITaskRepository,
    IUserRepository,
)

__all__ = [
    "ICommentRepository",
    "ILabelRepository",
    "IStatusRepository",
    "ITaskActivityLogRepository",
    "ITaskRepository",
    "IUserRepository",
]
