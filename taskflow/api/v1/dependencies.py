"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the authenticated actor and the application
services. Services are built from SQLAlchemy repositories here; routes depend
only on these dependencies, not on infrastructure directly.

Write services share the request's transactional session (get_db_transactional),
so a task change and its activity log entries commit or roll back together.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.reference import UserResult
from taskflow.application.use_cases.activity_logs import ActivityLogQueryService
from taskflow.application.use_cases.comments import CommentService
from taskflow.application.use_cases.tasks import TaskAssociationService, TaskService
from taskflow.domain.exceptions import AuthenticationException
from taskflow.infrastructure.persistence.database import get_db, get_db_transactional
from taskflow.infrastructure.persistence.repositories import (
    CommentRepository,
    LabelRepository,
    StatusRepository,
    TaskActivityLogRepository,
    TaskRepository,
    UserRepository,
)
from taskflow.infrastructure.security.jwt import verify_token
from taskflow.shared.utils.generators import ID_PATTERN

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)

# Id-shaped path parameters; malformed ids fail request validation (400).
IdPath = Annotated[str, Path(pattern=ID_PATTERN)]


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository for read operations."""
    return UserRepository(db)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult:
    """Return the actor from the bearer token; raise 401 if missing, invalid or unknown."""
    if not credentials:
        raise AuthenticationException("Not authenticated")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.debug("Rejected bearer token: %s", e)
        raise AuthenticationException("Invalid or expired token") from e
    user = await user_repo.get_by_id(payload["sub"])
    if user is None:
        raise AuthenticationException("User not found or inactive")
    return user


# Tasks


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskService:
    """Task service for create/update/delete/clone (transactional)."""
    return TaskService(
        TaskRepository(db), TaskActivityLogRepository(db), UserRepository(db)
    )


async def get_task_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """Task service for list/get (read-only session)."""
    return TaskService(
        TaskRepository(db), TaskActivityLogRepository(db), UserRepository(db)
    )


async def get_task_association_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskAssociationService:
    """Assignee/status/label operations (transactional)."""
    return TaskAssociationService(
        TaskRepository(db),
        TaskActivityLogRepository(db),
        UserRepository(db),
        StatusRepository(db),
        LabelRepository(db),
    )


# Comments


async def get_comment_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> CommentService:
    """Comment service for add/update/delete (transactional)."""
    return CommentService(
        CommentRepository(db), TaskRepository(db), TaskActivityLogRepository(db)
    )


async def get_comment_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CommentService:
    """Comment service for list/get (read-only session)."""
    return CommentService(
        CommentRepository(db), TaskRepository(db), TaskActivityLogRepository(db)
    )


# Activity log


async def get_activity_log_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ActivityLogQueryService:
    """Activity log reads (single task or subtree)."""
    return ActivityLogQueryService(TaskActivityLogRepository(db), TaskRepository(db))
