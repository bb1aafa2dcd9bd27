"""User repository. Lookup only; users are provisioned by the identity service."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.reference import UserResult
from taskflow.infrastructure.persistence.models.user import User
from taskflow.infrastructure.persistence.repositories.base import BaseRepository


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(id=u.id, name=u.name, email=u.email)


class UserRepository(BaseRepository[User]):
    """User repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: str) -> UserResult | None:
        row = await self.get_row(user_id)
        return _user_to_result(row) if row else None
