"""Integration tests for CommentRepository against SQLite."""

from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.task import TaskCreate
from taskflow.infrastructure.persistence.repositories import (
    CommentRepository,
    LabelRepository,
    StatusRepository,
    TaskRepository,
    UserRepository,
)


async def test_comment_lifecycle(db_session: AsyncSession, seeded: dict[str, str]) -> None:
    task = await TaskRepository(db_session).create(
        TaskCreate(title="Discuss", assignor_id=seeded["alice"]),
        created_by=seeded["alice"],
    )
    repo = CommentRepository(db_session)

    comment = await repo.create(task.id, seeded["bob"], "first thoughts")
    assert comment.creator_id == seeded["bob"]
    assert comment.created_at.tzinfo is not None

    updated = await repo.update(comment.id, "second thoughts", updated_by=seeded["bob"])
    assert updated is not None
    assert updated.content == "second thoughts"
    assert [c.id for c in await repo.list_by_task(task.id)] == [comment.id]

    assert await repo.soft_delete(comment.id, deleted_by=seeded["bob"]) is True
    assert await repo.get_by_id(comment.id) is None
    assert await repo.list_by_task(task.id) == []
    assert await repo.update(comment.id, "x", updated_by=seeded["bob"]) is None
    assert await repo.soft_delete(comment.id, deleted_by=seeded["bob"]) is False


async def test_reference_lookups_skip_unknown_ids(
    db_session: AsyncSession, seeded: dict[str, str]
) -> None:
    user = await UserRepository(db_session).get_by_id(seeded["alice"])
    assert user is not None
    assert user.email == "alice@example.com"
    assert await UserRepository(db_session).get_by_id("nobody") is None

    status = await StatusRepository(db_session).get_by_id(seeded["todo"])
    assert status is not None
    assert status.title == "To do"

    label = await LabelRepository(db_session).get_by_id(seeded["urgent"])
    assert label is not None
    assert label.color == "#ff0000"
    assert await LabelRepository(db_session).exists("nope") is False
