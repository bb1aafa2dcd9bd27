"""Unit tests for CommentService (creator-only edits, COMMENT_ADDED logging)."""

import pytest
from fakes import ALICE, BOB

from taskflow.application.dtos.task import TaskCreate
from taskflow.domain.enums import TaskAction
from taskflow.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)


@pytest.fixture
async def task(task_service):
    return await task_service.create_task(
        TaskCreate(title="Task", assignor_id=ALICE), actor_id=ALICE
    )


async def test_add_comment_logs_content(comment_service, log_repo, task) -> None:
    comment = await comment_service.add_comment(task.id, "Looks good", actor_id=BOB)
    assert comment.creator_id == BOB
    assert comment.task_id == task.id

    last = log_repo.all_entries()[-1]
    assert last.action == TaskAction.COMMENT_ADDED
    assert last.new_value == "Looks good"
    assert last.user_id == BOB


async def test_add_comment_to_missing_task(comment_service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await comment_service.add_comment("missing", "hi", actor_id=ALICE)


async def test_blank_content_is_rejected(comment_service, task) -> None:
    with pytest.raises(ValidationException):
        await comment_service.add_comment(task.id, "  ", actor_id=ALICE)


async def test_list_comments(comment_service, task) -> None:
    await comment_service.add_comment(task.id, "first", actor_id=ALICE)
    await comment_service.add_comment(task.id, "second", actor_id=BOB)
    comments = await comment_service.list_comments(task.id)
    assert [c.content for c in comments] == ["first", "second"]


class TestCreatorOnly:
    async def test_creator_can_update(self, comment_service, task) -> None:
        comment = await comment_service.add_comment(task.id, "draft", actor_id=ALICE)
        updated = await comment_service.update_comment(
            comment.id, "final", actor_id=ALICE
        )
        assert updated.content == "final"

    async def test_other_user_cannot_update(self, comment_service, task) -> None:
        comment = await comment_service.add_comment(task.id, "draft", actor_id=ALICE)
        with pytest.raises(AuthorizationException) as exc_info:
            await comment_service.update_comment(comment.id, "hijack", actor_id=BOB)
        assert exc_info.value.error_code == "PERMISSION_DENIED"
        assert (await comment_service.get_comment(comment.id)).content == "draft"

    async def test_other_user_cannot_delete(self, comment_service, task) -> None:
        comment = await comment_service.add_comment(task.id, "mine", actor_id=ALICE)
        with pytest.raises(AuthorizationException):
            await comment_service.delete_comment(comment.id, actor_id=BOB)

    async def test_creator_can_delete(self, comment_service, task) -> None:
        comment = await comment_service.add_comment(task.id, "mine", actor_id=ALICE)
        await comment_service.delete_comment(comment.id, actor_id=ALICE)
        with pytest.raises(ResourceNotFoundException):
            await comment_service.get_comment(comment.id)


async def test_update_missing_comment(comment_service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await comment_service.update_comment("missing", "x", actor_id=ALICE)
