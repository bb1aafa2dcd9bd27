"""Unit tests for TaskService (create, get, list, update, delete, clone)."""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from fakes import ALICE, BOB, DONE, TODO, URGENT

from taskflow.application.dtos.task import TaskCreate
from taskflow.application.use_cases.tasks import TaskService
from taskflow.domain.enums import Priority, TaskAction
from taskflow.domain.exceptions import (
    InvalidStateException,
    ResourceNotFoundException,
    ValidationException,
)


async def _create(task_service, title: str = "Task", **kwargs):
    return await task_service.create_task(
        TaskCreate(title=title, assignor_id=ALICE, **kwargs), actor_id=ALICE
    )


class TestCreateTask:
    async def test_creates_task_and_logs_task_created(
        self, task_service, log_repo
    ) -> None:
        task = await _create(task_service, "Write report", priority=Priority.HIGH)
        assert task.title == "Write report"
        assert task.priority == Priority.HIGH
        assert task.current_status_id is None
        entries = log_repo.all_entries()
        assert len(entries) == 1
        assert entries[0].action == TaskAction.TASK_CREATED
        assert entries[0].task_id == task.id
        assert entries[0].user_id == ALICE
        assert entries[0].field is None

    async def test_unknown_assignor_is_not_found(self, task_service) -> None:
        with pytest.raises(ResourceNotFoundException):
            await task_service.create_task(
                TaskCreate(title="x", assignor_id="ghost"), actor_id=ALICE
            )

    async def test_unknown_parent_is_not_found(self, task_service, log_repo) -> None:
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await _create(task_service, parent_task_id="missing")
        assert exc_info.value.message == "Parent task not found"
        assert log_repo.all_entries() == []

    async def test_blank_title_is_rejected(self, task_service) -> None:
        with pytest.raises(ValidationException):
            await _create(task_service, "   ")


class TestGetAndList:
    async def test_get_includes_association_ids(
        self, task_service, association_service
    ) -> None:
        task = await _create(task_service)
        await association_service.add_assignee(task.id, BOB, actor_id=ALICE)
        await association_service.add_possible_status(task.id, TODO, actor_id=ALICE)
        await association_service.add_label(task.id, URGENT, actor_id=ALICE)

        fetched = await task_service.get_task(task.id)
        assert fetched.assignee_ids == (BOB,)
        assert fetched.possible_status_ids == (TODO,)
        assert fetched.label_ids == (URGENT,)

    async def test_get_missing_task(self, task_service) -> None:
        with pytest.raises(ResourceNotFoundException):
            await task_service.get_task("missing")

    async def test_list_has_assignees_and_descendant_counts(
        self, task_service, association_service
    ) -> None:
        root = await _create(task_service, "root")
        child = await _create(task_service, "child", parent_task_id=root.id)
        await _create(task_service, "grandchild", parent_task_id=child.id)
        await association_service.add_assignee(root.id, BOB, actor_id=ALICE)

        by_id = {t.id: t for t in await task_service.list_tasks()}
        assert by_id[root.id].descendant_count == 2
        assert by_id[child.id].descendant_count == 1
        assert by_id[root.id].assignee_ids == (BOB,)
        assert by_id[child.id].assignee_ids == ()


class TestUpdateTask:
    async def test_identical_values_write_nothing(self, task_service, log_repo) -> None:
        task = await _create(task_service, "Same", priority=Priority.LOW)
        before = len(log_repo.all_entries())

        result = await task_service.update_task(
            task.id, {"title": "Same", "priority": Priority.LOW}, actor_id=ALICE
        )
        assert result == task
        assert len(log_repo.all_entries()) == before

    async def test_two_fields_two_entries_one_timestamp(
        self, task_service, log_repo
    ) -> None:
        task = await _create(task_service, "Old", priority=Priority.LOW)

        updated = await task_service.update_task(
            task.id, {"title": "New", "priority": Priority.HIGH}, actor_id=BOB
        )
        assert updated.title == "New"
        assert updated.priority == Priority.HIGH

        entries = [
            e for e in log_repo.all_entries() if e.action == TaskAction.TASK_UPDATED
        ]
        assert [(e.field, e.old_value, e.new_value) for e in entries] == [
            ("title", "Old", "New"),
            ("priority", "LOW", "HIGH"),
        ]
        assert entries[0].created_at == entries[1].created_at
        assert {e.user_id for e in entries} == {BOB}

    async def test_clearing_a_field_logs_none(self, task_service, log_repo) -> None:
        task = await _create(task_service, predicted_finish_date=date(2026, 5, 1))
        await task_service.update_task(
            task.id, {"predicted_finish_date": None}, actor_id=ALICE
        )
        last = log_repo.all_entries()[-1]
        assert last.field == "predicted_finish_date"
        assert last.old_value == "2026-05-01"
        assert last.new_value is None

    async def test_self_parent_is_rejected(self, task_service) -> None:
        task = await _create(task_service)
        with pytest.raises(InvalidStateException):
            await task_service.update_task(
                task.id, {"parent_task_id": task.id}, actor_id=ALICE
            )

    async def test_moving_under_own_descendant_is_rejected(
        self, task_service, task_repo
    ) -> None:
        root = await _create(task_service, "root")
        child = await _create(task_service, "child", parent_task_id=root.id)
        grandchild = await _create(task_service, "gc", parent_task_id=child.id)

        with pytest.raises(InvalidStateException):
            await task_service.update_task(
                root.id, {"parent_task_id": grandchild.id}, actor_id=ALICE
            )
        assert task_repo.tasks[root.id].parent_task_id is None

    async def test_reparent_to_unknown_task(self, task_service) -> None:
        task = await _create(task_service)
        with pytest.raises(ResourceNotFoundException):
            await task_service.update_task(
                task.id, {"parent_task_id": "missing"}, actor_id=ALICE
            )

    async def test_empty_title_is_rejected(self, task_service) -> None:
        task = await _create(task_service)
        with pytest.raises(ValidationException):
            await task_service.update_task(task.id, {"title": ""}, actor_id=ALICE)

    async def test_missing_task(self, task_service) -> None:
        with pytest.raises(ResourceNotFoundException):
            await task_service.update_task("missing", {"title": "x"}, actor_id=ALICE)


class TestDeleteTask:
    async def test_soft_delete_logs_and_hides_task(
        self, task_service, task_repo, log_repo
    ) -> None:
        task = await _create(task_service)
        await task_service.delete_task(task.id, actor_id=BOB)

        assert task.id in task_repo.deleted
        with pytest.raises(ResourceNotFoundException):
            await task_service.get_task(task.id)
        last = log_repo.all_entries()[-1]
        assert last.action == TaskAction.TASK_DELETED
        assert last.user_id == BOB

    async def test_children_keep_their_parent_pointer(
        self, task_service, task_repo
    ) -> None:
        parent = await _create(task_service, "parent")
        child = await _create(task_service, "child", parent_task_id=parent.id)
        await task_service.delete_task(parent.id, actor_id=ALICE)

        assert task_repo.tasks[child.id].parent_task_id == parent.id
        listed = {t.id: t for t in await task_service.list_tasks()}
        assert listed[child.id].descendant_count == 0

    async def test_delete_twice_is_not_found(self, task_service) -> None:
        task = await _create(task_service)
        await task_service.delete_task(task.id, actor_id=ALICE)
        with pytest.raises(ResourceNotFoundException):
            await task_service.delete_task(task.id, actor_id=ALICE)


class TestCloneTask:
    async def test_clone_copies_fields_and_possible_statuses(
        self, task_service, association_service, log_repo
    ) -> None:
        source = await _create(
            task_service,
            "Plan",
            description="desc",
            priority=Priority.CRITICAL,
            predicted_finish_date=date(2026, 6, 1),
        )
        await association_service.add_possible_status(source.id, TODO, actor_id=ALICE)
        await association_service.add_possible_status(source.id, DONE, actor_id=ALICE)
        await association_service.set_current_status(source.id, TODO, actor_id=ALICE)
        await association_service.add_assignee(source.id, BOB, actor_id=ALICE)
        await association_service.add_label(source.id, URGENT, actor_id=ALICE)

        clone = await task_service.clone_task(source.id, actor_id=BOB)

        assert clone.id != source.id
        assert clone.title == "Plan (Copy)"
        assert clone.description == "desc"
        assert clone.priority == Priority.CRITICAL
        assert clone.predicted_finish_date == date(2026, 6, 1)
        assert clone.assignor_id == BOB
        assert clone.current_status_id is None
        assert clone.possible_status_ids == (TODO, DONE)

        fetched = await task_service.get_task(clone.id)
        assert fetched.assignee_ids == ()
        assert fetched.label_ids == ()

        cloned_entry, created_entry = log_repo.all_entries()[-2:]
        assert cloned_entry.action == TaskAction.TASK_CLONED
        assert cloned_entry.task_id == source.id
        assert cloned_entry.new_value == clone.id
        assert created_entry.action == TaskAction.TASK_CREATED
        assert created_entry.task_id == clone.id
        assert cloned_entry.created_at == created_entry.created_at

    async def test_clone_keeps_parent(self, task_service) -> None:
        parent = await _create(task_service, "parent")
        child = await _create(task_service, "child", parent_task_id=parent.id)
        clone = await task_service.clone_task(child.id, actor_id=ALICE)
        assert clone.parent_task_id == parent.id

    async def test_clone_then_reparent_under_source(self, task_service) -> None:
        source = await _create(task_service, "source")
        clone = await task_service.clone_task(source.id, actor_id=ALICE)
        moved = await task_service.update_task(
            clone.id, {"parent_task_id": source.id}, actor_id=ALICE
        )
        assert moved.parent_task_id == source.id
        listed = {t.id: t for t in await task_service.list_tasks()}
        assert listed[source.id].descendant_count == 1

    async def test_clone_missing_task(self, task_service) -> None:
        with pytest.raises(ResourceNotFoundException):
            await task_service.clone_task("missing", actor_id=ALICE)


async def test_log_append_failure_propagates(task_repo, user_repo) -> None:
    """A failed log write must surface so the request transaction rolls back."""
    log_repo = AsyncMock()
    log_repo.append_many.side_effect = RuntimeError("log store unavailable")
    service = TaskService(task_repo, log_repo, user_repo)
    with pytest.raises(RuntimeError):
        await _create(service)
    log_repo.append_many.assert_awaited_once()
