"""Fixtures for use-case unit tests: services wired to in-memory repositories."""

import pytest
from fakes import (
    ALICE,
    BOB,
    DOING,
    DONE,
    TODO,
    URGENT,
    FakeActivityLogRepository,
    FakeCommentRepository,
    FakeReferenceRepository,
    FakeTaskRepository,
)

from taskflow.application.dtos.reference import LabelResult, StatusResult, UserResult
from taskflow.application.use_cases.activity_logs import ActivityLogQueryService
from taskflow.application.use_cases.comments import CommentService
from taskflow.application.use_cases.tasks import TaskAssociationService, TaskService


@pytest.fixture
def task_repo() -> FakeTaskRepository:
    return FakeTaskRepository()


@pytest.fixture
def log_repo() -> FakeActivityLogRepository:
    return FakeActivityLogRepository()


@pytest.fixture
def comment_repo() -> FakeCommentRepository:
    return FakeCommentRepository()


@pytest.fixture
def user_repo() -> FakeReferenceRepository:
    return FakeReferenceRepository(
        UserResult(id=ALICE, name="Alice", email="alice@example.com"),
        UserResult(id=BOB, name="Bob", email="bob@example.com"),
    )


@pytest.fixture
def status_repo() -> FakeReferenceRepository:
    return FakeReferenceRepository(
        StatusResult(id=TODO, title="To do"),
        StatusResult(id=DOING, title="Doing"),
        StatusResult(id=DONE, title="Done"),
    )


@pytest.fixture
def label_repo() -> FakeReferenceRepository:
    return FakeReferenceRepository(
        LabelResult(id=URGENT, name="urgent", color="#ff0000")
    )


@pytest.fixture
def task_service(task_repo, log_repo, user_repo) -> TaskService:
    return TaskService(task_repo, log_repo, user_repo)


@pytest.fixture
def association_service(
    task_repo, log_repo, user_repo, status_repo, label_repo
) -> TaskAssociationService:
    return TaskAssociationService(
        task_repo, log_repo, user_repo, status_repo, label_repo
    )


@pytest.fixture
def comment_service(comment_repo, task_repo, log_repo) -> CommentService:
    return CommentService(comment_repo, task_repo, log_repo)


@pytest.fixture
def log_query_service(log_repo, task_repo) -> ActivityLogQueryService:
    return ActivityLogQueryService(log_repo, task_repo)
