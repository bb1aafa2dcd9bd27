"""Task API: thin routes delegating to TaskService, TaskAssociationService,
CommentService and ActivityLogQueryService."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from taskflow.api.v1.dependencies import (
    IdPath,
    get_activity_log_query_service,
    get_comment_query_service,
    get_comment_service,
    get_current_user,
    get_task_association_service,
    get_task_query_service,
    get_task_service,
)
from taskflow.application.dtos.activity_log import ActivityLogDateFilter
from taskflow.application.dtos.reference import UserResult
from taskflow.application.dtos.task import TaskCreate
from taskflow.application.use_cases.activity_logs import ActivityLogQueryService
from taskflow.application.use_cases.comments import CommentService
from taskflow.application.use_cases.tasks import TaskAssociationService, TaskService
from taskflow.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from taskflow.core.limiter import limit_writes
from taskflow.domain.exceptions import ValidationException
from taskflow.schemas.activity_log import ActivityLogPageResponse, ActivityLogResponse
from taskflow.schemas.comment import CommentCreateRequest, CommentResponse
from taskflow.schemas.common import ApiResponse
from taskflow.schemas.task import (
    AssigneeAddRequest,
    LabelAddRequest,
    StatusAddRequest,
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)
from taskflow.shared.utils.datetime import ensure_utc

router = APIRouter()


@router.get("", response_model=ApiResponse[list[TaskResponse]])
async def list_tasks(
    current_user: Annotated[UserResult, Depends(get_current_user)],
    task_svc: Annotated[TaskService, Depends(get_task_query_service)],
):
    """List live tasks with assignee ids and total descendant counts."""
    tasks = await task_svc.list_tasks()
    return ApiResponse(data=[TaskResponse.model_validate(t) for t in tasks])


@router.post("", response_model=ApiResponse[TaskResponse], status_code=201)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a task; the caller is the assignor."""
    created = await task_svc.create_task(
        TaskCreate(
            title=body.title,
            assignor_id=current_user.id,
            description=body.description,
            parent_task_id=body.parent_task_id,
            priority=body.priority,
            predicted_finish_date=body.predicted_finish_date,
        ),
        actor_id=current_user.id,
    )
    return ApiResponse(data=TaskResponse.model_validate(created))


@router.get("/{task_id}", response_model=ApiResponse[TaskResponse])
async def get_task(
    task_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    task_svc: Annotated[TaskService, Depends(get_task_query_service)],
):
    """Get a task with its assignee, possible-status and label ids."""
    task = await task_svc.get_task(task_id)
    return ApiResponse(data=TaskResponse.model_validate(task))


@router.put("/{task_id}", response_model=ApiResponse[TaskResponse])
@limit_writes
async def update_task(
    request: Request,
    task_id: IdPath,
    body: TaskUpdateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Update any subset of title, description, parent, priority, predicted finish date."""
    updated = await task_svc.update_task(
        task_id, body.model_dump(exclude_unset=True), actor_id=current_user.id
    )
    return ApiResponse(data=TaskResponse.model_validate(updated))


@router.delete("/{task_id}", status_code=204)
@limit_writes
async def delete_task(
    request: Request,
    task_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Soft-delete a task. Subtasks are not touched."""
    await task_svc.delete_task(task_id, actor_id=current_user.id)


@router.post(
    "/{task_id}/clone", response_model=ApiResponse[TaskResponse], status_code=201
)
@limit_writes
async def clone_task(
    request: Request,
    task_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Clone a task and its possible statuses; the caller becomes the assignor."""
    clone = await task_svc.clone_task(task_id, actor_id=current_user.id)
    return ApiResponse(data=TaskResponse.model_validate(clone))


# Assignees


@router.post(
    "/{task_id}/assignees", response_model=ApiResponse[list[str]], status_code=201
)
@limit_writes
async def add_assignee(
    request: Request,
    task_id: IdPath,
    body: AssigneeAddRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    assoc_svc: Annotated[TaskAssociationService, Depends(get_task_association_service)],
):
    """Assign a user; returns the task's assignee ids."""
    assignee_ids = await assoc_svc.add_assignee(
        task_id, body.user_id, actor_id=current_user.id
    )
    return ApiResponse(data=assignee_ids)


@router.delete("/{task_id}/assignees/{user_id}", status_code=204)
@limit_writes
async def remove_assignee(
    request: Request,
    task_id: IdPath,
    user_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    assoc_svc: Annotated[TaskAssociationService, Depends(get_task_association_service)],
):
    """Unassign a user."""
    await assoc_svc.remove_assignee(task_id, user_id, actor_id=current_user.id)


# Possible statuses and current status


@router.post(
    "/{task_id}/statuses", response_model=ApiResponse[list[str]], status_code=201
)
@limit_writes
async def add_possible_status(
    request: Request,
    task_id: IdPath,
    body: StatusAddRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    assoc_svc: Annotated[TaskAssociationService, Depends(get_task_association_service)],
):
    """Add a status to the possible-status set; returns the set."""
    status_ids = await assoc_svc.add_possible_status(
        task_id, body.status_id, actor_id=current_user.id
    )
    return ApiResponse(data=status_ids)


@router.delete("/{task_id}/statuses/{status_id}", status_code=204)
@limit_writes
async def remove_possible_status(
    request: Request,
    task_id: IdPath,
    status_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    assoc_svc: Annotated[TaskAssociationService, Depends(get_task_association_service)],
):
    """Remove a status from the possible-status set (clears it if current)."""
    await assoc_svc.remove_possible_status(
        task_id, status_id, actor_id=current_user.id
    )


@router.put("/{task_id}/current-status", response_model=ApiResponse[TaskResponse])
@limit_writes
async def set_current_status(
    request: Request,
    task_id: IdPath,
    body: StatusAddRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    assoc_svc: Annotated[TaskAssociationService, Depends(get_task_association_service)],
):
    """Set the current status; it must already be a possible status."""
    task = await assoc_svc.set_current_status(
        task_id, body.status_id, actor_id=current_user.id
    )
    return ApiResponse(data=TaskResponse.model_validate(task))


# Labels


@router.post("/{task_id}/labels", response_model=ApiResponse[list[str]], status_code=201)
@limit_writes
async def add_label(
    request: Request,
    task_id: IdPath,
    body: LabelAddRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    assoc_svc: Annotated[TaskAssociationService, Depends(get_task_association_service)],
):
    """Attach a label; returns the task's label ids."""
    label_ids = await assoc_svc.add_label(
        task_id, body.label_id, actor_id=current_user.id
    )
    return ApiResponse(data=label_ids)


@router.delete("/{task_id}/labels/{label_id}", status_code=204)
@limit_writes
async def remove_label(
    request: Request,
    task_id: IdPath,
    label_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    assoc_svc: Annotated[TaskAssociationService, Depends(get_task_association_service)],
):
    """Detach a label."""
    await assoc_svc.remove_label(task_id, label_id, actor_id=current_user.id)


# Comments


@router.get("/{task_id}/comments", response_model=ApiResponse[list[CommentResponse]])
async def list_comments(
    task_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    comment_svc: Annotated[CommentService, Depends(get_comment_query_service)],
):
    """List comments of a task, oldest first."""
    comments = await comment_svc.list_comments(task_id)
    return ApiResponse(data=[CommentResponse.model_validate(c) for c in comments])


@router.post(
    "/{task_id}/comments", response_model=ApiResponse[CommentResponse], status_code=201
)
@limit_writes
async def add_comment(
    request: Request,
    task_id: IdPath,
    body: CommentCreateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    comment_svc: Annotated[CommentService, Depends(get_comment_service)],
):
    """Comment on a task."""
    comment = await comment_svc.add_comment(
        task_id, body.content, actor_id=current_user.id
    )
    return ApiResponse(data=CommentResponse.model_validate(comment))


# Activity log


@router.get(
    "/{task_id}/activity-logs", response_model=ApiResponse[ActivityLogPageResponse]
)
async def list_activity_logs(
    task_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    log_svc: Annotated[ActivityLogQueryService, Depends(get_activity_log_query_service)],
    page: Annotated[int, Query(ge=1)] = DEFAULT_PAGE,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    include_subtasks: Annotated[bool, Query(alias="includeSubtasks")] = False,
    start_date: Annotated[datetime | None, Query(alias="startDate")] = None,
    end_date: Annotated[datetime | None, Query(alias="endDate")] = None,
):
    """Activity log of a task, newest first; includeSubtasks adds the whole subtree."""
    if start_date and end_date and ensure_utc(start_date) > ensure_utc(end_date):
        raise ValidationException("startDate must not be after endDate", field="startDate")
    result = await log_svc.list_logs(
        task_id,
        page=page,
        limit=limit,
        include_subtasks=include_subtasks,
        date_filter=ActivityLogDateFilter(start_date=start_date, end_date=end_date),
    )
    return ApiResponse(
        data=ActivityLogPageResponse(
            items=[ActivityLogResponse.model_validate(e) for e in result.items],
            total=result.total,
            page=result.page,
            total_pages=result.total_pages,
        )
    )
