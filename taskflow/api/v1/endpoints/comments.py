"""Comment API: get, update and delete by comment id. Creation lives under /tasks."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from taskflow.api.v1.dependencies import (
    IdPath,
    get_comment_query_service,
    get_comment_service,
    get_current_user,
)
from taskflow.application.dtos.reference import UserResult
from taskflow.application.use_cases.comments import CommentService
from taskflow.core.limiter import limit_writes
from taskflow.schemas.comment import CommentResponse, CommentUpdateRequest
from taskflow.schemas.common import ApiResponse

router = APIRouter()


@router.get("/{comment_id}", response_model=ApiResponse[CommentResponse])
async def get_comment(
    comment_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    comment_svc: Annotated[CommentService, Depends(get_comment_query_service)],
):
    """Get a comment by id."""
    comment = await comment_svc.get_comment(comment_id)
    return ApiResponse(data=CommentResponse.model_validate(comment))


@router.put("/{comment_id}", response_model=ApiResponse[CommentResponse])
@limit_writes
async def update_comment(
    request: Request,
    comment_id: IdPath,
    body: CommentUpdateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    comment_svc: Annotated[CommentService, Depends(get_comment_service)],
):
    """Replace comment content. Creator only (403 otherwise)."""
    comment = await comment_svc.update_comment(
        comment_id, body.content, actor_id=current_user.id
    )
    return ApiResponse(data=CommentResponse.model_validate(comment))


@router.delete("/{comment_id}", status_code=204)
@limit_writes
async def delete_comment(
    request: Request,
    comment_id: IdPath,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    comment_svc: Annotated[CommentService, Depends(get_comment_service)],
):
    """Soft-delete a comment. Creator only (403 otherwise)."""
    await comment_svc.delete_comment(comment_id, actor_id=current_user.id)
