"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from empire.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from empire.domain.service import AccessPolicy
from empire.interface.api.guards import require_admin, require_user, session_token

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment or a reply."""

    item_id: str | None = None
    item_type: str | None = None
    comment: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    item_id: str | None = None,
    item_type: str | None = None,
) -> GetCommentsResponse:
    """Get the threaded comments of an account or course.

    Args:
        get_comments_use_case: Get comments use case from DI
        item_id: Subject UUID
        item_type: ``account`` or ``course``

    Returns:
        Root comments with nested replies, and the total count
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(item_id=item_id, item_type=item_type)
    )


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> CreateCommentResponse:
    """Comment on a subject or reply to another comment.

    Requires authentication. The author is always the session's user.
    """
    user_id = require_user(access_policy, token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            item_id=request.item_id,
            item_type=request.item_type,
            comment=request.comment,
            parent_id=request.parent_id,
            author_id=str(user_id),
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies. Admin only."""
    await require_admin(access_policy, token)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id)
    )
