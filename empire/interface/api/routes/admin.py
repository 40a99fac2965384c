"""Admin back-office routes: moderation and user management."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from empire.application.usecase.comment import (
    ListAllCommentsResponse,
    ListAllCommentsUseCase,
)
from empire.application.usecase.profile import (
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserResponse,
    UpdateUserUseCase,
)
from empire.domain.service import AccessPolicy
from empire.interface.api.guards import require_admin, session_token

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class UpdateUserAPIRequest(BaseModel):
    role: str | None = None
    status: str | None = None


@router.get("/comments", response_model=ListAllCommentsResponse)
async def list_comments(
    list_all_comments_use_case: FromDishka[ListAllCommentsUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> ListAllCommentsResponse:
    """Every comment, newest first, with its author."""
    await require_admin(access_policy, token)
    return await list_all_comments_use_case.execute()


@router.get("/users", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
    page: str | None = None,
    per_page: str | None = Query(default=None, alias="perPage"),
) -> ListUsersResponse:
    """A page of user profiles, oldest first.

    Args:
        page: 1-based page number
        per_page: Page size (``perPage`` query parameter)
    """
    await require_admin(access_policy, token)
    return await list_users_use_case.execute(
        ListUsersRequest(page=page, per_page=per_page)
    )


@router.put("/users/{user_id}", response_model=UpdateUserResponse)
async def update_user(
    user_id: str,
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> UpdateUserResponse:
    """Change a user's role and/or status."""
    await require_admin(access_policy, token)
    return await update_user_use_case.execute(
        UpdateUserRequest(user_id=user_id, role=request.role, status=request.status)
    )
