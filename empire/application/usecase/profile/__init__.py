"""Profile use cases."""

from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from .update_user import UpdateUserRequest, UpdateUserResponse, UpdateUserUseCase
from .views import ProfileItem

__all__ = [
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "ProfileItem",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
    "UpdateUserRequest",
    "UpdateUserResponse",
    "UpdateUserUseCase",
]
