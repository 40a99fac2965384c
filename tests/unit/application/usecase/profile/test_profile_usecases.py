"""Unit tests for the profile and login use cases."""

import pytest

from empire.application.usecase.auth import LoginRequest, LoginUseCase
from empire.application.usecase.profile import (
    ListUsersRequest,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
)
from empire.domain.error import ValidationError
from empire.domain.repository import ProfileRepository
from empire.domain.service import AuthService, JWTService
from tests.factories import DEFAULT_PASSWORD, at, make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListUsersUseCase:
    """Tests for ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_camel_case_pagination(self, unit_env):
        # Arrange
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(ListUsersUseCase)
        for i in range(3):
            await profile_repo.save(make_profile(created_at=at(i)))

        # Act
        response = await use_case.execute(ListUsersRequest(page="2", per_page="2"))
        data = response.model_dump(by_alias=True)

        # Assert
        assert len(data["profiles"]) == 1
        assert data["total"] == 3
        assert data["page"] == 2
        assert data["perPage"] == 2
        assert data["totalPages"] == 2

    @pytest.mark.asyncio
    async def test_default_page_size(self, unit_env):
        use_case = await unit_env.get(ListUsersUseCase)

        response = await use_case.execute(ListUsersRequest())

        assert response.per_page == 20

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "page,per_page",
        [("0", "10"), ("1", "101"), ("1", "-1"), ("abc", "10"), ("1", "ten")],
    )
    async def test_malformed_or_out_of_range_paging_rejected(
        self, unit_env, page, per_page
    ):
        use_case = await unit_env.get(ListUsersUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListUsersRequest(page=page, per_page=per_page))


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase."""

    @pytest.mark.asyncio
    async def test_promote_user(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(UpdateUserUseCase)
        profile = await profile_repo.save(make_profile())

        response = await use_case.execute(
            UpdateUserRequest(user_id=str(profile.id), role="admin")
        )

        assert response.profile.role == "admin"
        assert response.profile.status == "active"

    @pytest.mark.asyncio
    async def test_unknown_status_rejected(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(UpdateUserUseCase)
        profile = await profile_repo.save(make_profile())

        with pytest.raises(ValidationError, match="status"):
            await use_case.execute(
                UpdateUserRequest(user_id=str(profile.id), status="suspended")
            )


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_profile(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        jwt_service = await unit_env.get(JWTService)
        profile = await auth_service.register(
            "grace@example.com", DEFAULT_PASSWORD, "Grace"
        )
        use_case = LoginUseCase(auth_service, jwt_service)

        # Act
        response = await use_case.execute(
            LoginRequest(email="grace@example.com", password=DEFAULT_PASSWORD)
        )

        # Assert
        assert response.user.id == str(profile.id)
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == str(profile.id)
        assert payload.email == "grace@example.com"

    @pytest.mark.asyncio
    async def test_missing_credentials_rejected(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(LoginRequest(email="grace@example.com"))
