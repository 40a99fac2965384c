"""Unit tests for AuthService."""

from unittest.mock import AsyncMock

import pytest

from empire.domain.error import ForbiddenError, ValidationError
from empire.domain.repository import IdentityRepository, ProfileRepository
from empire.domain.service import AuthService
from empire.domain.service.auth_service import INVALID_CREDENTIALS
from empire.domain.value import ProfileStatus, Role
from tests.factories import DEFAULT_PASSWORD
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_creates_identity_and_profile(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        identity_repo = await unit_env.get(IdentityRepository)
        profile_repo = await unit_env.get(ProfileRepository)

        # Act
        profile = await auth_service.register(
            " Alice@Example.COM ", DEFAULT_PASSWORD, "  Alice <Admin>  "
        )

        # Assert
        assert profile.email == "alice@example.com"
        assert profile.full_name == "Alice Admin"
        assert profile.role == Role.USER
        assert profile.status == ProfileStatus.ACTIVE

        identity = await identity_repo.find_by_email("alice@example.com")
        assert identity is not None
        assert identity.id == profile.id
        assert identity.password_hash != DEFAULT_PASSWORD
        assert await profile_repo.find_by_id(profile.id) == profile

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["short1A", "alllowercase1", "NoDigitsHere"])
    async def test_weak_password_rejected(self, unit_env, password):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="Password"):
            await auth_service.register("bob@example.com", password, "Bob")

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="email"):
            await auth_service.register("not-an-email", DEFAULT_PASSWORD, "Bob")

    @pytest.mark.asyncio
    async def test_short_name_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="Name"):
            await auth_service.register("bob@example.com", DEFAULT_PASSWORD, " B ")

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("carol@example.com", DEFAULT_PASSWORD, "Carol")

        with pytest.raises(ValidationError, match="already registered"):
            await auth_service.register("CAROL@example.com", DEFAULT_PASSWORD, "Carol")

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_rejected_by_identity_store(
        self, unit_env, monkeypatch
    ):
        # Arrange - the existence check misses a registration that lands
        # between the check and the insert
        auth_service = await unit_env.get(AuthService)
        identity_repo = await unit_env.get(IdentityRepository)
        await auth_service.register("dora@example.com", DEFAULT_PASSWORD, "Dora")
        monkeypatch.setattr(identity_repo, "find_by_email", AsyncMock(return_value=None))

        # Act / Assert
        with pytest.raises(ValidationError, match="already registered"):
            await auth_service.register("dora@example.com", DEFAULT_PASSWORD, "Dora")


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_valid_credentials_return_profile(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "dave@example.com", DEFAULT_PASSWORD, "Dave"
        )

        profile = await auth_service.authenticate("Dave@example.com", DEFAULT_PASSWORD)

        assert profile.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_alike(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("erin@example.com", DEFAULT_PASSWORD, "Erin")

        with pytest.raises(ValidationError) as wrong_password:
            await auth_service.authenticate("erin@example.com", "Wr0ngPassword")
        with pytest.raises(ValidationError) as unknown_email:
            await auth_service.authenticate("nobody@example.com", DEFAULT_PASSWORD)

        assert str(wrong_password.value) == INVALID_CREDENTIALS
        assert str(unknown_email.value) == INVALID_CREDENTIALS

    @pytest.mark.asyncio
    async def test_malformed_email_is_invalid_credentials(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match=INVALID_CREDENTIALS):
            await auth_service.authenticate("garbage", DEFAULT_PASSWORD)

    @pytest.mark.asyncio
    async def test_banned_user_is_forbidden(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await auth_service.register(
            "frank@example.com", DEFAULT_PASSWORD, "Frank"
        )
        await profile_repo.save(
            profile.model_copy(update={"status": ProfileStatus.BANNED})
        )

        # Act & Assert
        with pytest.raises(ForbiddenError, match="banned"):
            await auth_service.authenticate("frank@example.com", DEFAULT_PASSWORD)
