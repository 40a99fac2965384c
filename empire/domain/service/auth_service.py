"""Authentication domain service.

Email/password identities with bcrypt hashes. Each identity gets a profile
with the same id on registration.
"""

from uuid import uuid4

import bcrypt
import logfire

from empire.config import AuthSettings
from empire.domain.error import ForbiddenError, ValidationError
from empire.domain.model import Identity, Profile
from empire.domain.model.common import utcnow
from empire.domain.repository import IdentityRepository, ProfileRepository
from empire.domain.repository.profile import EMAIL_ALREADY_REGISTERED
from empire.domain.value import Email, ProfileStatus, Role, UserId
from empire.domain.value.types import is_strong_password, normalize_full_name

from .base import Service

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
_BCRYPT_MAX_BYTES = 72

INVALID_CREDENTIALS = "Invalid email or password"


def hash_password(password: str, rounds: int) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def check_password(password: str, password_hash: str) -> bool:
    encoded = password.encode()
    if len(encoded) > _BCRYPT_MAX_BYTES:
        return False
    return bcrypt.checkpw(encoded, password_hash.encode())


def _normalize_email(value: str) -> str:
    try:
        return Email(value).root
    except ValueError:
        raise ValidationError("Invalid email address")


class AuthService(Service):
    """Domain service for registration and login."""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        profile_repository: ProfileRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            identity_repository: Identity repository
            profile_repository: Profile repository
            auth_settings: bcrypt work factor
        """
        self.identity_repository = identity_repository
        self.profile_repository = profile_repository
        self.auth_settings = auth_settings

    async def register(self, email: str, password: str, full_name: str) -> Profile:
        """Create an identity and its profile.

        Raises:
            ValidationError: Bad email, weak password, bad name, or the email
                is already registered
        """
        normalized = _normalize_email(email)
        with logfire.span("auth_service.register", email=normalized):
            if not is_strong_password(password):
                raise ValidationError(
                    "Password must be at least 8 characters and contain "
                    "an uppercase letter and a number"
                )
            if len(password.encode()) > _BCRYPT_MAX_BYTES:
                raise ValidationError(
                    f"Password must be at most {_BCRYPT_MAX_BYTES} bytes"
                )
            try:
                name = normalize_full_name(full_name)
            except ValueError as e:
                raise ValidationError(str(e))

            if await self.identity_repository.find_by_email(normalized):
                logfire.warn("Registration with existing email", email=normalized)
                raise ValidationError(EMAIL_ALREADY_REGISTERED)

            user_id = UserId(uuid4())
            now = utcnow()
            await self.identity_repository.save(
                Identity(
                    id=user_id,
                    email=normalized,
                    password_hash=hash_password(
                        password, self.auth_settings.bcrypt_rounds
                    ),
                    created_at=now,
                )
            )
            profile = await self.profile_repository.save(
                Profile(
                    id=user_id,
                    email=normalized,
                    full_name=name,
                    role=Role.USER,
                    status=ProfileStatus.ACTIVE,
                    created_at=now,
                    updated_at=now,
                )
            )
            logfire.info("User registered", user_id=str(user_id))
            return profile

    async def authenticate(
        self, email: str, password: str, client_ip: str | None = None
    ) -> Profile:
        """Check credentials and return the caller's profile.

        Unknown email and wrong password fail identically.

        Raises:
            ValidationError: Credentials do not match
            ForbiddenError: The profile is banned
        """
        with logfire.span("auth_service.authenticate", client_ip=client_ip):
            try:
                normalized = _normalize_email(email)
            except ValidationError:
                raise ValidationError(INVALID_CREDENTIALS)

            identity = await self.identity_repository.find_by_email(normalized)
            if identity is None or not check_password(
                password, identity.password_hash
            ):
                logfire.warn(
                    "Failed login attempt", email=normalized, client_ip=client_ip
                )
                raise ValidationError(INVALID_CREDENTIALS)

            profile = await self.profile_repository.find_by_id(identity.id)
            if profile is None:
                logfire.error("Identity without profile", user_id=str(identity.id))
                raise ValidationError(INVALID_CREDENTIALS)
            if profile.is_banned:
                logfire.warn(
                    "Banned user login refused",
                    user_id=str(profile.id),
                    client_ip=client_ip,
                )
                raise ForbiddenError("Account is banned")

            logfire.info("User logged in", user_id=str(profile.id))
            return profile
