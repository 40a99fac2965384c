"""Access policy shared by every privileged operation.

Checks return a typed decision instead of raising, so callers can branch on
the outcome; :func:`ensure_granted` converts a denial into the matching
domain error for callers that just want to stop.

Each request re-verifies from scratch: there is no cache between the token
and the profile role.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from uuid import UUID

import logfire

from empire.domain.error import DomainError, ForbiddenError, UnauthorizedError
from empire.domain.model import Profile
from empire.domain.repository import ProfileRepository
from empire.domain.value import UserId

from .base import Service
from .jwt_service import JWTService


class DenialReason(str, Enum):
    """Why access was denied."""

    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class AccessGranted:
    """The caller may proceed."""

    user_id: UserId
    profile: Optional[Profile] = None

    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True)
class AccessDenied:
    """The caller may not proceed."""

    reason: DenialReason
    message: str

    @property
    def allowed(self) -> bool:
        return False

    def to_error(self) -> DomainError:
        if self.reason == DenialReason.UNAUTHENTICATED:
            return UnauthorizedError(self.message)
        return ForbiddenError(self.message)


AccessDecision = Union[AccessGranted, AccessDenied]


def ensure_granted(decision: AccessDecision) -> AccessGranted:
    """Return the grant or raise the error matching the denial.

    Raises:
        UnauthorizedError: No valid session
        ForbiddenError: Session lacks role or ownership
    """
    if isinstance(decision, AccessDenied):
        raise decision.to_error()
    return decision


def require_owner(user_id: UserId, owner_id: Optional[UserId]) -> AccessDecision:
    """Ownership check for a resource already fetched by the caller.

    A missing owner (resource absent) is reported like a foreign one.
    """
    if owner_id is None or owner_id != user_id:
        logfire.warn(
            "Ownership check failed",
            user_id=str(user_id),
            owner_id=str(owner_id) if owner_id else None,
        )
        return AccessDenied(DenialReason.FORBIDDEN, "Forbidden")
    return AccessGranted(user_id=user_id)


class AccessPolicy(Service):
    """Session and role checks."""

    def __init__(
        self, jwt_service: JWTService, profile_repository: ProfileRepository
    ) -> None:
        """Initialize access policy.

        Args:
            jwt_service: Session token verification
            profile_repository: Profile lookup for role checks
        """
        self.jwt_service = jwt_service
        self.profile_repository = profile_repository

    def require_session(self, token: str | None) -> AccessDecision:
        """Resolve the session identity; never touches the profile store."""
        raw_user_id = self.jwt_service.get_user_id_from_token(token)
        if raw_user_id is None:
            return AccessDenied(DenialReason.UNAUTHENTICATED, "Unauthorized")
        try:
            user_id = UserId(UUID(raw_user_id))
        except ValueError:
            return AccessDenied(DenialReason.UNAUTHENTICATED, "Unauthorized")
        return AccessGranted(user_id=user_id)

    async def require_admin(self, token: str | None) -> AccessDecision:
        """Valid session whose profile carries the admin role.

        Returns:
            AccessGranted with the admin profile, or AccessDenied
            (unauthenticated before any role lookup, forbidden otherwise)
        """
        with logfire.span("access_policy.require_admin"):
            decision = self.require_session(token)
            if isinstance(decision, AccessDenied):
                return decision

            profile = await self.profile_repository.find_by_id(decision.user_id)
            if profile is None or not profile.is_admin:
                logfire.warn(
                    "Admin check failed",
                    user_id=str(decision.user_id),
                    role=profile.role.value if profile else None,
                )
                return AccessDenied(DenialReason.FORBIDDEN, "Forbidden - Admin only")

            return AccessGranted(user_id=decision.user_id, profile=profile)
