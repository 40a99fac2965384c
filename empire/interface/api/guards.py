"""Session extraction and access checks for routes."""

from fastapi import Cookie, Header

from empire.domain.model import Profile
from empire.domain.service import AccessPolicy, ensure_granted
from empire.domain.value import UserId

AUTH_COOKIE = "auth_token"


def session_token(
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> str | None:
    """Session token from the ``auth_token`` cookie or a bearer header.

    The cookie wins when both are present.
    """
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return None


def require_user(access_policy: AccessPolicy, token: str | None) -> UserId:
    """Caller's identity.

    Raises:
        UnauthorizedError: Missing, invalid or expired token
    """
    return ensure_granted(access_policy.require_session(token)).user_id


async def require_admin(access_policy: AccessPolicy, token: str | None) -> Profile:
    """Caller's profile, which must carry the admin role.

    Raises:
        UnauthorizedError: Missing, invalid or expired token
        ForbiddenError: Caller is not an admin
    """
    # Admin grants always carry the profile
    return ensure_granted(await access_policy.require_admin(token)).profile
