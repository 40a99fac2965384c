"""In-memory profile and identity repositories for testing."""

from typing import Iterable, Optional

from empire.domain.error import ValidationError
from empire.domain.model.profile import Identity, Profile
from empire.domain.repository.profile import (
    EMAIL_ALREADY_REGISTERED,
    IdentityRepository,
    ProfileRepository,
)
from empire.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        return self._profiles.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, Profile]:
        return {
            user_id: self._profiles[user_id]
            for user_id in set(user_ids)
            if user_id in self._profiles
        }

    async def find_by_email(self, email: str) -> Optional[Profile]:
        for profile in self._profiles.values():
            if profile.email == email:
                return profile
        return None

    async def find_page(self, offset: int, limit: int) -> list[Profile]:
        profiles = sorted(self._profiles.values(), key=lambda p: p.created_at)
        return profiles[offset : offset + limit]

    async def count(self) -> int:
        return len(self._profiles)

    async def save(self, profile: Profile) -> Profile:
        self._profiles[profile.id] = profile
        return profile


class InMemoryIdentityRepository(IdentityRepository):
    """In-memory implementation of IdentityRepository for testing."""

    def __init__(self) -> None:
        self._identities: dict[str, Identity] = {}

    async def find_by_email(self, email: str) -> Optional[Identity]:
        return self._identities.get(email)

    async def save(self, identity: Identity) -> Identity:
        if identity.email in self._identities:
            raise ValidationError(EMAIL_ALREADY_REGISTERED)
        self._identities[identity.email] = identity
        return identity
