"""Profile and identity repository interfaces."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from empire.domain.model.profile import Identity, Profile
from empire.domain.value import UserId

EMAIL_ALREADY_REGISTERED = "Email is already registered"


class ProfileRepository(ABC):
    """Repository for Profile aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by its identity ID.

        Args:
            user_id: The identity's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, Profile]:
        """Batch lookup used to attach author snapshots.

        Args:
            user_ids: Identity IDs to resolve (duplicates allowed)

        Returns:
            Mapping of the IDs that resolved to their profile
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Profile]:
        """Find a profile by email (already normalized)."""
        pass

    @abstractmethod
    async def find_page(self, offset: int, limit: int) -> list[Profile]:
        """Profiles ordered by creation time, oldest first.

        Args:
            offset: Number of profiles to skip
            limit: Maximum number of profiles to return
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Total number of profiles."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        pass


class IdentityRepository(ABC):
    """Repository for authentication identities."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Identity]:
        """Find an identity by email (already normalized)."""
        pass

    @abstractmethod
    async def save(self, identity: Identity) -> Identity:
        """Insert a new identity.

        Raises:
            ValidationError: The email is already registered
        """
        pass
