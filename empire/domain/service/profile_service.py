"""Profile domain service."""

from dataclasses import dataclass
from math import ceil
from typing import Optional

import logfire

from empire.domain.error import NotFoundError, ValidationError
from empire.domain.model import Profile
from empire.domain.model.common import utcnow
from empire.domain.repository import ProfileRepository
from empire.domain.value import ProfileStatus, Role, UserId
from empire.domain.value.types import normalize_full_name, validate_avatar_url

from .base import Service


@dataclass
class ProfilePage:
    """One page of the admin user listing."""

    profiles: list[Profile]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.per_page) if self.per_page else 0


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_id(self, user_id: UserId) -> Profile:
        """Get profile by identity ID.

        Raises:
            NotFoundError: If profile not found
        """
        with logfire.span("profile_service.get_by_id", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("Profile", str(user_id))
            return profile

    async def update_own(
        self,
        user_id: UserId,
        full_name: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> Profile:
        """Update the caller's display fields.

        A blank avatar clears it; fields left as None are unchanged.

        Raises:
            ValidationError: Name length or avatar URL invalid
            NotFoundError: Caller has no profile
        """
        with logfire.span(
            "profile_service.update_own",
            user_id=str(user_id),
            updating_name=full_name is not None,
            updating_avatar=avatar is not None,
        ):
            profile = await self.get_by_id(user_id)
            updates: dict = {}

            if full_name is not None:
                try:
                    updates["full_name"] = normalize_full_name(full_name)
                except ValueError as e:
                    raise ValidationError(str(e))

            if avatar is not None:
                if avatar.strip():
                    try:
                        updates["avatar"] = validate_avatar_url(avatar)
                    except ValueError as e:
                        raise ValidationError(str(e))
                else:
                    updates["avatar"] = None

            if not updates:
                return profile

            updates["updated_at"] = utcnow()
            saved = await self.profile_repository.save(profile.model_copy(update=updates))
            logfire.info(
                "Profile updated", user_id=str(user_id), fields=sorted(updates)
            )
            return saved

    async def list_page(self, page: int, per_page: int) -> ProfilePage:
        """Profiles ordered oldest first, one page at a time.

        Args:
            page: 1-based page number
            per_page: Page size, already clamped by the caller
        """
        with logfire.span(
            "profile_service.list_page", page=page, per_page=per_page
        ):
            if page < 1 or per_page < 1:
                raise ValidationError("page and perPage must be positive")
            offset = (page - 1) * per_page
            profiles = await self.profile_repository.find_page(offset, per_page)
            total = await self.profile_repository.count()
            logfire.info(
                "Profiles listed", page=page, returned=len(profiles), total=total
            )
            return ProfilePage(
                profiles=profiles, total=total, page=page, per_page=per_page
            )

    async def admin_update(
        self,
        user_id: UserId,
        role: Optional[Role] = None,
        status: Optional[ProfileStatus] = None,
    ) -> Profile:
        """Change a user's role and/or moderation status.

        Raises:
            ValidationError: Neither role nor status given
            NotFoundError: Profile does not exist
        """
        with logfire.span(
            "profile_service.admin_update",
            user_id=str(user_id),
            role=role.value if role else None,
            status=status.value if status else None,
        ):
            if role is None and status is None:
                raise ValidationError("Nothing to update: provide role or status")

            profile = await self.get_by_id(user_id)
            updates: dict = {"updated_at": utcnow()}
            if role is not None:
                updates["role"] = role
            if status is not None:
                updates["status"] = status

            saved = await self.profile_repository.save(profile.model_copy(update=updates))
            logfire.info(
                "Profile moderated",
                user_id=str(user_id),
                role=saved.role.value,
                status=saved.status.value,
            )
            return saved
