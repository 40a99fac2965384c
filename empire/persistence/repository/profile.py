"""PostgreSQL implementations of Profile and Identity repositories."""

from typing import Iterable, Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from empire.domain.error import ValidationError
from empire.domain.model import Identity, Profile
from empire.domain.repository import IdentityRepository, ProfileRepository
from empire.domain.repository.profile import EMAIL_ALREADY_REGISTERED
from empire.domain.value import UserId
from empire.persistence.mappers import (
    identity_to_dict,
    profile_to_dict,
    row_to_identity,
    row_to_profile,
)
from empire.persistence.tables import identities_table, profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, Profile]:
        ids = set(user_ids)
        if not ids:
            return {}
        stmt = select(profiles_table).where(profiles_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        profiles = [row_to_profile(row._asdict()) for row in result.fetchall()]
        return {profile.id: profile for profile in profiles}

    async def find_by_email(self, email: str) -> Optional[Profile]:
        stmt = select(profiles_table).where(profiles_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_page(self, offset: int, limit: int) -> list[Profile]:
        stmt = (
            select(profiles_table)
            .order_by(profiles_table.c.created_at, profiles_table.c.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(profiles_table)
        )
        return result.scalar() or 0

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        profile_dict = profile_to_dict(profile)
        existing = await self.find_by_id(profile.id)

        if existing:
            stmt = (
                profiles_table.update()
                .where(profiles_table.c.id == profile.id)
                .values(**profile_dict)
            )
        else:
            stmt = profiles_table.insert().values(**profile_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return profile


class PostgresIdentityRepository(IdentityRepository):
    """PostgreSQL implementation of IdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_email(self, email: str) -> Optional[Identity]:
        stmt = select(identities_table).where(identities_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_identity(row._asdict()) if row else None

    async def save(self, identity: Identity) -> Identity:
        """Insert an identity; the unique email index decides races."""
        stmt = identities_table.insert().values(**identity_to_dict(identity))
        try:
            # Savepoint keeps the request transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            logfire.warn("Identity email conflict", email=identity.email)
            raise ValidationError(EMAIL_ALREADY_REGISTERED)
        await self.session.flush()
        return identity
