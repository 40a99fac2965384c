"""Profile and identity entities.

An identity is what a session authenticates (email + password hash).
The profile is the application-level record sharing the identity's id,
carrying the display fields, the role that gates admin operations and
the moderation status.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from empire.domain.model.common import DomainModel, utcnow
from empire.domain.value import ProfileStatus, Role, UserId


class Identity(DomainModel):
    """Authentication identity."""

    id: UserId
    email: str
    password_hash: str
    created_at: datetime = Field(default_factory=utcnow)


class Profile(DomainModel):
    """Profile aggregate root - one per identity."""

    id: UserId
    email: Optional[str] = None
    full_name: Optional[str] = None
    avatar: Optional[str] = None
    role: Role = Role.USER
    status: ProfileStatus = ProfileStatus.ACTIVE
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_banned(self) -> bool:
        return self.status == ProfileStatus.BANNED
