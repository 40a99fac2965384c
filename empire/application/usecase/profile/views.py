"""Profile response item."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from empire.domain.model import Profile


class ProfileItem(BaseModel):
    """Profile in responses."""

    id: str
    email: Optional[str]
    full_name: Optional[str]
    avatar: Optional[str]
    role: str
    status: str
    created_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileItem":
        return cls(
            id=str(profile.id),
            email=profile.email,
            full_name=profile.full_name,
            avatar=profile.avatar,
            role=profile.role.value,
            status=profile.status.value,
            created_at=profile.created_at,
        )
