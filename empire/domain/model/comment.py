"""Comment entity.

Comments are attached to a subject (an account listing or a course) and
may reply to another comment. Threads are stored flat, one row per
comment with a nullable parent, and rebuilt into a forest on read.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from empire.domain.model.common import DomainModel, utcnow
from empire.domain.value import CommentId, ItemType, Role, UserId
from empire.domain.value.types import COMMENT_MAX_LENGTH


class CommentAuthor(DomainModel):
    """Snapshot of the author's profile, taken when comments are read."""

    id: UserId
    full_name: Optional[str] = None
    avatar: Optional[str] = None
    role: Role = Role.USER


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through ``parent_id`` alone: ``None`` marks a root
    comment, anything else points at the comment being replied to.
    """

    id: CommentId
    item_id: UUID
    item_type: ItemType
    user_id: UserId
    parent_id: Optional[CommentId] = None
    comment: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    author: Optional[CommentAuthor] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
