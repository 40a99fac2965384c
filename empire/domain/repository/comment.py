"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from empire.domain.model.comment import Comment
from empire.domain.value import CommentId, ItemType


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_subject(self, item_id: UUID, item_type: ItemType) -> List[Comment]:
        """Find every comment attached to a subject.

        Args:
            item_id: The commented-on entity
            item_type: Kind of the commented-on entity

        Returns:
            Comments ordered by creation time, oldest first
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Find every comment across all subjects, newest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete_thread(self, comment_id: CommentId) -> int:
        """Delete a comment together with every reply below it.

        Args:
            comment_id: Root of the subtree to delete

        Returns:
            Number of rows deleted (0 if the comment did not exist)
        """
        pass
