"""Comment domain service."""

from dataclasses import dataclass, field
from typing import Sequence
from uuid import UUID, uuid4

import logfire

from empire.domain.error import NotFoundError, ValidationError
from empire.domain.model import Comment, CommentAuthor
from empire.domain.model.common import utcnow
from empire.domain.repository import CommentRepository, ProfileRepository
from empire.domain.value import CommentId, ItemType, UserId
from empire.domain.value.types import COMMENT_MAX_LENGTH

from .base import Service


@dataclass
class CommentNode:
    """A comment with its direct replies, oldest first."""

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)


@dataclass
class CommentForest:
    """Threaded comments of one subject.

    ``total`` counts the flat rows, orphans included.
    """

    roots: list[CommentNode]
    total: int
    orphans: list[Comment] = field(default_factory=list)


def build_comment_forest(
    comments: Sequence[Comment],
) -> tuple[list[CommentNode], list[Comment]]:
    """Link flat comments into a forest.

    The first pass creates a node per comment, the second attaches each
    node to its parent, so input order only determines sibling order.
    Comments whose parent is not in ``comments`` are returned separately.

    Args:
        comments: Comments of one subject, oldest first

    Returns:
        Root nodes in input order, and the orphaned comments
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        nodes[comment.id] = CommentNode(comment=comment)

    roots: list[CommentNode] = []
    orphans: list[Comment] = []
    for comment in comments:
        node = nodes[comment.id]
        if comment.is_root:
            roots.append(node)
        elif comment.parent_id in nodes:
            nodes[comment.parent_id].replies.append(node)
        else:
            orphans.append(comment)

    return roots, orphans


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            profile_repository: Profile repository, for author snapshots
        """
        self.comment_repository = comment_repository
        self.profile_repository = profile_repository

    async def create_comment(
        self,
        item_id: UUID,
        item_type: ItemType,
        author_id: UserId,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a subject or reply to another comment.

        Args:
            item_id: Commented-on entity
            item_type: Kind of the commented-on entity
            author_id: Session identity of the author
            text: Comment body, trimmed before storing
            parent_id: Comment being replied to (None for a root comment)

        Returns:
            Created comment with the author snapshot attached

        Raises:
            ValidationError: Empty or too long body, or a parent from
                another subject
            NotFoundError: Parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            item_id=str(item_id),
            item_type=item_type.value,
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            body = text.strip()
            if not body:
                raise ValidationError("Comment cannot be empty")
            if len(body) > COMMENT_MAX_LENGTH:
                raise ValidationError(
                    f"Comment must be at most {COMMENT_MAX_LENGTH} characters"
                )

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.item_id != item_id or parent.item_type != item_type:
                    logfire.warn(
                        "Parent comment belongs to another subject",
                        parent_id=str(parent_id),
                        parent_item_id=str(parent.item_id),
                        target_item_id=str(item_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this item"
                    )

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                item_id=item_id,
                item_type=item_type,
                user_id=author_id,
                parent_id=parent_id,
                comment=body,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                item_id=str(item_id),
                is_reply=parent_id is not None,
            )
            [with_author] = await self.attach_authors([saved])
            return with_author

    async def get_forest(self, item_id: UUID, item_type: ItemType) -> CommentForest:
        """Threaded comments of a subject.

        Args:
            item_id: Commented-on entity
            item_type: Kind of the commented-on entity

        Returns:
            Forest of root comments with nested replies
        """
        with logfire.span(
            "comment_service.get_forest",
            item_id=str(item_id),
            item_type=item_type.value,
        ):
            comments = await self.comment_repository.find_by_subject(
                item_id, item_type
            )
            comments = await self.attach_authors(comments)
            roots, orphans = build_comment_forest(comments)

            if orphans:
                logfire.warn(
                    "Orphaned comments dropped from thread",
                    item_id=str(item_id),
                    orphan_ids=[str(c.id) for c in orphans],
                )

            logfire.info(
                "Comments retrieved",
                item_id=str(item_id),
                count=len(comments),
                roots=len(roots),
            )
            return CommentForest(roots=roots, total=len(comments), orphans=orphans)

    async def list_all(self) -> list[Comment]:
        """Every comment across subjects, newest first, for moderation."""
        with logfire.span("comment_service.list_all"):
            comments = await self.comment_repository.find_all()
            logfire.info("All comments retrieved", count=len(comments))
            return await self.attach_authors(comments)

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Delete a comment and every reply below it.

        Callers are responsible for the admin check.

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: Comment does not exist
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            existing = await self.comment_repository.find_by_id(comment_id)
            if not existing:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            deleted = await self.comment_repository.delete_thread(comment_id)
            logfire.info(
                "Comment thread deleted",
                comment_id=str(comment_id),
                deleted=deleted,
            )
            return deleted

    async def attach_authors(self, comments: Sequence[Comment]) -> list[Comment]:
        """Return copies of ``comments`` carrying their author snapshot.

        Authors whose profile is gone are left as ``None``.
        """
        if not comments:
            return []
        profiles = await self.profile_repository.find_by_ids(
            {c.user_id for c in comments}
        )
        result = []
        for comment in comments:
            profile = profiles.get(comment.user_id)
            author = (
                CommentAuthor(
                    id=profile.id,
                    full_name=profile.full_name,
                    avatar=profile.avatar,
                    role=profile.role,
                )
                if profile
                else None
            )
            result.append(comment.model_copy(update={"author": author}))
        return result
