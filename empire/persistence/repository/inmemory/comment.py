"""In-memory comment repository for testing."""

from typing import Optional
from uuid import UUID

from empire.domain.model.comment import Comment
from empire.domain.repository.comment import CommentRepository
from empire.domain.value import CommentId, ItemType


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_subject(self, item_id: UUID, item_type: ItemType) -> list[Comment]:
        comments = [
            c
            for c in self._comments.values()
            if c.item_id == item_id and c.item_type == item_type
        ]
        # Stable: equal timestamps keep insertion order
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_all(self) -> list[Comment]:
        return sorted(self._comments.values(), key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment.model_copy(update={"author": None})
        return comment

    async def delete_thread(self, comment_id: CommentId) -> int:
        if comment_id not in self._comments:
            return 0
        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent = frontier.pop()
            for c in self._comments.values():
                if c.parent_id == parent and c.id not in doomed:
                    doomed.add(c.id)
                    frontier.append(c.id)
        for cid in doomed:
            del self._comments[cid]
        return len(doomed)
