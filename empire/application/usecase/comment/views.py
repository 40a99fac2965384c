"""Comment response items shared by the comment use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from empire.domain.model import Comment
from empire.domain.service import CommentNode


class CommentAuthorItem(BaseModel):
    """Author snapshot in responses."""

    id: str
    full_name: Optional[str]
    avatar: Optional[str]
    role: str


class CommentItem(BaseModel):
    """Comment item in response."""

    id: str
    item_id: str
    item_type: str
    user_id: str
    parent_id: Optional[str]
    comment: str
    created_at: datetime
    updated_at: datetime
    user: Optional[CommentAuthorItem]

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(**_comment_fields(comment))


class CommentTreeItem(CommentItem):
    """Comment item with its nested replies."""

    replies: list["CommentTreeItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentTreeItem":
        return cls(
            **_comment_fields(node.comment),
            replies=[cls.from_node(reply) for reply in node.replies],
        )


def _comment_fields(comment: Comment) -> dict:
    author = comment.author
    return {
        "id": str(comment.id),
        "item_id": str(comment.item_id),
        "item_type": comment.item_type.value,
        "user_id": str(comment.user_id),
        "parent_id": str(comment.parent_id) if comment.parent_id else None,
        "comment": comment.comment,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
        "user": (
            CommentAuthorItem(
                id=str(author.id),
                full_name=author.full_name,
                avatar=author.avatar,
                role=author.role.value,
            )
            if author
            else None
        ),
    }
