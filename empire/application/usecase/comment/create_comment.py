"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from empire.application.usecase.parsing import (
    parse_item_type,
    parse_optional_uuid,
    parse_uuid,
)
from empire.domain.error import ValidationError
from empire.domain.service import CommentService
from empire.domain.value import CommentId, UserId

from .views import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    item_id: str | None = None
    item_type: str | None = None
    comment: str | None = None
    parent_id: str | None = None  # Comment being replied to
    author_id: str  # From the session, never from the body


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a subject or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate the subject fields and the body
        2. Create the comment (service checks the parent)

        Raises:
            ValidationError: Missing fields, invalid item_type or body
            NotFoundError: Parent comment does not exist
        """
        if not request.item_id or not request.item_type or request.comment is None:
            raise ValidationError("Missing required fields")

        item_type = parse_item_type(request.item_type)
        item_id = parse_uuid(request.item_id, "item_id")
        parent_id = parse_optional_uuid(request.parent_id, "parent_id")

        comment = await self.comment_service.create_comment(
            item_id=item_id,
            item_type=item_type,
            author_id=UserId(UUID(request.author_id)),
            text=request.comment,
            parent_id=CommentId(parent_id) if parent_id else None,
        )

        return CreateCommentResponse(comment=CommentItem.from_domain(comment))
