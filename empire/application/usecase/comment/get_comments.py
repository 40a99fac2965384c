"""Get comments use case."""

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_item_type, parse_uuid
from empire.domain.error import ValidationError
from empire.domain.service import CommentService

from .views import CommentTreeItem


class GetCommentsRequest(BaseModel):
    """Get comments request; both fields are required but checked here."""

    item_id: str | None = None
    item_type: str | None = None


class GetCommentsResponse(BaseModel):
    """Threaded comments of a subject."""

    comments: list[CommentTreeItem]
    total: int


class GetCommentsUseCase:
    """Use case for reading the comment forest of an account or course."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            ValidationError: Missing or invalid item_id / item_type
        """
        if not request.item_id or not request.item_type:
            raise ValidationError("Missing item_id or item_type")
        item_type = parse_item_type(request.item_type)
        item_id = parse_uuid(request.item_id, "item_id")

        forest = await self.comment_service.get_forest(item_id, item_type)

        return GetCommentsResponse(
            comments=[CommentTreeItem.from_node(node) for node in forest.roots],
            total=forest.total,
        )
