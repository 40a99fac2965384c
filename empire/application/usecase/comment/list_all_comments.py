"""List all comments use case (moderation queue)."""

from pydantic import BaseModel

from empire.domain.service import CommentService

from .views import CommentItem


class ListAllCommentsResponse(BaseModel):
    comments: list[CommentItem]


class ListAllCommentsUseCase:
    """Use case for the admin comment list, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self) -> ListAllCommentsResponse:
        comments = await self.comment_service.list_all()
        return ListAllCommentsResponse(
            comments=[CommentItem.from_domain(c) for c in comments]
        )
