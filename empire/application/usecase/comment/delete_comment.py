"""Delete comment use case."""

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_uuid
from empire.domain.service import CommentService
from empire.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    comment_id: str


class DeleteCommentResponse(BaseModel):
    success: bool
    deleted: int  # The comment plus its replies


class DeleteCommentUseCase:
    """Use case for removing a comment thread (admin moderation)."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        comment_id = CommentId(parse_uuid(request.comment_id, "comment id"))
        deleted = await self.comment_service.delete_comment(comment_id)
        return DeleteCommentResponse(success=True, deleted=deleted)
