"""Delete comment use case."""

from pydantic import BaseModel

from lens.application.usecase.base import BaseUseCase
from lens.domain.service import CommentService
from lens.domain.value import CommentId, ContentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    content_id: int
    comment_id: int
    user_id: int  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str = "Comment deleted successfully"


class DeleteCommentUseCase(BaseUseCase):
    """Use case for removing one of the user's own comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment is missing, deleted, on another
                item, or owned by someone else
        """
        await self.comment_service.delete_comment(
            ContentId(request.content_id),
            CommentId(request.comment_id),
            UserId(request.user_id),
        )
        return DeleteCommentResponse()
