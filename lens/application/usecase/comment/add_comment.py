"""Add comment use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, ConfigDict, Field

from lens.domain.error import NotFoundError, ValidationError
from lens.domain.service import CommentService, UserService
from lens.domain.value import ContentId, ContentKind, ContentRef, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    content_id: int
    post_type: str | None = None  # Content kind of the commented item
    comment: str | None = None
    user_id: int  # User ID from authenticated user


class CommentInfo(BaseModel):
    """Created comment as returned to the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    text: str
    user: str  # "@username"
    created_at: datetime = Field(serialization_alias="createdAt")
    created_by: str = Field(serialization_alias="createdBy")


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment: CommentInfo
    message: str = "Comment added successfully"


class AddCommentUseCase:
    """Use case for commenting on a content item."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Steps:
        1. Reject empty text
        2. Resolve the content kind (a missing kind means no such content)
        3. Load the author for the display name (via UserService)
        4. Add the comment (via CommentService)

        Args:
            request: Add comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If the text is empty or the kind is unknown
            NotFoundError: If the content item or the user does not exist
            DuplicateCommentError: If the user already posted this text
        """
        if not request.comment or not request.comment.strip():
            raise ValidationError("Comment text is required")
        if not request.post_type:
            raise NotFoundError("Content", str(request.content_id))

        ref = ContentRef(
            kind=ContentKind.parse(request.post_type),
            id=ContentId(request.content_id),
        )

        with logfire.span(
            "add_comment.execute", ref=str(ref), user_id=request.user_id
        ):
            user = await self.user_service.get_by_id(UserId(request.user_id))
            comment = await self.comment_service.add_comment(
                ref, user.id, request.comment
            )

            handle = f"@{user.username}"
            return AddCommentResponse(
                comment=CommentInfo(
                    id=comment.id,  # type: ignore[arg-type]
                    text=comment.text,
                    user=handle,
                    created_at=comment.created_at,
                    created_by=handle,
                )
            )
