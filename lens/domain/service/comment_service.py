"""Comment domain service."""

from datetime import datetime

import logfire

from lens.domain.error import DuplicateCommentError, NotFoundError, ValidationError
from lens.domain.model.comment import Comment
from lens.domain.repository import CommentRepository
from lens.domain.value import CommentId, ContentId, ContentRef, UserId

from .base import Service
from .content_service import ContentService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        content_service: ContentService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            content_service: Content domain service
        """
        self.comment_repository = comment_repository
        self.content_service = content_service

    async def add_comment(self, ref: ContentRef, user_id: UserId, text: str) -> Comment:
        """Add a comment to a content item.

        Args:
            ref: Content item key
            user_id: Author user ID
            text: Comment text as submitted

        Returns:
            Created comment

        Raises:
            ValidationError: If the trimmed text is empty or too long
            NotFoundError: If the content item does not exist
            DuplicateCommentError: If the user already posted this text
        """
        with logfire.span(
            "comment_service.add_comment", ref=str(ref), user_id=user_id
        ):
            text = text.strip()
            if not text:
                raise ValidationError("Comment text is required")
            if len(text) > 5000:
                raise ValidationError(
                    "Validation failed",
                    [{"field": "comment", "message": "Comment must be at most 5000 characters"}],
                )

            await self.content_service.ensure_exists(ref)

            if await self.comment_repository.has_active_duplicate(ref, user_id, text):
                logfire.warn("Duplicate comment rejected", ref=str(ref), user_id=user_id)
                raise DuplicateCommentError()

            comment = Comment(
                post_type=ref.kind,
                post_id=ref.id,
                user_id=user_id,
                text=text,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=saved.id, ref=str(ref))
            return saved

    async def delete_comment(
        self, post_id: ContentId, comment_id: CommentId, user_id: UserId
    ) -> None:
        """Soft-delete one of the user's own comments.

        Args:
            post_id: Content id the comment belongs to
            comment_id: Comment ID
            user_id: Acting user

        Raises:
            NotFoundError: If no active comment owned by the user matches
        """
        with logfire.span(
            "comment_service.delete_comment",
            post_id=post_id,
            comment_id=comment_id,
            user_id=user_id,
        ):
            deleted = await self.comment_repository.soft_delete(
                post_id, comment_id, user_id
            )
            if not deleted:
                logfire.warn(
                    "Comment not found or already deleted",
                    comment_id=comment_id,
                    user_id=user_id,
                )
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=comment_id)
