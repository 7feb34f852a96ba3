"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from lens.domain.model.comment import Comment
from lens.domain.model.feed import FeedComment
from lens.domain.value import CommentId, ContentId, ContentRef, UserId


class CommentRepository(ABC):
    """Repository for the comment log.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def has_active_duplicate(
        self, ref: ContentRef, user_id: UserId, text: str
    ) -> bool:
        """Check whether the user already has this exact active comment.

        Args:
            ref: Content item key
            user_id: Comment author
            text: Trimmed comment text

        Returns:
            True if an identical active comment exists
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment.

        Args:
            comment: Unsaved comment (``id`` is None)

        Returns:
            The saved comment with its database-assigned ``id``
        """
        pass

    @abstractmethod
    async def soft_delete(
        self, post_id: ContentId, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Soft-delete a comment owned by the user in one conditional update.

        Matches on comment id, content id, author and active state
        together, so a missing comment and someone else's comment look
        the same to the caller.

        Args:
            post_id: Content id the comment belongs to
            comment_id: Comment id
            user_id: Acting user

        Returns:
            True if a comment was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_content(self, ref: ContentRef) -> List[FeedComment]:
        """Find active comments on an item with author usernames.

        Args:
            ref: Content item key

        Returns:
            Active comments, oldest first
        """
        pass
