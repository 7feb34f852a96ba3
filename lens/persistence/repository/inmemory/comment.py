"""In-memory comment repository for testing."""

from typing import List

from lens.domain.model.comment import Comment
from lens.domain.model.feed import FeedComment
from lens.domain.repository.comment import CommentRepository
from lens.domain.value import CommentId, ContentId, ContentRef, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _active_on(self, ref: ContentRef) -> list[Comment]:
        return [
            c
            for c in self._store.comments.values()
            if c.post_type == ref.kind and c.post_id == ref.id and not c.is_deleted
        ]

    async def has_active_duplicate(
        self, ref: ContentRef, user_id: UserId, text: str
    ) -> bool:
        """Check whether the user already has this exact active comment."""
        return any(
            c.user_id == user_id and c.text == text for c in self._active_on(ref)
        )

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment, assigning the next ID."""
        if comment.id is None:
            comment = comment.model_copy(
                update={"id": CommentId(self._store.next_id("comments"))}
            )
        self._store.comments[comment.id] = comment
        return comment

    async def soft_delete(
        self, post_id: ContentId, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Soft-delete a comment owned by the user."""
        comment = self._store.comments.get(comment_id)
        if (
            comment is None
            or comment.post_id != post_id
            or comment.user_id != user_id
            or comment.is_deleted
        ):
            return False
        self._store.comments[comment_id] = comment.model_copy(
            update={"is_deleted": True}
        )
        return True

    async def find_active_by_content(self, ref: ContentRef) -> List[FeedComment]:
        """Find active comments on an item with author usernames."""
        return [
            FeedComment(
                id=c.id,  # type: ignore[arg-type]
                username=self._store.username(c.user_id),
                comment=c.text,
                created_at=c.created_at,
            )
            for c in sorted(self._active_on(ref), key=lambda c: c.created_at)
        ]
