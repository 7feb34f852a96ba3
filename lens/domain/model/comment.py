"""Comment entity.

Comments form a flat, append-only log per content item. Only the author
may remove a comment, and removal is a soft delete.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lens.domain.model.common import DomainModel
from lens.domain.value import CommentId, ContentId, ContentKind, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: Optional[CommentId] = None
    post_type: ContentKind
    post_id: ContentId
    user_id: UserId
    text: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=datetime.now)
    is_deleted: bool = False
