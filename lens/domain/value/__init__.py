"""Domain value objects for InspireLens."""

from lens.domain.value.identifiers import (
    MAX_ID,
    CategoryId,
    CommentId,
    ContentId,
    TagId,
    UserId,
    VoteId,
)
from lens.domain.value.types import (
    ContentKind,
    ContentRef,
    Slug,
    TagName,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "CategoryId",
    "ContentId",
    "TagId",
    "VoteId",
    "CommentId",
    "MAX_ID",
    # Types
    "ContentKind",
    "ContentRef",
    "Slug",
    "TagName",
    "VoteType",
]
