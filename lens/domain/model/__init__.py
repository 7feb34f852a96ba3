"""Domain model entities for InspireLens."""

from lens.domain.model.category import Category
from lens.domain.model.comment import Comment
from lens.domain.model.content import (
    AiPrompt,
    Article,
    Book,
    ContentItem,
    ContentRecord,
    Quote,
    Video,
)
from lens.domain.model.feed import FeedComment, FeedItem, FeedPage, FeedVote
from lens.domain.model.tag import Tag
from lens.domain.model.user import User
from lens.domain.model.vote import Vote

__all__ = [
    "User",
    "Category",
    "ContentItem",
    "ContentRecord",
    "Quote",
    "Article",
    "Book",
    "Video",
    "AiPrompt",
    "Tag",
    "Vote",
    "Comment",
    "FeedItem",
    "FeedComment",
    "FeedVote",
    "FeedPage",
]
