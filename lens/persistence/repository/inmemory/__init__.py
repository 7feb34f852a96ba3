"""In-memory repository implementations for testing."""

from .category import InMemoryCategoryRepository
from .comment import InMemoryCommentRepository
from .content import InMemoryContentRepository
from .feed import InMemoryFeedRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryStore",
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryContentRepository",
    "InMemoryFeedRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
