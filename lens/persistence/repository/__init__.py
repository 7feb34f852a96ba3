"""PostgreSQL repository implementations."""

from lens.persistence.repository.category import PostgresCategoryRepository
from lens.persistence.repository.comment import PostgresCommentRepository
from lens.persistence.repository.content import PostgresContentRepository
from lens.persistence.repository.feed import PostgresFeedRepository
from lens.persistence.repository.tag import PostgresTagRepository
from lens.persistence.repository.user import PostgresUserRepository
from lens.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresCategoryRepository",
    "PostgresContentRepository",
    "PostgresTagRepository",
    "PostgresVoteRepository",
    "PostgresCommentRepository",
    "PostgresFeedRepository",
]
