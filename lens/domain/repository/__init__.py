"""Repository interfaces for the InspireLens domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from lens.domain.repository.category import CategoryRepository
from lens.domain.repository.comment import CommentRepository
from lens.domain.repository.content import ContentRepository
from lens.domain.repository.feed import FeedRepository
from lens.domain.repository.tag import TagRepository
from lens.domain.repository.user import UserRepository
from lens.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "CategoryRepository",
    "ContentRepository",
    "TagRepository",
    "VoteRepository",
    "CommentRepository",
    "FeedRepository",
]
