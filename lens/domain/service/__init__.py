"""Domain services."""

from .base import Service
from .category_service import CategoryService
from .comment_service import CommentService
from .content_service import ContentService
from .feed_service import FeedService
from .jwt_service import JWTService
from .tag_service import TagService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CategoryService",
    "CommentService",
    "ContentService",
    "FeedService",
    "JWTService",
    "Service",
    "TagService",
    "UserService",
    "VoteService",
]
