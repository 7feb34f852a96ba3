"""Domain layer DI providers."""

from dishka import Scope, provide

from lens.config import AuthSettings
from lens.domain.repository import (
    CategoryRepository,
    CommentRepository,
    ContentRepository,
    FeedRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from lens.domain.service import (
    CategoryService,
    CommentService,
    ContentService,
    FeedService,
    JWTService,
    TagService,
    UserService,
    VoteService,
)
from lens.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(category_repository=category_repository)

    @provide
    def get_content_service(
        self, content_repository: ContentRepository
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(content_repository=content_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, content_service: ContentService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, content_service=content_service
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, content_service: ContentService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, content_service=content_service
        )

    @provide
    def get_feed_service(self, feed_repository: FeedRepository) -> FeedService:
        """Provide feed domain service."""
        return FeedService(feed_repository=feed_repository)
