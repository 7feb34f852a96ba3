"""Application layer DI providers."""

from dishka import Scope, provide

from lens.application.usecase.category import ListCategoriesUseCase
from lens.application.usecase.comment import AddCommentUseCase, DeleteCommentUseCase
from lens.application.usecase.content import CreateContentUseCase
from lens.application.usecase.feed import GetFeedUseCase
from lens.application.usecase.tag import ListTagsUseCase
from lens.application.usecase.vote import ToggleVoteUseCase
from lens.config import FeedSettings
from lens.domain.service import (
    CategoryService,
    CommentService,
    ContentService,
    FeedService,
    TagService,
    UserService,
    VoteService,
)
from lens.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_get_feed_use_case(
        self, feed_service: FeedService, feed_settings: FeedSettings
    ) -> GetFeedUseCase:
        """Provide get feed use case."""
        return GetFeedUseCase(feed_service=feed_service, feed_settings=feed_settings)

    # Content use cases
    @provide(scope=Scope.REQUEST)
    def get_create_content_use_case(
        self,
        content_service: ContentService,
        category_service: CategoryService,
        tag_service: TagService,
        user_service: UserService,
    ) -> CreateContentUseCase:
        """Provide create content use case."""
        return CreateContentUseCase(
            content_service=content_service,
            category_service=category_service,
            tag_service=tag_service,
            user_service=user_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service, user_service=user_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Lookup use cases
    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)
