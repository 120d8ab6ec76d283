"""Application layer DI providers."""

from dishka import Scope, provide

from numtalk.application.usecase.comment import AddCommentUseCase
from numtalk.application.usecase.node import ExtendChainUseCase
from numtalk.application.usecase.post import CreatePostUseCase, ListPostsUseCase
from numtalk.domain.service import PostService
from numtalk.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_create_post_use_case(
        self, post_service: PostService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_add_comment_use_case(
        self, post_service: PostService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(post_service=post_service)

    @provide
    def get_extend_chain_use_case(
        self, post_service: PostService
    ) -> ExtendChainUseCase:
        """Provide extend chain use case."""
        return ExtendChainUseCase(post_service=post_service)
