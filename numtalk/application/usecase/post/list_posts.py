"""List posts use case."""

import logfire

from pydantic import BaseModel

from numtalk.domain.service import PostService

from .views import PostView


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase:
    """Use case for listing every post, newest first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self) -> ListPostsResponse:
        """Execute list posts flow.

        Returns:
            All posts, most recent first
        """
        with logfire.span("list_posts.execute"):
            posts = await self.post_service.list_posts()
            return ListPostsResponse(posts=[PostView.from_post(p) for p in posts])
