"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from numtalk.domain.service import PostService
from numtalk.domain.value import Identity

from .views import PostView


class CreatePostRequest(BaseModel):
    """Create post request.

    Types are strict so that numeric strings and booleans are not accepted
    as a start number.
    """

    identity: Identity  # From the verified token
    text: str | None = Field(default=None, strict=True)
    start_number: float | None = Field(default=None, strict=True)


class CreatePostUseCase:
    """Use case for creating a text post or a numeric chain."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If neither or both of text and start number are given
        """
        with logfire.span(
            "create_post.execute",
            author_id=request.identity.id,
        ):
            post = await self.post_service.create_post(
                identity=request.identity,
                text=request.text,
                start_number=request.start_number,
            )

            logfire.info("Post created successfully", post_id=str(post.id))
            return PostView.from_post(post)
