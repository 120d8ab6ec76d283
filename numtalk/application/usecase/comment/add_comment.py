"""Add comment use case."""

import logfire
from pydantic import BaseModel, Field

from numtalk.application.usecase.ids import parse_comment_id, parse_post_id
from numtalk.application.usecase.post.views import PostView
from numtalk.domain.service import PostService
from numtalk.domain.value import Identity


class AddCommentRequest(BaseModel):
    """Add comment request."""

    identity: Identity  # From the verified token
    post_id: str  # UUID string from the URL
    text: str = Field(strict=True)
    parent_id: str | None = Field(default=None, strict=True)  # For replies


class AddCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: AddCommentRequest) -> PostView:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            The updated post

        Raises:
            ValidationError: If text is blank or parent id is malformed
            NotFoundError: If post not found
        """
        with logfire.span(
            "add_comment.execute",
            post_id=request.post_id,
            author_id=request.identity.id,
        ):
            post = await self.post_service.add_comment(
                identity=request.identity,
                post_id=parse_post_id(request.post_id),
                text=request.text,
                parent_id=parse_comment_id(request.parent_id),
            )
            return PostView.from_post(post)
