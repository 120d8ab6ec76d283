"""Extend chain use case."""

import logfire
from pydantic import BaseModel, Field, field_validator

from numtalk.application.usecase.ids import parse_post_id
from numtalk.application.usecase.post.views import PostView
from numtalk.domain.service import PostService
from numtalk.domain.value import Identity


class ExtendChainRequest(BaseModel):
    """Extend chain request."""

    identity: Identity  # From the verified token
    post_id: str  # UUID string from the URL
    parent_index: int = Field(strict=True)  # Position in the post's node list
    op: str = Field(strict=True)
    right_operand: float = Field(strict=True)

    @field_validator("parent_index", mode="before")
    @classmethod
    def integral_float_index(cls, value):
        """JSON numbers like 1.0 address the same node as 1."""
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class ExtendChainUseCase:
    """Use case for appending a numeric node to a post's chain."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize extend chain use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ExtendChainRequest) -> PostView:
        """Execute extend chain flow.

        Args:
            request: Extend chain request

        Returns:
            The updated post

        Raises:
            ValidationError: If op, operand or division is invalid
            NotFoundError: If post or parent node not found
        """
        with logfire.span(
            "extend_chain.execute",
            post_id=request.post_id,
            author_id=request.identity.id,
            op=request.op,
        ):
            post = await self.post_service.extend_chain(
                identity=request.identity,
                post_id=parse_post_id(request.post_id),
                parent_index=request.parent_index,
                op=request.op,
                right_operand=request.right_operand,
            )
            return PostView.from_post(post)
