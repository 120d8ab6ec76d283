"""Parsing of identifiers received from clients."""

from uuid import UUID

from numtalk.domain.error import NotFoundError, ValidationError
from numtalk.domain.value import CommentId, PostId


def parse_post_id(value: str) -> PostId:
    """Parse a post id from a URL path.

    A malformed id cannot name an existing post, so it is reported the same
    way as an unknown one.

    Raises:
        NotFoundError: If the value is not a well-formed id
    """
    try:
        return PostId(UUID(value))
    except (TypeError, ValueError, AttributeError):
        raise NotFoundError("Post", str(value))


def parse_comment_id(value: str | None) -> CommentId | None:
    """Parse an optional parent comment id from a request body.

    Raises:
        ValidationError: If the value is present but not a well-formed id
    """
    if not value:
        return None
    try:
        return CommentId(UUID(value))
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(f"invalid parentId: {value}")
