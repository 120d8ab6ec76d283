"""Domain value objects for the number board."""

from numtalk.domain.value.identifiers import AuthorId, CommentId, NodeId, PostId
from numtalk.domain.value.types import Identity, Operator, PostKind

__all__ = [
    # Identifiers
    "AuthorId",
    "CommentId",
    "NodeId",
    "PostId",
    # Types
    "Identity",
    "Operator",
    "PostKind",
]
