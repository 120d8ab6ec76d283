"""Domain model entities for the number board."""

from numtalk.domain.model.comment import Comment
from numtalk.domain.model.node import NumericNode
from numtalk.domain.model.post import Post

__all__ = [
    "Post",
    "NumericNode",
    "Comment",
]
