"""Strongly typed identifiers for board entities.

Nodes and comments are embedded in their post but still carry their own
identifiers so that parent references can point at them.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
NodeId = NewType("NodeId", UUID)
CommentId = NewType("CommentId", UUID)

# Author ids come from token claims and are opaque strings
AuthorId = NewType("AuthorId", str)
