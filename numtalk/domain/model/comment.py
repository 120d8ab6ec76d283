"""Comment entity.

Comments are embedded in their post and may reply to another comment of the
same post through ``parent_id``. The reference is not checked for existence.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from numtalk.domain.model.common import DomainModel
from numtalk.domain.value import AuthorId, CommentId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.
    """

    id: CommentId
    parent_id: Optional[CommentId] = None
    text: str = Field(min_length=1)
    author_id: AuthorId
    author_name: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
