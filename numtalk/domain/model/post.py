"""Post aggregate root.

A post is either a free-text discussion post or the root of a numeric chain.
The post owns its nodes and comments; both collections are append-only.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator, model_validator

from numtalk.domain.model.comment import Comment
from numtalk.domain.model.common import DomainModel
from numtalk.domain.model.node import NumericNode
from numtalk.domain.value import AuthorId, PostId, PostKind


class Post(DomainModel):
    """Post aggregate root.

    Content rules:
    - Text posts: ``text`` set, no ``start_number``, no nodes
    - Chain posts: ``start_number`` set, no ``text``, first node is a root
      node whose result equals ``start_number``
    """

    id: PostId
    author_id: AuthorId
    author_name: Optional[str] = None
    text: Optional[str] = None
    start_number: Optional[float] = None
    nodes: list[NumericNode] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("nodes", "comments", mode="before")
    @classmethod
    def normalize_missing_collection(cls, v):
        """Documents stored before a collection existed carry null instead."""
        return [] if v is None else v

    @model_validator(mode="after")
    def validate_post_content(self) -> "Post":
        """Validate that the post is either textual or chain-rooted."""
        has_text = self.text is not None
        has_chain = self.start_number is not None

        if has_text == has_chain:
            raise ValueError("A post must have either text or a start number")

        if has_text and self.nodes:
            raise ValueError("Text posts cannot carry numeric nodes")

        if has_chain:
            if not self.nodes:
                raise ValueError("Chain posts require a root node")
            root = self.nodes[0]
            if not root.is_root or root.result != self.start_number:
                raise ValueError(
                    "The first node of a chain must be a root holding the start number"
                )
        return self

    @property
    def kind(self) -> PostKind:
        return PostKind.TEXT if self.text is not None else PostKind.CHAIN
