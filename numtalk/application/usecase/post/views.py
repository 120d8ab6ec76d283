"""Response views for posts.

Views are the JSON shape clients see: camelCase keys, embedded nodes and
comments, ids as strings.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from numtalk.domain.model import Comment, NumericNode, Post
from numtalk.domain.value import Operator


class View(BaseModel):
    """Base for response views (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NodeView(View):
    """Numeric node in a response."""

    id: str
    parent_id: str | None
    op: Operator | None
    right_operand: float | None
    result: float
    author_id: str
    author_name: str | None
    created_at: datetime

    @classmethod
    def from_node(cls, node: NumericNode) -> "NodeView":
        return cls(
            id=str(node.id),
            parent_id=str(node.parent_id) if node.parent_id else None,
            op=node.op,
            right_operand=node.right_operand,
            result=node.result,
            author_id=node.author_id,
            author_name=node.author_name,
            created_at=node.created_at,
        )


class CommentView(View):
    """Comment in a response."""

    id: str
    parent_id: str | None
    text: str
    author_id: str
    author_name: str | None
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            text=comment.text,
            author_id=comment.author_id,
            author_name=comment.author_name,
            created_at=comment.created_at,
        )


class PostView(View):
    """Post in a response, with its nodes and comments."""

    id: str
    author_id: str
    author_name: str | None
    text: str | None
    start_number: float | None
    nodes: list[NodeView]
    comments: list[CommentView]
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostView":
        return cls(
            id=str(post.id),
            author_id=post.author_id,
            author_name=post.author_name,
            text=post.text,
            start_number=post.start_number,
            nodes=[NodeView.from_node(n) for n in post.nodes],
            comments=[CommentView.from_comment(c) for c in post.comments],
            created_at=post.created_at,
        )
