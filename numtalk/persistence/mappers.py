"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Embedded nodes and
comments are stored as JSON-compatible dicts.
"""

from typing import Any, Dict
from uuid import UUID

from numtalk.domain.model import Comment, NumericNode, Post
from numtalk.domain.value import AuthorId, PostId


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Rows without a comments array map to a post with no comments.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        author_id=AuthorId(row["author_id"]),
        author_name=row.get("author_name"),
        text=row.get("text"),
        start_number=row.get("start_number"),
        nodes=[NumericNode.model_validate(n) for n in row.get("nodes") or []],
        comments=[Comment.model_validate(c) for c in row.get("comments") or []],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": post.id,
        "author_id": post.author_id,
        "author_name": post.author_name,
        "text": post.text,
        "start_number": post.start_number,
        "nodes": [node_to_dict(n) for n in post.nodes],
        "comments": [comment_to_dict(c) for c in post.comments],
        "created_at": post.created_at,
    }


def node_to_dict(node: NumericNode) -> Dict[str, Any]:
    """Convert NumericNode to a JSON-compatible dict for embedding."""
    return node.model_dump(mode="json")


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment to a JSON-compatible dict for embedding."""
    return comment.model_dump(mode="json")
