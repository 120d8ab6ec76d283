"""PostgreSQL implementation of Post repository."""

from typing import Any, List, Optional

import logfire
from sqlalchemy import ColumnElement, desc, func, literal, select
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import AsyncSession

from numtalk.domain.model import Comment, NumericNode, Post
from numtalk.domain.repository.post import PostRepository
from numtalk.domain.value import PostId
from numtalk.persistence.mappers import (
    comment_to_dict,
    node_to_dict,
    post_to_dict,
    row_to_post,
)
from numtalk.persistence.tables import posts_table


def _jsonb_append(column: ColumnElement, item: dict[str, Any]) -> ColumnElement:
    """Build ``coalesce(column, '[]') || [item]`` for an in-place array append."""
    empty = literal([], type_=JSONB)
    return func.coalesce(column, empty).op("||", return_type=JSONB)(
        literal([item], type_=JSONB)
    )


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Appends are single ``UPDATE ... RETURNING`` statements, so concurrent
    appends to the same post never overwrite each other.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def find_all(self) -> List[Post]:
        """Find all posts, most recent first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(
                desc(posts_table.c.created_at), posts_table.c.id
            )
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            kind=post.kind.value,
        ):
            stmt = posts_table.insert().values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def append_node(
        self, post_id: PostId, node: NumericNode
    ) -> Optional[Post]:
        """Atomically append a numeric node to a post's chain."""
        with logfire.span(
            "post_repository.append_node",
            post_id=str(post_id),
            node_id=str(node.id),
        ):
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post_id)
                .values(nodes=_jsonb_append(posts_table.c.nodes, node_to_dict(node)))
                .returning(posts_table)
            )
            return await self._execute_append(stmt, post_id)

    async def append_comment(
        self, post_id: PostId, comment: Comment
    ) -> Optional[Post]:
        """Atomically append a comment to a post."""
        with logfire.span(
            "post_repository.append_comment",
            post_id=str(post_id),
            comment_id=str(comment.id),
        ):
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post_id)
                .values(
                    comments=_jsonb_append(
                        posts_table.c.comments, comment_to_dict(comment)
                    )
                )
                .returning(posts_table)
            )
            return await self._execute_append(stmt, post_id)

    async def _execute_append(self, stmt, post_id: PostId) -> Optional[Post]:
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            logfire.warn("Post not found for append", post_id=str(post_id))
            return None

        await self.session.flush()
        return row_to_post(row._asdict())
