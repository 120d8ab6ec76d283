"""Post domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from numtalk.domain.error import NotFoundError, ValidationError
from numtalk.domain.model import Comment, NumericNode, Post
from numtalk.domain.repository import PostRepository
from numtalk.domain.value import CommentId, Identity, NodeId, Operator, PostId

from .base import Service


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a valid operand
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class PostService(Service):
    """Domain service for posts, comments and numeric chains."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def list_posts(self) -> list[Post]:
        """List every post, most recent first.

        Returns:
            All posts (comments default to an empty list)
        """
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def create_post(
        self,
        identity: Identity,
        text: str | None = None,
        start_number: float | None = None,
    ) -> Post:
        """Create a text post or the root of a numeric chain.

        Args:
            identity: Author identity
            text: Post text (text posts)
            start_number: Seed value (chain posts)

        Returns:
            Created post

        Raises:
            ValidationError: If neither or both of text and start_number are given
        """
        has_text = isinstance(text, str) and text != ""
        has_number = _is_number(start_number)

        with logfire.span(
            "post_service.create_post",
            author_id=identity.id,
            has_text=has_text,
            has_number=has_number,
        ):
            if not has_text and not has_number:
                raise ValidationError("Either text or startNumber is required")
            if has_text and has_number:
                raise ValidationError("text and startNumber are mutually exclusive")

            now = datetime.now(timezone.utc)
            post_id = PostId(uuid4())

            if has_number:
                root = NumericNode(
                    id=NodeId(uuid4()),
                    parent_id=None,
                    op=None,
                    right_operand=None,
                    result=start_number,
                    author_id=identity.id,
                    author_name=identity.display_name,
                    created_at=now,
                )
                post = Post(
                    id=post_id,
                    author_id=identity.id,
                    author_name=identity.display_name,
                    start_number=start_number,
                    nodes=[root],
                    comments=[],
                    created_at=now,
                )
            else:
                post = Post(
                    id=post_id,
                    author_id=identity.id,
                    author_name=identity.display_name,
                    text=text,
                    comments=[],
                    created_at=now,
                )

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), kind=saved.kind.value)
            return saved

    async def add_comment(
        self,
        identity: Identity,
        post_id: PostId,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Post:
        """Append a comment (or reply) to a post.

        The parent comment is not looked up; a reply may point at any id.

        Args:
            identity: Author identity
            post_id: Post ID
            text: Comment text (trimmed before storing)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Updated post

        Raises:
            ValidationError: If text is empty after trimming
            NotFoundError: If post not found
        """
        with logfire.span(
            "post_service.add_comment",
            post_id=str(post_id),
            author_id=identity.id,
            parent_id=str(parent_id) if parent_id else None,
        ):
            if not isinstance(text, str) or not text.strip():
                raise ValidationError("text required")

            comment = Comment(
                id=CommentId(uuid4()),
                parent_id=parent_id,
                text=text.strip(),
                author_id=identity.id,
                author_name=identity.display_name,
                created_at=datetime.now(timezone.utc),
            )

            updated = await self.post_repository.append_comment(post_id, comment)
            if not updated:
                logfire.warn("Post not found for comment", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info(
                "Comment added",
                post_id=str(post_id),
                comment_id=str(comment.id),
                comment_count=len(updated.comments),
            )
            return updated

    async def extend_chain(
        self,
        identity: Identity,
        post_id: PostId,
        parent_index: int,
        op: str,
        right_operand: float,
    ) -> Post:
        """Extend a numeric chain from an existing node.

        Any node may be extended, so the chain grows as a tree.

        Args:
            identity: Author identity
            post_id: Post ID
            parent_index: Position of the parent node in the post's node list
            op: Operator name (add, sub, mul, div)
            right_operand: Number combined with the parent's result

        Returns:
            Updated post

        Raises:
            ValidationError: If op is unknown, operand is not a number, or
                the operation divides by zero
            NotFoundError: If post or parent node not found
        """
        with logfire.span(
            "post_service.extend_chain",
            post_id=str(post_id),
            author_id=identity.id,
            parent_index=parent_index,
            op=op,
        ):
            try:
                operator = Operator(op)
            except ValueError:
                raise ValidationError("invalid op")
            if not _is_number(right_operand):
                raise ValidationError("rightOperand must be number")
            post = await self.get_post(post_id)

            # Negative indexes must not wrap around to the end of the chain
            if (
                not isinstance(parent_index, int)
                or isinstance(parent_index, bool)
                or not 0 <= parent_index < len(post.nodes)
            ):
                logfire.warn(
                    "Parent node not found",
                    post_id=str(post_id),
                    parent_index=parent_index,
                    node_count=len(post.nodes),
                )
                raise NotFoundError("Node", f"{post_id}[{parent_index}]")

            parent = post.nodes[parent_index]
            if operator is Operator.DIV and right_operand == 0:
                raise ValidationError("division by zero")
            result = operator.apply(parent.result, right_operand)

            node = NumericNode(
                id=NodeId(uuid4()),
                parent_id=parent.id,
                op=operator,
                right_operand=right_operand,
                result=result,
                author_id=identity.id,
                author_name=identity.display_name,
                created_at=datetime.now(timezone.utc),
            )

            updated = await self.post_repository.append_node(post_id, node)
            if not updated:
                raise NotFoundError("Post", str(post_id))

            logfire.info(
                "Chain extended",
                post_id=str(post_id),
                node_id=str(node.id),
                parent_id=str(parent.id),
                result=result,
            )
            return updated

