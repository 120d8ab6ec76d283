"""In-memory post repository for testing."""

from typing import Optional

from numtalk.domain.model import Comment, NumericNode, Post
from numtalk.domain.repository.post import PostRepository
from numtalk.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Appends don't await between reading and writing the stored post, so they
    are atomic within the event loop.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find all posts, most recent first."""
        posts = sorted(self._posts.values(), key=lambda p: str(p.id))
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        self._posts[post.id] = post
        return post

    async def append_node(
        self, post_id: PostId, node: NumericNode
    ) -> Optional[Post]:
        """Append a numeric node to a post's chain."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        # Create updated post (since posts are immutable)
        updated = post.model_copy(update={"nodes": [*post.nodes, node]})
        self._posts[post_id] = updated
        return updated

    async def append_comment(
        self, post_id: PostId, comment: Comment
    ) -> Optional[Post]:
        """Append a comment to a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updated = post.model_copy(update={"comments": [*post.comments, comment]})
        self._posts[post_id] = updated
        return updated
