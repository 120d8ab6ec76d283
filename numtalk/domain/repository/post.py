"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from numtalk.domain.model import Comment, NumericNode, Post
from numtalk.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.

    Nodes and comments are stored inside their post. Appending one must be
    atomic with respect to other appends on the same post: two concurrent
    appends both end up in the stored post.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, most recent first.

        Posts created at the same instant are ordered by id so repeated
        calls return the same sequence.

        Returns:
            List of all posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def append_node(
        self, post_id: PostId, node: NumericNode
    ) -> Optional[Post]:
        """Atomically append a numeric node to a post's chain.

        Args:
            post_id: The post ID
            node: The node to append

        Returns:
            The updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def append_comment(
        self, post_id: PostId, comment: Comment
    ) -> Optional[Post]:
        """Atomically append a comment to a post.

        Args:
            post_id: The post ID
            comment: The comment to append

        Returns:
            The updated post, or None if the post doesn't exist
        """
        pass
