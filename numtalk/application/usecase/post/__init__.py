"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .list_posts import ListPostsResponse, ListPostsUseCase
from .views import CommentView, NodeView, PostView

__all__ = [
    "CommentView",
    "CreatePostRequest",
    "CreatePostUseCase",
    "ListPostsResponse",
    "ListPostsUseCase",
    "NodeView",
    "PostView",
]
