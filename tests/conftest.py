"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from uuid import uuid4

import logfire

# Settings refuse to load without a secret; tests share this one
TEST_JWT_SECRET = "test-secret-do-not-use-in-production"
os.environ.setdefault("AUTH__JWT_SECRET", TEST_JWT_SECRET)
os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)

from numtalk.config import AuthSettings  # noqa: E402
from numtalk.domain.model import NumericNode, Post  # noqa: E402
from numtalk.domain.value import AuthorId, Identity, NodeId, PostId  # noqa: E402
from numtalk.util.jwt import create_token  # noqa: E402


def make_identity(user_id: str = "user-1", name: str | None = "alice") -> Identity:
    """Helper function to build an authenticated identity."""
    return Identity(id=AuthorId(user_id), display_name=name)


def make_token(user_id: str = "user-1", username: str = "alice") -> str:
    """Helper function to issue a token signed with the test secret."""
    return create_token(
        user_id, username, AuthSettings(jwt_secret=os.environ["AUTH__JWT_SECRET"])
    )


def auth_header(user_id: str = "user-1", username: str = "alice") -> dict[str, str]:
    """Helper function to build an Authorization header for API tests."""
    return {"Authorization": f"Bearer {make_token(user_id, username)}"}


def make_chain_post(
    start_number: float = 10,
    created_at: datetime | None = None,
    author_id: str = "author-1",
) -> Post:
    """Helper function to build a chain post with only its root node."""
    created_at = created_at or datetime.now(timezone.utc)
    return Post(
        id=PostId(uuid4()),
        author_id=AuthorId(author_id),
        author_name="author",
        start_number=start_number,
        nodes=[
            NumericNode(
                id=NodeId(uuid4()),
                result=start_number,
                author_id=AuthorId(author_id),
                created_at=created_at,
            )
        ],
        created_at=created_at,
    )


def make_text_post(
    text: str = "Is 0.1 + 0.2 == 0.3?",
    created_at: datetime | None = None,
    author_id: str = "author-1",
) -> Post:
    """Helper function to build a text post."""
    return Post(
        id=PostId(uuid4()),
        author_id=AuthorId(author_id),
        author_name="author",
        text=text,
        created_at=created_at or datetime.now(timezone.utc),
    )
