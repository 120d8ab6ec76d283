"""PostgreSQL repository implementations."""

from numtalk.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
