"""Repository interfaces for the number board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from numtalk.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
]
