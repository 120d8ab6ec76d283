"""Base for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity. Posts, nodes and comments are never edited in place."""

    model_config = ConfigDict(frozen=True)
