"""Numeric node entity.

Numeric nodes form the chain of a numeric post. The root node holds the
post's start number; every other node applies one operator to its parent's
result. Nodes are embedded in their post and never edited once appended.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from numtalk.domain.model.common import DomainModel
from numtalk.domain.value import AuthorId, NodeId, Operator


class NumericNode(DomainModel):
    """Numeric node entity.

    Root nodes have no parent, operator or operand. Non-root nodes have all
    three, and ``result`` is the parent's result combined with
    ``right_operand``.
    """

    id: NodeId
    parent_id: Optional[NodeId] = None
    op: Optional[Operator] = None
    right_operand: Optional[float] = None
    result: float
    author_id: AuthorId
    author_name: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_root_shape(self) -> "NumericNode":
        """Root nodes carry none of parent/op/operand, other nodes carry all."""
        present = [
            self.parent_id is not None,
            self.op is not None,
            self.right_operand is not None,
        ]
        if any(present) and not all(present):
            raise ValueError(
                "parent_id, op and right_operand must be set together or not at all"
            )
        return self

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
