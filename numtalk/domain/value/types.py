"""Domain value objects for the number board.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from numtalk.domain.value.common import ValueObject
from numtalk.domain.value.identifiers import AuthorId


class Operator(str, Enum):
    """Arithmetic operator applied by a numeric node to its parent's result."""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    def apply(self, a: float, b: float) -> float:
        """Apply the operator using plain float arithmetic.

        Division by zero is rejected by the caller before a node is built, so
        ``DIV`` with ``b == 0`` raises ``ZeroDivisionError`` here.
        """
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUB:
            return a - b
        if self is Operator.MUL:
            return a * b
        return a / b


class PostKind(str, Enum):
    """What a post carries: free text or a numeric chain."""

    TEXT = "text"
    CHAIN = "chain"


class Identity(ValueObject):
    """Authenticated caller, extracted from a verified bearer token."""

    id: AuthorId = Field(min_length=1)
    display_name: str | None = None
