"""Domain layer errors.

Routes map ``ValidationError`` to 400 and ``NotFoundError`` to 404.
"""


class DomainError(Exception):
    """Base domain error."""


class ValidationError(DomainError):
    """Input rejected before anything is written (bad text, operator or operand)."""


class NotFoundError(DomainError):
    """A post, or a node addressed by index, does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
