"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""


class InvalidBodyError(InterfaceError):
    """Request body is not valid JSON."""
