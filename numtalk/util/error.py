"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """DI wiring cannot be resolved, e.g. a component without a provider."""
