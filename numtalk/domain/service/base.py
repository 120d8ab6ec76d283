"""Common base for domain services."""


class Service:
    """Marker base for stateless domain services built per request."""
