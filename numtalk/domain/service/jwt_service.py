"""JWT token domain service."""

import logfire

from numtalk.config import AuthSettings
from numtalk.domain.value import AuthorId, Identity
from numtalk.util.jwt import (
    TokenPayload,
    create_token,
    extract_bearer_token,
    verify_token,
)

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            username: Display name

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, username, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, username=username)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info(
                    "JWT token verified", user_id=payload.id, username=payload.username
                )
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def authenticate(self, authorization: str | None) -> Identity:
        """Resolve the caller's identity from an Authorization header.

        Args:
            authorization: Raw ``Authorization`` header value (may be None)

        Returns:
            Identity of the token holder

        Raises:
            JWTError: If the header is missing, malformed, or the token is invalid
        """
        token = extract_bearer_token(authorization)
        payload = self.verify_token(token)
        return Identity(id=AuthorId(payload.id), display_name=payload.username)
