"""JWT token utilities."""

import re
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from numtalk.config import AuthSettings

_BEARER_RE = re.compile(r"^Bearer (.+)$")


class TokenPayload(BaseModel):
    """JWT token payload."""

    id: str
    username: str
    exp: datetime | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def extract_bearer_token(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Args:
        authorization: Raw header value

    Returns:
        The token part of the header

    Raises:
        JWTError: If the header is missing or not in bearer form
    """
    if not authorization:
        raise JWTError("Missing Authorization header")
    match = _BEARER_RE.match(authorization)
    if not match:
        raise JWTError("Invalid token format")
    return match.group(1)


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        username: Display name
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "id": user_id,
        "username": username,
        "exp": expiry,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or lacks the identity claims
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValidationError:
        raise JWTError("Invalid token claims")
