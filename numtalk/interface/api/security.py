"""Bearer-token gate shared by the mutating routes."""

from fastapi import HTTPException, status

from numtalk.domain.service import JWTService
from numtalk.domain.value import Identity
from numtalk.util.jwt import JWTError


def require_identity(jwt_service: JWTService, authorization: str | None) -> Identity:
    """Verify the Authorization header or fail the request with 401.

    Args:
        jwt_service: JWT service for token verification
        authorization: Raw ``Authorization`` header value

    Returns:
        Identity of the caller

    Raises:
        HTTPException: 401 if the header is missing, malformed or invalid
    """
    try:
        return jwt_service.authenticate(authorization)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
