"""Request body reading for authenticated routes.

Mutating routes read their JSON body themselves, after the bearer token has
been checked, so FastAPI never rejects a request before authentication.
"""

from typing import Any

from fastapi import Request

from numtalk.interface.error import InvalidBodyError


async def read_json_body(request: Request) -> Any:
    """Decode the request body.

    Args:
        request: Incoming request

    Returns:
        Decoded JSON value, or None when the body is empty

    Raises:
        InvalidBodyError: If the body is not valid JSON
    """
    raw = await request.body()
    if not raw.strip():
        return None

    try:
        return await request.json()
    except ValueError:
        raise InvalidBodyError("Request body is not valid JSON")
