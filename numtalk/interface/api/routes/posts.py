"""Post routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from numtalk.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsUseCase,
    PostView,
)
from numtalk.domain.error import DomainError
from numtalk.domain.service import JWTService
from numtalk.interface.api.body import read_json_body
from numtalk.interface.api.security import require_identity
from numtalk.interface.error import InvalidBodyError

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Validated from the raw body only after authentication, so an
    unauthenticated request is rejected with 401 whatever its body. Fields
    are loosely typed here and checked strictly by the use case request.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: Any = None
    start_number: Any = Field(default=None, alias="startNumber")


@router.get("", response_model=list[PostView])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostView]:
    """List all posts, most recent first.

    Args:
        list_posts_use_case: List posts use case from DI

    Returns:
        List of posts with their nodes and comments
    """
    try:
        result = await list_posts_use_case.execute()
        return result.posts
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list posts",
        )


@router.post("", response_model=PostView)
async def create_post(
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostView:
    """Create a text post or a numeric chain.

    Requires authentication.

    Args:
        request: Incoming request, its JSON body holding ``text`` or ``startNumber``
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        Created post

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    identity = require_identity(jwt_service, authorization)

    try:
        body = CreatePostAPIRequest.model_validate(await read_json_body(request))
        use_case_request = CreatePostRequest(
            identity=identity,
            text=body.text,
            start_number=body.start_number,
        )
        return await create_post_use_case.execute(use_case_request)

    except DomainError as e:
        logfire.warn("Post creation domain error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except (InvalidBodyError, ValueError) as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )
