"""Comment routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from numtalk.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from numtalk.application.usecase.post import PostView
from numtalk.domain.error import NotFoundError, ValidationError
from numtalk.domain.service import JWTService
from numtalk.interface.api.body import read_json_body
from numtalk.interface.api.security import require_identity
from numtalk.interface.error import InvalidBodyError

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    model_config = ConfigDict(populate_by_name=True)

    text: Any = None
    parent_id: Any = Field(default=None, alias="parentId")  # Parent comment for replies


@router.post("/{post_id}/comments", response_model=PostView)
async def add_comment(
    post_id: str,
    request: Request,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostView:
    """Comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Incoming request, its JSON body holding ``text`` and ``parentId``
        add_comment_use_case: Add comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        The updated post

    Raises:
        HTTPException: If not authenticated, post missing, or validation fails
    """
    identity = require_identity(jwt_service, authorization)

    try:
        body = AddCommentAPIRequest.model_validate(await read_json_body(request))
        use_case_request = AddCommentRequest(
            identity=identity,
            post_id=post_id,
            text=body.text,
            parent_id=body.parent_id,
        )
        return await add_comment_use_case.execute(use_case_request)

    except NotFoundError as e:
        logfire.warn("Comment creation failed - post not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (ValidationError, InvalidBodyError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error adding comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add comment",
        )
