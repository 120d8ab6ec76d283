"""Numeric chain routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from numtalk.application.usecase.node import ExtendChainRequest, ExtendChainUseCase
from numtalk.application.usecase.post import PostView
from numtalk.domain.error import NotFoundError, ValidationError
from numtalk.domain.service import JWTService
from numtalk.interface.api.body import read_json_body
from numtalk.interface.api.security import require_identity
from numtalk.interface.error import InvalidBodyError

router = APIRouter(prefix="/posts", tags=["nodes"], route_class=DishkaRoute)


class ExtendChainAPIRequest(BaseModel):
    """API request for extending a numeric chain."""

    model_config = ConfigDict(populate_by_name=True)

    parent_index: Any = Field(default=None, alias="parentIndex")
    op: Any = None
    right_operand: Any = Field(default=None, alias="rightOperand")


@router.post("/{post_id}/nodes", response_model=PostView)
async def extend_chain(
    post_id: str,
    request: Request,
    extend_chain_use_case: FromDishka[ExtendChainUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostView:
    """Append a numeric node computed from an existing node of the chain.

    Requires authentication. A missing post and a missing parent node both
    return 404.

    Args:
        post_id: Post UUID
        request: Incoming request, its JSON body holding ``parentIndex``,
            ``op`` and ``rightOperand``
        extend_chain_use_case: Extend chain use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        The updated post

    Raises:
        HTTPException: If not authenticated, post/node missing, or validation fails
    """
    identity = require_identity(jwt_service, authorization)

    try:
        body = ExtendChainAPIRequest.model_validate(await read_json_body(request))
        use_case_request = ExtendChainRequest(
            identity=identity,
            post_id=post_id,
            parent_index=body.parent_index,
            op=body.op,
            right_operand=body.right_operand,
        )
        return await extend_chain_use_case.execute(use_case_request)

    except NotFoundError as e:
        logfire.warn("Chain extension failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (ValidationError, InvalidBodyError, ValueError) as e:
        logfire.warn("Chain extension validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error extending chain", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to extend chain",
        )
