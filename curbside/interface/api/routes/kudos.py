"""Kudos routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from curbside.application.usecase.kudos import (
    AddKudosRequest,
    AddKudosResponse,
    AddKudosUseCase,
    RemoveKudosRequest,
    RemoveKudosResponse,
    RemoveKudosUseCase,
)
from curbside.domain.error import DomainError
from curbside.domain.service import JWTService
from curbside.interface.api.common import http_error, require_user_id

router = APIRouter(prefix="/api/posts", tags=["kudos"], route_class=DishkaRoute)


@router.post(
    "/{post_id}/kudos",
    response_model=AddKudosResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_kudos(
    post_id: UUID,
    add_kudos_use_case: FromDishka[AddKudosUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddKudosResponse:
    """Give kudos to a post.

    Requires authentication.

    Raises:
        HTTPException: 404 if the post doesn't exist, 400 if the user
            already gave kudos to it
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await add_kudos_use_case.execute(
            AddKudosRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        raise http_error(e)


@router.delete("/{post_id}/kudos", response_model=RemoveKudosResponse)
async def remove_kudos(
    post_id: UUID,
    remove_kudos_use_case: FromDishka[RemoveKudosUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveKudosResponse:
    """Withdraw kudos from a post. Idempotent; requires authentication."""
    user_id = require_user_id(jwt_service, auth_token)

    return await remove_kudos_use_case.execute(
        RemoveKudosRequest(post_id=str(post_id), user_id=user_id)
    )
