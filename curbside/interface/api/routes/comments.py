"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from curbside.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from curbside.application.usecase.post.views import CommentView
from curbside.domain.error import DomainError
from curbside.domain.service import JWTService
from curbside.interface.api.common import http_error, require_user_id

router = APIRouter(prefix="/api/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=2000)


@router.post(
    "/{post_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentView:
    """Comment on a post. Requires authentication."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id), user_id=user_id, content=request.content
            )
        )
    except DomainError as e:
        raise http_error(e)
