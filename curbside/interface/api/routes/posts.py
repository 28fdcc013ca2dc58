"""Post routes."""

from decimal import Decimal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from curbside.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ItemName,
    ItemStatusUpdate,
    ListNearbyPostsRequest,
    ListNearbyPostsUseCase,
    ListRecentPostsRequest,
    ListRecentPostsUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
    PostDetailsResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from curbside.domain.error import DomainError
from curbside.domain.service import JWTService
from curbside.domain.value import PostStatus
from curbside.interface.api.common import bad_request, http_error, require_user_id

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    location: str = Field(min_length=1, max_length=255)
    latitude: str
    longitude: str
    description: str | None = Field(default=None, max_length=5000)
    items: list[ItemName] = Field(default_factory=list)
    image_urls: list[str] = Field(default_factory=list)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. All fields optional."""

    status: PostStatus | None = None
    items: list[ItemStatusUpdate] = Field(default_factory=list)
    new_image_urls: list[str] = Field(default_factory=list)


@router.post(
    "", response_model=PostDetailsResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostDetailsResponse:
    """Create a post with its items and images.

    Requires authentication. Posting grants the author immediate viewing of
    new finds for the participation window.
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                user_id=user_id,
                location=request.location,
                latitude=request.latitude,
                longitude=request.longitude,
                description=request.description,
                items=request.items,
                image_urls=request.image_urls,
            )
        )
    except DomainError as e:
        raise http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.get("/nearby", response_model=list[PostDetailsResponse])
async def list_nearby_posts(
    list_nearby_use_case: FromDishka[ListNearbyPostsUseCase],
    jwt_service: FromDishka[JWTService],
    latitude: str | None = Query(default=None),
    longitude: str | None = Query(default=None),
    radius: Decimal | None = Query(default=None, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> list[PostDetailsResponse]:
    """List posts around a point that the viewer may see.

    Authentication is optional; anonymous viewers only see posts past the
    visibility delay.
    """
    if not latitude or not longitude:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Latitude and longitude are required",
        )

    try:
        result = await list_nearby_use_case.execute(
            ListNearbyPostsRequest(
                latitude=latitude,
                longitude=longitude,
                radius=radius,
                viewer_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except ValueError as e:
        raise bad_request(e)
    return result.posts


@router.get("/recent", response_model=list[PostDetailsResponse])
async def list_recent_posts(
    list_recent_use_case: FromDishka[ListRecentPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> list[PostDetailsResponse]:
    """List the newest posts that the viewer may see.

    The newest `limit` posts are gated after truncation, so the response can
    hold fewer than `limit` posts.
    """
    result = await list_recent_use_case.execute(
        ListRecentPostsRequest(
            limit=limit, viewer_id=jwt_service.get_user_id_from_token(auth_token)
        )
    )
    return result.posts


@router.get("/user/{user_id}", response_model=list[PostDetailsResponse])
async def list_user_posts(
    user_id: UUID,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> list[PostDetailsResponse]:
    """List every post of a user, newest first. Requires authentication."""
    require_user_id(jwt_service, auth_token)

    result = await list_user_posts_use_case.execute(
        ListUserPostsRequest(user_id=str(user_id))
    )
    return result.posts


@router.get("/{post_id}", response_model=PostDetailsResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostDetailsResponse:
    """Get a single post.

    Raises:
        HTTPException: 404 if the post doesn't exist, 403 if the
            participation gate hides it from the viewer
    """
    try:
        return await get_post_use_case.execute(
            GetPostRequest(
                post_id=str(post_id),
                viewer_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except DomainError as e:
        raise http_error(e)


@router.patch("/{post_id}", response_model=PostDetailsResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostDetailsResponse:
    """Update a post's status, its items' statuses, or append images.

    Only the post's author may update it.
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id),
                user_id=user_id,
                status=request.status,
                items=request.items,
                new_image_urls=request.new_image_urls,
            )
        )
    except DomainError as e:
        raise http_error(e)
    except ValueError as e:
        raise bad_request(e)
