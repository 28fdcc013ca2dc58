"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase, ItemName
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import (
    ListNearbyPostsRequest,
    ListNearbyPostsUseCase,
    ListPostsResponse,
    ListRecentPostsRequest,
    ListRecentPostsUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
)
from .update_post import ItemStatusUpdate, UpdatePostRequest, UpdatePostUseCase
from .views import PostDetailsResponse

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ItemName",
    "ItemStatusUpdate",
    "ListNearbyPostsRequest",
    "ListNearbyPostsUseCase",
    "ListPostsResponse",
    "ListRecentPostsRequest",
    "ListRecentPostsUseCase",
    "ListUserPostsRequest",
    "ListUserPostsUseCase",
    "PostDetailsResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
