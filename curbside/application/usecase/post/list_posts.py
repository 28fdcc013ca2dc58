"""List posts use cases: nearby, recent and per-user listings."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from curbside.config import VisibilitySettings
from curbside.domain.service import PostAssembler
from curbside.domain.value import Latitude, Longitude, UserId

from .views import PostDetailsResponse


def _viewer(viewer_id: str | None) -> UserId | None:
    return UserId(UUID(viewer_id)) if viewer_id else None


class ListNearbyPostsRequest(BaseModel):
    """List nearby posts request."""

    latitude: str
    longitude: str
    radius: Decimal | None = Field(default=None, ge=0)
    viewer_id: str | None = None


class ListRecentPostsRequest(BaseModel):
    """List recent posts request."""

    limit: int | None = Field(default=None, ge=1)
    viewer_id: str | None = None


class ListUserPostsRequest(BaseModel):
    """List a user's posts request."""

    user_id: str  # Author whose posts to list


class ListPostsResponse(BaseModel):
    """List of posts."""

    posts: list[PostDetailsResponse]


class ListNearbyPostsUseCase:
    """Use case for listing posts around a point."""

    def __init__(
        self, assembler: PostAssembler, visibility: VisibilitySettings
    ) -> None:
        self.assembler = assembler
        self.visibility = visibility

    async def execute(self, request: ListNearbyPostsRequest) -> ListPostsResponse:
        """Execute nearby listing.

        Raises:
            ValueError: If the coordinates are out of range or malformed
        """
        radius = request.radius
        if radius is None:
            radius = Decimal(str(self.visibility.nearby_default_radius))

        details = await self.assembler.nearby_posts(
            Latitude(request.latitude),
            Longitude(request.longitude),
            radius,
            _viewer(request.viewer_id),
        )
        return ListPostsResponse(
            posts=[PostDetailsResponse.from_details(d) for d in details]
        )


class ListRecentPostsUseCase:
    """Use case for listing the newest posts."""

    def __init__(
        self, assembler: PostAssembler, visibility: VisibilitySettings
    ) -> None:
        self.assembler = assembler
        self.visibility = visibility

    async def execute(self, request: ListRecentPostsRequest) -> ListPostsResponse:
        """Execute recent listing.

        The limit defaults to `recent_default_limit` and is capped at
        `recent_max_limit`.
        """
        limit = request.limit or self.visibility.recent_default_limit
        limit = min(limit, self.visibility.recent_max_limit)

        details = await self.assembler.recent_posts(limit, _viewer(request.viewer_id))
        return ListPostsResponse(
            posts=[PostDetailsResponse.from_details(d) for d in details]
        )


class ListUserPostsUseCase:
    """Use case for listing every post of one user (ungated)."""

    def __init__(self, assembler: PostAssembler) -> None:
        self.assembler = assembler

    async def execute(self, request: ListUserPostsRequest) -> ListPostsResponse:
        """Execute per-user listing."""
        details = await self.assembler.user_posts(UserId(UUID(request.user_id)))
        return ListPostsResponse(
            posts=[PostDetailsResponse.from_details(d) for d in details]
        )
