"""Create post use case."""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field

from curbside.domain.error import NotFoundError
from curbside.domain.service import PostAssembler, PostService
from curbside.domain.value import Latitude, Longitude, UserId

from .views import PostDetailsResponse

ItemName = Annotated[str, Field(min_length=1, max_length=255)]


class CreatePostRequest(BaseModel):
    """Create post request."""

    user_id: str  # User ID from authenticated user
    location: str = Field(min_length=1, max_length=255)
    latitude: str
    longitude: str
    description: str | None = Field(default=None, max_length=5000)
    items: list[ItemName] = Field(default_factory=list)
    image_urls: list[str] = Field(default_factory=list)


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            assembler: Post aggregate assembler
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: CreatePostRequest) -> PostDetailsResponse:
        """Execute post creation flow.

        Steps:
        1. Validate coordinates
        2. Write the post, its items and images, and bump the author's last_posted_at
        3. Assemble the created post with the author as viewer

        Raises:
            ValueError: If coordinates or item/image values are invalid
        """
        user_id = UserId(UUID(request.user_id))

        post = await self.post_service.create_post(
            user_id=user_id,
            location=request.location,
            latitude=Latitude(request.latitude),
            longitude=Longitude(request.longitude),
            description=request.description,
            item_names=request.items,
            image_urls=request.image_urls,
        )

        details = await self.assembler.assemble(post.id, user_id)
        if details is None:
            # Author vanished mid-request
            raise NotFoundError("User", str(user_id))
        return PostDetailsResponse.from_details(details)
