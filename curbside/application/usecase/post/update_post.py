"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from curbside.domain.error import NotFoundError
from curbside.domain.service import PostAssembler, PostService
from curbside.domain.value import ItemId, ItemStatus, PostId, PostStatus, UserId

from .views import PostDetailsResponse


class ItemStatusUpdate(BaseModel):
    """New status for one item of the post."""

    id: str  # Item UUID string
    status: ItemStatus


class UpdatePostRequest(BaseModel):
    """Update post request.

    Every field is optional; only the ones provided are applied.
    """

    post_id: str
    user_id: str  # User ID from authenticated user
    status: PostStatus | None = None
    items: list[ItemStatusUpdate] = Field(default_factory=list)
    new_image_urls: list[str] = Field(default_factory=list)


class UpdatePostUseCase:
    """Use case for updating a post (owner only)."""

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            assembler: Post aggregate assembler
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: UpdatePostRequest) -> PostDetailsResponse:
        """Execute post update flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the post's author
            ValidationError: If an item doesn't belong to the post
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        await self.post_service.update_post(
            post_id=post_id,
            user_id=user_id,
            status=request.status,
            item_statuses=[
                (ItemId(UUID(item.id)), item.status) for item in request.items
            ],
            new_image_urls=request.new_image_urls,
        )

        details = await self.assembler.assemble(post_id, user_id)
        if details is None:
            raise NotFoundError("Post", request.post_id)
        return PostDetailsResponse.from_details(details)
