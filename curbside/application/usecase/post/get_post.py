"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from curbside.domain.error import AccessDeniedError, NotFoundError
from curbside.domain.service import ParticipationGate, PostAssembler, PostService
from curbside.domain.value import PostId, UserId

from .views import PostDetailsResponse


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetPostUseCase:
    """Use case for retrieving a single post, subject to the participation gate."""

    def __init__(
        self,
        post_service: PostService,
        gate: ParticipationGate,
        assembler: PostAssembler,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            gate: Participation gate
            assembler: Post aggregate assembler
        """
        self.post_service = post_service
        self.gate = gate
        self.assembler = assembler

    async def execute(self, request: GetPostRequest) -> PostDetailsResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post (or its author) doesn't exist
            AccessDeniedError: If the gate hides the post from the viewer
        """
        post_id = PostId(UUID(request.post_id))
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        if not await self.gate.visible_now(post, viewer_id):
            raise AccessDeniedError(request.post_id)

        details = await self.assembler.assemble(post_id, viewer_id)
        if details is None:
            raise NotFoundError("Post", request.post_id)

        return PostDetailsResponse.from_details(details)
