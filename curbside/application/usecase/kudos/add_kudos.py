"""Add kudos use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from curbside.domain.service import KudosService
from curbside.domain.value import PostId, UserId


class AddKudosRequest(BaseModel):
    """Add kudos request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class AddKudosResponse(BaseModel):
    """Add kudos response."""

    id: str
    post_id: str
    user_id: str
    created_at: datetime


class AddKudosUseCase:
    """Use case for giving kudos to a post."""

    def __init__(self, kudos_service: KudosService) -> None:
        """Initialize add kudos use case.

        Args:
            kudos_service: Kudos domain service
        """
        self.kudos_service = kudos_service

    async def execute(self, request: AddKudosRequest) -> AddKudosResponse:
        """Execute add kudos flow.

        Raises:
            NotFoundError: If the post doesn't exist
            DuplicateKudosError: If the user already gave kudos to the post
        """
        kudos = await self.kudos_service.add_kudos(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )

        return AddKudosResponse(
            id=str(kudos.id),
            post_id=str(kudos.post_id),
            user_id=str(kudos.user_id),
            created_at=kudos.created_at,
        )
