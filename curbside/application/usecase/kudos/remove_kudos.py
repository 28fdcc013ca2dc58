"""Remove kudos use case."""

from uuid import UUID

from pydantic import BaseModel

from curbside.domain.service import KudosService
from curbside.domain.value import PostId, UserId


class RemoveKudosRequest(BaseModel):
    """Remove kudos request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveKudosResponse(BaseModel):
    """Remove kudos response."""

    message: str
    removed: bool


class RemoveKudosUseCase:
    """Use case for withdrawing kudos. Removing kudos that isn't there is a no-op."""

    def __init__(self, kudos_service: KudosService) -> None:
        """Initialize remove kudos use case.

        Args:
            kudos_service: Kudos domain service
        """
        self.kudos_service = kudos_service

    async def execute(self, request: RemoveKudosRequest) -> RemoveKudosResponse:
        """Execute remove kudos flow."""
        removed = await self.kudos_service.remove_kudos(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )
        return RemoveKudosResponse(message="Kudos removed", removed=removed)
