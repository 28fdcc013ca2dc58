"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from curbside.domain.service import JWTService, ParticipationGate, UserService
from curbside.domain.value import UserId

from .views import CurrentUserResponse


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        gate: ParticipationGate,
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            gate: Participation gate
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.gate = gate

    async def execute(self, request: GetCurrentUserRequest) -> CurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the user named by the token
        3. Evaluate immediate-viewing qualification as of now

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the user no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))

        return CurrentUserResponse(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email,
            kudos=user.kudos,
            last_posted_at=user.last_posted_at,
            can_view_immediately=self.gate.viewer_qualifies(user),
            created_at=user.created_at,
        )
