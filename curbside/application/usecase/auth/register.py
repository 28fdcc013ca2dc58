"""Register use case."""

from pydantic import BaseModel, Field

from curbside.domain.service import JWTService, ParticipationGate, UserService
from curbside.domain.value import Username

from .views import CurrentUserResponse


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=6, max_length=255)


class RegisterResponse(BaseModel):
    """Register response: the new user and their session token."""

    token: str
    user: CurrentUserResponse


class RegisterUseCase:
    """Use case for creating an account and logging it in."""

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        gate: ParticipationGate,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
            gate: Participation gate, for the profile's viewing flag
        """
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.gate = gate

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Raises:
            ValueError: If the username is malformed
            UserAlreadyExistsError: If the username or email is taken
        """
        user = await self.user_service.register(
            Username(request.username), request.email, request.password
        )
        token = self.jwt_service.create_token(str(user.id), user.username.root)

        return RegisterResponse(
            token=token,
            user=CurrentUserResponse(
                user_id=str(user.id),
                username=user.username.root,
                email=user.email,
                kudos=user.kudos,
                last_posted_at=user.last_posted_at,
                can_view_immediately=self.gate.viewer_qualifies(user),
                created_at=user.created_at,
            ),
        )
