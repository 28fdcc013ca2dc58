"""Login use case."""

from pydantic import BaseModel

from curbside.domain.error import InvalidCredentialsError
from curbside.domain.service import JWTService, ParticipationGate, UserService
from curbside.domain.value import Username

from .views import CurrentUserResponse


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: CurrentUserResponse


class LoginUseCase:
    """Use case for password login."""

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        gate: ParticipationGate,
    ) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.gate = gate

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the username/password pair doesn't match
        """
        try:
            username = Username(request.username)
        except ValueError:
            # Malformed usernames can't belong to anyone
            raise InvalidCredentialsError()

        user = await self.user_service.authenticate(username, request.password)
        token = self.jwt_service.create_token(str(user.id), user.username.root)

        return LoginResponse(
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
