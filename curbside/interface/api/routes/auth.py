"""Authentication routes: register, login, logout, current user."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from curbside.application.usecase.auth import (
    CurrentUserResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from curbside.config import AuthSettings
from curbside.domain.error import DomainError, NotFoundError
from curbside.interface.api.common import AUTH_COOKIE, bad_request, http_error
from curbside.util.jwt import JWTError

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=DishkaRoute)


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


def _set_auth_cookie(response: Response, token: str, settings: AuthSettings) -> None:
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
        max_age=settings.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post(
    "/register",
    response_model=CurrentUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> CurrentUserResponse:
    """Create an account and start a session.

    Returns:
        The new user's profile; the session token is set as the auth cookie
    """
    try:
        result = await register_use_case.execute(request)
    except DomainError as e:
        raise http_error(e)
    except ValueError as e:
        raise bad_request(e)

    _set_auth_cookie(response, result.token, auth_settings)
    return result.user


@router.post("/login", response_model=CurrentUserResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> CurrentUserResponse:
    """Log in with username and password.

    Raises:
        HTTPException: 401 if the credentials don't match
    """
    try:
        result = await login_use_case.execute(request)
    except DomainError as e:
        raise http_error(e)

    _set_auth_cookie(response, result.token, auth_settings)
    return result.user


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    """Clear the auth cookie."""
    response.delete_cookie(key=AUTH_COOKIE, path="/")
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CurrentUserResponse:
    """Get the authenticated user's profile.

    Raises:
        HTTPException: 401 if not authenticated or the token is invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except (JWTError, NotFoundError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
