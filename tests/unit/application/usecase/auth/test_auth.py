"""Unit tests for the register, login and current-user use cases."""

import pytest

from curbside.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from curbside.application.usecase.post import CreatePostRequest, CreatePostUseCase
from curbside.domain.error import InvalidCredentialsError, UserAlreadyExistsError
from curbside.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ALICE = RegisterRequest(
    username="alice", email="alice@example.com", password="hunter22"
)


class TestRegister:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_issues_token_for_new_user(self, unit_env):
        """Registering returns a token that identifies the new user."""
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)

        result = await use_case.execute(ALICE)

        assert result.user.username == "alice"
        assert result.user.kudos == 0
        assert result.user.can_view_immediately is False
        assert jwt_service.get_user_id_from_token(result.token) == result.user.user_id

    @pytest.mark.asyncio
    async def test_register_twice_is_rejected(self, unit_env):
        """The same username can't register twice."""
        use_case = await unit_env.get(RegisterUseCase)
        await use_case.execute(ALICE)

        with pytest.raises(UserAlreadyExistsError):
            await use_case.execute(ALICE)

    @pytest.mark.asyncio
    async def test_malformed_username_raises_value_error(self, unit_env):
        """Usernames are validated."""
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                RegisterRequest(
                    username="a b", email="ab@example.com", password="hunter22"
                )
            )


class TestLogin:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_with_correct_password(self, unit_env):
        """Correct credentials yield a token and profile."""
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        registered = await register.execute(ALICE)

        result = await login.execute(
            LoginRequest(username="alice", password="hunter22")
        )

        assert result.user.user_id == registered.user.user_id
        assert result.token

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, unit_env):
        """Wrong credentials raise InvalidCredentialsError."""
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(ALICE)

        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(username="alice", password="nope-nope"))

    @pytest.mark.asyncio
    async def test_login_with_malformed_username(self, unit_env):
        """A username that could never exist is just bad credentials."""
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(username="?", password="hunter22"))


class TestGetCurrentUser:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_posting_makes_user_qualify(self, unit_env):
        """can_view_immediately flips once the user posts."""
        register = await unit_env.get(RegisterUseCase)
        current = await unit_env.get(GetCurrentUserUseCase)
        create_post = await unit_env.get(CreatePostUseCase)
        registered = await register.execute(ALICE)

        before = await current.execute(GetCurrentUserRequest(token=registered.token))
        await create_post.execute(
            CreatePostRequest(
                user_id=registered.user.user_id,
                location="Outside the library",
                latitude="40.7128",
                longitude="-74.0060",
            )
        )
        after = await current.execute(GetCurrentUserRequest(token=registered.token))

        assert before.can_view_immediately is False
        assert after.can_view_immediately is True
        assert after.last_posted_at is not None
