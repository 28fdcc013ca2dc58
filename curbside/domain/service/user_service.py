"""User domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from curbside.domain.error import (
    InvalidCredentialsError,
    NotFoundError,
    UserAlreadyExistsError,
)
from curbside.domain.model import User
from curbside.domain.repository import UserRepository
from curbside.domain.value import UserId, Username
from curbside.util.clock import Clock
from curbside.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository, clock: Clock) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            clock: Source of the current time
        """
        self.user_repository = user_repository
        self.clock = clock

    async def register(self, username: Username, email: str, password: str) -> User:
        """Create a new user account.

        Args:
            username: Desired username
            email: Email address
            password: Plaintext password, stored hashed

        Returns:
            The created user

        Raises:
            UserAlreadyExistsError: If the username or email is taken
        """
        with logfire.span("user_service.register", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username.root)
                raise UserAlreadyExistsError("username")
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", username=username.root)
                raise UserAlreadyExistsError("email")

            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=hash_password(password),
                created_at=self.clock.now(),
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race against a concurrent registration
                logfire.warn("Duplicate user on insert", username=username.root)
                raise UserAlreadyExistsError("username or email")

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, username: Username, password: str) -> User:
        """Check a username/password pair.

        Raises:
            InvalidCredentialsError: If the user doesn't exist or the password is wrong
        """
        with logfire.span("user_service.authenticate", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if not user or not verify_password(user.password_hash, password):
                logfire.warn("Failed login attempt", username=username.root)
                raise InvalidCredentialsError()
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if they don't exist."""
        return await self.user_repository.find_by_id(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Look up several users at once, keyed by ID."""
        users = await self.user_repository.find_by_ids(user_ids)
        return {user.id: user for user in users}

    async def touch_last_posted(self, user_id: UserId, at: datetime) -> None:
        """Record that the user authored a post at `at`."""
        await self.user_repository.touch_last_posted(user_id, at)

    async def increment_kudos(self, user_id: UserId) -> None:
        """Atomically increment user's kudos total by 1.

        Args:
            user_id: User ID
        """
        with logfire.span("user_service.increment_kudos", user_id=str(user_id)):
            await self.user_repository.increment_kudos(user_id)

    async def decrement_kudos(self, user_id: UserId) -> None:
        """Atomically decrement user's kudos total by 1 (minimum 0).

        Args:
            user_id: User ID
        """
        with logfire.span("user_service.decrement_kudos", user_id=str(user_id)):
            await self.user_repository.decrement_kudos(user_id)
