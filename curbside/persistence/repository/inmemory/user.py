"""In-memory user repository."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from curbside.domain.model.user import User
from curbside.domain.repository.user import UserRepository
from curbside.domain.value import UserId, Username
from curbside.persistence.repository.inmemory.store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict[UserId, User]:
        return self._store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user already has the username or email
        """
        for other in self._users.values():
            if other.id != user.id and (
                other.username == user.username or other.email == user.email
            ):
                raise IntegrityError("Duplicate user", None, Exception())

        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user and everything that references them."""
        self._store.delete_user(user_id)

    async def touch_last_posted(self, user_id: UserId, at: datetime) -> None:
        """Record the time of the user's latest post."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(update={"last_posted_at": at})

    async def increment_kudos(self, user_id: UserId) -> None:
        """Increment user's kudos total by 1."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(update={"kudos": user.kudos + 1})

    async def decrement_kudos(self, user_id: UserId) -> None:
        """Decrement user's kudos total by 1 (minimum 0)."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"kudos": max(0, user.kudos - 1)}
            )
