"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

from curbside.domain.model.user import User
from curbside.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: User IDs to look up

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user together with their posts, comments and kudos.

        Args:
            user_id: The user ID to delete
        """
        pass

    @abstractmethod
    async def touch_last_posted(self, user_id: UserId, at: datetime) -> None:
        """Record that the user authored a post at the given time.

        Args:
            user_id: The user's unique identifier
            at: Time of posting
        """
        pass

    @abstractmethod
    async def increment_kudos(self, user_id: UserId) -> None:
        """Atomically increment user's kudos total by 1.

        Args:
            user_id: The user's unique identifier
        """
        pass

    @abstractmethod
    async def decrement_kudos(self, user_id: UserId) -> None:
        """Atomically decrement user's kudos total by 1 (minimum 0).

        Args:
            user_id: The user's unique identifier
        """
        pass
