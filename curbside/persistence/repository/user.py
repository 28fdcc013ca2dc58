"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import case, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from curbside.domain.model import User
from curbside.domain.repository import UserRepository
from curbside.domain.value import UserId, Username
from curbside.persistence.mappers import row_to_user, user_to_dict
from curbside.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query)."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(list(set(user_ids))))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user; posts, comments and kudos go with it via ON DELETE CASCADE."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def touch_last_posted(self, user_id: UserId, at: datetime) -> None:
        """Record the time of the user's latest post.

        Args:
            user_id: User ID to update
            at: Time of posting
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(last_posted_at=at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_kudos(self, user_id: UserId) -> None:
        """Atomically increment user's kudos total by 1.

        Args:
            user_id: User ID to update
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(kudos=users_table.c.kudos + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_kudos(self, user_id: UserId) -> None:
        """Atomically decrement user's kudos total by 1 (minimum 0).

        Args:
            user_id: User ID to update
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                kudos=case((users_table.c.kudos > 0, users_table.c.kudos - 1), else_=0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
