"""PostgreSQL implementation of Kudos repository."""

from typing import Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from curbside.domain.model import Kudos
from curbside.domain.repository import KudosRepository
from curbside.domain.value import PostId, UserId
from curbside.persistence.mappers import kudos_to_dict
from curbside.persistence.tables import kudos_table


class PostgresKudosRepository(KudosRepository):
    """PostgreSQL implementation of KudosRepository.

    Uniqueness of (post_id, user_id) is enforced by the uq_kudos_post_user
    constraint, so concurrent adds for the same pair insert exactly one row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, kudos: Kudos) -> bool:
        """Insert a kudos row unless one already exists for the pair."""
        stmt = (
            insert(kudos_table)
            .values(**kudos_to_dict(kudos))
            .on_conflict_do_nothing(constraint="uq_kudos_post_user")
            .returning(kudos_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None
        await self.session.flush()
        return inserted

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's kudos on a post."""
        stmt = delete(kudos_table).where(
            and_(
                kudos_table.c.post_id == post_id,
                kudos_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user gave kudos to a post."""
        stmt = select(kudos_table.c.id).where(
            and_(
                kudos_table.c.post_id == post_id,
                kudos_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    async def count_by_post(self, post_id: PostId) -> int:
        """Count kudos rows for a post."""
        stmt = (
            select(func.count())
            .select_from(kudos_table)
            .where(kudos_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_post_ids_with_kudos_from(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Find which of the given posts a user gave kudos to (batch query)."""
        if not post_ids:
            return set()

        stmt = select(kudos_table.c.post_id).where(
            and_(
                kudos_table.c.user_id == user_id,
                kudos_table.c.post_id.in_(list(post_ids)),
            )
        )
        result = await self.session.execute(stmt)
        return {PostId(row.post_id) for row in result.fetchall()}
