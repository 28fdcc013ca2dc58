"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from curbside.domain.model import Post
from curbside.domain.repository import PostRepository
from curbside.domain.value import PostId, PostStatus, UserId
from curbside.persistence.mappers import post_to_dict, row_to_post
from curbside.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.debug("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def find_all(self) -> List[Post]:
        """Find every post, oldest first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(
                posts_table.c.created_at.asc(), posts_table.c.id
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_recent(self, limit: int) -> List[Post]:
        """Find the newest posts, newest first."""
        with logfire.span("post_repository.find_recent", limit=limit):
            stmt = (
                select(posts_table)
                .order_by(posts_table.c.created_at.desc(), posts_table.c.id)
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_user(self, user_id: UserId) -> List[Post]:
        """Find all posts by an author, newest first."""
        with logfire.span("post_repository.find_by_user", user_id=str(user_id)):
            stmt = (
                select(posts_table)
                .where(posts_table.c.user_id == user_id)
                .order_by(posts_table.c.created_at.desc(), posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)

            existing = await self.session.execute(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )
            if existing.fetchone():
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                stmt = insert(posts_table).values(**post_dict)
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def update_status(
        self, post_id: PostId, status: PostStatus, at: datetime
    ) -> Optional[Post]:
        """Set post status and bump updated_at."""
        with logfire.span(
            "post_repository.update_status", post_id=str(post_id), status=status.value
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(status=status.value, updated_at=at)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_post(row._asdict()) if row else None

    async def delete(self, post_id: PostId) -> None:
        """Delete a post; children go with it via ON DELETE CASCADE."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = delete(posts_table).where(posts_table.c.id == post_id)
            await self.session.execute(stmt)
            await self.session.flush()
