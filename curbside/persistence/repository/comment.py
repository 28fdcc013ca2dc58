"""PostgreSQL implementation of Comment repository."""

from typing import List

import logfire
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from curbside.domain.model import Comment
from curbside.domain.repository import CommentRepository
from curbside.domain.value import PostId
from curbside.persistence.mappers import comment_to_dict, row_to_comment
from curbside.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        with logfire.span("comment_repository.find_by_post", post_id=str(post_id)):
            stmt = (
                select(comments_table)
                .where(comments_table.c.post_id == post_id)
                .order_by(comments_table.c.created_at.asc(), comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            stmt = insert(comments_table).values(**comment_to_dict(comment))
            await self.session.execute(stmt)
            await self.session.flush()
            return comment
