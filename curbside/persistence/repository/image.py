"""PostgreSQL implementation of Image repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from curbside.domain.model import Image
from curbside.domain.repository import ImageRepository
from curbside.domain.value import PostId
from curbside.persistence.mappers import image_to_dict, row_to_image
from curbside.persistence.tables import images_table


class PostgresImageRepository(ImageRepository):
    """PostgreSQL implementation of ImageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_post(self, post_id: PostId) -> List[Image]:
        """Find all images of a post, oldest first."""
        stmt = (
            select(images_table)
            .where(images_table.c.post_id == post_id)
            .order_by(images_table.c.created_at, images_table.c.seq)
        )
        result = await self.session.execute(stmt)
        return [row_to_image(row._asdict()) for row in result.fetchall()]

    async def save(self, image: Image) -> Image:
        """Insert an image reference."""
        stmt = insert(images_table).values(**image_to_dict(image))
        await self.session.execute(stmt)
        await self.session.flush()
        return image
