"""PostgreSQL implementation of Item repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from curbside.domain.model import Item
from curbside.domain.repository import ItemRepository
from curbside.domain.value import ItemId, ItemStatus, PostId
from curbside.persistence.mappers import item_to_dict, row_to_item
from curbside.persistence.tables import items_table


class PostgresItemRepository(ItemRepository):
    """PostgreSQL implementation of ItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find an item by ID."""
        stmt = select(items_table).where(items_table.c.id == item_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_item(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Item]:
        """Find all items of a post in insertion order."""
        stmt = (
            select(items_table)
            .where(items_table.c.post_id == post_id)
            .order_by(items_table.c.seq)
        )
        result = await self.session.execute(stmt)
        return [row_to_item(row._asdict()) for row in result.fetchall()]

    async def save(self, item: Item) -> Item:
        """Save an item (create or update)."""
        item_dict = item_to_dict(item)
        existing = await self.find_by_id(item.id)
        if existing:
            stmt = (
                update(items_table)
                .where(items_table.c.id == item.id)
                .values(**item_dict)
            )
        else:
            stmt = insert(items_table).values(**item_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return item

    async def update_status(
        self, item_id: ItemId, status: ItemStatus
    ) -> Optional[Item]:
        """Set an item's status."""
        stmt = (
            update(items_table)
            .where(items_table.c.id == item_id)
            .values(status=status.value)
            .returning(items_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_item(row._asdict()) if row else None
